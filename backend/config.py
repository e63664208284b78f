# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    DATABASE_URL: str = "sqlite:///./pos.db"

    # CORS
    FRONTEND_URL: Optional[str] = None
    CORS_ORIGINS: List[str] = ["*"]

    # Business rules
    LOW_STOCK_THRESHOLD: int = 5
    CURRENCY_LABEL: str = "Rs."

    # Seeded on startup when missing
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "1234"

    # Receipt fonts (optional, falls back to Helvetica)
    FONT_DIR: str = "assets/fonts"

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        # SQLAlchemy requires the postgresql:// scheme
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

settings = Settings()
