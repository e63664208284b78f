# backend/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.database_url

# SQLite connections are shared across the request thread pool
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False}
else:
    connect_args = {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create tables if missing and seed the default admin account."""
    # Register models on Base.metadata before create_all
    import models.product  # noqa: F401
    import models.sale  # noqa: F401
    from models.users import User

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin = db.query(User).filter(User.username == settings.DEFAULT_ADMIN_USERNAME).first()
        if not admin:
            db.add(User(username=settings.DEFAULT_ADMIN_USERNAME, password=settings.DEFAULT_ADMIN_PASSWORD))
            db.commit()
            logger.info("Default admin user created (%s)", settings.DEFAULT_ADMIN_USERNAME)
    finally:
        db.close()

def close_db():
    engine.dispose()
