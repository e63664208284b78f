# backend/main.py
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from database import init_db, close_db

# Import routerów
from routes.auth import router as auth_router
from routes.checkout import router as checkout_router
from routes.products import router as products_router
from routes.sales import router as sales_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Schema and default admin are ready before the first request
    init_db()
    logger.info("Connected to database: %s", settings.database_url)

    yield

    close_db()
    logger.info("Database connections closed")


app = FastAPI(title="POS API", version="1.0.0", lifespan=lifespan)

# CORS Configuration
def build_cors_origins(cors_origins: List[str], frontend_url: Optional[str]) -> List[str]:
    """Configured origins, narrowed to explicit ones once the frontend URL is known."""
    origins = list(cors_origins)
    if frontend_url:
        origins = [o for o in origins if o != "*"]
        origins.append(frontend_url)
    return origins


origins = build_cors_origins(settings.CORS_ORIGINS, settings.FRONTEND_URL)

# Browsers refuse credentials with a wildcard origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error leaves the API as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request: " + "; ".join(problems)},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Rejestracja routerów
app.include_router(auth_router)
app.include_router(products_router)
app.include_router(checkout_router)
app.include_router(sales_router)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "POS API is running"


# Local run
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=5000, reload=True)  # noqa: S104
