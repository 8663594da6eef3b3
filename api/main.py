"""
FastAPI main application for the library Books & Users API.
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.books.controller import router as books_router
from api.config import config
from api.database import MongoDBManager
from api.errors import (
    APIError, api_error_handler,
    general_exception_handler, request_validation_error_handler
)
from api.models import HealthResponse
from api.users.controller import router as users_router
from utilities.logger import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file,
        debug=config.debug
    )
    logger.info("Starting Books & Users API")

    mongo = MongoDBManager(
        connection_url=config.mongodb_url,
        database_name=config.mongodb_database,
        users_collection=config.users_collection,
        books_collection=config.books_collection,
        timeout_ms=config.mongodb_timeout_ms
    )
    try:
        await mongo.connect()
    except Exception as e:
        logger.error("Failed to connect to database", error=str(e))
        raise

    app.state.mongo = mongo

    yield

    logger.info("Shutting down Books & Users API")
    await mongo.disconnect()
    app.state.mongo = None


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=config.api_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2)
    )
    return response


# Exception handlers
app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(books_router)
app.include_router(users_router)


# Health check endpoint
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint."""
    mongo = getattr(request.app.state, "mongo", None)
    db_status = "unhealthy"
    if mongo:
        health_info = await mongo.health_check()
        db_status = health_info.get("status", "unknown")

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=config.api_version,
        database_status=db_status
    )
