"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.config import get_settings
from users_api.middleware import get_cors_headers, setup_middleware
from users_api.routes import api_router, users_router_no_prefix
from users_api.services.cosmos_db_init import initialize_cosmos_db

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    logger.info("User storage: %s", settings.storage_backend)

    if settings.storage_backend == "cosmos":
        await initialize_cosmos_db(settings)

    yield

    logger.info("%s shutting down", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Users API - CRUD service for user records",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with 400 instead of FastAPI's default 422."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Errors surfacing here bypass the CORS middleware, so headers are added by hand
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn unhandled exceptions into a generic 500 response."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    origin = request.headers.get("origin")
    cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
        headers=cors_headers,
    )


# Include routers
app.include_router(api_router)
app.include_router(users_router_no_prefix)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "users_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
