"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config.chunking.static import get_active_profile_name, list_profile_names
from app.config.logging import configure_logging, get_logger, log_extra
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and chunking profiles. A broken static.json fails startup."""
    settings = get_settings()
    configure_logging()
    logger.info(
        "Application starting",
        **log_extra({
            "app_name": settings.app_name,
            "environment": settings.environment,
            "chunking_profiles": list_profile_names(),
            "active_profile": get_active_profile_name(),
        }),
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Chunking Service",
    description="Split documents into bounded chunks for embedding and retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up and chunking profiles are loaded."""
    return {"status": "ok", "active_profile": get_active_profile_name()}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: log and return a non-leaking 500."""
    logger.exception("Unhandled error", **log_extra({"error": type(exc).__name__}))
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
