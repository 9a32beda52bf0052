"""AudioDrop upload service entry point"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from audiodrop.config import settings
from audiodrop.api import api_router
from audiodrop.api.schemas import HealthResponse, MetricsResponse
from audiodrop.utils.service_metrics import metrics

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    logger.info(f"Starting {settings.app_name} v{settings.version}")

    storage_dir = settings.storage_dir
    if settings.storage_create_dir:
        storage_dir.mkdir(parents=True, exist_ok=True)
    elif not storage_dir.is_dir():
        logger.warning(f"Storage directory {storage_dir.resolve()} does not exist; uploads will fail")

    logger.info(f"Storing uploads in {storage_dir.resolve()}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Receives raw PCM audio and stores it as WAV files",
    lifespan=lifespan,
)

app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as a short plain-text message"""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.get("/health", response_model=HealthResponse, tags=["system"])
async def health_check():
    """Health check"""
    return HealthResponse(status="healthy", version=settings.version)


@app.get("/metrics", tags=["system"])
async def get_metrics():
    """Service metrics (JSON)"""
    return MetricsResponse(**metrics.get_stats())


@app.get("/metrics/prometheus", tags=["system"], response_class=PlainTextResponse)
async def get_metrics_prometheus():
    """Service metrics (Prometheus)"""
    return metrics.to_prometheus()


if __name__ == "__main__":
    import argparse

    import uvicorn

    parser = argparse.ArgumentParser(description="Run the AudioDrop upload service (FastAPI)")
    parser.add_argument("--host", default=settings.host, help="Bind host (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port (default: PORT or 8080)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (dev only)")
    args = parser.parse_args()

    uvicorn.run(
        "audiodrop.main:app",
        host=str(args.host),
        port=int(args.port),
        reload=bool(args.reload),
    )
