import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import Settings
from .errors import ConfigError, UpstreamTransportError
from .routes import router
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


async def upstream_transport_error_handler(request: Request, exc: UpstreamTransportError):
    """Shopify could not be reached: answer 500 without leaking the cause"""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": f"Failed to {exc.operation}"})


def create_app(settings: Settings, client: Optional[UpstreamClient] = None) -> FastAPI:
    """Build the dashboard app.

    ``client`` defaults to a fresh UpstreamClient using the configured
    timeout; tests pass a stub. When ``settings.static_dir`` is set the
    bundled dashboard UI is served from it at ``/``.
    """
    upstream_client = client or UpstreamClient(timeout=settings.upstream_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Dashboard ready for {settings.store} (API {settings.api_version})")
        yield
        # In-flight requests are not drained; uvicorn stops accepting first
        logger.info("Dashboard shutting down")

    app = FastAPI(title="Shopify Webhooks Dashboard", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.upstream_client = upstream_client

    app.add_exception_handler(UpstreamTransportError, upstream_transport_error_handler)
    app.include_router(router)

    @app.get("/api/status", tags=["Health"])
    async def status():
        """Status endpoint with more details"""
        return {
            "status": "running",
            "store": settings.store,
            "api_version": settings.api_version,
            "token_configured": bool(settings.access_token),
            "endpoints": {
                "webhooks": "/api/webhooks",
                "webhook": "/api/webhooks/{id}",
                "status": "/api/status",
            },
        }

    if settings.static_dir is not None:
        if not settings.static_dir.is_dir():
            raise ConfigError(f"Dashboard assets not found at {settings.static_dir}")
        app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")

    return app
