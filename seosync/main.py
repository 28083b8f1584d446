"""SeoSync API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SeoSyncError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Sitemap registry created and the SEO system initialized on startup via
      lifespan (emits seo_initialized through the configured notifier)
    - A notifier owning a connection pool is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seosync.api.dependencies import get_notifier, get_site_config, init_sitemap_registry
from seosync.api.error_handlers import register_error_handlers
from seosync.api.routes import health, seo_artifacts, seo_requests, sitemap_registry
from seosync.config import get_settings
from seosync.infrastructure.observability import setup_logging
from seosync.infrastructure.soup_document import SoupDocument
from seosync.services.page_seo import PageSeoOrchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    registry = init_sitemap_registry()
    notifier = get_notifier()
    orchestrator = PageSeoOrchestrator(
        SoupDocument(), get_site_config(), registry, notifier=notifier,
    )
    result = orchestrator.initialize()
    if not result.is_ok:
        logger.error(
            f"SEO initialization failed: {result.error.message}",
            extra={"error_code": result.error.code},
        )
    logger.info("SeoSync API started")
    yield
    logger.info("SeoSync API shutting down")
    close = getattr(notifier, "close", None)
    if close is not None:
        close()


app = FastAPI(
    title="SeoSync API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(seo_artifacts.router)
app.include_router(sitemap_registry.router)
app.include_router(seo_requests.router)

register_error_handlers(app)
