"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the sitemap fails validation (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from seosync.api.dependencies import get_sitemap_registry
from seosync.core.sitemap import SitemapRegistry, validate_sitemap

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "seosync-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(registry: SitemapRegistry = Depends(get_sitemap_registry)):
    """Readiness probe — the served sitemap must validate."""
    result = validate_sitemap(registry)
    if not result.is_ok or not result.value.is_valid:
        errors = result.value.errors if result.is_ok else [result.error.message]
        logger.warning(f"Readiness failed: {errors}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "sitemap_invalid",
                "errors": errors,
            },
        )
    return {
        "status": "ready",
        "checks": {"sitemap": "valid", "pages": result.value.total_pages},
    }
