"""Sitemap Registry Routes — manage dynamic pages, inspect validation and stats.

Invariants:
    - POST is an upsert keyed by url (201 either way)
    - DELETE of an unknown or static url → 404 envelope
    - Validation and stats endpoints are read-only

Design Decisions:
    - Sync handlers: registry calls are short and lock-guarded, so FastAPI runs
      them in its worker pool
    - Err values raised as their SeoSyncError: the global handler owns the envelope
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from seosync.api.dependencies import get_sitemap_registry
from seosync.core.sitemap import SitemapRegistry, compute_sitemap_stats, validate_sitemap
from seosync.schemas.sitemap import (
    SitemapPageCreate, SitemapPageResponse, SitemapPagesResponse,
    SitemapStatsResponse, SitemapValidationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sitemap", tags=["sitemap"])


def _unwrap(result):
    if not result.is_ok:
        raise result.error
    return result.value


@router.get("/pages", response_model=SitemapPagesResponse)
def list_pages(registry: SitemapRegistry = Depends(get_sitemap_registry)):
    return SitemapPagesResponse(
        static=[SitemapPageResponse(**e.to_dict()) for e in registry.static_entries],
        dynamic=[SitemapPageResponse(**e.to_dict()) for e in registry.dynamic_entries],
    )


@router.post(
    "/pages", response_model=SitemapPageResponse,
    status_code=status.HTTP_201_CREATED,
)
def upsert_page(
    body: SitemapPageCreate,
    registry: SitemapRegistry = Depends(get_sitemap_registry),
):
    entry = _unwrap(registry.add_page(
        body.url,
        priority=body.priority,
        changefreq=body.changefreq.value if body.changefreq else None,
        lastmod=body.lastmod,
    ))
    return SitemapPageResponse(**entry.to_dict())


@router.delete("/pages", response_model=SitemapPageResponse)
def remove_page(
    url: str = Query(..., min_length=1),
    registry: SitemapRegistry = Depends(get_sitemap_registry),
):
    entry = _unwrap(registry.remove_page(url))
    return SitemapPageResponse(**entry.to_dict())


@router.get("/validation", response_model=SitemapValidationResponse)
def sitemap_validation(registry: SitemapRegistry = Depends(get_sitemap_registry)):
    report = _unwrap(validate_sitemap(registry))
    return SitemapValidationResponse(
        is_valid=report.is_valid,
        errors=report.errors,
        warnings=report.warnings,
        total_pages=report.total_pages,
    )


@router.get("/stats", response_model=SitemapStatsResponse)
def sitemap_stats(registry: SitemapRegistry = Depends(get_sitemap_registry)):
    return SitemapStatsResponse(**_unwrap(compute_sitemap_stats(registry)))
