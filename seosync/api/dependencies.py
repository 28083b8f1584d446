"""API Dependencies — process-wide registry and site config for route injection.

Invariants:
    - init_sitemap_registry() runs once in the lifespan; before that,
      get_sitemap_registry() raises ResourceNotFoundError
    - get_site_config() is derived from cached settings, never mutated

Design Decisions:
    - Module-level registry mirrors the single-process host: one uvicorn worker,
      dynamic pages lost on restart (persistence is out of scope)
    - Routes depend on these functions so tests swap them via dependency_overrides
"""

import logging
from functools import lru_cache

from seosync.config import build_site_config, get_settings
from seosync.core.errors import ResourceNotFoundError
from seosync.core.site_config import SiteConfig
from seosync.core.sitemap import SitemapRegistry
from seosync.infrastructure.analytics import build_notifier

logger = logging.getLogger(__name__)

_registry: SitemapRegistry | None = None


def init_sitemap_registry() -> SitemapRegistry:
    global _registry
    _registry = SitemapRegistry.create()
    logger.info(f"Sitemap registry created with {len(_registry.static_entries)} static pages")
    return _registry


def get_sitemap_registry() -> SitemapRegistry:
    if _registry is None:
        raise ResourceNotFoundError("Sitemap registry", "default")
    return _registry


@lru_cache
def get_site_config() -> SiteConfig:
    return build_site_config(get_settings())


@lru_cache
def get_notifier():
    return build_notifier(get_settings())
