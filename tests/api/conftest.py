"""API test fixtures — FastAPI test client with a fresh registry per test.

Invariants:
    - Every test gets its own SitemapRegistry (dynamic pages never leak)
    - get_sitemap_registry / get_site_config overridden via dependency_overrides

Design Decisions:
    - ASGITransport does not run the lifespan: the overrides stand in for
      what startup would have created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from seosync.api.dependencies import get_notifier, get_site_config, get_sitemap_registry
from seosync.infrastructure.analytics import NoopNotifier
from seosync.main import app


@pytest.fixture
async def client(registry, site):
    """FastAPI test client with registry and site config overridden."""
    app.dependency_overrides[get_sitemap_registry] = lambda: registry
    app.dependency_overrides[get_site_config] = lambda: site
    app.dependency_overrides[get_notifier] = NoopNotifier

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
