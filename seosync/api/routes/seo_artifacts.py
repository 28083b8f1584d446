"""SEO Artifacts — /sitemap.xml and /robots.txt at the site root.

Invariants:
    - Regenerated on every request from the registry as it is now
    - Generator failures surface as GenerationError envelopes (500), never as
      a partial document
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from seosync.api.dependencies import get_site_config, get_sitemap_registry
from seosync.core.site_config import SiteConfig
from seosync.core.sitemap import SitemapRegistry
from seosync.services.seo_requests import serve_robots_txt, serve_sitemap

router = APIRouter(tags=["seo-artifacts"])


def _artifact_response(result) -> Response:
    if not result.is_ok:
        raise result.error
    artifact = result.value
    return Response(content=artifact.content, media_type=artifact.mime_type)


@router.get("/sitemap.xml")
def sitemap_xml(
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
):
    return _artifact_response(serve_sitemap(registry, site))


@router.get("/robots.txt")
def robots_txt(
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
):
    return _artifact_response(serve_robots_txt(registry, site))
