"""SEO Requests — answers requests for the generated text artifacts.

Invariants:
    - Only /sitemap.xml and /robots.txt are served; anything else is an
      "Unknown SEO resource" envelope, never an exception
    - Artifacts are regenerated per request from the registry as it is now
"""

import logging
from dataclasses import dataclass
from typing import Callable

from seosync.core.result import Result
from seosync.core.site_config import SiteConfig
from seosync.core.sitemap import SitemapRegistry, generate_robots_txt, generate_sitemap_xml

logger = logging.getLogger(__name__)

XML_MIME = "application/xml"
TEXT_MIME = "text/plain"
UNKNOWN_RESOURCE = "Unknown SEO resource"


@dataclass(frozen=True)
class SeoArtifact:
    filename: str
    content: str
    mime_type: str


def serve_sitemap(registry: SitemapRegistry, site: SiteConfig) -> Result:
    return generate_sitemap_xml(registry, site).map(
        lambda xml: SeoArtifact("sitemap.xml", xml, XML_MIME)
    )


def serve_robots_txt(registry: SitemapRegistry, site: SiteConfig) -> Result:
    return generate_robots_txt(site).map(
        lambda text: SeoArtifact("robots.txt", text, TEXT_MIME)
    )


_ARTIFACTS: dict[str, Callable[[SitemapRegistry, SiteConfig], Result]] = {
    "sitemap.xml": serve_sitemap,
    "robots.txt": serve_robots_txt,
}
# exact spellings only: "sitemap.xml" or "//sitemap.xml" are unknown
_REQUEST_PATHS = {f"/{name}": serve for name, serve in _ARTIFACTS.items()}
_DOWNLOAD_FRAGMENTS = {f"#{name}": serve for name, serve in _ARTIFACTS.items()}


def handle_seo_request(path: str, registry: SitemapRegistry, site: SiteConfig) -> dict:
    """Envelope for a requested path: success + content + mime_type, or error."""
    serve = _REQUEST_PATHS.get(path)
    if serve is None:
        return {"success": False, "error": UNKNOWN_RESOURCE}
    return serve(registry, site).fold(
        lambda error: {"success": False, "error": error.message},
        lambda artifact: {
            "success": True,
            "content": artifact.content,
            "mime_type": artifact.mime_type,
        },
    )


def resolve_hash_download(
    fragment: str, registry: SitemapRegistry, site: SiteConfig,
) -> SeoArtifact | None:
    """#sitemap.xml / #robots.txt → downloadable artifact; other fragments → None."""
    serve = _DOWNLOAD_FRAGMENTS.get(fragment)
    if serve is None:
        return None
    result = serve(registry, site)
    if not result.is_ok:
        logger.warning(f"Artifact download failed: {result.error.message}")
        return None
    return result.value
