"""SEO Request Routes — artifact envelopes, downloads, page heads, content and sharing.

Invariants:
    - Unknown artifact paths answer success=false with 200, never an error status
    - Unknown download fragments are a 404 RESOURCE_NOT_FOUND envelope
    - Page heads are rendered into a fresh document and session history per
      request: no state survives between calls
    - Back/forward navigation re-syncs the head without pushing history
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from seosync.api.dependencies import get_notifier, get_site_config, get_sitemap_registry
from seosync.core.content_analysis import (
    extract_keywords, generate_meta_description, validate_content,
)
from seosync.core.domain_types import resolve_page_id
from seosync.core.errors import ResourceNotFoundError
from seosync.core.site_config import SiteConfig
from seosync.core.sitemap import SitemapRegistry
from seosync.infrastructure.history import InMemoryHistory
from seosync.infrastructure.soup_document import SoupDocument
from seosync.schemas.seo_request import (
    ContentAnalysisCreate, ContentAnalysisResponse, HistoryChangeCreate,
    PageHeadResponse, SeoRequestCreate, SeoRequestResponse,
    SharingButtonsCreate, SharingButtonsResponse,
)
from seosync.services.page_seo import PageSeoOrchestrator
from seosync.services.seo_requests import handle_seo_request, resolve_hash_download
from seosync.services.social_sharing import add_sharing_buttons

router = APIRouter(prefix="/api/v1/seo", tags=["seo"])


def _unwrap(result):
    if not result.is_ok:
        raise result.error
    return result.value


def _page_head(
    orchestrator: PageSeoOrchestrator, result, document: SoupDocument,
    history: InMemoryHistory,
) -> PageHeadResponse:
    summary = _unwrap(result)
    health = _unwrap(orchestrator.get_seo_health())
    return PageHeadResponse(
        summary=summary.to_dict(),
        health=health.to_dict(),
        head=str(document.head),
        history=[entry.path for entry in history.entries],
    )


@router.post("/requests", response_model=SeoRequestResponse)
def seo_request(
    body: SeoRequestCreate,
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
):
    return SeoRequestResponse(**handle_seo_request(body.path, registry, site))


@router.get("/downloads")
def download_artifact(
    fragment: str = Query(min_length=1, max_length=64),
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
):
    """Hash-navigation download: #sitemap.xml or #robots.txt as an attachment."""
    artifact = resolve_hash_download(fragment, registry, site)
    if artifact is None:
        raise ResourceNotFoundError("SEO download", fragment)
    return Response(
        content=artifact.content,
        media_type=artifact.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.get("/pages/{page_id}", response_model=PageHeadResponse)
def render_page_head(
    page_id: str,
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
    notifier=Depends(get_notifier),
):
    """Sync a blank document to the page and return its head with a health report."""
    document = SoupDocument()
    history = InMemoryHistory()
    orchestrator = PageSeoOrchestrator(
        document, site, registry, history=history, notifier=notifier,
    )
    return _page_head(orchestrator, orchestrator.update_page_seo(page_id), document, history)


@router.post("/history", response_model=PageHeadResponse)
def history_change(
    body: HistoryChangeCreate,
    registry: SitemapRegistry = Depends(get_sitemap_registry),
    site: SiteConfig = Depends(get_site_config),
    notifier=Depends(get_notifier),
):
    """Session already moved to body.path: re-sync the head for that path."""
    document = SoupDocument()
    history = InMemoryHistory(initial_path=body.path)
    orchestrator = PageSeoOrchestrator(
        document, site, registry, history=history, notifier=notifier,
    )
    result = orchestrator.handle_history_change(body.path)
    return _page_head(orchestrator, result, document, history)


@router.post("/pages/{page_id}/sharing", response_model=SharingButtonsResponse)
def render_sharing_buttons(
    page_id: str,
    body: SharingButtonsCreate,
    site: SiteConfig = Depends(get_site_config),
):
    """Append share links for the page into body.container_id of the given markup."""
    document = SoupDocument(body.html)
    links = _unwrap(add_sharing_buttons(document, body.container_id, page_id, site))
    return SharingButtonsResponse(
        page_id=resolve_page_id(page_id).value,
        links=links,
        html=document.render(),
    )


@router.post("/content/analysis", response_model=ContentAnalysisResponse)
def analyze_content(body: ContentAnalysisCreate):
    """Derived description and keywords plus a structural audit of the markup."""
    description = _unwrap(generate_meta_description(body.content, body.max_length))
    keywords = _unwrap(extract_keywords(body.content, body.max_keywords))
    audit = _unwrap(validate_content(body.content))
    return ContentAnalysisResponse(
        description=description, keywords=keywords, audit=asdict(audit),
    )
