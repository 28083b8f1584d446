"""Page SEO Orchestrator — sequences meta tags, schemas, history and analytics per navigation.

Invariants:
    - Meta tags then schemas; an Err from either makes the whole call an Err
      wrapping it, with no rollback of what the other component already applied
    - History is pushed only when a HistoryPort is present AND the canonical
      path differs from the current path
    - Analytics is fire-and-forget: any exception from the notifier is logged
      and never changes the returned Result
    - Unknown page ids are handled exactly like "home"

Design Decisions:
    - Components composed with and_then/map_err instead of manual branching
    - Collaborators injected (head, registry, history, notifier, page-view log):
      tests pass NoopNotifier and an in-memory history
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Callable

from seosync.core.domain_types import PageId, resolve_page_id
from seosync.core.errors import ErrorContext, GenerationError, SeoSyncError
from seosync.core.page_view_stats import PageView
from seosync.core.ports import DocumentHeadPort, HistoryPort, Notifier
from seosync.core.result import Err, Ok, Result
from seosync.core.site_config import SiteConfig, merged_page_config, page_id_from_path
from seosync.core.sitemap import SitemapRegistry, initialize_sitemap
from seosync.infrastructure.analytics import NoopNotifier, PageViewLog
from seosync.services.meta_tag_manager import MetaTagManager
from seosync.services.schema_manager import SchemaManager
from seosync.services.seo_health import SeoHealthEngine

logger = logging.getLogger(__name__)

SEO_ROUTES = ("sitemap.xml", "robots.txt")


@dataclass(frozen=True)
class PageSeoSummary:
    page_id: PageId
    meta_tags: int
    schemas: int
    canonical: str
    timestamp: datetime

    def to_dict(self) -> dict:
        data = asdict(self)
        data["page_id"] = self.page_id.value
        data["timestamp"] = self.timestamp.isoformat()
        return data


def _wrap(prefix: str, page_id: PageId) -> Callable[[SeoSyncError], SeoSyncError]:
    def wrap(error: SeoSyncError) -> SeoSyncError:
        return GenerationError(
            f"{prefix}: {error.message}",
            component="page_seo",
            causes=[error],
            context=ErrorContext(page_id=page_id.value),
        )
    return wrap


class PageSeoOrchestrator:
    """Entry point for page-change, history and startup events."""

    def __init__(
        self,
        head: DocumentHeadPort,
        site: SiteConfig,
        registry: SitemapRegistry,
        history: HistoryPort | None = None,
        notifier: Notifier | None = None,
        page_views: PageViewLog | None = None,
    ):
        self._site = site
        self._registry = registry
        self._history = history
        self._notifier = notifier or NoopNotifier()
        self._page_views = page_views if page_views is not None else PageViewLog()
        self.meta_tags = MetaTagManager(head, site)
        self.schemas = SchemaManager(head, site)
        self.health = SeoHealthEngine(head, history)

    @property
    def page_views(self) -> PageViewLog:
        return self._page_views

    def update_page_seo(self, page_id: str | PageId | None, push_history: bool = True) -> Result:
        """Sync the document head to a page. Returns Ok(PageSeoSummary) or Err."""
        resolved = resolve_page_id(page_id)
        logger.info(f"Updating SEO for page: {resolved.value}", extra={"page_id": resolved.value})

        result = (
            self.meta_tags.update_meta_tags(resolved)
            .map_err(_wrap("Failed to update meta tags", resolved))
            .and_then(lambda meta_count: (
                self.schemas.update_page_schemas(resolved)
                .map_err(_wrap("Failed to update schemas", resolved))
                .map(lambda schema_count: (meta_count, schema_count))
            ))
        )
        if not result.is_ok:
            logger.error(
                result.error.message,
                extra={"page_id": resolved.value, "error_code": result.error.code},
            )
            return result

        meta_count, schema_count = result.value
        canonical = merged_page_config(self._site, resolved).canonical
        if push_history:
            self._update_history(resolved, canonical)
        self._track_page_view(resolved, canonical, meta_count, schema_count)

        logger.info(
            f"Updated SEO for page: {resolved.value} "
            f"(meta tags: {meta_count}, schemas: {schema_count})",
            extra={
                "page_id": resolved.value,
                "tag_count": meta_count,
                "schema_count": schema_count,
            },
        )
        return Ok(PageSeoSummary(
            page_id=resolved,
            meta_tags=meta_count,
            schemas=schema_count,
            canonical=canonical,
            timestamp=datetime.now(timezone.utc),
        ))

    def handle_history_change(self, path: str) -> Result:
        """Back/forward navigation: re-sync for the path without pushing history."""
        return self.update_page_seo(page_id_from_path(path), push_history=False)

    def get_seo_health(self) -> Result:
        return self.health.get_seo_health()

    def validate_page_seo(self, page_id: str | PageId | None) -> Result:
        return self.health.validate_page_seo(page_id)

    def initialize(self) -> Result:
        """Startup: validate the sitemap and announce the served artifacts."""
        sitemap = initialize_sitemap(self._registry)
        if not sitemap.is_ok:
            return Err(GenerationError(
                f"Failed to initialize sitemap service: {sitemap.error.message}",
                component="page_seo", causes=[sitemap.error],
            ))
        self._emit("seo_initialized", {
            "event_category": "SEO Performance",
            "event_label": "system_init",
            "value": 1,
        })
        logger.info("SEO system initialized")
        return Ok({"sitemap": sitemap.value, "routes": list(SEO_ROUTES)})

    # ─── Side effects ────────────────────────────────────────────

    def _update_history(self, page_id: PageId, canonical: str) -> None:
        if self._history is None:
            return
        if self._history.current_path() == canonical:
            return
        title = merged_page_config(self._site, page_id).title
        self._history.push_state({"page_id": page_id.value}, title, canonical)

    def _track_page_view(
        self, page_id: PageId, canonical: str, meta_count: int, schema_count: int,
    ) -> None:
        config = merged_page_config(self._site, page_id)
        location = self._site.absolute_url(canonical)
        self._page_views.record(PageView(
            page_id=page_id.value,
            url=location,
            title=config.title,
            timestamp=datetime.now(timezone.utc),
            meta_tags=meta_count,
            schemas=schema_count,
        ))
        self._emit("page_view", {
            "page_title": config.title,
            "page_location": location,
            "page_id": page_id.value,
            "custom_parameter_1": meta_count,
            "custom_parameter_2": schema_count,
        })
        self._emit("seo_page_change", {
            "event_category": "SEO",
            "event_label": page_id.value,
            "value": meta_count + schema_count,
        })

    def _emit(self, event_name: str, params: dict) -> None:
        try:
            self._notifier.emit(event_name, params)
        except Exception as e:
            logger.warning(f"Analytics event '{event_name}' dropped: {e}")
