"""SEO Health Engine — live-document health and per-page validation.

Invariants:
    - Every call takes a fresh snapshot; nothing is cached between calls
    - Read-only: never mutates the document or history
"""

from dataclasses import replace

from seosync.core.domain_types import PageId, resolve_page_id
from seosync.core.head_model import HeadSnapshot
from seosync.core.ports import DocumentHeadPort, HistoryPort
from seosync.core.result import Result, from_try
from seosync.core.seo_health import compute_seo_health, validate_page_snapshot


class SeoHealthEngine:
    """Scores whatever the document head currently contains."""

    def __init__(self, head: DocumentHeadPort, history: HistoryPort | None = None):
        self._head = head
        self._history = history

    def _snapshot(self) -> HeadSnapshot:
        snapshot = self._head.snapshot()
        path = self._history.current_path() if self._history else "/"
        return replace(snapshot, current_path=path)

    def get_seo_health(self) -> Result:
        return from_try(
            lambda: compute_seo_health(self._snapshot()), component="seo_health",
        )

    def validate_page_seo(self, page_id: str | PageId | None) -> Result:
        resolved = resolve_page_id(page_id)
        return from_try(
            lambda: validate_page_snapshot(resolved, self._snapshot()),
            component="seo_validation",
        )
