"""Page View Stats — pure summary of the session page-view log.

Invariants:
    - Inputs are PageView records (oldest first); no IO
    - Never raises on empty input — counts default to 0, most_viewed_page to None
    - Unparseable referrers are skipped, not counted

Design Decisions:
    - PageView lives here (core) so the infrastructure log and the stats agree
      on one record shape
"""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urlparse


@dataclass(frozen=True)
class PageView:
    page_id: str
    url: str
    title: str
    timestamp: datetime
    referrer: str = ""
    meta_tags: int = 0
    schemas: int = 0


def compute_page_view_stats(views: list[PageView]) -> dict:
    """Totals, most viewed page, top referrer hosts, average spacing (seconds)."""
    page_counts = Counter(v.page_id for v in views)
    referrers = Counter(
        host for host in (urlparse(v.referrer).hostname for v in views if v.referrer)
        if host
    )
    average = 0.0
    if len(views) > 1:
        span = (views[-1].timestamp - views[0].timestamp).total_seconds()
        average = span / len(views)

    return {
        "total_page_views": len(views),
        "unique_pages": len(page_counts),
        "most_viewed_page": page_counts.most_common(1)[0][0] if page_counts else None,
        "average_session_duration": average,
        "top_referrers": dict(referrers.most_common()),
    }
