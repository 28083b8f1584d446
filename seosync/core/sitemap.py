"""Sitemap Registry — static + dynamic URL entries and the artifacts derived from them.

Invariants:
    - Static entries are fixed at creation; add_page/remove_page touch only
      the dynamic collection
    - Dynamic entries are keyed by url and keep insertion order; an upsert
      replaces in place
    - Combined order is always static-then-dynamic
    - Duplicate urls across static ∪ dynamic are a validation error, never a
      runtime fault
    - validate_sitemap and compute_sitemap_stats never mutate the registry

Design Decisions:
    - Explicit registry object injected into the orchestrator and HTTP routes
      (ADR: no module-level mutable site structure)
    - threading.Lock around the dynamic collection: the FastAPI host runs sync
      endpoints in a worker pool, so access is not single-threaded there
    - XML built line by line with xml_escape on every text node, matching the
      static-site generators; ElementTree would single-quote the declaration
"""

import logging
import re
import threading
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from xml.sax.saxutils import escape as xml_escape

from seosync.core.domain_types import ChangeFreq, VALID_CHANGEFREQS
from seosync.core.errors import EntryValidationError, ResourceNotFoundError
from seosync.core.result import Err, Ok, Result, from_try
from seosync.core.site_config import SiteConfig

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_PRIORITY = 0.5
DEFAULT_CHANGEFREQ = ChangeFreq.MONTHLY.value
DISALLOWED_PATHS = ("/admin/", "/dev/", "/tests/", "*.js$", "/src/")
_LASTMOD_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    priority: float
    changefreq: str
    lastmod: str | None = None

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "priority": self.priority,
            "changefreq": self.changefreq,
            "lastmod": self.lastmod,
        }


@dataclass(frozen=True)
class SitemapValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_pages: int = 0


# (url, priority, changefreq) for the six top-level pages
STATIC_PAGES: tuple[tuple[str, float, ChangeFreq], ...] = (
    ("/", 1.0, ChangeFreq.DAILY),
    ("/services", 0.9, ChangeFreq.WEEKLY),
    ("/about", 0.8, ChangeFreq.MONTHLY),
    ("/contact", 0.8, ChangeFreq.MONTHLY),
    ("/faqs", 0.7, ChangeFreq.WEEKLY),
    ("/mission", 0.6, ChangeFreq.MONTHLY),
)


class SitemapRegistry:
    """Owns the static entries and the mutable dynamic collection."""

    def __init__(self, static_entries: list[SitemapEntry] | tuple[SitemapEntry, ...] = ()):
        self._static: tuple[SitemapEntry, ...] = tuple(static_entries)
        self._dynamic: dict[str, SitemapEntry] = {}
        self._lock = threading.Lock()

    @classmethod
    def create(cls, today: date | None = None) -> "SitemapRegistry":
        """Registry seeded with the top-level pages, lastmod = today."""
        lastmod = (today or date.today()).isoformat()
        return cls([
            SitemapEntry(url, priority, freq.value, lastmod)
            for url, priority, freq in STATIC_PAGES
        ])

    @property
    def static_entries(self) -> tuple[SitemapEntry, ...]:
        return self._static

    @property
    def dynamic_entries(self) -> tuple[SitemapEntry, ...]:
        with self._lock:
            return tuple(self._dynamic.values())

    def snapshot(self) -> tuple[SitemapEntry, ...]:
        """Static then dynamic entries, as of now."""
        return self._static + self.dynamic_entries

    def add_page(
        self,
        url: str | None,
        priority: float | None = None,
        changefreq: str | None = None,
        lastmod: str | None = None,
    ) -> Result:
        """Upsert a dynamic entry by url."""
        if not url:
            return Err(EntryValidationError("Page URL is required", field="url"))
        entry = SitemapEntry(
            url=url,
            priority=DEFAULT_PRIORITY if priority is None else priority,
            changefreq=changefreq or DEFAULT_CHANGEFREQ,
            lastmod=lastmod or date.today().isoformat(),
        )
        with self._lock:
            # dict assignment keeps the existing position of a key
            self._dynamic[url] = entry
        logger.info(f"Sitemap entry upserted: {url}", extra={"url": url})
        return Ok(entry)

    def remove_page(self, url: str) -> Result:
        """Delete a dynamic entry. Static entries are never removed."""
        with self._lock:
            removed = self._dynamic.pop(url, None)
        if removed is None:
            return Err(ResourceNotFoundError("Sitemap page", url))
        logger.info(f"Sitemap entry removed: {url}", extra={"url": url})
        return Ok(removed)


# ─── Artifacts ───────────────────────────────────────────────────

def _format_priority(priority: float) -> str:
    # shortest decimal form: 1.0 renders as "1", 0.5 as "0.5"
    return format(float(priority), "g")


def _url_block(loc: str, entry: SitemapEntry) -> str:
    lines = ["  <url>"]
    lines.append(f"    <loc>{xml_escape(loc)}</loc>")
    lines.append(f"    <lastmod>{xml_escape(entry.lastmod or '')}</lastmod>")
    lines.append(f"    <changefreq>{xml_escape(entry.changefreq)}</changefreq>")
    lines.append(f"    <priority>{xml_escape(_format_priority(entry.priority))}</priority>")
    lines.append("  </url>")
    return "\n".join(lines)


def _build_sitemap_xml(entries: tuple[SitemapEntry, ...], site: SiteConfig) -> str:
    blocks = [_url_block(site.absolute_url(e.url), e) for e in entries]
    body = "\n".join(blocks)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}">\n'
        + (body + "\n" if body else "")
        + "</urlset>"
    )


def generate_sitemap_xml(registry: SitemapRegistry, site: SiteConfig) -> Result:
    """Sitemap protocol 0.9 document for every registered entry."""
    return from_try(_build_sitemap_xml, registry.snapshot(), site, component="sitemap.xml")


def _build_robots_txt(site: SiteConfig) -> str:
    lines = ["User-agent: *", "Allow: /", "", "# Disallow development and admin paths"]
    lines.extend(f"Disallow: {path}" for path in DISALLOWED_PATHS)
    lines.extend(["", f"Sitemap: {site.site_url}/sitemap.xml"])
    return "\n".join(lines) + "\n"


def generate_robots_txt(site: SiteConfig) -> Result:
    return from_try(_build_robots_txt, site, component="sitemap.robots")


# ─── Validation & stats ──────────────────────────────────────────

def _validate_entries(entries: tuple[SitemapEntry, ...]) -> SitemapValidation:
    errors: list[str] = []
    warnings: list[str] = []

    counts = Counter(e.url for e in entries if e.url)
    duplicates = [url for url, n in counts.items() if n > 1]
    if duplicates:
        errors.append(f"Duplicate URLs found: {', '.join(duplicates)}")

    for index, entry in enumerate(entries):
        if not entry.url:
            errors.append(f"Page {index}: Missing URL")
        elif not entry.url.startswith("/"):
            warnings.append(f"Page {index}: URL should start with /")
        if not isinstance(entry.priority, (int, float)) or not 0 <= entry.priority <= 1:
            errors.append(f"Page {index}: Priority must be between 0 and 1")
        if entry.changefreq not in VALID_CHANGEFREQS:
            errors.append(f"Page {index}: Invalid changefreq value")
        if entry.lastmod and not _LASTMOD_RE.match(entry.lastmod):
            warnings.append(f"Page {index}: lastmod should be in YYYY-MM-DD format")

    return SitemapValidation(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        total_pages=len(entries),
    )


def validate_sitemap(registry: SitemapRegistry) -> Result:
    """Errors block validity; warnings never do."""
    return from_try(_validate_entries, registry.snapshot(), component="sitemap.validate")


def _stats(registry: SitemapRegistry, now: datetime | None) -> dict:
    static = registry.static_entries
    dynamic = registry.dynamic_entries
    entries = static + dynamic
    return {
        "total_pages": len(entries),
        "static_pages": len(static),
        "dynamic_pages": len(dynamic),
        "priority_distribution": dict(Counter(_format_priority(e.priority) for e in entries)),
        "changefreq_distribution": dict(Counter(e.changefreq for e in entries)),
        "last_generated": (now or datetime.now(timezone.utc)).isoformat(),
    }


def compute_sitemap_stats(registry: SitemapRegistry, now: datetime | None = None) -> Result:
    """Counts plus priority and changefreq histograms. Read-only."""
    return from_try(_stats, registry, now, component="sitemap.stats")


def initialize_sitemap(registry: SitemapRegistry) -> Result:
    """Startup check: validate, log problems, report stats."""
    validation = validate_sitemap(registry)
    if not validation.is_ok:
        return validation
    report = validation.value
    if not report.is_valid:
        logger.warning(f"Sitemap validation problems: {report.errors}")
    stats = compute_sitemap_stats(registry).unwrap_or({})
    logger.info(
        f"Sitemap initialized: {stats.get('total_pages', 0)} pages",
    )
    return Ok({"stats": stats, "validation": report})
