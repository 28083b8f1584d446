"""Domain Types — rich types that replace bare strings across the codebase.

Invariants:
    - PageId is a closed enumeration; unknown identifiers resolve to HOME, never raise
    - ChangeFreq lists exactly the seven sitemap-protocol tokens
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal
      to the raw strings the navigation collaborator sends
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Priority = NewType("Priority", float)   # 0.0–1.0
CanonicalPath = NewType("CanonicalPath", str)   # always starts with "/"


# ─── Enums ───────────────────────────────────────────────────────

class PageId(str, Enum):
    """Top-level pages known to the navigation collaborator."""
    HOME = "home"
    SERVICES = "services"
    ABOUT = "about"
    CONTACT = "contact"
    FAQS = "faqs"
    MISSION = "mission"


class ChangeFreq(str, Enum):
    """Sitemap-protocol 0.9 change frequency hints."""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class HealthStatus(str, Enum):
    """Overall document health classification."""
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class ValidationGrade(str, Enum):
    """Qualitative label for a per-page validation score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"
    POOR = "poor"


VALID_CHANGEFREQS = frozenset(c.value for c in ChangeFreq)


def resolve_page_id(raw: str | PageId | None) -> PageId:
    """Map any identifier onto the closed enumeration, falling back to HOME."""
    if isinstance(raw, PageId):
        return raw
    try:
        return PageId(raw)
    except ValueError:
        return PageId.HOME
