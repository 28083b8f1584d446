"""SEO Health — pure scoring of a HeadSnapshot.

Invariants:
    - Inputs are snapshots only; nothing here reads or caches live state
    - Health score = max(0, 100 - 20 * issues); healthy (0), warning (<=2), critical (>2)
    - Page validation checks five independent dimensions; score is the rounded
      percentage passing

Design Decisions:
    - Frozen dataclass reports with to_dict(): services hand them to the HTTP
      layer or logs without custom encoders
    - Issue messages are stable strings: tests and dashboards match on them
"""

import json
from dataclasses import asdict, dataclass, field

from seosync.core.domain_types import HealthStatus, PageId, ValidationGrade
from seosync.core.head_model import HeadSnapshot

ISSUE_PENALTY = 20
TITLE_MAX = 60
DESCRIPTION_MIN, DESCRIPTION_MAX = 120, 160
MIN_KEYWORDS = 3
CANONICAL_NOT_SET = "Not set"

ISSUE_MISSING_DESCRIPTION = "Missing meta description"
ISSUE_MISSING_OPEN_GRAPH = "Missing Open Graph tags"
ISSUE_NO_STRUCTURED_DATA = "No structured data found"
ISSUE_MISSING_CANONICAL = "Missing canonical URL"


@dataclass(frozen=True)
class MetaTagHealth:
    count: int
    has_description: bool
    has_keywords: bool
    has_open_graph: bool
    has_twitter: bool


@dataclass(frozen=True)
class SchemaHealth:
    count: int
    types: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NavigationHealth:
    current_path: str
    canonical_url: str
    title: str


@dataclass(frozen=True)
class SeoHealthReport:
    meta_tags: MetaTagHealth
    schemas: SchemaHealth
    navigation: NavigationHealth
    status: HealthStatus
    issues: list[str]
    score: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ValidationCheck:
    value: str
    is_valid: bool
    recommendation: str


@dataclass(frozen=True)
class PageValidationReport:
    page_id: PageId
    checks: dict[str, ValidationCheck]
    score: int
    status: ValidationGrade
    valid_count: int
    total_checks: int

    def to_dict(self) -> dict:
        return asdict(self)


def _schema_type(payload: str) -> str:
    try:
        data = json.loads(payload)
    except ValueError:
        return "Invalid"
    if isinstance(data, dict):
        return str(data.get("@type") or "Unknown")
    return "Unknown"


def classify_health(issue_count: int) -> HealthStatus:
    if issue_count == 0:
        return HealthStatus.HEALTHY
    if issue_count <= 2:
        return HealthStatus.WARNING
    return HealthStatus.CRITICAL


def compute_seo_health(snapshot: HeadSnapshot) -> SeoHealthReport:
    """Score the document head. Pure, no IO."""
    meta = MetaTagHealth(
        count=len(snapshot.metas),
        has_description=snapshot.meta_content(name="description") is not None,
        has_keywords=snapshot.meta_content(name="keywords") is not None,
        has_open_graph=snapshot.has_meta_prefix(prop="og:"),
        has_twitter=snapshot.has_meta_prefix(name="twitter:"),
    )
    schemas = SchemaHealth(
        count=len(snapshot.json_ld_payloads),
        types=[_schema_type(p) for p in snapshot.json_ld_payloads],
    )
    navigation = NavigationHealth(
        current_path=snapshot.current_path,
        canonical_url=snapshot.link_href("canonical") or CANONICAL_NOT_SET,
        title=snapshot.title,
    )

    issues = []
    if not meta.has_description:
        issues.append(ISSUE_MISSING_DESCRIPTION)
    if not meta.has_open_graph:
        issues.append(ISSUE_MISSING_OPEN_GRAPH)
    if schemas.count == 0:
        issues.append(ISSUE_NO_STRUCTURED_DATA)
    if navigation.canonical_url == CANONICAL_NOT_SET:
        issues.append(ISSUE_MISSING_CANONICAL)

    return SeoHealthReport(
        meta_tags=meta,
        schemas=schemas,
        navigation=navigation,
        status=classify_health(len(issues)),
        issues=issues,
        score=max(0, 100 - len(issues) * ISSUE_PENALTY),
    )


def grade_score(score: int) -> ValidationGrade:
    if score >= 80:
        return ValidationGrade.EXCELLENT
    if score >= 60:
        return ValidationGrade.GOOD
    if score >= 40:
        return ValidationGrade.NEEDS_IMPROVEMENT
    return ValidationGrade.POOR


def validate_page_snapshot(page_id: PageId, snapshot: HeadSnapshot) -> PageValidationReport:
    """Check title, description, keywords, canonical and Open Graph completeness."""
    title = snapshot.title
    description = snapshot.meta_content(name="description") or ""
    keywords = snapshot.meta_content(name="keywords") or ""
    canonical = snapshot.link_href("canonical") or ""
    og_title = snapshot.meta_content(prop="og:title") or ""
    og_description = snapshot.meta_content(prop="og:description") or ""
    og_image = snapshot.meta_content(prop="og:image") or ""

    checks = {
        "title": ValidationCheck(
            title, 0 < len(title) <= TITLE_MAX,
            "Title should be 30-60 characters",
        ),
        "description": ValidationCheck(
            description, DESCRIPTION_MIN <= len(description) <= DESCRIPTION_MAX,
            "Description should be 120-160 characters",
        ),
        "keywords": ValidationCheck(
            keywords, bool(keywords) and len(keywords.split(",")) >= MIN_KEYWORDS,
            "Include 5-10 relevant keywords",
        ),
        "canonical": ValidationCheck(
            canonical, bool(canonical),
            "Every page should have a canonical URL",
        ),
        "open_graph": ValidationCheck(
            f"{og_title} | {og_description} | {og_image}",
            bool(og_title and og_description and og_image),
            "Include complete Open Graph tags",
        ),
    }

    valid_count = sum(1 for c in checks.values() if c.is_valid)
    score = round(valid_count / len(checks) * 100)
    return PageValidationReport(
        page_id=page_id,
        checks=checks,
        score=score,
        status=grade_score(score),
        valid_count=valid_count,
        total_checks=len(checks),
    )
