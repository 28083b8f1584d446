"""Sitemap Schemas — request/response models for registry management.

Invariants:
    - SitemapPageCreate.url: non-empty after strip
    - priority bounded to [0, 1] at the boundary; changefreq restricted to the
      seven protocol tokens
    - lastmod, when given, is YYYY-MM-DD

Design Decisions:
    - Boundary rejects what validate_sitemap would later flag as an error:
      the registry itself stays permissive for programmatic callers
"""

from pydantic import BaseModel, Field, field_validator

from seosync.core.domain_types import ChangeFreq


class SitemapPageCreate(BaseModel):
    """Upsert a dynamic sitemap page."""
    url: str = Field(min_length=1, max_length=2048)
    priority: float | None = Field(None, ge=0.0, le=1.0)
    changefreq: ChangeFreq | None = None
    lastmod: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("url cannot be empty or whitespace")
        return v


class SitemapPageResponse(BaseModel):
    url: str
    priority: float
    changefreq: str
    lastmod: str | None = None


class SitemapPagesResponse(BaseModel):
    static: list[SitemapPageResponse]
    dynamic: list[SitemapPageResponse]


class SitemapValidationResponse(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]
    total_pages: int


class SitemapStatsResponse(BaseModel):
    total_pages: int
    static_pages: int
    dynamic_pages: int
    priority_distribution: dict[str, int]
    changefreq_distribution: dict[str, int]
    last_generated: str
