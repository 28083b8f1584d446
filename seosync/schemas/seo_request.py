"""SEO Request Schemas — artifact envelopes, rendered heads, content and sharing.

Invariants:
    - Paths and fragments are passed through verbatim: matching is exact
      and happens in services/seo_requests.py
    - Content analysis bounds are validated here so the core never sees
      a non-positive length or keyword count
"""

from pydantic import BaseModel, Field


class SeoRequestCreate(BaseModel):
    """A requested resource path such as "/sitemap.xml"."""
    path: str = Field(min_length=1, max_length=512)


class SeoRequestResponse(BaseModel):
    success: bool
    content: str | None = None
    mime_type: str | None = None
    error: str | None = None


class HistoryChangeCreate(BaseModel):
    """Path the session navigated back or forward to."""
    path: str = Field(min_length=1, max_length=512)


class PageHeadResponse(BaseModel):
    """Rendered <head> of a synced page plus its summary and health report."""
    summary: dict
    health: dict
    head: str
    history: list[str] = Field(default_factory=list)


class ContentAnalysisCreate(BaseModel):
    content: str = Field(min_length=1, max_length=500_000)
    max_length: int = Field(default=155, ge=20, le=500)
    max_keywords: int = Field(default=10, ge=1, le=50)


class ContentAnalysisResponse(BaseModel):
    description: str
    keywords: list[str]
    audit: dict


class SharingButtonsCreate(BaseModel):
    """Page markup to render share links into, and the target container id."""
    html: str = Field(min_length=1, max_length=500_000)
    container_id: str = Field(default="social-share", min_length=1, max_length=128)


class SharingButtonsResponse(BaseModel):
    page_id: str
    links: int
    html: str
