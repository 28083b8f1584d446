"""Content Analysis — derive metadata from page content and audit it.

Invariants:
    - All functions are pure and return Results; empty or non-string input is an Err
    - Descriptions never exceed max_length + 3 (the trailing ellipsis)
    - Keyword ranking is by frequency; ties keep first-seen order

Design Decisions:
    - BeautifulSoup with the stdlib html.parser backend for tag stripping and
      counting: no lxml requirement, tolerant of fragments
"""

import re
from collections import Counter
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from seosync.core.errors import EntryValidationError
from seosync.core.result import Err, Ok, Result, from_try

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "be",
    "been", "being", "have", "has", "had", "do", "does", "did", "will",
    "would", "could", "should", "may", "might", "must", "can", "shall",
})
MIN_WORDS, MAX_WORDS = 300, 2000
CONTENT_PENALTY = 10


@dataclass(frozen=True)
class ContentAudit:
    word_count: int = 0
    headings: dict[str, int] = field(default_factory=dict)
    images_total: int = 0
    images_with_alt: int = 0
    images_without_alt: int = 0
    issues: list[str] = field(default_factory=list)
    score: int = 0


def _text_of(content: str) -> str:
    text = BeautifulSoup(content, "html.parser").get_text(" ")
    return re.sub(r"\s+", " ", text).strip()


def _require_text(content: object) -> Err | None:
    if not content or not isinstance(content, str):
        return Err(EntryValidationError("Content must be a non-empty string", field="content"))
    return None


def generate_meta_description(content: str, max_length: int = 155) -> Result:
    """Plain-text description cut at a sentence or word boundary."""
    return _require_text(content) or from_try(
        _describe, content, max_length, component="content.description",
    )


def _describe(content: str, max_length: int) -> str:
    text = _text_of(content)
    if len(text) <= max_length:
        return text
    window = text[:max_length]
    last_sentence = window.rfind(".")
    cut = last_sentence + 1 if last_sentence > 0 else window.rfind(" ")
    if cut <= 0:
        return window.strip() + "..."
    return window[:cut].strip() + "..."


def extract_keywords(content: str, max_keywords: int = 10) -> Result:
    """Most frequent meaningful words, highest first."""
    return _require_text(content) or from_try(
        _keywords, content, max_keywords, component="content.keywords",
    )


def _keywords(content: str, max_keywords: int) -> list[str]:
    text = re.sub(r"[^a-z0-9\s]", " ", _text_of(content).lower())
    words = [w for w in text.split() if len(w) > 2 and w not in STOP_WORDS]
    return [word for word, _ in Counter(words).most_common(max_keywords)]


def validate_content(content: str | None) -> Result:
    """Word count, heading structure and image alt coverage."""
    if not content:
        return Ok(ContentAudit(
            headings={f"h{i}": 0 for i in range(1, 7)},
            issues=["Content is empty"],
        ))
    return from_try(_audit, content, component="content.audit")


def _audit(content: str) -> ContentAudit:
    soup = BeautifulSoup(content, "html.parser")
    issues = []

    word_count = len(_text_of(content).split())
    if word_count < MIN_WORDS:
        issues.append(f"Content is too short (< {MIN_WORDS} words)")
    elif word_count > MAX_WORDS:
        issues.append(f"Content might be too long (> {MAX_WORDS} words)")

    headings = {f"h{i}": len(soup.find_all(f"h{i}")) for i in range(1, 7)}
    if headings["h1"] == 0:
        issues.append("Missing H1 heading")
    elif headings["h1"] > 1:
        issues.append("Multiple H1 headings found")

    images = soup.find_all("img")
    with_alt = sum(1 for img in images if img.has_attr("alt"))
    without_alt = len(images) - with_alt
    if without_alt:
        issues.append(f"{without_alt} images missing alt text")

    return ContentAudit(
        word_count=word_count,
        headings=headings,
        images_total=len(images),
        images_with_alt=with_alt,
        images_without_alt=without_alt,
        issues=issues,
        score=max(0, 100 - len(issues) * CONTENT_PENALTY),
    )
