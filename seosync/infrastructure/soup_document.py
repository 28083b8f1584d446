"""Soup Document — BeautifulSoup-backed implementation of DocumentHeadPort.

Invariants:
    - remove_managed_tags keeps meta[charset], meta[name=viewport], meta[http-equiv],
      link[rel=stylesheet] and link[rel=icon]; everything else in those element
      families is removed
    - Schema scripts are found by the data-schema marker, never by type
    - snapshot() copies attribute values: later mutation never leaks into it

Design Decisions:
    - html.parser backend: stdlib parser, no lxml requirement, tolerant of
      partial documents handed over by the host
    - A missing <head> or <title> is created on demand rather than failing:
      the page must always end up with best-effort metadata
"""

import logging

from bs4 import BeautifulSoup, Tag

from seosync.core.errors import DomPreconditionError
from seosync.core.head_model import (
    JSON_LD_TYPE, SCHEMA_MARKER_ATTR, HeadSnapshot, HeadTag,
)

logger = logging.getLogger(__name__)

BLANK_DOCUMENT = (
    "<!DOCTYPE html>"
    '<html lang="en"><head>'
    '<meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    "<title></title>"
    "</head><body></body></html>"
)
_PRESERVED_LINK_RELS = frozenset({"stylesheet", "icon"})


def _rel_tokens(tag: Tag) -> list[str]:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        return rel.split()
    return list(rel)


def _attr_copy(tag: Tag) -> dict[str, str]:
    return {
        key: " ".join(value) if isinstance(value, list) else str(value)
        for key, value in tag.attrs.items()
    }


class SoupDocument:
    """An HTML document whose head this engine manages."""

    def __init__(self, html: str | None = None):
        self._soup = BeautifulSoup(html or BLANK_DOCUMENT, "html.parser")

    @property
    def head(self) -> Tag:
        head = self._soup.head
        if head is None:
            head = self._soup.new_tag("head")
            root = self._soup.html or self._soup
            root.insert(0, head)
        return head

    def render(self) -> str:
        return str(self._soup)

    def find_element(self, element_id: str) -> Tag | None:
        return self._soup.find(id=element_id)

    # ─── DocumentHeadPort ────────────────────────────────────────

    def set_title(self, title: str) -> None:
        title_tag = self._soup.title
        if title_tag is None:
            title_tag = self._soup.new_tag("title")
            self.head.append(title_tag)
        title_tag.string = title

    def remove_managed_tags(self) -> int:
        removed = 0
        for meta in self._soup.find_all("meta"):
            if (
                meta.has_attr("charset")
                or meta.get("name") == "viewport"
                or meta.has_attr("http-equiv")
            ):
                continue
            meta.decompose()
            removed += 1
        for link in self._soup.find_all("link"):
            if _PRESERVED_LINK_RELS.intersection(_rel_tokens(link)):
                continue
            link.decompose()
            removed += 1
        return removed

    def append_tags(self, tags: list[HeadTag]) -> int:
        head = self.head
        for tag in tags:
            head.append(self._soup.new_tag(tag.element, attrs=dict(tag.attributes)))
        return len(tags)

    def replace_schema_scripts(self, payloads: list[str]) -> int:
        stale = self._soup.find_all("script", attrs={SCHEMA_MARKER_ATTR: "true"})
        for script in stale:
            script.decompose()
        if stale:
            logger.debug(f"Removed {len(stale)} schema scripts")
        head = self.head
        for payload in payloads:
            script = self._soup.new_tag(
                "script", attrs={"type": JSON_LD_TYPE, SCHEMA_MARKER_ATTR: "true"},
            )
            script.string = payload
            head.append(script)
        return len(payloads)

    def snapshot(self) -> HeadSnapshot:
        title_tag = self._soup.title
        scripts = self._soup.find_all("script", attrs={"type": JSON_LD_TYPE})
        return HeadSnapshot(
            title=title_tag.get_text() if title_tag else "",
            metas=tuple(_attr_copy(m) for m in self._soup.find_all("meta")),
            links=tuple(_attr_copy(l) for l in self._soup.find_all("link")),
            json_ld_payloads=tuple(s.string or "" for s in scripts),
        )

    # ─── Body helpers ────────────────────────────────────────────

    def append_links(self, container_id: str, anchors: list[dict[str, str]]) -> int:
        """Append <a> elements to a container. Raises DomPreconditionError if absent."""
        container = self.find_element(container_id)
        if container is None:
            raise DomPreconditionError(container_id)
        for anchor in anchors:
            attrs = {k: v for k, v in anchor.items() if k != "text"}
            element = self._soup.new_tag("a", attrs=attrs)
            element.string = anchor.get("text", "")
            container.append(element)
        return len(anchors)
