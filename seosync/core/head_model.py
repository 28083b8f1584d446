"""Head Model — pure values describing document-head elements and snapshots.

Invariants:
    - HeadTag is either a meta or a link element; attributes are final strings
      (already escaped by the generators)
    - HeadSnapshot is a point-in-time copy: mutating the document afterwards
      never changes a snapshot already taken

Design Decisions:
    - Core produces tag values, the DocumentHeadPort performs mutation
      (ADR: functional core, imperative shell — core testable without a DOM)
    - Snapshot query helpers mirror the CSS selectors the health checks need
"""

from dataclasses import dataclass, field
from typing import Literal

SCHEMA_MARKER_ATTR = "data-schema"
JSON_LD_TYPE = "application/ld+json"


@dataclass(frozen=True)
class HeadTag:
    """A <meta> or <link> element ready to append."""
    element: Literal["meta", "link"]
    attributes: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.attributes.get(key)


def meta_name(name: str, content: str) -> HeadTag:
    return HeadTag("meta", {"name": name, "content": content})


def meta_property(prop: str, content: str) -> HeadTag:
    return HeadTag("meta", {"property": prop, "content": content})


def link(rel: str, href: str, **extra: str) -> HeadTag:
    return HeadTag("link", {"rel": rel, "href": href, **extra})


@dataclass(frozen=True)
class HeadSnapshot:
    """Read-only copy of the head state the validators inspect."""
    title: str = ""
    metas: tuple[dict[str, str], ...] = ()
    links: tuple[dict[str, str], ...] = ()
    json_ld_payloads: tuple[str, ...] = ()
    current_path: str = "/"

    def meta_content(self, *, name: str | None = None, prop: str | None = None) -> str | None:
        for meta in self.metas:
            if name is not None and meta.get("name") == name:
                return meta.get("content", "")
            if prop is not None and meta.get("property") == prop:
                return meta.get("content", "")
        return None

    def has_meta_prefix(self, *, name: str | None = None, prop: str | None = None) -> bool:
        for meta in self.metas:
            if name is not None and meta.get("name", "").startswith(name):
                return True
            if prop is not None and meta.get("property", "").startswith(prop):
                return True
        return False

    def link_href(self, rel: str) -> str | None:
        for item in self.links:
            if rel in item.get("rel", "").split():
                return item.get("href", "")
        return None
