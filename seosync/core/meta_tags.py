"""Meta Tag Generation — pure builders for the four head tag groups.

Invariants:
    - Every free-text content value passes through escape() (XSS boundary)
    - Tags with empty content are dropped, never an error
    - Each group is built independently and returns its own Result
    - Canonical link = site_url + page canonical path

Design Decisions:
    - Pure functions over a ResolvedPageConfig: no document access here,
      services/meta_tag_manager.py performs the mutation
    - Group order is fixed (basic, open_graph, twitter, platform) so repeated
      updates yield an identical head
"""

from typing import Callable

from seosync.core.escaping import escape
from seosync.core.head_model import HeadTag, link, meta_name, meta_property
from seosync.core.result import Result, from_try
from seosync.core.site_config import ResolvedPageConfig

OG_IMAGE_WIDTH = "1200"
OG_IMAGE_HEIGHT = "630"
THEME_COLOR = "#667eea"
ROBOTS_DIRECTIVE = "index, follow"


def _name(name: str, content: str | None) -> HeadTag | None:
    if not content:
        return None
    return meta_name(name, escape(content))


def _prop(prop: str, content: str | None) -> HeadTag | None:
    if not content:
        return None
    return meta_property(prop, escape(content))


def _present(tags: list[HeadTag | None]) -> list[HeadTag]:
    return [t for t in tags if t is not None]


def _basic(config: ResolvedPageConfig) -> list[HeadTag]:
    site = config.site
    tags = [
        _name("description", config.description),
        _name("keywords", config.keywords),
        _name("author", site.author),
        _name("language", site.language),
        _name("robots", ROBOTS_DIRECTIVE),
    ]
    if config.canonical:
        tags.append(link("canonical", escape(site.absolute_url(config.canonical))))
    return _present(tags)


def _open_graph(config: ResolvedPageConfig) -> list[HeadTag]:
    site = config.site
    return _present([
        _prop("og:title", config.title),
        _prop("og:description", config.description),
        _prop("og:type", config.type),
        _prop("og:url", site.absolute_url(config.canonical or "/")),
        _prop("og:site_name", site.site_name),
        _prop("og:image", config.image),
        _prop("og:image:width", OG_IMAGE_WIDTH),
        _prop("og:image:height", OG_IMAGE_HEIGHT),
        _prop("og:locale", site.locale),
    ])


def _twitter(config: ResolvedPageConfig) -> list[HeadTag]:
    site = config.site
    return _present([
        _name("twitter:card", "summary_large_image"),
        _name("twitter:site", site.twitter_handle),
        _name("twitter:creator", site.twitter_handle),
        _name("twitter:title", config.title),
        _name("twitter:description", config.description),
        _name("twitter:image", config.image),
    ])


def _platform(config: ResolvedPageConfig) -> list[HeadTag]:
    return _present([
        _name("theme-color", THEME_COLOR),
        _name("apple-mobile-web-app-capable", "yes"),
        _name("apple-mobile-web-app-status-bar-style", "default"),
        _name("apple-mobile-web-app-title", config.site.site_name),
        _name("msapplication-TileColor", THEME_COLOR),
        _name("msapplication-config", "/browserconfig.xml"),
        _name("referrer", "strict-origin-when-cross-origin"),
    ])


def generate_basic_tags(config: ResolvedPageConfig) -> Result:
    """description, keywords, author, language, robots, canonical link."""
    return from_try(_basic, config, component="meta_tags.basic")


def generate_open_graph_tags(config: ResolvedPageConfig) -> Result:
    return from_try(_open_graph, config, component="meta_tags.open_graph")


def generate_twitter_tags(config: ResolvedPageConfig) -> Result:
    return from_try(_twitter, config, component="meta_tags.twitter")


def generate_platform_tags(config: ResolvedPageConfig) -> Result:
    """Theme color, mobile web-app flags, MS tile settings, referrer policy."""
    return from_try(_platform, config, component="meta_tags.platform")


# Append order in the document head
TAG_GROUPS: tuple[tuple[str, Callable[[ResolvedPageConfig], Result]], ...] = (
    ("basic", generate_basic_tags),
    ("open_graph", generate_open_graph_tags),
    ("twitter", generate_twitter_tags),
    ("platform", generate_platform_tags),
)
