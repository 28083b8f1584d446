"""Tests for the four meta tag group builders — pure, no document."""

from dataclasses import replace

from seosync.core.escaping import escape
from seosync.core.meta_tags import (
    OG_IMAGE_HEIGHT, OG_IMAGE_WIDTH, TAG_GROUPS, THEME_COLOR,
    generate_basic_tags, generate_open_graph_tags, generate_platform_tags,
    generate_twitter_tags,
)
from seosync.core.site_config import merged_page_config, with_overrides


def _by_key(tags):
    out = {}
    for tag in tags:
        key = tag.get("name") or tag.get("property") or tag.get("rel")
        out[key] = tag
    return out


def test_group_sizes_for_home(site):
    config = merged_page_config(site, "home")
    sizes = [len(generate(config).value) for _, generate in TAG_GROUPS]
    assert sizes == [6, 9, 6, 7]


def test_group_order_is_fixed():
    assert [name for name, _ in TAG_GROUPS] == ["basic", "open_graph", "twitter", "platform"]


def test_basic_tags_include_canonical_link(site):
    tags = _by_key(generate_basic_tags(merged_page_config(site, "about")).value)
    assert tags["canonical"].element == "link"
    assert tags["canonical"].get("href") == "https://cryptoversus.io/about"
    assert tags["robots"].get("content") == "index, follow"
    assert tags["author"].get("content") == "CryptoVersus Team"


def test_open_graph_fields(site):
    tags = _by_key(generate_open_graph_tags(merged_page_config(site, "services")).value)
    assert tags["og:title"].get("content") == "Our Services - CryptoVersus.io"
    assert tags["og:url"].get("content") == "https://cryptoversus.io/services"
    assert tags["og:type"].get("content") == "website"
    assert tags["og:image:width"].get("content") == OG_IMAGE_WIDTH
    assert tags["og:image:height"].get("content") == OG_IMAGE_HEIGHT
    assert tags["og:locale"].get("content") == "en_US"


def test_twitter_fields(site):
    tags = _by_key(generate_twitter_tags(merged_page_config(site, "faqs")).value)
    assert tags["twitter:card"].get("content") == "summary_large_image"
    assert tags["twitter:site"].get("content") == "@cryptoversus"
    assert tags["twitter:title"].get("content") == "FAQs - CryptoVersus.io"


def test_platform_fields(site):
    tags = _by_key(generate_platform_tags(merged_page_config(site, "home")).value)
    assert tags["theme-color"].get("content") == THEME_COLOR
    assert tags["msapplication-TileColor"].get("content") == THEME_COLOR
    assert tags["referrer"].get("content") == "strict-origin-when-cross-origin"


def test_free_text_is_escaped(site):
    config = replace(
        merged_page_config(site, "home"),
        description='<script>alert("x")</script>',
    )
    tags = _by_key(generate_open_graph_tags(config).value)
    content = tags["og:description"].get("content")
    assert content == escape('<script>alert("x")</script>')
    assert "<" not in content and '"' not in content


def test_site_values_are_escaped(site):
    site = with_overrides(site, author="A & B <Team>")
    tags = _by_key(generate_basic_tags(merged_page_config(site, "home")).value)
    assert tags["author"].get("content") == "A &amp; B &lt;Team&gt;"


def test_empty_values_are_dropped(site):
    config = replace(merged_page_config(site, "home"), description="", keywords="")
    basic = _by_key(generate_basic_tags(config).value)
    twitter = _by_key(generate_twitter_tags(config).value)
    assert "description" not in basic
    assert "keywords" not in basic
    assert "twitter:description" not in twitter
    assert len(basic) == 4


def test_builder_failure_becomes_err(site):
    config = replace(merged_page_config(site, "home"), site=None)
    result = generate_basic_tags(config)
    assert not result.is_ok
    assert result.error.code == "GENERATION_FAILED"
    assert result.error.context.component == "meta_tags.basic"
