"""Tests for SitemapRegistry, XML/robots artifacts, validation and stats."""

from datetime import date, datetime, timezone
from xml.etree import ElementTree

import pytest

from seosync.core.errors import EntryValidationError, ResourceNotFoundError
from seosync.core.sitemap import (
    DEFAULT_CHANGEFREQ, DEFAULT_PRIORITY, DISALLOWED_PATHS, SITEMAP_NS,
    SitemapEntry, SitemapRegistry, compute_sitemap_stats, generate_robots_txt,
    generate_sitemap_xml, initialize_sitemap, validate_sitemap,
)


def _urls(registry):
    return [e.url for e in registry.snapshot()]


# ─── Registry ────────────────────────────────────────────────────

def test_create_seeds_six_static_pages(registry):
    assert _urls(registry) == ["/", "/services", "/about", "/contact", "/faqs", "/mission"]
    assert all(e.lastmod == "2024-01-15" for e in registry.static_entries)
    assert registry.static_entries[0].priority == 1.0


def test_add_page_applies_defaults(registry):
    entry = registry.add_page("/blog/first").value
    assert entry.priority == DEFAULT_PRIORITY
    assert entry.changefreq == DEFAULT_CHANGEFREQ
    assert entry.lastmod == date.today().isoformat()
    assert _urls(registry)[-1] == "/blog/first"


def test_add_page_keeps_explicit_zero_priority(registry):
    assert registry.add_page("/archive", priority=0.0).value.priority == 0.0


@pytest.mark.parametrize("url", ["", None])
def test_add_page_requires_url(registry, url):
    result = registry.add_page(url)
    assert isinstance(result.error, EntryValidationError)
    assert result.error.message == "Page URL is required"
    assert registry.dynamic_entries == ()


def test_add_page_upserts_in_place(registry):
    registry.add_page("/a", priority=0.3)
    registry.add_page("/b")
    registry.add_page("/a", priority=0.9)
    dynamic = registry.dynamic_entries
    assert [e.url for e in dynamic] == ["/a", "/b"]
    assert dynamic[0].priority == 0.9


def test_remove_page(registry):
    registry.add_page("/a")
    removed = registry.remove_page("/a")
    assert removed.value.url == "/a"
    assert registry.dynamic_entries == ()


def test_remove_unknown_or_static_page_is_not_found(registry):
    assert isinstance(registry.remove_page("/missing").error, ResourceNotFoundError)
    assert isinstance(registry.remove_page("/").error, ResourceNotFoundError)
    assert "/" in _urls(registry)


def test_no_duplicates_after_mixed_operations(registry):
    for url in ["/x", "/y", "/x", "/z", "/y"]:
        registry.add_page(url)
    registry.remove_page("/z")
    registry.add_page("/z")
    urls = _urls(registry)
    assert len(urls) == len(set(urls))
    assert validate_sitemap(registry).value.errors == []


# ─── Artifacts ───────────────────────────────────────────────────

def test_sitemap_xml_structure(registry, site):
    xml = generate_sitemap_xml(registry, site).value
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    assert f'<urlset xmlns="{SITEMAP_NS}">' in xml
    assert xml.count("<url>") == 6
    assert "<loc>https://cryptoversus.io/services</loc>" in xml
    assert "<priority>1</priority>" in xml
    assert "<priority>0.9</priority>" in xml
    assert "<changefreq>daily</changefreq>" in xml
    assert xml.endswith("</urlset>")


def test_sitemap_xml_escapes_locations(registry, site):
    registry.add_page("/search?q=a&b=<c>")
    xml = generate_sitemap_xml(registry, site).value
    assert "<loc>https://cryptoversus.io/search?q=a&amp;b=&lt;c&gt;</loc>" in xml


def test_sitemap_xml_escapes_every_text_node(registry, site):
    registry.add_page("/blog/x", 0.5, "weekly&daily", "2024<01")
    xml = generate_sitemap_xml(registry, site).value
    root = ElementTree.fromstring(xml.encode("utf-8"))
    last = root.findall(f"{{{SITEMAP_NS}}}url")[-1]
    assert last.findtext(f"{{{SITEMAP_NS}}}changefreq") == "weekly&daily"
    assert last.findtext(f"{{{SITEMAP_NS}}}lastmod") == "2024<01"
    assert last.findtext(f"{{{SITEMAP_NS}}}priority") == "0.5"


def test_priority_uses_shortest_decimal_form(registry, site):
    registry.add_page("/top", priority=1.0)
    registry.add_page("/bottom", priority=0)
    xml = generate_sitemap_xml(registry, site).value
    assert "<priority>1.0</priority>" not in xml
    assert "<priority>0</priority>" in xml
    stats = compute_sitemap_stats(registry).value
    assert stats["priority_distribution"]["1"] == 2


def test_empty_registry_renders_empty_urlset(site):
    xml = generate_sitemap_xml(SitemapRegistry(), site).value
    assert "<url>" not in xml
    assert xml.endswith("</urlset>")


def test_robots_txt(site):
    robots = generate_robots_txt(site).value
    lines = robots.splitlines()
    assert lines[0] == "User-agent: *"
    assert "Allow: /" in lines
    disallows = [line.split(": ", 1)[1] for line in lines if line.startswith("Disallow:")]
    assert disallows == list(DISALLOWED_PATHS)
    assert len(disallows) == 5
    assert "Sitemap: https://cryptoversus.io/sitemap.xml" in lines
    assert robots.endswith("\n")


# ─── Validation & stats ──────────────────────────────────────────

def test_seeded_registry_is_valid(registry):
    report = validate_sitemap(registry).value
    assert report.is_valid
    assert report.errors == []
    assert report.total_pages == 6


@pytest.mark.parametrize("priority,valid", [
    (1.0, True), (0.0, True), (1.01, False), (-0.1, False),
])
def test_priority_boundaries(priority, valid):
    registry = SitemapRegistry([SitemapEntry("/p", priority, "weekly")])
    assert validate_sitemap(registry).value.is_valid is valid


def test_invalid_changefreq_is_an_error():
    registry = SitemapRegistry([SitemapEntry("/p", 0.5, "biweekly")])
    report = validate_sitemap(registry).value
    assert report.errors == ["Page 0: Invalid changefreq value"]


def test_duplicates_across_static_and_dynamic():
    registry = SitemapRegistry([SitemapEntry("/dup", 0.5, "weekly")])
    registry.add_page("/dup")
    report = validate_sitemap(registry).value
    assert not report.is_valid
    assert report.errors == ["Duplicate URLs found: /dup"]


def test_warnings_do_not_block_validity():
    registry = SitemapRegistry([
        SitemapEntry("relative", 0.5, "weekly"),
        SitemapEntry("/dated", 0.5, "weekly", lastmod="15/01/2024"),
    ])
    report = validate_sitemap(registry).value
    assert report.is_valid
    assert report.warnings == [
        "Page 0: URL should start with /",
        "Page 1: lastmod should be in YYYY-MM-DD format",
    ]


def test_missing_url_is_an_error():
    registry = SitemapRegistry([SitemapEntry("", 0.5, "weekly")])
    report = validate_sitemap(registry).value
    assert report.errors == ["Page 0: Missing URL"]
    assert report.warnings == []


def test_stats(registry):
    registry.add_page("/blog", priority=0.5, changefreq="weekly")
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    stats = compute_sitemap_stats(registry, now=now).value
    assert stats["total_pages"] == 7
    assert stats["static_pages"] == 6
    assert stats["dynamic_pages"] == 1
    assert stats["priority_distribution"]["0.8"] == 2
    assert stats["priority_distribution"]["0.5"] == 1
    assert stats["changefreq_distribution"] == {"daily": 1, "weekly": 3, "monthly": 3}
    assert stats["last_generated"] == now.isoformat()


def test_validation_and_stats_do_not_mutate(registry):
    before = registry.snapshot()
    validate_sitemap(registry)
    compute_sitemap_stats(registry)
    assert registry.snapshot() == before


def test_initialize_sitemap_reports_stats_and_validation(registry):
    result = initialize_sitemap(registry).value
    assert result["stats"]["total_pages"] == 6
    assert result["validation"].is_valid
