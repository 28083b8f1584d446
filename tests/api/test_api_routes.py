"""API routes — artifacts, registry management, SEO requests, downloads, sharing, content."""

import pytest

SHARE_PAGE = '<html><head><title></title></head><body><div id="share-bar"></div></body></html>'
ARTICLE = (
    "<h1>Crypto exchange guide</h1>"
    "<p>Bitcoin trading fees. Bitcoin wallets and bitcoin security.</p>"
    '<img src="chart.png">'
)


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_valid_sitemap(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["sitemap"] == "valid"


async def test_readiness_fails_on_duplicate_urls(client, registry):
    registry.add_page("/services")
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "sitemap_invalid"


async def test_sitemap_xml(client):
    res = await client.get("/sitemap.xml")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/xml")
    assert res.text.count("<url>") == 6


async def test_robots_txt(client):
    res = await client.get("/robots.txt")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    assert "Sitemap: https://cryptoversus.io/sitemap.xml" in res.text


async def test_upsert_and_list_pages(client):
    res = await client.post("/api/v1/sitemap/pages", json={"url": "/blog", "priority": 0.4})
    assert res.status_code == 201
    assert res.json()["changefreq"] == "monthly"

    await client.post("/api/v1/sitemap/pages", json={"url": "/blog", "priority": 0.7})
    listing = (await client.get("/api/v1/sitemap/pages")).json()
    assert len(listing["static"]) == 6
    assert [p["url"] for p in listing["dynamic"]] == ["/blog"]
    assert listing["dynamic"][0]["priority"] == 0.7


async def test_new_page_appears_in_sitemap(client):
    await client.post("/api/v1/sitemap/pages", json={"url": "/news", "changefreq": "daily"})
    res = await client.get("/sitemap.xml")
    assert "<loc>https://cryptoversus.io/news</loc>" in res.text


async def test_upsert_rejects_out_of_range_priority(client):
    res = await client.post("/api/v1/sitemap/pages", json={"url": "/x", "priority": 1.5})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "body.priority"


async def test_upsert_rejects_unknown_changefreq(client):
    res = await client.post("/api/v1/sitemap/pages", json={"url": "/x", "changefreq": "biweekly"})
    assert res.status_code == 400


async def test_delete_page(client):
    await client.post("/api/v1/sitemap/pages", json={"url": "/tmp"})
    res = await client.delete("/api/v1/sitemap/pages", params={"url": "/tmp"})
    assert res.status_code == 200
    assert res.json()["url"] == "/tmp"


async def test_delete_unknown_page_is_404(client):
    res = await client.delete("/api/v1/sitemap/pages", params={"url": "/missing"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_validation_endpoint(client, registry):
    res = await client.get("/api/v1/sitemap/validation")
    assert res.json() == {"is_valid": True, "errors": [], "warnings": [], "total_pages": 6}


async def test_stats_endpoint(client):
    await client.post("/api/v1/sitemap/pages", json={"url": "/extra", "priority": 0.5})
    stats = (await client.get("/api/v1/sitemap/stats")).json()
    assert stats["total_pages"] == 7
    assert stats["dynamic_pages"] == 1
    assert stats["priority_distribution"]["0.5"] == 1


async def test_seo_request_envelope(client):
    res = await client.post("/api/v1/seo/requests", json={"path": "/robots.txt"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["mime_type"] == "text/plain"


async def test_seo_request_unknown_resource(client):
    res = await client.post("/api/v1/seo/requests", json={"path": "/humans.txt"})
    assert res.json()["success"] is False
    assert res.json()["error"] == "Unknown SEO resource"


async def test_render_page_head(client):
    res = await client.get("/api/v1/seo/pages/services")
    assert res.status_code == 200
    body = res.json()
    assert body["summary"]["page_id"] == "services"
    assert body["summary"]["meta_tags"] == 28
    assert body["health"]["status"] == "healthy"
    assert "<title>Our Services - CryptoVersus.io</title>" in body["head"]
    assert body["head"].count('data-schema="true"') == 4
    assert body["history"] == ["/", "/services"]


async def test_render_unknown_page_falls_back_to_home(client):
    body = (await client.get("/api/v1/seo/pages/pricing")).json()
    assert body["summary"]["page_id"] == "home"
    assert body["summary"]["canonical"] == "/"
    assert body["history"] == ["/"]


async def test_seo_request_requires_exact_path(client):
    res = await client.post("/api/v1/seo/requests", json={"path": "//sitemap.xml"})
    assert res.json() == {
        "success": False, "content": None, "mime_type": None,
        "error": "Unknown SEO resource",
    }


async def test_hash_download_is_an_attachment(client):
    res = await client.get("/api/v1/seo/downloads", params={"fragment": "#sitemap.xml"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/xml")
    assert res.headers["content-disposition"] == 'attachment; filename="sitemap.xml"'
    assert res.text.count("<url>") == 6


@pytest.mark.parametrize("fragment", ["#feed", "robots.txt", "#robots"])
async def test_unknown_download_is_404(client, fragment):
    res = await client.get("/api/v1/seo/downloads", params={"fragment": fragment})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_history_change_resyncs_without_pushing(client):
    res = await client.post("/api/v1/seo/history", json={"path": "/about"})
    assert res.status_code == 200
    body = res.json()
    assert body["summary"]["page_id"] == "about"
    assert body["history"] == ["/about"]
    assert body["health"]["navigation"]["current_path"] == "/about"


async def test_history_change_to_unknown_path_renders_home(client):
    body = (await client.post("/api/v1/seo/history", json={"path": "/nope"})).json()
    assert body["summary"]["page_id"] == "home"


async def test_sharing_buttons_rendered_into_container(client):
    res = await client.post(
        "/api/v1/seo/pages/services/sharing",
        json={"html": SHARE_PAGE, "container_id": "share-bar"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["page_id"] == "services"
    assert body["links"] == 5
    assert body["html"].count('target="_blank"') == 5
    assert "social-share-reddit" in body["html"]


async def test_sharing_buttons_without_container_is_409(client):
    res = await client.post(
        "/api/v1/seo/pages/home/sharing",
        json={"html": SHARE_PAGE, "container_id": "footer-share"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DOM_PRECONDITION_FAILED"


async def test_content_analysis(client):
    res = await client.post("/api/v1/seo/content/analysis", json={"content": ARTICLE})
    assert res.status_code == 200
    body = res.json()
    assert body["description"].startswith("Crypto exchange guide")
    assert body["keywords"][0] == "bitcoin"
    audit = body["audit"]
    assert audit["headings"]["h1"] == 1
    assert audit["images_without_alt"] == 1
    assert audit["score"] == 80


async def test_content_analysis_rejects_tiny_description_length(client):
    res = await client.post(
        "/api/v1/seo/content/analysis", json={"content": ARTICLE, "max_length": 5},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.max_length"
