"""Tests for structured-data generators, validation, and per-page collection."""

import json

import pytest

from seosync.core.domain_types import PageId
from seosync.core.errors import SchemaValidationError
from seosync.core.schemas import (
    PAGE_SCHEMAS, SCHEMA_CONTEXT, breadcrumb_schema, collect_page_schemas,
    organization_schema, serialize_schema, validate_schema,
)


def _types(docs):
    return [d["@type"] for d in docs]


@pytest.mark.parametrize("page_id", list(PageId))
def test_every_generated_document_validates(site, page_id):
    docs, errors = collect_page_schemas(page_id, site)
    assert errors == []
    assert docs
    for doc in docs:
        assert doc["@context"] == SCHEMA_CONTEXT
        assert validate_schema(doc).is_ok


def test_home_schemas(site):
    docs, _ = collect_page_schemas("home", site)
    assert _types(docs) == ["Organization", "WebSite", "Product"]


def test_services_schemas_include_catalog_and_breadcrumb(site):
    docs, _ = collect_page_schemas("services", site)
    assert _types(docs) == ["Organization", "ItemList", "Product", "BreadcrumbList"]
    crumbs = docs[-1]["itemListElement"]
    assert crumbs[0]["name"] == "Home"
    assert crumbs[1]["item"] == "https://cryptoversus.io/services"
    assert [c["position"] for c in crumbs] == [1, 2]


def test_faqs_page_has_faq_schema(site):
    docs, _ = collect_page_schemas("faqs", site)
    faq = next(d for d in docs if d["@type"] == "FAQPage")
    assert len(faq["mainEntity"]) == 5
    assert faq["mainEntity"][0]["acceptedAnswer"]["@type"] == "Answer"


def test_unknown_page_uses_home_generators(site):
    unknown, _ = collect_page_schemas("pricing", site)
    home, _ = collect_page_schemas("home", site)
    assert unknown == home


def test_validate_schema_rejects_non_object():
    result = validate_schema(["not", "a", "dict"])
    assert isinstance(result.error, SchemaValidationError)
    assert result.error.message == "Schema data must be an object"


@pytest.mark.parametrize("doc", [
    {"@type": "Thing"},
    {"@context": SCHEMA_CONTEXT},
    {"@context": SCHEMA_CONTEXT, "@type": ""},
])
def test_validate_schema_requires_context_and_type(doc):
    result = validate_schema(doc)
    assert result.error.message == "Schema must have @context and @type properties"
    assert result.error.http_status == 422


def test_failing_generator_is_skipped(site):
    def broken(_site):
        raise RuntimeError("generator exploded")

    def invalid(_site):
        return {"name": "no type"}

    table = {PageId.HOME: (organization_schema, broken, invalid)}
    docs, errors = collect_page_schemas("home", site, table)
    assert _types(docs) == ["Organization"]
    assert [e.code for e in errors] == ["GENERATION_FAILED", "SCHEMA_INVALID"]
    assert errors[0].context.component == "schemas.broken"


def test_serialize_schema_is_pretty_and_script_safe():
    doc = {"@context": SCHEMA_CONTEXT, "@type": "Thing", "name": "</script><b>café"}
    payload = serialize_schema(doc)
    assert "</script>" not in payload
    assert "\n  " in payload
    assert "café" in payload
    assert json.loads(payload)["name"] == "</script><b>café"


def test_breadcrumb_without_trail_is_home_only(site):
    doc = breadcrumb_schema(site)
    assert doc["itemListElement"] == [
        {"@type": "ListItem", "position": 1, "name": "Home", "item": site.site_url},
    ]


def test_every_page_has_a_schema_table_entry():
    assert set(PAGE_SCHEMAS) == set(PageId)
