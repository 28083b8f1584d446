"""Structured Data — schema.org document generators and the page → generator table.

Invariants:
    - Every generated document carries @context "https://schema.org" and a non-empty @type
    - validate_schema checks exactly that and nothing more (nested shape is not validated)
    - Unknown page ids use the home generator set
    - A failing generator is skipped; the others still run

Design Decisions:
    - Generators are thunks over SiteConfig: the table holds callables, not
      documents, so every page change builds fresh objects (replace, never patch)
    - collect_page_schemas partitions results into ok/err explicitly instead of
      catching per iteration (ADR: partial success is a value, not control flow)
    - Serialization neutralizes "</" so a payload can never close its <script>
"""

import json
from typing import Callable

from seosync.core.domain_types import PageId, resolve_page_id
from seosync.core.errors import SchemaValidationError, SeoSyncError
from seosync.core.result import Err, Ok, Result, from_try, partition
from seosync.core.site_config import PAGE_SEO_CONFIG, SiteConfig

SCHEMA_CONTEXT = "https://schema.org"

SchemaGenerator = Callable[[SiteConfig], dict]


def _org_ref(site: SiteConfig) -> dict:
    return {"@type": "Organization", "name": site.site_name}


def organization_schema(site: SiteConfig) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": site.site_name,
        "url": site.site_url,
        "logo": f"{site.site_url}/images/logo.png",
        "description": "Leading provider of enterprise decentralized infrastructure solutions",
        "foundingDate": "2023",
        "sameAs": [
            "https://twitter.com/cryptoversus",
            "https://linkedin.com/company/cryptoversus",
            "https://github.com/cryptoversus",
        ],
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": "customer service",
            "email": "contact@cryptoversus.io",
            "url": f"{site.site_url}/contact",
        },
        "address": {
            "@type": "PostalAddress",
            "addressCountry": "US",
            "addressRegion": "Global",
        },
        "aggregateRating": {
            "@type": "AggregateRating",
            "ratingValue": "4.9",
            "reviewCount": "127",
            "bestRating": "5",
        },
    }


def website_schema(site: SiteConfig) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.site_name,
        "url": site.site_url,
        "description": "Enterprise decentralized infrastructure solutions and Web3 services",
        "publisher": {**_org_ref(site), "url": site.site_url},
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{site.site_url}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        },
    }


_SERVICES = (
    ("Blockchain Development",
     "Custom blockchain development and smart contract solutions for enterprises",
     "Technology Consulting"),
    ("DeFi Solutions",
     "Decentralized Finance solutions and protocol development",
     "Financial Technology"),
    ("Web3 Infrastructure",
     "Scalable Web3 infrastructure and decentralized application hosting",
     "Cloud Computing"),
)


def service_catalog_schema(site: SiteConfig) -> dict:
    """ItemList of the offered services."""
    items = []
    for position, (name, description, service_type) in enumerate(_SERVICES, start=1):
        items.append({
            "@type": "ListItem",
            "position": position,
            "item": {
                "@type": "Service",
                "name": name,
                "description": description,
                "provider": _org_ref(site),
                "serviceType": service_type,
                "audience": {"@type": "BusinessAudience", "audienceType": "Enterprise"},
            },
        })
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "itemListElement": items,
    }


_FAQS = (
    ("What is decentralized infrastructure?",
     "Decentralized infrastructure refers to distributed computing systems that operate "
     "without a central authority, providing increased security, transparency, and "
     "resilience compared to traditional centralized systems."),
    ("How can enterprises benefit from Web3 technology?",
     "Enterprises can benefit from Web3 through improved security, reduced intermediary "
     "costs, enhanced transparency, global accessibility, and innovative business models "
     "that weren't possible with traditional technology."),
    ("What services does CryptoVersus.io provide?",
     "We provide comprehensive decentralized infrastructure services including blockchain "
     "development, smart contract creation, DeFi solutions, Web3 consulting, and "
     "enterprise blockchain integration."),
    ("Is blockchain technology secure for enterprise use?",
     "Yes, when properly implemented, blockchain technology offers superior security "
     "through cryptographic protection, distributed consensus, and immutable "
     "record-keeping, making it ideal for enterprise applications."),
    ("How long does a typical blockchain project take?",
     "Project timelines vary based on complexity, but typical enterprise blockchain "
     "implementations range from 3-12 months, including planning, development, testing, "
     "and deployment phases."),
)


def faq_schema(site: SiteConfig) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            }
            for question, answer in _FAQS
        ],
    }


def offering_schema(site: SiteConfig) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": "Enterprise Decentralized Infrastructure",
        "description": "Comprehensive Web3 and blockchain infrastructure solutions for enterprises",
        "brand": {"@type": "Brand", "name": site.site_name},
        "category": "Business Software",
        "manufacturer": _org_ref(site),
        "offers": {
            "@type": "Offer",
            "availability": "https://schema.org/InStock",
            "price": "Contact for pricing",
            "priceCurrency": "USD",
            "priceValidUntil": "2025-12-31",
            "seller": _org_ref(site),
        },
    }


def local_business_schema(site: SiteConfig) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ProfessionalService",
        "name": site.site_name,
        "image": f"{site.site_url}/images/logo.png",
        "description": "Professional decentralized infrastructure and blockchain development services",
        "url": site.site_url,
        "telephone": "+1-555-CRYPTO",
        "email": "contact@cryptoversus.io",
        "address": {
            "@type": "PostalAddress",
            "addressCountry": "US",
            "addressRegion": "Global",
        },
        "geo": {"@type": "GeoCoordinates", "latitude": "40.7128", "longitude": "-74.0060"},
        "openingHoursSpecification": {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "opens": "09:00",
            "closes": "18:00",
        },
        "priceRange": "$$$$",
    }


def breadcrumb_schema(site: SiteConfig, trail: list[tuple[str, str]] | None = None) -> dict:
    """BreadcrumbList starting at Home; trail holds (name, absolute url) pairs."""
    crumbs = [("Home", site.site_url), *(trail or [])]
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": name, "item": url}
            for i, (name, url) in enumerate(crumbs, start=1)
        ],
    }


def _page_breadcrumb(page_id: PageId, label: str) -> SchemaGenerator:
    canonical = PAGE_SEO_CONFIG[page_id].canonical

    def generate(site: SiteConfig) -> dict:
        return breadcrumb_schema(site, [(label, site.absolute_url(canonical))])

    generate.__name__ = f"breadcrumb_{page_id.value}_schema"
    return generate


PAGE_SCHEMAS: dict[PageId, tuple[SchemaGenerator, ...]] = {
    PageId.HOME: (organization_schema, website_schema, offering_schema),
    PageId.SERVICES: (
        organization_schema, service_catalog_schema, offering_schema,
        _page_breadcrumb(PageId.SERVICES, "Services"),
    ),
    PageId.ABOUT: (
        organization_schema, local_business_schema,
        _page_breadcrumb(PageId.ABOUT, "About"),
    ),
    PageId.CONTACT: (
        organization_schema, local_business_schema,
        _page_breadcrumb(PageId.CONTACT, "Contact"),
    ),
    PageId.FAQS: (
        organization_schema, faq_schema,
        _page_breadcrumb(PageId.FAQS, "FAQs"),
    ),
    PageId.MISSION: (
        organization_schema,
        _page_breadcrumb(PageId.MISSION, "Mission"),
    ),
}


def validate_schema(doc: object) -> Result:
    """Ok(True) when doc is an object with @context and @type."""
    if not isinstance(doc, dict):
        return Err(SchemaValidationError("Schema data must be an object"))
    if not doc.get("@context") or not doc.get("@type"):
        return Err(SchemaValidationError("Schema must have @context and @type properties"))
    return Ok(True)


def generate_schema(generator: SchemaGenerator, site: SiteConfig) -> Result:
    """Run one generator and validate its output."""
    name = getattr(generator, "__name__", "schema")
    return (
        from_try(generator, site, component=f"schemas.{name}")
        .and_then(lambda doc: validate_schema(doc).map(lambda _: doc))
    )


def collect_page_schemas(
    page_id: str | PageId | None,
    site: SiteConfig,
    table: dict[PageId, tuple[SchemaGenerator, ...]] | None = None,
) -> tuple[list[dict], list[SeoSyncError]]:
    """Run every generator for the page. Returns (documents, errors)."""
    table = PAGE_SCHEMAS if table is None else table
    generators = table.get(resolve_page_id(page_id)) or table[PageId.HOME]
    return partition(generate_schema(g, site) for g in generators)


def serialize_schema(doc: dict) -> str:
    """Pretty-printed JSON safe to embed in a <script> element."""
    return json.dumps(doc, indent=2, ensure_ascii=False).replace("</", "<\\/")
