"""Site Configuration — site-wide defaults and the per-page SEO table.

Invariants:
    - SiteConfig.site_url has no trailing slash; consumers concatenate it
      directly with canonical paths
    - Page lookup never fails: unknown identifiers resolve to the home config
    - Page fields override site defaults when merged; nothing is mutated

Design Decisions:
    - Frozen dataclasses, built once at startup and passed explicitly
      (ADR: no implicit module-level singletons in the per-navigation path)
    - The page table is static data keyed by PageId, not by raw strings
"""

from dataclasses import dataclass, replace

from seosync.core.domain_types import PageId, resolve_page_id


@dataclass(frozen=True)
class SiteConfig:
    """Process-wide metadata defaults."""
    site_name: str = "CryptoVersus.io"
    site_url: str = "https://cryptoversus.io"
    default_title: str = "CryptoVersus.io - Enterprise Decentralized Infrastructure"
    default_description: str = (
        "Leading provider of enterprise decentralized infrastructure solutions. "
        "AWS for the decentralized web with security, scalability, and innovation."
    )
    default_keywords: str = (
        "blockchain, decentralized infrastructure, enterprise web3, crypto solutions, "
        "decentralized web, blockchain development, enterprise blockchain"
    )
    default_image: str = "https://cryptoversus.io/images/og-image.jpg"
    twitter_handle: str = "@cryptoversus"
    author: str = "CryptoVersus Team"
    language: str = "en"
    locale: str = "en_US"

    def __post_init__(self):
        if self.site_url.endswith("/"):
            object.__setattr__(self, "site_url", self.site_url.rstrip("/"))

    def absolute_url(self, path: str) -> str:
        return f"{self.site_url}{path}"


@dataclass(frozen=True)
class PageSeoConfig:
    """Static per-page metadata record."""
    page_id: PageId
    title: str
    description: str
    keywords: str
    canonical: str
    type: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class ResolvedPageConfig:
    """A page record merged over the site defaults — what generators consume."""
    page_id: PageId
    title: str
    description: str
    keywords: str
    canonical: str
    type: str
    image: str
    site: SiteConfig


PAGE_SEO_CONFIG: dict[PageId, PageSeoConfig] = {
    PageId.HOME: PageSeoConfig(
        page_id=PageId.HOME,
        title="CryptoVersus.io - Enterprise Decentralized Infrastructure",
        description=(
            "Leading provider of enterprise decentralized infrastructure solutions. "
            "Transform your business with secure, scalable Web3 technology."
        ),
        keywords=(
            "enterprise blockchain, decentralized infrastructure, web3 solutions, "
            "blockchain development, crypto enterprise"
        ),
        canonical="/",
    ),
    PageId.SERVICES: PageSeoConfig(
        page_id=PageId.SERVICES,
        title="Our Services - CryptoVersus.io",
        description=(
            "Comprehensive decentralized infrastructure services including blockchain "
            "development, smart contracts, DeFi solutions, and enterprise Web3 consulting."
        ),
        keywords=(
            "blockchain services, smart contracts, DeFi, Web3 consulting, "
            "blockchain development services"
        ),
        canonical="/services",
    ),
    PageId.ABOUT: PageSeoConfig(
        page_id=PageId.ABOUT,
        title="About Us - CryptoVersus.io",
        description=(
            "Learn about CryptoVersus.io team and our mission to revolutionize "
            "enterprise infrastructure through decentralized technology."
        ),
        keywords=(
            "about cryptoversus, blockchain company, decentralized technology team, "
            "web3 experts"
        ),
        canonical="/about",
    ),
    PageId.CONTACT: PageSeoConfig(
        page_id=PageId.CONTACT,
        title="Contact Us - CryptoVersus.io",
        description=(
            "Get in touch with CryptoVersus.io experts for your enterprise decentralized "
            "infrastructure needs. Start your Web3 transformation today."
        ),
        keywords="contact cryptoversus, blockchain consultation, web3 experts contact",
        canonical="/contact",
    ),
    PageId.FAQS: PageSeoConfig(
        page_id=PageId.FAQS,
        title="FAQs - CryptoVersus.io",
        description=(
            "Frequently asked questions about CryptoVersus.io services, decentralized "
            "infrastructure, and enterprise blockchain solutions."
        ),
        keywords="blockchain FAQ, decentralized infrastructure questions, web3 FAQ",
        canonical="/faqs",
    ),
    PageId.MISSION: PageSeoConfig(
        page_id=PageId.MISSION,
        title="Our Mission - CryptoVersus.io",
        description=(
            "Discover CryptoVersus.io mission to democratize enterprise access to "
            "decentralized infrastructure and drive Web3 adoption."
        ),
        keywords="cryptoversus mission, web3 vision, decentralized infrastructure mission",
        canonical="/mission",
    ),
}


def get_page_config(page_id: str | PageId | None) -> PageSeoConfig:
    """Look up a page record. Unknown ids get the home record."""
    return PAGE_SEO_CONFIG[resolve_page_id(page_id)]


def merged_page_config(site: SiteConfig, page_id: str | PageId | None) -> ResolvedPageConfig:
    """Merge a page record over the site defaults."""
    page = get_page_config(page_id)
    return ResolvedPageConfig(
        page_id=page.page_id,
        title=page.title or site.default_title,
        description=page.description,
        keywords=page.keywords,
        canonical=page.canonical or "/",
        type=page.type or "website",
        image=page.image or site.default_image,
        site=site,
    )


def page_id_from_path(path: str | None) -> PageId:
    """Reverse lookup used on history (popstate) entry. Unknown paths → HOME."""
    normalized = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if normalized != "/":
        normalized = normalized.rstrip("/")
    for page in PAGE_SEO_CONFIG.values():
        if page.canonical == normalized:
            return page.page_id
    return PageId.HOME


def with_overrides(site: SiteConfig, **overrides: str | None) -> SiteConfig:
    """Copy of site with every non-empty override applied."""
    changes = {k: v for k, v in overrides.items() if v}
    return replace(site, **changes) if changes else site
