"""Social sharing buttons — appends share links for a page into a body container."""

import logging

from seosync.core.domain_types import PageId
from seosync.core.errors import DomPreconditionError
from seosync.core.result import Err, Result, from_try
from seosync.core.site_config import SiteConfig, merged_page_config
from seosync.core.social_sharing import SHARING_PLATFORMS, generate_sharing_urls
from seosync.infrastructure.soup_document import SoupDocument

logger = logging.getLogger(__name__)

_LABELS = {
    "twitter": "Twitter",
    "facebook": "Facebook",
    "linkedin": "LinkedIn",
    "reddit": "Reddit",
    "email": "Email",
}


def _anchors(urls: dict[str, str]) -> list[dict[str, str]]:
    return [
        {
            "href": urls[platform],
            "target": "_blank",
            "rel": "noopener noreferrer",
            "class": f"social-share-{platform}",
            "text": f"Share on {_LABELS[platform]}",
        }
        for platform in SHARING_PLATFORMS
    ]


def add_sharing_buttons(
    document: SoupDocument, container_id: str,
    page_id: str | PageId | None, site: SiteConfig,
) -> Result:
    """Ok(number of links appended), or Err(DomPreconditionError) without a container."""
    if document.find_element(container_id) is None:
        logger.warning(f"Sharing container not found: {container_id}")
        return Err(DomPreconditionError(container_id))

    config = merged_page_config(site, page_id)
    return (
        generate_sharing_urls(
            config.title, config.description or "", site.absolute_url(config.canonical),
        )
        .and_then(lambda urls: from_try(
            document.append_links, container_id, _anchors(urls), component="social.buttons",
        ))
    )
