"""Meta Tag Manager — replaces the document's meta/link tags for a page.

Invariants:
    - Full replace, never a diff: managed tags are removed before any group is appended
    - Every group is attempted even when an earlier one failed
    - A group is appended whole or not at all; groups appended before a later
      failure stay applied (best effort, not transactional)
    - Any group failure makes the whole call an Err aggregating the group names

Design Decisions:
    - Groups injected as a table (default core.meta_tags.TAG_GROUPS) so a
      failing builder can be exercised without monkeypatching
"""

import logging
from typing import Callable

from seosync.core.domain_types import PageId
from seosync.core.errors import ErrorContext, GenerationError
from seosync.core.meta_tags import TAG_GROUPS
from seosync.core.ports import DocumentHeadPort
from seosync.core.result import Err, Ok, Result, from_try
from seosync.core.site_config import ResolvedPageConfig, SiteConfig, merged_page_config

logger = logging.getLogger(__name__)

TagGroupTable = tuple[tuple[str, Callable[[ResolvedPageConfig], Result]], ...]


class MetaTagManager:
    """Owns the <title>, <meta> and non-stylesheet <link> region of the head."""

    def __init__(
        self, head: DocumentHeadPort, site: SiteConfig,
        groups: TagGroupTable = TAG_GROUPS,
    ):
        self._head = head
        self._site = site
        self._groups = groups

    def update_meta_tags(self, page_id: str | PageId | None) -> Result:
        """Returns Ok(number of tags appended) or Err(GenerationError)."""
        config = merged_page_config(self._site, page_id)
        return (
            from_try(self._apply, config, component="meta_tags")
            .and_then(lambda result: result)
        )

    def _apply(self, config: ResolvedPageConfig) -> Result:
        self._head.set_title(config.title)
        self._head.remove_managed_tags()

        appended = 0
        failed: list[tuple[str, Exception]] = []
        for name, generate in self._groups:
            result = generate(config)
            if result.is_ok:
                appended += self._head.append_tags(result.value)
            else:
                failed.append((name, result.error))

        if failed:
            names = ", ".join(name for name, _ in failed)
            logger.error(
                f"Meta tag groups failed for page {config.page_id.value}: {names}",
                extra={"page_id": config.page_id.value, "error_code": "GENERATION_FAILED"},
            )
            return Err(GenerationError(
                f"Failed to generate meta tags: {names}",
                component="meta_tags",
                causes=[error for _, error in failed],
                context=ErrorContext(page_id=config.page_id.value),
            ))

        logger.info(
            f"Updated meta tags for page: {config.page_id.value}",
            extra={"page_id": config.page_id.value, "tag_count": appended},
        )
        return Ok(appended)
