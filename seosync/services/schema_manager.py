"""Schema Manager — replaces the document's JSON-LD scripts for a page.

Invariants:
    - Every script carrying the data-schema marker is removed, whatever its type
    - A failing generator (or serialization) is logged and skipped; the rest are inserted
    - Returns the number of scripts actually inserted

Design Decisions:
    - collect → partition → serialize → replace: failures are values in the
      err partition, never caught per loop iteration
"""

import logging

from seosync.core.domain_types import PageId, resolve_page_id
from seosync.core.ports import DocumentHeadPort
from seosync.core.result import Ok, Result, from_try, partition
from seosync.core.schemas import (
    PAGE_SCHEMAS, SchemaGenerator, collect_page_schemas, serialize_schema,
)
from seosync.core.site_config import SiteConfig

logger = logging.getLogger(__name__)


class SchemaManager:
    """Owns the structured-data scripts of the head."""

    def __init__(
        self, head: DocumentHeadPort, site: SiteConfig,
        table: dict[PageId, tuple[SchemaGenerator, ...]] | None = None,
    ):
        self._head = head
        self._site = site
        self._table = PAGE_SCHEMAS if table is None else table

    def update_page_schemas(self, page_id: str | PageId | None) -> Result:
        resolved = resolve_page_id(page_id)
        return (
            from_try(self._apply, resolved, component="schemas")
            .and_then(lambda result: result)
        )

    def _apply(self, page_id: PageId) -> Result:
        docs, generation_errors = collect_page_schemas(page_id, self._site, self._table)
        payloads, serialization_errors = partition(
            from_try(serialize_schema, doc, component="schemas.serialize") for doc in docs
        )
        for error in generation_errors + serialization_errors:
            logger.warning(
                f"Schema generation failed: {error.message}",
                extra={
                    "page_id": page_id.value,
                    "component": error.context.component,
                    "error_code": error.code,
                },
            )

        inserted = self._head.replace_schema_scripts(payloads)
        logger.info(
            f"Updated {inserted} schemas for page: {page_id.value}",
            extra={"page_id": page_id.value, "schema_count": inserted},
        )
        return Ok(inserted)
