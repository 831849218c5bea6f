"""Orphan scanner: applies the classifier to every page of the graph."""

import logging
from typing import List

from orphan_cleanup.services.classifier import (
    has_no_inbound_links,
    is_content_empty,
    is_protected_page,
)

logger = logging.getLogger(__name__)


async def find_orphaned_pages(host, protect_journals: bool = False) -> List[str]:
    """Return the canonical names of all orphaned pages, in host order.

    *host* is anything exposing the async ``get_all_pages``,
    ``get_page_blocks_tree`` and ``get_page_linked_references`` calls of
    :class:`~orphan_cleanup.services.logseq_client.LogseqClient`.

    Host calls are issued one page at a time and only when needed: protected
    pages are skipped before any lookup, and references are fetched only for
    pages already known to be empty.  A failed lookup skips that page with a
    warning; a failure listing the pages propagates to the caller.
    """
    pages = await host.get_all_pages()
    orphans: List[str] = []

    for page in pages:
        if is_protected_page(page, protect_journals):
            logger.debug("Scanner: skipping protected page %s", page.name)
            continue

        lookup = page.lookup_name
        try:
            blocks = await host.get_page_blocks_tree(lookup)
            if not is_content_empty(page, blocks, protect_journals):
                continue
            references = await host.get_page_linked_references(lookup)
        except Exception as exc:
            logger.warning("Scanner: skipping %s – %s", page.name, exc)
            continue

        if has_no_inbound_links(references):
            orphans.append(page.name)

    logger.info("Scanner: %d orphaned page(s) out of %d", len(orphans), len(pages))
    return orphans
