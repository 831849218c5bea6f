"""Page disposition rules for orphan detection.

Three independent predicates decide whether a page may be removed:

``is_protected_page``
    System pages that are never candidates: anything under the ``logseq/``
    namespace and the built-in ``contents``, ``favorites`` and ``card``
    pages.  Journal pages join this group only when the caller asks for it.

``is_content_empty``
    The page holds no meaningful text: no top-level blocks at all, or a
    single block that is blank or just a bullet marker (``-`` / ``*``).

``has_no_inbound_links``
    No other page references this one.

An orphan is a page that is not protected, is empty and has no inbound
links.  None of these functions perform I/O.
"""

from typing import Optional, Sequence

from orphan_cleanup.models.page import BlockModel, PageModel

SYSTEM_NAMESPACE_PREFIX = "logseq/"

PROTECTED_PAGE_NAMES = frozenset({"contents", "favorites", "card"})

# Content a freshly created page's single placeholder block may hold.
_PLACEHOLDER_CONTENT = frozenset({"", "-", "*"})


def _is_reserved(page: PageModel, protect_journals: bool) -> bool:
    if page.name.startswith(SYSTEM_NAMESPACE_PREFIX):
        return True
    if page.name.lower() in PROTECTED_PAGE_NAMES:
        return True
    return protect_journals and page.journal


def is_protected_page(page: PageModel, protect_journals: bool = False) -> bool:
    """Return True when *page* must never be treated as orphaned.

    Args:
        page: The page to classify.
        protect_journals: Also protect journal (date) pages.  Off by default,
            so empty unreferenced journal entries are cleaned up like any
            other page.
    """
    return _is_reserved(page, protect_journals)


def is_content_empty(
    page: PageModel,
    blocks: Optional[Sequence[BlockModel]],
    protect_journals: bool = False,
) -> bool:
    """Return True when *page* carries no meaningful content.

    Protected pages always report False, even with zero blocks.  Only the
    number of top-level blocks and, when there is exactly one, its stripped
    content are considered.
    """
    if _is_reserved(page, protect_journals):
        return False

    if not blocks:
        return True
    if len(blocks) > 1:
        return False

    content = blocks[0].content
    return content is None or content.strip() in _PLACEHOLDER_CONTENT


def has_no_inbound_links(references: Optional[Sequence[object]]) -> bool:
    """Return True when *references* is missing or empty."""
    return not references
