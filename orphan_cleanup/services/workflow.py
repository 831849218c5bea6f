"""Scan → confirm → delete → report, as one run of a small state machine."""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from orphan_cleanup.services.scanner import find_orphaned_pages

logger = logging.getLogger(__name__)

CONFIRM_TITLE = "Cleanup Orphaned Pages"
DEFAULT_DISPLAY_LIMIT = 10


class WorkflowState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    NONE_FOUND = "none_found"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CANCELLED = "cancelled"
    DELETING = "deleting"
    REPORTED = "reported"
    FAILED = "failed"


class CleanupResult(NamedTuple):
    outcome: str  # none_found | cancelled | deleted | error
    orphans: List[str]
    deleted: List[str]
    prompt: Optional[str]
    message: str


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def format_confirmation(names: Sequence[str], limit: int = DEFAULT_DISPLAY_LIMIT) -> str:
    """Build the confirmation prompt for *names*.

    At most *limit* names are listed; the rest are summarised as ``(+N more)``.
    """
    count = len(names)
    listing = ", ".join(names[:limit])
    if count > limit:
        listing += f" (+{count - limit} more)"
    pronoun = "it" if count == 1 else "them"
    return f"Found {count} orphaned page{_plural(count)}: {listing}. Delete {pronoun}?"


class OrphanCleanupWorkflow:
    """Drive one cleanup run against *host*, talking to the user through *ui*.

    Pages are deleted strictly one after another in scan order, so after a
    failure the first ``len(result.deleted)`` candidates are gone and the
    rest are untouched.
    """

    def __init__(
        self,
        host,
        ui,
        protect_journals: bool = False,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
    ):
        self.host = host
        self.ui = ui
        self.protect_journals = protect_journals
        self.display_limit = display_limit
        self.state = WorkflowState.IDLE

    async def run(self) -> CleanupResult:
        orphans: List[str] = []
        deleted: List[str] = []
        prompt: Optional[str] = None

        try:
            self.state = WorkflowState.SCANNING
            await self.ui.notify("Scanning for orphaned pages...", "info")
            orphans = await find_orphaned_pages(self.host, self.protect_journals)

            if not orphans:
                self.state = WorkflowState.NONE_FOUND
                message = "No orphaned pages found!"
                await self.ui.notify(message, "success")
                return self._finish(CleanupResult("none_found", orphans, deleted, None, message))

            self.state = WorkflowState.AWAITING_CONFIRMATION
            prompt = format_confirmation(orphans, self.display_limit)
            if not await self.ui.confirm(prompt, CONFIRM_TITLE, orphans):
                self.state = WorkflowState.CANCELLED
                message = "Cleanup cancelled"
                await self.ui.notify(message, "info")
                return self._finish(CleanupResult("cancelled", orphans, deleted, prompt, message))

            self.state = WorkflowState.DELETING
            for name in orphans:
                await self.host.delete_page(name)
                deleted.append(name)

            self.state = WorkflowState.REPORTED
            message = f"Successfully deleted {len(deleted)} orphaned page{_plural(len(deleted))}!"
            await self.ui.notify(message, "success")
            return self._finish(CleanupResult("deleted", orphans, deleted, prompt, message))
        except Exception as exc:
            logger.exception("Error removing orphaned pages (state=%s)", self.state.value)
            self.state = WorkflowState.FAILED
            message = f"Error: {exc}"
            await self.ui.notify(message, "error")
            return self._finish(CleanupResult("error", orphans, deleted, prompt, message))

    def _finish(self, result: CleanupResult) -> CleanupResult:
        logger.info(
            "Cleanup finished: outcome=%s orphans=%d deleted=%d",
            result.outcome,
            len(result.orphans),
            len(result.deleted),
        )
        self.state = WorkflowState.IDLE
        return result
