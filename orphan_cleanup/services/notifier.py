"""User-facing side of the cleanup workflow: notices and the confirmation prompt.

The workflow only needs two awaitables from its UI::

    await ui.notify(message, status)        # status: info | success | warning | error
    await ui.confirm(message, title, names) -> bool

``RecordingUI`` serves HTTP callers, who answer the prompt up front and get
the notices back in the response.  ``ConsoleUI`` serves the terminal.
"""

import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm
from rich.text import Text

from orphan_cleanup.models.orphan_response import Notice

logger = logging.getLogger(__name__)

_STATUS_STYLES = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
}


class RecordingUI:
    """Collects notices and answers the prompt with a preset *decision*.

    With *expected* set, the decision only applies to exactly that list of
    pages; any other scan result is declined.

    When *host* is given, each notice is also shown in Logseq as a toast.
    A toast that cannot be delivered is logged and otherwise ignored, so a
    flaky UI call never changes the outcome of a cleanup run.
    """

    def __init__(self, decision: bool, host=None, expected: Optional[Sequence[str]] = None):
        self.decision = decision
        self.expected = None if expected is None else list(expected)
        self.host = host
        self.notices: List[Notice] = []
        self.prompts: List[str] = []

    async def notify(self, message: str, status: str = "info") -> None:
        self.notices.append(Notice(message=message, status=status))
        if self.host is None:
            return
        try:
            await self.host.show_msg(message, status)
        except Exception as exc:
            logger.warning("Could not show notice in Logseq (%s): %s", message, exc)

    async def confirm(self, message: str, title: str, names: Sequence[str] = ()) -> bool:
        self.prompts.append(message)
        if not self.decision:
            return False
        if self.expected is not None and list(names) != self.expected:
            logger.warning("Orphan list changed since it was confirmed: %s", list(names))
            await self.notify("Orphaned pages changed since they were shown; nothing was deleted.", "warning")
            return False
        return True


class ConsoleUI:
    """Prints notices with rich and asks for confirmation on the terminal."""

    def __init__(self, console: Optional[Console] = None, assume_yes: bool = False):
        self.console = console or Console()
        self.assume_yes = assume_yes

    async def notify(self, message: str, status: str = "info") -> None:
        self.console.print(message, style=_STATUS_STYLES.get(status), markup=False)

    async def confirm(self, message: str, title: str, names: Sequence[str] = ()) -> bool:
        self.console.print(f"[bold]{title}[/bold]")
        if self.assume_yes:
            self.console.print(message, markup=False)
            return True
        return Confirm.ask(Text(message), console=self.console, default=False)
