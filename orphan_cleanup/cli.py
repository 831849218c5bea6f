import asyncio
import json
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from orphan_cleanup.logging_config import setup_logging
from orphan_cleanup.services.commands import REGISTRATIONS
from orphan_cleanup.services.logseq_client import LogseqAPIError, LogseqClient
from orphan_cleanup.services.notifier import ConsoleUI
from orphan_cleanup.services.scanner import find_orphaned_pages
from orphan_cleanup.services.workflow import OrphanCleanupWorkflow, format_confirmation
from orphan_cleanup.settings import get_settings

app = typer.Typer(
    add_completion=False,
    help="orphan-cleanup: find and remove empty, unreferenced Logseq pages",
    rich_markup_mode="rich",
)
console = Console()


def _resolve_protect(protect_journals: Optional[bool]) -> bool:
    if protect_journals is None:
        return get_settings().ORPHAN_PROTECT_JOURNALS
    return protect_journals


def _host() -> LogseqClient:
    return LogseqClient.from_settings(get_settings())


@app.callback()
def _root() -> None:
    setup_logging(get_settings().LOG_LEVEL)


@app.command("scan", help="[bold cyan]S[/bold cyan]can for orphaned pages (read-only)")
def scan(
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
    protect_journals: Optional[bool] = typer.Option(
        None,
        "--protect-journals/--include-journals",
        help="Keep empty journal pages (default: ORPHAN_PROTECT_JOURNALS)",
    ),
):
    try:
        orphans = asyncio.run(find_orphaned_pages(_host(), _resolve_protect(protect_journals)))
    except (ValueError, httpx.HTTPError, LogseqAPIError) as exc:
        console.print(f"Error: {exc}", style="bold red", markup=False)
        raise typer.Exit(code=1)

    if json_out:
        print(json.dumps({"orphans": orphans, "count": len(orphans)}, ensure_ascii=False))
        return

    if not orphans:
        console.print("[green]No orphaned pages found![/green]")
        return

    console.print(format_confirmation(orphans, get_settings().ORPHAN_DISPLAY_LIMIT), markup=False)


@app.command("clean", help="[bold cyan]C[/bold cyan]lean up orphaned pages after confirmation")
def clean(
    yes: bool = typer.Option(False, "--yes", "-y", help="Delete without asking"),
    protect_journals: Optional[bool] = typer.Option(
        None,
        "--protect-journals/--include-journals",
        help="Keep empty journal pages (default: ORPHAN_PROTECT_JOURNALS)",
    ),
):
    settings = get_settings()
    workflow = OrphanCleanupWorkflow(
        _host(),
        ConsoleUI(console, assume_yes=yes),
        protect_journals=_resolve_protect(protect_journals),
        display_limit=settings.ORPHAN_DISPLAY_LIMIT,
    )
    result = asyncio.run(workflow.run())
    if result.outcome == "error":
        raise typer.Exit(code=1)


@app.command("commands", help="List the command and toolbar registrations")
def commands():
    table = Table(title="Registrations")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Key", no_wrap=True)
    table.add_column("Label")
    table.add_column("Binding", no_wrap=True)

    for cmd in REGISTRATIONS.commands:
        binding = cmd.keybinding.binding if cmd.keybinding else ""
        table.add_row("command", cmd.key, cmd.label, binding)
    for item in REGISTRATIONS.toolbar:
        table.add_row("toolbar", item.key, item.title, "")

    console.print(table)


@app.command("serve", help="[bold cyan]R[/bold cyan]un the HTTP API server")
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(8124, help="Port to bind"),
):
    import uvicorn

    uvicorn.run("orphan_cleanup.main:app", host=host, port=port)


def main():
    app()


if __name__ == "__main__":
    main()
