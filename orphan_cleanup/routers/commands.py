import logging

from fastapi import APIRouter, HTTPException, Request

from orphan_cleanup.models.command import RegistrationList
from orphan_cleanup.models.orphan_request import CleanupRequest
from orphan_cleanup.models.orphan_response import CleanupResponse
from orphan_cleanup.routers.orphans import execute_cleanup, limiter
from orphan_cleanup.services.commands import REGISTRATIONS, get_command

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/commands", tags=["Commands"])


@router.get("", response_model=RegistrationList, summary="List host registrations")
async def list_commands() -> RegistrationList:
    """Command palette entries and toolbar items the host should register."""
    return REGISTRATIONS


@router.post(
    "/{key}",
    response_model=CleanupResponse,
    summary="Trigger a registered command",
    description=(
        "Invoked by the host when the user picks the palette entry, presses "
        "the keybinding or clicks the toolbar button.  The body carries the "
        "user's answer to the confirmation prompt."
    ),
)
@limiter.limit("5/minute")
async def trigger_command(request: Request, key: str, body: CleanupRequest) -> CleanupResponse:
    try:
        entry = get_command(key)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown command '{key}'.")

    logger.info("Command triggered", extra={"key": entry.key})
    return await execute_cleanup(body.confirm, body.protect_journals, body.expected)
