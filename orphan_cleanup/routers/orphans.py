import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from orphan_cleanup.models.orphan_request import CleanupRequest
from orphan_cleanup.models.orphan_response import CleanupResponse, ScanResponse
from orphan_cleanup.services.logseq_client import LogseqAPIError, LogseqClient
from orphan_cleanup.services.notifier import RecordingUI
from orphan_cleanup.services.scanner import find_orphaned_pages
from orphan_cleanup.services.workflow import OrphanCleanupWorkflow, format_confirmation
from orphan_cleanup.settings import Settings, get_settings

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/orphans", tags=["Orphans"])

_MISSING_TOKEN = "LOGSEQ_API_TOKEN is not set; create a token in Logseq's API server settings."


@router.get("", response_model=ScanResponse, summary="List orphaned pages")
@limiter.limit("30/minute")
async def scan_orphans(request: Request, protect_journals: Optional[bool] = None) -> ScanResponse:
    """Scan the graph and return orphaned page names without deleting anything."""
    settings = get_settings()
    _require_token(settings)
    protect = settings.ORPHAN_PROTECT_JOURNALS if protect_journals is None else protect_journals
    logger.info("Scan request received", extra={"protect_journals": protect})

    try:
        orphans = await find_orphaned_pages(_get_host(), protect)
    except ValidationError as exc:
        # Malformed page data is a host fault.
        logger.error("Unexpected page data from Logseq: %s", exc)
        raise HTTPException(status_code=502, detail="Logseq returned malformed page data.")
    except ValueError as exc:
        logger.warning("Scan rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except httpx.TimeoutException:
        logger.error("Timeout talking to Logseq at %s", settings.LOGSEQ_API_URL)
        raise HTTPException(status_code=504, detail="The Logseq API timed out.")
    except httpx.HTTPStatusError as exc:
        logger.error("Logseq API error: %s", exc)
        raise HTTPException(
            status_code=502, detail=f"Logseq API returned HTTP {exc.response.status_code}."
        )
    except (httpx.RequestError, LogseqAPIError) as exc:
        logger.error("Error scanning Logseq graph: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))

    prompt = format_confirmation(orphans, settings.ORPHAN_DISPLAY_LIMIT) if orphans else None
    return ScanResponse(orphans=orphans, count=len(orphans), prompt=prompt)


@router.post(
    "/cleanup",
    response_model=CleanupResponse,
    summary="Scan, confirm and delete orphaned pages",
    description=(
        "Runs the full cleanup workflow.  The request's `confirm` field is the "
        "answer to the confirmation prompt and `expected` the list it was given "
        "for (the `orphans` of `GET /orphans`).  With `false` the orphans are "
        "reported and the run is cancelled; with `true` they are deleted one by "
        "one in scan order, but only if a fresh scan finds exactly `expected`.  "
        "Deletions cannot be undone.  A failed run answers 502 with the same "
        "body, listing in `deleted` the pages removed before the failure."
    ),
)
@limiter.limit("5/minute")
async def cleanup_orphans(request: Request, body: CleanupRequest) -> CleanupResponse:
    return await execute_cleanup(body.confirm, body.protect_journals, body.expected)


async def execute_cleanup(
    confirm: bool,
    protect_journals: Optional[bool] = None,
    expected: Optional[List[str]] = None,
):
    """Run the cleanup workflow and translate its result for HTTP callers."""
    settings = get_settings()
    _require_token(settings)
    protect = settings.ORPHAN_PROTECT_JOURNALS if protect_journals is None else protect_journals

    host = _get_host()
    ui = RecordingUI(confirm, host=host if settings.ORPHAN_SHOW_NOTICES else None, expected=expected)
    workflow = OrphanCleanupWorkflow(
        host,
        ui,
        protect_journals=protect,
        display_limit=settings.ORPHAN_DISPLAY_LIMIT,
    )
    result = await workflow.run()

    response = CleanupResponse(
        outcome=result.outcome,
        orphans=result.orphans,
        deleted=result.deleted,
        prompt=result.prompt,
        message=result.message,
        notices=ui.notices,
    )
    if result.outcome == "error":
        return JSONResponse(status_code=502, content=response.model_dump())
    return response


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _get_host() -> LogseqClient:
    return LogseqClient.from_settings(get_settings())


def _require_token(settings: Settings) -> None:
    """Reject the request before any Logseq call when no token is configured."""
    if not settings.LOGSEQ_API_TOKEN:
        logger.warning("Request rejected: %s", _MISSING_TOKEN)
        raise HTTPException(status_code=400, detail=_MISSING_TOKEN)
