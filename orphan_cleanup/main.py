import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from orphan_cleanup.logging_config import setup_logging
from orphan_cleanup.routers.commands import router as commands_router
from orphan_cleanup.routers.orphans import limiter, router as orphans_router
from orphan_cleanup.settings import get_settings

setup_logging(get_settings().LOG_LEVEL)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Orphan Cleanup – Logseq maintenance API",
    description="Finds pages with no content and no inbound links in a Logseq graph and removes them.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(orphans_router)
app.include_router(commands_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Orphan Cleanup"}
