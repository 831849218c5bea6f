"""Runtime configuration, loaded from environment variables and ``.env``."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the Logseq connection and the cleanup workflow.

    Notes:
    - The Logseq HTTP API server must be enabled in the desktop app and an
      authorization token created there.
    - ``ORPHAN_PROTECT_JOURNALS`` decides whether empty, unreferenced journal
      pages are kept (``True``) or treated like any other page (``False``).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logseq HTTP API
    LOGSEQ_API_URL: str = Field(default="http://127.0.0.1:12315/api")
    LOGSEQ_API_TOKEN: Optional[str] = Field(default=None)
    LOGSEQ_API_TIMEOUT: float = Field(default=10.0, gt=0)

    # Cleanup behaviour
    ORPHAN_PROTECT_JOURNALS: bool = Field(default=False)
    ORPHAN_DISPLAY_LIMIT: int = Field(default=10, ge=1)
    # Mirror workflow notices as Logseq toasts when driven over HTTP.
    ORPHAN_SHOW_NOTICES: bool = Field(default=True)

    LOG_LEVEL: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings()
