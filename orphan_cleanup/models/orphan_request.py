from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class CleanupRequest(BaseModel):
    confirm: bool = Field(
        default=False,
        description="Answer to the confirmation prompt. ``false`` scans and reports without deleting.",
    )
    expected: Optional[List[str]] = Field(
        default=None,
        description=(
            "The orphan list the user was shown (``orphans`` from ``GET /orphans``). "
            "Required with ``confirm``; the run is cancelled if a fresh scan finds a different list."
        ),
    )
    protect_journals: Optional[bool] = Field(
        default=None,
        description="Override ``ORPHAN_PROTECT_JOURNALS`` for this run.",
    )

    @model_validator(mode="after")
    def _confirm_needs_expected(self) -> "CleanupRequest":
        if self.confirm and self.expected is None:
            raise ValueError("'expected' must list the confirmed pages when 'confirm' is true.")
        return self
