from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageModel(BaseModel):
    """A Logseq page as returned by ``logseq.Editor.getAllPages``.

    Only the fields the cleanup needs are kept; everything else Logseq sends
    (uuid, timestamps, properties, ...) is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str
    original_name: Optional[str] = Field(default=None, alias="originalName")
    journal: bool = Field(default=False, alias="journal?")

    @property
    def lookup_name(self) -> str:
        """Name to query the host with; never used as the page identity."""
        return self.original_name or self.name


class BlockModel(BaseModel):
    """A top-level block of a page. Nested children are not inspected."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    content: Optional[str] = None
