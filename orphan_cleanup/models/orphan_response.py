from typing import List, Literal, Optional

from pydantic import BaseModel


class Notice(BaseModel):
    message: str
    status: Literal["info", "success", "warning", "error"]


class ScanResponse(BaseModel):
    orphans: List[str]
    count: int
    prompt: Optional[str] = None
    """Confirmation text a cleanup run would show, ``None`` when nothing was found."""


class CleanupResponse(BaseModel):
    outcome: Literal["none_found", "cancelled", "deleted", "error"]
    orphans: List[str]
    deleted: List[str]
    prompt: Optional[str] = None
    message: str
    notices: List[Notice]
