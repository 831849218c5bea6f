from typing import List, Literal, Optional

from pydantic import BaseModel


class Keybinding(BaseModel):
    binding: str
    mode: Literal["global", "editing", "non-editing"] = "global"


class CommandRegistration(BaseModel):
    """A command palette entry the host registers at startup."""

    key: str
    label: str
    keybinding: Optional[Keybinding] = None


class ToolbarItem(BaseModel):
    """A clickable toolbar control bound to a model action."""

    key: str
    title: str
    icon: str
    action: str
    template: str


class RegistrationList(BaseModel):
    commands: List[CommandRegistration]
    toolbar: List[ToolbarItem]
