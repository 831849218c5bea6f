"""Entry points the host wires to the cleanup workflow.

Built once at import time and handed to the host as data; nothing here is
mutated afterwards.
"""

from typing import Union

from orphan_cleanup.models.command import (
    CommandRegistration,
    Keybinding,
    RegistrationList,
    ToolbarItem,
)

CLEANUP_COMMAND_KEY = "cleanup-orphaned-pages"
TOOLBAR_BUTTON_KEY = "cleanup-orphans-button"
MODEL_ACTION = "removeOrphans"

_TOOLBAR_TITLE = "Remove orphaned pages (Cmd/Ctrl+Shift+O)"
_TOOLBAR_ICON = "ti ti-trash"

REGISTRATIONS = RegistrationList(
    commands=[
        CommandRegistration(
            key=CLEANUP_COMMAND_KEY,
            label="Cleanup: Remove orphaned pages",
            keybinding=Keybinding(binding="mod+shift+o", mode="global"),
        ),
    ],
    toolbar=[
        ToolbarItem(
            key=TOOLBAR_BUTTON_KEY,
            title=_TOOLBAR_TITLE,
            icon=_TOOLBAR_ICON,
            action=MODEL_ACTION,
            template=(
                f'<a data-on-click="{MODEL_ACTION}" class="button" title="{_TOOLBAR_TITLE}">'
                f'<i class="{_TOOLBAR_ICON}"></i></a>'
            ),
        ),
    ],
)


def get_command(key: str) -> Union[CommandRegistration, ToolbarItem]:
    """Return the command or toolbar item registered under *key*.

    Raises:
        KeyError: if nothing is registered under *key*.
    """
    for entry in (*REGISTRATIONS.commands, *REGISTRATIONS.toolbar):
        if entry.key == key:
            return entry
    raise KeyError(key)
