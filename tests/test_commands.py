"""Tests for orphan_cleanup.services.commands."""

import pytest

from orphan_cleanup.services.commands import (
    CLEANUP_COMMAND_KEY,
    MODEL_ACTION,
    REGISTRATIONS,
    TOOLBAR_BUTTON_KEY,
    get_command,
)


class TestRegistrations:
    def test_palette_command(self):
        cmd = get_command(CLEANUP_COMMAND_KEY)
        assert cmd.label == "Cleanup: Remove orphaned pages"
        assert cmd.keybinding.binding == "mod+shift+o"
        assert cmd.keybinding.mode == "global"

    def test_toolbar_button_triggers_model_action(self):
        item = get_command(TOOLBAR_BUTTON_KEY)
        assert item.action == MODEL_ACTION
        assert f'data-on-click="{MODEL_ACTION}"' in item.template
        assert "ti ti-trash" in item.template

    def test_keys_are_unique(self):
        keys = [c.key for c in REGISTRATIONS.commands] + [t.key for t in REGISTRATIONS.toolbar]
        assert len(keys) == len(set(keys))

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            get_command("does-not-exist")
