"""
keybindings.py - Menu actions and their keyboard shortcuts.

Each action has a menu label and a default shortcut. Users may override
shortcuts in ``~/.circuit-lab/keybindings.json``, a flat JSON object of
``{"action.name": "Shortcut"}``.
"""

import json
import logging
from collections import defaultdict
from pathlib import Path

logger = logging.getLogger(__name__)

# action name -> (menu label, default shortcut)
ACTIONS = {
    "edit.delete": ("&Delete Selected", "Del"),
    "edit.rotate": ("&Rotate Selected", "R"),
    "edit.clear": ("&Clear Canvas", "Ctrl+Shift+Del"),
    "mode.move": ("&Move", "M"),
    "mode.wire": ("&Wire", "W"),
    "sim.toggle": ("&Run Simulation", "F5"),
}

_CONFIG_FILE = Path.home() / ".circuit-lab" / "keybindings.json"


class KeybindingsRegistry:
    """Shortcut lookup for the menu actions, with user overrides applied."""

    def __init__(self, config_path=None):
        self.config_path = Path(config_path) if config_path else _CONFIG_FILE
        self._overrides = self._read_overrides(self.config_path)

    def get(self, action_name):
        """Return the shortcut for *action_name*; KeyError if the action is unknown."""
        return self._overrides.get(action_name, ACTIONS[action_name][1])

    def label(self, action_name):
        return ACTIONS[action_name][0]

    def get_conflicts(self):
        """Return (shortcut, [actions]) for every shortcut bound more than once.

        Shortcuts compare case-insensitively; empty shortcuts never conflict.
        """
        by_shortcut = defaultdict(list)
        for action_name in ACTIONS:
            shortcut = self.get(action_name)
            if shortcut:
                by_shortcut[shortcut.lower()].append(action_name)
        return [(shortcut, names) for shortcut, names in by_shortcut.items() if len(names) > 1]

    @staticmethod
    def _read_overrides(path):
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load keybindings config: %s", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring keybindings config %s: expected a JSON object", path)
            return {}

        overrides = {}
        for action_name, shortcut in data.items():
            if action_name not in ACTIONS:
                logger.warning("Ignoring unknown keybinding %r", action_name)
            elif not isinstance(shortcut, str):
                logger.warning("Ignoring keybinding %r: shortcut must be a string", action_name)
            else:
                overrides[action_name] = shortcut
        return overrides
