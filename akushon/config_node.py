"""Services for reading and saving the stored action files."""

from __future__ import annotations

import os

from akushon.config import Config

_NODE_PREFIX = "akushon/config"
GET_ACTIONS_SERVICE = _NODE_PREFIX + "/get_actions"
SAVE_ACTIONS_SERVICE = _NODE_PREFIX + "/save_actions"


class ConfigNode:
    """Answers get-actions and save-actions requests for one directory."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.config = Config(path)

    def get_actions(self) -> str:
        """Return all valid stored actions as JSON text."""
        return self.config.get_config()

    def save_actions(self, json_text: str) -> bool:
        """Save the actions in ``json_text``; True on success, False on failure."""
        try:
            self.config.save_config(json_text)
        except (ValueError, TypeError, OSError):
            return False
        return True