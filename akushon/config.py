"""Reads and writes the directory of action JSON files."""

from __future__ import annotations

import json
import os
import sys
from typing import Any


class Config:
    """Access to the action files stored under one directory path."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def get_config(self) -> str:
        """Return every valid action in the directory as one JSON object string."""
        actions: dict[str, Any] = {}
        print("[ ACTIONS LIST ] : ")
        for entry in os.scandir(self.path):
            file_name = os.path.join(self.path, entry.name)
            action_name = file_name[len(self.path) : len(file_name) - 5]
            print(action_name, end=" | ")

            try:
                with open(self.path + action_name + ".json", encoding="utf-8") as file:
                    action_data = json.load(file)
            except (OSError, ValueError):
                print(f"Failed to load {file_name}", file=sys.stderr)
                continue

            if not isinstance(action_data, dict) or action_data.get("name") != action_name:
                print(
                    f"Action name does not match file name in {file_name}",
                    file=sys.stderr,
                )
                continue

            if not action_data.get("poses"):
                print(f"{file_name}'s poses is empty", file=sys.stderr)
                continue

            actions[action_name] = action_data
        print()
        return json.dumps(actions or None, sort_keys=True, separators=(",", ":"))

    def save_config(self, actions_data: str) -> None:
        """Write each action of a JSON object to ``<path><name>.json``."""
        actions = json.loads(actions_data)
        if not isinstance(actions, dict):
            raise ValueError("actions data must be a JSON object")
        for key in sorted(actions):
            action_name = key.replace(" ", "_")
            file_name = self.path + action_name + ".json"
            try:
                with open(file_name, "w", encoding="utf-8") as file:
                    json.dump(actions[key], file, indent=2)
            except OSError:
                print(f"Failed to save {file_name}", file=sys.stderr)