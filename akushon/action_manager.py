"""Stores actions, loads them from JSON and plays them through an interpolator."""

from __future__ import annotations

import copy
import json
import os
import sys
from collections.abc import Mapping
from typing import Any

from akushon.action import Action
from akushon.interpolator import Interpolator
from akushon.joint_process import Joint
from akushon.pose import Pose


def load_action(
    action_data: Mapping[str, Any], action_name: str, joint_ids: Mapping[str, int]
) -> Action:
    """Build an action from its JSON data; joint names map to ids via ``joint_ids``."""
    action = Action(action_name)
    action.name = action_data["name"]

    for key in sorted(action_data):
        value = action_data[key]
        if "poses" in key:
            for raw_pose in action_data["poses"]:
                joints = [
                    Joint(joint_ids[joint_key], joint_value)
                    for joint_key, joint_value in sorted(raw_pose["joints"].items())
                    if not joint_key.startswith("neck")
                ]
                action.add_pose(
                    Pose(
                        raw_pose["name"],
                        speed=raw_pose["speed"],
                        pause=raw_pose["pause"],
                        action_time=raw_pose["time"],
                        joints=joints,
                    )
                )
        elif key == "start_delay":
            action.start_delay = value
        elif key == "stop_delay":
            action.stop_delay = value
        elif key == "next":
            action.next_action = value
        elif key == "time_based":
            action.time_based = value

    return action


def load_action_file(
    path: str | os.PathLike[str], action_name: str, joint_ids: Mapping[str, int]
) -> Action:
    """Load ``<path><action_name>.json`` as an action."""
    with open(os.fspath(path) + action_name + ".json", encoding="utf-8") as file:
        action_data = json.load(file)
    return load_action(action_data, action_name, joint_ids)


class ActionManager:
    """Holds named actions and plays one (with its follow-ups) at a time."""

    def __init__(self, joint_ids: Mapping[str, int]) -> None:
        self.joint_ids = dict(joint_ids)
        self.actions: dict[str, Action] = {}
        self._interpolator: Interpolator | None = Interpolator([], Pose(""))
        self._is_running = False

    def insert_action(self, action_name: str, action: Action) -> None:
        """Add an action; an existing action of the same name is kept."""
        self.actions.setdefault(action_name, action)

    def delete_action(self, action_name: str) -> None:
        self.actions.pop(action_name, None)

    def get_action(self, action_name: str) -> Action:
        """Return a copy of the named action, or an empty unnamed action."""
        action = self.actions.get(action_name)
        if action is None:
            return Action("")
        return copy.deepcopy(action)

    def load_config(self, path: str | os.PathLike[str]) -> None:
        """Load every file in ``path`` as a JSON action named after the file."""
        path = os.fspath(path)
        for entry in os.scandir(path):
            file_name = os.path.join(path, entry.name)
            name = file_name[len(path) : len(file_name) - len(".json")]
            try:
                with open(file_name, encoding="utf-8") as file:
                    action_data = json.load(file)
            except json.JSONDecodeError as ex:
                print(f"failed to load action: {name}", file=sys.stderr)
                print(f"parse error at byte {ex.pos}", file=sys.stderr)
                raise
            self.actions.setdefault(
                name, load_action(action_data, name, self.joint_ids)
            )

    def start(self, action_name: str, initial_pose: Pose) -> None:
        """Play the named action followed by its chain of next actions."""
        targets: list[Action] = []
        visited: set[str] = set()
        while True:
            action = self.actions[action_name]
            visited.add(action_name)
            targets.append(action)
            next_name = action.next_action
            if not next_name or next_name not in self.actions:
                break
            if next_name in visited:
                raise ValueError(f"action chain loops back to {next_name!r}")
            action_name = next_name

        self._interpolator = Interpolator(targets, initial_pose)
        self._is_running = True

    def start_action(self, action: Action, initial_pose: Pose) -> None:
        """Play a single action that need not be stored in the manager."""
        self._interpolator = Interpolator([action], initial_pose)
        self._is_running = True

    def brake(self) -> None:
        """Stop playing; the manager reports idle on the next process call."""
        self._interpolator = None

    def process(self, time: float) -> None:
        if self._interpolator is not None:
            self._interpolator.process(time)
            if self._interpolator.is_finished():
                self._interpolator = None
        else:
            self._is_running = False

    def is_playing(self) -> bool:
        return self._is_running

    def joints(self) -> list[Joint]:
        if self._interpolator is not None:
            return self._interpolator.joints()
        return []