"""Runs actions on request and reports joints and status through callbacks."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum

from akushon.action import Action
from akushon.action_manager import ActionManager, load_action
from akushon.joint_process import Joint
from akushon.pose import Pose

_NODE_PREFIX = "action"


def run_action_topic() -> str:
    return _NODE_PREFIX + "/run_action"


def brake_action_topic() -> str:
    return _NODE_PREFIX + "/brake_action"


def status_topic() -> str:
    return _NODE_PREFIX + "/status"


class ControlType(IntEnum):
    """How a run-action request names the action to play."""

    RUN_ACTION_BY_NAME = 0
    RUN_ACTION_BY_JSON = 1


@dataclass
class RunAction:
    """A request to play an action, by stored name or from JSON text."""

    control_type: int = ControlType.RUN_ACTION_BY_NAME
    action_name: str = ""
    json: str = ""


class ActionNode:
    """Drives an action manager and publishes its joints and status."""

    def __init__(
        self,
        action_manager: ActionManager,
        publish_joints: Callable[[list[Joint]], None] | None = None,
        publish_status: Callable[[bool], None] | None = None,
    ) -> None:
        self.action_manager = action_manager
        self.initial_pose = Pose("initial_pose")
        self._publish_joints = publish_joints
        self._publish_status = publish_status

    def on_current_joints(self, joints: Iterable[Joint]) -> None:
        """Record the robot's current joints as the pose actions start from."""
        self.initial_pose.joints = [Joint(joint.id, joint.position) for joint in joints]

    def on_run_action(self, message: RunAction) -> None:
        """Start the requested action unless one is already playing."""
        if self.action_manager.is_playing():
            return
        if message.control_type == ControlType.RUN_ACTION_BY_NAME:
            self.start(message.action_name)
        else:
            action_data = json.loads(message.json)
            action = load_action(
                action_data, message.action_name, self.action_manager.joint_ids
            )
            self.start_action(action)

    def on_brake(self) -> None:
        self.action_manager.brake()

    def _starting_pose(self) -> Pose | None:
        if not self.initial_pose.joints:
            return None
        return copy.deepcopy(self.initial_pose)

    def start(self, action_name: str) -> bool:
        """Play a stored action; False when no current joints are known yet."""
        pose = self._starting_pose()
        if pose is None:
            return False
        self.action_manager.start(action_name, pose)
        return True

    def start_action(self, action: Action) -> bool:
        """Play the given action; False when no current joints are known yet."""
        pose = self._starting_pose()
        if pose is None:
            return False
        self.action_manager.start_action(action, pose)
        return True

    def update(self, time: float) -> bool:
        """Advance playback to ``time``; False (after publishing status) when idle."""
        if self.action_manager.is_playing():
            self.action_manager.process(time)
            if self._publish_joints is not None:
                self._publish_joints(self.action_manager.joints())
            return True

        if self._publish_status is not None:
            self._publish_status(self.action_manager.is_playing())
        return False