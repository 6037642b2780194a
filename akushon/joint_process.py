"""Joint positions and their interpolation towards a target."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Joint:
    """A servo joint identified by ``id`` with its current position."""

    id: int
    position: float = 0.0


class JointProcess:
    """Moves one joint from its initial position towards a target position."""

    def __init__(self, joint_id: int, position: float = 0.0) -> None:
        self._joint = Joint(joint_id, position)
        self.initial_position = position
        self.target_position = position
        self.additional_position = 0.0
        self.initial_time = 0.0
        self.action_time = 0.0

    @property
    def joint_id(self) -> int:
        return self._joint.id

    @property
    def position(self) -> float:
        return self._joint.position

    def set_target_position(self, target_position: float, speed: float = 1.0) -> None:
        """Set a target reached in steps of ``speed`` times the full distance."""
        filtered_speed = min(max(speed, 0.0), 1.0)
        self.target_position = target_position
        step = (target_position - self.initial_position) * filtered_speed
        self.additional_position = 0.0 if abs(step) < 0.1 else step

    def set_target_position_time(
        self, target_position: float, time: float, action_time: float = 1.0
    ) -> None:
        """Set a target reached ``action_time`` after ``time``."""
        self.target_position = target_position
        self.action_time = action_time
        self.initial_time = time

    def set_initial_position(self, initial_position: float) -> None:
        self.initial_position = initial_position

    def _finish(self) -> None:
        self._joint.position = self.target_position
        self.additional_position = 0.0
        self.initial_position = self.target_position

    def interpolate(self) -> None:
        """Advance the joint by one speed-based step."""
        step = self.additional_position
        next_position = self._joint.position + step
        reached = (step >= 0 and next_position >= self.target_position) or (
            step <= 0 and next_position < self.target_position
        )
        if reached:
            self._finish()
        else:
            self._joint.position = next_position

    def interpolate_time(self, time: float) -> None:
        """Place the joint where it should be at ``time`` on a time-based move."""
        passed_time = time - self.initial_time
        if self.action_time == 0:
            divider = math.inf
        else:
            divider = passed_time / self.action_time

        if divider >= 1.0:
            self._finish()
        else:
            self.additional_position = (
                self.target_position - self.initial_position
            ) * divider
            self._joint.position = self.initial_position + self.additional_position

    def is_finished(self) -> bool:
        return self.initial_position == self.target_position

    def to_joint(self) -> Joint:
        """Return a snapshot of the joint's id and current position."""
        return Joint(self._joint.id, self._joint.position)