"""A named set of joint target positions."""

from __future__ import annotations

from dataclasses import dataclass, field

from akushon.joint_process import Joint


@dataclass
class Pose:
    """A pose: joint targets, a speed, a pause after it and an action time."""

    name: str
    speed: float = 0.0
    pause: float = 0.0
    action_time: float = 0.0
    joints: list[Joint] = field(default_factory=list)

    def set_target_position(self, joint_id: int, target_position: float) -> None:
        """Set the position of every joint with ``joint_id``."""
        for joint in self.joints:
            if joint.id == joint_id:
                joint.position = target_position

    def get_target_position(self, joint_id: int) -> float:
        """Return the position of the first joint with ``joint_id``."""
        for joint in self.joints:
            if joint.id == joint_id:
                return joint.position
        raise KeyError(joint_id)