"""An action: an ordered list of poses with delays and a follow-up action."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from akushon.pose import Pose


@dataclass
class Action:
    """A named sequence of poses played one after another."""

    name: str
    poses: list[Pose] = field(default_factory=list)
    start_delay: int = 0
    stop_delay: int = 0
    next_action: str = ""
    time_based: bool = False

    @property
    def pose_count(self) -> int:
        return len(self.poses)

    def add_pose(self, pose: Pose) -> None:
        self.poses.append(pose)

    def insert_pose(self, index: int, pose: Pose) -> None:
        """Insert ``pose`` before position ``index``."""
        if not 0 <= index <= len(self.poses):
            raise IndexError(f"pose index {index} out of range")
        self.poses.insert(index, pose)

    def delete_pose(self, index: int) -> None:
        if not 0 <= index < len(self.poses):
            raise IndexError(f"pose index {index} out of range")
        del self.poses[index]

    def get_pose(self, index: int) -> Pose:
        if not 0 <= index < len(self.poses):
            raise IndexError(f"pose index {index} out of range")
        return self.poses[index]

    def set_joint_target_position(
        self, pose_index: int, joint_id: int, target_position: float
    ) -> None:
        self.get_pose(pose_index).set_target_position(joint_id, target_position)

    def to_json(self, joint_names: Mapping[int, str]) -> dict[str, Any]:
        """Return the action as a JSON-ready dict, naming joints via ``joint_names``."""
        data: dict[str, Any] = {"name": self.name, "next": self.next_action}

        if self.poses:
            json_poses = []
            for pose in self.poses:
                joints: dict[str, float] | None = None
                for joint in pose.joints:
                    if joints is None:
                        joints = {}
                    joints[joint_names[joint.id]] = joint.position
                json_poses.append(
                    {
                        "joints": joints,
                        "name": pose.name,
                        "pause": pose.pause,
                        "speed": pose.speed,
                        "time": pose.action_time,
                    }
                )
            data["poses"] = json_poses

        data["start_delay"] = self.start_delay
        data["stop_delay"] = self.stop_delay
        data["time_based"] = self.time_based
        return data

    def reset(self) -> None:
        """Remove every pose."""
        self.poses.clear()