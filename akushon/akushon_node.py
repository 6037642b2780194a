"""Ties the action runner and the config services to a periodic clock tick."""

from __future__ import annotations

import os
import time as _time
from collections.abc import Callable

from akushon.action_manager import ActionManager
from akushon.action_node import ActionNode
from akushon.config_node import ConfigNode
from akushon.joint_process import Joint

TIMER_PERIOD = 0.008


class AkushonNode:
    """Owns an optional action node and config node; ``tick`` drives playback."""

    def __init__(self, clock: Callable[[], float] = _time.monotonic) -> None:
        self._clock = clock
        self.start_time = clock()
        self.action_node: ActionNode | None = None
        self.config_node: ConfigNode | None = None

    def run_action_manager(
        self,
        action_manager: ActionManager,
        publish_joints: Callable[[list[Joint]], None] | None = None,
        publish_status: Callable[[bool], None] | None = None,
    ) -> ActionNode:
        self.action_node = ActionNode(action_manager, publish_joints, publish_status)
        return self.action_node

    def run_config_service(self, path: str | os.PathLike[str]) -> ConfigNode:
        self.config_node = ConfigNode(path)
        return self.config_node

    def tick(self) -> bool:
        """Update the action node with seconds elapsed since start; False if idle."""
        if self.action_node is None:
            return False
        elapsed = self._clock() - self.start_time
        return self.action_node.update(elapsed)