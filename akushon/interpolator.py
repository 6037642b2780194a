"""Plays a chain of actions by interpolating joints from pose to pose."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from akushon.action import Action
from akushon.joint_process import Joint, JointProcess
from akushon.pose import Pose


class InterpolatorState(Enum):
    """Phases an interpolator moves through while playing its actions."""

    START_DELAY = auto()
    PLAYING = auto()
    STOP_DELAY = auto()
    END = auto()


class Interpolator:
    """Steps joints through every pose of a list of actions, in order."""

    def __init__(self, actions: Iterable[Action], initial_pose: Pose) -> None:
        self._actions = list(actions)
        self._processes: dict[int, JointProcess] = {}
        for joint in sorted(initial_pose.joints, key=lambda j: j.id):
            if joint.id not in self._processes:
                self._processes[joint.id] = JointProcess(joint.id, joint.position)

        self._state = (
            InterpolatorState.START_DELAY if self._actions else InterpolatorState.END
        )
        self._init_state = True
        self._start_stop_time = 0.0
        self._init_pause = False
        self._pause_time = 0.0
        self._action_index = 0
        self._pose_index = 0

    @property
    def state(self) -> InterpolatorState:
        return self._state

    def _current_action(self) -> Action:
        return self._actions[self._action_index]

    def _current_pose(self) -> Pose:
        return self._current_action().get_pose(self._pose_index)

    def _change_state(self, state: InterpolatorState) -> None:
        self._state = state
        self._init_state = True

    def _ready_for_next(self) -> bool:
        return all(process.is_finished() for process in self._processes.values())

    def _next_pose(self, time: float) -> None:
        pose = self._current_pose()
        time_based = self._current_action().time_based
        for joint in pose.joints:
            process = self._processes.get(joint.id)
            if process is None:
                continue
            if time_based:
                process.set_target_position_time(joint.position, time, pose.action_time)
            else:
                process.set_target_position(joint.position, pose.speed)
        self._pose_index += 1

    def _is_time_based(self) -> bool:
        if not self._actions:
            return False
        index = min(self._action_index, len(self._actions) - 1)
        return self._actions[index].time_based

    def process(self, time: float) -> None:
        """Advance the state machine and every joint to ``time`` (milliseconds)."""
        if self._state is InterpolatorState.START_DELAY:
            if self._init_state:
                self._init_state = False
                self._start_stop_time = time
            if time - self._start_stop_time > self._current_action().start_delay:
                self._change_state(InterpolatorState.PLAYING)

        elif self._state is InterpolatorState.PLAYING:
            if self._ready_for_next():
                if self._init_pause:
                    self._init_pause = False
                    self._pause_time = time
                if self._pose_index == self._current_action().pose_count:
                    self._change_state(InterpolatorState.STOP_DELAY)
                    self._init_pause = True
                elif time - self._pause_time > self._current_pose().pause:
                    self._next_pose(time)
                    self._init_pause = True

        elif self._state is InterpolatorState.STOP_DELAY:
            if self._init_state:
                self._init_state = False
                self._start_stop_time = time
            if time - self._start_stop_time > self._current_action().stop_delay:
                self._action_index += 1
                if self._action_index == len(self._actions):
                    self._change_state(InterpolatorState.END)
                else:
                    self._pose_index = 0
                    self._change_state(InterpolatorState.START_DELAY)

        time_based = self._is_time_based()
        for process in self._processes.values():
            if time_based:
                process.interpolate_time(time)
            else:
                process.interpolate()

    def is_finished(self) -> bool:
        return self._state is InterpolatorState.END

    def joints(self) -> list[Joint]:
        """Current joint positions, ordered by joint id."""
        return [process.to_joint() for process in self._processes.values()]