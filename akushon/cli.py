"""Command-line entry points that play actions and print joint positions."""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from collections.abc import Callable, Iterable, Mapping, Sequence

from akushon.action_manager import ActionManager
from akushon.action_name import ActionName
from akushon.action_node import ActionNode
from akushon.joint_process import Joint
from akushon.pose import Pose

STEP_MS = 8

_ACTION_HELP = (
    "Usage: action <path> <action_name> --joints <joints.json>\n"
    "  <path>        Path to the action configuration directory\n"
    "  <action_name> Name of the action to run\n"
    "  --joints      JSON file mapping joint names to joint ids\n"
)


def _read_joint_ids(path: str | os.PathLike[str]) -> dict[str, int]:
    """Read a JSON object that maps joint names to numeric joint ids."""
    with open(path, encoding="utf-8") as file:
        data = json.load(file)
    if not isinstance(data, dict):
        raise ValueError("joint map must be a JSON object")
    return {str(name): int(joint_id) for name, joint_id in data.items()}


def _config_dir(path: str) -> str:
    return path if path.endswith(os.sep) else path + os.sep


def _names_by_id(joint_ids: Mapping[str, int]) -> dict[int, list[str]]:
    names: dict[int, list[str]] = {}
    for name in sorted(joint_ids):
        names.setdefault(joint_ids[name], []).append(name)
    return names


def _zero_joints(joint_ids: Mapping[str, int]) -> list[Joint]:
    return [Joint(joint_id, 0.0) for joint_id in sorted(set(joint_ids.values()))]


def _print_joints(joints: Iterable[Joint], names: Mapping[int, list[str]]) -> None:
    for joint in joints:
        for name in names.get(joint.id, []):
            print(f"{name} : ", end="")
        print(f"{joint.position:g}")
    print()


def _waiter(no_wait: bool) -> Callable[[], None]:
    if no_wait:
        return lambda: None
    return lambda: time.sleep(STEP_MS / 1000.0)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one stored action from a config directory, printing joints each step."""
    parser = argparse.ArgumentParser(prog="action", add_help=True)
    parser.add_argument("args", nargs="*")
    parser.add_argument("--joints", default=None)
    parser.add_argument("--no-wait", action="store_true")
    options = parser.parse_args(argv)

    if len(options.args) < 2 or options.joints is None:
        sys.stderr.write("Bad arguments!\n")
        sys.stderr.write(_ACTION_HELP)
        return 0

    path, action_name = options.args[0], options.args[1]
    joint_ids = _read_joint_ids(options.joints)
    names = _names_by_id(joint_ids)

    manager = ActionManager(joint_ids)
    manager.load_config(_config_dir(path))

    node = ActionNode(manager, publish_joints=lambda joints: _print_joints(joints, names))
    node.on_current_joints(_zero_joints(joint_ids))

    try:
        started = node.start(action_name)
    except KeyError:
        started = False

    if not started:
        print("the action not found")
        return 0

    wait = _waiter(options.no_wait)
    elapsed = 0
    while True:
        wait()
        if not node.update(elapsed):
            break
        elapsed += STEP_MS
    return 0


def interpolator_main(argv: Sequence[str] | None = None) -> int:
    """Play the walk-ready action from an all-zero pose, printing joints each step."""
    parser = argparse.ArgumentParser(prog="interpolator", add_help=True)
    parser.add_argument("args", nargs="*")
    parser.add_argument("--joints", default=None)
    parser.add_argument("--no-wait", action="store_true")
    options = parser.parse_args(argv)

    if not options.args or options.joints is None:
        print("Please specify the path!", file=sys.stderr)
        return 0

    joint_ids = _read_joint_ids(options.joints)
    names = _names_by_id(joint_ids)

    manager = ActionManager(joint_ids)
    manager.load_config(_config_dir(options.args[0]))

    pose = Pose("init", speed=0.0, pause=0.0, action_time=0.0, joints=_zero_joints(joint_ids))

    try:
        manager.start(ActionName.WALKREADY.value, pose)
    except KeyError:
        print(f"action {ActionName.WALKREADY.value} not found", file=sys.stderr)
        return 1

    wait = _waiter(options.no_wait)
    elapsed = 0
    while manager.is_playing():
        wait()
        manager.process(elapsed)
        _print_joints(manager.joints(), names)
        elapsed += STEP_MS
    return 0