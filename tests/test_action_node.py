import json

import pytest

from akushon.action import Action
from akushon.action_manager import ActionManager
from akushon.action_node import (
    ActionNode,
    ControlType,
    RunAction,
    brake_action_topic,
    run_action_topic,
    status_topic,
)
from akushon.joint_process import Joint
from akushon.pose import Pose

JOINT_IDS = {"a": 1, "b": 2}


def _wave_action():
    pose = Pose("p1", speed=1.0, joints=[Joint(1, 10.0), Joint(2, -10.0)])
    return Action("wave", poses=[pose])


@pytest.fixture
def recorder():
    joints, statuses = [], []
    return joints, statuses


@pytest.fixture
def node(recorder):
    joints, statuses = recorder
    manager = ActionManager(JOINT_IDS)
    manager.insert_action("wave", _wave_action())
    return ActionNode(manager, joints.append, statuses.append)


def _run(node, limit=200):
    time = 0
    for _ in range(limit):
        if not node.update(time):
            return True
        time += 8
    return False


def test_topics():
    assert run_action_topic() == "action/run_action"
    assert brake_action_topic() == "action/brake_action"
    assert status_topic() == "action/status"


def test_start_without_current_joints_fails(node):
    assert node.start("wave") is False
    assert node.action_manager.is_playing() is False


def test_on_current_joints_copies(node):
    source = [Joint(1, 3.0), Joint(2, 4.0)]
    node.on_current_joints(source)
    source[0].position = 99.0
    assert node.initial_pose.joints == [Joint(1, 3.0), Joint(2, 4.0)]


def test_update_idle_publishes_status(node, recorder):
    joints, statuses = recorder
    assert node.update(0) is False
    assert statuses == [False]
    assert joints == []


def test_start_plays_to_targets(node, recorder):
    joints, statuses = recorder
    node.on_current_joints([Joint(1, 0.0), Joint(2, 0.0)])
    assert node.start("wave") is True
    assert _run(node)
    published = [entry for entry in joints if entry]
    assert published[-1] == [Joint(1, 10.0), Joint(2, -10.0)]
    assert statuses == [False]


def test_start_does_not_alter_initial_pose(node):
    node.on_current_joints([Joint(1, 0.0), Joint(2, 0.0)])
    node.start("wave")
    _run(node)
    assert node.initial_pose.joints == [Joint(1, 0.0), Joint(2, 0.0)]


def test_run_action_by_name_unknown_raises(node):
    node.on_current_joints([Joint(1, 0.0)])
    with pytest.raises(KeyError):
        node.on_run_action(RunAction(ControlType.RUN_ACTION_BY_NAME, "missing"))


def test_run_action_ignored_while_playing(node):
    node.on_current_joints([Joint(1, 0.0), Joint(2, 0.0)])
    node.start("wave")
    node.on_run_action(RunAction(ControlType.RUN_ACTION_BY_NAME, "missing"))
    assert node.action_manager.is_playing() is True


def test_run_action_by_json(node, recorder):
    joints, _ = recorder
    data = {
        "name": "custom",
        "poses": [
            {"name": "p", "joints": {"a": 5.0}, "speed": 1.0, "pause": 0, "time": 0}
        ],
        "start_delay": 0,
        "stop_delay": 0,
        "next": "",
    }
    node.on_current_joints([Joint(1, 0.0), Joint(2, 2.0)])
    node.on_run_action(
        RunAction(ControlType.RUN_ACTION_BY_JSON, "custom", json.dumps(data))
    )
    assert node.action_manager.is_playing() is True
    assert _run(node)
    published = [entry for entry in joints if entry]
    assert published[-1] == [Joint(1, 5.0), Joint(2, 2.0)]


def test_run_action_bad_json_raises(node):
    node.on_current_joints([Joint(1, 0.0)])
    with pytest.raises(json.JSONDecodeError):
        node.on_run_action(RunAction(ControlType.RUN_ACTION_BY_JSON, "x", "{bad"))


def test_brake_stops_playback(node, recorder):
    joints, statuses = recorder
    node.on_current_joints([Joint(1, 0.0), Joint(2, 0.0)])
    node.start("wave")
    node.on_brake()
    assert node.update(0) is True
    assert joints == [[]]
    assert node.update(8) is False
    assert statuses == [False]


def test_start_action_directly(node):
    node.on_current_joints([Joint(1, 0.0), Joint(2, 0.0)])
    assert node.start_action(_wave_action()) is True
    assert node.action_manager.is_playing() is True