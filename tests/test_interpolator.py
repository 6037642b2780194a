import pytest

from akushon.action import Action
from akushon.interpolator import Interpolator, InterpolatorState
from akushon.joint_process import Joint
from akushon.pose import Pose


def _initial(*positions):
    return Pose("initial", joints=[Joint(i + 1, p) for i, p in enumerate(positions)])


def _target_pose(targets, speed=1.0, pause=0.0, action_time=0.0):
    return Pose(
        "target",
        speed=speed,
        pause=pause,
        action_time=action_time,
        joints=[Joint(i, p) for i, p in targets.items()],
    )


def _run(interpolator, limit=2000, step=8):
    time = 0
    while not interpolator.is_finished() and time < limit:
        interpolator.process(time)
        time += step
    return time


def test_empty_actions_is_finished_immediately():
    interp = Interpolator([], _initial(1.5, 2.5))
    assert interp.is_finished()
    assert interp.state is InterpolatorState.END
    interp.process(0)
    assert interp.joints() == [Joint(1, 1.5), Joint(2, 2.5)]


def test_joints_are_ordered_by_id_and_first_duplicate_wins():
    pose = Pose("p", joints=[Joint(3, 3.0), Joint(1, 1.0), Joint(3, 9.0)])
    interp = Interpolator([], pose)
    assert [j.id for j in interp.joints()] == [1, 3]
    assert interp.joints()[1].position == 3.0


def test_speed_based_action_reaches_targets():
    action = Action("move", poses=[_target_pose({1: 10.0, 2: -4.0})])
    interp = Interpolator([action], _initial(0.0, 0.0))
    _run(interp)
    assert interp.is_finished()
    assert interp.joints() == [Joint(1, 10.0), Joint(2, -4.0)]


def test_joints_missing_from_initial_pose_are_ignored():
    action = Action("move", poses=[_target_pose({1: 5.0, 7: 20.0})])
    interp = Interpolator([action], _initial(0.0))
    _run(interp)
    assert interp.joints() == [Joint(1, 5.0)]


def test_start_delay_holds_joints():
    action = Action("move", poses=[_target_pose({1: 10.0})], start_delay=100)
    interp = Interpolator([action], _initial(0.0))
    for time in range(0, 100, 8):
        interp.process(time)
        assert interp.joints() == [Joint(1, 0.0)]
    assert interp.state is InterpolatorState.START_DELAY
    _run(interp)
    assert interp.joints() == [Joint(1, 10.0)]


def test_slow_speed_moves_gradually():
    action = Action("move", poses=[_target_pose({1: 10.0}, speed=0.1)])
    interp = Interpolator([action], _initial(0.0))
    seen = []
    time = 0
    while not interp.is_finished() and time < 5000:
        interp.process(time)
        seen.append(interp.joints()[0].position)
        time += 8
    assert interp.is_finished()
    assert seen == sorted(seen)
    assert any(0.0 < p < 10.0 for p in seen)
    assert seen[-1] == 10.0


def test_time_based_action_moves_between_positions():
    action = Action(
        "move", poses=[_target_pose({1: 10.0}, action_time=200.0)], time_based=True
    )
    interp = Interpolator([action], _initial(0.0))
    seen = []
    time = 0
    while not interp.is_finished() and time < 5000:
        interp.process(time)
        seen.append(interp.joints()[0].position)
        time += 8
    assert interp.is_finished()
    assert any(0.0 < p < 10.0 for p in seen)
    assert seen[-1] == 10.0


def test_chained_actions_play_in_order():
    first = Action("first", poses=[_target_pose({1: 5.0})])
    second = Action("second", poses=[_target_pose({1: -3.0})])
    interp = Interpolator([first, second], _initial(0.0))
    seen = []
    time = 0
    while not interp.is_finished() and time < 5000:
        interp.process(time)
        seen.append(interp.joints()[0].position)
        time += 8
    assert 5.0 in seen
    assert seen[-1] == -3.0


@pytest.mark.parametrize("count", [1, 3])
def test_multiple_poses_end_at_last_pose(count):
    poses = [_target_pose({1: float(i + 1)}) for i in range(count)]
    interp = Interpolator([Action("a", poses=poses)], _initial(0.0))
    _run(interp, limit=10000)
    assert interp.joints() == [Joint(1, float(count))]