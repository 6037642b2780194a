# akushon

akushon plays back keyframe motions ("actions") on the joints of a humanoid
robot. An action is a list of poses. Each pose holds target positions for a set
of joints, a speed, a pause and a duration. The package loads actions from JSON
files and steps an interpolator through them. Each step returns the joint
positions to send to the servos.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To install the test requirements and run the tests:

```
pip install .[test]
pytest
```

## Action files

Each action lives in its own `<name>.json` file inside a configuration
directory:

```json
{
  "name": "walk_ready",
  "next": "",
  "start_delay": 0,
  "stop_delay": 0,
  "time_based": false,
  "poses": [
    {
      "name": "pose_1",
      "joints": {"right_shoulder_pitch": 10.0, "left_shoulder_pitch": -10.0},
      "pause": 0.0,
      "speed": 0.5,
      "time": 0.0
    }
  ]
}
```

- `next` names an action that runs straight after this one, so actions can be
  chained. A chain stops at a name that is not loaded. A chain that loops back
  on itself raises `ValueError`.
- `start_delay` and `stop_delay` set the wait before the first pose and after
  the last one. `pause` sets the wait after a pose before the next one begins.
  All three use the unit of the times given to `process`. The commands below
  use milliseconds.
- When `time_based` is false, each step moves a joint towards its target by
  `speed` (clamped to 0..1) times the distance from its start position. A step
  smaller than 0.1 makes the joint jump straight to the target. When
  `time_based` is true, each joint moves linearly and reaches its target
  `time` after the pose begins.
- Joints whose names begin with `neck` are ignored.

Joint names are turned into numeric ids through a mapping you supply. The
package has no built-in joint table.

Pass directory paths with a trailing separator, for example `"actions/"`. Each
action's name is the file path with the directory prefix and the `.json`
extension cut off.

## Library use

`akushon.action_manager.ActionManager` holds the loaded actions and drives the
interpolation:

```python
from akushon.action_manager import ActionManager
from akushon.action_name import ActionName
from akushon.joint_process import Joint
from akushon.pose import Pose

joint_ids = {"right_shoulder_pitch": 1, "left_shoulder_pitch": 2}
manager = ActionManager(joint_ids)
manager.load_config("actions/")

initial_pose = Pose("start", joints=[Joint(1, 0.0), Joint(2, 0.0)])
manager.start(ActionName.WALKREADY.value, initial_pose)

time = 0
while manager.is_playing():
    manager.process(time)
    for joint in manager.joints():
        ...                          # joint.id, joint.position
    time += 8
```

`start` raises `KeyError` for an action that is not loaded. `start_action`
plays an `Action` object that is not stored in the manager. `brake` stops
playback.

Other modules:

- `akushon.action_manager.load_action` and `load_action_file` build an `Action`
  from JSON data or from `<path><name>.json`.
- `akushon.action.Action` and `akushon.pose.Pose` are the data model.
  `Action.to_json(joint_names)` turns an action back into a JSON-ready dict,
  using a mapping from joint id to joint name.
- `akushon.interpolator.Interpolator` plays a list of actions from an initial
  pose. `InterpolatorState` names its phases.
- `akushon.joint_process.JointProcess` interpolates a single `Joint`.
- `akushon.action_name.ActionName` is an enum of the standard action names.
  `action_index` gives the numeric index of the first six of them.
- `akushon.config.Config` works on a directory of action files.
  `get_config` returns every valid action as one JSON object string, or
  `null` if there are none. `save_config` writes each action in a JSON object
  to `<path><name>.json`, with spaces in the name replaced by underscores.
- `akushon.config_node.ConfigNode` wraps `Config`. `get_actions` returns the
  JSON text. `save_actions` returns `True` or `False`.
- `akushon.action_node.ActionNode` connects a manager to callbacks:
  - `on_current_joints` records the starting pose.
  - `on_run_action` takes a `RunAction` request, either by name or with JSON
    text (see `ControlType`).
  - `on_brake` stops playback.
  - `update` advances playback and calls the `publish_joints` or
    `publish_status` callback.
- `akushon.akushon_node.AkushonNode` holds an action node and a config node.
  Its `tick` updates the action node with the seconds elapsed on its clock.

## Commands

Both commands need `--joints FILE`, a JSON object that maps joint names to
joint ids. `--no-wait` skips the 8 ms sleep between steps. On every 8 ms step,
each command prints each joint as `name : position`, followed by a blank line.

Run one action from a configuration directory, starting from all joints at 0:

```
akushon PATH ACTION_NAME --joints joints.json
```

If the action is not loaded, this prints `the action not found`.

Play the `walk_ready` action from an all-zero pose:

```
akushon-interpolator PATH --joints joints.json
```

## What it does not do

The package does not talk to servos or to any messaging system. Joint
positions, status and run or brake requests pass only through the Python
callbacks and methods described above. It has no long-running service command.
To run one, call `AkushonNode.tick` from your own loop or timer and route your
own transport to `ActionNode` and `ConfigNode`.