# humanoid_navsim

Kinematic helpers for previewing a humanoid robot as it navigates. They work out
the values a visualiser needs: where the pelvis is and which way it faces, the
trail of recent poses, and the hip pitch angles while the robot walks a planned
sequence of footsteps. The package uses only the standard library.

## Modules

### `humanoid_navsim.geometry`

- The frozen dataclasses `Vector3`, `Quaternion` (the identity by default), `Pose`,
  `Twist` and `TransformStamped` (`stamp`, `frame_id`, `child_frame_id`,
  `translation`, `rotation`).
- `Pose.inverse()` returns the pose that undoes this one. `Pose.compose(other)`
  applies `other` in this pose's frame.
- `yaw_of(quaternion)` and `quaternion_from_yaw(yaw)` convert between a quaternion
  and a rotation about the z axis.
- `normalize_angle(angle)` wraps an angle into `[-pi, pi]`.
- `relative_pose(pose, reference)` expresses `pose` in the frame of `reference`.

### `humanoid_navsim.odometry`

`OdometryIntegrator(pelvis_height=0.8)` integrates velocity commands into a
planar pose (`x`, `y`, `theta`) and assumes no slip.

`on_cmd_vel(twist, now)` advances the pose over the time since the previous call.
It uses `linear.x`, `linear.y` and `angular.z`, and it keeps `theta` within
`[-pi, pi]`. When more than `max_gap` seconds (1.0) have passed, the command
updates only the clock and the method returns `False`. The clock starts at 0.

### `humanoid_navsim.trajectory`

`TrajectoryRecorder(pelvis_height=0.8, max_length=500)` does two things:

- It keeps the latest pose it received from `on_localization(pose)`.
- It keeps a bounded, thread-safe history of poses. `snapshot()` returns that history as a list, oldest first.

### `humanoid_navsim.footstep`

- `FootstepMarker(pose, r, g, b)` is one planned step. A red step (`r == 1`) is a left
  step (`is_left`) and a green step (`g == 1`) is a right step (`is_right`).
- `JointState(name, position, stamp)` holds named joint positions.
- `pelvis_pose(left, right)` places the pelvis midway between the feet, facing
  their mean heading.
- `hip_pitch_angles(left, pelvis, right, pelvis_height)` returns the
  `(left, right)` hip pitch angles.
  - Each angle is `atan2(|forward offset|, pelvis_height)`.
  - If the left foot is in front of the pelvis, the left angle is negative. Otherwise the right angle is negative.
- `FootstepSimulator(pelvis_height=0.8, *, publish_initial_pose=None, publish_goal=None, publish_joint_states=None, sleep=time.sleep, clock=time.time)`:
  - `on_initial_pose(pose)` resets the current pose.
  - `on_goal(goal)` does the following in order:
    - It passes the current pose to `publish_initial_pose`.
    - It waits `goal_delay` (1.0 s).
    - It records the goal and passes it to `publish_goal`.
  - `on_joint_states(state)` remembers the latest joint state.
  - `on_footsteps(markers)` stores a new plan and marks it pending (`plan_pending`).
  - `update_joint_states(left, pelvis, right)` writes the hip angles into
    `left_hip_pitch_joint` and `right_hip_pitch_joint` of the latest joint state.
    It then stamps the state with `clock()`, passes it to `publish_joint_states`
    and returns it. It returns `None` if the latest joint state does not name both
    hip joints.
  - `simulate()` walks the pending plan and returns `True`. It returns `False` if
    no plan is pending.
    - It visits every marker except the last.
    - It skips a first step that is a right step.
    - A left marker moves the left ankle to that marker. A right marker moves the
      right ankle to the following marker.
    - For each visited marker it recomputes the pelvis and the hip angles, then
      sleeps `step_period` (0.5 s).
    - It stops early if a new plan arrives.

`OdometryIntegrator`, `TrajectoryRecorder` and `FootstepSimulator` each have a
`pelvis_transform(stamp)` method. It returns the `map -> pelvis`
`TransformStamped` for the current pose, raised to `pelvis_height`.

## Example

```python
import math

from humanoid_navsim.geometry import Twist, Vector3, quaternion_from_yaw, yaw_of
from humanoid_navsim.odometry import OdometryIntegrator

assert math.isclose(yaw_of(quaternion_from_yaw(math.pi / 2)), math.pi / 2)

odom = OdometryIntegrator()
odom.on_cmd_vel(Twist(linear=Vector3(1.0, 0.0, 0.0)), now=0.5)
transform = odom.pelvis_transform(stamp=0.5)
assert math.isclose(transform.translation.x, 0.5)
assert transform.translation.z == 0.8
```

## What it does not do

The package has no command to run and does no messaging or rendering. It does
not subscribe to topics, broadcast transforms or run a timed loop. You feed
messages into the `on_*` methods yourself. You send the results of
`pelvis_transform`, `snapshot` and the publish callbacks to your own
visualiser. You decide when to call `simulate()`.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project root.