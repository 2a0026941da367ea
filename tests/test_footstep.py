import math

import pytest

from humanoid_navsim.footstep import (
    FootstepMarker,
    FootstepSimulator,
    JointState,
    hip_pitch_angles,
    pelvis_pose,
)
from humanoid_navsim.geometry import Pose, Vector3, quaternion_from_yaw, yaw_of


def _at(x, y, yaw=0.0):
    return Pose(Vector3(x, y, 0.0), quaternion_from_yaw(yaw))


def _left(x, y):
    return FootstepMarker(_at(x, y), r=1.0)


def _right(x, y):
    return FootstepMarker(_at(x, y), g=1.0)


def _joints():
    return JointState(
        name=["waist", "left_hip_pitch_joint", "right_hip_pitch_joint"],
        position=[0.0, 0.0, 0.0],
    )


def _make(**kwargs):
    published = {"joints": [], "sleeps": [], "initial": [], "goal": []}
    sim = FootstepSimulator(
        publish_initial_pose=published["initial"].append,
        publish_goal=published["goal"].append,
        publish_joint_states=published["joints"].append,
        sleep=kwargs.pop("sleep", published["sleeps"].append),
        clock=lambda: 42.0,
        **kwargs,
    )
    return sim, published


def test_pelvis_pose_is_midpoint():
    pose = pelvis_pose(_at(1.0, 1.0), _at(1.0, -1.0))
    assert pose.position.x == pytest.approx(1.0)
    assert pose.position.y == pytest.approx(0.0)


def test_pelvis_pose_keeps_shared_heading():
    pose = pelvis_pose(_at(0.0, 0.1, 0.3), _at(0.0, -0.1, 0.3))
    assert yaw_of(pose.orientation) == pytest.approx(0.3)


def test_pelvis_pose_heading_is_symmetric():
    pose = pelvis_pose(_at(0.0, 0.1, 0.4), _at(0.0, -0.1, -0.4))
    assert yaw_of(pose.orientation) == pytest.approx(0.0)


def test_hip_angles_left_forward():
    left, right = hip_pitch_angles(_at(0.2, 0.1), _at(0.0, 0.0), _at(-0.2, -0.1), 0.8)
    assert left < 0.0 < right
    assert left == pytest.approx(-right)


def test_hip_angles_right_forward():
    left, right = hip_pitch_angles(_at(-0.2, 0.1), _at(0.0, 0.0), _at(0.2, -0.1), 0.8)
    assert right < 0.0 < left
    assert left == pytest.approx(-right)


def test_hip_angles_are_measured_in_pelvis_frame():
    pelvis = _at(5.0, 5.0, math.pi / 2)
    left, right = hip_pitch_angles(_at(5.0, 5.3), pelvis, _at(5.0, 4.7), 0.8)
    assert left < 0.0 < right


def test_update_joint_states_publishes_hip_angles():
    sim, published = _make()
    sim.on_joint_states(_joints())
    state = sim.update_joint_states(_at(0.2, 0.1), _at(0.0, 0.0), _at(-0.2, -0.1))
    assert published["joints"] == [state]
    assert state.stamp == 42.0
    assert state.position[0] == 0.0
    assert state.position[1] < 0.0 < state.position[2]


def test_update_joint_states_without_hips():
    sim, published = _make()
    sim.on_joint_states(JointState(["waist"], [0.0]))
    assert sim.update_joint_states(_at(0.2, 0.0), _at(0.0, 0.0), _at(-0.2, 0.0)) is None
    assert published["joints"] == []


def test_simulate_without_plan():
    sim, published = _make()
    assert sim.simulate() is False
    assert published["sleeps"] == []


def test_simulate_skips_leading_right_step():
    sim, published = _make()
    sim.on_joint_states(_joints())
    sim.on_footsteps([_right(0.2, -0.1), _left(0.4, 0.1), _right(0.6, -0.1)])
    sim.simulate()
    assert len(published["sleeps"]) == 1


def test_new_plan_interrupts_simulation():
    replans = []

    def sleep(seconds):
        if not replans:
            replans.append(seconds)
            sim.on_footsteps([_left(1.0, 0.1), _right(1.2, -0.1)])

    sim, published = _make(sleep=sleep)
    sim.on_joint_states(_joints())
    sim.on_footsteps([_left(0.2, 0.1), _right(0.4, -0.1), _left(0.6, 0.1), _right(0.8, -0.1)])
    sim.simulate()
    assert len(published["joints"]) == 1
    assert sim.plan_pending


def test_on_goal_publishes_start_then_goal():
    sim, published = _make()
    start = _at(1.0, 2.0, 0.5)
    goal = _at(3.0, 4.0)
    sim.on_initial_pose(start)
    sim.on_goal(goal)
    assert published["initial"] == [start]
    assert published["sleeps"] == [1.0]
    assert published["goal"] == [goal]
    assert sim.current_goal == goal


def test_pelvis_transform_follows_current_pose():
    sim, _ = _make(pelvis_height=0.8)
    pose = _at(1.5, -0.5, 0.2)
    sim.on_initial_pose(pose)
    tf = sim.pelvis_transform(7.0)
    assert tf.frame_id == "map"
    assert tf.child_frame_id == "pelvis"
    assert tf.translation == Vector3(1.5, -0.5, 0.8)
    assert tf.rotation == pose.orientation