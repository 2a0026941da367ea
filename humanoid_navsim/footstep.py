"""Animating a humanoid along planned footsteps."""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from humanoid_navsim.geometry import (
    Pose,
    TransformStamped,
    Vector3,
    quaternion_from_yaw,
    relative_pose,
    yaw_of,
)

logger = logging.getLogger(__name__)

LEFT_HIP_JOINT = "left_hip_pitch_joint"
RIGHT_HIP_JOINT = "right_hip_pitch_joint"


@dataclass(frozen=True)
class FootstepMarker:
    """One planned footstep; the planner colours left feet red and right feet green."""

    pose: Pose
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @property
    def is_left(self) -> bool:
        return self.r == 1

    @property
    def is_right(self) -> bool:
        return self.g == 1


@dataclass
class JointState:
    """Named joint positions at a point in time."""

    name: list[str] = field(default_factory=list)
    position: list[float] = field(default_factory=list)
    stamp: float = 0.0


def pelvis_pose(left: Pose, right: Pose) -> Pose:
    """Place the pelvis midway between the feet, facing their mean heading."""
    left_yaw = yaw_of(left.orientation)
    right_yaw = yaw_of(right.orientation)
    x_dir = (math.cos(left_yaw) + math.cos(right_yaw)) / 2.0
    y_dir = (math.sin(left_yaw) + math.sin(right_yaw)) / 2.0
    return Pose(
        Vector3(
            (left.position.x + right.position.x) / 2.0,
            (left.position.y + right.position.y) / 2.0,
            0.0,
        ),
        quaternion_from_yaw(math.atan2(y_dir, x_dir)),
    )


def hip_pitch_angles(
    left: Pose, pelvis: Pose, right: Pose, pelvis_height: float
) -> tuple[float, float]:
    """Return (left, right) hip pitch angles for the given feet and pelvis.

    The forward foot gets a negative angle and the rear foot a positive one.
    """
    left_x = relative_pose(left, pelvis).position.x
    right_x = relative_pose(right, pelvis).position.x
    left_angle = math.atan2(abs(left_x), pelvis_height)
    right_angle = math.atan2(abs(right_x), pelvis_height)
    if left_x > 0.0:
        left_angle = -left_angle
    else:
        right_angle = -right_angle
    return left_angle, right_angle


class FootstepSimulator:
    """Walks the robot model through the most recently planned footsteps."""

    step_period = 0.5
    goal_delay = 1.0

    def __init__(
        self,
        pelvis_height: float = 0.8,
        *,
        publish_initial_pose: Optional[Callable[[Pose], None]] = None,
        publish_goal: Optional[Callable[[Pose], None]] = None,
        publish_joint_states: Optional[Callable[[JointState], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.pelvis_height = pelvis_height
        self.current_pose = Pose()
        self.current_goal = Pose()
        self.left_ankle = Pose()
        self.right_ankle = Pose()
        self.joint_states = JointState()
        self.footsteps: tuple[FootstepMarker, ...] = ()
        self._plan_updated = threading.Event()
        self._publish_initial_pose = publish_initial_pose
        self._publish_goal = publish_goal
        self._publish_joint_states = publish_joint_states
        self._sleep = sleep
        self._clock = clock

    @property
    def plan_pending(self) -> bool:
        return self._plan_updated.is_set()

    def on_initial_pose(self, pose: Pose) -> None:
        """Reset the robot to ``pose``."""
        logger.warning("Received initialize pose %s", pose)
        self.current_pose = pose

    def on_goal(self, goal: Pose) -> None:
        """Announce the current pose as the start, then forward ``goal`` to the planner."""
        logger.warning("Received goal pose %s", goal)
        if self._publish_initial_pose is not None:
            self._publish_initial_pose(self.current_pose)
        self._sleep(self.goal_delay)
        self.current_goal = goal
        if self._publish_goal is not None:
            self._publish_goal(goal)

    def on_joint_states(self, state: JointState) -> None:
        """Remember the latest joint state."""
        self.joint_states = state

    def on_footsteps(self, markers: Sequence[FootstepMarker]) -> None:
        """Accept a new footstep plan, interrupting any plan being walked."""
        total = len(markers)
        logger.warning(
            "Received %d planned footsteps for goal at yaw %.3f",
            total,
            yaw_of(self.current_goal.orientation),
        )
        for count, marker in enumerate(markers, start=1):
            side = "Left" if marker.is_left else "Right" if marker.is_right else None
            if side is not None:
                p = marker.pose.position
                logger.info(
                    "[%d/%d]: %s at pos=[%.3f, %.3f, %.3f], yaw=[%.3f]",
                    count, total, side, p.x, p.y, p.z, yaw_of(marker.pose.orientation),
                )
        self.footsteps = tuple(markers)
        self._plan_updated.set()

    def update_joint_states(
        self, left: Pose, pelvis: Pose, right: Pose
    ) -> Optional[JointState]:
        """Publish hip angles for the given stance; None if the hips are unknown."""
        left_angle, right_angle = hip_pitch_angles(left, pelvis, right, self.pelvis_height)
        names = self.joint_states.name
        if LEFT_HIP_JOINT not in names or RIGHT_HIP_JOINT not in names:
            return None
        left_index = len(names) - 1 - names[::-1].index(LEFT_HIP_JOINT)
        right_index = len(names) - 1 - names[::-1].index(RIGHT_HIP_JOINT)
        logger.debug("Hip angles: left=%.3f, right=%.3f", left_angle, right_angle)
        positions = list(self.joint_states.position)
        positions[left_index] = left_angle
        positions[right_index] = right_angle
        state = JointState(list(names), positions, self._clock())
        if self._publish_joint_states is not None:
            self._publish_joint_states(state)
        return state

    def simulate(self) -> bool:
        """Walk through the pending plan; return False if no plan was pending."""
        if not self._plan_updated.is_set():
            return False
        self._plan_updated.clear()
        markers = self.footsteps
        for index, marker in enumerate(markers[:-1]):
            if index == 0 and marker.is_right:
                logger.warning("First step is right, skipping it")
                continue
            if self._plan_updated.is_set():
                logger.warning("Goal has changed")
                break
            if marker.is_left:
                self.left_ankle = marker.pose
            if marker.is_right:
                self.right_ankle = markers[index + 1].pose
            self.current_pose = pelvis_pose(self.left_ankle, self.right_ankle)
            self.update_joint_states(self.left_ankle, self.current_pose, self.right_ankle)
            self._sleep(self.step_period)
        return True

    def pelvis_transform(self, stamp: float) -> TransformStamped:
        """Return the map-to-pelvis transform for the current pose."""
        pose = self.current_pose
        return TransformStamped(
            stamp=stamp,
            frame_id="map",
            child_frame_id="pelvis",
            translation=Vector3(pose.position.x, pose.position.y, self.pelvis_height),
            rotation=pose.orientation,
        )