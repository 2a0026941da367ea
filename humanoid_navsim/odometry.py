"""Dead-reckoning of the pelvis pose from velocity commands."""

from __future__ import annotations

import math

from humanoid_navsim.geometry import (
    TransformStamped,
    Twist,
    Vector3,
    normalize_angle,
    quaternion_from_yaw,
)


class OdometryIntegrator:
    """Integrates velocity commands into a planar pose, without slip."""

    #: Commands arriving after a gap longer than this (seconds) are skipped.
    max_gap = 1.0

    def __init__(self, pelvis_height: float = 0.8) -> None:
        self.pelvis_height = pelvis_height
        self.x = 0.0
        self.y = 0.0
        self.theta = 0.0
        self._last_time = 0.0

    def on_cmd_vel(self, twist: Twist, now: float) -> bool:
        """Advance the pose by ``twist`` up to time ``now``.

        Returns False when the command was skipped because too long had
        passed since the previous one.
        """
        dt = now - self._last_time
        self._last_time = now
        if dt > self.max_gap:
            return False

        v_x = twist.linear.x
        v_y = twist.linear.y
        omega = twist.angular.z

        self.x += (v_x * math.cos(self.theta) - v_y * math.sin(self.theta)) * dt
        self.y += (v_x * math.sin(self.theta) + v_y * math.cos(self.theta)) * dt
        self.theta = normalize_angle(self.theta + omega * dt)
        return True

    def pelvis_transform(self, stamp: float) -> TransformStamped:
        """Return the map-to-pelvis transform for the current pose."""
        return TransformStamped(
            stamp=stamp,
            frame_id="map",
            child_frame_id="pelvis",
            translation=Vector3(self.x, self.y, self.pelvis_height),
            rotation=quaternion_from_yaw(self.theta),
        )