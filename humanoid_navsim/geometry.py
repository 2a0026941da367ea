"""Planar and spatial pose primitives used by the simulators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector3:
    """A point or direction in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quaternion) -> Quaternion:
        return Quaternion(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )


def _inverse(q: Quaternion) -> Quaternion:
    norm_sq = q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w
    if norm_sq == 0.0:
        raise ValueError("a zero quaternion has no inverse")
    return Quaternion(-q.x / norm_sq, -q.y / norm_sq, -q.z / norm_sq, q.w / norm_sq)


def _rotate(q: Quaternion, v: Vector3) -> Vector3:
    p = q * Quaternion(v.x, v.y, v.z, 0.0) * _inverse(q)
    return Vector3(p.x, p.y, p.z)


@dataclass(frozen=True)
class Pose:
    """A position together with an orientation."""

    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)

    def inverse(self) -> Pose:
        """Return the pose that undoes this one."""
        inv = _inverse(self.orientation)
        return Pose(-_rotate(inv, self.position), inv)

    def compose(self, other: Pose) -> Pose:
        """Apply ``other`` in the frame described by this pose."""
        return Pose(
            self.position + _rotate(self.orientation, other.position),
            self.orientation * other.orientation,
        )


@dataclass(frozen=True)
class Twist:
    """Linear and angular velocity."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class TransformStamped:
    """A timestamped transform from a parent frame to a child frame."""

    stamp: float
    frame_id: str
    child_frame_id: str
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)


def yaw_of(quaternion: Quaternion) -> float:
    """Return the rotation about the z axis encoded by ``quaternion``."""
    q = quaternion
    return math.atan2(2.0 * (q.w * q.z + q.x * q.y), 1.0 - 2.0 * (q.y * q.y + q.z * q.z))


def quaternion_from_yaw(yaw: float) -> Quaternion:
    """Return the quaternion of a pure rotation about the z axis."""
    half = yaw / 2.0
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into [-pi, pi]."""
    return math.atan2(math.sin(angle), math.cos(angle))


def relative_pose(pose: Pose, reference: Pose) -> Pose:
    """Express ``pose`` in the frame of ``reference``; both share one parent frame."""
    return reference.inverse().compose(pose)