"""Replaying a localization stream as a pelvis pose and a trajectory."""

from __future__ import annotations

import threading
from collections import deque

from humanoid_navsim.geometry import Pose, TransformStamped, Vector3


class TrajectoryRecorder:
    """Keeps the latest localization pose and a bounded history of poses."""

    def __init__(self, pelvis_height: float = 0.8, max_length: int = 500) -> None:
        self.pelvis_height = pelvis_height
        self.current_pose = Pose()
        self._history: deque[Pose] = deque(maxlen=max_length)
        self._lock = threading.Lock()

    def on_localization(self, pose: Pose) -> None:
        """Record a new localization pose."""
        self.current_pose = pose
        with self._lock:
            self._history.append(pose)

    def snapshot(self) -> list[Pose]:
        """Return the recorded poses, oldest first."""
        with self._lock:
            return list(self._history)

    def pelvis_transform(self, stamp: float) -> TransformStamped:
        """Return the map-to-pelvis transform for the latest pose."""
        pose = self.current_pose
        return TransformStamped(
            stamp=stamp,
            frame_id="map",
            child_frame_id="pelvis",
            translation=Vector3(pose.position.x, pose.position.y, self.pelvis_height),
            rotation=pose.orientation,
        )