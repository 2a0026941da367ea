"""Kinematic pelvis odometry, trajectory recording and footstep-walking previews for a humanoid robot."""

__version__ = "0.1.0"
__all__ = ["geometry", "odometry", "trajectory", "footstep"]