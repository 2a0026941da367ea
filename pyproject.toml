[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "humanoid_navsim"
version = "0.1.0"
description = "Kinematic pelvis, trajectory and footstep-walking helpers for previewing a humanoid robot's navigation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "humanoid",
    "robotics",
    "navigation",
    "odometry",
    "footstep",
    "trajectory",
    "kinematics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["humanoid_navsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
