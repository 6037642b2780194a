[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akushon"
version = "0.1.0"
description = "Keyframe motion playback for humanoid robot joints: load pose-based actions from JSON and interpolate joint positions over time."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "humanoid", "motion", "keyframe", "interpolation", "servo", "actions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
akushon = "akushon.cli:main"
akushon-interpolator = "akushon.cli:interpolator_main"

[tool.hatch.build.targets.wheel]
packages = ["akushon"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
