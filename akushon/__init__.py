"""Keyframe action playback and joint interpolation for humanoid robots."""

__version__ = "0.1.0"