"""Hexapod leg and body kinematics with a keyframe animation sequencer."""

__version__ = "0.1.0"
