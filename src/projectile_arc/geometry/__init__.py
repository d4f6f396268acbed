"""Rotation utilities for arc sampling."""

from projectile_arc.geometry.rotation import (
    angle_axis,
    angle_between,
    compose,
    look_rotation,
    rotate_vector,
    signed_yaw,
)

__all__ = [
    "angle_axis",
    "angle_between",
    "compose",
    "look_rotation",
    "rotate_vector",
    "signed_yaw",
]
