"""
Project: ProjectileArc
File Name: geometry/rotation.py
Description:
    Rotation utilities built on scipy's Rotation.
    Angles are in degrees at this boundary; scipy works in radians.
    Composition follows the engine convention: ``compose(a, b)`` applies
    ``b`` first, then ``a`` (so ``compose(turn, pose_rotation)`` turns a
    pose about a world-space axis).
"""

from __future__ import annotations

import math

import numpy as np
from scipy.spatial.transform import Rotation

from projectile_arc.core.models import Quaternion, Vec3

# Below this length a direction is treated as degenerate
_EPSILON = 1e-9


def _to_rotation(q: Quaternion) -> Rotation:
    return Rotation.from_quat(q.as_array())


def _from_rotation(r: Rotation) -> Quaternion:
    return Quaternion.from_array(r.as_quat())


def _unit(v: np.ndarray, what: str) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm < _EPSILON:
        raise ValueError(f"{what} must be a non-zero vector")
    return v / norm


def angle_axis(degrees: float, axis: Vec3) -> Quaternion:
    """Rotation of ``degrees`` about ``axis`` (right-hand rule about +Y turns +Z toward +X)."""
    unit_axis = _unit(axis.as_array(), "Rotation axis")
    return _from_rotation(Rotation.from_rotvec(unit_axis * math.radians(degrees)))


def compose(a: Quaternion, b: Quaternion) -> Quaternion:
    """Product ``a * b``: rotate by ``b``, then by ``a``."""
    return _from_rotation(_to_rotation(a) * _to_rotation(b))


def rotate_vector(rotation: Quaternion, vector: Vec3) -> Vec3:
    """Apply ``rotation`` to ``vector``."""
    return Vec3.from_array(_to_rotation(rotation).apply(vector.as_array()))


def look_rotation(forward: Vec3, up: Vec3) -> Quaternion:
    """Rotation that maps +Z onto ``forward`` and +Y as close to ``up`` as possible.

    Raises:
        ValueError: If ``forward`` is zero or parallel to ``up``.
    """
    z_axis = _unit(forward.as_array(), "Forward direction")
    x_axis = np.cross(up.as_array(), z_axis)
    if np.linalg.norm(x_axis) < _EPSILON:
        raise ValueError("Forward direction must not be parallel to the up vector")
    x_axis = x_axis / np.linalg.norm(x_axis)
    y_axis = np.cross(z_axis, x_axis)

    matrix = np.column_stack([x_axis, y_axis, z_axis])
    return _from_rotation(Rotation.from_matrix(matrix))


def angle_between(a: Quaternion, b: Quaternion) -> float:
    """Smallest angle (degrees, in [0, 180]) that takes rotation ``a`` to ``b``."""
    delta = _to_rotation(a).inv() * _to_rotation(b)
    return math.degrees(delta.magnitude())


def signed_yaw(rotation: Quaternion, reference: Quaternion, axis: Vec3) -> float:
    """Signed angle (degrees) from ``reference``'s forward to ``rotation``'s forward about ``axis``.

    Positive angles follow the same handedness as :func:`angle_axis`.
    """
    n = _unit(axis.as_array(), "Rotation axis")
    d = rotate_vector(rotation, Vec3.forward()).as_array()
    r = rotate_vector(reference, Vec3.forward()).as_array()

    # Project both directions onto the plane perpendicular to the axis
    d = d - np.dot(d, n) * n
    r = r - np.dot(r, n) * n

    return math.degrees(math.atan2(np.dot(n, np.cross(r, d)), np.dot(r, d)))
