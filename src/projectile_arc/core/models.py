"""
Project: ProjectileArc
File Name: core/models.py
Description:
    Value types shared across all ProjectileArc modules.
    Axes follow the usual game-engine convention:
      +X = right, +Y = up, +Z = forward
    Quaternions are scalar-last (x, y, z, w), the same order scipy uses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vec3:
    """A 3D vector or point."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def up(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def right(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> Vec3:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scaled(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class Quaternion:
    """A rotation stored as a unit quaternion (x, y, z, w)."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, values) -> Quaternion:
        x, y, z, w = (float(v) for v in values)
        return cls(x, y, z, w)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)


@dataclass(frozen=True)
class Pose:
    """Position and orientation of an origin object.

    ``forward`` and ``up`` are derived from the rotation, so two poses
    compare equal exactly when their position and rotation do.
    """

    position: Vec3
    rotation: Quaternion

    @classmethod
    def identity(cls) -> Pose:
        return cls(Vec3.zero(), Quaternion.identity())

    @classmethod
    def from_axes(
        cls,
        position: Vec3,
        forward: Vec3,
        up: Vec3 | None = None,
    ) -> Pose:
        """Build a pose that faces ``forward`` with ``up`` as the up hint."""
        from projectile_arc.geometry.rotation import look_rotation

        return cls(position, look_rotation(forward, up or Vec3.up()))

    @property
    def forward(self) -> Vec3:
        from projectile_arc.geometry.rotation import rotate_vector

        return rotate_vector(self.rotation, Vec3.forward())

    @property
    def up(self) -> Vec3:
        from projectile_arc.geometry.rotation import rotate_vector

        return rotate_vector(self.rotation, Vec3.up())


@dataclass(frozen=True)
class FirePoint:
    """One sampled point of the arc: where a single object is spawned."""

    position: Vec3
    rotation: Quaternion

    @property
    def direction(self) -> Vec3:
        """Unit vector the spawned object faces."""
        from projectile_arc.geometry.rotation import rotate_vector

        return rotate_vector(self.rotation, Vec3.forward())
