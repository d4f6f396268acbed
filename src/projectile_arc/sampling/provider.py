"""
Project: ProjectileArc
File Name: sampling/provider.py
Description:
    A minimal pose provider for hosts without their own scene graph.
"""

from __future__ import annotations

from projectile_arc.core.models import Pose, Vec3


class StaticPoseProvider:
    """Holds a pose and remembers whether it moved since the last query.

    Starts out "changed" so the first query always samples.
    """

    def __init__(self, pose: Pose | None = None) -> None:
        self._pose = pose or Pose.identity()
        self._changed = True

    @classmethod
    def from_axes(
        cls,
        position: Vec3,
        forward: Vec3,
        up: Vec3 | None = None,
    ) -> StaticPoseProvider:
        return cls(Pose.from_axes(position, forward, up))

    @property
    def pose(self) -> Pose:
        return self._pose

    @property
    def has_changed(self) -> bool:
        return self._changed

    def mark_changed(self) -> None:
        """Flag a change the host detected out of band (e.g. a parent moved)."""
        self._changed = True

    def clear_changed(self) -> None:
        self._changed = False

    def move_to(self, pose: Pose) -> None:
        """Replace the pose; flags a change only if it actually differs."""
        if pose != self._pose:
            self._pose = pose
            self._changed = True
