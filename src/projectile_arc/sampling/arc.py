"""
Project: ProjectileArc
File Name: sampling/arc.py
Description:
    Arc sampler: turns an origin pose, a half angle and a shot count into
    an ordered fan of fire points.

    For n > 1 shots spread over the full angle theta = 2 * half_angle:
      offset(i) = i * theta / (n - 1) - half_angle,   i = 0 .. n-1
      rotation(i) = angle_axis(offset(i), origin.up) * origin.rotation
    Index 0 is the -half_angle edge, index n-1 the +half_angle edge.
    A single shot always fires straight along the origin's forward
    direction. Every point shares the origin's position.

    Points are cached and only recomputed when the half angle, shot
    count or origin pose changed, or when the sampler was marked dirty.
    Calling ``get_points`` many times per frame is cheap; the worst case
    is an origin that moves every frame.

    Not thread-safe: use one sampler per origin object, from the thread
    that owns the scene.
"""

from __future__ import annotations

import logging
import math
import numbers

from projectile_arc.core.errors import ContractViolation
from projectile_arc.core.models import FirePoint, Pose
from projectile_arc.core.types import PoseProvider
from projectile_arc.geometry.rotation import angle_axis, compose

logger = logging.getLogger(__name__)


def sample_arc(origin: Pose, half_angle: float, shot_count: int) -> tuple[FirePoint, ...]:
    """Compute the fire points for one arc, without caching.

    Raises:
        ContractViolation: If ``shot_count`` is less than 1.
    """
    if shot_count < 1:
        raise ContractViolation(f"shot_count must be >= 1, got {shot_count}")

    if shot_count == 1:
        return (FirePoint(origin.position, origin.rotation),)

    full_angle = half_angle * 2
    angle_between_shots = full_angle / (shot_count - 1)
    axis = origin.up

    return tuple(
        FirePoint(
            origin.position,
            compose(angle_axis(i * angle_between_shots - half_angle, axis), origin.rotation),
        )
        for i in range(shot_count)
    )


class ArcSampler:
    """Cached fire-point fan for a single origin object.

    Args:
        half_angle: Angle (degrees) from the forward direction to either
            edge of the arc. Sign only flips which edge comes first.
        shot_count: Number of fire points, at least 1.
    """

    def __init__(self, half_angle: float = 45.0, shot_count: int = 1) -> None:
        _check_shot_count(shot_count)
        _check_half_angle(half_angle)
        self._half_angle = float(half_angle)
        self._shot_count = int(shot_count)

        self._points: tuple[FirePoint, ...] | None = None
        self._cache_key: tuple[float, int, Pose] | None = None
        self._dirty = True
        self._version = 0
        self._recompute_count = 0

    def __repr__(self) -> str:
        return (
            f"ArcSampler(half_angle={self._half_angle!r}, "
            f"shot_count={self._shot_count!r})"
        )

    # ── Configuration ────────────────────────────────────────────────

    @property
    def half_angle(self) -> float:
        return self._half_angle

    @half_angle.setter
    def half_angle(self, value: float) -> None:
        _check_half_angle(value)
        value = float(value)
        if value == self._half_angle:
            return
        self._half_angle = value
        self.mark_dirty()

    @property
    def full_angle(self) -> float:
        """Whole arc angle; the forward direction sits in its middle."""
        return self._half_angle * 2

    @full_angle.setter
    def full_angle(self, value: float) -> None:
        self.half_angle = float(value) / 2

    @property
    def shot_count(self) -> int:
        return self._shot_count

    @shot_count.setter
    def shot_count(self, value: int) -> None:
        _check_shot_count(value)
        if value == self._shot_count:
            return
        self._shot_count = int(value)
        self.mark_dirty()

    # ── Cache state ──────────────────────────────────────────────────

    @property
    def version(self) -> int:
        """Bumped on every invalidation."""
        return self._version

    @property
    def recompute_count(self) -> int:
        """Number of times the fire points were actually recomputed."""
        return self._recompute_count

    def mark_dirty(self) -> None:
        """Force a recompute on the next query."""
        self._dirty = True
        self._version += 1

    def is_stale(self, origin: Pose) -> bool:
        """Whether ``get_points(origin)`` would recompute."""
        return (
            self._dirty
            or self._points is None
            or self._cache_key != (self._half_angle, self._shot_count, origin)
        )

    # ── Sampling ─────────────────────────────────────────────────────

    def get_points(self, origin: Pose) -> tuple[FirePoint, ...]:
        """Fire points for ``origin``, recomputed only if stale.

        Raises:
            ContractViolation: If the shot count is less than 1.
        """
        if self.is_stale(origin):
            self._recompute(origin)
        assert self._points is not None
        return self._points

    def points_from(self, provider: PoseProvider) -> tuple[FirePoint, ...]:
        """Fire points for a pose provider, honouring its change flag.

        A provider that reports it moved invalidates the cache; the flag is
        cleared once consumed.
        """
        if provider.has_changed:
            self.mark_dirty()
            provider.clear_changed()
        return self.get_points(provider.pose)

    def _recompute(self, origin: Pose) -> None:
        points = sample_arc(origin, self._half_angle, self._shot_count)

        # Swap in the new tuple in one step; old tuples held by callers stay valid
        self._points = points
        self._cache_key = (self._half_angle, self._shot_count, origin)
        self._dirty = False
        self._recompute_count += 1

        logger.debug(
            "Recomputed %d fire points (half_angle=%.3f, version=%d)",
            len(points),
            self._half_angle,
            self._version,
        )


def _check_shot_count(value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ContractViolation(f"shot_count must be an integer, got {value!r}")
    if value < 1:
        raise ContractViolation(f"shot_count must be >= 1, got {value}")


def _check_half_angle(value) -> None:
    if not math.isfinite(value):
        raise ContractViolation(f"half_angle must be finite, got {value}")
