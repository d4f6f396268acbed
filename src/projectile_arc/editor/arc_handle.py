"""
Project: ProjectileArc
File Name: editor/arc_handle.py
Description:
    Presentation adapter for an interactive arc handle.
    Produces the data an editor needs to draw the arc (handle frame,
    fire-line segments) and writes edited angles back to the sampler.
    Nothing here draws; the host's gizmo layer does.

    The handle frame sits at the origin, faces the -half_angle edge of
    the arc and uses the arc axis as its up vector, so a handle sweeping
    ``full_angle`` from its forward direction covers exactly the arc.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from projectile_arc.core.models import FirePoint, Pose, Quaternion, Vec3
from projectile_arc.core.types import PoseProvider
from projectile_arc.geometry.rotation import angle_axis, look_rotation, rotate_vector
from projectile_arc.sampling.arc import ArcSampler

logger = logging.getLogger(__name__)

HANDLE_RADIUS = 3.0
FIRE_LINE_LENGTH = 2.0


@dataclass(frozen=True)
class ArcHandleFrame:
    """Where and how to draw the arc handle."""

    position: Vec3
    rotation: Quaternion
    angle: float  # full arc angle (degrees)
    radius: float


@dataclass(frozen=True)
class ArcHandleTarget:
    """One selected origin object: its sampler and its pose."""

    sampler: ArcSampler
    origin: PoseProvider


def handle_frame(sampler: ArcSampler, origin: Pose, handle_size: float = 1.0) -> ArcHandleFrame:
    """Frame for the arc handle of ``sampler`` at ``origin``.

    ``handle_size`` is the editor's screen-size factor at the origin.
    """
    axis = origin.up
    start_direction = rotate_vector(angle_axis(-sampler.half_angle, axis), origin.forward)

    return ArcHandleFrame(
        position=origin.position,
        rotation=look_rotation(start_direction, axis),
        angle=sampler.full_angle,
        radius=HANDLE_RADIUS * handle_size,
    )


def fire_lines(
    points: Sequence[FirePoint],
    handle_size: float = 1.0,
    length: float = FIRE_LINE_LENGTH,
) -> list[tuple[Vec3, Vec3]]:
    """Segment endpoints showing where each fire point shoots."""
    return [
        (point.position, point.position + point.direction.scaled(length * handle_size))
        for point in points
    ]


class ArcHandleAdapter:
    """Arc handle for the current editor selection.

    The handle and fire lines are only offered when exactly one object is
    selected; with several selected nothing is shown or edited.
    """

    def __init__(self, targets: Sequence[ArcHandleTarget]) -> None:
        self.targets = list(targets)

    @property
    def is_editable(self) -> bool:
        return len(self.targets) == 1

    def frame(self, handle_size: float = 1.0) -> ArcHandleFrame | None:
        if not self.is_editable:
            return None
        target = self.targets[0]
        return handle_frame(target.sampler, target.origin.pose, handle_size)

    def lines(self, handle_size: float = 1.0) -> list[tuple[Vec3, Vec3]]:
        if not self.is_editable:
            return []
        target = self.targets[0]
        return fire_lines(target.sampler.points_from(target.origin), handle_size)

    def apply_angle(self, angle: float) -> bool:
        """Write a dragged handle angle back as the sampler's full angle.

        Returns:
            True if the sampler's configuration changed.

        Raises:
            ValueError: If ``angle`` is not a finite number.
        """
        angle = float(angle)
        if not math.isfinite(angle):
            raise ValueError(f"Arc angle must be finite, got {angle}")
        if not self.is_editable:
            return False

        sampler = self.targets[0].sampler
        before = sampler.version
        sampler.full_angle = angle
        changed = sampler.version != before
        if changed:
            logger.debug("Arc handle set full_angle=%.3f", angle)
        return changed
