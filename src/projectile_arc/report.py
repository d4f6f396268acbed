"""
Project: ProjectileArc
File Name: report.py
Description:
    Plain-text fire point tables for the CLI and demo.
"""

from __future__ import annotations

from collections.abc import Sequence

from tabulate import tabulate

from projectile_arc.core.models import FirePoint, Pose
from projectile_arc.geometry.rotation import signed_yaw

HEADERS = ["#", "Offset (°)", "Direction", "Rotation (x, y, z, w)"]


def _fmt_vec(values: Sequence[float], digits: int = 3) -> str:
    return "(" + ", ".join(f"{v:+.{digits}f}" for v in values) + ")"


def fire_point_rows(points: Sequence[FirePoint], origin: Pose) -> list[list]:
    """One row per fire point: index, yaw offset from origin, direction, quaternion."""
    axis = origin.up
    rows = []
    for i, point in enumerate(points):
        d = point.direction
        q = point.rotation
        rows.append([
            i,
            round(signed_yaw(point.rotation, origin.rotation, axis), 3),
            _fmt_vec((d.x, d.y, d.z)),
            _fmt_vec((q.x, q.y, q.z, q.w), digits=4),
        ])
    return rows


def format_fire_points(
    points: Sequence[FirePoint],
    origin: Pose,
    tablefmt: str = "simple",
) -> str:
    return tabulate(
        fire_point_rows(points, origin), headers=HEADERS, tablefmt=tablefmt, stralign="right"
    )
