#!/usr/bin/env python3
"""
ProjectileArc — print the fire points of an arc.

Usage:
    python scripts/sample_arc.py --half-angle 45 --shots 3
    python scripts/sample_arc.py --full-angle 120 --shots 7 --forward 1 0 0
    python scripts/sample_arc.py --config arc.json --position 0 1.5 0 -v
"""

from __future__ import annotations

import argparse
import logging

from projectile_arc.config import DEFAULT_SETTINGS, ArcSettings, load_settings
from projectile_arc.core.models import Vec3
from projectile_arc.report import format_fire_points
from projectile_arc.sampling.provider import StaticPoseProvider


def _vec(values: list[float]) -> Vec3:
    return Vec3.from_array(values)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print the fire points of a projectile arc",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    angle = parser.add_mutually_exclusive_group()
    angle.add_argument(
        "--half-angle", type=float, default=None,
        help=f"Angle from forward to either edge (default: {DEFAULT_SETTINGS.half_angle})",
    )
    angle.add_argument(
        "--full-angle", type=float, default=None,
        help="Whole arc angle; overrides the config file",
    )
    parser.add_argument(
        "--shots", type=int, default=None,
        help=f"Number of fire points (default: {DEFAULT_SETTINGS.shot_count})",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON file with half_angle/full_angle and shot_count",
    )
    parser.add_argument("--position", type=float, nargs=3, default=[0.0, 0.0, 0.0])
    parser.add_argument("--forward", type=float, nargs=3, default=[0.0, 0.0, 1.0])
    parser.add_argument("--up", type=float, nargs=3, default=[0.0, 1.0, 0.0])
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config) if args.config else DEFAULT_SETTINGS
    overrides = settings.to_dict()
    if args.half_angle is not None:
        overrides["half_angle"] = args.half_angle
    if args.full_angle is not None:
        overrides["half_angle"] = args.full_angle / 2
    if args.shots is not None:
        overrides["shot_count"] = args.shots
    settings = ArcSettings.from_dict(overrides)

    origin = StaticPoseProvider.from_axes(_vec(args.position), _vec(args.forward), _vec(args.up))
    sampler = settings.build_sampler()
    points = sampler.points_from(origin)

    print(f"Arc: {settings.full_angle:g}° across {settings.shot_count} shot(s)\n")
    print(format_fire_points(points, origin.pose))


if __name__ == "__main__":
    main()
