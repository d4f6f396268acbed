"""
Project: ProjectileArc
File Name: config.py
Description:
    Arc settings: the plain scalar fields a host serializes for each
    origin object (half angle, shot count), with range checks and a JSON
    loader. File example:
      {"full_angle": 60, "shot_count": 5}
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from projectile_arc.sampling.arc import ArcSampler

logger = logging.getLogger(__name__)

MAX_SHOT_COUNT = 100

_KNOWN_KEYS = {"half_angle", "full_angle", "shot_count"}


@dataclass(frozen=True)
class ArcSettings:
    """Validated arc configuration.

    Defaults match a freshly added arc: a 90° fan (45° either side) firing
    a single shot straight ahead.
    """

    half_angle: float = 45.0
    shot_count: int = 1

    def __post_init__(self) -> None:
        if not math.isfinite(self.half_angle):
            raise ValueError(f"half_angle must be finite, got {self.half_angle}")
        if isinstance(self.shot_count, bool) or not isinstance(self.shot_count, int):
            raise ValueError(f"shot_count must be an integer, got {self.shot_count!r}")
        if not 1 <= self.shot_count <= MAX_SHOT_COUNT:
            raise ValueError(
                f"shot_count must be between 1 and {MAX_SHOT_COUNT}, got {self.shot_count}"
            )

    @property
    def full_angle(self) -> float:
        return self.half_angle * 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArcSettings:
        """Build settings from a mapping with ``half_angle`` or ``full_angle``."""
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown arc setting(s): {', '.join(sorted(unknown))}")
        if "half_angle" in data and "full_angle" in data:
            raise ValueError("Give either half_angle or full_angle, not both")

        kwargs: dict[str, Any] = {}
        if "half_angle" in data:
            kwargs["half_angle"] = float(data["half_angle"])
        elif "full_angle" in data:
            kwargs["half_angle"] = float(data["full_angle"]) / 2
        if "shot_count" in data:
            kwargs["shot_count"] = data["shot_count"]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def build_sampler(self) -> ArcSampler:
        return ArcSampler(half_angle=self.half_angle, shot_count=self.shot_count)

    def apply_to(self, sampler: ArcSampler) -> None:
        """Copy these settings onto an existing sampler (no-op where unchanged)."""
        sampler.half_angle = self.half_angle
        sampler.shot_count = self.shot_count


# Default settings: used when no config file is supplied.
DEFAULT_SETTINGS = ArcSettings()


def load_settings(path: str | Path) -> ArcSettings:
    """Load arc settings from a JSON file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")

    settings = ArcSettings.from_dict(data)
    logger.info(
        "Loaded arc settings from %s (full_angle=%.1f, shot_count=%d)",
        path,
        settings.full_angle,
        settings.shot_count,
    )
    return settings
