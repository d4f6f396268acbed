"""ProjectileArc Demo — fire a five-shot fan when a turret is enabled.

Usage:
    uv run python demo.py
"""

from projectile_arc import (
    Activator,
    ArcSettings,
    Dispatcher,
    StaticPoseProvider,
    Vec3,
)
from projectile_arc.report import format_fire_points


class RecordingSpawner:
    """Stand-in for an engine spawner: records every request."""

    def __init__(self):
        self.spawned = []

    def instantiate(self, template, position, rotation, parent=None):
        handle = f"{template}#{len(self.spawned)}"
        self.spawned.append((handle, position, rotation, parent))
        return handle


def main():
    settings = ArcSettings(half_angle=30.0, shot_count=5)
    turret = StaticPoseProvider.from_axes(
        position=Vec3(0.0, 1.5, 0.0),
        forward=Vec3(1.0, 0.0, 1.0),
    )

    sampler = settings.build_sampler()
    spawner = RecordingSpawner()
    dispatcher = Dispatcher(sampler, turret, spawner, template="bullet", parent="projectiles")
    activator = Activator(dispatcher)

    print(f"Arc: {settings.full_angle:g}° across {settings.shot_count} shots\n")
    print(format_fire_points(sampler.points_from(turret), turret.pose))

    # Host lifecycle: the default policy fires on enable only
    activator.start()
    activator.enable()

    print(f"\nSpawned {len(spawner.spawned)} objects:")
    for handle, position, _rotation, parent in spawner.spawned:
        print(f"  {handle} at ({position.x:.1f}, {position.y:.1f}, {position.z:.1f}) under {parent}")

    # Widening the arc invalidates the cached points
    sampler.full_angle = 90.0
    print(f"\nAfter widening to {sampler.full_angle:g}°:\n")
    print(format_fire_points(sampler.points_from(turret), turret.pose))
    print(f"\nRecomputed {sampler.recompute_count} times")


if __name__ == "__main__":
    main()
