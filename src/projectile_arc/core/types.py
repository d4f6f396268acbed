"""
Project: ProjectileArc
File Name: core/types.py
Description:
    Protocols for the collaborators ProjectileArc talks to.
    The host engine (scene graph, spawner, lifecycle hooks) implements
    these so the sampler and dispatcher never depend on a specific engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from projectile_arc.core.models import Pose, Quaternion, Vec3


Handle = Any  # whatever the instantiation service hands back
TemplateFn = Callable[[int], Any]


@runtime_checkable
class PoseProvider(Protocol):
    """The origin object: its current pose plus a "moved since last query" flag."""

    @property
    def pose(self) -> Pose: ...

    @property
    def has_changed(self) -> bool: ...

    def clear_changed(self) -> None: ...


@runtime_checkable
class InstantiationService(Protocol):
    """Creates a live instance of ``template`` at a pose.

    Failures are raised as-is; callers do not retry.
    """

    def instantiate(
        self,
        template: Any,
        position: Vec3,
        rotation: Quaternion,
        parent: Any | None = None,
    ) -> Handle: ...


@runtime_checkable
class Activatable(Protocol):
    """Anything a lifecycle activator can trigger."""

    def activate(self) -> None: ...
