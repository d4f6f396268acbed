"""Spawning objects at fire points, and the lifecycle hooks that trigger it."""

from projectile_arc.dispatch.activator import ActivationPolicy, Activator, LifecycleEvent
from projectile_arc.dispatch.dispatcher import Dispatcher
from projectile_arc.dispatch.templates import (
    IndexedTemplates,
    from_builder,
    from_function,
    normalize_template_source,
    per_index,
    uniform,
)

__all__ = [
    "ActivationPolicy",
    "Activator",
    "Dispatcher",
    "IndexedTemplates",
    "LifecycleEvent",
    "from_builder",
    "from_function",
    "normalize_template_source",
    "per_index",
    "uniform",
]
