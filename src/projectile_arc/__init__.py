"""
ProjectileArc — spread shots evenly across an arc and spawn objects along it.

Usage::

    from projectile_arc import (
        ArcSampler, Dispatcher, Activator, ActivationPolicy,
        Pose, Vec3, StaticPoseProvider,
        ArcSettings, load_settings,
    )
"""

from importlib.metadata import version
__version__ = version("projectile-arc")

# Core models
from projectile_arc.core.errors import ContractViolation
from projectile_arc.core.models import FirePoint, Pose, Quaternion, Vec3
from projectile_arc.core.types import Activatable, InstantiationService, PoseProvider

# Sampling
from projectile_arc.sampling.arc import ArcSampler, sample_arc
from projectile_arc.sampling.provider import StaticPoseProvider

# Dispatch
from projectile_arc.dispatch.activator import ActivationPolicy, Activator, LifecycleEvent
from projectile_arc.dispatch.dispatcher import Dispatcher
from projectile_arc.dispatch.templates import (
    IndexedTemplates,
    from_builder,
    from_function,
    per_index,
    uniform,
)

# Configuration
from projectile_arc.config import DEFAULT_SETTINGS, MAX_SHOT_COUNT, ArcSettings, load_settings

__all__ = [
    # Core
    "Activatable",
    "ContractViolation",
    "FirePoint",
    "InstantiationService",
    "Pose",
    "PoseProvider",
    "Quaternion",
    "Vec3",
    # Sampling
    "ArcSampler",
    "StaticPoseProvider",
    "sample_arc",
    # Dispatch
    "ActivationPolicy",
    "Activator",
    "Dispatcher",
    "IndexedTemplates",
    "LifecycleEvent",
    "from_builder",
    "from_function",
    "per_index",
    "uniform",
    # Config
    "ArcSettings",
    "DEFAULT_SETTINGS",
    "MAX_SHOT_COUNT",
    "load_settings",
]
