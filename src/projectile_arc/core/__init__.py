"""
Core models and types shared across all ProjectileArc modules.
"""

from projectile_arc.core.errors import ContractViolation
from projectile_arc.core.models import FirePoint, Pose, Quaternion, Vec3
from projectile_arc.core.types import Activatable, InstantiationService, PoseProvider

__all__ = [
    "Activatable",
    "ContractViolation",
    "FirePoint",
    "InstantiationService",
    "Pose",
    "PoseProvider",
    "Quaternion",
    "Vec3",
]
