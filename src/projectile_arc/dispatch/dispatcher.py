"""
Project: ProjectileArc
File Name: dispatch/dispatcher.py
Description:
    Dispatcher: spawns one object per fire point of an arc.
    Instantiation requests are issued in fire-point order and the
    produced handles come back in the same order.
"""

from __future__ import annotations

import logging
from typing import Any

from projectile_arc.core.errors import ContractViolation
from projectile_arc.core.types import Handle, InstantiationService, PoseProvider
from projectile_arc.dispatch.templates import normalize_template_source
from projectile_arc.sampling.arc import ArcSampler

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns a sampled arc into instantiated objects.

    Args:
        sampler: The arc sampler for the origin object.
        origin: Provides the origin pose and its change flag.
        instantiator: Spawns a template at a pose.
        template: Template source used by :meth:`activate`.
        parent: Parent handed to the instantiator by :meth:`activate`.
    """

    def __init__(
        self,
        sampler: ArcSampler,
        origin: PoseProvider,
        instantiator: InstantiationService,
        template: Any = None,
        parent: Any | None = None,
    ) -> None:
        self.sampler = sampler
        self.origin = origin
        self.instantiator = instantiator
        self.template = template
        self.parent = parent

    def spawn_all(self, template_source: Any, parent: Any | None = None) -> list[Handle]:
        """Instantiate a template at every fire point.

        Args:
            template_source: A single template, a list of templates (one per
                fire point), a callable ``(index) -> template`` or an
                ``IndexedTemplates``.
            parent: Optional parent for every spawned object.

        Returns:
            The instantiated handles, in fire-point order.

        Raises:
            ContractViolation: If a template list is shorter than the number
                of fire points. Nothing is spawned in that case.
        """
        templates = normalize_template_source(template_source)
        points = self.sampler.points_from(self.origin)
        templates.check_capacity(len(points))

        handles = []
        for i, point in enumerate(points):
            logger.debug("Spawning fire point %d/%d", i + 1, len(points))
            handles.append(
                self.instantiator.instantiate(
                    templates(i),
                    point.position,
                    point.rotation,
                    parent,
                )
            )

        logger.info("Spawned %d objects across a %.1f° arc", len(handles), self.sampler.full_angle)
        return handles

    def activate(self) -> None:
        """Spawn the configured template under the configured parent."""
        if self.template is None:
            raise ContractViolation("Dispatcher.activate() called without a template")
        self.spawn_all(self.template, self.parent)
