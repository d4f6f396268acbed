"""
Project: ProjectileArc
File Name: dispatch/activator.py
Description:
    Lifecycle activation policy. The host forwards its start / enable /
    disable events to an Activator, which calls ``activate()`` on its
    target for the events the policy selects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from projectile_arc.core.types import Activatable


class LifecycleEvent(Enum):
    START = "start"
    ENABLE = "enable"
    DISABLE = "disable"


@dataclass
class ActivationPolicy:
    """Which lifecycle events trigger an activation."""

    on_start: bool = False
    on_enable: bool = True
    on_disable: bool = False

    def fires_on(self, event: LifecycleEvent) -> bool:
        if event is LifecycleEvent.START:
            return self.on_start
        if event is LifecycleEvent.ENABLE:
            return self.on_enable
        return self.on_disable


class Activator:
    """Calls ``target.activate()`` on the lifecycle events ``policy`` selects."""

    def __init__(self, target: Activatable, policy: ActivationPolicy | None = None) -> None:
        self.target = target
        self.policy = policy or ActivationPolicy()

    def notify(self, event: LifecycleEvent) -> bool:
        """Handle a lifecycle event; returns True if the target was activated."""
        if not self.policy.fires_on(event):
            return False
        self.target.activate()
        return True

    def start(self) -> bool:
        return self.notify(LifecycleEvent.START)

    def enable(self) -> bool:
        return self.notify(LifecycleEvent.ENABLE)

    def disable(self) -> bool:
        return self.notify(LifecycleEvent.DISABLE)
