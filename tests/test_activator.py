"""
Project: ProjectileArc
File Name: test_activator.py
Description:
    Tests for the lifecycle activation policy.
"""

from projectile_arc.core.types import Activatable
from projectile_arc.dispatch.activator import ActivationPolicy, Activator, LifecycleEvent
from projectile_arc.dispatch.dispatcher import Dispatcher
from projectile_arc.sampling.arc import ArcSampler
from projectile_arc.sampling.provider import StaticPoseProvider


class CountingTarget:
    def __init__(self):
        self.activations = 0

    def activate(self):
        self.activations += 1


class TestActivationPolicy:
    def test_defaults_fire_on_enable_only(self):
        policy = ActivationPolicy()
        assert not policy.fires_on(LifecycleEvent.START)
        assert policy.fires_on(LifecycleEvent.ENABLE)
        assert not policy.fires_on(LifecycleEvent.DISABLE)

    def test_flags_are_independent(self):
        policy = ActivationPolicy(on_start=True, on_enable=False, on_disable=True)
        assert policy.fires_on(LifecycleEvent.START)
        assert not policy.fires_on(LifecycleEvent.ENABLE)
        assert policy.fires_on(LifecycleEvent.DISABLE)


class TestActivator:
    def test_default_policy(self):
        target = CountingTarget()
        activator = Activator(target)
        assert activator.start() is False
        assert activator.enable() is True
        assert activator.disable() is False
        assert target.activations == 1

    def test_every_event_enabled(self):
        target = CountingTarget()
        activator = Activator(target, ActivationPolicy(on_start=True, on_enable=True, on_disable=True))
        for event in LifecycleEvent:
            activator.notify(event)
        assert target.activations == 3

    def test_nothing_enabled(self):
        target = CountingTarget()
        activator = Activator(target, ActivationPolicy(on_enable=False))
        for event in LifecycleEvent:
            assert activator.notify(event) is False
        assert target.activations == 0

    def test_dispatcher_is_activatable(self):
        class Spawner:
            def __init__(self):
                self.count = 0

            def instantiate(self, template, position, rotation, parent=None):
                self.count += 1
                return self.count

        spawner = Spawner()
        dispatcher = Dispatcher(ArcSampler(45.0, 4), StaticPoseProvider(), spawner, template="bolt")
        assert isinstance(dispatcher, Activatable)

        Activator(dispatcher).enable()
        assert spawner.count == 4
