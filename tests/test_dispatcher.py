"""
Project: ProjectileArc
File Name: test_dispatcher.py
Description:
    Tests for spawning objects at fire points and template normalization.
"""

import numpy as np
import pytest

from projectile_arc.core.errors import ContractViolation
from projectile_arc.core.models import Pose, Vec3
from projectile_arc.dispatch.dispatcher import Dispatcher
from projectile_arc.dispatch.templates import (
    IndexedTemplates,
    from_builder,
    normalize_template_source,
    per_index,
    uniform,
)
from projectile_arc.sampling.arc import ArcSampler
from projectile_arc.sampling.provider import StaticPoseProvider


class RecordingInstantiator:
    """Fake instantiation service that records every request."""

    def __init__(self, fail_at: int | None = None):
        self.calls = []
        self.fail_at = fail_at

    def instantiate(self, template, position, rotation, parent=None):
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            raise RuntimeError("spawn failed")
        self.calls.append((template, position, rotation, parent))
        return f"handle-{len(self.calls) - 1}"


def _dispatcher(shot_count: int = 5, half_angle: float = 30.0, **kw):
    sampler = ArcSampler(half_angle=half_angle, shot_count=shot_count)
    origin = StaticPoseProvider.from_axes(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, 1.0))
    spawner = RecordingInstantiator(kw.pop("fail_at", None))
    return Dispatcher(sampler, origin, spawner, **kw), spawner


class TestSpawnAll:
    def test_fixed_template_spawns_at_every_point_in_order(self):
        dispatcher, spawner = _dispatcher(shot_count=5)
        handles = dispatcher.spawn_all("bullet")

        points = dispatcher.sampler.get_points(dispatcher.origin.pose)
        assert handles == [f"handle-{i}" for i in range(5)]
        assert spawner.calls == [
            ("bullet", p.position, p.rotation, None) for p in points
        ]

    def test_parent_is_forwarded(self):
        dispatcher, spawner = _dispatcher(shot_count=3)
        dispatcher.spawn_all("bullet", parent="pool")
        assert [c[3] for c in spawner.calls] == ["pool"] * 3

    def test_template_list_one_per_index(self):
        dispatcher, spawner = _dispatcher(shot_count=3)
        dispatcher.spawn_all(["a", "b", "c"])
        assert [c[0] for c in spawner.calls] == ["a", "b", "c"]

    def test_longer_template_list_uses_prefix(self):
        dispatcher, spawner = _dispatcher(shot_count=2)
        dispatcher.spawn_all(("a", "b", "c"))
        assert [c[0] for c in spawner.calls] == ["a", "b"]

    def test_short_template_list_spawns_nothing(self):
        dispatcher, spawner = _dispatcher(shot_count=5)
        with pytest.raises(ContractViolation):
            dispatcher.spawn_all(["a", "b", "c"])
        assert spawner.calls == []

    def test_short_numpy_template_array_spawns_nothing(self):
        dispatcher, spawner = _dispatcher(shot_count=5)
        with pytest.raises(ContractViolation):
            dispatcher.spawn_all(np.array(["a", "b", "c"], dtype=object))
        assert spawner.calls == []

    def test_numpy_template_array_one_per_index(self):
        dispatcher, spawner = _dispatcher(shot_count=3)
        dispatcher.spawn_all(np.array(["a", "b", "c"], dtype=object))
        assert [c[0] for c in spawner.calls] == ["a", "b", "c"]

    def test_function_template(self):
        dispatcher, spawner = _dispatcher(shot_count=4)
        dispatcher.spawn_all(lambda i: f"shell-{i}")
        assert [c[0] for c in spawner.calls] == ["shell-0", "shell-1", "shell-2", "shell-3"]

    def test_builder_called_once_per_point(self):
        built = []

        def build():
            built.append(len(built))
            return f"fresh-{len(built)}"

        dispatcher, spawner = _dispatcher(shot_count=3)
        dispatcher.spawn_all(from_builder(build))
        assert len(built) == 3
        assert [c[0] for c in spawner.calls] == ["fresh-1", "fresh-2", "fresh-3"]

    def test_instantiation_failure_propagates(self):
        dispatcher, spawner = _dispatcher(shot_count=5, fail_at=2)
        with pytest.raises(RuntimeError, match="spawn failed"):
            dispatcher.spawn_all("bullet")
        assert len(spawner.calls) == 2

    def test_single_shot_spawns_at_origin_pose(self):
        dispatcher, spawner = _dispatcher(shot_count=1, half_angle=90.0)
        dispatcher.spawn_all("bullet")
        pose = dispatcher.origin.pose
        assert spawner.calls == [("bullet", pose.position, pose.rotation, None)]

    def test_follows_moved_origin(self):
        dispatcher, spawner = _dispatcher(shot_count=1)
        dispatcher.spawn_all("bullet")
        moved = Pose.from_axes(Vec3(9.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
        dispatcher.origin.move_to(moved)
        dispatcher.spawn_all("bullet")
        assert spawner.calls[-1][1] == Vec3(9.0, 0.0, 0.0)
        assert spawner.calls[-1][2] == moved.rotation


class TestActivate:
    def test_uses_configured_template_and_parent(self):
        dispatcher, spawner = _dispatcher(shot_count=3, template="rocket", parent="launcher")
        dispatcher.activate()
        assert [(c[0], c[3]) for c in spawner.calls] == [("rocket", "launcher")] * 3

    def test_without_template_is_contract_violation(self):
        dispatcher, spawner = _dispatcher(shot_count=3)
        with pytest.raises(ContractViolation):
            dispatcher.activate()
        assert spawner.calls == []


class TestTemplateSources:
    def test_single_value_is_uniform(self):
        templates = normalize_template_source("bullet")
        assert [templates(i) for i in range(3)] == ["bullet"] * 3
        assert templates.capacity is None

    def test_string_is_not_a_sequence_of_templates(self):
        templates = normalize_template_source("abc")
        assert templates(2) == "abc"

    def test_list_has_capacity(self):
        templates = normalize_template_source(["a", "b"])
        assert templates.capacity == 2
        assert templates(1) == "b"

    def test_numpy_array_has_capacity(self):
        templates = normalize_template_source(np.array(["a", "b"], dtype=object))
        assert templates.capacity == 2
        assert templates(1) == "b"

    def test_mapping_is_a_single_template(self):
        template = {"kind": "bullet"}
        templates = normalize_template_source(template)
        assert templates.capacity is None
        assert templates(3) is template

    def test_per_index_copies_input(self):
        source = ["a", "b"]
        templates = per_index(source)
        source[0] = "z"
        assert templates(0) == "a"

    def test_indexed_templates_pass_through(self):
        templates = IndexedTemplates(lambda i: i * 10)
        assert normalize_template_source(templates) is templates

    def test_uniform_wraps_callable_template(self):
        def factory():
            return "made"

        templates = uniform(factory)
        assert templates(4) is factory

    def test_check_capacity(self):
        with pytest.raises(ContractViolation):
            per_index(["a"]).check_capacity(2)
        per_index(["a", "b"]).check_capacity(2)
        uniform("a").check_capacity(100)
