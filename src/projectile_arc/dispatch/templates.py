"""
Project: ProjectileArc
File Name: dispatch/templates.py
Description:
    Template sources: what to spawn at fire point i.
    Every accepted shape is normalized to a per-index function:
      - a single template          -> same template for every index
      - a list/tuple/array         -> templates[i]
      - a callable (i) -> template -> called per index
    A template that is itself callable must be wrapped with ``uniform``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from projectile_arc.core.errors import ContractViolation


@dataclass(frozen=True)
class IndexedTemplates:
    """A per-index template function.

    ``capacity`` is the number of indices the source can serve, or None
    when it is unbounded.
    """

    fn: Callable[[int], Any]
    capacity: int | None = None

    def __call__(self, index: int) -> Any:
        return self.fn(index)

    def check_capacity(self, count: int) -> None:
        """Fail before spawning anything if fewer than ``count`` templates exist."""
        if self.capacity is not None and self.capacity < count:
            raise ContractViolation(
                f"Template list has {self.capacity} entries but {count} fire points "
                f"need a template"
            )


def uniform(template: Any) -> IndexedTemplates:
    """The same template for every fire point."""
    return IndexedTemplates(lambda _i: template)


def per_index(templates: Sequence[Any]) -> IndexedTemplates:
    """One template per fire point; needs at least as many entries as points."""
    items = tuple(templates)
    return IndexedTemplates(items.__getitem__, capacity=len(items))


def from_function(fn: Callable[[int], Any]) -> IndexedTemplates:
    """Template chosen by fire-point index."""
    return IndexedTemplates(fn)


def from_builder(builder: Callable[[], Any]) -> IndexedTemplates:
    """A zero-argument builder called once per fire point."""
    return IndexedTemplates(lambda _i: builder())


def _is_template_array(source: Any) -> bool:
    """Sized and indexable, like a list or a numpy array, but not text or a mapping."""
    if isinstance(source, (str, bytes, Mapping)):
        return False
    if isinstance(source, Sequence):
        return True
    return hasattr(source, "__len__") and hasattr(source, "__getitem__")


def normalize_template_source(source: Any) -> IndexedTemplates:
    """Coerce any supported template source into an IndexedTemplates."""
    if isinstance(source, IndexedTemplates):
        return source
    if _is_template_array(source):
        return per_index(source)
    if callable(source):
        return from_function(source)
    return uniform(source)
