"""Accessors for host-owned slider state.

The engine never stores the value or selection it edits.  A ``Binding``
wraps the host's getter and setter so controllers can read the current
state and propose a new one.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from betterslider.core.mapping import Bounds
from betterslider.core.math_utils import clamp
from betterslider.core.state import Selection

T = TypeVar("T")


class Binding(Generic[T]):
    """Two-way reference to a piece of host state."""

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]):
        self._getter = getter
        self._setter = setter

    def get(self) -> T:
        return self._getter()

    def set(self, value: T) -> None:
        self._setter(value)

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    # ── Constructors ──

    @classmethod
    def from_attr(cls, obj: Any, name: str) -> Binding:
        """Bind to ``obj.name``."""
        return cls(lambda: getattr(obj, name), lambda v: setattr(obj, name, v))

    @classmethod
    def from_key(cls, mapping: dict, key: Any) -> Binding:
        """Bind to ``mapping[key]``."""
        return cls(lambda: mapping[key], lambda v: mapping.__setitem__(key, v))

    @classmethod
    def constant(cls, initial: T) -> Binding[T]:
        """A binding that owns its own storage, for hosts without state of their own."""
        box = [initial]
        return cls(lambda: box[0], lambda v: box.__setitem__(0, v))


def clamp_selection_to_bounds(selection: Selection, bounds: Bounds) -> Selection:
    """Clamp each endpoint into *bounds* and restore ``lower <= upper``."""
    lower = clamp(selection.lower, bounds.lower, bounds.upper)
    upper = clamp(selection.upper, bounds.lower, bounds.upper)
    return Selection(min(lower, upper), max(lower, upper))


def clamped_selection_binding(
    binding: Binding[Selection],
    bounds_provider: Callable[[], Bounds],
) -> Binding[Selection]:
    """Wrap *binding* so every read and write is clamped into the current bounds.

    *bounds_provider* is called on each access so a controller can change its
    bounds without rebuilding the binding.
    """
    return Binding(
        lambda: clamp_selection_to_bounds(binding.get(), bounds_provider()),
        lambda value: binding.set(clamp_selection_to_bounds(value, bounds_provider())),
    )
