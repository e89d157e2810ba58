"""Selection and per-gesture drag state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Handle(Enum):
    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class Selection:
    """Closed interval selected by a range slider.

    Owned by the host.  Not validated on construction: a host may hand us
    an inverted selection, which the range controller repairs.
    """
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def is_ordered(self) -> bool:
        return self.lower <= self.upper

    def endpoint(self, handle: Handle) -> float:
        if handle is Handle.LOWER:
            return self.lower
        return self.upper

    def with_endpoint(self, handle: Handle, value: float) -> Selection:
        if handle is Handle.LOWER:
            return replace(self, lower=value)
        return replace(self, upper=value)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)


@dataclass
class DragSession:
    """Ephemeral state for one drag gesture on one handle.

    ``anchor`` freezes the selection at the first move event so the moving
    handle is constrained against where the other handle *was*, not where
    the live binding currently says it is.
    """
    active: bool = False
    anchor: Optional[Selection] = None

    def begin(self, current: Selection) -> bool:
        """Enter the dragging state; returns True only on the first move of a gesture."""
        if self.anchor is None:
            self.anchor = current
        if self.active:
            return False
        self.active = True
        return True

    def end(self) -> bool:
        """Return to idle; returns True if a drag was actually in progress."""
        was_active = self.active
        self.active = False
        self.anchor = None
        return was_active
