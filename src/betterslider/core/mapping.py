"""Pixel offset <-> domain value mapping for a single slider handle.

All functions are pure.  The host reports the track geometry on every
layout pass and calls these to place handles, inset the filled part of the
track, and turn pointer coordinates into values.

Coordinates are measured from the leading edge of the track.  A handle at
offset ``x`` covers ``[x, x + handle_size]``, so the handle can travel
``track_width - handle_size`` points in total.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from betterslider.constants import DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND
from betterslider.core.math_utils import clamp, inverse_lerp, lerp, round_half_away


class Edge(Enum):
    """Which side of the track a fill inset is measured from."""
    LEADING = "leading"
    TRAILING = "trailing"


@dataclass(frozen=True)
class Bounds:
    """Closed numeric interval a value or selection must stay within."""
    lower: float = DEFAULT_LOWER_BOUND
    upper: float = DEFAULT_UPPER_BOUND

    def __post_init__(self):
        if not self.lower < self.upper:
            raise ValueError(
                f"Bounds lower ({self.lower}) must be less than upper ({self.upper})"
            )

    @property
    def span(self) -> float:
        return self.upper - self.lower

    def clamp(self, value: float) -> float:
        return clamp(value, self.lower, self.upper)

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def fraction(self, value: float) -> float:
        """Position of *value* within the bounds, 0 at lower and 1 at upper."""
        return inverse_lerp(self.lower, self.upper, value)


@dataclass(frozen=True)
class Geometry:
    """Pixel geometry reported by the host for one layout pass."""
    track_width: float
    handle_size: float

    @property
    def travel(self) -> float:
        """Draggable width: how far the handle's leading edge can move."""
        return max(0.0, self.track_width - self.handle_size)

    @property
    def is_degenerate(self) -> bool:
        return self.travel <= 0.0


def normalize_step(step: Optional[float]) -> Optional[float]:
    """Return *step* if it is usable for quantization, else ``None``."""
    if step is None or step <= 0:
        return None
    return float(step)


def value_to_offset(
    value: float,
    bounds: Bounds,
    geometry: Geometry,
    for_handle: bool = True,
    edge: Edge = Edge.TRAILING,
) -> float:
    """Map a domain value to a pixel offset.

    With *for_handle* the result is the leading-edge offset of the handle.
    Otherwise it is the inset used to trim the filled track so that it ends
    at the handle's centre: measured from the trailing edge for
    ``Edge.TRAILING`` (single slider fill, upper range handle) or from the
    leading edge for ``Edge.LEADING`` (lower range handle).

    *value* is expected to lie within *bounds*; callers clamp.
    """
    if geometry.is_degenerate:
        return 0.0

    position = bounds.fraction(value) * geometry.travel
    if for_handle:
        return position

    centre = position + geometry.handle_size / 2
    if edge is Edge.LEADING:
        return centre
    return geometry.track_width - centre


def offset_to_value(
    pointer_x: float,
    bounds: Bounds,
    geometry: Geometry,
    step: Optional[float] = None,
) -> float:
    """Map a pointer coordinate to a (possibly stepped) value within *bounds*.

    *pointer_x* is measured from the handle's leading origin, i.e. the raw
    location on the track minus half the handle size (see
    :func:`pointer_from_location`).  Coordinates outside the track clamp to
    the nearest bound.
    """
    if geometry.is_degenerate:
        return bounds.lower

    fraction = pointer_x / geometry.travel
    step = normalize_step(step)
    if step is None:
        value = lerp(bounds.lower, bounds.upper, fraction)
    else:
        # Round the step count rather than the fraction so that repeated
        # multiples of the step stay exact.
        steps = round_half_away(fraction * bounds.span / step)
        value = bounds.lower + steps * step
    return bounds.clamp(value)


def pointer_from_location(location_x: float, geometry: Geometry) -> float:
    """Convert a raw pointer location on the track to a handle-origin coordinate."""
    return location_x - geometry.handle_size / 2


def step_count(bounds: Bounds, step: Optional[float]) -> int:
    """Number of whole steps that fit in *bounds* (0 when continuous)."""
    step = normalize_step(step)
    if step is None:
        return 0
    # Tolerate spans that are an exact multiple of the step up to rounding noise.
    return int(np.floor(bounds.span / step + 1e-9))


def step_marker_offsets(
    bounds: Bounds,
    geometry: Geometry,
    step: Optional[float],
) -> NDArray[np.float64]:
    """Pixel centres of the step markers along the track.

    One marker per whole step, both ends included, each placed where the
    handle's centre sits for that stepped value.  A step that does not divide
    the span leaves a partial final step without a marker.
    """
    step = normalize_step(step)
    if step is None:
        return np.empty(0, dtype=np.float64)

    indices = np.arange(step_count(bounds, step) + 1, dtype=np.float64)
    fractions = np.minimum(indices * step / bounds.span, 1.0)
    return fractions * geometry.travel + geometry.handle_size / 2
