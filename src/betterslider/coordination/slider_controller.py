"""Single-value slider controller.

Receives drag events from the host's gesture source, maps the pointer to a
value through :mod:`betterslider.core.mapping`, and writes it back through
the host's binding.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from betterslider.coordination.feedback import SensoryFeedback
from betterslider.core.binding import Binding
from betterslider.core.config_loader import SliderStyle
from betterslider.core.events import EventBus, EventType
from betterslider.core.mapping import (
    Bounds,
    Edge,
    Geometry,
    normalize_step,
    offset_to_value,
    step_marker_offsets,
    value_to_offset,
)

logger = logging.getLogger(__name__)


class SliderController:
    """Drives one handle bound to a single float value."""

    def __init__(
        self,
        binding: Binding[float],
        bounds: Bounds = Bounds(),
        step: Optional[float] = None,
        event_bus: Optional[EventBus] = None,
        style: Optional[SliderStyle] = None,
        on_editing_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._binding = binding
        self._bounds = bounds
        self._step = normalize_step(step)
        self._bus = event_bus
        self.style = style or SliderStyle()
        self._on_editing_changed = on_editing_changed
        self._editing = False
        self._feedback = SensoryFeedback(event_bus, self.style.haptic_feedback)
        self._feedback.reset(self.value)

    # ── Properties ──

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def step(self) -> Optional[float]:
        return self._step

    @property
    def value(self) -> float:
        """Current host value, clamped into bounds for layout."""
        return self._bounds.clamp(self._binding.get())

    @property
    def editing(self) -> bool:
        return self._editing

    # ── Gesture events ──

    def on_drag(self, pointer_x: float, geometry: Geometry) -> float:
        """Handle one drag-move event; returns the published value."""
        self._set_editing(True)
        previous = self._binding.get()
        value = offset_to_value(pointer_x, self._bounds, geometry, self._step)
        self._binding.set(value)
        if value != previous:
            self._publish(EventType.VALUE_CHANGED, value=value)
        self._feedback.observe(value, self._editing)
        return value

    def on_drag_end(self) -> None:
        """Handle gesture end; a no-op when no drag is in progress."""
        if not self._editing:
            return
        self._set_editing(False)
        self._feedback.observe(self.value, self._editing)

    # Cancellation is indistinguishable from a normal end.
    on_drag_cancel = on_drag_end

    # ── Host notifications ──

    def set_bounds(self, bounds: Bounds) -> float:
        """Switch to new bounds and pull the host value back inside them."""
        self.on_drag_end()
        self._bounds = bounds
        current = self._binding.get()
        clamped = bounds.clamp(current)
        if clamped != current:
            logger.debug("Clamped value %s into bounds [%s, %s]", current, bounds.lower, bounds.upper)
            self._binding.set(clamped)
            self._publish(EventType.VALUE_CHANGED, value=clamped)
        self._feedback.reset(clamped)
        return clamped

    # ── Layout ──

    def handle_offset(self, geometry: Geometry) -> float:
        return value_to_offset(self.value, self._bounds, geometry)

    def track_trim(self, geometry: Geometry) -> float:
        """Trailing inset of the filled part of the track."""
        return value_to_offset(self.value, self._bounds, geometry, for_handle=False, edge=Edge.TRAILING)

    def step_markers(self, geometry: Geometry):
        """Step marker centres, or an empty array when markers are hidden."""
        if not self.style.show_steps:
            return step_marker_offsets(self._bounds, geometry, None)
        return step_marker_offsets(self._bounds, geometry, self._step)

    # ── Internal ──

    def _set_editing(self, editing: bool) -> None:
        if editing == self._editing:
            return
        self._editing = editing
        logger.debug("Slider drag %s", "began" if editing else "ended")
        self._publish(EventType.EDITING_CHANGED, editing=editing)
        if self._on_editing_changed is not None:
            self._on_editing_changed(editing)

    def _publish(self, event_type: EventType, **data) -> None:
        if self._bus is not None:
            self._bus.publish(event_type, **data)
