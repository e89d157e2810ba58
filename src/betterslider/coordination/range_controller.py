"""Range slider controller: two handles, ordered, never crossing.

Each handle has its own :class:`DragSession`.  On the first move of a
gesture the session freezes the current selection as its *anchor*; every
move event then constrains the moving handle against the anchor's opposite
endpoint minus a minimum gap.  Constraining against the anchor rather than
the live binding keeps fast pointer motion from feeding the moving handle's
value back into the fixed one.

Gesture events are assumed to arrive in order on one thread: any number of
``on_drag`` calls for a handle followed by one ``on_drag_end``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from betterslider.constants import MIN_GAP_FRACTION
from betterslider.coordination.feedback import SensoryFeedback
from betterslider.core.binding import (
    Binding,
    clamp_selection_to_bounds,
    clamped_selection_binding,
)
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
from betterslider.core.math_utils import clamp
from betterslider.core.state import DragSession, Handle, Selection

logger = logging.getLogger(__name__)

__all__ = ["RangeController", "clamp_selection_to_bounds", "minimum_gap"]


def minimum_gap(bounds: Bounds, step: Optional[float]) -> float:
    """Separation enforced between the handles while dragging."""
    step = normalize_step(step)
    if step is not None:
        return step
    return bounds.span * MIN_GAP_FRACTION


class RangeController:
    """Drives a lower and an upper handle bound to a :class:`Selection`."""

    def __init__(
        self,
        binding: Binding[Selection],
        bounds: Bounds = Bounds(),
        step: Optional[float] = None,
        event_bus: Optional[EventBus] = None,
        style: Optional[SliderStyle] = None,
        on_editing_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._raw_binding = binding
        self._bounds = bounds
        self._step = normalize_step(step)
        self._bus = event_bus
        self.style = style or SliderStyle()
        self._on_editing_changed = on_editing_changed
        self._binding = clamped_selection_binding(binding, lambda: self._bounds)
        self._sessions = {Handle.LOWER: DragSession(), Handle.UPPER: DragSession()}
        self._editing = False
        self._feedback = SensoryFeedback(event_bus, self.style.haptic_feedback)
        self._feedback.reset(self.selection)

    clamp_selection_to_bounds = staticmethod(clamp_selection_to_bounds)

    # ── Properties ──

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def step(self) -> Optional[float]:
        return self._step

    @property
    def gap(self) -> float:
        return minimum_gap(self._bounds, self._step)

    @property
    def selection(self) -> Selection:
        """Current host selection, clamped into bounds."""
        return self._binding.get()

    @property
    def editing(self) -> bool:
        return self._editing

    def session(self, handle: Handle) -> DragSession:
        return self._sessions[handle]

    # ── Gesture events ──

    def on_drag(self, pointer_x: float, handle: Handle, geometry: Geometry) -> Selection:
        """Handle one drag-move event for *handle*; returns the published selection."""
        session = self._sessions[handle]
        if session.begin(self.selection):
            logger.debug("Range drag began on %s handle, anchor %s", handle.value, session.anchor)
        self._update_editing()

        anchor = session.anchor
        bounds = self._bounds
        gap = self.gap
        proposed = offset_to_value(pointer_x, bounds, geometry, self._step)
        if handle is Handle.LOWER:
            updated = Selection(clamp(proposed, bounds.lower, anchor.upper - gap), anchor.upper)
        else:
            updated = Selection(anchor.lower, clamp(proposed, anchor.lower + gap, bounds.upper))

        return self._publish_selection(updated)

    def on_drag_end(self, handle: Handle) -> None:
        """Handle gesture end for *handle*; a no-op when that handle is idle."""
        if self._sessions[handle].end():
            logger.debug("Range drag ended on %s handle", handle.value)
            self._update_editing()

    # Cancellation is indistinguishable from a normal end.
    on_drag_cancel = on_drag_end

    # ── Host notifications ──

    def set_bounds(self, bounds: Bounds) -> Selection:
        """Switch to new bounds and repair the host selection to fit them.

        A drag in progress is ended first: its anchor was captured against
        the old bounds.
        """
        for handle in Handle:
            self.on_drag_end(handle)
        self._bounds = bounds
        current = self._raw_binding.get()
        repaired = clamp_selection_to_bounds(current, bounds)
        if repaired != current:
            logger.debug("Repaired selection %s to %s", current.as_tuple(), repaired.as_tuple())
            self._raw_binding.set(repaired)
            self._publish(EventType.SELECTION_CHANGED, lower=repaired.lower, upper=repaired.upper)
        self._feedback.reset(repaired)
        return repaired

    # ── Layout ──

    def handle_offsets(self, geometry: Geometry) -> tuple[float, float]:
        selection = self.selection
        return (
            value_to_offset(selection.lower, self._bounds, geometry),
            value_to_offset(selection.upper, self._bounds, geometry),
        )

    def track_trims(self, geometry: Geometry) -> tuple[float, float]:
        """Leading and trailing insets of the filled part of the track."""
        selection = self.selection
        return (
            value_to_offset(selection.lower, self._bounds, geometry, for_handle=False, edge=Edge.LEADING),
            value_to_offset(selection.upper, self._bounds, geometry, for_handle=False, edge=Edge.TRAILING),
        )

    def step_markers(self, geometry: Geometry):
        """Step marker centres, or an empty array when markers are hidden."""
        if not self.style.show_steps:
            return step_marker_offsets(self._bounds, geometry, None)
        return step_marker_offsets(self._bounds, geometry, self._step)

    # ── Internal ──

    def _publish_selection(self, updated: Selection) -> Selection:
        previous = self.selection
        self._binding.set(updated)
        published = self.selection
        if published != previous:
            self._publish(EventType.SELECTION_CHANGED, lower=published.lower, upper=published.upper)
        self._feedback.observe(published, self._editing)
        return published

    def _update_editing(self) -> None:
        editing = any(session.active for session in self._sessions.values())
        if editing == self._editing:
            return
        self._editing = editing
        self._publish(EventType.EDITING_CHANGED, editing=editing)
        if self._on_editing_changed is not None:
            self._on_editing_changed(editing)
        if not editing:
            self._feedback.observe(self.selection, editing)

    def _publish(self, event_type: EventType, **data) -> None:
        if self._bus is not None:
            self._bus.publish(event_type, **data)
