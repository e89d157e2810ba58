"""Qt signal bridge for slider controllers.

A PySide6 host connects to these signals instead of subscribing to the
EventBus directly, so slider updates arrive through Qt's usual
signal/slot machinery.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from betterslider.core.events import EventBus, EventType


class SliderSignals(QObject):
    """Re-emits slider EventBus events as Qt signals."""

    value_changed = Signal(float)
    selection_changed = Signal(float, float)
    editing_changed = Signal(bool)
    # "value" for a change while dragging, "editing" for a drag start/end
    feedback_requested = Signal(str)

    def __init__(self, event_bus: Optional[EventBus] = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._bus: Optional[EventBus] = None
        self._handlers = {
            EventType.VALUE_CHANGED: self._on_value_changed,
            EventType.SELECTION_CHANGED: self._on_selection_changed,
            EventType.EDITING_CHANGED: self._on_editing_changed,
            EventType.FEEDBACK_VALUE_CHANGED: self._on_feedback_value,
            EventType.FEEDBACK_EDITING_TOGGLED: self._on_feedback_editing,
        }
        if event_bus is not None:
            self.attach(event_bus)

    # ── Public API ──

    @property
    def is_attached(self) -> bool:
        return self._bus is not None

    def attach(self, event_bus: EventBus) -> None:
        """Start forwarding events from *event_bus*, detaching from any previous bus."""
        self.detach()
        for event_type, handler in self._handlers.items():
            event_bus.subscribe(event_type, handler)
        self._bus = event_bus

    def detach(self) -> None:
        if self._bus is None:
            return
        for event_type, handler in self._handlers.items():
            self._bus.unsubscribe(event_type, handler)
        self._bus = None

    # ── Internal ──

    def _on_value_changed(self, value: float) -> None:
        self.value_changed.emit(float(value))

    def _on_selection_changed(self, lower: float, upper: float) -> None:
        self.selection_changed.emit(float(lower), float(upper))

    def _on_editing_changed(self, editing: bool) -> None:
        self.editing_changed.emit(editing)

    def _on_feedback_value(self, value) -> None:
        self.feedback_requested.emit("value")

    def _on_feedback_editing(self, editing: bool) -> None:
        self.feedback_requested.emit("editing")
