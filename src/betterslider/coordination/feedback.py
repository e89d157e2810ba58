"""Edge-triggered sensory feedback events.

The host decides what a feedback event means on its platform (a haptic
tick, a click sound, nothing at all).  This module only decides *when*:

  - the bound value changed while the user is dragging
  - the dragging state toggled on or off
"""

from __future__ import annotations

from typing import Any, Optional

from betterslider.core.events import EventBus, EventType

_UNSET = object()


class SensoryFeedback:
    """Turns a stream of ``(value, editing)`` observations into feedback events."""

    def __init__(self, event_bus: Optional[EventBus], enabled: bool = False):
        self._bus = event_bus
        self.enabled = enabled
        self._last_value: Any = _UNSET
        self._last_editing = False

    def observe(self, value: Any, editing: bool) -> None:
        value_changed = self._last_value is not _UNSET and value != self._last_value
        editing_toggled = editing != self._last_editing
        self._last_value = value
        self._last_editing = editing

        if not self.enabled or self._bus is None:
            return
        if value_changed and editing:
            self._bus.publish(EventType.FEEDBACK_VALUE_CHANGED, value=value)
        if editing_toggled:
            self._bus.publish(EventType.FEEDBACK_EDITING_TOGGLED, editing=editing)

    def reset(self, value: Any = _UNSET) -> None:
        self._last_value = value
        self._last_editing = False
