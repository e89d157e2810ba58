"""EventBus for decoupled publish/subscribe between the engine and its host."""

from enum import Enum, auto
from typing import Any, Callable
from collections import defaultdict


class EventType(Enum):
    # Bound state changes
    VALUE_CHANGED = auto()             # data: value (float)
    SELECTION_CHANGED = auto()         # data: lower (float), upper (float)

    # Gesture state (Idle <-> Dragging)
    EDITING_CHANGED = auto()           # data: editing (bool)

    # Sensory feedback edges
    FEEDBACK_VALUE_CHANGED = auto()    # data: value (float | Selection)
    FEEDBACK_EDITING_TOGGLED = auto()  # data: editing (bool)


class EventBus:
    """Simple publish/subscribe event system.

    Handlers run synchronously in subscription order; an exception raised
    by a handler propagates out of :meth:`publish`.
    """

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    def has_subscribers(self, event_type: EventType) -> bool:
        return bool(self._handlers.get(event_type))

    def publish(self, event_type: EventType, **data: Any) -> None:
        # Copy so a handler may unsubscribe itself mid-dispatch.
        for handler in list(self._handlers[event_type]):
            handler(**data)

    def clear(self) -> None:
        self._handlers.clear()
