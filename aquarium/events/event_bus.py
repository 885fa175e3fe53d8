"""In-process publish/subscribe for tank notifications.

The engine publishes domain events here and never looks at who is
listening. The HUD, the sound board and tests attach handlers by event
class. Dispatch is synchronous: ``emit`` returns only after every handler
has run, on the caller's thread, between or inside ticks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")
Handler = Callable[[E], None]


class EventBus:
    """Routes each emitted event to the handlers registered for its class.

    Handlers for one class run in registration order. A handler may
    subscribe or unsubscribe while an event is being dispatched; the change
    applies from the next ``emit``.

    Example:
        bus = EventBus()
        detach = bus.subscribe(FoodDroppedEvent, sound_board.on_event)
        bus.emit(FoodDroppedEvent(x=400, y=300, frame=12))
        detach()
    """

    def __init__(self) -> None:
        self._routes: dict[type, list[Handler]] = {}

    def subscribe(self, event_type: type[E], handler: Handler) -> Callable[[], bool]:
        """Attach ``handler`` to ``event_type``.

        Returns:
            A zero-argument callable that detaches the handler again
        """
        self._routes.setdefault(event_type, []).append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def subscribe_all(self, event_types: Iterable[type], handler: Handler) -> None:
        """Attach one handler to several event classes."""
        for event_type in event_types:
            self.subscribe(event_type, handler)

    def unsubscribe(self, event_type: type[E], handler: Handler) -> bool:
        """Detach ``handler``; False if it was not attached."""
        route = self._routes.get(event_type, [])
        if handler not in route:
            return False
        route.remove(handler)
        if not route:
            del self._routes[event_type]
        return True

    def emit(self, event: object) -> int:
        """Dispatch ``event`` and return how many handlers received it."""
        route = self._routes.get(type(event))
        if not route:
            return 0
        snapshot = tuple(route)
        for handler in snapshot:
            handler(event)
        return len(snapshot)

    def handlers_for(self, event_type: type) -> tuple[Handler, ...]:
        return tuple(self._routes.get(event_type, ()))

    def clear(self) -> None:
        logger.debug("Detaching handlers for %d event types", len(self._routes))
        self._routes.clear()
