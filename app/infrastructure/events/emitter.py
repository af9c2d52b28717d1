"""Instance-owned event emitter.

Each emitter keeps its own ordered list of subscribers; there is no global
registry. Delivery is synchronous and follows subscription order.
"""

from typing import Any, Callable, List

from core.logging import get_module_logger
from infrastructure.events.models import Event

logger = get_module_logger()

EventHandler = Callable[[Event], Any]


class EventEmitter:
    """Ordered observer list with synchronous delivery.

    Usage:
        emitter = EventEmitter(name="lms")
        emitter.subscribe(on_change)
        emitter.emit(LocaleChangedEvent(locale="ru"))
        emitter.unsubscribe(on_change)
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._handlers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register ``handler``; the same callable may be registered twice."""
        self._handlers.append(handler)
        logger.debug(
            "registered_event_handler",
            emitter=self.name,
            handler=getattr(handler, "__name__", "unknown"),
            total_handlers=len(self._handlers),
        )
        return handler

    def unsubscribe(self, handler: EventHandler) -> bool:
        """Remove one registration of ``handler``.

        Returns:
            True if a registration was removed, False if none was found.
        """
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        logger.debug(
            "unregistered_event_handler",
            emitter=self.name,
            handler=getattr(handler, "__name__", "unknown"),
            total_handlers=len(self._handlers),
        )
        return True

    def emit(self, event: Event) -> List[Any]:
        """Deliver ``event`` to every subscriber in registration order.

        Handlers registered or removed while an emit is in progress take
        effect from the next emit. If a handler raises, the error is logged
        and delivery continues with the remaining handlers.

        Args:
            event: The event to deliver.

        Returns:
            List of return values from the handlers that completed.
        """
        results = []
        handlers = list(self._handlers)

        logger.debug(
            "emitting_event",
            emitter=self.name,
            event_type=event.event_type,
            handler_count=len(handlers),
            correlation_id=str(event.correlation_id),
        )

        for handler in handlers:
            try:
                results.append(handler(event))
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    emitter=self.name,
                    handler=getattr(handler, "__name__", "unknown"),
                    event_type=event.event_type,
                    error=str(e),
                    correlation_id=str(event.correlation_id),
                )

        return results

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def clear(self) -> None:
        """Remove every subscriber."""
        self._handlers.clear()
