"""Infrastructure event system - instance-owned event emitters.

Usage:

    from infrastructure.events import EventEmitter, LocaleChangedEvent

    emitter = EventEmitter(name="lms")

    def on_change(event: LocaleChangedEvent) -> None:
        ...

    emitter.subscribe(on_change)
    emitter.emit(LocaleChangedEvent(locale="ru", surface="lms"))
"""

from infrastructure.events.emitter import EventEmitter, EventHandler
from infrastructure.events.models import LOCALE_CHANGED, Event, LocaleChangedEvent

__all__ = [
    "Event",
    "EventEmitter",
    "EventHandler",
    "LocaleChangedEvent",
    "LOCALE_CHANGED",
]
