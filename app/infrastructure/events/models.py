"""Event models for infrastructure event system."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


@dataclass
class Event:
    """Base class for all events in the system.

    Events are records of something that happened, delivered to the
    subscribers of the emitter that owns them.
    """

    event_type: str
    """The type of event (e.g., 'locale.changed')."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom metadata for this event type."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary representation with ISO format timestamp and UUID as
            string.
        """
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data

    def __hash__(self) -> int:
        """Hash based on correlation_id and timestamp."""
        return hash((self.correlation_id, self.timestamp))


LOCALE_CHANGED = "locale.changed"


@dataclass
class LocaleChangedEvent(Event):
    """Emitted by a LocaleStore after the new locale has been persisted."""

    event_type: str = LOCALE_CHANGED
    locale: Optional[str] = None
    """New locale code."""

    previous_locale: Optional[str] = None
    """Locale code before the change."""

    surface: Optional[str] = None
    """UI surface whose store changed ("admin", "lms")."""

    def __hash__(self) -> int:
        return hash((self.correlation_id, self.timestamp))
