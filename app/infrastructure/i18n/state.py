"""Persisted locale state for one UI surface.

A LocaleStore holds the surface's current locale, writes every change
through to client storage and then notifies its subscribers. Stores are
constructed explicitly per surface; the admin and LMS stores use different
storage keys and never observe each other.

Usage:
    store = LocaleStore(JSONFileStorage(path), storage_key="futureup-lms-locale")

    with store.subscribe(lambda event: rerender(event.locale)):
        store.set_locale("ru")
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

from core.logging import get_module_logger
from infrastructure.events import EventEmitter, LocaleChangedEvent
from infrastructure.i18n.models import Locale
from infrastructure.persistence import KeyValueStorage

logger = get_module_logger()

LocaleListener = Callable[[LocaleChangedEvent], object]


class Subscription:
    """Handle for one registered listener.

    Releasing is idempotent. Used as a context manager, the listener is
    released when the block exits, normally or by exception.
    """

    def __init__(self, emitter: EventEmitter, listener: LocaleListener):
        self._emitter = emitter
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if self._active:
            self._emitter.unsubscribe(self._listener)
            self._active = False

    close = unsubscribe

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()


class LocaleStore:
    """Current locale of one surface, persisted under ``storage_key``.

    Attributes:
        storage: Client key-value storage.
        storage_key: Key holding this surface's locale code.
        default_locale: Locale used when nothing valid is persisted.
        surface: Surface name carried on change events.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str,
        default_locale: Union[Locale, str] = Locale.AZ,
        surface: Optional[str] = None,
    ):
        if not storage_key:
            raise ValueError("storage_key must be a non-empty string")
        self.storage = storage
        self.storage_key = storage_key
        self.default_locale = Locale.from_string(default_locale)
        self.surface = surface
        self._emitter = EventEmitter(name=surface or storage_key)
        self._locale = self._read_persisted()
        self.log = logger.bind(surface=surface, storage_key=storage_key)
        self.log.debug("locale_store_initialized", locale=self._locale.value)

    def _read_persisted(self) -> Locale:
        stored = self.storage.read(self.storage_key)
        if stored is None:
            return self.default_locale
        try:
            return Locale(stored)
        except ValueError:
            logger.debug(
                "ignored_invalid_persisted_locale",
                storage_key=self.storage_key,
                value=stored,
            )
            return self.default_locale

    def get_locale(self) -> Locale:
        return self._locale

    @property
    def locale(self) -> Locale:
        return self._locale

    def set_locale(self, locale: Union[Locale, str]) -> None:
        """Change the locale, persist it, then notify every subscriber.

        Subscribers are notified on every call, including when the locale
        does not change.

        Args:
            locale: New locale.

        Raises:
            ValueError: If ``locale`` is not supported; nothing changes.
            OSError: If the storage write fails; the previous locale is
                restored and no subscriber is notified.
        """
        new_locale = Locale.from_string(locale)
        previous = self._locale

        self._locale = new_locale
        try:
            self.storage.write(self.storage_key, new_locale.value)
        except Exception:
            self._locale = previous
            self.log.exception("locale_persist_failed", locale=new_locale.value)
            raise

        self.log.info(
            "locale_changed",
            locale=new_locale.value,
            previous_locale=previous.value,
            subscriber_count=self._emitter.handler_count,
        )
        self._emitter.emit(
            LocaleChangedEvent(
                locale=new_locale,
                previous_locale=previous,
                surface=self.surface,
            )
        )

    def subscribe(self, listener: LocaleListener) -> Subscription:
        """Register ``listener`` for change events.

        Returns:
            Subscription that releases the listener on unsubscribe() or when
            used as a context manager.
        """
        self._emitter.subscribe(listener)
        return Subscription(self._emitter, listener)

    @contextmanager
    def subscription(self, listener: LocaleListener) -> Iterator[Subscription]:
        """Scoped subscription: released when the block exits."""
        sub = self.subscribe(listener)
        try:
            yield sub
        finally:
            sub.unsubscribe()

    @property
    def subscriber_count(self) -> int:
        return self._emitter.handler_count

    def reload(self) -> Locale:
        """Re-read the persisted value without notifying subscribers.

        Picks up writes made by another store on the same storage.
        """
        self._locale = self._read_persisted()
        return self._locale
