from __future__ import annotations

from typing import Callable, Generic, Hashable, TypeVar

from cashpot_attachments.utils import get_logger


logger = get_logger(__name__)

KeyT = TypeVar("KeyT", bound=Hashable)
T_co = TypeVar("T_co", covariant=True)

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class EventHook(Generic[T_co]):
    """Simple observer pattern helper for key-agnostic notifications."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T_co], None]] = []

    def subscribe(self, callback: Callable[[T_co], None]) -> Unsubscribe:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:  # pragma: no cover - best effort cleanup
                pass

        return unsubscribe

    def emit(self, payload: T_co) -> None:
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except Exception:  # noqa: BLE001 - hooks must not break mutations
                logger.exception("Attachment event hook failed")


class _Registration:
    __slots__ = ("callback", "active")

    def __init__(self, callback: Listener) -> None:
        self.callback = callback
        self.active = True


class ListenerRegistry(Generic[KeyT]):
    """Observer registry keyed by an arbitrary hashable key.

    Notifying a key only reaches listeners registered for that key. A listener
    removed while a notification is in flight is not called again.
    """

    def __init__(self) -> None:
        self._listeners: dict[KeyT, list[_Registration]] = {}

    def subscribe(self, key: KeyT, callback: Listener) -> Unsubscribe:
        registration = _Registration(callback)
        self._listeners.setdefault(key, []).append(registration)

        def unsubscribe() -> None:
            if not registration.active:
                return
            registration.active = False
            registrations = self._listeners.get(key)
            if registrations is None:
                return
            try:
                registrations.remove(registration)
            except ValueError:  # pragma: no cover - already detached
                pass
            if not registrations:
                del self._listeners[key]

        return unsubscribe

    def notify(self, key: KeyT) -> int:
        """Invoke every active listener for ``key``; return how many ran."""

        delivered = 0
        for registration in list(self._listeners.get(key, ())):
            if not registration.active:
                continue
            try:
                registration.callback()
            except Exception:  # noqa: BLE001 - one listener must not starve the rest
                logger.exception("Attachment listener failed", key=str(key))
            delivered += 1
        return delivered

    def listener_count(self, key: KeyT | None = None) -> int:
        if key is not None:
            return len(self._listeners.get(key, ()))
        return sum(len(items) for items in self._listeners.values())


__all__ = ["EventHook", "Listener", "ListenerRegistry", "Unsubscribe"]
