from __future__ import annotations

from typing import Callable, Iterable, Mapping, Sequence

from cashpot_attachments.data.models import Attachment, EntityKey, EntityType
from cashpot_attachments.utils import get_logger

from .base import EventHook, Listener, ListenerRegistry, Unsubscribe


logger = get_logger(__name__)


class AttachmentManager:
    """Authoritative per-entity attachment lists with change notification.

    Only the upload and delete flows should call the mutation methods; every
    other caller reads. Notifications for a key are delivered after the list
    for that key has been fully updated, and never fan out to other keys.

    Key-agnostic observers registered through ``on_mutated`` see every
    notified key before the per-key subscribers do.
    """

    def __init__(self) -> None:
        self._attachments: dict[EntityKey, list[Attachment]] = {}
        self._listeners: ListenerRegistry[EntityKey] = ListenerRegistry()
        self._mutated: EventHook[EntityKey] = EventHook()

    # ------------------------------------------------------------------ Reads

    def get_attachments(
        self, entity_type: str | EntityType, entity_id: int
    ) -> tuple[Attachment, ...]:
        return tuple(self._attachments.get(EntityKey.of(entity_type, entity_id), ()))

    def first_image(
        self, entity_type: str | EntityType, entity_id: int
    ) -> Attachment | None:
        """Return the first image attachment, used for logos and avatars."""

        for attachment in self.get_attachments(entity_type, entity_id):
            if attachment.is_image:
                return attachment
        return None

    def entity_keys(self) -> list[EntityKey]:
        return [key for key, items in self._attachments.items() if items]

    # ---------------------------------------------------------- Subscriptions

    def subscribe(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        callback: Listener,
    ) -> Unsubscribe:
        return self._listeners.subscribe(EntityKey.of(entity_type, entity_id), callback)

    def on_mutated(self, callback: Callable[[EntityKey], None]) -> Unsubscribe:
        return self._mutated.subscribe(callback)

    def subscriber_count(
        self, entity_type: str | EntityType | None = None, entity_id: int | None = None
    ) -> int:
        if entity_type is None or entity_id is None:
            return self._listeners.listener_count()
        return self._listeners.listener_count(EntityKey.of(entity_type, entity_id))

    # -------------------------------------------------------------- Mutations

    def add_attachment(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        attachment: Attachment,
    ) -> None:
        key = EntityKey.of(entity_type, entity_id)
        items = self._attachments.setdefault(key, [])
        for index, existing in enumerate(items):
            if existing.id == attachment.id:
                items[index] = attachment
                logger.debug(
                    "Replaced attachment with duplicate id",
                    key=key.storage_key,
                    attachment_id=attachment.id,
                )
                break
        else:
            items.append(attachment)
        logger.debug(
            "Attachment added",
            key=key.storage_key,
            attachment_id=attachment.id,
            count=len(items),
        )
        self._notify(key)

    def remove_attachment(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        attachment_id: int,
    ) -> bool:
        key = EntityKey.of(entity_type, entity_id)
        items = self._attachments.get(key)
        if not items:
            return False
        for index, existing in enumerate(items):
            if existing.id == attachment_id:
                del items[index]
                break
        else:
            return False
        if not items:
            del self._attachments[key]
        logger.debug(
            "Attachment removed",
            key=key.storage_key,
            attachment_id=attachment_id,
            count=len(items),
        )
        self._notify(key)
        return True

    def refresh(self, entity_type: str | EntityType, entity_id: int) -> None:
        """Re-announce a key without changing it, e.g. after its snapshot was dropped."""

        self._notify(EntityKey.of(entity_type, entity_id))

    def forget_all(self) -> list[EntityKey]:
        keys = list(self._attachments)
        self._attachments.clear()
        for key in keys:
            self._notify(key)
        return keys

    def seed(
        self,
        snapshots: Mapping[str, Sequence[Attachment]] | Iterable[tuple[EntityKey, Sequence[Attachment]]],
    ) -> int:
        """Bulk-load lists (e.g. a restored snapshot) without notifying.

        Keys may be ``EntityKey`` instances or ``"{type}-{id}"`` strings;
        unparseable keys are skipped. Returns the number of keys loaded.
        """

        pairs = snapshots.items() if isinstance(snapshots, Mapping) else snapshots
        loaded = 0
        for raw_key, attachments in pairs:
            if isinstance(raw_key, EntityKey):
                key = raw_key
            else:
                try:
                    key = EntityKey.from_storage_key(raw_key)
                except ValueError:
                    logger.warning("Skipping unparseable attachment key", key=raw_key)
                    continue
            if not attachments:
                continue
            self._attachments[key] = list(attachments)
            loaded += 1
        return loaded

    # --------------------------------------------------------------- Helpers

    def _notify(self, key: EntityKey) -> None:
        self._mutated.emit(key)
        self._listeners.notify(key)


__all__ = ["AttachmentManager"]
