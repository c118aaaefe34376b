from __future__ import annotations

from typing import Callable

from cashpot_attachments.data.models import Attachment, EntityKey, EntityType
from cashpot_attachments.data.storage import SnapshotStore
from cashpot_attachments.utils import get_logger

from .attachments import AttachmentManager
from .snapshot import Snapshot, SnapshotCache


logger = get_logger(__name__)

ChangeCallback = Callable[[Snapshot], None]


class AttachmentBinding:
    """Reactive read of one entity's attachments.

    Holds a manager subscription for its lifetime. When the manager notifies a
    change the snapshot is re-resolved and ``on_change`` fires only if the
    resolved reference differs from the last one delivered.
    """

    def __init__(
        self,
        manager: AttachmentManager,
        cache: SnapshotCache,
        key: EntityKey,
        on_change: ChangeCallback | None = None,
    ) -> None:
        self._manager = manager
        self._cache = cache
        self._key = key
        self._on_change = on_change
        self._snapshot = self._resolve()
        self._unsubscribe: Callable[[], None] | None = manager.subscribe(
            key.entity_type, key.entity_id, self._handle_change
        )

    @property
    def key(self) -> EntityKey:
        return self._key

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def current(self) -> Snapshot:
        self._snapshot = self._resolve()
        return self._snapshot

    def close(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None

    def __enter__(self) -> AttachmentBinding:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _resolve(self) -> Snapshot:
        return self._cache.resolve(
            self._key,
            self._manager.get_attachments(self._key.entity_type, self._key.entity_id),
        )

    def _handle_change(self) -> None:
        if self._unsubscribe is None:
            return
        latest = self._resolve()
        if latest is self._snapshot:
            return
        self._snapshot = latest
        if self._on_change is not None:
            self._on_change(latest)


class AttachmentStore:
    """Wires one manager and one snapshot cache around an injected store.

    On construction the manager is seeded from the persisted snapshot so
    listings are available straight after a restart. Every key the manager
    notifies is resolved straight away, so mutations made directly on
    ``manager`` reach the durable store even when nothing is bound.
    """

    def __init__(
        self,
        store: SnapshotStore,
        *,
        manager: AttachmentManager | None = None,
    ) -> None:
        self.manager = manager or AttachmentManager()
        self.cache = SnapshotCache(store)
        self._restore()
        self._unhook = self.manager.on_mutated(self._write_through)

    # ------------------------------------------------------------------ Reads

    def use_entity_attachments(
        self, entity_type: str | EntityType, entity_id: int
    ) -> Snapshot:
        key = EntityKey.of(entity_type, entity_id)
        return self.cache.resolve(key, self.manager.get_attachments(entity_type, entity_id))

    def bind(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        on_change: ChangeCallback | None = None,
    ) -> AttachmentBinding:
        return AttachmentBinding(
            self.manager,
            self.cache,
            EntityKey.of(entity_type, entity_id),
            on_change,
        )

    def first_image(
        self, entity_type: str | EntityType, entity_id: int
    ) -> Attachment | None:
        return self.manager.first_image(entity_type, entity_id)

    # -------------------------------------------------------------- Mutations

    def add_attachment(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        attachment: Attachment,
    ) -> None:
        self.manager.add_attachment(entity_type, entity_id, attachment)

    def remove_attachment(
        self,
        entity_type: str | EntityType,
        entity_id: int,
        attachment_id: int,
    ) -> bool:
        return self.manager.remove_attachment(entity_type, entity_id, attachment_id)

    # ----------------------------------------------------------- Invalidation

    def clear_attachment_cache(
        self, entity_type: str | EntityType, entity_id: int
    ) -> None:
        """Drop the memoized snapshot and its durable record for one entity.

        The manager keeps its list. The key is re-announced, so the snapshot
        is rebuilt and written back from the manager, and bound consumers
        receive a newly allocated snapshot with the same content.
        """

        self.cache.clear(EntityKey.of(entity_type, entity_id))
        self.manager.refresh(entity_type, entity_id)

    def clear_all_attachment_cache(self) -> None:
        """Reset every listing; reads return empty until the next mutation."""

        self.cache.clear_all()
        self.manager.forget_all()

    # --------------------------------------------------------------- Helpers

    def _write_through(self, key: EntityKey) -> None:
        self.cache.resolve(key, self.manager.get_attachments(key.entity_type, key.entity_id))

    def _restore(self) -> None:
        known = set(self.manager.entity_keys())
        restored = [
            (key, items)
            for key, items in self.cache.entries().items()
            if key not in known
        ]
        seeded = self.manager.seed(restored)
        if seeded:
            logger.info("Seeded attachment manager from snapshot", entities=seeded)


__all__ = ["AttachmentBinding", "AttachmentStore", "ChangeCallback"]
