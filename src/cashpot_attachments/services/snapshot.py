from __future__ import annotations

from typing import Sequence

from cashpot_attachments.data.models import Attachment, EntityKey
from cashpot_attachments.data.storage import SnapshotMapping, SnapshotStore
from cashpot_attachments.utils import get_logger


logger = get_logger(__name__)

Snapshot = tuple[Attachment, ...]

EMPTY_SNAPSHOT: Snapshot = ()


def _same_content(cached: Snapshot, current: Sequence[Attachment]) -> bool:
    if len(cached) != len(current):
        return False
    # Positional on purpose: a reordered list counts as a change.
    for previous, latest in zip(cached, current):
        if previous.id != latest.id or previous.url != latest.url:
            return False
    return True


class SnapshotCache:
    """Memoized, reference-stable views of per-entity attachment lists.

    ``resolve`` hands back the very same tuple for as long as the underlying
    list is unchanged (same length, same ``id`` and ``url`` at every index),
    so consumers can skip recomputation with an identity check. Every change
    writes the whole cache through to the injected store.
    """

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store
        self._entries: dict[EntityKey, Snapshot] | None = None

    # ----------------------------------------------------------------- Public

    def resolve(self, key: EntityKey, current: Sequence[Attachment]) -> Snapshot:
        entries = self._ensure_loaded()
        cached = entries.get(key)

        if cached is None and not current:
            return EMPTY_SNAPSHOT
        if cached is not None and _same_content(cached, current):
            return cached

        fresh: Snapshot = tuple(current)
        entries[key] = fresh
        logger.debug("Attachment snapshot updated", key=key.storage_key, count=len(fresh))
        self._persist()
        return fresh

    def get(self, key: EntityKey) -> Snapshot | None:
        return self._ensure_loaded().get(key)

    def snapshot(self) -> SnapshotMapping:
        """Return a copy of every cached entry keyed by storage key."""

        return {key.storage_key: list(items) for key, items in self._ensure_loaded().items()}

    def entries(self) -> dict[EntityKey, Snapshot]:
        return dict(self._ensure_loaded())

    def clear(self, key: EntityKey) -> None:
        entries = self._ensure_loaded()
        entries.pop(key, None)
        self._store.clear(key.storage_key)
        logger.info("Attachment cache cleared", key=key.storage_key)

    def clear_all(self) -> None:
        self._ensure_loaded().clear()
        self._store.clear_all()
        logger.info("Attachment cache cleared for all entities")

    def __contains__(self, key: object) -> bool:
        return key in self._ensure_loaded()

    def __len__(self) -> int:
        return len(self._ensure_loaded())

    # --------------------------------------------------------------- Helpers

    def _ensure_loaded(self) -> dict[EntityKey, Snapshot]:
        if self._entries is None:
            self._entries = self._restore()
        return self._entries

    def _restore(self) -> dict[EntityKey, Snapshot]:
        entries: dict[EntityKey, Snapshot] = {}
        for raw_key, attachments in self._store.load().items():
            try:
                key = EntityKey.from_storage_key(raw_key)
            except ValueError:
                logger.warning("Ignoring unparseable snapshot key", key=raw_key)
                continue
            entries[key] = tuple(attachments)
        if entries:
            logger.info("Attachment snapshots restored", entries=len(entries))
        return entries

    def _persist(self) -> None:
        self._store.save(self.snapshot())


__all__ = ["EMPTY_SNAPSHOT", "Snapshot", "SnapshotCache"]
