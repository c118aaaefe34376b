from __future__ import annotations

from cashpot_attachments.config import Settings, SettingsManager
from cashpot_attachments.data import Attachment, EntityType
from cashpot_attachments.data.storage import (
    JsonFileSnapshotStore,
    MemorySnapshotStore,
    SnapshotStore,
)
from cashpot_attachments.services import AttachmentStore, Snapshot
from cashpot_attachments.utils import get_logger


logger = get_logger(__name__)

_default_store: AttachmentStore | None = None


def build_snapshot_store(settings: Settings) -> SnapshotStore:
    if not settings.persist:
        logger.info("Attachment cache persistence disabled; using memory store")
        return MemorySnapshotStore()
    return JsonFileSnapshotStore(settings.snapshot_path)


def build_store(settings: Settings | None = None) -> AttachmentStore:
    """Create an attachment store restored from the configured snapshot."""

    resolved = settings or SettingsManager().load()
    store = AttachmentStore(build_snapshot_store(resolved))
    logger.debug(
        "Attachment store initialised",
        persist=resolved.persist,
        snapshot_path=str(resolved.snapshot_path),
    )
    return store


def default_store() -> AttachmentStore:
    """Return the process-wide store used by the module-level helpers."""

    global _default_store
    if _default_store is None:
        _default_store = build_store()
    return _default_store


def set_default_store(store: AttachmentStore | None) -> None:
    global _default_store
    _default_store = store


def use_entity_attachments(entity_type: str | EntityType, entity_id: int) -> Snapshot:
    return default_store().use_entity_attachments(entity_type, entity_id)


def add_attachment(
    entity_type: str | EntityType, entity_id: int, attachment: Attachment
) -> None:
    default_store().add_attachment(entity_type, entity_id, attachment)


def remove_attachment(
    entity_type: str | EntityType, entity_id: int, attachment_id: int
) -> bool:
    return default_store().remove_attachment(entity_type, entity_id, attachment_id)


def clear_attachment_cache(entity_type: str | EntityType, entity_id: int) -> None:
    default_store().clear_attachment_cache(entity_type, entity_id)


def clear_all_attachment_cache() -> None:
    default_store().clear_all_attachment_cache()


__all__ = [
    "add_attachment",
    "build_snapshot_store",
    "build_store",
    "clear_all_attachment_cache",
    "clear_attachment_cache",
    "default_store",
    "remove_attachment",
    "set_default_store",
    "use_entity_attachments",
]
