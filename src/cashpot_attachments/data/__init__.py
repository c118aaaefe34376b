"""Data layer: attachment models and durable snapshot storage."""

from .models import Attachment, EntityKey, EntityType, StoredModel
from .storage import (
    JsonFileSnapshotStore,
    MemorySnapshotStore,
    SnapshotMapping,
    SnapshotStore,
)

__all__ = [
    "Attachment",
    "EntityKey",
    "EntityType",
    "StoredModel",
    "JsonFileSnapshotStore",
    "MemorySnapshotStore",
    "SnapshotMapping",
    "SnapshotStore",
]
