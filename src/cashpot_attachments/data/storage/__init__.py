"""Durable snapshot storage for attachment listings."""

from .snapshots import (
    JsonFileSnapshotStore,
    MemorySnapshotStore,
    SnapshotDecodeError,
    SnapshotMapping,
    SnapshotStore,
    decode_snapshots,
    encode_snapshots,
)

__all__ = [
    "JsonFileSnapshotStore",
    "MemorySnapshotStore",
    "SnapshotDecodeError",
    "SnapshotMapping",
    "SnapshotStore",
    "decode_snapshots",
    "encode_snapshots",
]
