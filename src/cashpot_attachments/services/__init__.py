"""Attachment services: manager, snapshot cache, bindings and diagnostics."""

from .attachments import AttachmentManager
from .base import EventHook, Listener, ListenerRegistry, Unsubscribe
from .bindings import AttachmentBinding, AttachmentStore, ChangeCallback
from .diagnostics import AttachmentDiagnostics, AttachmentStats
from .snapshot import EMPTY_SNAPSHOT, Snapshot, SnapshotCache

__all__ = [
    "AttachmentManager",
    "AttachmentBinding",
    "AttachmentStore",
    "AttachmentDiagnostics",
    "AttachmentStats",
    "EventHook",
    "ChangeCallback",
    "EMPTY_SNAPSHOT",
    "Listener",
    "ListenerRegistry",
    "Snapshot",
    "SnapshotCache",
    "Unsubscribe",
]
