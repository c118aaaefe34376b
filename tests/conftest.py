from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from cashpot_attachments.data.storage import JsonFileSnapshotStore, MemorySnapshotStore
from cashpot_attachments.services import AttachmentStore
from cashpot_attachments.utils import LoggingOptions, configure_logging


os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

configure_logging(LoggingOptions(level="DEBUG", file_sink=False))


@pytest.fixture
def memory_store() -> MemorySnapshotStore:
    """Fresh in-memory snapshot store per test."""

    return MemorySnapshotStore()


@pytest.fixture
def snapshot_path(tmp_path):
    return tmp_path / "attachments-cache.json"


@pytest.fixture
def file_store(snapshot_path) -> JsonFileSnapshotStore:
    return JsonFileSnapshotStore(snapshot_path)


@pytest.fixture
def attachment_store(memory_store: MemorySnapshotStore) -> Iterator[AttachmentStore]:
    """Attachment store wired to the in-memory snapshot store."""

    yield AttachmentStore(memory_store)
