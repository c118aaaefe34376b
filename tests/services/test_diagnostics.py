from __future__ import annotations

from cashpot_attachments.data.storage import MemorySnapshotStore
from cashpot_attachments.services import AttachmentDiagnostics, AttachmentStore
from tests.factories import make_attachment


def test_stats_summarise_cached_listings(attachment_store: AttachmentStore) -> None:
    attachment_store.add_attachment("companies", 5, make_attachment(1, file_size=1024))
    attachment_store.add_attachment("companies", 5, make_attachment(2, file_size=1024))
    attachment_store.add_attachment("invoices", 9, make_attachment(3, file_size=512))

    stats = AttachmentDiagnostics(attachment_store).stats()

    assert stats.entities == 2
    assert stats.total_files == 3
    assert stats.total_bytes == 2560
    assert stats.files_by_type == {"companies": 2, "invoices": 1}
    assert stats.display_size == "2.5 KB"


def test_purge_clears_everything(
    attachment_store: AttachmentStore,
    memory_store: MemorySnapshotStore,
) -> None:
    attachment_store.add_attachment("companies", 5, make_attachment(1))
    diagnostics = AttachmentDiagnostics(attachment_store)

    before = diagnostics.purge()

    assert before.total_files == 1
    assert diagnostics.stats().total_files == 0
    assert memory_store.load() == {}
