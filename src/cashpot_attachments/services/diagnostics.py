from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from cashpot_attachments.utils import format_file_size, get_logger

from .bindings import AttachmentStore


logger = get_logger(__name__)


@dataclass(slots=True)
class AttachmentStats:
    entities: int
    total_files: int
    total_bytes: int
    files_by_type: dict[str, int] = field(default_factory=dict)

    @property
    def display_size(self) -> str:
        return format_file_size(self.total_bytes)


class AttachmentDiagnostics:
    """Summaries and maintenance over the cached attachment snapshots."""

    def __init__(self, store: AttachmentStore) -> None:
        self._store = store

    def stats(self) -> AttachmentStats:
        snapshots = self._store.cache.entries()
        by_type: Counter[str] = Counter()
        total_files = 0
        total_bytes = 0
        for key, attachments in snapshots.items():
            by_type[key.entity_type] += len(attachments)
            total_files += len(attachments)
            total_bytes += sum(item.file_size for item in attachments)
        return AttachmentStats(
            entities=sum(1 for items in snapshots.values() if items),
            total_files=total_files,
            total_bytes=total_bytes,
            files_by_type=dict(by_type),
        )

    def purge(self) -> AttachmentStats:
        """Drop every cached listing; return what was held beforehand."""

        before = self.stats()
        self._store.clear_all_attachment_cache()
        logger.info(
            "Attachment cache purged",
            entities=before.entities,
            files=before.total_files,
        )
        return before


__all__ = ["AttachmentDiagnostics", "AttachmentStats"]
