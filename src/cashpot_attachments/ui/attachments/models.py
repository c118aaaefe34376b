from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from cashpot_attachments.data import Attachment, EntityType
from cashpot_attachments.services import AttachmentBinding, AttachmentStore, Snapshot
from cashpot_attachments.utils import format_upload_date


@dataclass(slots=True)
class AttachmentColumn:
    key: str
    header: str
    accessor: Callable[[Attachment], str | None]


class AttachmentTableModel(QAbstractTableModel):
    """Table projection bound to one entity's attachment snapshot."""

    def __init__(
        self,
        store: AttachmentStore,
        entity_type: str | EntityType,
        entity_id: int,
    ) -> None:
        super().__init__()
        self._columns: List[AttachmentColumn] = [
            AttachmentColumn("filename", "Filename", lambda item: item.filename),
            AttachmentColumn("mime_type", "Type", lambda item: item.mime_type),
            AttachmentColumn("file_size", "Size", lambda item: item.display_size),
            AttachmentColumn(
                "created_at", "Uploaded", lambda item: format_upload_date(item.created_at)
            ),
        ]
        self._binding: AttachmentBinding = store.bind(
            entity_type, entity_id, self._apply_snapshot
        )
        self._attachments: Snapshot = self._binding.current()

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802
        if parent and parent.isValid():
            return 0
        return len(self._attachments)

    def columnCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802
        if parent and parent.isValid():
            return 0
        return len(self._columns)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802, ANN001
        if not index.isValid():
            return None

        row = index.row()
        if row < 0 or row >= len(self._attachments):
            return None

        attachment = self._attachments[row]
        if role == Qt.ItemDataRole.DisplayRole:
            value = self._columns[index.column()].accessor(attachment)
            return value if value not in {None, ""} else "—"
        if role == Qt.ItemDataRole.ToolTipRole:
            return attachment.url
        if role == Qt.ItemDataRole.UserRole:
            return attachment
        return None

    def headerData(  # noqa: N802
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ):
        if orientation != Qt.Orientation.Horizontal:
            return super().headerData(section, orientation, role)
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if section < 0 or section >= len(self._columns):
            return None
        return self._columns[section].header

    def attachment_at(self, row: int) -> Attachment | None:
        if 0 <= row < len(self._attachments):
            return self._attachments[row]
        return None

    def attachments(self) -> Snapshot:
        return self._attachments

    def close(self) -> None:
        self._binding.close()

    def _apply_snapshot(self, snapshot: Snapshot) -> None:
        self.beginResetModel()
        self._attachments = snapshot
        self.endResetModel()


__all__ = ["AttachmentColumn", "AttachmentTableModel"]
