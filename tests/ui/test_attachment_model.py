from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from cashpot_attachments.data import Attachment
from cashpot_attachments.services import AttachmentStore
from cashpot_attachments.ui.attachments import AttachmentTableModel
from tests.factories import make_attachment


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def test_model_projects_attachment_columns(
    qt_app: QApplication,  # noqa: ARG001 - fixture ensures Qt initialised
    attachment_store: AttachmentStore,
) -> None:
    attachment_store.add_attachment(
        "companies", 5, make_attachment(1, filename="contract.pdf", file_size=2048)
    )
    model = AttachmentTableModel(attachment_store, "companies", 5)

    assert model.rowCount() == 1
    assert model.columnCount() == 4
    assert model.headerData(0, Qt.Orientation.Horizontal) == "Filename"
    assert model.data(model.index(0, 0)) == "contract.pdf"
    assert model.data(model.index(0, 2)) == "2.0 KB"
    assert model.data(model.index(0, 3)) == "2024-03-01"

    attachment = model.data(model.index(0, 0), Qt.ItemDataRole.UserRole)
    assert isinstance(attachment, Attachment)
    assert attachment.id == 1


def test_model_follows_store_mutations(
    qt_app: QApplication,  # noqa: ARG001
    attachment_store: AttachmentStore,
) -> None:
    model = AttachmentTableModel(attachment_store, "slots", 7)
    resets: list[int] = []
    model.modelReset.connect(lambda: resets.append(1))

    attachment_store.add_attachment("slots", 7, make_attachment(1))
    attachment_store.add_attachment("slots", 7, make_attachment(2))
    attachment_store.remove_attachment("slots", 7, 1)

    assert len(resets) == 3
    assert model.rowCount() == 1
    assert model.attachment_at(0) == make_attachment(2)
    assert model.attachment_at(5) is None

    model.close()
    attachment_store.add_attachment("slots", 7, make_attachment(3))
    assert model.rowCount() == 1
