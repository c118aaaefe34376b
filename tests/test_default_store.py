from __future__ import annotations

from collections.abc import Iterator

import pytest

import cashpot_attachments
from cashpot_attachments.data.storage import MemorySnapshotStore
from cashpot_attachments.services import AttachmentStore
from tests.factories import make_attachment


@pytest.fixture
def installed_store() -> Iterator[AttachmentStore]:
    store = AttachmentStore(MemorySnapshotStore())
    cashpot_attachments.set_default_store(store)
    yield store
    cashpot_attachments.set_default_store(None)


def test_module_helpers_use_default_store(installed_store: AttachmentStore) -> None:
    cashpot_attachments.add_attachment("users", 3, make_attachment(1, mime_type="image/png"))

    listing = cashpot_attachments.use_entity_attachments("users", 3)

    assert cashpot_attachments.default_store() is installed_store
    assert listing is cashpot_attachments.use_entity_attachments("users", 3)

    assert cashpot_attachments.remove_attachment("users", 3, 1) is True
    cashpot_attachments.add_attachment("users", 3, make_attachment(2))
    cashpot_attachments.clear_attachment_cache("users", 3)
    assert [a.id for a in cashpot_attachments.use_entity_attachments("users", 3)] == [2]

    cashpot_attachments.add_attachment("users", 4, make_attachment(5))
    cashpot_attachments.clear_all_attachment_cache()
    assert cashpot_attachments.use_entity_attachments("users", 4) == ()
