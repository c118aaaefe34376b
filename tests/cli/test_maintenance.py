from __future__ import annotations

import json

from cashpot_attachments.bootstrap import build_snapshot_store, build_store
from cashpot_attachments.cli.maintenance import run
from cashpot_attachments.config import Settings
from cashpot_attachments.data.storage import JsonFileSnapshotStore, MemorySnapshotStore
from cashpot_attachments.services import AttachmentStore
from tests.factories import make_attachment


def test_show_and_stats_commands(attachment_store: AttachmentStore, capsys) -> None:
    attachment_store.add_attachment("companies", 5, make_attachment(1))

    assert run(["show", "companies", "5"], store=attachment_store) == 0
    shown = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in shown] == [1]

    assert run(["stats"], store=attachment_store) == 0
    stats = json.loads(capsys.readouterr().out)
    assert stats["files"] == 1
    assert stats["by_type"] == {"companies": 1}


def test_clear_commands(attachment_store: AttachmentStore) -> None:
    attachment_store.add_attachment("companies", 5, make_attachment(1))
    attachment_store.add_attachment("locations", 2, make_attachment(2))

    before = attachment_store.use_entity_attachments("companies", 5)
    run(["clear", "companies", "5"], store=attachment_store)
    after = attachment_store.use_entity_attachments("companies", 5)
    assert after is not before
    assert [a.id for a in after] == [1]
    assert len(attachment_store.use_entity_attachments("locations", 2)) == 1

    run(["clear-all"], store=attachment_store)
    assert attachment_store.use_entity_attachments("locations", 2) == ()


def test_build_store_honours_persist_flag(tmp_path) -> None:
    path = tmp_path / "cache.json"

    assert isinstance(build_snapshot_store(Settings(snapshot_path=path)), JsonFileSnapshotStore)
    assert isinstance(
        build_snapshot_store(Settings(snapshot_path=path, persist=False)),
        MemorySnapshotStore,
    )

    store = build_store(Settings(snapshot_path=path))
    store.add_attachment("game-mixes", 1, make_attachment(1))
    assert path.exists()
