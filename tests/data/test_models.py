from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from cashpot_attachments.data import Attachment, EntityKey, EntityType
from tests.factories import make_attachment


def test_attachment_serializes_with_storage_field_names() -> None:
    attachment = make_attachment(7, filename="licence.pdf", file_size=1536)

    payload = attachment.to_storage()

    assert set(payload) == {"id", "filename", "mimeType", "fileSize", "createdAt", "url"}
    assert payload["mimeType"] == "application/pdf"
    assert payload["fileSize"] == 1536
    assert payload["createdAt"].startswith("2024-03-01T09:30:00")


def test_attachment_accepts_python_field_names() -> None:
    attachment = Attachment(
        id=1,
        filename="logo.png",
        mime_type="image/png",
        file_size=10,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        url="/files/logo.png",
    )

    assert attachment.is_image
    assert attachment.display_size == "10 B"


def test_attachment_is_immutable() -> None:
    attachment = make_attachment(1)

    with pytest.raises(ValidationError):
        attachment.filename = "renamed.pdf"  # type: ignore[misc]


def test_attachment_rejects_negative_size() -> None:
    with pytest.raises(ValidationError) as excinfo:
        make_attachment(1, file_size=-1)

    assert "fileSize" in str(excinfo.value)


def test_entity_key_storage_format_and_equality() -> None:
    key = EntityKey.of(EntityType.COMPANIES, 5)

    assert key.storage_key == "companies-5"
    assert key == EntityKey("companies", 5)
    assert key != EntityKey("locations", 5)
    assert key != EntityKey("companies", 6)
    assert hash(key) == hash(EntityKey("companies", 5))


def test_entity_key_accepts_unknown_types() -> None:
    key = EntityKey.of("warehouse-bins", 12)

    assert key.storage_key == "warehouse-bins-12"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("companies-5", EntityKey("companies", 5)),
        ("legal-documents-42", EntityKey("legal-documents", 42)),
        ("onjn_report-3", EntityKey("onjn_report", 3)),
    ],
)
def test_entity_key_parses_storage_keys(raw: str, expected: EntityKey) -> None:
    assert EntityKey.from_storage_key(raw) == expected


@pytest.mark.parametrize("raw", ["companies", "-5", "companies-abc"])
def test_entity_key_rejects_malformed_storage_keys(raw: str) -> None:
    with pytest.raises(ValueError):
        EntityKey.from_storage_key(raw)


def test_entity_key_rejects_negative_ids() -> None:
    with pytest.raises(ValueError):
        EntityKey.of("companies", -5)
    with pytest.raises(ValueError):
        EntityKey("companies", -1)


def test_entity_key_storage_key_round_trips() -> None:
    key = EntityKey.of(EntityType.RENT_AGREEMENTS, 0)

    assert EntityKey.from_storage_key(key.storage_key) == key
