from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

from pydantic import ValidationError

from cashpot_attachments.data.models import Attachment
from cashpot_attachments.utils import get_logger


logger = get_logger(__name__)

SnapshotMapping = dict[str, list[Attachment]]


class SnapshotDecodeError(ValueError):
    """Raised internally when a stored snapshot cannot be decoded."""


class SnapshotStore(Protocol):
    """Durable backing for the snapshot cache.

    Implementations must never raise from any method: a failed read yields an
    empty mapping and a failed write leaves the in-memory cache authoritative.
    """

    def load(self) -> SnapshotMapping: ...

    def save(self, snapshots: Mapping[str, Sequence[Attachment]]) -> None: ...

    def clear(self, storage_key: str) -> None: ...

    def clear_all(self) -> None: ...


def encode_snapshots(snapshots: Mapping[str, Sequence[Attachment]]) -> str:
    payload = {
        key: [attachment.to_storage() for attachment in attachments]
        for key, attachments in snapshots.items()
    }
    return json.dumps(payload, ensure_ascii=False)


def decode_snapshots(raw: str) -> SnapshotMapping:
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotDecodeError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise SnapshotDecodeError("Snapshot root must be a JSON object")

    snapshots: SnapshotMapping = {}
    for key, items in payload.items():
        if not isinstance(items, list):
            raise SnapshotDecodeError(f"Snapshot entry {key!r} must be an array")
        try:
            snapshots[key] = [Attachment.from_storage(item) for item in items]
        except ValidationError as exc:
            raise SnapshotDecodeError(
                f"Snapshot entry {key!r} has invalid attachments: {exc}"
            ) from exc
    return snapshots


class JsonFileSnapshotStore:
    """Persist the full snapshot mapping as one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SnapshotMapping:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No attachment snapshot on disk", path=str(self._path))
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "Failed to read attachment snapshot; starting cold",
                path=str(self._path),
                error=str(exc),
            )
            return {}

        try:
            snapshots = decode_snapshots(raw)
        except SnapshotDecodeError as exc:
            logger.warning(
                "Discarding unreadable attachment snapshot",
                path=str(self._path),
                error=str(exc),
            )
            return {}
        logger.debug(
            "Attachment snapshot restored",
            path=str(self._path),
            entries=len(snapshots),
        )
        return snapshots

    def save(self, snapshots: Mapping[str, Sequence[Attachment]]) -> None:
        try:
            self._write(encode_snapshots(snapshots))
        except OSError as exc:
            logger.warning(
                "Failed to persist attachment snapshot",
                path=str(self._path),
                error=str(exc),
            )

    def clear(self, storage_key: str) -> None:
        snapshots = self.load()
        if snapshots.pop(storage_key, None) is None:
            return
        self.save(snapshots)

    def clear_all(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning(
                "Failed to remove attachment snapshot",
                path=str(self._path),
                error=str(exc),
            )

    def _write(self, content: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


class MemorySnapshotStore:
    """In-process store holding the encoded JSON text.

    Useful for tests and for running with persistence disabled; data still
    passes through the same encoding as the file store.
    """

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw
        self.save_count = 0

    def load(self) -> SnapshotMapping:
        if self.raw is None:
            return {}
        try:
            return decode_snapshots(self.raw)
        except SnapshotDecodeError as exc:
            logger.warning("Discarding unreadable in-memory snapshot", error=str(exc))
            return {}

    def save(self, snapshots: Mapping[str, Sequence[Attachment]]) -> None:
        self.raw = encode_snapshots(snapshots)
        self.save_count += 1

    def clear(self, storage_key: str) -> None:
        snapshots = self.load()
        if snapshots.pop(storage_key, None) is None:
            return
        self.save(snapshots)

    def clear_all(self) -> None:
        self.raw = None


__all__ = [
    "JsonFileSnapshotStore",
    "MemorySnapshotStore",
    "SnapshotDecodeError",
    "SnapshotMapping",
    "SnapshotStore",
    "decode_snapshots",
    "encode_snapshots",
]
