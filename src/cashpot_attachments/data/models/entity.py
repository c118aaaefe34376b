from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EntityType(StrEnum):
    """Business object types known to carry attachments.

    The cache never validates against this list; any string is accepted as an
    entity type and callers are responsible for consistent naming.
    """

    USERS = "users"
    PROVIDERS = "providers"
    COMPANIES = "companies"
    LOCATIONS = "locations"
    CABINETS = "cabinets"
    INVOICES = "invoices"
    LEGAL_DOCUMENTS = "legal-documents"
    LEGAL_DOCUMENT = "legal_document"
    ONJN_NOTIFICATION = "onjn_notification"
    ONJN_REPORT = "onjn_report"
    ONJN_REPORT_LEGACY = "onjn-report"
    RENT_AGREEMENTS = "rent-agreements"
    SLOTS = "slots"
    GAME_MIXES = "game-mixes"


@dataclass(slots=True, frozen=True)
class EntityKey:
    """Addresses the attachments of one business object."""

    entity_type: str
    entity_id: int

    def __post_init__(self) -> None:
        # "{type}-{id}" only round-trips for non-negative ids.
        if self.entity_id < 0:
            raise ValueError(f"Entity id must be non-negative: {self.entity_id}")

    @classmethod
    def of(cls, entity_type: str | EntityType, entity_id: int) -> EntityKey:
        return cls(entity_type=str(entity_type), entity_id=int(entity_id))

    @classmethod
    def from_storage_key(cls, raw: str) -> EntityKey:
        """Parse ``"{entity_type}-{entity_id}"``; the id follows the last hyphen."""
        entity_type, sep, entity_id = raw.rpartition("-")
        if not sep or not entity_type:
            raise ValueError(f"Invalid entity storage key: {raw!r}")
        try:
            return cls(entity_type=entity_type, entity_id=int(entity_id))
        except ValueError as exc:
            raise ValueError(f"Invalid entity storage key: {raw!r}") from exc

    @property
    def storage_key(self) -> str:
        return f"{self.entity_type}-{self.entity_id}"

    def __str__(self) -> str:
        return self.storage_key
