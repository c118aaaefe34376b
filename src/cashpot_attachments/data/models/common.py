from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class StoredModel(BaseModel):
    """Base class for records exchanged with the durable store."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def from_storage(cls, payload: dict[str, Any]) -> Self:
        """Hydrate a model from a stored (camelCase) payload."""
        return cls.model_validate(payload)

    def to_storage(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape used on disk."""
        return self.model_dump(mode="json", by_alias=True)
