"""Domain models for attachment metadata."""

from .attachment import Attachment
from .common import StoredModel
from .entity import EntityKey, EntityType

__all__ = ["Attachment", "EntityKey", "EntityType", "StoredModel"]
