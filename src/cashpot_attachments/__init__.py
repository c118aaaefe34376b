"""Client-side attachment metadata cache for the Cashpot admin application."""

from cashpot_attachments.bootstrap import (
    add_attachment,
    build_store,
    clear_all_attachment_cache,
    clear_attachment_cache,
    default_store,
    remove_attachment,
    set_default_store,
    use_entity_attachments,
)
from cashpot_attachments.data import Attachment, EntityKey, EntityType
from cashpot_attachments.services import AttachmentStore

__version__ = "0.1.0"

__all__ = [
    "Attachment",
    "AttachmentStore",
    "EntityKey",
    "EntityType",
    "add_attachment",
    "build_store",
    "clear_all_attachment_cache",
    "clear_attachment_cache",
    "default_store",
    "remove_attachment",
    "set_default_store",
    "use_entity_attachments",
]
