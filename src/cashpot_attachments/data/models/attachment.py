from __future__ import annotations

from datetime import datetime

from pydantic import Field

from cashpot_attachments.utils.formatters import format_file_size

from .common import StoredModel


class Attachment(StoredModel):
    """Metadata for one uploaded file. Binary content is never held here."""

    id: int
    filename: str
    mime_type: str = Field(alias="mimeType")
    file_size: int = Field(alias="fileSize", ge=0)
    created_at: datetime = Field(alias="createdAt")
    url: str

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def display_size(self) -> str:
        return format_file_size(self.file_size)
