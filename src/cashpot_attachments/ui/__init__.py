"""Qt integration edge for attachment listings."""

from .attachments import AttachmentTableModel

__all__ = ["AttachmentTableModel"]
