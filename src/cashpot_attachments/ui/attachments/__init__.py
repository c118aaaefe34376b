from .models import AttachmentColumn, AttachmentTableModel

__all__ = ["AttachmentColumn", "AttachmentTableModel"]
