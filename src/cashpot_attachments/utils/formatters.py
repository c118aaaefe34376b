"""Formatting utilities for displaying attachment metadata."""

from __future__ import annotations

from datetime import datetime


def format_file_size(bytes_value: int | None) -> str:
    """Convert bytes to human-readable format (KB, MB, GB).

    Args:
        bytes_value: File size in bytes

    Returns:
        Formatted string like "125.4 MB", "0 B" for empty files, or "—" if None

    Examples:
        >>> format_file_size(1024)
        '1.0 KB'
        >>> format_file_size(0)
        '0 B'
        >>> format_file_size(None)
        '—'
    """
    if bytes_value is None:
        return "—"

    units = ["B", "KB", "MB", "GB", "TB"]
    size = float(bytes_value)
    unit_index = 0

    while size >= 1024.0 and unit_index < len(units) - 1:
        size /= 1024.0
        unit_index += 1

    # Bytes are whole numbers
    if unit_index == 0:
        return f"{int(size)} {units[unit_index]}"
    return f"{size:.1f} {units[unit_index]}"


def format_upload_date(value: datetime | None) -> str:
    """Render an upload timestamp as ``YYYY-MM-DD`` or "—" when missing."""
    if value is None:
        return "—"
    return value.strftime("%Y-%m-%d")


__all__ = ["format_file_size", "format_upload_date"]
