"""Task attachment domain model.

This module defines the TaskAttachment value record: one file associated
with a task (a diagram, a data file for a programming exercise, a PDF with
the full statement).

Attachments arrive already materialized by whatever handled the upload.
They are immutable and are owned by exactly one Task, which keeps their
keys unique.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.errors.task import TaskValidationError

# Units for human-readable sizes, base 1024.
SIZE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB")
SIZE_BASE = 1024


@dataclass(frozen=True, eq=True)
class TaskAttachment:
    """A file attached to a task.

    Attributes:
        key: Storage-system identifier of the file (e.g. an object key).
            Unique within the owning task.
        file_name: Original file name shown to users ("diagram.png").
        mime_type: Format hint ("image/png"). Not checked against a whitelist.
        size_bytes: File size in bytes, never negative.
        url: Optional short-lived access link. Not guaranteed to be persisted.
    """

    key: str
    file_name: str
    mime_type: str
    size_bytes: int
    url: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        """Validate attachment fields after initialization.

        Raises:
            TaskValidationError: If key or file_name is blank, or size_bytes
                is not a non-negative integer.
        """
        if not self.key or not self.key.strip():
            raise TaskValidationError("key", "Attachment key cannot be empty")

        if not self.file_name or not self.file_name.strip():
            raise TaskValidationError("file_name", "Attachment file_name cannot be empty")

        if isinstance(self.size_bytes, bool) or not isinstance(self.size_bytes, int):
            raise TaskValidationError(
                "size_bytes",
                f"Attachment size_bytes must be an integer, got {type(self.size_bytes).__name__}",
            )
        if self.size_bytes < 0:
            raise TaskValidationError(
                "size_bytes",
                f"Attachment size_bytes cannot be negative, got {self.size_bytes}",
            )

    def get_formatted_size(self) -> str:
        """Return the size as a human-readable string.

        Uses base-1024 units up to TB with at most two decimals
        (1536 -> "1.5 KB", 1048576 -> "1 MB"). Zero is "0 Bytes".

        Returns:
            Formatted size string.
        """
        if self.size_bytes == 0:
            return "0 Bytes"

        scaled = float(self.size_bytes)
        unit_index = 0
        while scaled >= SIZE_BASE and unit_index < len(SIZE_UNITS) - 1:
            scaled /= SIZE_BASE
            unit_index += 1

        number = f"{scaled:.2f}".rstrip("0").rstrip(".")
        return f"{number} {SIZE_UNITS[unit_index]}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for storage.
        """
        return {
            "key": self.key,
            "file_name": self.file_name,
            "mime_type": self.mime_type,
            "size_bytes": self.size_bytes,
            "url": self.url,
        }
