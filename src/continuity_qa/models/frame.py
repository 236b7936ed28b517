"""
Frame Data Model
=================

Internal frame representation for the upload ingestion layer.

Design Rules:
    - Frame content is an opaque byte buffer
    - Does NOT decode or validate image data
    - Filename and content type are carried for logging only
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One uploaded frame, in upload order.

    Attributes:
        index: 0-based position in the upload sequence
        data: Raw file content (NOT decoded)
        filename: Original filename reported by the client
        content_type: Declared MIME type reported by the client
    """

    index: int
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be non-negative")

    @property
    def size(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full buffer."""
        return (
            f"Frame(index={self.index}, "
            f"filename={self.filename!r}, "
            f"size={self.size})"
        )
