"""
Upload Ingestion
================

Reads uploaded files into Frame records.

This is the only place frame bytes are acquired. Each upload is awaited
once, in upload order; the scorer then runs on the collected buffers.

Error Policy:
    - Content is never validated (non-image bytes are fine)
    - I/O failures raise FrameReadError and abort the whole request
    - No retries, no partial results
"""

import logging
from typing import List, Optional, Protocol, Sequence

from continuity_qa.models.frame import Frame


logger = logging.getLogger(__name__)


class FrameReadError(Exception):
    """Raised when an uploaded frame's bytes cannot be read."""

    def __init__(self, index: int, filename: Optional[str], reason: str) -> None:
        self.index = index
        self.filename = filename
        self.reason = reason
        super().__init__(
            f"Failed to read frame {index} ({filename or 'unnamed'}): {reason}"
        )


class Upload(Protocol):
    """Minimal async upload interface (satisfied by fastapi.UploadFile)."""

    filename: Optional[str]
    content_type: Optional[str]

    async def read(self, size: int = -1) -> bytes:
        ...


async def read_frames(uploads: Sequence[Upload]) -> List[Frame]:
    """
    Read every upload into a Frame, preserving order.

    Args:
        uploads: Uploaded files in submission order

    Returns:
        Frames with 0-based indices matching upload order

    Raises:
        FrameReadError: If any upload cannot be read
    """
    frames: List[Frame] = []

    for index, upload in enumerate(uploads):
        try:
            data = await upload.read()
        except OSError as e:
            logger.error(f"Frame read failed (index={index}, file={upload.filename}): {e}")
            raise FrameReadError(index, upload.filename, str(e)) from e

        frames.append(
            Frame(
                index=index,
                data=bytes(data),
                filename=upload.filename,
                content_type=upload.content_type,
            )
        )

    return frames
