"""
Ingest Module
=============

Upload ingestion for the continuity QA service.

Components:
    - read_frames: Await uploaded files into Frame records
    - FrameReadError: Request-level read failure
"""

from continuity_qa.ingest.upload import FrameReadError, Upload, read_frames

__all__ = [
    "FrameReadError",
    "Upload",
    "read_frames",
]
