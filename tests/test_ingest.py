"""
Ingest Tests
============

Tests for upload reading and the Frame record.
"""

import asyncio

import pytest

from continuity_qa.ingest import FrameReadError, read_frames
from continuity_qa.models.frame import Frame


class FakeUpload:
    """Stand-in for fastapi.UploadFile."""

    def __init__(self, data=b"", filename="frame.png", error=None):
        self.data = data
        self.filename = filename
        self.content_type = "image/png"
        self.error = error

    async def read(self, size=-1):
        if self.error is not None:
            raise self.error
        return self.data


class TestReadFrames:
    """Tests for read_frames."""

    def test_preserves_order(self):
        uploads = [FakeUpload(b"a", "a.png"), FakeUpload(b"bb", "b.png"), FakeUpload(b"", "c.png")]
        frames = asyncio.run(read_frames(uploads))

        assert [frame.index for frame in frames] == [0, 1, 2]
        assert [frame.data for frame in frames] == [b"a", b"bb", b""]
        assert frames[1].filename == "b.png"
        assert frames[1].size == 2

    def test_no_uploads(self):
        assert asyncio.run(read_frames([])) == []

    def test_io_error_raises_frame_read_error(self):
        uploads = [FakeUpload(b"ok"), FakeUpload(filename="broken.png", error=OSError("disk gone"))]

        with pytest.raises(FrameReadError) as exc_info:
            asyncio.run(read_frames(uploads))

        assert exc_info.value.index == 1
        assert exc_info.value.filename == "broken.png"
        assert isinstance(exc_info.value.__cause__, OSError)


class TestFrame:
    """Tests for the Frame record."""

    def test_repr_omits_data(self):
        frame = Frame(index=3, data=b"x" * 4096, filename="shot.png")
        assert "xxxx" not in repr(frame)
        assert "size=4096" in repr(frame)

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            Frame(index=-1, data=b"")
