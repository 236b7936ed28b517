"""
Embedding Extractor
===================

Frame embedding abstraction for the continuity scorer.

The scorer consumes ONLY fixed-size vectors produced here, never raw bytes.
Swapping in a perceptual model means adding a new extractor; similarity,
scoring and issue detection stay untouched.

Components:
    - EmbeddingExtractor: Protocol (bytes -> fixed-size vector)
    - ByteStatsExtractor: Placeholder embedding from raw byte statistics
    - create_embedding_extractor: Backend factory

Byte statistics embedding:
    v = (n, b0, bm)            n  = buffer length
                               b0 = first byte (0 if empty)
                               bm = byte at floor(n / 2) (0 if out of range)
    e = v / max-or-1(|v|)      zero vector stays zero
"""

import logging
from typing import Protocol

import numpy as np


logger = logging.getLogger(__name__)


class EmbeddingExtractor(Protocol):
    """
    Protocol for embedding backends.

    Implementations must be stateless across calls: each frame is
    embedded independently of every other frame.
    """

    dimensions: int

    def extract(self, data: bytes) -> np.ndarray:
        """
        Embed one frame.

        Args:
            data: Raw frame content (NOT decoded)

        Returns:
            1-D float64 array of length `dimensions`
        """
        ...


class ByteStatsExtractor:
    """
    Deterministic pseudo-embedding from byte statistics.

    Never fails on malformed content since no decoding is attempted.
    Empty buffers map to the zero vector.
    """

    dimensions = 3

    def extract(self, data: bytes) -> np.ndarray:
        n = len(data)
        first = data[0] if n > 0 else 0
        middle = data[n // 2] if n // 2 < n else 0

        vector = np.array([n, first, middle], dtype=np.float64)

        norm = float(np.linalg.norm(vector))
        if norm == 0.0:
            norm = 1.0

        return vector / norm


def create_embedding_extractor(backend: str) -> EmbeddingExtractor:
    """
    Create embedding extractor for a configured backend name.

    Fails fast on unknown backends.
    """
    if backend == "byte_stats":
        logger.info("Using ByteStatsExtractor")
        return ByteStatsExtractor()

    raise ValueError(f"Unknown embedding backend: {backend}")
