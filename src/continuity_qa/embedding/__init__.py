"""
Embedding Module
================

Frame embedding for continuity scoring.

Embedding extraction is treated as a pluggable black box behind a narrow
`bytes -> vector` interface. The byte-statistics backend is a placeholder
for a real perceptual model.
"""

from continuity_qa.embedding.extractor import (
    EmbeddingExtractor,
    ByteStatsExtractor,
    create_embedding_extractor,
)

__all__ = [
    "EmbeddingExtractor",
    "ByteStatsExtractor",
    "create_embedding_extractor",
]
