"""
ContinuityQA
============

Continuity QA for film post-production frame sequences.

Users upload an ordered sequence of frames; the service reports a
continuity score and the adjacent frame pairs whose similarity drops
noticeably below the sequence average.

Components:
    - embedding: Frame -> fixed-size vector (pluggable backend)
    - scoring: Cosine similarity, continuity score, issue detection
    - ingest: Multipart upload reading
    - demo: Randomized dashboard mock (separate from the scorer)

Example:
    from continuity_qa.scoring import ContinuityScorer

    result = ContinuityScorer().analyze([frame_a, frame_b, frame_c])
    print(result.to_response())

    # HTTP service: see main.py
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
