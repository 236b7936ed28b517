"""
ContinuityQA Main Application
=============================

FastAPI entry point for the continuity QA service.

Endpoints:
    GET  /                  - Service information
    GET  /health            - Liveness probe
    GET  /metrics           - Request and frame counters
    POST /api/analyze       - Continuity scorer (multipart, field "frames")
    POST /api/demo/analyze  - Randomized dashboard mock (NOT the scorer)
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from continuity_qa.config import settings
from continuity_qa.demo import MockIssueGenerator
from continuity_qa.embedding import create_embedding_extractor
from continuity_qa.ingest import FrameReadError, read_frames
from continuity_qa.models.analysis import AnalysisResult
from continuity_qa.scoring import ContinuityScorer, ScoringThresholds


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_scorer: Optional[ContinuityScorer] = None
_demo_generator: Optional[MockIssueGenerator] = None
_startup_time: float = 0.0

# Counters
_analyses_completed: int = 0
_frames_scored: int = 0
_issues_reported: int = 0
_read_error_count: int = 0
_demo_reports: int = 0


# =============================================================================
# Getters
# =============================================================================

def get_scorer() -> ContinuityScorer:
    if _scorer is None:
        raise RuntimeError("Scorer not initialized")
    return _scorer


def get_demo_generator() -> Optional[MockIssueGenerator]:
    return _demo_generator


# =============================================================================
# Component Factory
# =============================================================================

def create_scorer() -> ContinuityScorer:
    """
    Create the continuity scorer from config.

    Fails fast on an unknown embedding backend.
    """
    extractor = create_embedding_extractor(settings.embedding.backend)
    thresholds = ScoringThresholds(
        drop_threshold=settings.scoring.drop_threshold,
        severe_drop_threshold=settings.scoring.severe_drop_threshold,
    )
    return ContinuityScorer(extractor=extractor, thresholds=thresholds)


# =============================================================================
# Lifespan Management
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    global _scorer, _demo_generator, _startup_time

    _startup_time = time.time()
    logger.info(f"Starting {settings.service.name} {settings.service.version}")

    _scorer = create_scorer()

    if settings.demo.enabled:
        _demo_generator = MockIssueGenerator()
        logger.info("Demo mock endpoint enabled")

    yield

    logger.info("Shutdown complete")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="ContinuityQA",
    description="Frame-similarity continuity scoring for film post-production",
    version=settings.service.version,
    lifespan=lifespan,
)


@app.exception_handler(FrameReadError)
async def frame_read_error_handler(request: Request, exc: FrameReadError) -> JSONResponse:
    """Surface upload read failures as a request-level error."""
    global _read_error_count
    _read_error_count += 1

    return JSONResponse(
        {"error": str(exc), "frame_index": exc.index},
        status_code=500,
    )


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "ContinuityQA",
        "version": settings.service.version,
        "name": settings.service.name,
        "status": "running",
        "embedding_backend": settings.embedding.backend,
        "demo_enabled": settings.demo.enabled,
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
    })


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Request and frame counters for observability."""
    return JSONResponse({
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "embedding_backend": settings.embedding.backend,
        "analyses_completed": _analyses_completed,
        "frames_scored": _frames_scored,
        "issues_reported": _issues_reported,
        "read_errors": _read_error_count,
        "demo_reports": _demo_reports,
    })


@app.post("/api/analyze")
async def analyze(frames: Optional[List[UploadFile]] = File(default=None)) -> JSONResponse:
    """
    Score uploaded frames for visual continuity.

    Always 200 on success; fewer than two frames yields the default
    result. Read failures are handled by frame_read_error_handler.
    """
    global _analyses_completed, _frames_scored, _issues_reported

    loaded = await read_frames(frames or [])
    result: AnalysisResult = get_scorer().analyze([frame.data for frame in loaded])

    _analyses_completed += 1
    _frames_scored += len(loaded)
    _issues_reported += len(result.issues)

    logger.info(
        f"Analysis complete: frames={len(loaded)}, "
        f"score={result.continuity_score}, issues={len(result.issues)}"
    )

    return JSONResponse(result.to_response())


@app.post("/api/demo/analyze")
async def demo_analyze(frames: Optional[List[UploadFile]] = File(default=None)) -> JSONResponse:
    """
    Randomized mock report for the dashboard demo.

    The report depends only on the number of uploaded frames; it is
    labelled "demo_mock" and is NOT produced by the continuity scorer.
    """
    global _demo_reports

    generator = get_demo_generator()
    if generator is None:
        return JSONResponse(
            {"error": "Demo endpoint is disabled"},
            status_code=404,
        )

    loaded = await read_frames(frames or [])
    report = generator.generate(len(loaded))
    _demo_reports += 1

    return JSONResponse(report.to_response())


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "continuity_qa.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
