"""
ContinuityQA Client
===================

Uploads a directory of frames to a running ContinuityQA service and
logs the continuity report.

Steps:
    1. Collects image files from a directory (sorted by name)
    2. Posts them to /api/analyze under the "frames" field
    3. Logs score, similarities and issues
    4. Optionally writes the JSON report to a file

Prerequisites:
    - ContinuityQA must be running (python -m continuity_qa.main)

Usage:
    continuity-qa-analyze ./shots/scene_012
    continuity-qa-analyze ./shots/scene_012 --url http://localhost:8002 --output report.json
    continuity-qa-analyze ./shots/scene_012 --demo
"""

import argparse
import json
import logging
import mimetypes
import os
import sys
from pathlib import Path
from typing import List

import requests


logger = logging.getLogger(__name__)


IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp", ".exr", ".dpx"}


def collect_frames(directory: Path) -> List[Path]:
    """Image files in `directory`, ordered by filename."""
    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )


def analyze(url: str, paths: List[Path], demo: bool, timeout: float) -> dict:
    """
    Post frames to the service.

    Args:
        url: Service root URL
        paths: Frame files in sequence order
        demo: Use the randomized demo endpoint instead of the scorer
        timeout: Request timeout in seconds

    Returns:
        Decoded JSON response
    """
    endpoint = "/api/demo/analyze" if demo else "/api/analyze"
    handles = [open(path, "rb") for path in paths]
    try:
        files = [
            ("frames", (path.name, handle, mimetypes.guess_type(path.name)[0] or "application/octet-stream"))
            for path, handle in zip(paths, handles)
        ]
        response = requests.post(url.rstrip("/") + endpoint, files=files, timeout=timeout)
        response.raise_for_status()
        return response.json()
    finally:
        for handle in handles:
            handle.close()


def log_report(report: dict) -> None:
    logger.info("=" * 60)
    if report.get("source") == "demo_mock":
        logger.info("DEMO MOCK REPORT (random, not derived from frame content)")
        logger.info(f"Scene: {report['sceneName']}")
    else:
        logger.info("CONTINUITY REPORT")
    logger.info("=" * 60)
    logger.info(f"Continuity score: {report['continuityScore']}")

    similarities = report.get("similarities")
    if similarities is not None:
        for idx, sim in enumerate(similarities):
            logger.info(f"  frames {idx + 1}-{idx + 2}: similarity={sim:.4f}")

    issues = report.get("issues", [])
    if not issues:
        logger.info("No issues detected")
    for issue in issues:
        pair = issue.get("framePair") or [f + 1 for f in issue["frames"]]
        logger.info(f"  [{issue['type']}] frames {pair[0]}-{pair[1]}: {issue['description']}")
    logger.info("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Upload a frame sequence to ContinuityQA"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Directory containing the frame sequence",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=os.environ.get("CONTINUITY_QA_URL", "http://localhost:8002"),
        help="Service root URL",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Request the randomized demo report instead of the scorer",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON report to this file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not args.directory.is_dir():
        logger.error(f"Not a directory: {args.directory}")
        sys.exit(2)

    paths = collect_frames(args.directory)
    logger.info(f"Uploading {len(paths)} frames from {args.directory}")

    try:
        report = analyze(args.url, paths, args.demo, args.timeout)
    except requests.RequestException as e:
        logger.error(f"Analysis request failed: {e}")
        sys.exit(1)

    log_report(report)

    if args.output:
        args.output.write_text(json.dumps(report, indent=2))
        logger.info(f"Report written to {args.output}")


if __name__ == "__main__":
    main()
