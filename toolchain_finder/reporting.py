"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

import pandas as pd

from .models import DateEvaluation


logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["date", "status", "url", "unavailable"]


def evaluations_to_frame(evaluations: Iterable[DateEvaluation]) -> pd.DataFrame:
    rows = [
        {
            "date": evaluation.date.isoformat(),
            "status": evaluation.status,
            "url": evaluation.url,
            "unavailable": "; ".join(
                f"{package}@{target}" for package, target in evaluation.unavailable
            ),
        }
        for evaluation in evaluations
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def print_summary(
    channel: str,
    profile: str,
    toolchain: Optional[str],
    evaluations: Iterable[DateEvaluation],
) -> None:
    df = evaluations_to_frame(evaluations)
    counts = df["status"].value_counts()
    logger.info("=" * 60)
    logger.info("SEARCH RESULTS")
    logger.info("=" * 60)
    logger.info("Channel: %s", channel)
    logger.info("Profile: %s", profile)
    logger.info("Dates examined: %d", len(df))
    for status in ("viable", "not-viable", "absent"):
        logger.info("  %s: %d", status, int(counts.get(status, 0)))
    logger.info("-" * 60)
    logger.info("Toolchain: %s", toolchain or "none")
    logger.info("=" * 60)


def build_result(
    channel: str,
    profile: str,
    toolchain: Optional[str],
    evaluations: Iterable[DateEvaluation],
) -> Dict:
    evaluations = list(evaluations)
    viable = [e for e in evaluations if e.status == "viable"]
    return {
        "channel": channel,
        "profile": profile,
        "toolchain": toolchain,
        "date": viable[0].date.isoformat() if viable else None,
        "examined": len(evaluations),
    }


def save_result_json(result: Dict, output_dir: Path, channel: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    result_file = output_dir / f"{channel}_result.json"
    with open(result_file, 'w') as f:
        json.dump(result, f, indent=2, default=str)
    return result_file


def export_search_report(
    evaluations: Iterable[DateEvaluation],
    output_dir: Path,
    channel: str,
) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    report_file = output_dir / f"{channel}_search.csv"
    evaluations_to_frame(evaluations).to_csv(report_file, index=False)
    return report_file
