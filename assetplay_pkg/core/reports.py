# =====================================================================
# File: assetplay_pkg/core/reports.py
# Report summary (date-stamp match) and retention cleanup (mtime age)
# =====================================================================
from __future__ import annotations
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .config import AppConfig
from ..utils.constants import LATEST_REPORTS
from ..utils.files import find_files, older_than
from ..utils.logger import Logger


@dataclass(frozen=True)
class ReportSummary:
    date_stamp: str
    json_count: int
    yml_count: int
    latest: Tuple[Path, ...]


@dataclass(frozen=True)
class CleanupResult:
    removed: Tuple[Path, ...]
    errors: int = 0


def summarize_reports(cfg: AppConfig, date_stamp: str) -> ReportSummary:
    """Count report files whose names contain date_stamp. Read-only."""
    json_files = find_files(cfg.report_dir, [f"*{date_stamp}*.json"])
    yml_files = find_files(cfg.report_dir, [f"*{date_stamp}*.yml"])
    return ReportSummary(
        date_stamp=date_stamp,
        json_count=len(json_files),
        yml_count=len(yml_files),
        latest=tuple(json_files[:LATEST_REPORTS]),
    )


def cleanup_old_artifacts(cfg: AppConfig, log: Logger, now: Optional[float] = None) -> CleanupResult:
    """
    Delete report and log files older than cfg.retention_days.
    Best-effort: per-file errors are counted and logged at debug level.
    """
    now = time.time() if now is None else now
    log.info(f"Cleaning up old reports (keeping last {cfg.retention_days} days)...")

    removed: List[Path] = []
    errors = 0
    try:
        candidates = find_files(cfg.report_dir, cfg.report_patterns) + find_files(cfg.log_dir, [cfg.log_pattern])
    except OSError as exc:
        log.debug(f"Could not scan artifact directories: {exc}")
        candidates = []
        errors += 1
    for path in candidates:
        try:
            if older_than(path, cfg.retention_days, now):
                path.unlink()
                removed.append(path)
        except OSError as exc:
            errors += 1
            log.debug(f"Could not remove {path}: {exc}")

    log.debug(f"Removed {len(removed)} old artifact(s)")
    log.success("Cleanup completed")
    return CleanupResult(tuple(removed), errors)
