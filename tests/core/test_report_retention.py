"""Report summary and retention cleanup tests."""

from __future__ import annotations

import os
from pathlib import Path

from assetplay_pkg.core.config import load_config
from assetplay_pkg.core.reports import cleanup_old_artifacts, summarize_reports
from assetplay_pkg.utils.logger import Logger

DAY = 86400


def _touch(path: Path, age_days: float, now: float) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}", encoding="utf-8")
    mtime = now - age_days * DAY
    os.utime(path, (mtime, mtime))
    return path


def test_summary_counts_only_files_with_date_stamp(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={})
    reports = cfg.report_dir
    for name in ("web01_20261019.json", "db01_20261019.json", "web01_20261019.yml", "web01_20261018.json"):
        (reports / name).parent.mkdir(parents=True, exist_ok=True)
        (reports / name).write_text("{}", encoding="utf-8")
    (reports / "nested").mkdir()
    (reports / "nested" / "app01_20261019.json").write_text("{}", encoding="utf-8")
    (reports / "notes_20261019.txt").write_text("", encoding="utf-8")

    summary = summarize_reports(cfg, "20261019")

    assert (summary.json_count, summary.yml_count) == (3, 1)
    assert "web01_20261018.json" not in [p.name for p in summary.latest]


def test_summary_limits_latest_listing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={})
    cfg.report_dir.mkdir()
    for i in range(8):
        (cfg.report_dir / f"host{i}_20261019.json").write_text("{}", encoding="utf-8")

    summary = summarize_reports(cfg, "20261019")

    assert summary.json_count == 8
    assert len(summary.latest) == 5


def test_summary_of_missing_report_dir_is_empty(tmp_path: Path) -> None:
    summary = summarize_reports(load_config(tmp_path, environ={}), "20261019")

    assert (summary.json_count, summary.yml_count, summary.latest) == (0, 0, ())


def test_cleanup_removes_only_expired_artifacts(tmp_path: Path, now) -> None:
    cfg = load_config(tmp_path, environ={})
    ts = now.timestamp()
    old_json = _touch(cfg.report_dir / "old.json", 45, ts)
    old_yml = _touch(cfg.report_dir / "sub" / "old.yml", 31, ts)
    old_log = _touch(cfg.log_dir / "play1_execution_old.log", 60, ts)
    new_json = _touch(cfg.report_dir / "new.json", 5, ts)
    new_log = _touch(cfg.log_dir / "play1_execution_new.log", 29, ts)
    old_other = _touch(cfg.report_dir / "keep.txt", 90, ts)

    result = cleanup_old_artifacts(cfg, Logger(), now=ts)

    assert set(result.removed) == {old_json, old_yml, old_log}
    assert not old_json.exists() and not old_yml.exists() and not old_log.exists()
    assert new_json.exists() and new_log.exists() and old_other.exists()
    assert result.errors == 0


def test_cleanup_honours_configured_retention(tmp_path: Path, now) -> None:
    (tmp_path / "assetplay.yml").write_text("retention_days: 7\n", encoding="utf-8")
    cfg = load_config(tmp_path, environ={})
    ts = now.timestamp()
    week_old = _touch(cfg.report_dir / "a.json", 8, ts)
    fresh = _touch(cfg.report_dir / "b.json", 6, ts)

    cleanup_old_artifacts(cfg, Logger(), now=ts)

    assert not week_old.exists()
    assert fresh.exists()


def test_cleanup_of_missing_dirs_is_a_no_op(tmp_path: Path) -> None:
    result = cleanup_old_artifacts(load_config(tmp_path, environ={}), Logger())

    assert result.removed == ()
