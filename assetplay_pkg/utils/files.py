# =====================================================================
# File: assetplay_pkg/utils/files.py
# Filesystem helpers (project root discovery, age-based file matching)
# =====================================================================
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

SECONDS_PER_DAY = 86400


def find_project_root(explicit: str | None = None) -> Path:
    """Locate project root (supports running from symlinks or any cwd)."""
    if explicit:
        return Path(explicit).resolve()

    here = Path.cwd().resolve()
    for p in [here, *here.parents]:
        if (p / 'assetplay.yml').exists() or (p / 'plays').is_dir():
            return p

    # Fallback to this file's ancestor
    return Path(__file__).resolve().parents[2]


def find_files(root: Path, patterns: Iterable[str]) -> List[Path]:
    """Regular files under root (recursive) matching any of the glob patterns."""
    if not root.is_dir():
        return []
    found = set()
    for pattern in patterns:
        found.update(p for p in root.rglob(pattern) if p.is_file())
    return sorted(found)


def older_than(path: Path, days: int, now: float) -> bool:
    """True when path's mtime is more than `days` days before `now` (epoch seconds)."""
    return now - path.stat().st_mtime > days * SECONDS_PER_DAY
