# =====================================================================
# File: assetplay_pkg/utils/logger.py
# Leveled console logger that also tees to the run log file
# =====================================================================
from __future__ import annotations
import re
import sys
from pathlib import Path
from typing import Optional, TextIO

from .constants import BLUE, GREEN, NC, RED, YELLOW

LEVELS = {0: "ERROR", 1: "WARNING", 2: "INFO", 3: "DEBUG"}
COLORS = {"ERROR": RED, "WARNING": YELLOW, "INFO": BLUE, "SUCCESS": GREEN, "DEBUG": BLUE}

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class Logger:
    def __init__(self, level: int = 2, stream: Optional[TextIO] = None, color: bool = True):
        self.level = max(0, min(3, level))
        self.stream = stream or sys.stdout
        self.color = color and hasattr(self.stream, "isatty") and self.stream.isatty()
        self.log_path: Optional[Path] = None
        self._file: Optional[TextIO] = None

    def open(self, path: Path):
        """Start appending to path; creates the parent directory."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")
        self.log_path = path

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def _write_file(self, text: str):
        if self._file is not None:
            self._file.write(ANSI_RE.sub("", text) + "\n")
            self._file.flush()

    def _log(self, lvl: int, msg: str, label: Optional[str] = None):
        if self.level < lvl:
            return
        label = label or LEVELS.get(lvl, str(lvl))
        if self.color:
            print(f"{COLORS.get(label, '')}[{label}]{NC} {msg}", file=self.stream)
        else:
            print(f"[{label}] {msg}", file=self.stream)
        self._write_file(f"[{label}] {msg}")

    def error(self, msg: str):
        self._log(0, msg)

    def warn(self, msg: str):
        self._log(1, msg)

    def info(self, msg: str):
        self._log(2, msg)

    def success(self, msg: str):
        self._log(2, msg, label="SUCCESS")

    def debug(self, msg: str):
        self._log(3, msg)

    def echo(self, text: str = "", tee: bool = False):
        """Print a plain line; with tee=True it also goes to the log file."""
        print(text if self.color else ANSI_RE.sub("", text), file=self.stream)
        if tee:
            self._write_file(text)

    def raw(self, text: str):
        """Write to the log file only."""
        self._write_file(text)
