# =====================================================================
# File: assetplay_pkg/utils/misc.py
# Miscellaneous utilities
# =====================================================================
from __future__ import annotations
import shutil


def which(cmd: str) -> str | None:
    """Return the full path of a command if found in PATH."""
    return shutil.which(cmd)


def ask_yes_no(question: str) -> bool:
    """Terminal prompt; only 'y' or 'Y' counts as yes. EOF means no."""
    try:
        response = input(f"{question} (y/n) ")
    except EOFError:
        return False
    return response.strip() in ("y", "Y")
