# =====================================================================
# File: assetplay_pkg/core/errors.py
# Exceptions raised by the run steps (main() maps them to exit codes)
# =====================================================================
from __future__ import annotations
from typing import List, Optional


class AssetPlayError(Exception):
    """Base error for a run that cannot continue."""

    exit_code = 1


class ConfigError(AssetPlayError):
    """Settings file or environment override is invalid."""


class PrerequisiteError(AssetPlayError):
    """A required tool or file is missing."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("Prerequisites check failed: " + "; ".join(self.problems))


class InventoryValidationError(AssetPlayError):
    """ansible-inventory could not list the inventory."""

    def __init__(self, message: str, output: Optional[str] = None):
        self.output = output
        super().__init__(message)


class RunCancelled(AssetPlayError):
    """The user declined to continue. Not a failure."""

    exit_code = 0
