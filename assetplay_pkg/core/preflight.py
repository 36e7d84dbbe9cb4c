# =====================================================================
# File: assetplay_pkg/core/preflight.py
# Prerequisite checks: delegate tools, playbook/inventory files, work dirs
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import AppConfig
from .errors import PrerequisiteError
from .runner import CommandExecutor
from ..utils.logger import Logger
from ..utils.misc import which as default_which


@dataclass(frozen=True)
class PreflightReport:
    ansible_version: Optional[str]
    created_dirs: Tuple[Path, ...]
    ansible_cfg_found: bool


def _ansible_version(executor: CommandExecutor) -> Optional[str]:
    rc, out = executor.capture(["ansible", "--version"])
    if rc != 0 or not out.strip():
        return None
    return out.splitlines()[0].strip()


def ensure_dirs(dirs, log: Logger) -> Tuple[List[Path], List[str]]:
    """Create missing dirs; return (created, problems) instead of raising."""
    created: List[Path] = []
    problems: List[str] = []
    for d in dirs:
        if d.is_dir():
            continue
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.error(f"Cannot create directory {d}: {exc.strerror or exc}")
            problems.append(f"cannot create directory: {d}")
            continue
        created.append(d)
        log.info(f"Created directory: {d}")
    return created, problems


def check_prerequisites(
    cfg: AppConfig,
    executor: CommandExecutor,
    log: Logger,
    which: Callable[[str], Optional[str]] = default_which,
) -> PreflightReport:
    """
    Verify tools and required files, then create work directories.

    Every problem is logged before PrerequisiteError is raised, and nothing
    is executed or created when a problem is found.
    """
    log.info("Checking prerequisites...")
    problems: List[str] = []

    missing_tools = [t for t in cfg.required_tools if which(t) is None]
    for tool in missing_tools:
        log.error(f"{tool} is not installed")
        problems.append(f"{tool} not found on PATH")
    if missing_tools:
        log.echo("  Install with: pip3 install ansible")

    for label, path in (("Playbook", cfg.playbook), ("Inventory", cfg.inventory)):
        if path.is_file():
            log.success(f"{label} found: {path}")
        else:
            log.error(f"{label} not found: {path}")
            problems.append(f"{label.lower()} not found: {path}")

    cfg_found = cfg.ansible_cfg.is_file()
    if cfg_found:
        log.success(f"Configuration found: {cfg.ansible_cfg}")
    else:
        log.warn(f"ansible.cfg not found: {cfg.ansible_cfg}")

    if problems:
        log.error("Prerequisites check failed. Please resolve the issues above.")
        raise PrerequisiteError(problems)

    version = _ansible_version(executor)
    log.success(f"Ansible found: {version or 'unknown version'}")

    created, dir_problems = ensure_dirs(cfg.work_dirs, log)
    if dir_problems:
        log.error("Prerequisites check failed. Please resolve the issues above.")
        raise PrerequisiteError(dir_problems)

    log.success("All prerequisite checks passed")
    return PreflightReport(version, tuple(created), cfg_found)
