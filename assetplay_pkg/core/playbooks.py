# =====================================================================
# File: assetplay_pkg/core/playbooks.py
# Task-set execution: one ansible-playbook run, output tee'd to the log
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from .args import RunOptions
from .config import AppConfig
from .runner import CommandExecutor, build_playbook_cmd, display_cmd
from ..utils.logger import Logger


@dataclass(frozen=True)
class PlaybookResult:
    returncode: int
    command: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_playbook(cfg: AppConfig, options: RunOptions, executor: CommandExecutor, log: Logger) -> PlaybookResult:
    log.info("Starting playbook execution...")
    if log.log_path:
        log.info(f"Execution log: {log.log_path}")

    cmd: List[str] = build_playbook_cmd(str(cfg.inventory), str(cfg.playbook), options)
    log.info(f"Executing: {display_cmd(cmd)}")
    log.raw("-" * 40)

    rc = executor.stream(cmd, lambda line: log.echo(line, tee=True))
    result = PlaybookResult(rc, tuple(cmd))
    if result.ok:
        log.success("Playbook execution completed successfully")
    else:
        log.error(f"Playbook execution failed (exit status {rc})")
    return result
