# =====================================================================
# File: assetplay_pkg/core/connectivity.py
# Reachability probe (`ansible all -m ping -o`) with confirm-on-failure
# =====================================================================
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from .args import RunOptions
from .config import AppConfig
from .errors import RunCancelled
from .runner import CommandExecutor, build_ping_cmd, display_cmd
from ..utils.logger import Logger

# One-line (-o) ping output: "web01 | SUCCESS => {...}", "db01 | UNREACHABLE!: ..."
PING_RE = re.compile(r"^(?P<host>\S+)\s+\|\s+(?P<status>SUCCESS|CHANGED|UNREACHABLE|FAILED)!?")

CONTINUE_QUESTION = "Some hosts are unreachable. Continue?"


@dataclass(frozen=True)
class ConnectivityResult:
    ok: bool
    reachable: Tuple[str, ...] = ()
    unreachable: Tuple[str, ...] = ()


def parse_ping_output(lines: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split one-line ping output into (reachable, unreachable-or-failed) hosts."""
    reachable: List[str] = []
    unreachable: List[str] = []
    for line in lines:
        m = PING_RE.match(line.strip())
        if not m:
            continue
        if m.group("status") in ("SUCCESS", "CHANGED"):
            reachable.append(m.group("host"))
        else:
            unreachable.append(m.group("host"))
    return reachable, unreachable


def check_connectivity(
    cfg: AppConfig,
    options: RunOptions,
    executor: CommandExecutor,
    log: Logger,
    confirm: Callable[[str], bool],
) -> ConnectivityResult:
    """
    Ping all (or --limit) hosts. On any failure the user decides whether to
    continue; declining raises RunCancelled. Unreachable hosts stay in scope.
    """
    log.info("Testing connectivity to hosts...")
    cmd = build_ping_cmd(str(cfg.inventory), options.limit)
    log.debug("Executing: " + display_cmd(cmd))

    lines: List[str] = []

    def on_line(line: str):
        lines.append(line)
        log.echo(line, tee=True)

    rc = executor.stream(cmd, on_line)
    reachable, unreachable = parse_ping_output(lines)
    result = ConnectivityResult(rc == 0, tuple(reachable), tuple(unreachable))

    if result.ok:
        log.success("Connectivity test passed")
        return result

    log.warn(f"Connectivity test failed (exit status {rc})")
    if unreachable:
        log.warn(f"Unreachable or failed hosts ({len(unreachable)}): {', '.join(unreachable)}")
    log.raw(f"[WARNING] {CONTINUE_QUESTION} (y/n)")
    if not confirm(CONTINUE_QUESTION):
        log.info("Execution cancelled by user")
        raise RunCancelled("Execution cancelled by user")
    log.warn("Continuing with unreachable hosts still in scope")
    return result
