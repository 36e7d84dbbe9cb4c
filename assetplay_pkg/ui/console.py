# =====================================================================
# File: assetplay_pkg/ui/console.py
# Fixed-format console blocks: banner, summary box, next steps, hints
# =====================================================================
from __future__ import annotations
from pathlib import Path
from typing import List

from ..core.reports import ReportSummary
from ..utils.constants import BLUE, NC, NEXT_STEPS, NIST_CONTROLS, TROUBLESHOOTING
from ..utils.logger import Logger

BOX_WIDTH = 68

BANNER_TITLE = "NIST CSF Play 1: Asset Inventory Execution"


def banner_lines() -> List[str]:
    inner = BOX_WIDTH
    return [
        "╔" + "═" * inner + "╗",
        "║" + " " * inner + "║",
        "║" + BANNER_TITLE.center(inner) + "║",
        "║" + " " * inner + "║",
        "╚" + "═" * inner + "╝",
    ]


def print_banner(log: Logger):
    log.echo(BLUE)
    for line in banner_lines():
        log.echo(line)
    log.echo(NC)


def summary_lines(summary: ReportSummary, report_dir: Path, log_path: Path | None) -> List[str]:
    """Body of the summary box, without borders."""
    lines = [
        f"Inventory Reports Generated: {summary.json_count} JSON, {summary.yml_count} YAML",
        f"Report Location: {report_dir}",
        f"Execution Log: {log_path or '(none)'}",
        "",
        "NIST CSF Controls Addressed:",
    ]
    lines += [f"  ✓ {cid}: {text}" for cid, text in NIST_CONTROLS]
    return lines


def print_summary(log: Logger, summary: ReportSummary, report_dir: Path):
    log.info("Generating execution summary...")
    bar = "═" * 60
    log.echo()
    log.echo(f"{BLUE}╔{bar}╗{NC}")
    log.echo(f"{BLUE}║{'Execution Summary'.center(60)}║{NC}")
    log.echo(f"{BLUE}╠{bar}╣{NC}")
    for line in summary_lines(summary, report_dir, log.log_path):
        log.echo(f"{BLUE}║{NC}  {line}" if line else f"{BLUE}║{NC}")
    log.echo(f"{BLUE}╚{bar}╝{NC}")
    log.echo()

    if summary.latest:
        log.info("Latest inventory reports:")
        for path in summary.latest:
            log.echo(f"  - {path.name}")


def print_next_steps(log: Logger, report_dir: Path):
    log.echo()
    log.info("Next steps:")
    for i, step in enumerate(NEXT_STEPS, start=1):
        log.echo(f"  {i}. {step.format(report_dir=report_dir)}")
    log.echo()


def print_troubleshooting(log: Logger):
    log.echo()
    log.info("Troubleshooting:")
    for i, hint in enumerate(TROUBLESHOOTING, start=1):
        log.echo(f"  {i}. {hint}")
    log.echo()
