# =====================================================================
# File: assetplay_pkg/core/args.py
# Command-line argument parsing
# =====================================================================
from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

MAX_VERBOSITY = 3

EPILOG = """\
examples:
  assetplay                                          # Run against all hosts
  assetplay --limit production                       # Run against production group
  assetplay --limit web01.example.com                # Run against specific host
  assetplay --check                                  # Dry run
  assetplay --tags "gather_hardware,gather_software" # Run specific tasks
  assetplay --skip-tags "gather_ports"               # Skip port scanning
  assetplay -vvv                                     # Debug mode

NIST CSF controls:
  ID.AM-1  Physical devices and systems inventoried
  ID.AM-2  Software platforms and applications inventoried
  ID.AM-3  Communication and data flows mapped
  ID.AM-4  External information systems catalogued
  ID.AM-5  Resources prioritized based on criticality
"""


@dataclass(frozen=True)
class RunOptions:
    """Flags forwarded to ansible-playbook for one run."""

    limit: Optional[str] = None
    check: bool = False
    tags: Optional[str] = None
    skip_tags: Optional[str] = None
    verbosity: int = 0


class UsageError(Exception):
    """Raised by the parser instead of exiting with argparse's status 2."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="assetplay",
        description="Execute NIST CSF Play 1: Asset Inventory and Classification",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("--limit", metavar="GROUP/HOST", default=None, help="Limit execution to specific group or host")
    p.add_argument("--check", action="store_true", help="Run in check mode (dry run)")
    p.add_argument("--tags", metavar="TAGS", default=None, help="Run specific tags only")
    p.add_argument("--skip-tags", metavar="TAGS", default=None, help="Skip specific tags")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Verbose output (-vvv for debug)")
    p.add_argument("--inventory", "-i", default=None, help="Inventory file (overrides settings)")
    p.add_argument("--playbook", "-p", default=None, help="Playbook file (overrides settings)")
    p.add_argument("--config", default=None, help="Settings file (default: assetplay.yml in project root)")
    p.add_argument("--cwd", default=None, help="Override project root")
    p.add_argument("--no-banner", action="store_true", help="Skip the start banner")
    p.add_argument("--no-color", action="store_true", help="Disable colored console output")
    return p


def options_from(ns: argparse.Namespace) -> RunOptions:
    return RunOptions(
        limit=ns.limit or None,
        check=bool(ns.check),
        tags=ns.tags or None,
        skip_tags=ns.skip_tags or None,
        verbosity=min(MAX_VERBOSITY, ns.verbose or 0),
    )


def parse_args(argv=None) -> Tuple[RunOptions, argparse.Namespace]:
    """
    Parse argv into RunOptions plus the raw namespace.
    Unknown options print the error and help text, then exit 1.
    -h/--help prints help and exits 0 (argparse default).
    """
    parser = build_parser()
    try:
        ns = parser.parse_args(argv)
    except UsageError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        parser.print_help(sys.stderr)
        raise SystemExit(1)
    return options_from(ns), ns
