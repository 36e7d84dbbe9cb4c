# =====================================================================
# File: assetplay_pkg/core/inventory.py
# Inventory validation via `ansible-inventory --list`
# =====================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Set, Tuple
import json

from .config import AppConfig
from .errors import InventoryValidationError
from .runner import CommandExecutor, build_inventory_cmd, display_cmd
from ..utils.logger import Logger

SKIP_GROUPS: Set[str] = {"all", "ungrouped", "_meta"}


@dataclass(frozen=True)
class InventorySummary:
    host_count: int
    groups: Tuple[str, ...]


def count_hosts(data: dict) -> int:
    """Number of hosts in `ansible-inventory --list` JSON (`_meta.hostvars`)."""
    meta = data.get("_meta")
    if not isinstance(meta, dict):
        return 0
    hostvars = meta.get("hostvars")
    return len(hostvars) if isinstance(hostvars, dict) else 0


def list_groups(data: dict) -> List[str]:
    """Group names from the flat group map, minus the implicit ones."""
    return sorted(k for k, v in data.items() if isinstance(v, dict) and k not in SKIP_GROUPS)


def validate_inventory(cfg: AppConfig, executor: CommandExecutor, log: Logger) -> InventorySummary:
    log.info("Validating inventory...")
    cmd = build_inventory_cmd(str(cfg.inventory))
    log.debug("Executing: " + display_cmd(cmd))

    rc, out = executor.capture(cmd)
    if rc != 0:
        log.error("Inventory validation failed")
        raise InventoryValidationError(f"ansible-inventory exited with status {rc}", out)

    try:
        data = json.loads(out)
    except ValueError as exc:
        log.error("Inventory validation failed")
        raise InventoryValidationError(f"ansible-inventory returned invalid JSON: {exc}", out) from exc
    if not isinstance(data, dict):
        log.error("Inventory validation failed")
        raise InventoryValidationError("ansible-inventory returned an unexpected document", out)

    log.success("Inventory validation passed")
    summary = InventorySummary(count_hosts(data), tuple(list_groups(data)))
    log.info(f"Total hosts in inventory: {summary.host_count}")
    if summary.groups:
        log.debug(f"Groups: {', '.join(summary.groups)}")
    return summary
