# =====================================================================
# File: assetplay_pkg/core/config.py
# App configuration loading and defaults
# Precedence: CLI overrides > environment > settings file > defaults
# =====================================================================
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigError

SETTINGS_FILENAME = "assetplay.yml"

DEFAULTS: Dict[str, Any] = {
    "playbook": "plays/play1_asset_inventory.yml",
    "inventory": "plays/inventory",
    "ansible_cfg": "ansible.cfg",
    "log_dir": "logs",
    "report_dir": "inventory_reports",
    "retention_days": 30,
}

ENV_KEYS = {
    "ASSETPLAY_PLAYBOOK": "playbook",
    "ASSETPLAY_INVENTORY": "inventory",
    "ASSETPLAY_LOG_DIR": "log_dir",
    "ASSETPLAY_REPORT_DIR": "report_dir",
    "ASSETPLAY_RETENTION_DAYS": "retention_days",
}

REQUIRED_TOOLS = ("ansible", "ansible-inventory", "ansible-playbook")
PATH_KEYS = ("playbook", "inventory", "ansible_cfg", "log_dir", "report_dir")


@dataclass(frozen=True)
class AppConfig:
    project_root: Path
    playbook: Path
    inventory: Path
    ansible_cfg: Path
    log_dir: Path
    report_dir: Path
    fact_cache_dir: Path
    retry_dir: Path
    retention_days: int = 30
    report_patterns: Tuple[str, ...] = ("*.json", "*.yml")
    log_pattern: str = "*.log"
    required_tools: Tuple[str, ...] = REQUIRED_TOOLS
    show_banner: bool = True
    color: bool = True

    @property
    def work_dirs(self) -> Tuple[Path, ...]:
        return (self.log_dir, self.report_dir, self.fact_cache_dir, self.retry_dir)


def _read_settings(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")
    for key in PATH_KEYS:
        if key in data and (not isinstance(data[key], str) or not data[key].strip()):
            raise ConfigError(f"{key} in {path} must be a non-empty path, got {data[key]!r}")
    return data


def _retention(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"retention_days must be a positive integer, got {value!r}")
    try:
        days = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"retention_days must be a positive integer, got {value!r}") from None
    if days <= 0:
        raise ConfigError(f"retention_days must be a positive integer, got {value!r}")
    return days


def _resolve(project_root: Path, value: Any) -> Path:
    p = Path(str(value)).expanduser()
    return p if p.is_absolute() else project_root / p


def load_config(
    project_root: Path,
    inventory_override: Optional[str] = None,
    playbook_override: Optional[str] = None,
    settings_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    show_banner: bool = True,
    color: bool = True,
) -> AppConfig:
    environ = os.environ if environ is None else environ
    values: Dict[str, Any] = dict(DEFAULTS)

    if settings_file:
        values.update(_read_settings(_resolve(project_root, settings_file)))
    elif (project_root / SETTINGS_FILENAME).is_file():
        values.update(_read_settings(project_root / SETTINGS_FILENAME))

    for env_name, key in ENV_KEYS.items():
        if environ.get(env_name):
            values[key] = environ[env_name]

    if inventory_override:
        values["inventory"] = inventory_override
    if playbook_override:
        values["playbook"] = playbook_override

    if environ.get("NO_COLOR"):
        color = False

    return AppConfig(
        project_root=project_root,
        playbook=_resolve(project_root, values["playbook"]),
        inventory=_resolve(project_root, values["inventory"]),
        ansible_cfg=_resolve(project_root, values["ansible_cfg"]),
        log_dir=_resolve(project_root, values["log_dir"]),
        report_dir=_resolve(project_root, values["report_dir"]),
        fact_cache_dir=project_root / "fact_cache",
        retry_dir=project_root / "retry",
        retention_days=_retention(values["retention_days"]),
        show_banner=show_banner,
        color=color,
    )
