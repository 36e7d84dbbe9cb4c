"""Shared fixtures: a recording stand-in for the ansible CLIs and a project tree."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

NOW = datetime.now().replace(microsecond=0)

INVENTORY_JSON = {
    "_meta": {"hostvars": {"web01": {}, "db01": {}, "stg01": {}}},
    "all": {"children": ["ungrouped", "production", "staging"]},
    "production": {"hosts": ["web01", "db01"]},
    "staging": {"hosts": ["stg01"]},
    "ungrouped": {},
}


class FakeExecutor:
    """Records every delegate command and replays canned results."""

    def __init__(
        self,
        inventory_rc: int = 0,
        inventory_out: Optional[str] = None,
        ping_rc: int = 0,
        ping_lines: Sequence[str] = ("web01 | SUCCESS => {\"ping\": \"pong\"}",),
        playbook_rc: int = 0,
        playbook_lines: Sequence[str] = ("PLAY RECAP *****",),
        on_playbook: Optional[Callable[[], None]] = None,
    ):
        self.inventory_rc = inventory_rc
        self.inventory_out = json.dumps(INVENTORY_JSON) if inventory_out is None else inventory_out
        self.ping_rc = ping_rc
        self.ping_lines = list(ping_lines)
        self.playbook_rc = playbook_rc
        self.playbook_lines = list(playbook_lines)
        self.on_playbook = on_playbook
        self.calls: List[List[str]] = []

    def capture(self, cmd: List[str]) -> Tuple[int, str]:
        self.calls.append(list(cmd))
        if cmd[:2] == ["ansible", "--version"]:
            return 0, "ansible [core 2.16.3]\n  config file = None\n"
        if cmd[0] == "ansible-inventory":
            return self.inventory_rc, self.inventory_out
        return 0, ""

    def stream(self, cmd: List[str], on_line: Callable[[str], None]) -> int:
        self.calls.append(list(cmd))
        if cmd[0] == "ansible-playbook":
            if self.on_playbook is not None:
                self.on_playbook()
            lines, rc = self.playbook_lines, self.playbook_rc
        else:
            lines, rc = self.ping_lines, self.ping_rc
        for line in lines:
            on_line(line)
        return rc

    def commands(self, tool: str) -> List[List[str]]:
        return [c for c in self.calls if c[0] == tool]


def all_tools(tool: str) -> str:
    return f"/usr/bin/{tool}"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ASSETPLAY_PLAYBOOK",
        "ASSETPLAY_INVENTORY",
        "ASSETPLAY_LOG_DIR",
        "ASSETPLAY_REPORT_DIR",
        "ASSETPLAY_RETENTION_DAYS",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    plays = tmp_path / "plays"
    plays.mkdir()
    (plays / "play1_asset_inventory.yml").write_text("---\n- hosts: all\n  tasks: []\n", encoding="utf-8")
    (plays / "inventory").write_text("[production]\nweb01\n", encoding="utf-8")
    (tmp_path / "ansible.cfg").write_text("[defaults]\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_executor() -> Callable[..., FakeExecutor]:
    return FakeExecutor


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def which() -> Callable[[str], str]:
    return all_tools
