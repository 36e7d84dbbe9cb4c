"""Connectivity probe tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetplay_pkg.core.args import RunOptions
from assetplay_pkg.core.config import load_config
from assetplay_pkg.core.connectivity import CONTINUE_QUESTION, check_connectivity, parse_ping_output
from assetplay_pkg.core.errors import RunCancelled
from assetplay_pkg.utils.logger import Logger

PING_FAILURE = (
    'web01 | SUCCESS => {"changed": false, "ping": "pong"}',
    "db01 | UNREACHABLE!: Failed to connect to the host via ssh",
    'app01 | FAILED! => {"msg": "python not found"}',
)


def _never_asked(question: str) -> bool:
    raise AssertionError("confirm must not be called")


def test_parse_ping_output_splits_hosts() -> None:
    reachable, unreachable = parse_ping_output(PING_FAILURE + ("noise line",))

    assert reachable == ["web01"]
    assert unreachable == ["db01", "app01"]


def test_passing_probe_does_not_prompt(project: Path, fake_executor) -> None:
    cfg = load_config(project, environ={})
    executor = fake_executor()

    result = check_connectivity(cfg, RunOptions(), executor, Logger(), _never_asked)

    assert result.ok is True
    assert result.reachable == ("web01",)
    assert executor.calls == [["ansible", "all", "-i", str(cfg.inventory), "-m", "ping", "-o"]]


def test_limit_is_applied_to_probe(project: Path, fake_executor) -> None:
    cfg = load_config(project, environ={})
    executor = fake_executor()

    check_connectivity(cfg, RunOptions(limit="staging"), executor, Logger(), _never_asked)

    assert executor.calls[0][4:6] == ["--limit", "staging"]


def test_declining_after_failure_cancels_run(project: Path, fake_executor, capsys) -> None:
    cfg = load_config(project, environ={})
    asked = []

    def decline(question: str) -> bool:
        asked.append(question)
        return False

    with pytest.raises(RunCancelled) as excinfo:
        check_connectivity(cfg, RunOptions(), fake_executor(ping_rc=4, ping_lines=PING_FAILURE), Logger(), decline)

    assert excinfo.value.exit_code == 0
    assert asked == [CONTINUE_QUESTION]
    out = capsys.readouterr().out
    assert "db01, app01" in out
    assert "Execution cancelled by user" in out


def test_accepting_after_failure_keeps_unreachable_hosts_in_scope(project: Path, fake_executor) -> None:
    cfg = load_config(project, environ={})

    result = check_connectivity(
        cfg, RunOptions(), fake_executor(ping_rc=4, ping_lines=PING_FAILURE), Logger(), lambda q: True
    )

    assert result.ok is False
    assert result.unreachable == ("db01", "app01")
