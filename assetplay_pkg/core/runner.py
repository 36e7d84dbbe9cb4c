# =====================================================================
# File: assetplay_pkg/core/runner.py
# Ansible command builders and a synchronous subprocess executor
# that streams combined stdout/stderr line-by-line
# =====================================================================
from __future__ import annotations
import os
import shlex
import subprocess
from typing import Callable, Iterable, List, Optional, Tuple

from .args import RunOptions

# Shell convention for "command not found"
RC_NOT_FOUND = 127


class LiveRunner:
    """
    Run a command and stream combined stdout/stderr as text lines.
    Blocks until the process exits; there is no timeout.
    """

    def __init__(self, cmd: List[str], env: Optional[dict] = None, cwd: Optional[str] = None):
        self.cmd = cmd
        self.env = env or os.environ.copy()
        self.cwd = cwd
        self.process: Optional[subprocess.Popen] = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.wait()

    def start(self):
        self.process = subprocess.Popen(
            self.cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            env=self.env,
            cwd=self.cwd,
            text=True,
            errors="replace",
            bufsize=1,
        )

    def stream(self) -> Iterable[str]:
        if self.process is None or self.process.stdout is None:
            return
        for line in self.process.stdout:
            yield line.rstrip("\n")
        self.process.stdout.close()

    def wait(self) -> int:
        if self.process is None:
            return 0
        return self.process.wait()


class CommandExecutor:
    """Runs delegate commands in the project root."""

    def __init__(self, cwd: Optional[str] = None, ansible_cfg: Optional[str] = None):
        self.cwd = cwd
        self.env = os.environ.copy()
        if ansible_cfg and os.path.isfile(ansible_cfg):
            self.env["ANSIBLE_CONFIG"] = ansible_cfg

    def capture(self, cmd: List[str]) -> Tuple[int, str]:
        """
        Run to completion; return (returncode, output).
        Output is stdout on success; on failure stderr is appended so the
        caller can show why the command failed.
        """
        try:
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=self.env,
                cwd=self.cwd,
                text=True,
                errors="replace",
            )
        except FileNotFoundError:
            return RC_NOT_FOUND, ""
        if proc.returncode != 0:
            return proc.returncode, proc.stdout + proc.stderr
        return proc.returncode, proc.stdout

    def stream(self, cmd: List[str], on_line: Callable[[str], None]) -> int:
        """Run to completion, passing each output line to on_line."""
        try:
            with LiveRunner(cmd, env=self.env, cwd=self.cwd) as r:
                for line in r.stream():
                    on_line(line)
        except FileNotFoundError:
            on_line(f"{cmd[0]}: command not found")
            return RC_NOT_FOUND
        return r.wait()


def build_inventory_cmd(inventory: str) -> List[str]:
    return ["ansible-inventory", "--list", "-i", inventory]


def build_ping_cmd(inventory: str, limit: Optional[str] = None) -> List[str]:
    cmd = ["ansible", "all", "-i", inventory]
    if limit:
        cmd += ["--limit", limit]
    cmd += ["-m", "ping", "-o"]
    return cmd


def build_playbook_cmd(inventory: str, playbook: str, options: RunOptions) -> List[str]:
    """
    Construct the ansible-playbook command.
    Optional flags are emitted only when set in options.
    """
    cmd = [
        "ansible-playbook",
        "-i", inventory,
        playbook,
    ]
    if options.limit:
        cmd += ["--limit", options.limit]
    if options.check:
        cmd.append("--check")
    if options.tags:
        cmd += ["--tags", options.tags]
    if options.skip_tags:
        cmd += ["--skip-tags", options.skip_tags]
    if options.verbosity > 0:
        cmd.append("-" + "v" * options.verbosity)
    return cmd


def display_cmd(cmd: List[str]) -> str:
    return " ".join(shlex.quote(part) for part in cmd)
