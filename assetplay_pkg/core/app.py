# =====================================================================
# File: assetplay_pkg/core/app.py
# Run orchestrator: preflight -> inventory -> connectivity -> playbook
# -> summary/cleanup. Steps raise; run() maps errors to exit codes.
# =====================================================================

from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional

from .args import RunOptions, parse_args
from .config import AppConfig, load_config
from .connectivity import check_connectivity
from .errors import AssetPlayError, ConfigError, InventoryValidationError, RunCancelled
from .inventory import validate_inventory
from .playbooks import run_playbook
from .preflight import check_prerequisites
from .reports import cleanup_old_artifacts, summarize_reports
from .runner import CommandExecutor

from ..ui.console import print_banner, print_next_steps, print_summary, print_troubleshooting
from ..utils.constants import DATE_STAMP_LEN, LOG_PREFIX, TIMESTAMP_FMT
from ..utils.files import find_project_root
from ..utils.logger import Logger
from ..utils.misc import ask_yes_no, which as default_which


class App:
    """One execution of the asset inventory play."""

    def __init__(
        self,
        cfg: AppConfig,
        options: RunOptions,
        log: Logger,
        executor: Optional[CommandExecutor] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        which: Callable[[str], Optional[str]] = default_which,
        now: Optional[datetime] = None,
    ):
        self.cfg = cfg
        self.options = options
        self.log = log
        self.executor = executor or CommandExecutor(cwd=str(cfg.project_root), ansible_cfg=str(cfg.ansible_cfg))
        self.confirm = confirm or ask_yes_no
        self.which = which
        self.started = now or datetime.now()
        self.timestamp = self.started.strftime(TIMESTAMP_FMT)

    @property
    def date_stamp(self) -> str:
        return self.timestamp[:DATE_STAMP_LEN]

    @property
    def log_file(self):
        return self.cfg.log_dir / f"{LOG_PREFIX}{self.timestamp}.log"

    def run(self) -> int:
        try:
            self.log.open(self.log_file)
        except OSError as exc:
            self.log.error(f"Cannot open log file {self.log_file}: {exc.strerror or exc}")
            return 1
        try:
            return self._run()
        finally:
            self.log.close()

    def _run(self) -> int:
        if self.cfg.show_banner:
            print_banner(self.log)
        self.log.info(f"Execution started at: {self.started:%a %b %d %H:%M:%S %Y}")
        self.log.info(f"Project directory: {self.cfg.project_root}")

        try:
            check_prerequisites(self.cfg, self.executor, self.log, which=self.which)
            validate_inventory(self.cfg, self.executor, self.log)
            check_connectivity(self.cfg, self.options, self.executor, self.log, self.confirm)
        except RunCancelled as exc:
            return exc.exit_code
        except InventoryValidationError as exc:
            self.log.debug(str(exc))
            for line in (exc.output or "").splitlines():
                self.log.debug(f"  {line}")
            return exc.exit_code
        except AssetPlayError as exc:
            self.log.debug(str(exc))
            return exc.exit_code

        result = run_playbook(self.cfg, self.options, self.executor, self.log)
        if result.ok:
            print_summary(self.log, summarize_reports(self.cfg, self.date_stamp), self.cfg.report_dir)
            self._cleanup()
            self.log.success("All tasks completed successfully!")
            print_next_steps(self.log, self.cfg.report_dir)
            return 0

        self.log.error(f"Execution completed with errors. Check log: {self.log_file}")
        print_troubleshooting(self.log)
        self._cleanup()
        return 1

    def _cleanup(self):
        cleanup_old_artifacts(self.cfg, self.log, now=self.started.timestamp())


# ============================== Entrypoints ==============================
def main(
    argv=None,
    confirm: Optional[Callable[[str], bool]] = None,
    executor: Optional[CommandExecutor] = None,
    which: Callable[[str], Optional[str]] = default_which,
    now: Optional[datetime] = None,
) -> int:
    try:
        options, args = parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    project_root = find_project_root(args.cwd)
    logger = Logger(level=3 if options.verbosity else 2, color=not args.no_color)
    try:
        cfg = load_config(
            project_root=project_root,
            inventory_override=args.inventory,
            playbook_override=args.playbook,
            settings_file=args.config,
            show_banner=not args.no_banner,
            color=not args.no_color,
        )
    except ConfigError as exc:
        logger.error(str(exc))
        return exc.exit_code
    logger.color = logger.color and cfg.color

    app = App(cfg, options, logger, executor=executor, confirm=confirm, which=which, now=now)
    return app.run()


def console_main():
    raise SystemExit(main())
