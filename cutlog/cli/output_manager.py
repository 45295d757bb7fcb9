# cutlog/cli/output_manager.py
# Output manager implementation for verbose, debug & quiet modes

# * Rich console output plus an optional plain-text log file
# * Registered via set_output_manager() at CLI startup

from __future__ import annotations

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..core.output import OutputLevel


class OutputManager:
    # Implements the OutputInterface protocol for the core registry

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: Any = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode, quiet)
        self._session_start = time.time()
        self._setup_log_file(log_file)

    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool, quiet: bool
    ) -> OutputLevel:
        # --quiet wins; DEBUG needs dev_mode, otherwise capped at VERBOSE
        if quiet:
            return OutputLevel.QUIET
        max_allowed = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            from ..cutlog_io.console import console

            prefix = f"[dim][{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            console.print(f"{prefix} {msg}", **kwargs)
            if detail:
                for line in detail.split("\n"):
                    console.print(f"  [dim]{line}[/]")
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    self._write_to_file(f"  {line}")

    # data-quality warnings show at NORMAL level & above
    def warn(self, msg: str, category: str = "WARN") -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..cutlog_io.console import console

            console.print(f"[cutlog.warn]\\[{category}][/] {msg}")
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def debug_json(self, label: str, data: Any) -> None:
        if self._level >= OutputLevel.DEBUG:
            from ..cutlog_io.console import console

            console.print(f"[debug]\\[JSON][/] {label}:")
            console.print_json(data=data)
            try:
                json_str = json.dumps(data, indent=2, default=str)
                self._write_to_file(f"[{self._elapsed()}] [JSON] {label}:")
                for line in json_str.split("\n"):
                    self._write_to_file(f"  {line}")
            except (TypeError, ValueError):
                self._write_to_file(f"[{self._elapsed()}] [JSON] {label}: {data}")

    def start_session(self) -> None:
        self._session_start = time.time()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError:
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None
