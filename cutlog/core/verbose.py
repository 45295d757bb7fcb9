# cutlog/core/verbose.py
# Verbose logging helpers - delegate to the registered output manager w/ categories for config, file I/O, coercion & state transitions

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)
    manager.start_session()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Flag a numeric field that was silently coerced to 0
def vlog_coercion(field: str, raw: Any) -> None:
    get_output_manager().warn(f"{field}: non-numeric value {raw!r} treated as 0", "COERCE")


# * Log an accepted state transition
def vlog_transition(before: str, action: str, after: str) -> None:
    get_output_manager().verbose(f"{before} --{action}--> {after}", "STATE")


# * Dev-mode only logging
def vlog_dev(category: str, message: str, detail: str | None = None) -> None:
    if get_output_manager().is_debug_enabled():
        get_output_manager().verbose(message, f"DEV:{category}", detail)


# * Dump structured data at DEBUG level
def vlog_json(label: str, data: Any) -> None:
    get_output_manager().debug_json(label, data)


# * Cleanup verbose logging
def cleanup_verbose() -> None:
    get_output_manager().end_session()
