# cutlog/cutlog_io/console.py
# Centralized console management for the cutlog CLI

# This module provides the single Console every other module prints through.
#
# Architecture notes:
# - The proxy is created at import time w/ the cutlog Rich theme
# - _ConsoleProxy allows reconfiguring/resetting without breaking module-level references
#
# Usage patterns:
# - Commands & renderers: `console.print()`
# - Tests: use configure_console(record=True) or reset_console() for isolation

from __future__ import annotations
from typing import Optional, Any
from rich.console import Console

from ..ui.theme import CUTLOG_THEME


def _new_console(**kwargs: Any) -> Console:
    return Console(theme=CUTLOG_THEME, **kwargs)


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = _new_console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Get the underlying Console instance
def get_console() -> Console:
    # handle both proxy & direct Console (e.g., when patched in tests)
    if hasattr(console, "_get_console"):
        return console._get_console()
    return console  # type: ignore[return-value]


# * Configure console w/ specific settings (useful for tests & CLI modes)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    no_color: Optional[bool] = None,
    record: bool = False,
) -> Console:
    kwargs: dict[str, Any] = {}
    if width is not None:
        kwargs["width"] = width
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if no_color is not None:
        kwargs["no_color"] = no_color
    if record:
        kwargs["record"] = True

    if kwargs:  # only recreate if settings provided
        console._set_console(_new_console(**kwargs))
    return console._get_console()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(_new_console())
    return console._get_console()


__all__ = [
    "console",
    "get_console",
    "configure_console",
    "reset_console",
]
