# cutlog/cli/commands/hours.py
# Machine hours for one capture from start/end timestamps & idle handling

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.constants import IdleMode
from ...core.machine_hours import compute_machine_hours, idle_duration_for
from ...core.timefmt import parse_timestamp
from ...core.verbose import vlog
from ...cutlog_io.console import console
from ...ui.display.reports import render_machine_hours
from ..app import app
from ..decorators import handle_cutlog_error
from ..params import ModeOpt, _normalize_mode


# * Compute machine hours; idle type resolves through the configured presets
@app.command(help="Compute machine hours between two DD/MM/YYYY HH:MM timestamps")
@handle_cutlog_error
def hours(
    ctx: typer.Context,
    start: str = typer.Argument(..., help="Start time, DD/MM/YYYY HH:MM"),
    end: str = typer.Argument(..., help="End time, DD/MM/YYYY HH:MM"),
    idle: Optional[str] = typer.Option(None, "--idle", help="Idle duration HH:MM added to the span"),
    idle_type: Optional[str] = typer.Option(
        None, "--idle-type", help="Idle type name; uses its configured preset duration"
    ),
    paused_seconds: int = typer.Option(
        0, "--paused-seconds", min=0, help="Paused seconds subtracted in subtract mode"
    ),
    mode: str = ModeOpt(),
    legacy_clock: bool = typer.Option(
        False, "--legacy-clock", help="Accept bare HH:MM times (end before start rolls over a day)"
    ),
) -> None:
    settings = get_settings(ctx)
    idle_mode = _normalize_mode(mode)

    idle_text = idle or ""
    if idle_type and not idle_text:
        if idle_type not in settings.idle_presets:
            known = ", ".join(sorted(settings.idle_presets)) or "none configured"
            raise typer.BadParameter(f"Unknown idle type '{idle_type}'. Known: {known}")
        idle_text = idle_duration_for(idle_type, settings.idle_presets)
        vlog("IDLE", f"{idle_type} -> {idle_text}")

    if not legacy_clock and (parse_timestamp(start) is None or parse_timestamp(end) is None):
        console.print(
            "[cutlog.warn]Start/End not in DD/MM/YYYY HH:MM format; machine hours set to 0[/]"
        )

    result = compute_machine_hours(
        start,
        end,
        idle_text=idle_text,
        mode=idle_mode,
        paused_seconds=paused_seconds,
        allow_legacy_clock=legacy_clock,
    )

    if idle_mode is IdleMode.SUBTRACT_PAUSE:
        mode_label = f"subtract {paused_seconds}s paused"
    else:
        mode_label = f"add idle {idle_text or '00:00'}"
    render_machine_hours(result, mode_label)
