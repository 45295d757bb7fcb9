# cutlog/cli/commands/timer.py
# Pause/resume timer for one unit, persisted as a JSON state file between invocations

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

import typer
from rich.live import Live

from ...config.settings import CutlogSettings, get_settings
from ...core.constants import IdleMode, PauseStatus
from ...core.exceptions import InvalidTransition
from ...core.machine_hours import compute_machine_hours
from ...core.pause import (
    End,
    Pause,
    PauseAction,
    PauseState,
    Resume,
    pause_transition,
    start_pause_state,
    total_paused_seconds,
)
from ...core.ticker import Ticker
from ...core.timefmt import format_hhmmss, format_timestamp, parse_timestamp, wall_clock_millis
from ...core.verbose import vlog, vlog_dev
from ...cutlog_io import read_json_safe, write_json_safe
from ...cutlog_io.console import console, get_console
from ...ui.display.timer_view import build_timer_panel
from ..app import app
from ..decorators import handle_cutlog_error
from ..params import TimestampOpt

_STATE_PATH_KEY = "cutlog.timer_state_path"

# * Sub-app for timer commands; registered on root app
timer_app = typer.Typer(
    rich_markup_mode="rich", help="[cutlog.accent2]Pause/resume timer for one unit[/]"
)
app.add_typer(timer_app, name="timer")


@timer_app.callback()
def timer_callback(
    ctx: typer.Context,
    state_file: Optional[Path] = typer.Option(
        None, "--state-file", help="Timer state file (default from config)", dir_okay=False
    ),
) -> None:
    if state_file is not None:
        ctx.meta[_STATE_PATH_KEY] = state_file


def _state_path(ctx: typer.Context, settings: CutlogSettings) -> Path:
    return ctx.meta.get(_STATE_PATH_KEY) or settings.timer_state_path


# explicit --at timestamp or the shop wall clock
def _now(settings: CutlogSettings, at: Optional[str]) -> int:
    if at is None:
        return wall_clock_millis(settings.effective_timezone)
    millis = parse_timestamp(at)
    if millis is None:
        raise typer.BadParameter(f"'{at}' is not a DD/MM/YYYY HH:MM timestamp", param_hint="--at")
    return millis


def _load_state(path: Path) -> PauseState:
    if not path.exists():
        raise InvalidTransition(
            "No timer started; run 'cutlog timer start' first", "none", "load"
        )
    return PauseState.from_dict(read_json_safe(path))


def _save_state(path: Path, state: PauseState) -> None:
    write_json_safe(state.to_dict(), path)


# load, apply one action, persist & redraw
def _apply(ctx: typer.Context, action: PauseAction, now: int) -> PauseState:
    path = _state_path(ctx, get_settings(ctx))
    state = _load_state(path)
    new_state = pause_transition(state, action, now)
    _save_state(path, new_state)
    console.print(build_timer_panel(new_state, now))
    return new_state


@timer_app.command(help="Start a new timer")
@handle_cutlog_error
def start(
    ctx: typer.Context,
    at: Optional[str] = TimestampOpt(),
    force: bool = typer.Option(False, "--force", help="Discard a timer that has not ended"),
) -> None:
    settings = get_settings(ctx)
    path = _state_path(ctx, settings)
    if path.exists() and not force:
        existing = PauseState.from_dict(read_json_safe(path))
        if existing.status is not PauseStatus.ENDED:
            raise InvalidTransition(
                f"A timer is already {existing.status.value}; use --force to discard it",
                existing.status.value,
                "start",
            )
    now = _now(settings, at)
    state = start_pause_state(now)
    _save_state(path, state)
    vlog("TIMER", f"Started at {format_timestamp(now)}")
    console.print(build_timer_panel(state, now))


@timer_app.command(help="Pause the running timer (reason required)")
@handle_cutlog_error
def pause(
    ctx: typer.Context,
    reason: str = typer.Option(..., "--reason", "-r", help="Why the machine is paused"),
    at: Optional[str] = TimestampOpt(),
) -> None:
    _apply(ctx, Pause(reason), _now(get_settings(ctx), at))


@timer_app.command(help="Resume a paused timer")
@handle_cutlog_error
def resume(ctx: typer.Context, at: Optional[str] = TimestampOpt()) -> None:
    _apply(ctx, Resume(), _now(get_settings(ctx), at))


@timer_app.command(help="End the timer; an open pause is closed at the end time")
@handle_cutlog_error
def end(
    ctx: typer.Context,
    at: Optional[str] = TimestampOpt(),
    reason: Optional[str] = typer.Option(
        None, "--reason", "-r", help="Reason recorded for a pause left open at the end"
    ),
) -> None:
    settings = get_settings(ctx)
    now = _now(settings, at)
    state = _apply(ctx, End(now, reason), now)
    assert state.end_millis is not None

    paused = total_paused_seconds(state, now)
    result = compute_machine_hours(
        format_timestamp(state.start_millis),
        format_timestamp(state.end_millis),
        mode=IdleMode.SUBTRACT_PAUSE,
        paused_seconds=paused,
    )
    console.print(
        f"Machine Hrs: [bold][cutlog.accent]{result.text}[/][/] "
        f"[dim](paused {format_hhmmss(paused)})[/]"
    )


@timer_app.command(help="Show the current timer")
@handle_cutlog_error
def status(ctx: typer.Context, at: Optional[str] = TimestampOpt()) -> None:
    settings = get_settings(ctx)
    state = _load_state(_state_path(ctx, settings))
    console.print(build_timer_panel(state, _now(settings, at)))


# * Live view; re-reads the state file each tick so pauses from another shell show up
@timer_app.command(help="Watch the timer live until it ends (Ctrl+C to stop)")
@handle_cutlog_error
def watch(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    path = _state_path(ctx, settings)
    state = _load_state(path)
    if state.status is PauseStatus.ENDED:
        console.print(build_timer_panel(state, state.end_millis or state.start_millis))
        return

    done = threading.Event()
    now = wall_clock_millis(settings.effective_timezone)
    with Live(build_timer_panel(state, now), console=get_console(), auto_refresh=False) as live:

        def refresh() -> bool:
            current = _load_state(path)
            vlog_dev("TICK", f"{current.status.value} paused={current.closed_pause_seconds}s")
            live.update(
                build_timer_panel(current, wall_clock_millis(settings.effective_timezone)),
                refresh=True,
            )
            if current.status is PauseStatus.ENDED:
                done.set()
                return False
            return True

        ticker = Ticker(settings.tick_interval, refresh)
        try:
            with ticker:
                while not done.wait(0.25):
                    if not ticker.running:
                        break
        except KeyboardInterrupt:
            console.print("[dim]Stopped watching[/]")
