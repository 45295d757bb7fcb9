# cutlog/ui/display/timer_view.py
# Live timer panel for the pause accumulator (work clock, pause clock, sessions)

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...core.constants import PauseStatus
from ...core.pause import PauseState, elapsed_seconds, live_pause_seconds, total_paused_seconds
from ...core.timefmt import format_hhmmss, format_timestamp
from ..theme import CutlogColors

_STATUS_STYLES = {
    PauseStatus.RUNNING: f"bold white on {CutlogColors.SUCCESS}",
    PauseStatus.PAUSED: f"bold black on {CutlogColors.WARNING}",
    PauseStatus.ENDED: f"bold white on {CutlogColors.ACCENT}",
}


# * Build the timer panel for `now_millis`; pure rendering, no clock reads
def build_timer_panel(state: PauseState, now_millis: int) -> Panel:
    status = state.status
    header = Text()
    header.append(f" {status.value.upper()} ", style=_STATUS_STYLES[status])
    header.append("  Worked ", style="bold")
    header.append(format_hhmmss(elapsed_seconds(state, now_millis)), style=f"bold {CutlogColors.ACCENT}")
    if status is PauseStatus.PAUSED:
        header.append("  Paused ", style="bold")
        header.append(format_hhmmss(live_pause_seconds(state, now_millis)), style=CutlogColors.WARNING)
        header.append(f"  ({state.current_reason})", style="dim")
    header.append(
        f"\nStarted {format_timestamp(state.start_millis)}", style="dim"
    )
    if state.end_millis is not None:
        header.append(f"  Ended {format_timestamp(state.end_millis)}", style="dim")
    header.append(
        f"\nTotal paused {format_hhmmss(total_paused_seconds(state, now_millis))}", style="dim"
    )

    parts: list = [header]
    if state.sessions:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", justify="right")
        table.add_column("From")
        table.add_column("To")
        table.add_column("Duration", justify="right")
        table.add_column("Reason")
        for index, session in enumerate(state.sessions, start=1):
            table.add_row(
                str(index),
                format_timestamp(session.pause_start),
                format_timestamp(session.pause_end),
                format_hhmmss(session.duration_seconds),
                session.reason,
            )
        parts.append(table)

    return Panel(Group(*parts), title="[bold]Timer[/]", border_style=CutlogColors.ACCENT, padding=(0, 1))
