# cutlog/ui/display/reports.py
# Rich console rendering for machine hours, cost totals, QA progress & capture checks

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...core.captures import OperatorSummary
from ...core.constants import QaState
from ...core.cost_engine import JobTotals
from ...core.machine_hours import MachineHours
from ...core.qa_progress import QaProgress
from ...core.timefmt import format_decimal_hours, format_decimal_hours_hrs, format_hhmmss
from ...core.types import JobSetting, QuantityCapture
from ...cutlog_io.console import console
from ..theme import CutlogColors, styled_arrow, styled_checkmark

_QA_STYLES = {
    QaState.SAVED: CutlogColors.QA_LOGGED,
    QaState.READY_FOR_QA: CutlogColors.QA_LOGGED,
    QaState.SENT_TO_QA: CutlogColors.QA_DISPATCHED,
    QaState.EMPTY: CutlogColors.QA_PENDING,
}


def _money(amount: float, currency: str) -> str:
    return f"{currency}{amount:,.2f}"


# * checkmark + label [+ arrow + path]
def print_success_line(label: str, path: str | Path | None = None) -> None:
    if path is not None:
        console.print(styled_checkmark(), label, styled_arrow(), f"{path}")
    else:
        console.print(styled_checkmark(), label)


# * Machine hours result w/ HH:MM equivalent
def render_machine_hours(result: MachineHours, mode_label: str) -> None:
    text = Text()
    text.append("Machine Hrs: ", style="bold")
    text.append(result.text, style=f"bold {CutlogColors.ACCENT}")
    text.append(f"  ({format_decimal_hours(result.hours)})", style="dim")
    text.append(f"\nIdle handling: {mode_label}", style="dim")
    console.print(Panel(text, title="[bold]Machine Hours[/]", border_style=CutlogColors.ACCENT, padding=(0, 1)))


# * Per-setting cost table plus job totals
def render_cost_report(settings: Sequence[JobSetting], totals: JobTotals, currency: str) -> None:
    table = Table(title="Job Cost", title_style="bold", header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Setting")
    table.add_column("Qty", justify="right")
    table.add_column("Hrs/piece", justify="right")
    table.add_column("Total Hrs", justify="right")
    table.add_column("WEDM", justify="right")
    table.add_column("SEDM", justify="right")
    table.add_column("Amount", justify="right", style="bold")

    for index, (setting, line) in enumerate(zip(settings, totals.lines), start=1):
        table.add_row(
            str(index),
            setting.label or setting.description or "-",
            f"{line.quantity:g}",
            f"{line.total_hours_per_piece:.3f}",
            format_decimal_hours_hrs(line.total_hours),
            _money(line.wedm_amount, currency),
            _money(line.sedm_amount, currency),
            _money(line.total_amount, currency),
        )

    if len(totals.lines) > 1:
        table.add_section()
        table.add_row(
            "",
            "Total",
            "",
            "",
            format_decimal_hours_hrs(totals.total_hours),
            _money(totals.wedm_amount, currency),
            _money(totals.sedm_amount, currency),
            _money(totals.total_amount, currency),
        )
    console.print(table)

    for index, line in enumerate(totals.lines, start=1):
        if line.coerced_fields:
            fields = ", ".join(sorted(set(line.coerced_fields)))
            console.print(
                f"[cutlog.warn]Setting {index}: non-numeric values treated as 0 ({fields})[/]"
            )


# * QA progress counts & optional per-unit listing
def render_qa_progress(progress: QaProgress, show_units: bool = False) -> None:
    counts = progress.counts
    summary = Text()
    summary.append(f"{counts.saved + counts.ready} Operation Logged", style=CutlogColors.QA_LOGGED)
    if counts.ready:
        summary.append(f" ({counts.ready} ready for QA)", style="dim")
    summary.append("  ")
    summary.append(f"{counts.sent} QA Dispatched", style=CutlogColors.QA_DISPATCHED)
    summary.append("  ")
    summary.append(f"{counts.empty} Pending Input", style=CutlogColors.QA_PENDING)
    summary.append(f"\n{counts.total} units", style="dim")
    console.print(Panel(summary, title="[bold]QA Progress[/]", border_style=CutlogColors.ACCENT, padding=(0, 1)))

    if show_units:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("Unit", justify="right")
        table.add_column("State")
        table.add_column("Stage")
        for unit in progress.units:
            style = _QA_STYLES[unit.state]
            table.add_row(str(unit.unit), Text(unit.state.value, style=style), unit.label)
        console.print(table)


# * Validation problems for each capture
def render_capture_checks(captures: Sequence[QuantityCapture], problems: Sequence[dict[str, str]]) -> None:
    table = Table(title="Captures", title_style="bold", header_style="bold")
    table.add_column("Qty")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Logged", justify="right")
    table.add_column("Machine Hrs", justify="right")
    table.add_column("Check")
    for capture, errors in zip(captures, problems):
        seconds = capture.span.duration_seconds
        check = (
            Text("ok", style=CutlogColors.SUCCESS)
            if not errors
            else Text("; ".join(errors.values()), style=CutlogColors.ERROR)
        )
        table.add_row(
            f"{capture.from_qty}-{capture.to_qty}" if capture.to_qty != capture.from_qty else str(capture.from_qty),
            capture.start_time or "-",
            capture.end_time or "-",
            format_hhmmss(seconds) if seconds is not None else "-",
            capture.machine_hours or "-",
            check,
        )
    console.print(table)


# * Per-operator activity roll-up
def render_operator_summary(summaries: Sequence[OperatorSummary]) -> None:
    if not summaries:
        console.print("[dim]No operator activity recorded[/]")
        return
    table = Table(title="Operator Activity", title_style="bold", header_style="bold")
    table.add_column("Operator")
    table.add_column("Captures", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Machine Hrs", justify="right")
    table.add_column("Logged", justify="right")
    table.add_column("Machines")
    for summary in summaries:
        table.add_row(
            summary.name,
            str(summary.captures),
            str(summary.quantity),
            f"{summary.machine_hours:.3f}",
            format_hhmmss(summary.logged_seconds),
            ", ".join(sorted(summary.machines)) or "-",
        )
    console.print(table)
