# cutlog/cli/commands/qa.py
# QA progress for a job; optionally marks units ready for / sent to QA

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...core.qa_progress import apply_unit_state, derive_qa_states, logged_units
from ...cutlog_io import load_job, update_job_fields
from ...cutlog_io.console import console
from ...ui.display.reports import print_success_line, render_qa_progress
from ..app import app
from ..decorators import handle_cutlog_error
from ..params import JsonFileArg, _normalize_qa_target, _parse_unit_selection


@app.command(help="Show per-unit QA progress for a job JSON file")
@handle_cutlog_error
def qa(
    job_json: Path = JsonFileArg("Job JSON w/ qty, operatorCaptures & quantityQaStates"),
    units: bool = typer.Option(False, "--units", help="List every unit w/ its state"),
    mark: Optional[str] = typer.Option(
        None, "--mark", help="Store a state for selected units: ready|sent"
    ),
    select: Optional[str] = typer.Option(
        None, "--select", help="Units to mark, e.g. 1-3,5 (default: every logged, undispatched unit)"
    ),
) -> None:
    job = load_job(job_json)
    progress = derive_qa_states(job.quantity, job.captures, job.qa_overrides)

    if mark is not None:
        target = _normalize_qa_target(mark)
        selected = _parse_unit_selection(select) if select else logged_units(progress)
        if not selected:
            console.print("[cutlog.warn]No logged units awaiting dispatch[/]")
            return
        updated = apply_unit_state(job.qa_overrides, selected, target, progress)
        update_job_fields(job_json, {"quantityQaStates": updated})
        print_success_line(f"Marked {len(selected)} unit(s) {target.value}", job_json)
        progress = derive_qa_states(job.quantity, job.captures, updated)

    render_qa_progress(progress, show_units=units)
