# cutlog/cli/commands/captures.py
# Capture checks & operator roll-up for a job; --add merges a new capture into it

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.captures import merge_capture, summarize_operators, validate_capture, work_summary
from ...core.exceptions import ValidationError
from ...core.machine_hours import compute_machine_hours, idle_duration_for
from ...core.timefmt import now_timestamp_text
from ...core.types import QuantityCapture
from ...core.verbose import vlog
from ...cutlog_io import load_capture, load_job, update_job_fields
from ...ui.display.reports import (
    print_success_line,
    render_capture_checks,
    render_operator_summary,
)
from ..app import app
from ..decorators import handle_cutlog_error
from ..params import JsonFileArg


# fill machine hours & idle duration the way the capture form does before saving
def _complete_capture(capture: QuantityCapture, presets: dict[str, int], tz_name: str) -> QuantityCapture:
    idle_duration = capture.idle_duration or idle_duration_for(capture.idle_time, presets)
    machine_hours = capture.machine_hours
    if not machine_hours.strip():
        machine_hours = compute_machine_hours(
            capture.start_time, capture.end_time, idle_text=idle_duration
        ).text
    return replace(
        capture,
        idle_duration=idle_duration,
        machine_hours=machine_hours,
        created_at=capture.created_at or now_timestamp_text(tz_name),
    )


@app.command(help="Validate a job's captures & summarize operator activity")
@handle_cutlog_error
def captures(
    ctx: typer.Context,
    job_json: Path = JsonFileArg("Job JSON w/ operatorCaptures"),
    add: Optional[Path] = typer.Option(
        None,
        "--add",
        help="Capture JSON to add to the job",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace recorded captures overlapping the new range"
    ),
) -> None:
    settings = get_settings(ctx)
    job = load_job(job_json)
    recorded = job.captures

    if add is not None:
        new = _complete_capture(load_capture(add), settings.idle_presets, settings.effective_timezone)
        errors = validate_capture(new)
        if errors:
            raise ValidationError(
                [f"{key}: {message}" for key, message in errors.items()], recoverable=False
            )
        recorded = merge_capture(recorded, new, overwrite=overwrite)
        update_job_fields(job_json, {"operatorCaptures": [c.to_dict() for c in recorded]})
        vlog("CAPTURE", work_summary(new))
        print_success_line(f"Saved capture {new.from_qty}-{new.to_qty}", job_json)

    problems = [validate_capture(capture) for capture in recorded]
    render_capture_checks(recorded, problems)
    render_operator_summary(summarize_operators(recorded))
