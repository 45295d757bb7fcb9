# cutlog/cli/commands/cost.py
# Cost totals for one or more job settings (WEDM cut time + SEDM drilling)

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.cost_engine import summarize_job
from ...cutlog_io import load_settings, write_json_safe
from ...ui.display.reports import print_success_line, render_cost_report
from ..app import app
from ..decorators import handle_cutlog_error
from ..params import JsonFileArg, OutJsonOpt


@app.command(help="Compute hours & amounts for the settings in a JSON file")
@handle_cutlog_error
def cost(
    ctx: typer.Context,
    setting_json: Path = JsonFileArg("JSON file w/ one setting, a list, or a job w/ 'settings'"),
    out_json: Optional[Path] = OutJsonOpt(),
) -> None:
    settings = get_settings(ctx)
    job_settings = load_settings(setting_json)
    totals = summarize_job(job_settings)

    render_cost_report(job_settings, totals, settings.currency_symbol)

    if out_json is not None:
        write_json_safe(totals.to_dict(), out_json)
        print_success_line("Wrote totals", out_json)
