# cutlog/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (CUTLOG_TIMEZONE etc.)
load_dotenv()

from ..config.settings import settings_manager
from ..cutlog_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="[cutlog.accent2]Wire-EDM job tracker: machine hours, pause timer, costing & QA progress[/]",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings & init verbose logging; show usage when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress data-quality warnings"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # must be after settings load to check dev_mode
    from ..core.verbose import cleanup_verbose, init_verbose, vlog_config

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode, quiet=quiet)
    ctx.call_on_close(cleanup_verbose)
    if hasattr(ctx.obj, "effective_timezone"):
        vlog_config("timezone", ctx.obj.effective_timezone)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import hours as _hours  # noqa: F401, E402
from .commands import cost as _cost  # noqa: F401, E402
from .commands import qa as _qa  # noqa: F401, E402
from .commands import captures as _captures  # noqa: F401, E402
from .commands import timer as _timer  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
