# cutlog/cli/commands/config.py
# Settings mgmt subcommands for cutlog CLI (get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import CutlogSettings, settings_manager
from ...core.exceptions import SettingsValidationError
from ...cutlog_io.console import console
from ...ui.theme import styled_checkmark
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[cutlog.accent2]Manage cutlog settings[/]"
)
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(CutlogSettings)}


# coerce string value to JSON value (numbers, bools, null, objects) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()
    console.print()
    console.print("[bold][cutlog.accent]Current Configuration[/][/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()
    for key, value in data.items():
        console.print(f"  [cutlog.accent2]{key}[/]: {json.dumps(value, ensure_ascii=False)}")
    console.print()
    console.print(
        "[dim]Use [/][cutlog.accent2]cutlog config --help[/][dim] to see available commands[/]"
    )


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(json.dumps(value, ensure_ascii=False), markup=False, highlight=False)


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e))
    console.print(
        styled_checkmark(),
        f"Set [cutlog.accent2]{key}[/] = {json.dumps(coerced, ensure_ascii=False)}",
    )


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print(styled_checkmark(), "Reset settings to defaults")


# * Show config file path
@config_app.command()
def path() -> None:
    console.print(str(settings_manager.config_path), markup=False, highlight=False, soft_wrap=True)
