# tests/unit/test_main_entrypoint_smoke.py
# Smoke test: import the module entrypoint & invoke it via CliRunner

from typer.testing import CliRunner


# * verify main entrypoint runs & exits 0
def test_main_entrypoint_runs():
    from cutlog import __main__ as main

    result = CliRunner().invoke(main.app, [])
    assert result.exit_code == 0


# * every command is registered on the root app
def test_commands_registered():
    from cutlog.cli.app import app

    result = CliRunner().invoke(app, ["--help"], env={"NO_COLOR": "1", "TERM": "dumb"})
    assert result.exit_code == 0
    for name in ("hours", "cost", "qa", "captures", "timer", "config"):
        assert name in result.output
