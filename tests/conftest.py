# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    cutlog_dir = fake_home / ".cutlog"
    cutlog_dir.mkdir()

    # minimal config.json w/ test defaults
    config_data = {
        "timezone": "Asia/Kolkata",
        "currency_symbol": "Rs.",
        "tick_interval": 1.0,
        "base_dir": ".cutlog",
        "timer_state_filename": "timer.json",
        "dev_mode": False,
    }
    config_file = cutlog_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("CUTLOG_TIMEZONE", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from cutlog.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = fake_home / ".cutlog" / "config.json"

    # ! reset output manager to NullOutputManager for test isolation
    from cutlog.core.output import reset_output_manager

    reset_output_manager()

    # wide console so tables never wrap in captured output
    from cutlog.cutlog_io.console import configure_console

    configure_console(width=200)

    return fake_home


@pytest.fixture
def isolate_output():
    from cutlog.core.output import reset_output_manager

    reset_output_manager()
    yield
    reset_output_manager()


@pytest.fixture
def dev_mode_enabled(isolate_config):
    # Enable dev_mode for tests that require it
    config_file = isolate_config / ".cutlog" / "config.json"

    with open(config_file, "r") as f:
        config_data = json.load(f)

    config_data["dev_mode"] = True

    with open(config_file, "w") as f:
        json.dump(config_data, f)

    from cutlog.config.settings import settings_manager

    settings_manager._settings = None
    return isolate_config


@pytest.fixture
def sample_setting():
    # setting from the worked cost example: ~0.54914 hrs/piece, ~109.83 total
    return {
        "cutLengthMm": 10,
        "thicknessMm": 5,
        "passLevel": "1",
        "settingLevel": 1,
        "quantity": 2,
        "rate": 100,
        "isCritical": False,
        "hasPipFinish": False,
        "sedm": {"enabled": False},
        "label": "Profile",
    }


@pytest.fixture
def sample_job():
    # job w/ 5 units, units 1-2 captured by two operators, unit 5 by one
    return {
        "customer": "Acme Tooling",
        "refNumber": "JOB-101",
        "cut": 40,
        "thickness": 25,
        "passLevel": 2,
        "setting": 1,
        "qty": 5,
        "rate": 600,
        "operatorCaptures": [
            {
                "fromQty": 1,
                "toQty": 2,
                "startTime": "01/03/2025 09:00",
                "endTime": "01/03/2025 11:30",
                "machineHrs": "2.500",
                "machineNumber": "M1",
                "opsName": "Ravi, Priya",
            },
            {
                "fromQty": 5,
                "toQty": 5,
                "startTime": "01/03/2025 12:00",
                "endTime": "01/03/2025 12:45",
                "machineHrs": "0.750",
                "machineNumber": "M2",
                "opsName": "Ravi",
            },
        ],
        "quantityQaStates": {"2": "SENT_TO_QA"},
    }


@pytest.fixture
def job_file(tmp_path, sample_job):
    path = tmp_path / "job.json"
    path.write_text(json.dumps(sample_job, indent=2), encoding="utf-8")
    return path
