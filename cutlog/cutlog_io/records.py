# cutlog/cutlog_io/records.py
# Load job/setting/capture documents from JSON files into core dataclasses

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..core.exceptions import RecordError
from ..core.types import JobRecord, JobSetting, QuantityCapture
from .generics import read_json_safe, write_json_safe


def _wrap(path: Path, error: RecordError) -> RecordError:
    return RecordError(f"{path}: {error}", error.field)


# * A file holding one setting, a list of settings, or a job w/ "settings"
def load_settings(path: Path) -> list[JobSetting]:
    data = read_json_safe(path)
    if isinstance(data, dict) and isinstance(data.get("settings"), list):
        data = data["settings"]
    items = data if isinstance(data, list) else [data]
    if not items:
        raise RecordError(f"{path}: no settings found")
    try:
        return [JobSetting.from_dict(item) for item in items]
    except RecordError as e:
        raise _wrap(path, e)


# * A single job document (setting fields + operatorCaptures + quantityQaStates)
def load_job(path: Path) -> JobRecord:
    data = read_json_safe(path)
    try:
        return JobRecord.from_dict(data)
    except RecordError as e:
        raise _wrap(path, e)


def load_capture(path: Path) -> QuantityCapture:
    data = read_json_safe(path)
    try:
        return QuantityCapture.from_dict(data)
    except RecordError as e:
        raise _wrap(path, e)


# * Rewrite selected top-level fields of a job document, keeping everything else
def update_job_fields(path: Path, updates: dict[str, Any]) -> None:
    data = read_json_safe(path)
    if not isinstance(data, dict):
        raise RecordError(f"{path}: job document must be a JSON object")
    data.update(updates)
    write_json_safe(data, path)
