# cutlog/core/machine_hours.py
# Machine hours from start/end timestamps w/ idle-time add or pause subtraction

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Mapping

from .constants import IdleMode
from .timefmt import parse_timestamp, parse_legacy_clock

_MILLIS_PER_HOUR = 3_600_000
_IDLE_CLOCK_RE = re.compile(r"^\s*(\d+):(\d+)\s*$", re.ASCII)
_IDLE_MINUTES_RE = re.compile(r"^\s*(\d+)\s*min\s*$", re.ASCII)


# * Computed machine hours; numeric value plus the persisted 3-decimal text
@dataclass(frozen=True)
class MachineHours:
    hours: float

    @property
    def text(self) -> str:
        return format_machine_hours(self.hours)

    def __str__(self) -> str:
        return self.text


# 3 decimals is the persisted representation
def format_machine_hours(hours: float) -> str:
    return f"{hours:.3f}"


# * Idle duration text -> hours ("HH:MM", legacy "<N>min", else 0)
def parse_idle_hours(text: str | None) -> float:
    if not text:
        return 0.0
    match = _IDLE_CLOCK_RE.match(text)
    if match:
        return int(match.group(1)) + int(match.group(2)) / 60
    match = _IDLE_MINUTES_RE.match(text)
    if match:
        return int(match.group(1)) / 60
    return 0.0


# * Minutes -> "HH:MM" idle duration text
def minutes_to_idle_text(minutes: int) -> str:
    hours, mins = divmod(max(0, int(minutes)), 60)
    return f"{hours:02d}:{mins:02d}"


# * Resolve an idle type selection to its preset duration ("" when unknown)
def idle_duration_for(idle_type: str, presets: Mapping[str, int]) -> str:
    if idle_type not in presets:
        return ""
    return minutes_to_idle_text(presets[idle_type])


# * Base hours between two DD/MM/YYYY HH:MM values; 0 if either is malformed
def base_hours(start_text: str, end_text: str) -> float:
    start = parse_timestamp(start_text)
    end = parse_timestamp(end_text)
    if start is None or end is None:
        return 0.0
    return (end - start) / _MILLIS_PER_HOUR


# * Base hours between two bare HH:MM clocks; end before start rolls over a day
def legacy_clock_hours(start_text: str, end_text: str, today: date | None = None) -> float | None:
    # both clocks share one reference day
    day = today or date.today()
    start = parse_legacy_clock(start_text, day)
    end = parse_legacy_clock(end_text, day)
    if start is None or end is None:
        return None
    diff = (end - start) / _MILLIS_PER_HOUR
    if diff < 0:
        diff += 24
    return diff


# * Machine hours for one capture
def compute_machine_hours(
    start_text: str,
    end_text: str,
    idle_text: str = "",
    mode: IdleMode = IdleMode.ADD,
    paused_seconds: float = 0,
    allow_legacy_clock: bool = False,
) -> MachineHours:
    if parse_timestamp(start_text) is not None and parse_timestamp(end_text) is not None:
        base = base_hours(start_text, end_text)
    elif allow_legacy_clock:
        base = legacy_clock_hours(start_text, end_text) or 0.0
    else:
        base = 0.0

    if mode is IdleMode.SUBTRACT_PAUSE:
        hours = base - max(0.0, paused_seconds) / 3600
    else:
        hours = base + parse_idle_hours(idle_text)
    return MachineHours(max(0.0, hours))
