# cutlog/core/captures.py
# Capture checks before saving (field validation, range overlap) & per-operator roll-ups

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .cost_engine import coerce_number
from .exceptions import CaptureConflictError
from .timefmt import parse_timestamp
from .types import QuantityCapture

TIMESTAMP_FORMAT_MESSAGE = "Please enter date and time in DD/MM/YYYY HH:MM format."


def _check_timestamp(errors: dict[str, str], key: str, label: str, text: str) -> None:
    if not text or not text.strip():
        errors[key] = f"{label} is required."
    elif parse_timestamp(text) is None:
        errors[key] = TIMESTAMP_FORMAT_MESSAGE


# * Field errors keyed by persisted field name; empty dict means the capture can be saved
def validate_capture(capture: QuantityCapture) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_timestamp(errors, "startTime", "Start Time", capture.start_time)
    _check_timestamp(errors, "endTime", "End Time", capture.end_time)

    span = capture.span
    if span.locked and span.end_millis < span.start_millis:  # type: ignore[operator]
        errors["endTime"] = "End Time cannot be before Start Time."

    if not capture.machine_number.strip():
        errors["machineNumber"] = "Machine Number is required."
    if not any(name.strip() for name in capture.operator_names):
        errors["opsName"] = "Operator Name is required."

    hours_text = capture.machine_hours.strip()
    if not hours_text or coerce_number(hours_text) < 0:
        errors["machineHrs"] = "Please enter valid Start Time and End Time."

    if capture.from_qty < 1 or capture.to_qty < capture.from_qty:
        errors["quantity"] = "Quantity range must satisfy 1 <= from <= to."
    return errors


def _overlaps(capture: QuantityCapture, from_qty: int, to_qty: int) -> bool:
    return capture.from_qty <= to_qty and from_qty <= capture.to_qty


# * Recorded captures sharing at least one unit w/ [from_qty, to_qty]
def find_overlaps(
    captures: Iterable[QuantityCapture], from_qty: int, to_qty: int
) -> list[QuantityCapture]:
    return [c for c in captures if _overlaps(c, from_qty, to_qty)]


# * Add a capture; overlapping ranges need an explicit overwrite, which replaces them
def merge_capture(
    captures: Iterable[QuantityCapture], new: QuantityCapture, overwrite: bool = False
) -> list[QuantityCapture]:
    existing = list(captures)
    conflicts = find_overlaps(existing, new.from_qty, new.to_qty)
    if conflicts and not overwrite:
        ranges = [(c.from_qty, c.to_qty) for c in conflicts]
        listed = ", ".join(f"{lo}-{hi}" for lo, hi in ranges)
        raise CaptureConflictError(
            f"Quantities {new.from_qty}-{new.to_qty} overlap recorded captures ({listed})",
            ranges,
        )
    kept = [c for c in existing if not _overlaps(c, new.from_qty, new.to_qty)]
    kept.append(new)
    kept.sort(key=lambda c: (c.from_qty, c.to_qty))
    return kept


# * One-line summary stored w/ the activity log entry
def work_summary(capture: QuantityCapture) -> str:
    machine = capture.machine_number or "-"
    ops = ", ".join(capture.operator_names) or "-"
    hours = capture.machine_hours or "-"
    return f"Machine {machine} | Ops {ops} | Hrs {hours}"


# * Activity totals for one operator
@dataclass
class OperatorSummary:
    name: str
    captures: int = 0
    quantity: int = 0
    machine_hours: float = 0.0
    logged_seconds: int = 0
    machines: set[str] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "captures": self.captures,
            "quantity": self.quantity,
            "machineHrs": f"{self.machine_hours:.3f}",
            "loggedSeconds": self.logged_seconds,
            "machines": sorted(self.machines),
        }


# * Per-operator roll-up; a capture worked by several operators counts for each
def summarize_operators(captures: Iterable[QuantityCapture]) -> list[OperatorSummary]:
    summaries: dict[str, OperatorSummary] = {}
    for capture in captures:
        seconds = capture.span.duration_seconds or 0
        hours = coerce_number(capture.machine_hours, "machineHrs")
        for name in capture.operator_names:
            name = name.strip()
            if not name:
                continue
            summary = summaries.setdefault(name, OperatorSummary(name))
            summary.captures += 1
            summary.quantity += capture.quantity_count
            summary.machine_hours += hours
            summary.logged_seconds += seconds
            if capture.machine_number:
                summary.machines.add(capture.machine_number)
    return sorted(summaries.values(), key=lambda s: s.name.lower())
