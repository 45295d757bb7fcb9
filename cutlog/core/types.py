# cutlog/core/types.py
# Pure dataclasses for job settings, SEDM entries, captures & time spans - no I/O

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .exceptions import RecordError
from .timefmt import parse_timestamp, elapsed_seconds


# first present key wins; lets records use persisted camelCase or snake_case names
def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_int(value: Any, default: int) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


# "Yes"/"No", true/false, "true"/"1"
def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"yes", "true", "1", "y"}
    return bool(value)


# * Start/end pair for one quantity-unit; locked once both ends are recorded
@dataclass(frozen=True)
class TimeSpan:
    start_millis: Optional[int] = None
    end_millis: Optional[int] = None

    @property
    def locked(self) -> bool:
        return self.start_millis is not None and self.end_millis is not None

    @property
    def duration_seconds(self) -> Optional[int]:
        if not self.locked:
            return None
        assert self.start_millis is not None and self.end_millis is not None
        return elapsed_seconds(self.start_millis, self.end_millis)


# * One SEDM hole group: plate thickness, electrode size & holes per piece
@dataclass
class SedmEntry:
    thickness_mm: Any = 0
    electrode_size_mm: Any = 0
    holes_per_piece: Any = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SedmEntry":
        return cls(
            thickness_mm=_pick(data, "thickness_mm", "thicknessMm", "thickness", default=0),
            electrode_size_mm=_pick(
                data, "electrode_size_mm", "electrodeSizeMm", "electrodeSize", "size", default=0
            ),
            holes_per_piece=_pick(data, "holes_per_piece", "holesPerPiece", "holes", default=1),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "thicknessMm": self.thickness_mm,
            "electrodeSizeMm": self.electrode_size_mm,
            "holesPerPiece": self.holes_per_piece,
        }


# SEDM surcharge switch & its entries
@dataclass
class SedmSpec:
    enabled: bool = False
    entries: list[SedmEntry] = field(default_factory=list)


# * One priced setting (cut) of a job; numeric fields stay raw until costed
@dataclass
class JobSetting:
    cut_length_mm: Any = 0
    thickness_mm: Any = 0
    pass_level: Any = 1
    setting_level: Any = 0
    quantity: Any = 1
    rate: Any = 0
    is_critical: bool = False
    has_pip_finish: bool = False
    sedm: SedmSpec = field(default_factory=SedmSpec)
    label: str = ""
    customer: str = ""
    description: str = ""
    ref_number: str = ""

    # build from a persisted job document (camelCase) or snake_case dict
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobSetting":
        if not isinstance(data, dict):
            raise RecordError(f"Setting must be a JSON object, got {type(data).__name__}")
        thickness = _pick(data, "thickness_mm", "thicknessMm", "thickness", default=0)
        return cls(
            cut_length_mm=_pick(data, "cut_length_mm", "cutLengthMm", "cut", default=0),
            thickness_mm=thickness,
            pass_level=_pick(data, "pass_level", "passLevel", default=1),
            setting_level=_pick(data, "setting_level", "settingLevel", "setting", default=0),
            quantity=_pick(data, "quantity", "qty", default=1),
            rate=_pick(data, "rate", "rfilePerHourRate", default=0),
            is_critical=_as_flag(_pick(data, "is_critical", "isCritical", "critical", default=False)),
            has_pip_finish=_as_flag(
                _pick(data, "has_pip_finish", "hasPipFinish", "pipFinish", default=False)
            ),
            sedm=_parse_sedm(data, thickness),
            label=str(_pick(data, "label", "settingLabel", default="")),
            customer=str(_pick(data, "customer", default="")),
            description=str(_pick(data, "description", default="")),
            ref_number=str(_pick(data, "ref_number", "refNumber", default="")),
        )


def _parse_sedm(data: dict[str, Any], thickness: Any) -> SedmSpec:
    raw = data.get("sedm")
    if isinstance(raw, dict):
        entries = [SedmEntry.from_dict(e) for e in raw.get("entries", [])]
        return SedmSpec(enabled=_as_flag(raw.get("enabled", False)), entries=entries)

    enabled = _as_flag(raw) if raw is not None else False
    entries_raw: Any = _pick(data, "sedmEntries", "sedm_entries", default=None)
    entries_json = data.get("sedmEntriesJson")
    if entries_raw is None and isinstance(entries_json, str) and entries_json.strip():
        try:
            entries_raw = json.loads(entries_json)
        except json.JSONDecodeError as e:
            raise RecordError(f"sedmEntriesJson is not valid JSON: {e.msg}", "sedmEntriesJson")
    if entries_raw is not None and not isinstance(entries_raw, list):
        raise RecordError("SEDM entries must be a list", "sedmEntries")

    entries = [SedmEntry.from_dict(e) for e in entries_raw or []]
    # older documents kept a single selection on the setting itself
    if enabled and not entries and data.get("sedmLengthValue"):
        entries.append(
            SedmEntry(
                thickness_mm=thickness,
                electrode_size_mm=data["sedmLengthValue"],
                holes_per_piece=data.get("sedmHoles", 1),
            )
        )
    return SedmSpec(enabled=enabled, entries=entries)


# * Operator work interval over an inclusive quantity range
@dataclass
class QuantityCapture:
    from_qty: int
    to_qty: int
    start_time: str = ""
    end_time: str = ""
    machine_hours: str = ""
    machine_number: str = ""
    operator_names: list[str] = field(default_factory=list)
    idle_time: str = ""
    idle_duration: str = ""
    created_by: str = ""
    created_at: str = ""

    @property
    def span(self) -> TimeSpan:
        return TimeSpan(parse_timestamp(self.start_time), parse_timestamp(self.end_time))

    @property
    def quantity_count(self) -> int:
        return max(0, self.to_qty - self.from_qty + 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuantityCapture":
        if not isinstance(data, dict):
            raise RecordError(f"Capture must be a JSON object, got {type(data).__name__}")
        from_qty = _as_int(_pick(data, "from_qty", "fromQty", default=1), 1) or 1
        to_qty = _as_int(_pick(data, "to_qty", "toQty", default=from_qty), from_qty) or from_qty
        ops = _pick(data, "operator_names", "operatorNames", "opsName", default=[])
        if isinstance(ops, str):
            ops = [name.strip() for name in ops.split(",") if name.strip()]
        return cls(
            from_qty=from_qty,
            to_qty=to_qty,
            start_time=str(_pick(data, "start_time", "startTime", default="")),
            end_time=str(_pick(data, "end_time", "endTime", default="")),
            machine_hours=str(_pick(data, "machine_hours", "machineHrs", default="")),
            machine_number=str(_pick(data, "machine_number", "machineNumber", default="")),
            operator_names=[str(name) for name in ops],
            idle_time=str(_pick(data, "idle_time", "idleTime", default="")),
            idle_duration=str(_pick(data, "idle_duration", "idleTimeDuration", default="")),
            created_by=str(_pick(data, "created_by", "createdBy", default="")),
            created_at=str(_pick(data, "created_at", "createdAt", default="")),
        )

    # persisted shape (camelCase, comma-joined operators)
    def to_dict(self) -> dict[str, Any]:
        return {
            "captureMode": "SINGLE" if self.from_qty == self.to_qty else "RANGE",
            "fromQty": self.from_qty,
            "toQty": self.to_qty,
            "quantityCount": self.quantity_count,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "machineHrs": self.machine_hours,
            "machineNumber": self.machine_number,
            "opsName": ", ".join(self.operator_names),
            "idleTime": self.idle_time,
            "idleTimeDuration": self.idle_duration,
            "createdBy": self.created_by,
            "createdAt": self.created_at,
        }


# * One job document: the setting plus its operator captures & QA overrides
@dataclass
class JobRecord:
    setting: JobSetting
    captures: list[QuantityCapture] = field(default_factory=list)
    qa_overrides: dict[str, Any] = field(default_factory=dict)

    @property
    def quantity(self) -> int:
        return _as_int(self.setting.quantity, 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobRecord":
        if not isinstance(data, dict):
            raise RecordError(f"Job must be a JSON object, got {type(data).__name__}")
        captures_raw = _pick(data, "operatorCaptures", "captures", default=[])
        if not isinstance(captures_raw, list):
            raise RecordError("operatorCaptures must be a list", "operatorCaptures")
        overrides = _pick(data, "quantityQaStates", "qa_overrides", default={})
        if not isinstance(overrides, dict):
            raise RecordError("quantityQaStates must be an object", "quantityQaStates")
        return cls(
            setting=JobSetting.from_dict(data),
            captures=[QuantityCapture.from_dict(c) for c in captures_raw],
            qa_overrides=dict(overrides),
        )
