# cutlog/core/cost_engine.py
# Attribute-driven hours & amount for a job setting: WEDM cut time plus SEDM hole surcharge

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .constants import (
    CRITICAL_EXTRA_HOURS,
    PASS_MULTIPLIERS,
    PIP_FINISH_EXTRA_HOURS,
    SEDM_BASE_THICKNESS,
    SEDM_BRACKETS,
    SETTING_HOURS_PER_LEVEL,
    THICKNESS_DIVISOR_DEFAULT,
    THICKNESS_DIVISORS,
    SedmBracket,
)
from .types import JobSetting, SedmEntry
from .verbose import vlog_coercion, vlog_json


# * Lenient number coercion: missing/blank/non-numeric -> 0, never raises
# * Non-empty garbage is appended to `coerced` & logged so data problems stay visible
def coerce_number(value: Any, field_name: str = "", coerced: Optional[list[str]] = None) -> float:
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, float):
        return value if math.isfinite(value) else 0.0

    raw: Any = value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            # ints past float range (long JSON literals) are too big to repr safely
            raw = f"<{value.bit_length()}-bit integer>"
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            number = math.nan
        if math.isfinite(number):
            return number

    if coerced is not None and field_name:
        coerced.append(field_name)
    vlog_coercion(field_name or "value", raw)
    return 0.0


# * Thickness -> machine-rate divisor
def thickness_divisor(thickness_mm: float) -> float:
    if thickness_mm < THICKNESS_DIVISORS[0][0]:
        return THICKNESS_DIVISORS[0][1]
    for upper, divisor in THICKNESS_DIVISORS[1:]:
        if thickness_mm <= upper:
            return divisor
    return THICKNESS_DIVISOR_DEFAULT


# * Pass level -> multiplier; unknown levels count as a single pass
def pass_multiplier(pass_level: Any) -> float:
    if isinstance(pass_level, int) and not isinstance(pass_level, bool):
        return PASS_MULTIPLIERS.get(pass_level, 1.0)
    if isinstance(pass_level, float) and pass_level.is_integer():
        pass_level = int(pass_level)
    key = str(pass_level).strip()
    if not (key.isascii() and key.isdigit()) or len(key) > 2:
        return 1.0
    return PASS_MULTIPLIERS.get(int(key), 1.0)


# * Electrode size -> pricing bracket, None when the size sits between brackets
def find_sedm_bracket(electrode_size_mm: float) -> Optional[SedmBracket]:
    for bracket in SEDM_BRACKETS:
        if bracket.contains(electrode_size_mm):
            return bracket
    return None


# * Amount for one SEDM entry over the whole quantity
def sedm_entry_amount(
    entry: SedmEntry, quantity: float, coerced: Optional[list[str]] = None
) -> float:
    size = coerce_number(entry.electrode_size_mm, "sedm.electrodeSizeMm", coerced)
    bracket = find_sedm_bracket(size)
    if bracket is None:
        return 0.0
    thickness = coerce_number(entry.thickness_mm, "sedm.thicknessMm", coerced)
    holes = coerce_number(entry.holes_per_piece, "sedm.holesPerPiece", coerced)
    effective = max(thickness, SEDM_BASE_THICKNESS)
    per_hole = bracket.base_value_at_20mm + (effective - SEDM_BASE_THICKNESS) * bracket.per_mm_above_20
    return per_hole * holes * quantity


# * Totals for one setting
@dataclass
class CostTotals:
    total_hours_per_piece: float
    wedm_amount: float
    sedm_amount: float
    total_amount: float
    quantity: float = 0.0
    coerced_fields: list[str] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return self.total_hours_per_piece * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalHrs": round(self.total_hours_per_piece, 5),
            "wedmAmount": round(self.wedm_amount, 2),
            "sedmAmount": round(self.sedm_amount, 2),
            "totalAmount": round(self.total_amount, 2),
            "quantity": self.quantity,
            "coercedFields": list(self.coerced_fields),
        }


# * Compute hours & amounts for a setting; pure read, never raises on bad numbers
def compute_totals(setting: JobSetting) -> CostTotals:
    coerced: list[str] = []
    cut = coerce_number(setting.cut_length_mm, "cutLengthMm", coerced)
    thickness = coerce_number(setting.thickness_mm, "thicknessMm", coerced)
    setting_level = coerce_number(setting.setting_level, "settingLevel", coerced)
    quantity = coerce_number(setting.quantity, "quantity", coerced)
    rate = coerce_number(setting.rate, "rate", coerced)

    cut_hours = cut * thickness / thickness_divisor(thickness) * pass_multiplier(setting.pass_level)
    setting_hours = setting_level * SETTING_HOURS_PER_LEVEL
    extra_hours = (CRITICAL_EXTRA_HOURS if setting.is_critical else 0.0) + (
        PIP_FINISH_EXTRA_HOURS if setting.has_pip_finish else 0.0
    )
    hours_per_piece = cut_hours + setting_hours + extra_hours
    wedm_amount = hours_per_piece * rate * quantity

    sedm_amount = 0.0
    if setting.sedm.enabled:
        sedm_amount = sum(sedm_entry_amount(e, quantity, coerced) for e in setting.sedm.entries)

    totals = CostTotals(
        total_hours_per_piece=hours_per_piece,
        wedm_amount=wedm_amount,
        sedm_amount=sedm_amount,
        total_amount=wedm_amount + sedm_amount,
        quantity=quantity,
        coerced_fields=coerced,
    )
    vlog_json("cost totals", totals.to_dict())
    return totals


# * Roll-up across the settings of one job
@dataclass
class JobTotals:
    lines: list[CostTotals] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return sum(line.total_hours for line in self.lines)

    @property
    def wedm_amount(self) -> float:
        return sum(line.wedm_amount for line in self.lines)

    @property
    def sedm_amount(self) -> float:
        return sum(line.sedm_amount for line in self.lines)

    @property
    def total_amount(self) -> float:
        return sum(line.total_amount for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "settings": [line.to_dict() for line in self.lines],
            "totalHours": round(self.total_hours, 5),
            "wedmAmount": round(self.wedm_amount, 2),
            "sedmAmount": round(self.sedm_amount, 2),
            "totalAmount": round(self.total_amount, 2),
        }


def summarize_job(settings: Iterable[JobSetting]) -> JobTotals:
    return JobTotals(lines=[compute_totals(s) for s in settings])
