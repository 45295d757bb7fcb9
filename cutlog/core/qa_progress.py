# cutlog/core/qa_progress.py
# Per-unit QA progress derived from capture ranges & explicit operator overrides

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from .constants import OVERRIDE_STATES, QA_STAGE_LABELS, QaState
from .exceptions import InvalidTransition
from .types import QuantityCapture


# * Display label for a state
def qa_stage_label(state: QaState) -> str:
    return QA_STAGE_LABELS[state]


# * A dispatched unit can never be selected again
def can_dispatch(state: QaState) -> bool:
    return state is not QaState.SENT_TO_QA


@dataclass(frozen=True)
class UnitProgress:
    unit: int
    state: QaState

    @property
    def label(self) -> str:
        return qa_stage_label(self.state)


@dataclass
class QaCounts:
    saved: int = 0
    ready: int = 0
    sent: int = 0
    empty: int = 0

    @property
    def total(self) -> int:
        return self.saved + self.ready + self.sent + self.empty

    def to_dict(self) -> dict[str, int]:
        return {"saved": self.saved, "ready": self.ready, "sent": self.sent, "empty": self.empty}


@dataclass
class QaProgress:
    units: list[UnitProgress] = field(default_factory=list)
    counts: QaCounts = field(default_factory=QaCounts)

    def state_of(self, unit: int) -> Optional[QaState]:
        if 1 <= unit <= len(self.units):
            return self.units[unit - 1].state
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "units": [{"unit": u.unit, "state": u.state.value, "label": u.label} for u in self.units],
            "counts": self.counts.to_dict(),
        }


# * Units covered by any capture (union; ranges clamped to 1..quantity)
def covered_units(captures: Iterable[QuantityCapture], quantity: int) -> set[int]:
    covered: set[int] = set()
    for capture in captures:
        low = max(1, capture.from_qty)
        high = min(quantity, max(low, capture.to_qty))
        covered.update(range(low, high + 1))
    return covered


# * Keys may be "3" or 3, values "SENT_TO_QA" or QaState; unknown entries dropped
def normalize_overrides(overrides: Optional[Mapping[Any, Any]]) -> dict[int, QaState]:
    normalized: dict[int, QaState] = {}
    for key, value in (overrides or {}).items():
        try:
            unit = int(key)
            state = value if isinstance(value, QaState) else QaState(str(value))
        except (TypeError, ValueError):
            continue
        if state in OVERRIDE_STATES:
            normalized[unit] = state
    return normalized


# * Derive one state per unit plus aggregate counts; inputs are not modified
def derive_qa_states(
    quantity: int,
    captures: Iterable[QuantityCapture],
    overrides: Optional[Mapping[Any, Any]] = None,
) -> QaProgress:
    bounded = max(1, int(quantity))
    covered = covered_units(captures, bounded)
    explicit = normalize_overrides(overrides)

    progress = QaProgress()
    for unit in range(1, bounded + 1):
        if unit in explicit:
            state = explicit[unit]
        elif unit in covered:
            state = QaState.SAVED
        else:
            state = QaState.EMPTY
        progress.units.append(UnitProgress(unit, state))

        if state is QaState.SAVED:
            progress.counts.saved += 1
        elif state is QaState.READY_FOR_QA:
            progress.counts.ready += 1
        elif state is QaState.SENT_TO_QA:
            progress.counts.sent += 1
        else:
            progress.counts.empty += 1
    return progress


# * Units an operator may still pick for dispatch
def dispatchable_units(progress: QaProgress) -> list[int]:
    return [u.unit for u in progress.units if can_dispatch(u.state)]


# * Logged units still awaiting dispatch; default pick for bulk marking
def logged_units(progress: QaProgress) -> list[int]:
    return [u.unit for u in progress.units if u.state in (QaState.SAVED, QaState.READY_FOR_QA)]


# * New override mapping w/ `units` set to `target`; dispatched units never move
def apply_unit_state(
    overrides: Optional[Mapping[Any, Any]],
    units: Iterable[int],
    target: QaState,
    progress: QaProgress,
) -> dict[str, str]:
    if target not in OVERRIDE_STATES:
        raise InvalidTransition(f"{target.value} cannot be stored explicitly", "", target.value)

    selected = sorted(set(units))
    for unit in selected:
        current = progress.state_of(unit)
        if current is None:
            raise InvalidTransition(
                f"Unit {unit} is outside 1..{len(progress.units)}", "", target.value
            )
        if not can_dispatch(current):
            raise InvalidTransition(
                f"Unit {unit} was already dispatched to QA", current.value, target.value
            )

    updated = {str(unit): state.value for unit, state in normalize_overrides(overrides).items()}
    for unit in selected:
        updated[str(unit)] = target.value
    return updated
