# cutlog/core/constants.py
# Fixed lookup tables & enums shared by the time, cost & QA modules

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# * Persisted timestamp format (shop wall clock)
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"

# reason stored on a pause session closed by End
ENDED_WHILE_PAUSED = "Ended while paused"


# * Pass level -> cut-time multiplier
PASS_MULTIPLIERS: dict[int, float] = {
    1: 1.0,
    2: 1.5,
    3: 1.75,
    4: 2.0,
    5: 2.5,
    6: 2.75,
}

# hours added per setting level step
SETTING_HOURS_PER_LEVEL = 0.5

# flat surcharge hours for critical cuts & PIP finish
CRITICAL_EXTRA_HOURS = 1.0
PIP_FINISH_EXTRA_HOURS = 1.0


# * Machine-rate divisors by thickness (upper bound, divisor); first match wins
THICKNESS_DIVISORS: list[tuple[float, float]] = [
    (20.0, 1017.44),  # strictly below 20mm
    (100.0, 1465.0),
    (150.0, 1183.0),
]
THICKNESS_DIVISOR_DEFAULT = 1000.0


# * One SEDM pricing row: electrode size range & price at 20mm depth
@dataclass(frozen=True)
class SedmBracket:
    key: str
    min_size: float
    max_size: float
    base_value_at_20mm: float
    per_mm_above_20: float

    def contains(self, electrode_size: float) -> bool:
        return self.min_size <= electrode_size <= self.max_size


SEDM_BASE_THICKNESS = 20.0

SEDM_BRACKETS: tuple[SedmBracket, ...] = (
    SedmBracket("0.3-0.4", 0.3, 0.4, 300.0, 15.0),
    SedmBracket("0.5-0.6", 0.5, 0.6, 250.0, 12.0),
    SedmBracket("0.7", 0.7, 0.7, 220.0, 10.0),
    SedmBracket("0.8-1.2", 0.8, 1.2, 200.0, 9.0),
    SedmBracket("1.5-2.0", 1.5, 2.0, 220.0, 10.0),
    SedmBracket("2.2-2.5", 2.2, 2.5, 250.0, 12.0),
    SedmBracket("3.0", 3.0, 3.0, 300.0, 15.0),
)


# * Idle-time handling for machine hours
class IdleMode(Enum):
    ADD = "add"
    SUBTRACT_PAUSE = "subtract"


# * Pause accumulator status
class PauseStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


# * Per-unit QA progress state
class QaState(Enum):
    SAVED = "SAVED"
    READY_FOR_QA = "READY_FOR_QA"
    SENT_TO_QA = "SENT_TO_QA"
    EMPTY = "EMPTY"


# states an operator can store explicitly; EMPTY is derived only
OVERRIDE_STATES = frozenset({QaState.SAVED, QaState.READY_FOR_QA, QaState.SENT_TO_QA})

QA_STAGE_LABELS: dict[QaState, str] = {
    QaState.SAVED: "Operation Logged",
    QaState.READY_FOR_QA: "Operation Logged",
    QaState.SENT_TO_QA: "QA Dispatched",
    QaState.EMPTY: "Pending Input",
}


# * Idle type presets in minutes (seeded values of the shop floor config)
DEFAULT_IDLE_PRESETS: dict[str, int] = {
    "Power Break": 0,
    "Machine Breakdown": 0,
    "Vertical Dial": 20,
    "Cleaning": 0,
    "Consumables Change": 0,
}
