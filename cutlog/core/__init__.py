# cutlog/core/__init__.py
# Pure computation entry points used by the UI & persistence layers

from .constants import IdleMode, PauseStatus, QaState
from .cost_engine import CostTotals, compute_totals, summarize_job
from .machine_hours import MachineHours, compute_machine_hours
from .pause import End, Pause, PauseState, Resume, pause_transition, start_pause_state
from .qa_progress import QaProgress, can_dispatch, derive_qa_states
from .timefmt import format_decimal_hours, format_hhmmss, parse_timestamp

# persisted-name aliases for the UI layer
format_elapsed = format_hhmmss

__all__ = [
    "IdleMode",
    "PauseStatus",
    "QaState",
    "CostTotals",
    "compute_totals",
    "summarize_job",
    "MachineHours",
    "compute_machine_hours",
    "End",
    "Pause",
    "PauseState",
    "Resume",
    "pause_transition",
    "start_pause_state",
    "QaProgress",
    "can_dispatch",
    "derive_qa_states",
    "format_decimal_hours",
    "format_hhmmss",
    "format_elapsed",
    "parse_timestamp",
]
