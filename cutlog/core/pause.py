# cutlog/core/pause.py
# Pause/resume accumulator for one quantity-unit as a pure state-transition function

# The live display is the caller's job: it polls elapsed_seconds()/live_pause_seconds()
# on its own ticker & re-renders. Nothing here reads the clock.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from .constants import ENDED_WHILE_PAUSED, PauseStatus
from .exceptions import InvalidTransition
from .timefmt import elapsed_seconds as _elapsed
from .verbose import vlog_transition


# * Closed pause interval
@dataclass(frozen=True)
class PauseSession:
    pause_start: int
    pause_end: int
    duration_seconds: int
    reason: str

    @classmethod
    def closed(cls, pause_start: int, pause_end: int, reason: str) -> "PauseSession":
        return cls(pause_start, pause_end, _elapsed(pause_start, pause_end), reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pauseStart": self.pause_start,
            "pauseEnd": self.pause_end,
            "durationSeconds": self.duration_seconds,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PauseSession":
        return cls(
            pause_start=int(data["pauseStart"]),
            pause_end=int(data["pauseEnd"]),
            duration_seconds=int(data["durationSeconds"]),
            reason=str(data.get("reason", "")),
        )


# * Timer state for one unit; frozen so rejected transitions leave it untouched
@dataclass(frozen=True)
class PauseState:
    start_millis: int
    end_millis: Optional[int] = None
    sessions: tuple[PauseSession, ...] = field(default_factory=tuple)
    current_pause_start: Optional[int] = None
    current_reason: str = ""

    @property
    def status(self) -> PauseStatus:
        if self.end_millis is not None:
            return PauseStatus.ENDED
        if self.current_pause_start is not None:
            return PauseStatus.PAUSED
        return PauseStatus.RUNNING

    @property
    def closed_pause_seconds(self) -> int:
        return sum(s.duration_seconds for s in self.sessions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "startMillis": self.start_millis,
            "endMillis": self.end_millis,
            "sessions": [s.to_dict() for s in self.sessions],
            "currentPauseStart": self.current_pause_start,
            "currentReason": self.current_reason,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PauseState":
        end = data.get("endMillis")
        current = data.get("currentPauseStart")
        return cls(
            start_millis=int(data["startMillis"]),
            end_millis=int(end) if end is not None else None,
            sessions=tuple(PauseSession.from_dict(s) for s in data.get("sessions", [])),
            current_pause_start=int(current) if current is not None else None,
            current_reason=str(data.get("currentReason", "")),
        )


# * Actions accepted by pause_transition
@dataclass(frozen=True)
class Pause:
    reason: str


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class End:
    timestamp_millis: int
    reason: Optional[str] = None


PauseAction = Union[Pause, Resume, End]


# * New RUNNING state starting at start_millis
def start_pause_state(start_millis: int) -> PauseState:
    return PauseState(start_millis=start_millis)


def _reject(state: PauseState, action: str, message: str) -> InvalidTransition:
    return InvalidTransition(message, state.status.value, action)


# * Apply one action; raises InvalidTransition & leaves `state` as it was
def pause_transition(state: PauseState, action: PauseAction, now_millis: int) -> PauseState:
    status = state.status
    if status is PauseStatus.ENDED:
        raise _reject(state, type(action).__name__.lower(), "Timer has ended; no further changes allowed")

    if isinstance(action, Pause):
        if status is PauseStatus.PAUSED:
            raise _reject(state, "pause", "Timer is already paused")
        reason = (action.reason or "").strip()
        if not reason:
            raise _reject(state, "pause", "A reason is required to pause")
        new_state = replace(state, current_pause_start=now_millis, current_reason=reason)

    elif isinstance(action, Resume):
        if status is not PauseStatus.PAUSED:
            raise _reject(state, "resume", "Timer is not paused")
        assert state.current_pause_start is not None
        session = PauseSession.closed(state.current_pause_start, now_millis, state.current_reason)
        new_state = replace(
            state,
            sessions=state.sessions + (session,),
            current_pause_start=None,
            current_reason="",
        )

    elif isinstance(action, End):
        sessions = state.sessions
        if status is PauseStatus.PAUSED:
            assert state.current_pause_start is not None
            reason = (action.reason or "").strip() or ENDED_WHILE_PAUSED
            sessions = sessions + (
                PauseSession.closed(state.current_pause_start, action.timestamp_millis, reason),
            )
        new_state = replace(
            state,
            end_millis=action.timestamp_millis,
            sessions=sessions,
            current_pause_start=None,
            current_reason="",
        )

    else:
        raise TypeError(f"Unknown pause action: {action!r}")

    vlog_transition(status.value, type(action).__name__.lower(), new_state.status.value)
    return new_state


# * Paused seconds so far, including the open pause while paused
def total_paused_seconds(state: PauseState, now_millis: int) -> int:
    total = state.closed_pause_seconds
    if state.current_pause_start is not None:
        total += _elapsed(state.current_pause_start, now_millis)
    return total


# * Growing pause timer shown next to the frozen work timer
def live_pause_seconds(state: PauseState, now_millis: int) -> int:
    if state.current_pause_start is None:
        return 0
    return _elapsed(state.current_pause_start, now_millis)


# * Worked seconds excluding pauses; frozen while paused & final once ended
def elapsed_seconds(state: PauseState, now_millis: int) -> int:
    status = state.status
    if status is PauseStatus.ENDED:
        assert state.end_millis is not None
        reference = state.end_millis
    elif status is PauseStatus.PAUSED:
        assert state.current_pause_start is not None
        reference = state.current_pause_start
    else:
        reference = now_millis
    return max(0, _elapsed(state.start_millis, reference) - state.closed_pause_seconds)
