# cutlog/cli/params.py
# CLI argument definitions & normalization helpers

from __future__ import annotations

from typing import Any

import typer

from ..core.constants import IdleMode, QaState


def _normalize_mode(value: str | None) -> IdleMode:
    if value is None:
        return IdleMode.ADD
    v = value.strip().lower()
    mapping = {
        "add": IdleMode.ADD,
        "idle": IdleMode.ADD,
        "subtract": IdleMode.SUBTRACT_PAUSE,
        "sub": IdleMode.SUBTRACT_PAUSE,
        "pause": IdleMode.SUBTRACT_PAUSE,
    }
    try:
        return mapping[v]
    except KeyError:
        raise typer.BadParameter("Invalid mode. Choose: add|subtract")


def _normalize_qa_target(value: str) -> QaState:
    v = value.strip().lower().replace("-", "_")
    mapping = {
        "ready": QaState.READY_FOR_QA,
        "ready_for_qa": QaState.READY_FOR_QA,
        "sent": QaState.SENT_TO_QA,
        "sent_to_qa": QaState.SENT_TO_QA,
        "dispatch": QaState.SENT_TO_QA,
    }
    try:
        return mapping[v]
    except KeyError:
        raise typer.BadParameter("Invalid QA state. Choose: ready|sent")


# * "1-3,5" -> [1, 2, 3, 5]
def _parse_unit_selection(value: str) -> list[int]:
    units: set[int] = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part:
                low_text, high_text = part.split("-", 1)
                low, high = int(low_text), int(high_text)
                if high < low:
                    raise ValueError(part)
                units.update(range(low, high + 1))
            else:
                units.add(int(part))
        except ValueError:
            raise typer.BadParameter(f"Invalid unit selection '{part}'. Use e.g. 1-3,5")
    if not units:
        raise typer.BadParameter("No units selected")
    return sorted(units)


def JsonFileArg(help: str) -> Any:
    return typer.Argument(
        ...,
        help=help,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    )


def OutJsonOpt() -> Any:
    return typer.Option(
        None,
        "--out-json",
        help="Also write the computed result as JSON",
        dir_okay=False,
        resolve_path=True,
    )


def ModeOpt() -> Any:
    return typer.Option(
        "add",
        "--mode",
        help="Idle handling: add (idle duration) | subtract (paused seconds)",
    )


def TimestampOpt() -> Any:
    return typer.Option(
        None,
        "--at",
        help="Timestamp DD/MM/YYYY HH:MM to record instead of now",
    )
