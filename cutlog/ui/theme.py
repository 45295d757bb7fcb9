# cutlog/ui/theme.py
# Color constants & Rich theme for consistent CLI styling

from __future__ import annotations

from rich.text import Text
from rich.theme import Theme


# * Static palette; QA colors follow the shop-floor badges
class CutlogColors:
    ACCENT = "#2f7fd8"
    ACCENT_LIGHT = "#7fb3ea"

    SUCCESS = "#10b981"  # emerald green
    WARNING = "#ffaa00"  # amber
    ERROR = "#ff4444"
    INFO = "#4488ff"
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"

    QA_LOGGED = "#10b981"
    QA_DISPATCHED = "#8b5cf6"
    QA_PENDING = "#aaaaaa"


CUTLOG_THEME = Theme(
    {
        "cutlog.accent": CutlogColors.ACCENT,
        "cutlog.accent2": CutlogColors.ACCENT_LIGHT,
        "cutlog.ok": CutlogColors.SUCCESS,
        "cutlog.warn": CutlogColors.WARNING,
        "cutlog.error": CutlogColors.ERROR,
        "debug": CutlogColors.DEBUG,
    }
)


def styled_checkmark() -> Text:
    return Text("✓", style=f"bold {CutlogColors.SUCCESS}")


def styled_arrow() -> Text:
    return Text("→", style=CutlogColors.ACCENT_LIGHT)
