from __future__ import annotations

"""Status palette shared by the grid and the on-screen keyboard."""

from dataclasses import dataclass
from typing import Final

from app.domain.enums import CharStatus


@dataclass(frozen=True)
class StatusStyle:
    bg: str
    text: str
    border: str


STATUS_STYLES: Final[dict[CharStatus, StatusStyle]] = {
    CharStatus.CORRECT: StatusStyle(bg="#059669", text="#ffffff", border="#047857"),  # emerald
    CharStatus.PRESENT: StatusStyle(bg="#eab308", text="#09090b", border="#ca8a04"),  # yellow
    CharStatus.MISPLACED_SYLLABLE: StatusStyle(bg="#f97316", text="#ffffff", border="#ea580c"),  # orange
    CharStatus.ABSENT: StatusStyle(bg="#27272a", text="#71717a", border="#18181b"),  # zinc
    CharStatus.NONE: StatusStyle(bg="#3f3f46", text="#f4f4f5", border="#52525b"),
}

KEY_DEFAULT: Final[StatusStyle] = StatusStyle(bg="#52525b", text="#f4f4f5", border="#3f3f46")
CURRENT_BORDER: Final[str] = "#71717a"
EMPTY_CELL: Final[StatusStyle] = StatusStyle(bg="#1e293b", text="#f4f4f5", border="#1e293b")
SHAKE_BORDER: Final[str] = "#dc2626"


def style_for(status: CharStatus) -> StatusStyle:
    return STATUS_STYLES.get(status, STATUS_STYLES[CharStatus.NONE])


def tile_stylesheet(style: StatusStyle, *, border_px: int = 0, border: str | None = None) -> str:
    """QSS for a flat coloured tile."""
    border_rule = "border: {}px solid {};".format(border_px, border or style.border) if border_px else "border: none;"
    return "background-color: {}; color: {}; {} font-weight: bold;".format(style.bg, style.text, border_rule)
