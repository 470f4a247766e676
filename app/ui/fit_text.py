from __future__ import annotations

"""Text fitting helpers (UI utility, Qt-dependent, no game state).

- `fit_label_font()` binary search over point sizes
- `AutoFitLabel` which refits itself on resize and on setText()

Grid cells use it so a syllable or jamo fills its tile at any window size.
"""

from typing import Optional

from PyQt6.QtGui import QFont, QFontMetrics, QResizeEvent
from PyQt6.QtWidgets import QLabel, QWidget


def fit_label_font(
    label: QLabel,
    *,
    min_pt: int = 6,
    max_pt: int = 200,
    padding_px: int = 4,
) -> int:
    """Resize `label` font so its text fits its own contents rect.

    Returns the chosen point size (0 if nothing was changed).
    """
    text = (label.text() or "").strip()
    if not text:
        return 0

    rect = label.contentsRect()
    avail_w = rect.width() - 2 * int(padding_px)
    avail_h = rect.height() - 2 * int(padding_px)
    if avail_w <= 0 or avail_h <= 0:
        return 0

    base_font = QFont(label.font())

    def fits(pt: int) -> bool:
        f = QFont(base_font)
        f.setPointSize(pt)
        fm = QFontMetrics(f)
        return fm.horizontalAdvance(text) <= avail_w and fm.height() <= avail_h

    lo = max(1, int(min_pt))
    hi = max(lo, int(max_pt))
    best = lo
    while lo <= hi:
        mid = (lo + hi) // 2
        if fits(mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1

    new_font = QFont(base_font)
    new_font.setPointSize(best)
    label.setFont(new_font)
    return best


class AutoFitLabel(QLabel):
    """A QLabel that keeps its font sized to its own rectangle."""

    def __init__(
        self,
        text: str = "",
        parent: Optional[QWidget] = None,
        *,
        min_pt: int = 6,
        max_pt: int = 200,
        padding_px: int = 4,
    ) -> None:
        super().__init__(text, parent)
        self._min_pt = int(min_pt)
        self._max_pt = int(max_pt)
        self._padding_px = int(padding_px)
        self.refit()

    def refit(self) -> int:
        return fit_label_font(self, min_pt=self._min_pt, max_pt=self._max_pt, padding_px=self._padding_px)

    def setText(self, text: str) -> None:  # noqa: N802
        super().setText(text)
        self.refit()

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.refit()
