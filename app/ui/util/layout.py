"""
Functions in this module should not depend on application state.
"""

from __future__ import annotations

from typing import cast

from PyQt6.QtWidgets import QLayout, QVBoxLayout, QWidget


def ensure_vbox(container: QWidget, *, spacing: int = 0) -> QVBoxLayout:
    """Return the container's layout, creating a zero-margin QVBoxLayout if missing."""
    layout = container.layout()
    if layout is None:
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(spacing)
    return cast(QVBoxLayout, layout)


def clear_layout(layout: QLayout) -> None:
    """Remove (and schedule deletion of) every widget and nested layout."""
    while layout.count():
        item = layout.takeAt(0)
        if item is None:
            continue
        widget = item.widget()
        if widget is not None:
            widget.setParent(None)
            widget.deleteLater()
            continue
        child = item.layout()
        if child is not None:
            clear_layout(child)
            child.deleteLater()
