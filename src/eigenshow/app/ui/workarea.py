from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout


class WorkArea(QWidget):
    """The main work area with a splitter between the control panel and the canvas."""
    def __init__(self, panel: QWidget, canvas: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.panel = panel
        self.canvas = canvas
        split.addWidget(self.panel)
        split.addWidget(self.canvas)
        # the canvas takes all extra width
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
