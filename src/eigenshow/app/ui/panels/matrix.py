from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QComboBox, QLabel, QCheckBox,
)

from eigenshow.app.events import EventRouter, MatrixSelected, ModeToggled
from eigenshow.app.state import Store
from eigenshow.app.ui.panels.base import BasePanel
from eigenshow.model.matrices import format_matrix
from eigenshow.model.session import Mode, Session


class MatrixPanel(BasePanel):
    """
    Panel for choosing the matrix and the mode.

    Top: matrix menu (presets + random) and the current matrix.
    Below: eigen/svd toggle.
    """
    def __init__(self, store: Store, router: EventRouter, parent: QWidget | None = None) -> None:
        super().__init__(store, router, parent)

        root = QVBoxLayout(self)

        caption = QLabel(self.tr("Choose a matrix"), self)
        caption.setAlignment(Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignLeft)
        root.addWidget(caption)

        self.combo_box = QComboBox(self)
        for index, label in enumerate(store.session.source.labels()):
            self.combo_box.addItem(label, userData=index)
        self.combo_box.setCurrentIndex(store.session.source.choice)
        root.addWidget(self.combo_box)

        self.matrix_label = QLabel(self)
        font = QFont("monospace")
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPointSize(16)
        self.matrix_label.setFont(font)
        root.addWidget(self.matrix_label)

        # eigen [toggle] svd
        toggle_row = QHBoxLayout()
        toggle_row.addWidget(QLabel(Mode.SINGLE.caption, self))
        self.toggle = QCheckBox(self)
        self.toggle.setChecked(store.session.mode is Mode.PAIRED)
        toggle_row.addWidget(self.toggle)
        toggle_row.addWidget(QLabel(Mode.PAIRED.caption, self))
        toggle_row.addStretch()
        root.addLayout(toggle_row)

        root.addStretch()

        # wiring; `activated` fires on every pick, so choosing "random" again re-draws
        self.combo_box.activated.connect(self._on_matrix_activated)
        self.toggle.toggled.connect(self._on_toggled)
        self.store.matrix_changed.connect(self._on_matrix_changed)
        self.store.mode_changed.connect(self._on_mode_changed)

        self._on_matrix_changed(store.session)

    @Slot(int)
    def _on_matrix_activated(self, index: int) -> None:
        self.send(MatrixSelected(self.combo_box.itemData(index)))

    @Slot(bool)
    def _on_toggled(self, checked: bool) -> None:
        self.send(ModeToggled(checked))

    def _on_matrix_changed(self, session: Session) -> None:
        self.matrix_label.setText(format_matrix(session.matrix))
        if self.combo_box.currentIndex() != session.source.choice:
            self.combo_box.setCurrentIndex(session.source.choice)

    def _on_mode_changed(self, session: Session) -> None:
        checked = session.mode is Mode.PAIRED
        if self.toggle.isChecked() != checked:
            # keep the widget in sync without echoing a second toggle event
            self.toggle.blockSignals(True)
            self.toggle.setChecked(checked)
            self.toggle.blockSignals(False)
