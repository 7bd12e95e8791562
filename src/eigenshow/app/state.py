from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from eigenshow.model.session import Mode, Session

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/canvas sync.

    Every public method finishes all updates on the session before emitting,
    so a slot connected to any signal reads a fully consistent session.
    Views read `store.session` but never write to it.
    """
    matrix_changed = Signal(object)
    vectors_changed = Signal(object)
    traces_changed = Signal(object)
    markers_changed = Signal(object)
    mode_changed = Signal(object)

    def __init__(self, session: Optional[Session] = None) -> None:
        super().__init__()
        self.session = session if session is not None else Session()

    def move_pointer(self, position) -> bool:
        if not self.session.move_pointer(position):
            return False
        self.vectors_changed.emit(self.session)
        self.traces_changed.emit(self.session)
        return True

    def release_pointer(self, position) -> bool:
        if not self.session.release_pointer(position):
            logger.debug("Ignoring click outside the interactive disc at %s.", list(position))
            return False
        self.markers_changed.emit(self.session)
        return True

    def select_matrix(self, choice: Optional[int]) -> None:
        self.session.select_matrix(choice)
        self.matrix_changed.emit(self.session)
        # images of x and y depend on the matrix
        self.vectors_changed.emit(self.session)
        self._emit_cleared()

    def set_mode(self, mode: Mode) -> None:
        self.session.set_mode(mode)
        self.mode_changed.emit(self.session)
        self._emit_cleared()

    def _emit_cleared(self) -> None:
        self.traces_changed.emit(self.session)
        self.markers_changed.emit(self.session)
