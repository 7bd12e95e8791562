from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow

from eigenshow.app.application import VISIBLE_APP_NAME
from eigenshow.app.events import EventRouter, MatrixSelected, ModeToggled
from eigenshow.app.state import Store
from eigenshow.app.ui.canvas import Canvas
from eigenshow.app.ui.panels.matrix import MatrixPanel
from eigenshow.app.ui.workarea import WorkArea
from eigenshow.config import WINDOW_SIZE
from eigenshow.model.session import Session

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Matrix panel on the left, canvas on the right.

    The window owns the store (wrapping the session) and the router; both
    views get the same pair.
    """
    def __init__(self, session: Optional[Session] = None, initial_choice: Optional[int] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Global store
        self.store = Store(session)
        self.router = EventRouter(self.store)

        self.panel = MatrixPanel(self.store, self.router, parent=self)
        self.canvas = Canvas(self.store, self.router, parent=self)
        self.work_area = WorkArea(self.panel, self.canvas, parent=self)
        self.setCentralWidget(self.work_area)

        # initial state goes through the router like any user input
        initial_choice = self.store.session.source.resolve(initial_choice)
        self.router.dispatch(MatrixSelected(initial_choice))
        self.router.dispatch(ModeToggled(False))
        logger.info("Main window ready.")
