from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    from eigenshow.app.events import EventRouter, InputEvent
    from eigenshow.app.state import Store


class BasePanel(QWidget):
    """
    Base class for left-side panels.

    Panels read from the store and report user input to the router; they
    never change the session themselves.
    """
    def __init__(self, store: Store, router: EventRouter, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.router = router

    def send(self, event: InputEvent) -> None:
        self.router.dispatch(event)
