"""
Input Events & Routing
======================
This module turns raw input from the canvas and the control panel into
state transitions on the Store.

Why is this file needed?
------------------------
1. Mediation: Widgets never touch the session. They describe what happened
   (pointer moved, button released, menu changed, toggle flipped) as small
   event records and hand them to the router.
2. Ordering: The router is the single place that decides which transitions
   an event causes and in which order, e.g. a matrix change always clears
   the buffers after the new matrix is in place.
3. Propagation: Handling an event never consumes it. `dispatch` always
   returns False so the widget passes the event on to other observers
   (pyqtgraph's own handlers, for instance).

Classes:
    PointerMoved, ButtonPressed, ButtonReleased, MatrixSelected, ModeToggled
    EventRouter: Dispatches the records above.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import Optional, Union

from eigenshow.app.state import Store
from eigenshow.model.session import Mode

logger = logging.getLogger(__name__)


class MouseButton(IntEnum):
    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


@dataclass(frozen=True)
class PointerMoved:
    position: tuple[float, float]


@dataclass(frozen=True)
class ButtonPressed:
    button: MouseButton
    position: tuple[float, float]


@dataclass(frozen=True)
class ButtonReleased:
    button: MouseButton
    position: tuple[float, float]


@dataclass(frozen=True)
class MatrixSelected:
    choice: Optional[int]


@dataclass(frozen=True)
class ModeToggled:
    active: bool


InputEvent = Union[PointerMoved, ButtonPressed, ButtonReleased, MatrixSelected, ModeToggled]


class EventRouter:
    """Maps input events onto Store transitions."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def dispatch(self, event: InputEvent) -> bool:
        """
        Apply one event.

        Returns:
            Whether the event was consumed. Always False: the event keeps
            propagating after the state has been updated.
        """
        match event:
            case PointerMoved(position=position):
                self.store.move_pointer(position)

            case ButtonReleased(button=MouseButton.LEFT, position=position):
                self.store.release_pointer(position)

            case ButtonPressed() | ButtonReleased():
                # markers are placed on release, so drag-then-release marks the final position
                pass

            case MatrixSelected(choice=choice):
                self.store.select_matrix(choice)

            case ModeToggled(active=active):
                self.store.set_mode(Mode.from_toggle(active))

            case _:
                raise TypeError(f"Unsupported event {event!r}")

        return False
