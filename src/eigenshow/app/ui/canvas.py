from __future__ import annotations

from dataclasses import dataclass
from math import atan2, degrees
from typing import TYPE_CHECKING, Callable

import numpy as np
from PySide6.QtCore import QPointF
from PySide6.QtGui import QFont, QMouseEvent
from PySide6.QtWidgets import QWidget
import pyqtgraph as pg

from eigenshow.app.events import ButtonPressed, ButtonReleased, EventRouter, MouseButton, PointerMoved
from eigenshow.app.state import Store
from eigenshow.config import AXIS_LIMIT, LABEL_OFFSET, LABEL_SCALE
from eigenshow.model.session import Session

if TYPE_CHECKING:
    import numpy.typing as npt

# seaborn colorblind: source, image, marker
PALETTE = ("#0173b2", "#de8f05", "#029e73")


# -------------------------------------------------------------------------------
# Drawables
# -------------------------------------------------------------------------------

class Arrow:
    """A shaft from the origin plus a head at the tip."""
    def __init__(self, plot: pg.PlotItem, color: str) -> None:
        self.shaft = plot.plot([0.0, 1.0], [0.0, 0.0], pen=pg.mkPen(color, width=5))
        self.head = pg.ArrowItem(pen=pg.mkPen(color), brush=pg.mkBrush(color), headLen=20, tailLen=0)
        plot.addItem(self.head)

    def set_tip(self, tip: npt.NDArray[np.float64]) -> None:
        x, y = float(tip[0]), float(tip[1])
        self.shaft.setData([0.0, x], [0.0, y])
        # ArrowItem angle 0 points left; screen y grows upwards in the view box
        self.head.setStyle(angle=180.0 - degrees(atan2(y, x)))
        self.head.setPos(x, y)

    def set_visible(self, visible: bool) -> None:
        self.shaft.setVisible(visible)
        self.head.setVisible(visible)


@dataclass
class VectorVisuals:
    """Everything drawn for one tracked vector (x or y) and its image."""
    trace: pg.ScatterPlotItem
    image_trace: pg.ScatterPlotItem
    arrow: Arrow
    image_arrow: Arrow
    label: pg.TextItem
    image_label: pg.TextItem
    markers: pg.ScatterPlotItem

    @classmethod
    def create(cls, plot: pg.PlotItem, name: str, palette: tuple[str, str, str] = PALETTE) -> VectorVisuals:
        source_color, image_color, marker_color = palette

        def dots(color: str, size: int) -> pg.ScatterPlotItem:
            item = pg.ScatterPlotItem(size=size, pen=None, brush=pg.mkBrush(color))
            plot.addItem(item)
            return item

        def text(content: str, color: str) -> pg.TextItem:
            item = pg.TextItem(content, color=color, anchor=(0.0, 1.0))
            font = QFont("serif", 18)
            font.setItalic(True)
            item.setFont(font)
            plot.addItem(item)
            return item

        return cls(
            trace=dots(source_color, 4),
            image_trace=dots(image_color, 4),
            arrow=Arrow(plot, source_color),
            image_arrow=Arrow(plot, image_color),
            label=text(name, source_color),
            image_label=text(f"A{name}", image_color),
            markers=dots(marker_color, 18),
        )

    def set_visible(self, visible: bool) -> None:
        self.arrow.set_visible(visible)
        self.image_arrow.set_visible(visible)
        for item in (self.trace, self.image_trace, self.label, self.image_label, self.markers):
            item.setVisible(visible)

    def set_vectors(self, v: npt.NDArray[np.float64], av: npt.NDArray[np.float64]) -> None:
        self.arrow.set_tip(v)
        self.image_arrow.set_tip(av)
        self.label.setPos(*label_position(v))
        self.image_label.setPos(*label_position(av))


def label_position(tip: npt.NDArray[np.float64]) -> tuple[float, float]:
    """Text sits slightly beyond the arrow tip."""
    return (LABEL_SCALE * float(tip[0]) + LABEL_OFFSET[0],
            LABEL_SCALE * float(tip[1]) + LABEL_OFFSET[1])


def _set_points(item: pg.ScatterPlotItem, points: npt.NDArray[np.float64]) -> None:
    item.setData(x=points[:, 0], y=points[:, 1])


# -------------------------------------------------------------------------------
# Canvas widget
# -------------------------------------------------------------------------------

class Canvas(pg.PlotWidget):
    """
    Square plot showing x, Ax (and y, Ay in svd mode) with their traces and markers.

    Mouse input is mapped to data coordinates and forwarded to the router;
    the widget's own handling of the event continues afterwards.
    """
    def __init__(self, store: Store, router: EventRouter, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.store = store
        self.router = router

        plot = self.getPlotItem()
        plot.setAspectLocked(True)
        plot.setMouseEnabled(x=False, y=False)
        plot.setMenuEnabled(False)
        plot.hideButtons()
        plot.showGrid(x=True, y=True, alpha=0.3)
        plot.setXRange(-AXIS_LIMIT, AXIS_LIMIT, padding=0)
        plot.setYRange(-AXIS_LIMIT, AXIS_LIMIT, padding=0)

        theta = np.linspace(0.0, 2.0 * np.pi, 181)
        plot.plot(np.cos(theta), np.sin(theta), pen=pg.mkPen("#C8C8C8", width=1))

        self.x_visuals = VectorVisuals.create(plot, "x")
        self.y_visuals = VectorVisuals.create(plot, "y")

        self.scene().sigMouseMoved.connect(self._on_mouse_moved)

        self.store.vectors_changed.connect(self._on_vectors_changed)
        self.store.traces_changed.connect(self._on_traces_changed)
        self.store.markers_changed.connect(self._on_markers_changed)
        self.store.mode_changed.connect(self._on_mode_changed)

        self._redraw(store.session)

    # ---- input ----

    def _to_data(self, scene_pos: QPointF) -> tuple[float, float]:
        point = self.getPlotItem().vb.mapSceneToView(scene_pos)
        return float(point.x()), float(point.y())

    def _on_mouse_moved(self, scene_pos: QPointF) -> None:
        self.router.dispatch(PointerMoved(self._to_data(scene_pos)))

    def _forward_button(self, event: QMouseEvent, record: Callable) -> None:
        try:
            button = MouseButton(event.button().value)
        except ValueError:
            return
        scene_pos = self.mapToScene(event.position().toPoint())
        self.router.dispatch(record(button, self._to_data(scene_pos)))

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self._forward_button(event, ButtonPressed)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._forward_button(event, ButtonReleased)
        super().mouseReleaseEvent(event)

    # ---- output ----

    def _redraw(self, session: Session) -> None:
        self._on_mode_changed(session)
        self._on_vectors_changed(session)
        self._on_traces_changed(session)
        self._on_markers_changed(session)

    def _on_vectors_changed(self, session: Session) -> None:
        self.x_visuals.set_vectors(session.x, session.ax)
        self.y_visuals.set_vectors(session.y, session.ay)

    def _on_traces_changed(self, session: Session) -> None:
        for visuals, trace in ((self.x_visuals, session.x_trace), (self.y_visuals, session.y_trace)):
            _set_points(visuals.trace, trace.source_points())
            _set_points(visuals.image_trace, trace.image_points())

    def _on_markers_changed(self, session: Session) -> None:
        _set_points(self.x_visuals.markers, session.x_markers.points())
        _set_points(self.y_visuals.markers, session.y_markers.points())

    def _on_mode_changed(self, session: Session) -> None:
        self.getPlotItem().setTitle(session.title, size="20pt")
        self.y_visuals.set_visible(session.y_visible)
