"""
Session State (Data Model)
==========================
This module defines the central data structure of a running demonstration.

Why is this file needed?
------------------------
1. State Management: It holds the current matrix, the primary vector x, the
   mode and the four recording buffers in one place. Nothing else owns state.
2. Consistency: Every operation updates all dependent values before it
   returns, so whoever reads the session afterwards never sees a new x with
   a stale y, or a trace whose vector and image lengths differ.
3. Decoupling: The Store wraps this object with Qt signals; views only read
   from it.

Classes:
    Mode: Single vector (eigen) or perpendicular pair (svd).
    Session: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from eigenshow.config import (
    CAPTION_PAIRED, CAPTION_SINGLE, DEFAULT_VECTOR, PROXIMITY_RADIUS, TITLE_PAIRED, TITLE_SINGLE,
)
from eigenshow.model.buffers import MarkerBuffer, TraceBuffer
from eigenshow.model.matrices import MatrixSource
from eigenshow.model.vectors import as_vector, image, norm, normalize, perpendicular

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    SINGLE = "single"
    PAIRED = "paired"

    @property
    def heading(self) -> str:
        """Instruction shown above the canvas."""
        return TITLE_PAIRED if self is Mode.PAIRED else TITLE_SINGLE

    @property
    def caption(self) -> str:
        return CAPTION_PAIRED if self is Mode.PAIRED else CAPTION_SINGLE

    @classmethod
    def from_toggle(cls, active: bool) -> Mode:
        return cls.PAIRED if active else cls.SINGLE


@dataclass
class Session:
    """
    Everything one demonstration needs.

    y is not stored: it is always the 90 degree rotation of x, so the two
    can never disagree. Both traces record in every mode; the mode only
    decides what the renderer shows.
    """
    source: MatrixSource = field(default_factory=MatrixSource)
    x: npt.NDArray[np.float64] = field(default_factory=lambda: np.array(DEFAULT_VECTOR, dtype=np.float64))
    mode: Mode = Mode.SINGLE
    radius: float = PROXIMITY_RADIUS

    x_trace: TraceBuffer = field(default_factory=TraceBuffer)
    y_trace: TraceBuffer = field(default_factory=TraceBuffer)
    x_markers: MarkerBuffer = field(default_factory=MarkerBuffer)
    y_markers: MarkerBuffer = field(default_factory=MarkerBuffer)

    # ---- derived values ----

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        return self.source.matrix

    @property
    def y(self) -> npt.NDArray[np.float64]:
        return perpendicular(self.x)

    @property
    def ax(self) -> npt.NDArray[np.float64]:
        return image(self.matrix, self.x)

    @property
    def ay(self) -> npt.NDArray[np.float64]:
        return image(self.matrix, self.y)

    @property
    def y_visible(self) -> bool:
        return self.mode is Mode.PAIRED

    @property
    def title(self) -> str:
        return self.mode.heading

    def buffers(self) -> tuple[TraceBuffer, TraceBuffer, MarkerBuffer, MarkerBuffer]:
        return self.x_trace, self.y_trace, self.x_markers, self.y_markers

    def in_range(self, position: Sequence[float] | npt.NDArray[np.float64]) -> bool:
        """True while the pointer is inside the interactive disc."""
        return norm(position) < self.radius

    # ---- primary vector ----

    def update_from_pointer(self, position: Sequence[float] | npt.NDArray[np.float64]) -> bool:
        """
        Point x towards the pointer.

        Positions outside the interactive disc (the pointer left the plot)
        and the origin itself leave the state untouched.

        Returns:
            True if x changed.
        """
        position = as_vector(position)
        if not self.in_range(position):
            return False
        unit = normalize(position)
        if unit is None:
            logger.debug("Ignoring pointer at the origin.")
            return False
        self.x = unit
        return True

    # ---- buffers ----

    def append_sample(self) -> None:
        """Record the current x, Ax, y, Ay on both traces."""
        x, y = self.x, self.y
        self.x_trace.append(x, image(self.matrix, x))
        self.y_trace.append(y, image(self.matrix, y))

    def append_marker(self) -> None:
        """Pin the current x and Ax."""
        self.x_markers.append(self.x, self.ax)
        # y markers are deliberately not recorded, also in paired mode
        logger.debug("Marked x=%s, Ax=%s (%d markers).", self.x.tolist(), self.ax.tolist(), len(self.x_markers))

    def clear(self) -> None:
        """Empty all four buffers."""
        for buffer in self.buffers():
            buffer.clear()
        logger.debug("Cleared traces and markers.")

    # ---- event-level operations ----

    def move_pointer(self, position: Sequence[float] | npt.NDArray[np.float64]) -> bool:
        """Pointer moved: update x (and so y) and sample both traces. Returns True if anything changed."""
        if not self.update_from_pointer(position):
            return False
        self.append_sample()
        return True

    def release_pointer(self, position: Sequence[float] | npt.NDArray[np.float64]) -> bool:
        """Left button released: mark x if the pointer is inside the disc."""
        if not self.in_range(position):
            return False
        self.append_marker()
        return True

    def select_matrix(self, choice: Optional[int]) -> npt.NDArray[np.float64]:
        """A new matrix invalidates every recorded image, in any mode."""
        matrix = self.source.select(choice)
        self.clear()
        return matrix

    def set_mode(self, mode: Mode) -> None:
        self.mode = Mode(mode)
        self.clear()
        logger.info("Mode set to %s.", self.mode.caption)
