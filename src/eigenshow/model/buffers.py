from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

INITIAL_CAPACITY = 256


class PointLog:
    """
    Append-only (N, 2) float array with amortized growth.

    Appending writes one row into preallocated storage; capacity doubles when
    full. `points()` returns a read-only view of the filled rows, so a redraw
    after every pointer move costs nothing proportional to the history.
    Rows already handed out are never overwritten: growth copies into a new
    array and `clear()` starts a new one.
    """
    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        self._capacity = max(1, capacity)
        self._data = np.empty((self._capacity, 2), dtype=np.float64)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def append(self, point: npt.NDArray[np.float64]) -> None:
        if self._size == len(self._data):
            grown = np.empty((2 * len(self._data), 2), dtype=np.float64)
            grown[:self._size] = self._data[:self._size]
            self._data = grown
        self._data[self._size] = point
        self._size += 1

    def clear(self) -> None:
        self._data = np.empty((self._capacity, 2), dtype=np.float64)
        self._size = 0

    def points(self) -> npt.NDArray[np.float64]:
        view = self._data[:self._size]
        view.setflags(write=False)
        return view


class TraceBuffer:
    """
    Sampled positions of one tracked vector and of its image.

    Insertion order is the sweep path, so entries are only ever appended.
    The image samples approximate the ellipse A maps the unit circle onto.
    """
    def __init__(self) -> None:
        self.sources = PointLog()
        self.images = PointLog()

    def __len__(self) -> int:
        self._check()
        return len(self.sources)

    def append(self, source: npt.NDArray[np.float64], image: npt.NDArray[np.float64]) -> None:
        self.sources.append(source)
        self.images.append(image)
        self._check()

    def clear(self) -> None:
        self.sources.clear()
        self.images.clear()

    def source_points(self) -> npt.NDArray[np.float64]:
        return self.sources.points()

    def image_points(self) -> npt.NDArray[np.float64]:
        return self.images.points()

    def _check(self) -> None:
        assert len(self.sources) == len(self.images), (
            f"Trace out of sync: {len(self.sources)} sources vs {len(self.images)} images"
        )


class MarkerBuffer:
    """(source, image) pairs the user pinned by clicking."""
    def __init__(self) -> None:
        # rows alternate source, image: the layout the canvas draws
        self._log = PointLog(capacity=16)

    def __len__(self) -> int:
        return len(self._log) // 2

    def __iter__(self) -> Iterator[tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]]:
        rows = self._log.points()
        return ((rows[i], rows[i + 1]) for i in range(0, len(rows), 2))

    def append(self, source: npt.NDArray[np.float64], image: npt.NDArray[np.float64]) -> None:
        self._log.append(source)
        self._log.append(image)

    def clear(self) -> None:
        self._log.clear()

    def points(self) -> npt.NDArray[np.float64]:
        """Sources and images of all markers in one (2N, 2) array, as drawn on the canvas."""
        return self._log.points()
