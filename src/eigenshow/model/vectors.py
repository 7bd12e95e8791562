from __future__ import annotations

from math import hypot
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def as_vector(v: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Convert a pair of numbers into a (2,) float array.

    Raises:
        ValueError: If the input does not hold exactly two values.
    """
    arr = np.asarray(v, dtype=np.float64).reshape(-1)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {arr.shape}.")
    return arr


def norm(v: Sequence[float] | npt.NDArray[np.float64]) -> float:
    """Euclidean length of a 2D vector."""
    x, y = as_vector(v)
    return hypot(x, y)


def normalize(v: Sequence[float] | npt.NDArray[np.float64]) -> Optional[npt.NDArray[np.float64]]:
    """
    Scale a 2D vector to unit length.

    Args:
        v: Any 2D vector.

    Returns:
        The unit vector pointing along `v`, or None when `v` has zero length.
    """
    arr = as_vector(v)
    length = norm(arr)
    if length == 0.0:
        return None
    return arr / length


def perpendicular(v: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Rotate a 2D vector by 90 degrees counter-clockwise: (x1, x2) -> (-x2, x1)."""
    x1, x2 = as_vector(v)
    return np.array([-x2, x1], dtype=np.float64)


def image(matrix: npt.NDArray[np.float64], v: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Apply a 2x2 matrix to a 2D vector (column convention, A @ v)."""
    return matrix @ as_vector(v)
