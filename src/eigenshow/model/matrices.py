"""
Matrix Catalog & Selection
==========================
This module holds the preset 2x2 matrices offered in the menu and the
`MatrixSource` that owns the currently selected matrix.

Why is this file needed?
------------------------
1. Catalog: The presets are chosen to show the interesting cases (real
   distinct eigenvalues, a reflection, a rotation without real eigenvectors,
   a defective matrix, a singular matrix, ...).
2. Selection: Picking an entry replaces the current matrix wholesale. The
   "random" entry is re-drawn on every selection, even when it is selected
   twice in a row.

Classes:
    MatrixPreset: A labelled, immutable preset matrix.
    MatrixSource: Owner of the current matrix.
"""
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
import logging
from typing import TYPE_CHECKING, Final, Optional, Sequence

import numpy as np

from eigenshow.config import DEFAULT_PRESET_INDEX, RANDOM_SIGMA

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class MatrixPreset:
    """A menu entry: the displayed label and the matrix rows."""
    label: str
    rows: tuple[tuple[float, float], tuple[float, float]]

    def to_array(self) -> npt.NDArray[np.float64]:
        return frozen_matrix(self.rows)


def _quarter(a: float, b: float, c: float, d: float) -> tuple[tuple[float, float], tuple[float, float]]:
    return (a / 4, b / 4), (c / 4, d / 4)


MATRIX_PRESETS: Final[tuple[MatrixPreset, ...]] = (
    MatrixPreset("[5 0;0 3]/4", _quarter(5, 0, 0, 3)),
    MatrixPreset("[5 0;0 -3]/4", _quarter(5, 0, 0, -3)),
    MatrixPreset("[1 0;0 1]", ((1.0, 0.0), (0.0, 1.0))),
    MatrixPreset("[0 1;1 0]", ((0.0, 1.0), (1.0, 0.0))),
    MatrixPreset("[0 1;-1 0]", ((0.0, 1.0), (-1.0, 0.0))),
    MatrixPreset("[1 3;4 2]/4", _quarter(1, 3, 4, 2)),
    MatrixPreset("[1 3;2 4]/4", _quarter(1, 3, 2, 4)),
    MatrixPreset("[3 1;4 2]/4", _quarter(3, 1, 4, 2)),
    MatrixPreset("[3 1;-2 4]/4", _quarter(3, 1, -2, 4)),
    MatrixPreset("[2 4;2 4]/4", _quarter(2, 4, 2, 4)),
    MatrixPreset("[2 4;-1 -2]/4", _quarter(2, 4, -1, -2)),
    MatrixPreset("[6 4;-1 2]/4", _quarter(6, 4, -1, 2)),
)

# The random entry sits right after the presets in the menu
RANDOM_CHOICE: Final[int] = len(MATRIX_PRESETS)
RANDOM_LABEL: Final[str] = "random"


def menu_labels(presets: Sequence[MatrixPreset] = MATRIX_PRESETS) -> list[str]:
    """Labels in menu order, the random entry last."""
    return [p.label for p in presets] + [RANDOM_LABEL]


def frozen_matrix(rows) -> npt.NDArray[np.float64]:
    """
    Build a read-only 2x2 float array.

    Raises:
        ValueError: If `rows` is not 2x2.
    """
    arr = np.array(rows, dtype=np.float64)
    if arr.shape != (2, 2):
        raise ValueError(f"Expected a 2x2 matrix, got shape {arr.shape}.")
    arr.setflags(write=False)
    return arr


# ------------------------------------------------------------------------------
# Selection
# ------------------------------------------------------------------------------
class MatrixSource:
    """
    Owns the current matrix.

    The matrix is never mutated in place; every selection stores a new
    read-only array, so views holding the old one keep a consistent value.
    """

    def __init__(
        self,
        presets: Sequence[MatrixPreset] = MATRIX_PRESETS,
        default_index: int = DEFAULT_PRESET_INDEX,
        sigma: float = RANDOM_SIGMA,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if not 0 <= default_index < len(presets):
            raise ValueError(f"Default preset index {default_index} out of range.")
        self.presets = tuple(presets)
        self.default_index = default_index
        self.sigma = sigma
        self.rng = rng if rng is not None else np.random.default_rng()
        self.choice: int = default_index
        self._matrix = self.presets[default_index].to_array()

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        return self._matrix

    @property
    def random_choice(self) -> int:
        return len(self.presets)

    def labels(self) -> list[str]:
        return menu_labels(self.presets)

    def index_of(self, label: str) -> int:
        """
        Menu index of a label.

        Raises:
            ValueError: If no entry has this label.
        """
        labels = self.labels()
        if label not in labels:
            raise ValueError(f"Unknown matrix '{label}'. Choose one of: {', '.join(labels)}")
        return labels.index(label)

    def resolve(self, choice: Optional[int]) -> int:
        """
        Menu index to start a session with.

        An unselected (None) or undefined choice falls back to the default
        preset instead of failing; only the undefined case is warned about.
        """
        if choice is None:
            return self.default_index
        if not 0 <= choice <= self.random_choice:
            logger.warning("Matrix choice %s is undefined, using %s instead.",
                           choice, self.presets[self.default_index].label)
            return self.default_index
        return choice

    def resolve_label(self, label: Optional[str]) -> int:
        """Like `resolve`, for a menu label given on the command line."""
        if label is None:
            return self.default_index
        try:
            return self.index_of(label)
        except ValueError as e:
            logger.warning("%s Using %s instead.", e, self.presets[self.default_index].label)
            return self.default_index

    def select(self, choice: Optional[int]) -> npt.NDArray[np.float64]:
        """
        Replace the current matrix.

        Args:
            choice: Index of a preset, the random entry, or None for the default preset.

        Returns:
            The newly selected matrix.

        Raises:
            ValueError: If the index is neither a preset nor the random entry.
        """
        if choice is None:
            choice = self.default_index

        if choice == self.random_choice:
            self._matrix = frozen_matrix(self.sigma * self.rng.standard_normal((2, 2)))
        elif 0 <= choice < len(self.presets):
            self._matrix = self.presets[choice].to_array()
        else:
            raise ValueError(f"Matrix choice {choice} out of range 0..{self.random_choice}.")

        self.choice = choice
        logger.info("Selected matrix %s: %s", self.labels()[choice], self._matrix.tolist())
        return self._matrix


# ------------------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------------------
def _format_fraction(value: float) -> str:
    f = Fraction(value)
    if f.denominator == 1:
        # pad integers so they line up with "a/b" entries
        return f" {f.numerator} "
    return f"{f.numerator}/{f.denominator}"


def format_matrix(matrix: npt.NDArray[np.float64]) -> str:
    """
    Two-line text rendering of a 2x2 matrix for the monospace label.

    Exact fractions are shown when the first entry has a small denominator
    (all presets), otherwise two decimals (random matrices).

    Examples:
        >>> print(format_matrix(np.array([[0.25, 0.75], [1.0, 0.5]])))
          1/4   3/4
           1    1/2
    """
    a, b, c, d = np.asarray(matrix, dtype=np.float64).reshape(4)

    if Fraction(float(a)).denominator > 99:
        return f" {a:5.2f}  {b:5.2f} \n {c:5.2f}  {d:5.2f}"

    fa, fb, fc, fd = (_format_fraction(float(v)) for v in (a, b, c, d))
    text = f"  {fa}   {fb}\n  {fc}   {fd}"
    return text.replace(" -", "-")
