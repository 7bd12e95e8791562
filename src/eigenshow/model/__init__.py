"""
The MODEL layer contains pure data structures and the session logic.
It has NO knowledge of the GUI (Qt) or the plotting backend (pyqtgraph).
It deals with matrices, unit vectors and the recorded traces and markers.
"""
from eigenshow.model.buffers import MarkerBuffer, TraceBuffer
from eigenshow.model.matrices import MATRIX_PRESETS, RANDOM_CHOICE, MatrixPreset, MatrixSource, format_matrix
from eigenshow.model.session import Mode, Session
from eigenshow.model.vectors import image, normalize, perpendicular

__all__ = [
    "MATRIX_PRESETS",
    "RANDOM_CHOICE",
    "MarkerBuffer",
    "MatrixPreset",
    "MatrixSource",
    "Mode",
    "Session",
    "TraceBuffer",
    "format_matrix",
    "image",
    "normalize",
    "perpendicular",
]
