"""
Left-side panels. Each panel gets the store to read from and the router to report input to.
"""
from eigenshow.app.ui.panels.base import BasePanel
from eigenshow.app.ui.panels.matrix import MatrixPanel

__all__ = ["BasePanel", "MatrixPanel"]
