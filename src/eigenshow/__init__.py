"""EigenShow: an interactive demonstrator of eigenvectors and singular vectors of 2x2 matrices."""
__version__ = "0.1.0"
