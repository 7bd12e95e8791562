"""
Run with: python -m eigenshow
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from eigenshow.logging_config import setup_logging
from eigenshow.model.matrices import MatrixSource, menu_labels
from eigenshow.model.session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eigenshow",
        description="Drag a unit vector x around the circle and watch Ax: eigenvectors and singular vectors.",
    )
    parser.add_argument(
        "--matrix", metavar="LABEL", default=None,
        help=f"initial matrix, one of: {', '.join(menu_labels())}",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random matrix generator")
    parser.add_argument("--log-level", default="info", help="logging level (debug, info, warning, ...)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def build_session(args: argparse.Namespace) -> tuple[Session, int]:
    """Session and initial menu index from the parsed arguments; an unknown --matrix falls back to the default."""
    source = MatrixSource(rng=np.random.default_rng(args.seed))
    return Session(source=source), source.resolve_label(args.matrix)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        print(f"eigenshow: {e}", file=sys.stderr)
        return 2

    session, initial_choice = build_session(args)

    # Qt is only imported once the arguments are known to be valid
    from eigenshow.app.application import create_app
    from eigenshow.app.ui.main_window import MainWindow

    app = create_app()
    win = MainWindow(session, initial_choice=initial_choice)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
