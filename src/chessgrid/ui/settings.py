"""Application settings and their command-line form."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from chessgrid.core.notation import STARTING_FEN
from chessgrid.ui.styles.theme import THEME_NAMES


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    start_fen: str = STARTING_FEN
    sticky_selection: bool = True

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppSettings:
        """Build settings from command-line arguments (``sys.argv[1:]`` by default)."""
        args = build_parser().parse_args(argv)
        return cls(
            start_fen=args.fen,
            sticky_selection=not args.no_sticky,
            board_theme=args.theme,
            show_coordinates=not args.hide_coordinates,
            show_legal_moves=not args.hide_moves,
            flipped=args.flipped,
            log_level=args.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="chessgrid",
        description="Click-to-move chess board with destination highlighting.",
    )
    parser.add_argument("--fen", default=defaults.start_fen, help="starting position")
    parser.add_argument(
        "--theme",
        default=defaults.board_theme,
        choices=THEME_NAMES,
        help="board colour scheme",
    )
    parser.add_argument(
        "--flipped", action="store_true", help="show the board from black's side"
    )
    parser.add_argument(
        "--no-sticky",
        action="store_true",
        help="clear the selection when clicking an empty non-destination square",
    )
    parser.add_argument(
        "--hide-coordinates", action="store_true", help="hide rank/file labels"
    )
    parser.add_argument(
        "--hide-moves", action="store_true", help="do not mark destination squares"
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
    )
    return parser
