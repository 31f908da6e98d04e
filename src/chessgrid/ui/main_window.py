"""MainWindow — top-level window hosting the board and turn indicator."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from chessgrid.core.enums import Color
from chessgrid.core.notation import position_from_fen
from chessgrid.core.position import Position
from chessgrid.core.types import Square, square_name
from chessgrid.game.selection import SelectionController
from chessgrid.game.state import Active
from chessgrid.game.store import PositionStore
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Chessgrid.

    Owns the :class:`SelectionController`. Board clicks go to the
    controller; after each click the board is redrawn from the controller's
    projection and the status bar shows whose turn it is.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chessgrid")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings if settings is not None else AppSettings()
        store = PositionStore(position_from_fen(self._settings.start_fen))
        self._controller = SelectionController(
            store, sticky_selection=self._settings.sticky_selection
        )
        self._last_move: str | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()
        self._refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status = QStatusBar(self)
        status.addWidget(self._status_label)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        self._new_game_action = QAction("&New Game", self)
        self._new_game_action.setShortcut(QKeySequence("Ctrl+N"))
        game_menu.addAction(self._new_game_action)

        self._flip_action = QAction("&Flip Board", self)
        self._flip_action.setShortcut(QKeySequence("F"))
        game_menu.addAction(self._flip_action)

        game_menu.addSeparator()
        self._quit_action = QAction("&Quit", self)
        self._quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        game_menu.addAction(self._quit_action)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._new_game_action.triggered.connect(self.new_game)
        self._flip_action.triggered.connect(self.flip_board)
        self._quit_action.triggered.connect(self.close)
        self._controller.events.on_move.append(self._on_move)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene

        theme = BoardTheme.named(s.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            theme = BoardTheme.default()
        scene.set_theme(theme)
        scene.set_flipped(s.flipped)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset to the configured starting position."""
        self._last_move = None
        self._controller.reset()
        self._refresh()

    def flip_board(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    # ── Slots / callbacks ────────────────────────────────────────────────

    def _on_square_clicked(self, square: int) -> None:
        self._controller.click(square)
        self._refresh()

    def _on_move(self, from_sq: Square, to_sq: Square, _position: Position) -> None:
        self._last_move = f"{square_name(from_sq)}-{square_name(to_sq)}"

    def _refresh(self) -> None:
        state = self._controller.state
        selected = state.square if isinstance(state, Active) else None
        self._board_view.board_scene.render(
            self._controller.projection(), self._controller.position, selected
        )
        self._status_label.setText(self._status_message())

    def _status_message(self) -> str:
        side = "White" if self._controller.side_to_move == Color.WHITE else "Black"
        text = f"{side} to move"
        if self._last_move is not None:
            text += f"  ·  last move {self._last_move}"
        return text
