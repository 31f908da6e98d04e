"""BoardScene — QGraphicsScene that draws the grid from a display projection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.enums import Color
from chessgrid.core.types import Square, file_of, make_square, rank_of
from chessgrid.game.projection import DisplayCategory
from chessgrid.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessgrid.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders tiles, coordinates, piece glyphs and destination dots.

    The scene keeps no game state of its own: :meth:`render` is handed a
    projection and a position and redraws from them. Clicks are reported
    as square indices and nothing else.

    Signals:
        square_clicked(int): Emitted when the user presses on a board square.
    """

    square_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    _DOT_RATIO = 0.15  # dot radius relative to tile size

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        # Last inputs, kept only to redraw after a theme/orientation change
        self._projection: dict[Square, DisplayCategory] = {}
        self._position: Position | None = None
        self._selected_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._glyph_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._dot_items: dict[Square, QGraphicsEllipseItem] = {}
        self._selection_item: QGraphicsRectItem | None = None

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def render(
        self,
        projection: Mapping[Square, DisplayCategory],
        position: Position,
        selected: Square | None = None,
    ) -> None:
        """Redraw pieces, dots and the selection mark."""
        self._projection = dict(projection)
        self._position = position
        self._selected_sq = selected
        self._sync_overlays()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._sync_overlays()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_overlays()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination dots."""
        self._show_legal_moves = visible
        self._sync_overlays()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0  # a1 is dark
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_light if is_dark else self._theme.coord_dark
            if vf == 0:
                self._add_coord(str(r + 1), vf * t + 2, vr * t + 1, font, text_color)
            if vr == 7:
                self._add_coord(
                    chr(ord("a") + f), vf * t + t - 12, vr * t + t - 16, font, text_color
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Overlay synchronisation ──────────────────────────────────────────

    def _sync_overlays(self) -> None:
        """Re-create glyphs, dots and the selection mark from the last render."""
        self._clear_overlays()
        if self._position is None:
            return

        if self._selected_sq is not None:
            self._selection_item = self._make_highlight(
                self._selected_sq, self._theme.highlight_from
            )

        for sq, category in self._projection.items():
            if category == DisplayCategory.OCCUPIED:
                piece = self._position.piece_at(sq)
                if piece is not None:
                    self._glyph_items[sq] = self._make_glyph(sq, piece.symbol, piece.color)
            elif category == DisplayCategory.HIGHLIGHTED and self._show_legal_moves:
                self._dot_items[sq] = self._make_dot(sq)

    def _clear_overlays(self) -> None:
        for glyph in self._glyph_items.values():
            self.removeItem(glyph)
        self._glyph_items.clear()
        for dot in self._dot_items.values():
            self.removeItem(dot)
        self._dot_items.clear()
        if self._selection_item is not None:
            self.removeItem(self._selection_item)
            self._selection_item = None

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
            event.accept()
            return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return make_square(f, r)

    # ── Item factories ───────────────────────────────────────────────────

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Translucent circle centred on an empty destination square."""
        t = self.TILE
        radius = t * self._DOT_RATIO
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        cx, cy = vf * t + t / 2, vr * t + t / 2
        dot = QGraphicsEllipseItem(cx - radius, cy - radius, 2 * radius, 2 * radius)
        dot.setBrush(QBrush(self._theme.move_dot))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        return dot

    def _make_glyph(self, sq: Square, symbol: str, color: Color) -> QGraphicsSimpleTextItem:
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        glyph = QGraphicsSimpleTextItem(symbol)
        glyph.setFont(QFont("DejaVu Sans", int(t * 0.6)))
        fill = self._theme.glyph_white if color == Color.WHITE else self._theme.glyph_black
        glyph.setBrush(QBrush(fill))
        glyph.setPen(QPen(self._theme.glyph_black if color == Color.WHITE else fill))
        bounds = glyph.boundingRect()
        glyph.setPos(
            vf * t + (t - bounds.width()) / 2,
            vr * t + (t - bounds.height()) / 2,
        )
        glyph.setZValue(1)
        self.addItem(glyph)
        return glyph
