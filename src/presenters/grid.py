"""
Flat 2-D grid presenter.

Draws the board as an 8x8 grid of cells (as a matrix of CellView, or as text) and turns pointer presses
in pixel space into square clicks on the session.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.coords import (
    RenderCoord,
    render_coord_to_square,
    rows_top_to_bottom,
    square_to_render_coord,
)
from src.chess.pieces import Piece
from src.chess.square import BOARD_SIZE, Square
from src.interaction.selection import Selected
from src.interaction.session import GameSession, SessionSnapshot
from src.presenters.base import BoardPresenter


@dataclass(frozen=True)
class GridLayout:
    """Pixel geometry of the grid and hit-testing"""

    origin_x: float = 0.0
    origin_y: float = 0.0
    cell_size: float = 64.0

    def cell_origin(self, coord: RenderCoord) -> tuple[float, float]:
        x, y = coord
        return self.origin_x + x * self.cell_size, self.origin_y + y * self.cell_size

    def pointer_to_cell(self, px: float, py: float) -> Optional[RenderCoord]:
        """None when the pointer is outside the board"""
        col = int((px - self.origin_x) // self.cell_size)
        row = int((py - self.origin_y) // self.cell_size)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return col, row


@dataclass(frozen=True)
class CellView:
    square: Square
    coord: RenderCoord
    piece: Optional[Piece]
    is_light: bool
    is_selected: bool
    is_legal_destination: bool
    is_capture_hint: bool
    is_last_move_from: bool
    is_last_move_to: bool
    # edge labels: file letter on the first rank, rank number on the a-file
    file_label: Optional[str]
    rank_label: Optional[str]


def build_cells(snapshot: SessionSnapshot) -> list[list[CellView]]:
    selection = snapshot.selection
    origin = selection.origin if isinstance(selection, Selected) else None
    last = snapshot.last_move

    rows: list[list[CellView]] = []
    for row in rows_top_to_bottom(snapshot.orientation):
        cells: list[CellView] = []
        for square in row:
            piece = snapshot.pieces.get(square)
            is_legal = square in selection.legal_destinations
            label = square.to_algebraic()
            cells.append(
                CellView(
                    square=square,
                    coord=square_to_render_coord(square, snapshot.orientation),
                    piece=piece,
                    is_light=square.is_light(),
                    is_selected=square == origin,
                    is_legal_destination=is_legal,
                    is_capture_hint=is_legal and piece is not None,
                    is_last_move_from=last is not None and last.from_square == square,
                    is_last_move_to=last is not None and last.to_square == square,
                    file_label=label[0] if square.rank == 0 else None,
                    rank_label=label[1] if square.file == 0 else None,
                )
            )
        rows.append(cells)
    return rows


class FlatGridPresenter(BoardPresenter):
    def __init__(self, session: GameSession, layout: Optional[GridLayout] = None) -> None:
        self.layout = layout or GridLayout()
        self.cells: list[list[CellView]] = []
        super().__init__(session)

    def _build(self, snapshot: SessionSnapshot) -> None:
        self.cells = build_cells(snapshot)

    # --- INPUT ---
    def pointer_down(self, px: float, py: float) -> Optional[Square]:
        """Pointer press in pixels. Presses outside the board are ignored."""
        coord = self.layout.pointer_to_cell(px, py)
        if coord is None:
            return None
        square = render_coord_to_square(coord, self.session.orientation)
        self.click_square(square)
        return square

    # --- VIEW HELPERS ---
    def cell_at(self, square: Square) -> CellView:
        assert self.snapshot is not None
        x, y = square_to_render_coord(square, self.snapshot.orientation)
        return self.cells[y][x]

    def file_labels(self) -> list[str]:
        """Letters under the board, left to right"""
        assert self.snapshot is not None
        return [cell.square.to_algebraic()[0] for cell in self.cells[-1]]

    def status_line(self) -> str:
        assert self.snapshot is not None
        return self.snapshot.status.describe()

    def render_text(self) -> str:
        """
        Text rendering of the current snapshot.
        ---

        * '[x]' marks the selected piece
        * '*' a legal destination on an empty square, '(x)' a capture
        * '.' an empty square
        """
        assert self.snapshot is not None
        lines = [self.status_line()]
        for row in self.cells:
            rank = row[0].square.to_algebraic()[1]
            lines.append(f"{rank} " + "".join(_cell_text(cell) for cell in row))
        lines.append("  " + "".join(f" {label} " for label in self.file_labels()))
        lines.extend(self.snapshot.move_rows)
        return "\n".join(lines)


def _cell_text(cell: CellView) -> str:
    glyph = cell.piece.glyph if cell.piece else "."
    if cell.is_selected:
        return f"[{glyph}]"
    if cell.is_capture_hint:
        return f"({glyph})"
    if cell.is_legal_destination:
        return " * "
    return f" {glyph} "
