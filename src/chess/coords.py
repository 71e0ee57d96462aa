"""
Mapping between logical squares and the (x, y) grid coordinates a renderer draws in.

(x, y) = (column, row) with (0, 0) the top-left cell of the rendered board.
Both presenters go through these two functions, so they always agree on where a square is drawn.
Flipping the orientation only relabels cells: the squares themselves never change.
"""

from src.chess.square import BOARD_SIZE, Square
from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Orientation

RenderCoord = tuple[int, int]

LAST_INDEX = BOARD_SIZE - 1


def square_to_render_coord(square: Square, orientation: Orientation) -> RenderCoord:
    if not square.is_within_bounds():
        raise InvalidSquareError(f"{square!r} is not on the board.")
    if orientation == Orientation.WHITE_AT_BOTTOM:
        return square.file, LAST_INDEX - square.rank
    return LAST_INDEX - square.file, square.rank


def render_coord_to_square(coord: RenderCoord, orientation: Orientation) -> Square:
    x, y = coord
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        raise InvalidSquareError(f"Render coordinate {coord} is outside the board.")
    if orientation == Orientation.WHITE_AT_BOTTOM:
        return Square(file=x, rank=LAST_INDEX - y)
    return Square(file=LAST_INDEX - x, rank=y)


def rows_top_to_bottom(orientation: Orientation) -> list[list[Square]]:
    """The full board as rendered: one list of squares per row, top row first."""
    return [
        [render_coord_to_square((x, y), orientation) for x in range(BOARD_SIZE)]
        for y in range(BOARD_SIZE)
    ]
