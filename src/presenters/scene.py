"""
3-D scene presenter.

Builds a renderer-agnostic scene graph (tiles, piece meshes, destination markers) in world coordinates.
The board lies in the x/z plane, centered on the origin, with the bottom row of the rendered board closest
to the camera. Grid placement comes from the same coordinate mapper as the flat presenter.
"""

import math
from dataclasses import dataclass
from typing import Optional

from src.chess.coords import RenderCoord, render_coord_to_square, square_to_render_coord
from src.chess.pieces import Piece
from src.chess.square import ALL_SQUARES, BOARD_SIZE, Square
from src.core.shared_types import PieceKind
from src.interaction.selection import Selected
from src.interaction.session import GameSession, SessionSnapshot
from src.presenters.base import BoardPresenter

Vector3 = tuple[float, float, float]

# Mesh height per piece kind, so pieces sit on top of the tiles
PIECE_HEIGHTS: dict[PieceKind, float] = {
    PieceKind.PAWN: 0.5,
    PieceKind.KNIGHT: 0.7,
    PieceKind.BISHOP: 0.8,
    PieceKind.ROOK: 0.6,
    PieceKind.QUEEN: 0.9,
    PieceKind.KING: 1.0,
}

CAMERA_POSITION: Vector3 = (0.0, 9.0, 7.0)
CAMERA_TARGET: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SceneLayout:
    square_size: float = 1.0
    tile_thickness: float = 0.1

    def cell_center(self, coord: RenderCoord) -> tuple[float, float]:
        """(x, z) world position of the center of a grid cell"""
        x, y = coord
        half = BOARD_SIZE / 2
        return (x + 0.5 - half) * self.square_size, (y + 0.5 - half) * self.square_size

    def pick_cell(self, world_x: float, world_z: float) -> Optional[RenderCoord]:
        """Inverse of cell_center for any point on the board plane. None when off the board."""
        half = BOARD_SIZE / 2
        col = math.floor(world_x / self.square_size + half)
        row = math.floor(world_z / self.square_size + half)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return col, row


@dataclass(frozen=True)
class TileNode:
    square: Square
    position: Vector3
    material: str


@dataclass(frozen=True)
class PieceNode:
    square: Square
    piece: Piece
    position: Vector3
    height: float
    highlighted: bool


@dataclass(frozen=True)
class MarkerNode:
    """Legal destination hint. Captures get a ring instead of a dot."""

    square: Square
    position: Vector3
    shape: str


@dataclass(frozen=True)
class Scene:
    tiles: tuple[TileNode, ...]
    pieces: tuple[PieceNode, ...]
    markers: tuple[MarkerNode, ...]
    camera_position: Vector3 = CAMERA_POSITION
    camera_target: Vector3 = CAMERA_TARGET


def _tile_material(square: Square, origin: Optional[Square], last_squares: set[Square]) -> str:
    if square == origin:
        return "selected"
    if square in last_squares:
        return "last-move"
    return "light" if square.is_light() else "dark"


def build_scene(snapshot: SessionSnapshot, layout: SceneLayout) -> Scene:
    selection = snapshot.selection
    origin = selection.origin if isinstance(selection, Selected) else None
    last = snapshot.last_move
    last_squares = {last.from_square, last.to_square} if last else set()
    top = layout.tile_thickness

    tiles: list[TileNode] = []
    pieces: list[PieceNode] = []
    markers: list[MarkerNode] = []
    for square in ALL_SQUARES:
        x, z = layout.cell_center(square_to_render_coord(square, snapshot.orientation))
        tiles.append(
            TileNode(
                square=square,
                position=(x, 0.0, z),
                material=_tile_material(square, origin, last_squares),
            )
        )

        piece = snapshot.pieces.get(square)
        if piece is not None:
            pieces.append(
                PieceNode(
                    square=square,
                    piece=piece,
                    position=(x, top, z),
                    height=PIECE_HEIGHTS[piece.kind] * layout.square_size,
                    highlighted=square == origin,
                )
            )

        if square in selection.legal_destinations:
            markers.append(
                MarkerNode(
                    square=square,
                    position=(x, top, z),
                    shape="ring" if piece is not None else "dot",
                )
            )

    return Scene(tiles=tuple(tiles), pieces=tuple(pieces), markers=tuple(markers))


class ScenePresenter(BoardPresenter):
    def __init__(self, session: GameSession, layout: Optional[SceneLayout] = None) -> None:
        self.layout = layout or SceneLayout()
        self.scene: Optional[Scene] = None
        super().__init__(session)

    def _build(self, snapshot: SessionSnapshot) -> None:
        self.scene = build_scene(snapshot, self.layout)

    # --- INPUT ---
    def pick(self, world_x: float, world_z: float) -> Optional[Square]:
        """Ray hit on the board plane, already projected to (x, z). Misses are ignored."""
        coord = self.layout.pick_cell(world_x, world_z)
        if coord is None:
            return None
        square = render_coord_to_square(coord, self.session.orientation)
        self.click_square(square)
        return square

    # --- VIEW HELPERS ---
    def piece_node_at(self, square: Square) -> Optional[PieceNode]:
        assert self.scene is not None
        for node in self.scene.pieces:
            if node.square == square:
                return node
        return None
