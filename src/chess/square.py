"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidSquareError

BOARD_SIZE = 8
FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


@dataclass(frozen=True, order=True)
class Square:
    """file and rank both run from 0 to 7, so 'a1' is (0, 0) and 'h8' is (7, 7)"""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or sq[0] not in FILE_NAMES or sq[1] not in RANK_NAMES:
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square name.")
        return cls(FILE_NAMES.index(sq[0]), RANK_NAMES.index(sq[1]))

    def to_algebraic(self) -> str:
        if not self.is_within_bounds():
            raise InvalidSquareError(f"{self!r} is not on the board.")
        return f"{FILE_NAMES[self.file]}{RANK_NAMES[self.rank]}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_SIZE) and (0 <= self.rank < BOARD_SIZE)

    def is_light(self) -> bool:
        # a1 is a dark square
        return (self.file + self.rank) % 2 == 1

    def __str__(self) -> str:
        return self.to_algebraic()


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
)
