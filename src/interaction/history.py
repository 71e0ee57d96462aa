"""
Ordered record of committed moves.

The log does no validation of its own: it mirrors the rules engine's move counter,
so the session only touches it right after a successful apply / undo / reset on the engine.
"""

from typing import Iterator, Optional

from src.chess.engine import Move


class HistoryLog:
    def __init__(self) -> None:
        self._moves: list[Move] = []

    def append(self, move: Move) -> None:
        self._moves.append(move)

    def truncate_last(self) -> None:
        if self._moves:
            self._moves.pop()

    def clear(self) -> None:
        self._moves.clear()

    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def san_list(self) -> list[str]:
        return [move.san for move in self._moves]

    def numbered_rows(self) -> list[str]:
        """Move list as displayed: '1. e4 e5', '2. Nf3', ..."""
        sans = self.san_list()
        rows: list[str] = []
        for idx in range(0, len(sans), 2):
            rows.append(f"{idx // 2 + 1}. {' '.join(sans[idx : idx + 2])}")
        return rows

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)
