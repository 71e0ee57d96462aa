"""Input and snapshot bookkeeping shared by every board presenter."""

from typing import Optional

from src.chess.square import Square
from src.core.shared_types import PieceKind
from src.interaction.promotion import PromotionOption
from src.interaction.session import GameSession, SessionSnapshot


class BoardPresenter:
    """
    Subscribes to a session and keeps the latest snapshot.

    Subclasses turn each snapshot into their own view in `_build`, and translate their own hit-testing
    into `click_square` calls. Anything they need in `_build` must exist before calling this __init__,
    since subscribing renders straight away.
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.snapshot: Optional[SessionSnapshot] = None
        self.render_count = 0
        session.subscribe(self.render)

    def render(self, snapshot: SessionSnapshot) -> None:
        self.snapshot = snapshot
        self._build(snapshot)
        self.render_count += 1

    def _build(self, snapshot: SessionSnapshot) -> None:
        raise NotImplementedError

    # --- INPUT ---
    def click_square(self, square: Square) -> None:
        self.session.click(square)

    def pick_promotion(self, kind: PieceKind) -> None:
        self.session.choose_promotion(kind)

    # --- VIEW HELPERS ---
    def promotion_options(self) -> list[PromotionOption]:
        """Choices shown in the promotion dialog, empty when no promotion is pending"""
        if self.snapshot is None or self.snapshot.promotion is None:
            return []
        return self.snapshot.promotion.options()
