"""Custom exceptions. Every layer raises (or returns) something derived from GameError."""


class GameError(Exception):
    """Top-level exception for anything that went wrong while playing."""


class IllegalMoveError(GameError):
    """The rules engine does not accept the move in the current position."""


class InvalidSquareError(GameError):
    """Square label or coordinate does not exist on the board."""


class PromotionError(GameError):
    """Promotion choice made while no promotion is pending, or for a kind that is not on offer."""


class InvalidRequestError(GameError, ValueError):
    """Request data could not be interpreted. (ValueError so that pydantic validators wrap it.)"""
