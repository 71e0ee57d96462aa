"""
Session configuration.

Nothing here is read from the environment or from files: a session is configured in code by whoever creates it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Orientation

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class SessionConfig:
    orientation: Orientation = Orientation.WHITE_AT_BOTTOM
    # Only used to set up a position (puzzles, tests). Parsing is left to the rules engine.
    starting_fen: Optional[str] = None
    log_level: int = logging.INFO


def configure_logging(level: int = logging.INFO) -> None:
    """Basic handler + format for the root logger. Does nothing if the application already configured logging."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
