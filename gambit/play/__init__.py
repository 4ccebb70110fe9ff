"""Playing surface for gambit: game sessions, HTTP server and client."""

from .client import GambitClient, make_client
from .game import GameMode, GameSession
from .models import GameStats, GameStatus

__all__ = [
    "GameMode",
    "GameSession",
    "GameStats",
    "GameStatus",
    "GambitClient",
    "make_client",
]
