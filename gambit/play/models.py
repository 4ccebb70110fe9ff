"""Data models shared by the game session, the HTTP server and the client."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class GameStatus(Enum):
    playing = "playing"
    checkmate = "checkmate"
    stalemate = "stalemate"
    draw = "draw"


@dataclass
class GameStats:
    """
    Observable state of a game.

    Attributes:
        fen: Board position in FEN notation
        status: "playing", "checkmate", "stalemate" or "draw"
        turn: "white" or "black", the side to move
        in_check: Whether the side to move is in check
        history: Moves played so far in SAN
        winner: "white" or "black" after a checkmate, None otherwise
        last_move: Last move played in UCI format
        legal_moves: Legal moves for the side to move in UCI format
    """

    fen: str
    status: str
    turn: str
    in_check: bool = False
    history: List[str] = field(default_factory=list)
    winner: Optional[str] = None
    last_move: Optional[str] = None
    legal_moves: List[str] = field(default_factory=list)
