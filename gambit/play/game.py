"""A single game of chess, against the computer or between two humans."""

import logging
from enum import Enum
from typing import Optional, Union

import chess

from gambit.config import Config
from gambit.difficulty import Difficulty, parse_difficulty
from gambit.errors import IllegalMove
from gambit.helper import find_best_move, get_engine
from .models import GameStats, GameStatus

logger = logging.getLogger(__name__)


class GameMode(Enum):
    ai = "ai"
    friend = "friend"


def color_name(color: chess.Color) -> str:
    return "white" if color == chess.WHITE else "black"


class GameSession:
    """
    Owns the board of one game and lets the computer answer the human.

    In `ai` mode the computer plays `ai_color` (black by default) and
    human moves are refused while it is the computer's turn. In `friend`
    mode both sides are played through `play()`.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.ai,
        difficulty: Union[Difficulty, str, int] = Difficulty.medium,
        config: Optional[Config] = None,
        ai_color: chess.Color = chess.BLACK,
        fen: Optional[str] = None,
    ):
        self.mode = mode
        self.difficulty = parse_difficulty(difficulty)
        self.config = config or Config()
        self.ai_color = ai_color
        self.engine = get_engine(self.config)
        self._board = chess.Board(fen) if fen else chess.Board()
        self.last_move: Optional[chess.Move] = None

    @property
    def board(self) -> chess.Board:
        """A copy of the current board, mutating it doesn't affect the game."""
        return self._board.copy()

    def reset(self, fen: Optional[str] = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()
        self.last_move = None

    def is_over(self) -> bool:
        """
        Game over by the rules, or drawn by threefold repetition or the
        fifty-move rule.
        """
        board = self._board
        return board.is_game_over() or board.is_repetition(3) or board.is_fifty_moves()

    def is_ai_turn(self) -> bool:
        return self.mode is GameMode.ai and self._board.turn == self.ai_color

    def _parse_move(self, text: str) -> chess.Move:
        """
        Reads a move in UCI or SAN. A pawn reaching the last rank without a
        promotion piece is promoted to a queen.
        """
        board = self._board
        try:
            move = chess.Move.from_uci(text)
        except ValueError:
            return self._parse_san(text)

        piece = board.piece_at(move.from_square)
        last_rank = 7 if board.turn == chess.WHITE else 0
        if (
            move.promotion is None
            and piece is not None
            and piece.piece_type == chess.PAWN
            and chess.square_rank(move.to_square) == last_rank
        ):
            move = chess.Move(move.from_square, move.to_square, chess.QUEEN)

        if not board.is_legal(move):
            raise IllegalMove(f"illegal move {text} in {board.fen()}")
        return move

    def _parse_san(self, text: str) -> chess.Move:
        board = self._board
        try:
            return board.parse_san(text)
        except ValueError:
            pass
        # "a8" means "a8=Q"
        try:
            move = board.parse_san(text.rstrip("+#") + "=Q")
        except ValueError:
            raise IllegalMove(f"can't read move {text!r}") from None
        return move

    def play(self, text: str) -> chess.Move:
        """
        Plays a human move given in UCI ("e2e4") or SAN ("e4").

        Raises:
            IllegalMove: the game is over, it is the computer's turn, or the
                move is not legal here.
        """
        if self.is_over():
            raise IllegalMove("the game is over")
        if self.is_ai_turn():
            raise IllegalMove("waiting for the computer to move")

        move = self._parse_move(text)
        self._board.push(move)
        self.last_move = move
        return move

    def ai_move(self) -> Optional[chess.Move]:
        """
        Lets the computer play if it is its turn. Returns the move played,
        or None when it is not the computer's turn or the game is over.
        """
        if not self.is_ai_turn() or self.is_over():
            return None

        move = find_best_move(self._board, self.engine, self.difficulty)
        if move is None:
            return None
        logger.debug("computer plays %s", move)
        self._board.push(move)
        self.last_move = move
        return move

    def status(self) -> GameStatus:
        board = self._board
        if board.is_checkmate():
            return GameStatus.checkmate
        if board.is_stalemate():
            return GameStatus.stalemate
        if self.is_over():
            return GameStatus.draw
        return GameStatus.playing

    def history(self) -> list[str]:
        """Moves played so far, in SAN."""
        replay = self._board.root()
        history = []
        for move in self._board.move_stack:
            history.append(replay.san(move))
            replay.push(move)
        return history

    def stats(self) -> GameStats:
        board = self._board
        status = self.status()
        winner = None
        if status is GameStatus.checkmate:
            winner = color_name(not board.turn)
        return GameStats(
            fen=board.fen(),
            status=status.value,
            turn=color_name(board.turn),
            in_check=board.is_check(),
            history=self.history(),
            winner=winner,
            last_move=self.last_move.uci() if self.last_move else None,
            legal_moves=[move.uci() for move in board.legal_moves],
        )
