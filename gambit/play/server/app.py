"""FastAPI server exposing the gambit engine and a single game session."""

import logging
import threading
from typing import List, Optional

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from gambit.config import Config
from gambit.difficulty import parse_difficulty
from gambit.errors import IllegalMove, InvalidDifficulty
from gambit.helper import find_best_move, get_engine
from ..game import GameMode, GameSession

logger = logging.getLogger(__name__)


# Pydantic models for API requests/responses
class EngineMoveRequest(BaseModel):
    fen: str
    difficulty: str = "medium"


class EngineMoveResponse(BaseModel):
    move: Optional[str] = None
    san: Optional[str] = None
    fen: str


class NewGameRequest(BaseModel):
    mode: str = "ai"
    difficulty: str = "medium"
    fen: Optional[str] = None


class MoveRequest(BaseModel):
    move: str


class GameResponse(BaseModel):
    fen: str
    status: str
    turn: str
    in_check: bool = False
    history: List[str] = []
    winner: Optional[str] = None
    last_move: Optional[str] = None
    legal_moves: List[str] = []


# Create FastAPI app
app = FastAPI(
    title="gambit",
    description="Play chess against a computer opponent of selectable strength",
    version="1.0.0",
)

_config = Config.from_env()

# Global game session, one board shared by every request
_session: Optional[GameSession] = None
# handlers run in the threadpool, every session access holds this
_session_lock = threading.RLock()


def get_session() -> GameSession:
    """Get or create the game session."""
    global _session
    with _session_lock:
        if _session is None:
            _session = GameSession(difficulty=_config.difficulty, config=_config)
        return _session


def _game_response(session: GameSession) -> GameResponse:
    stats = session.stats()
    return GameResponse(
        fen=stats.fen,
        status=stats.status,
        turn=stats.turn,
        in_check=stats.in_check,
        history=stats.history,
        winner=stats.winner,
        last_move=stats.last_move,
        legal_moves=stats.legal_moves,
    )


def _parse_board(fen: Optional[str]) -> chess.Board:
    if not fen:
        return chess.Board()
    try:
        return chess.Board(fen)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


# Handlers are sync on purpose: FastAPI runs them in its threadpool, so a
# long search never blocks the event loop.
@app.post("/engine-move", response_model=EngineMoveResponse)
def engine_move(request: EngineMoveRequest):
    """Get the engine's move for a given position and difficulty."""
    board = _parse_board(request.fen)
    try:
        difficulty = parse_difficulty(request.difficulty)
    except InvalidDifficulty as e:
        raise HTTPException(status_code=400, detail=str(e))

    move = find_best_move(board, get_engine(_config), difficulty)
    if move is None:
        # no legal move: the game is already over, not an error
        return EngineMoveResponse(move=None, san=None, fen=request.fen)

    san = board.san(move)
    board.push(move)
    return EngineMoveResponse(move=move.uci(), san=san, fen=board.fen())


@app.post("/game/new", response_model=GameResponse)
def new_game(request: NewGameRequest):
    """Start a new game, replacing the current one."""
    global _session
    board = _parse_board(request.fen)
    try:
        mode = GameMode(request.mode)
        difficulty = parse_difficulty(request.difficulty)
    except (ValueError, InvalidDifficulty) as e:
        raise HTTPException(status_code=400, detail=str(e))

    with _session_lock:
        _session = GameSession(
            mode=mode, difficulty=difficulty, config=_config, fen=board.fen()
        )
        logger.info("new %s game at %s difficulty", mode.value, difficulty.name)
        return _game_response(_session)


@app.get("/game", response_model=GameResponse)
def game():
    """Get the current game state."""
    with _session_lock:
        return _game_response(get_session())


@app.post("/game/move", response_model=GameResponse)
def move(request: MoveRequest):
    """Play a human move. Against the computer, its reply is played too."""
    with _session_lock:
        session = get_session()
        try:
            session.play(request.move)
        except IllegalMove as e:
            raise HTTPException(status_code=400, detail=str(e))

        session.ai_move()
        return _game_response(session)


@app.post("/game/ai-move", response_model=GameResponse)
def ai_move():
    """Let the computer move if it is its turn."""
    with _session_lock:
        session = get_session()
        session.ai_move()
        return _game_response(session)


def main(host: str = "0.0.0.0", port: int = 8000, config: Optional[Config] = None):
    """Entry point for running the server."""
    import uvicorn

    global _config, _session
    if config is not None:
        _config = config
        _session = None

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
