import chess
import pytest

from gambit.config import Config
from gambit.mode import uci


def run_uci(monkeypatch, commands: list[str], config: Config = None) -> None:
    lines = iter(commands + ["quit"])
    monkeypatch.setattr("builtins.input", lambda: next(lines))
    with pytest.raises(SystemExit):
        uci.main(config or Config(seed=0))


def test_handshake(monkeypatch, capsys) -> None:
    run_uci(monkeypatch, ["uci", "isready"])
    out = capsys.readouterr().out.splitlines()
    assert "id name gambit" in out
    assert out[-2:] == ["uciok", "readyok"]


def test_go_plays_a_legal_move(monkeypatch, capsys) -> None:
    run_uci(monkeypatch, ["position startpos moves e2e4 e7e5", "go movetime 5000"])
    out = capsys.readouterr().out.split()
    assert out[0] == "bestmove"

    board = chess.Board()
    board.push_uci("e2e4")
    board.push_uci("e7e5")
    assert chess.Move.from_uci(out[1]) in board.legal_moves


def test_go_without_legal_moves(monkeypatch, capsys) -> None:
    run_uci(monkeypatch, ["position fen R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1", "go"])
    assert capsys.readouterr().out.strip() == "bestmove 0000"


def test_setoption_difficulty(monkeypatch) -> None:
    config = Config(seed=0)
    run_uci(
        monkeypatch,
        [
            "setoption name Difficulty value Hard",
            "setoption name Difficulty value unbeatable",
            "setoption name Hash value 16",
        ],
        config,
    )
    assert config.difficulty == "hard"


def test_parse_position() -> None:
    board = uci._parse_position(
        "position fen 6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1 moves a1a8"
    )
    assert board.is_checkmate()
    assert uci._parse_position("position startpos").fen() == chess.STARTING_FEN
    with pytest.raises(SyntaxError):
        uci._parse_position("position somewhere")


def test_time_limit_from_go_params() -> None:
    params = uci._parse_go_params(["movetime", "2000"])
    assert uci._calculate_time_limit(params, True) == 2.0

    params = uci._parse_go_params(["wtime", "60000", "btime", "1000"])
    assert uci._calculate_time_limit(params, True) == 2.0
    assert uci._calculate_time_limit(params, False) == pytest.approx(1 / 30)

    params = uci._parse_go_params(["btime", "100", "movestogo", "1"])
    # never more than a quarter of the clock, never under 10ms
    assert uci._calculate_time_limit(params, False) == 0.025
    assert uci._calculate_time_limit({"btime": 1}, False) == 0.01

    assert uci._calculate_time_limit(uci._parse_go_params(["infinite"]), True) is None
    assert uci._calculate_time_limit({}, True) is None
