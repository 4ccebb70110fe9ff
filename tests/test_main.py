import pytest

from gambit import main as gambit_main
from gambit.config import Config
from gambit.mode import uci
from gambit.play.server import app as app_module


def test_config_defaults() -> None:
    config = Config()
    assert config.algorithm == "alpha_beta"
    assert config.difficulty == "medium"
    assert config.mobility_weight == 5
    assert config.checkmate_score == 100000
    assert config.easy_random_move_rate == 0.6
    assert config.endgame_material_threshold == 1200
    assert config.time_limit is None


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GAMBIT_ALGORITHM", "random")
    monkeypatch.setenv("GAMBIT_DIFFICULTY", "hard")
    monkeypatch.setenv("GAMBIT_SEED", "42")
    monkeypatch.setenv("GAMBIT_TIME_LIMIT", "1.5")
    monkeypatch.setenv("GAMBIT_LOG_LEVEL", "debug")

    config = Config.from_env()
    assert config.algorithm == "random"
    assert config.difficulty == "hard"
    assert config.seed == 42
    assert config.time_limit == 1.5
    assert config.log_level == "DEBUG"


def test_parse_args_defaults_follow_env(monkeypatch) -> None:
    monkeypatch.setenv("GAMBIT_DIFFICULTY", "easy")
    args = gambit_main.parse_args([])
    assert args.mode == "uci"
    assert args.difficulty == "easy"
    assert args.seed is None


def test_build_config() -> None:
    args = gambit_main.parse_args(
        ["--difficulty", "hard", "--seed", "3", "--time-limit", "0.5"]
        + ["--log-level", "info"]
    )
    config = gambit_main.build_config(args)
    assert config == Config(
        difficulty="hard", seed=3, time_limit=0.5, log_level="INFO"
    )


def test_parse_args_rejects_unknown_difficulty() -> None:
    with pytest.raises(SystemExit):
        gambit_main.parse_args(["--difficulty", "impossible"])


def test_main_starts_uci(monkeypatch) -> None:
    started = []
    monkeypatch.setattr(uci, "main", started.append)
    gambit_main.main(["--seed", "7"])
    assert started == [Config(seed=7)]


def test_main_starts_api(monkeypatch) -> None:
    started = []
    monkeypatch.setattr(
        app_module, "main", lambda **kwargs: started.append(kwargs)
    )
    gambit_main.main(["--mode", "api", "--port", "9000", "--difficulty", "easy"])
    assert started == [
        {"host": "0.0.0.0", "port": 9000, "config": Config(difficulty="easy")}
    ]
