import logging
import sys
from typing import Optional

from chess import WHITE, Board, STARTING_FEN

from gambit.config import Config
from gambit.difficulty import parse_difficulty
from gambit.errors import InvalidDifficulty
from gambit.helper import find_best_move, get_engine

# UCI based on Sunfish Engine: https://github.com/thomasahle/sunfish/blob/master/uci.py

logger = logging.getLogger(__name__)


def _parse_go_params(params: list[str]) -> dict[str, int]:
    """Parse 'go' command parameters into a dict."""
    result: dict[str, int] = {}
    i = 0
    while i < len(params):
        key = params[i]
        if key in ("wtime", "btime", "winc", "binc", "movetime", "movestogo"):
            if i + 1 < len(params):
                try:
                    result[key] = int(params[i + 1])
                except ValueError:
                    pass
                i += 2
                continue
        elif key == "infinite":
            result["infinite"] = 1
        i += 1
    return result


def _calculate_time_limit(
    go_params: dict[str, int], side_to_move_is_white: bool
) -> Optional[float]:
    """
    Calculate time limit in seconds from UCI go parameters.
    Returns None if the search should run to completion.
    """
    # Fixed time per move (movetime)
    if "movetime" in go_params:
        return go_params["movetime"] / 1000.0

    # Clock-based time management
    time_key = "wtime" if side_to_move_is_white else "btime"
    inc_key = "winc" if side_to_move_is_white else "binc"

    if time_key in go_params:
        remaining_ms = go_params[time_key]
        increment_ms = go_params.get(inc_key, 0)
        moves_to_go = go_params.get("movestogo", 30)

        # Allocate time: remaining / moves_to_go + most of the increment
        time_for_move_ms = remaining_ms / moves_to_go + increment_ms * 0.8

        # Don't use more than 25% of remaining time on one move
        time_for_move_ms = min(time_for_move_ms, remaining_ms * 0.25)

        return max(time_for_move_ms, 10) / 1000.0

    return None


def _parse_position(uci_command: str) -> Board:
    """Build the board described by a 'position' command."""
    uci_parameters = uci_command.split(" ")
    moves_idx = uci_command.find("moves")

    # get moves from UCI command
    if moves_idx >= 0:
        moveslist = uci_command[moves_idx:].split()[1:]
    else:
        moveslist = []

    # get FEN from uci command
    if len(uci_parameters) > 1 and uci_parameters[1] == "fen":
        if moves_idx >= 0:
            fenpart = uci_command[:moves_idx]
            _, _, fen = fenpart.split(" ", 2)
        else:
            fen = " ".join(uci_parameters[2:])
    elif len(uci_parameters) > 1 and uci_parameters[1] == "startpos":
        fen = STARTING_FEN
    else:
        raise SyntaxError("UCI Syntax error.")

    # start board and make moves
    board = Board(fen.strip())
    for move in moveslist:
        board.push_uci(move)
    return board


def _set_option(config: Config, uci_command: str) -> None:
    """Handle 'setoption name <name> value <value>'."""
    _, _, rest = uci_command.partition("name")
    name, _, value = rest.partition("value")
    name = name.strip().lower()
    value = value.strip()

    if name == "difficulty":
        try:
            config.difficulty = parse_difficulty(value).name
        except InvalidDifficulty:
            logger.warning("ignoring unknown difficulty %r", value)
    else:
        logger.warning("ignoring unknown option %r", name)


def main(config: Config):
    """
    Start the command line user interface (UCI based).
    """
    # init board and engine
    board = Board()
    engine = get_engine(config)

    # keep listening to UCI commands
    while True:
        # get command from stdin
        uci_command = input().strip()

        if uci_command == "quit":
            sys.exit()

        elif uci_command == "uci":
            # engine details
            print("id name gambit")
            print("id author gambit developers")
            print(
                "option name Difficulty type combo default medium"
                " var easy var medium var hard"
            )
            print("uciok")

        elif uci_command == "isready":
            # engine ready to receive commands
            print("readyok")

        elif uci_command == "ucinewgame":
            # start new game
            board = Board()

        elif uci_command.startswith("setoption"):
            _set_option(config, uci_command)

        elif uci_command.startswith("position"):
            board = _parse_position(uci_command)

        elif uci_command.startswith("go"):
            go_params = _parse_go_params(uci_command.split(" ")[1:])

            # Calculate time limit from go parameters
            time_limit = _calculate_time_limit(go_params, board.turn == WHITE)

            best_move = find_best_move(
                board=board,
                engine=engine,
                difficulty=config.difficulty,
                time_limit=time_limit,
            )
            # UCI's null move when there is nothing to play
            print(f"bestmove {best_move.uci() if best_move else '0000'}")
