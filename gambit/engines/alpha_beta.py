import logging
import random
import time
from typing import Optional

from chess import WHITE, Board, Move

from gambit.config import Config
from gambit.difficulty import configure, parse_difficulty, SearchConfig
from gambit.engines.random import choice
from gambit.errors import RulesEngineInvariantViolation
from gambit.evaluation.base import Evaluator
from gambit.evaluation.classical import ClassicalEvaluator
from gambit.move_ordering import (
    organize_moves,
    organize_moves_quiescence,
    organize_root_moves,
)

logger = logging.getLogger(__name__)

INF = float("inf")
NEG_INF = float("-inf")


class AlphaBeta:
    """
    A class that implements minimax search with alpha-beta pruning and
    a capture-only quiescence extension.

    Scores are absolute: white maximizes, black minimizes. The board is
    mutated in place, every push is undone before the next sibling is
    searched.
    """

    def __init__(self, config: Config, evaluator: Optional[Evaluator] = None):
        self.config = config
        self.evaluator = evaluator or ClassicalEvaluator(config.mobility_weight)
        self.rng = random.Random(config.seed)
        self.nodes: int = 0
        self._deadline: Optional[float] = None

    def random_move(self, board: Board) -> Move:
        move = choice([move for move in board.legal_moves], self.rng)
        return move

    def eval_board(self, board: Board) -> int:
        """
        This function evaluates the board based on the current
        position of the pieces and returns a score for the board.

        Arguments:
            - board: chess board state

        Returns:
            - score: the score for the current board, positive favours white
        """
        return self.evaluator.evaluate(board)

    def out_of_time(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def quiescence_search(
        self,
        board: Board,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> float:
        """
        This functions extends our search at the horizon by only looking
        at capturing moves, until the position is quiet. Every capture
        removes a piece so the recursion always ends.

        Arguments:
            - board: chess board state
            - alpha: best score for the maximizing player (best choice
                (highest value)  we've found along the path for max)
            - beta: best score for the minimizing player (best choice
                (lowest value) we've found along the path for min).
            - maximizing: whether the side to move is the maximizing one

        Returns:
            - bound: alpha when maximizing, beta otherwise (fail-hard).
        """
        self.nodes += 1

        # the side to move may always decline to capture
        stand_pat = self.evaluator.stand_pat(board)
        if maximizing:
            if stand_pat >= beta:
                return beta
            alpha = max(alpha, stand_pat)
        else:
            if stand_pat <= alpha:
                return alpha
            beta = min(beta, stand_pat)

        for move in organize_moves_quiescence(board):
            board.push(move)
            score = self.quiescence_search(board, alpha, beta, not maximizing)
            board.pop()

            if maximizing:
                if score >= beta:
                    return beta
                alpha = max(alpha, score)
            else:
                if score <= alpha:
                    return alpha
                beta = min(beta, score)

        return alpha if maximizing else beta

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        use_quiescence: bool,
    ) -> float:
        """
        This functions receives a board and a depth and returns the value
        of the board looking `depth` plies ahead. Alpha and beta are used
        to prune the search tree.

        Arguments:
            - board: chess board state
            - depth: how many depths we want to calculate for this board
            - alpha: best score for the maximizing player
            - beta: best score for the minimizing player
            - maximizing: whether white (maximizing) is to move
            - use_quiescence: run the quiescence search at the horizon
                instead of the static evaluation

        Returns:
            - best_score: value of the board.
        """
        self.nodes += 1

        # recursion base case
        if depth == 0:
            if use_quiescence:
                return self.quiescence_search(board, alpha, beta, maximizing)
            return self.eval_board(board)

        if board.is_game_over():
            if board.is_checkmate():
                # more remaining depth means a closer mate
                mate_score = self.config.checkmate_score + depth
                return -mate_score if maximizing else mate_score
            return 0

        best_score = NEG_INF if maximizing else INF

        for move_index, move in enumerate(organize_moves(board)):
            if move_index > 0 and self.out_of_time():
                break

            board.push(move)
            board_score = self.minimax(
                board, depth - 1, alpha, beta, not maximizing, use_quiescence
            )
            board.pop()

            if maximizing:
                best_score = max(best_score, board_score)
                alpha = max(alpha, board_score)
            else:
                best_score = min(best_score, board_score)
                beta = min(beta, board_score)

            # remaining siblings can't influence the decision anymore
            if beta <= alpha:
                break

        return best_score

    def check_root_moves(self, board: Board, moves: list[Move]) -> None:
        """
        Makes sure every move the rules engine offered at the root can be
        played. Anything else means the board and the move generator
        disagree, and no result of this search could be trusted.
        """
        for move in moves:
            if not board.is_legal(move):
                logger.error(
                    "rules engine offered illegal move %s in %s", move, board.fen()
                )
                raise RulesEngineInvariantViolation(
                    f"move {move} was generated as legal but can't be played "
                    f"in {board.fen()}"
                )

    def search_move(
        self,
        board: Board,
        search_config: Optional[SearchConfig] = None,
        time_limit: Optional[float] = None,
    ) -> Optional[Move]:
        """
        Root driver: searches every legal move and returns the best one
        for the side to move, or None when there is no legal move.

        Moves that tie keep the first one found, so the (possibly
        randomized) root ordering decides between equal moves.

        Arguments:
            - board: chess board state, left unchanged on return
            - search_config: depth, quiescence and randomization. Defaults
                to the configured difficulty.
            - time_limit: seconds, overrides config.time_limit. When it
                runs out the best move found so far is returned.

        Returns:
            - best_move: the move to play next.
        """
        if search_config is None:
            search_config = configure(
                parse_difficulty(self.config.difficulty),
                board,
                self.config.endgame_material_threshold,
            )
        if time_limit is None:
            time_limit = self.config.time_limit

        self.nodes = 0
        self._deadline = time.monotonic() + time_limit if time_limit else None

        moves = organize_root_moves(
            board, self.rng if search_config.randomize else None
        )
        if not moves:
            return None
        self.check_root_moves(board, moves)

        maximizing = board.turn == WHITE
        depth = max(search_config.depth - 1, 0)
        best_move = None
        best_score = NEG_INF if maximizing else INF

        for move_index, move in enumerate(moves):
            if move_index > 0 and self.out_of_time():
                logger.debug("time limit reached after %d root moves", move_index)
                break

            # the incumbent bounds the window, a move has to beat it strictly
            alpha, beta = (best_score, INF) if maximizing else (NEG_INF, best_score)

            board.push(move)
            board_score = self.minimax(
                board,
                depth,
                alpha,
                beta,
                not maximizing,
                search_config.use_quiescence,
            )
            board.pop()

            if maximizing and board_score > best_score:
                best_score, best_move = board_score, move
            elif not maximizing and board_score < best_score:
                best_score, best_move = board_score, move

        if best_move is None:
            best_move = moves[0]

        self._deadline = None
        logger.debug(
            "best move %s score %s depth %d nodes %d",
            best_move,
            best_score,
            search_config.depth,
            self.nodes,
        )
        return best_move
