# flake8: noqa

import chess

############
# Simplified evaluation function piece values and piece-square tables:
# https://www.chessprogramming.org/Simplified_Evaluation_Function
# Tables are written from white's point of view, first row = rank 8.
############
# Piece values indexed by piece type (0=unused, 1=PAWN, 2=KNIGHT, ..., 6=KING)
# The king value only ranks it as the worst possible attacker in MVV-LVA,
# it never takes part in material scoring.
PIECE_VALUES = (0, 100, 320, 330, 500, 900, 20000)

MOBILITY_WEIGHT = 5

# fmt: off
PAWN_TABLE = [
    [ 0,  0,   0,   0,   0,   0,  0,  0],
    [50, 50,  50,  50,  50,  50, 50, 50],
    [10, 10,  20,  30,  30,  20, 10, 10],
    [ 5,  5,  10,  25,  25,  10,  5,  5],
    [ 0,  0,   0,  20,  20,   0,  0,  0],
    [ 5, -5, -10,   0,   0, -10, -5,  5],
    [ 5, 10,  10, -20, -20,  10, 10,  5],
    [ 0,  0,   0,   0,   0,   0,  0,  0]]

KNIGHT_TABLE = [
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50]]

BISHOP_TABLE = [
    [-20, -10, -10, -10, -10, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,  10,  10,   5,   0, -10],
    [-10,   5,   5,  10,  10,   5,   5, -10],
    [-10,   0,  10,  10,  10,  10,   0, -10],
    [-10,  10,  10,  10,  10,  10,  10, -10],
    [-10,   5,   0,   0,   0,   0,   5, -10],
    [-20, -10, -10, -10, -10, -10, -10, -20]]

ROOK_TABLE = [
    [ 0,  0,  0,  0,  0,  0,  0,  0],
    [ 5, 10, 10, 10, 10, 10, 10,  5],
    [-5,  0,  0,  0,  0,  0,  0, -5],
    [-5,  0,  0,  0,  0,  0,  0, -5],
    [-5,  0,  0,  0,  0,  0,  0, -5],
    [-5,  0,  0,  0,  0,  0,  0, -5],
    [-5,  0,  0,  0,  0,  0,  0, -5],
    [ 0,  0,  0,  5,  5,  0,  0,  0]]

QUEEN_TABLE = [
    [-20, -10, -10, -5, -5, -10, -10, -20],
    [-10,   0,   0,  0,  0,   0,   0, -10],
    [-10,   0,   5,  5,  5,   5,   0, -10],
    [ -5,   0,   5,  5,  5,   5,   0,  -5],
    [  0,   0,   5,  5,  5,   5,   0,  -5],
    [-10,   5,   5,  5,  5,   5,   0, -10],
    [-10,   0,   5,  0,  0,   0,   0, -10],
    [-20, -10, -10, -5, -5, -10, -10, -20]]

KING_TABLE = [
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-20, -30, -30, -40, -40, -30, -30, -20],
    [-10, -20, -20, -20, -20, -20, -20, -10],
    [ 20,  20,   0,   0,   0,   0,  20,  20],
    [ 20,  30,  10,   0,   0,  10,  30,  20]]
# fmt: on

WHITE_TABLES = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
    chess.ROOK: ROOK_TABLE,
    chess.QUEEN: QUEEN_TABLE,
    chess.KING: KING_TABLE,
}


def _square_table(rows: list[list[int]]) -> list[int]:
    """
    Flattens a table written rank 8 first into a list indexed by
    python-chess squares (a1=0, h8=63).
    """
    return [
        rows[7 - chess.square_rank(square)][chess.square_file(square)]
        for square in chess.SQUARES
    ]


# PST[color][piece_type][square]. The black tables are the vertical mirror
# of the white ones, so scoring never flips the looked up value again.
PST = {
    chess.WHITE: {pt: _square_table(rows) for pt, rows in WHITE_TABLES.items()},
    chess.BLACK: {
        pt: _square_table(rows[::-1]) for pt, rows in WHITE_TABLES.items()
    },
}


def piece_score(piece: chess.Piece, square: chess.Square) -> int:
    """
    Material plus positional value of a single piece, always positive
    regardless of its colour.
    """
    material = 0 if piece.piece_type == chess.KING else PIECE_VALUES[piece.piece_type]
    return material + PST[piece.color][piece.piece_type][square]


def material_evaluation(board: chess.Board) -> int:
    """
    Material and piece-square score of the board, white minus black.
    Used as the stand-pat score of the quiescence search.

    Arguments:
        - board: current board state.

    Returns:
        - score(int): centipawns, positive favours white.
    """
    score = 0
    for square, piece in board.piece_map().items():
        if piece.color == chess.WHITE:
            score += piece_score(piece, square)
        else:
            score -= piece_score(piece, square)
    return score


def board_evaluation(board: chess.Board, mobility_weight: int = MOBILITY_WEIGHT) -> int:
    """
    This functions receives a board and assigns a value to it, it acts as
    an evaluation function of the current state for this game. It returns
    the material/positional sum plus the mobility of the side to move.

    Only the side to move has its mobility counted, the term is added
    for white and subtracted for black.

    Arguments:
        - board: current board state.
        - mobility_weight: centipawns per legal move.

    Returns:
        - total_value(int): centipawns, positive favours white.
    """
    score = material_evaluation(board)
    mobility = board.legal_moves.count() * mobility_weight
    if board.turn == chess.WHITE:
        score += mobility
    else:
        score -= mobility
    return score


def count_material(board: chess.Board) -> int:
    """
    Sum of the base values of every knight, bishop, rook and queen on the
    board (both colours). Kings and pawns never count.
    """
    material = 0
    for piece in board.piece_map().values():
        if piece.piece_type not in (chess.PAWN, chess.KING):
            material += PIECE_VALUES[piece.piece_type]
    return material


def capture_value(board: chess.Board, move: chess.Move) -> int:
    """
    Most valuable victim / least valuable aggressor score of a capture:
    10 * victim value - attacker value. En passant victims are pawns.
    """
    attacker = board.piece_at(move.from_square)
    if board.is_en_passant(move):
        victim_type = chess.PAWN
    else:
        victim = board.piece_at(move.to_square)
        victim_type = victim.piece_type if victim is not None else chess.PAWN
    attacker_value = PIECE_VALUES[attacker.piece_type] if attacker is not None else 0
    return 10 * PIECE_VALUES[victim_type] - attacker_value
