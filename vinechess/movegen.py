"""Legal move generation."""

from __future__ import annotations

from .attacks import (
    BISHOP_RAYS,
    KING_MOVES,
    KNIGHT_MOVES,
    RAY_BETWEEN,
    ROOK_RAY_BETWEEN,
    ROOK_RAYS,
    bishop_attacks,
    pawn_attacks,
    rook_attacks,
)
from .bitboard import (
    ALL_SET,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    iter_squares,
    lsb,
    pop_count,
    rank_mask,
    rotl,
    shift,
    square_bb,
)
from .board_state import BoardState
from .move import Move, MoveFlag
from .types import Color, PieceType

_PROMOS = (
    MoveFlag.PROMO_KNIGHT,
    MoveFlag.PROMO_BISHOP,
    MoveFlag.PROMO_ROOK,
    MoveFlag.PROMO_QUEEN,
)
_PROMO_CAPTURES = (
    MoveFlag.PROMO_KNIGHT_CAPTURE,
    MoveFlag.PROMO_BISHOP_CAPTURE,
    MoveFlag.PROMO_ROOK_CAPTURE,
    MoveFlag.PROMO_QUEEN_CAPTURE,
)


def _build_king_superpiece() -> tuple[tuple[int, int, int], ...]:
    """Squares from which a knight, diagonal or orthogonal slider could affect king moves."""
    table = []
    for i in range(64):
        knight = bishop = rook = KING_MOVES[i]
        for sq in iter_squares(KING_MOVES[i]):
            knight |= KNIGHT_MOVES[sq]
            bishop |= BISHOP_RAYS[sq]
            rook |= ROOK_RAYS[sq]
        if i < 8 or i >= 56:
            base = 0 if i < 8 else 56
            lo1, hi1 = sorted((i, base + 2))
            lo2, hi2 = sorted((i, base + 6))
            for j in range(base, base + 8):
                if lo1 <= j <= hi1 or lo2 <= j <= hi2:
                    knight |= KNIGHT_MOVES[j]
                    bishop |= BISHOP_RAYS[j]
                    rook |= ROOK_RAYS[j]
        table.append((knight, bishop, rook))
    return tuple(table)


_KING_SUPERPIECE = _build_king_superpiece()


def _capture_flag(them: int, to: int) -> MoveFlag:
    return MoveFlag.CAPTURE_BIT if them & square_bb(to) else MoveFlag.NORMAL


def pawn_moves(state: BoardState, allowed: int = ALL_SET) -> list[Move]:
    """Legal pawn moves, with destinations restricted to ``allowed``."""
    us = state.side_to_move
    them_color = ~us
    white = us == Color.WHITE
    forward = 1 if white else -1
    step = 8 * forward

    occ = state.occupancy()
    them = state.occupancy(them_color)
    pawns = state.pieces(PieceType.PAWN, us)
    ortho_pins = state.ortho_pins
    diag_pins = state.diag_pins

    double_push_rank = rank_mask(3 if white else 4)
    promo_ranks = rank_mask(0) | rank_mask(7)
    not_promo = ~promo_ranks & ALL_SET

    horizontal_pins = ortho_pins & (((ortho_pins << 1) | (ortho_pins >> 1)) & ALL_SET)
    right_diag_pins = diag_pins & (shift(diag_pins, UP, RIGHT) | shift(diag_pins, DOWN, LEFT))
    left_diag_pins = diag_pins & ~right_diag_pins
    left_capture_pins = right_diag_pins if white else left_diag_pins
    right_capture_pins = left_diag_pins if white else right_diag_pins
    vertical_pins = ortho_pins & shift(ortho_pins, UP, 0)

    pushable = rotl(pawns & ~(diag_pins | horizontal_pins), step) & ~occ
    two_forward = rotl(pushable, step) & ~occ & double_push_rank
    left_captures = shift(rotl(pawns & ~ortho_pins & ~left_capture_pins, step), 0, LEFT) & them
    right_captures = shift(rotl(pawns & ~ortho_pins & ~right_capture_pins, step), 0, RIGHT) & them

    moves: list[Move] = []
    for to in iter_squares(pushable & not_promo & allowed):
        moves.append(Move(to - step, to))
    for to in iter_squares(two_forward & allowed):
        moves.append(Move(to - 2 * step, to))
    for to in iter_squares(pushable & promo_ranks & allowed):
        moves.extend(Move(to - step, to, flag) for flag in _PROMOS)
    for to in iter_squares(left_captures & not_promo & allowed):
        moves.append(Move(to - step + 1, to, MoveFlag.CAPTURE_BIT))
    for to in iter_squares(right_captures & not_promo & allowed):
        moves.append(Move(to - step - 1, to, MoveFlag.CAPTURE_BIT))
    for to in iter_squares(left_captures & promo_ranks & allowed):
        moves.extend(Move(to - step + 1, to, flag) for flag in _PROMO_CAPTURES)
    for to in iter_squares(right_captures & promo_ranks & allowed):
        moves.extend(Move(to - step - 1, to, flag) for flag in _PROMO_CAPTURES)

    if 0 <= state.en_passant_sq < 64:
        king_sq = state.king_square(us)
        ep_target_bb = square_bb(state.en_passant_sq) & ~(vertical_pins & them)
        ep_pawn_bb = rotl(ep_target_bb, -step)
        left_pawn = shift(ep_pawn_bb, 0, LEFT) & ~right_capture_pins & pawns
        right_pawn = shift(ep_pawn_bb, 0, RIGHT) & ~left_capture_pins & pawns

        their_queens = state.pieces(PieceType.QUEEN, them_color)
        their_diagonals = state.pieces(PieceType.BISHOP, them_color) | their_queens
        their_orthogonals = state.pieces(PieceType.ROOK, them_color) | their_queens
        for attacker in iter_squares(left_pawn | right_pawn):
            occ_after = occ ^ ep_target_bb ^ ep_pawn_bb ^ square_bb(attacker)
            if not (bishop_attacks(king_sq, occ_after) & their_diagonals) and not (
                rook_attacks(king_sq, occ_after) & their_orthogonals
            ):
                moves.append(Move(attacker, lsb(ep_target_bb), MoveFlag.EN_PASSANT))
    return moves


def knight_moves(state: BoardState, allowed: int = ALL_SET) -> list[Move]:
    """Legal knight moves, with destinations restricted to ``allowed``."""
    us = state.occupancy(state.side_to_move)
    them = state.occupancy(~state.side_to_move)
    movable = state.pieces(PieceType.KNIGHT, state.side_to_move) & ~(
        state.ortho_pins | state.diag_pins
    )
    return [
        Move(from_sq, to, _capture_flag(them, to))
        for from_sq in iter_squares(movable)
        for to in iter_squares(KNIGHT_MOVES[from_sq] & allowed & ~us)
    ]


def slider_moves(state: BoardState, allowed: int = ALL_SET) -> list[Move]:
    """Legal bishop, rook and queen moves, with destinations restricted to ``allowed``."""
    side = state.side_to_move
    occ = state.occupancy()
    us = state.occupancy(side)
    them = state.occupancy(~side)
    queens = state.pieces(PieceType.QUEEN, side)

    moves: list[Move] = []
    diagonal = (queens | state.pieces(PieceType.BISHOP, side)) & ~state.ortho_pins
    for from_sq in iter_squares(diagonal):
        from_pinned = bool(state.diag_pins & square_bb(from_sq))
        for to in iter_squares(bishop_attacks(from_sq, occ) & allowed & ~us):
            if not from_pinned or state.diag_pins & square_bb(to):
                moves.append(Move(from_sq, to, _capture_flag(them, to)))

    orthogonal = (queens | state.pieces(PieceType.ROOK, side)) & ~state.diag_pins
    for from_sq in iter_squares(orthogonal):
        from_pinned = bool(state.ortho_pins & square_bb(from_sq))
        for to in iter_squares(rook_attacks(from_sq, occ) & allowed & ~us):
            if not from_pinned or state.ortho_pins & square_bb(to):
                moves.append(Move(from_sq, to, _capture_flag(them, to)))
    return moves


def king_moves(state: BoardState, allowed: int = ALL_SET) -> list[Move]:
    """Legal king moves, castling included, with destinations restricted to ``allowed``."""
    side = state.side_to_move
    enemy = ~side
    occ = state.occupancy()
    us = state.occupancy(side)
    them = state.occupancy(enemy)
    king = state.pieces(PieceType.KING, side)
    king_sq = lsb(king)
    knight_zone, diagonal_zone, orthogonal_zone = _KING_SUPERPIECE[king_sq]
    queens = state.pieces(PieceType.QUEEN)

    for knight in iter_squares(knight_zone & state.pieces(PieceType.KNIGHT, enemy)):
        allowed &= (~KNIGHT_MOVES[knight] | square_bb(knight)) & ALL_SET
    for bishop in iter_squares(diagonal_zone & them & (state.pieces(PieceType.BISHOP) | queens)):
        allowed &= ~bishop_attacks(bishop, occ ^ king) & ALL_SET
    for rook in iter_squares(orthogonal_zone & them & (state.pieces(PieceType.ROOK) | queens)):
        allowed &= ~rook_attacks(rook, occ ^ king) & ALL_SET

    enemy_king = state.king_square(enemy)
    if enemy_king < 64:
        allowed &= ~KING_MOVES[enemy_king] & ALL_SET
    allowed &= ~pawn_attacks(state.pieces(PieceType.PAWN, enemy), enemy) & ALL_SET

    moves = [
        Move(king_sq, to, _capture_flag(them, to))
        for to in iter_squares(KING_MOVES[king_sq] & allowed & ~us)
    ]

    if state.checkers == 0:
        rights = state.castle_rights
        king_bit = square_bb(king_sq)
        sides = (
            (
                rights.can_kingside_castle(side),
                rights.kingside_rook(side),
                rights.kingside_king_dest(side),
                rights.kingside_rook_dest(side),
            ),
            (
                rights.can_queenside_castle(side),
                rights.queenside_rook(side),
                rights.queenside_king_dest(side),
                rights.queenside_rook_dest(side),
            ),
        )
        for can_castle, rook_sq, king_dest, rook_dest in sides:
            occupancy_mask = (
                ROOK_RAY_BETWEEN[king_sq][rook_sq] | square_bb(king_dest) | square_bb(rook_dest)
            ) & ~(king_bit | square_bb(rook_sq))
            path_mask = ROOK_RAY_BETWEEN[king_sq][king_dest] | square_bb(king_dest)
            if can_castle and (allowed & path_mask) == path_mask and not (occ & occupancy_mask):
                moves.append(Move(king_sq, rook_sq, MoveFlag.CASTLE))
    return moves


def generate_moves(state: BoardState) -> list[Move]:
    """Every legal move for the side to move."""
    allowed = ALL_SET
    if state.checkers:
        if pop_count(state.checkers) > 1:
            return king_moves(state)
        checker = state.checkers
        king_sq = state.king_square(state.side_to_move)
        allowed = RAY_BETWEEN[lsb(checker)][king_sq] | checker

    return (
        pawn_moves(state, allowed)
        + knight_moves(state, allowed)
        + slider_moves(state, allowed)
        + king_moves(state)
    )