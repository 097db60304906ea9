"""A chess position with its move history, built from FEN."""

from __future__ import annotations

from .board_state import BoardState
from .bitboard import square_bb
from .move import Move
from .movegen import generate_moves
from .types import (
    NO_FILE,
    NO_SQUARE,
    Color,
    PieceType,
    file_from_char,
    file_of,
    make_square,
    rank_of,
    square_from_string,
)

STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FILE_A = 0
_FILE_H = 7


class IllegalMoveError(ValueError):
    """A move in coordinate notation is not legal in the current position."""


def _parse_placement(state: BoardState, placement: str) -> None:
    square = make_square(7, _FILE_A)
    for ch in placement:
        if ch == "/":
            square = square - 16 + square % 8
        elif ch.isdigit():
            square += int(ch)
        else:
            if not 0 <= square < 64:
                raise ValueError(f"piece placement {placement!r} runs off the board")
            color = Color.BLACK if ch.islower() else Color.WHITE
            state.place_piece(PieceType.from_char(ch), square, color)
            square += 1


def _parse_castling(state: BoardState, castling: str) -> None:
    rights = state.castle_rights
    if castling == "-":
        return
    for ch in castling:
        if ch == "K":
            rights.set_kingside_rook_file(Color.WHITE, _FILE_H)
        elif ch == "Q":
            rights.set_queenside_rook_file(Color.WHITE, _FILE_A)
        elif ch == "k":
            rights.set_kingside_rook_file(Color.BLACK, _FILE_H)
        elif ch == "q":
            rights.set_queenside_rook_file(Color.BLACK, _FILE_A)
        else:
            color = Color.WHITE if ch.isupper() else Color.BLACK
            rook_file = file_from_char(ch)
            if not 0 <= rook_file < 8:
                raise ValueError(f"invalid castling field {castling!r}")
            if rook_file > file_of(state.king_square(color)):
                rights.set_kingside_rook_file(color, rook_file)
            else:
                rights.set_queenside_rook_file(color, rook_file)


def _parse_fen(fen: str) -> BoardState:
    fields = fen.split()
    if not fields:
        raise ValueError("empty FEN")
    state = BoardState()
    _parse_placement(state, fields[0])
    if len(fields) > 1:
        state.side_to_move = Color.WHITE if fields[1] == "w" else Color.BLACK
    if len(fields) > 2:
        _parse_castling(state, fields[2])
    if len(fields) > 3 and fields[3] != "-":
        state.set_en_passant_sq(square_from_string(fields[3]))
    if len(fields) > 4:
        state.fifty_moves_clock = int(fields[4])
    state.compute_masks()
    return state


def _piece_char(state: BoardState, sq: int) -> str:
    if not state.occupancy() & square_bb(sq):
        return " "
    return state.piece_type_at(sq).to_char(state.piece_color_at(sq))


def render_state(state: BoardState) -> str:
    """Text diagram of a position, rank 8 at the top."""
    lines = [
        f"{rank + 1} " + " ".join(_piece_char(state, make_square(rank, file)) for file in range(8))
        for rank in range(7, -1, -1)
    ]
    lines.append("  " + "".join(f"{chr(ord('a') + file)} " for file in range(8)))
    return "\n".join(lines)


class Board:
    """A position plus the states before it, so moves can be taken back."""

    def __init__(self, fen: str = STARTPOS_FEN) -> None:
        self._history: list[BoardState] = [_parse_fen(fen)]

    @property
    def state(self) -> BoardState:
        """The current position."""
        return self._history[-1]

    def create_move(self, uci_move: str, chess960: bool = False) -> Move:
        """The legal move written as ``uci_move``; raises IllegalMoveError otherwise."""
        for move in generate_moves(self.state):
            if move.to_uci(chess960) == uci_move:
                return move
        raise IllegalMoveError(f"cannot create illegal move {uci_move!r}")

    def make_move(self, move: Move) -> None:
        """Play a legal move."""
        state = self.state.copy()
        self._history.append(state)
        side = state.side_to_move
        enemy = ~side
        rights = state.castle_rights

        state.fifty_moves_clock += 1
        if state.en_passant_sq != NO_SQUARE:
            state.hash_key ^= _en_passant_key(state.en_passant_sq)
        state.en_passant_sq = NO_SQUARE

        if move.is_castling():
            state.remove_piece(PieceType.KING, move.from_sq, side)
            state.remove_piece(PieceType.ROOK, move.to_sq, side)
            state.place_piece(PieceType.KING, move.king_castling_to(), side)
            state.place_piece(PieceType.ROOK, move.rook_castling_to(), side)
            rights.set_kingside_rook_file(side, NO_FILE)
            rights.set_queenside_rook_file(side, NO_FILE)
            state.side_to_move = enemy
            state.compute_masks()
            return

        from_type = state.piece_type_at(move.from_sq)
        to_type = from_type

        if move.is_capture():
            state.fifty_moves_clock = 0
            target = move.to_sq
            if move.is_ep():
                target = make_square(rank_of(move.from_sq), file_of(move.to_sq))
            if move.to_sq == rights.kingside_rook(enemy):
                rights.set_kingside_rook_file(enemy, NO_FILE)
            elif move.to_sq == rights.queenside_rook(enemy):
                rights.set_queenside_rook_file(enemy, NO_FILE)
            state.remove_piece(state.piece_type_at(target), target, enemy)

        if move.is_promo():
            to_type = move.promo_type()

        state.remove_piece(from_type, move.from_sq, side)
        state.place_piece(to_type, move.to_sq, side)

        if from_type == PieceType.PAWN:
            state.fifty_moves_clock = 0
            if move.from_sq ^ move.to_sq == 16:
                state.en_passant_sq = (move.from_sq + move.to_sq) // 2
                state.hash_key ^= _en_passant_key(state.en_passant_sq)
        elif from_type == PieceType.KING:
            rights.set_kingside_rook_file(side, NO_FILE)
            rights.set_queenside_rook_file(side, NO_FILE)

        if move.from_sq == rights.kingside_rook(side):
            rights.set_kingside_rook_file(side, NO_FILE)
        elif move.from_sq == rights.queenside_rook(side):
            rights.set_queenside_rook_file(side, NO_FILE)

        state.side_to_move = enemy
        state.compute_masks()

    def undo_move(self) -> None:
        """Take back the last move played."""
        if len(self._history) <= 1:
            raise IndexError("no move to undo")
        self._history.pop()

    def __str__(self) -> str:
        return render_state(self.state)


def _en_passant_key(sq: int) -> int:
    from . import zobrist

    return zobrist.EN_PASSANT[file_of(sq)]