"""Piece placement and derived check and pin masks for one position."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import zobrist
from .attacks import (
    BISHOP_RAYS,
    KING_MOVES,
    KNIGHT_MOVES,
    PAWN_ATTACKS,
    RAY_BETWEEN,
    ROOK_RAYS,
)
from .bitboard import iter_squares, lsb, pop_count, square_bb
from .castle_rights import CastleRights
from .types import NO_SQUARE, Color, PieceType, file_of


def _empty_board() -> list[PieceType]:
    return [PieceType.NONE] * 64


@dataclass
class BoardState:
    """Everything that describes one position, plus masks derived from it.

    ``checkers`` holds the enemy pieces giving check; ``ortho_pins`` and
    ``diag_pins`` hold the lines (including the pinner) along which a single
    piece stands between the side to move's king and an enemy slider.
    """

    piece_bbs: list[int] = field(default_factory=lambda: [0] * 6)
    side_bbs: list[int] = field(default_factory=lambda: [0, 0])
    piece_type_on_sq: list[PieceType] = field(default_factory=_empty_board)
    side_to_move: Color = Color.WHITE
    en_passant_sq: int = NO_SQUARE
    castle_rights: CastleRights = field(default_factory=CastleRights)
    fifty_moves_clock: int = 0
    hash_key: int = 0
    ortho_pins: int = 0
    diag_pins: int = 0
    checkers: int = 0

    def place_piece(self, piece_type: PieceType, sq: int, color: Color) -> None:
        """Put a piece on a square and update the hash."""
        if piece_type == PieceType.NONE:
            raise ValueError("cannot place an empty piece")
        bit = square_bb(sq)
        self.piece_type_on_sq[sq] = PieceType(piece_type)
        self.piece_bbs[piece_type - 1] |= bit
        self.side_bbs[color] |= bit
        self.hash_key ^= zobrist.PIECES[piece_type - 1][color][sq]

    def remove_piece(self, piece_type: PieceType, sq: int, color: Color) -> None:
        """Take a piece off a square and update the hash."""
        if piece_type == PieceType.NONE:
            raise ValueError("cannot remove an empty piece")
        bit = square_bb(sq)
        self.piece_type_on_sq[sq] = PieceType.NONE
        self.piece_bbs[piece_type - 1] &= ~bit
        self.side_bbs[color] &= ~bit
        self.hash_key ^= zobrist.PIECES[piece_type - 1][color][sq]

    def set_en_passant_sq(self, sq: int) -> None:
        """Set the en passant target square and update the hash."""
        if 0 <= self.en_passant_sq < 64:
            self.hash_key ^= zobrist.EN_PASSANT[file_of(sq)]
        self.en_passant_sq = sq
        self.hash_key ^= zobrist.EN_PASSANT[file_of(sq)]

    def occupancy(self, color: Optional[Color] = None) -> int:
        """Occupied squares, of one colour or of both."""
        if color is None:
            return self.side_bbs[Color.WHITE] | self.side_bbs[Color.BLACK]
        return self.side_bbs[color]

    def pieces(self, piece_type: PieceType, color: Optional[Color] = None) -> int:
        """Squares holding pieces of a type, of one colour or of both."""
        bb = self.piece_bbs[piece_type - 1]
        if color is not None:
            bb &= self.side_bbs[color]
        return bb

    def king_square(self, color: Color) -> int:
        """Square of the king of ``color``, or 64 if it has none."""
        return lsb(self.pieces(PieceType.KING, color))

    def piece_type_at(self, sq: int) -> PieceType:
        """Piece type on a square; NONE if empty."""
        return self.piece_type_on_sq[sq]

    def piece_color_at(self, sq: int) -> Color:
        """Colour of the piece on an occupied square."""
        if self.piece_type_on_sq[sq] == PieceType.NONE:
            raise ValueError(f"square {sq} is empty")
        return Color.WHITE if self.side_bbs[Color.WHITE] & square_bb(sq) else Color.BLACK

    def compute_masks(self) -> None:
        """Recompute checkers and pin lines for the side to move."""
        us = self.side_to_move
        them = ~us
        self.checkers = self.diag_pins = self.ortho_pins = 0
        our_king = self.king_square(us)
        if our_king >= 64:
            return

        queens = self.pieces(PieceType.QUEEN, them)
        ortho = self.pieces(PieceType.ROOK, them) | queens
        diag = self.pieces(PieceType.BISHOP, them) | queens
        occ = self.occupancy()

        for pinner in iter_squares(BISHOP_RAYS[our_king] & diag):
            line = RAY_BETWEEN[our_king][pinner]
            blockers = pop_count(occ & line)
            if blockers == 0:
                self.checkers |= square_bb(pinner)
            elif blockers == 1:
                self.diag_pins |= line | square_bb(pinner)

        for pinner in iter_squares(ROOK_RAYS[our_king] & ortho):
            line = RAY_BETWEEN[our_king][pinner]
            blockers = pop_count(occ & line)
            if blockers == 0:
                self.checkers |= square_bb(pinner)
            elif blockers == 1:
                self.ortho_pins |= line | square_bb(pinner)

        self.checkers |= self.pieces(PieceType.KNIGHT, them) & KNIGHT_MOVES[our_king]
        self.checkers |= self.pieces(PieceType.KING, them) & KING_MOVES[our_king]
        self.checkers |= self.pieces(PieceType.PAWN, them) & PAWN_ATTACKS[our_king][us]

    def copy(self) -> BoardState:
        """Independent copy of this state."""
        return BoardState(
            piece_bbs=list(self.piece_bbs),
            side_bbs=list(self.side_bbs),
            piece_type_on_sq=list(self.piece_type_on_sq),
            side_to_move=self.side_to_move,
            en_passant_sq=self.en_passant_sq,
            castle_rights=self.castle_rights.copy(),
            fifty_moves_clock=self.fifty_moves_clock,
            hash_key=self.hash_key,
            ortho_pins=self.ortho_pins,
            diag_pins=self.diag_pins,
            checkers=self.checkers,
        )