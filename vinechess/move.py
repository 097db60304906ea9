"""Moves encoded as origin, destination and a flag."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .types import PieceType, make_square, rank_of, square_to_string


class MoveFlag(IntEnum):
    """Kind of move; bit 2 marks captures and bit 3 promotions."""

    NORMAL = 0b0000
    CASTLE = 0b0001
    CAPTURE_BIT = 0b0100
    EN_PASSANT = 0b0110
    PROMOTION_BIT = 0b1000
    PROMO_KNIGHT = 0b1000 | (PieceType.KNIGHT - 2)
    PROMO_BISHOP = 0b1000 | (PieceType.BISHOP - 2)
    PROMO_ROOK = 0b1000 | (PieceType.ROOK - 2)
    PROMO_QUEEN = 0b1000 | (PieceType.QUEEN - 2)
    PROMO_CAPTURE = 0b1100
    PROMO_KNIGHT_CAPTURE = 0b1100 | (PieceType.KNIGHT - 2)
    PROMO_BISHOP_CAPTURE = 0b1100 | (PieceType.BISHOP - 2)
    PROMO_ROOK_CAPTURE = 0b1100 | (PieceType.ROOK - 2)
    PROMO_QUEEN_CAPTURE = 0b1100 | (PieceType.QUEEN - 2)


@dataclass(frozen=True, slots=True)
class Move:
    """A move from one square to another.

    Castling moves are stored as king square to rook square.
    """

    from_sq: int
    to_sq: int
    flag: MoveFlag = MoveFlag.NORMAL

    def __post_init__(self) -> None:
        for sq in (self.from_sq, self.to_sq):
            if not 0 <= sq < 64:
                raise ValueError(f"square {sq} out of range")
        object.__setattr__(self, "flag", MoveFlag(self.flag))

    @property
    def raw(self) -> int:
        """16-bit packed form: flag, destination, origin."""
        return self.flag << 12 | self.to_sq << 6 | self.from_sq

    def is_capture(self) -> bool:
        """Whether the move captures a piece."""
        return bool(self.flag & MoveFlag.CAPTURE_BIT)

    def is_promo(self) -> bool:
        """Whether the move promotes a pawn."""
        return bool(self.flag & MoveFlag.PROMOTION_BIT)

    def promo_type(self) -> PieceType:
        """Piece a promoting pawn becomes."""
        if not self.is_promo():
            raise ValueError("move is not a promotion")
        return PieceType(2 + (self.flag & ~MoveFlag.PROMO_CAPTURE & 0xF))

    def is_ep(self) -> bool:
        """Whether the move is an en passant capture."""
        return self.flag == MoveFlag.EN_PASSANT

    def is_castling(self) -> bool:
        """Whether the move castles."""
        return self.flag == MoveFlag.CASTLE

    def is_null(self) -> bool:
        """Whether this is the all-zero null move."""
        return self.raw == 0

    def _castling_side_file(self, queenside_file: int, kingside_file: int) -> int:
        if not self.is_castling():
            raise ValueError("move is not castling")
        file = queenside_file if self.from_sq > self.to_sq else kingside_file
        return make_square(rank_of(self.from_sq), file)

    def king_castling_to(self) -> int:
        """Square the king ends on when castling."""
        return self._castling_side_file(2, 6)

    def rook_castling_to(self) -> int:
        """Square the rook ends on when castling."""
        return self._castling_side_file(3, 5)

    def to_uci(self, chess960: bool = False) -> str:
        """Long algebraic notation; castling goes king-to-rook only in Chess960."""
        to_sq = self.to_sq
        if self.is_castling() and not chess960:
            to_sq = self.king_castling_to()
        text = square_to_string(self.from_sq) + square_to_string(to_sq)
        if self.is_promo():
            text += self.promo_type().to_char()
        return text

    def __str__(self) -> str:
        return self.to_uci()