"""Squares, ranks, files, colours and piece types.

Squares are plain integers numbered 0 (a1) to 63 (h8); 64 marks "no square".
Ranks and files are integers 0 to 7, with 8 meaning "none".
"""

from __future__ import annotations

from enum import IntEnum

NO_RANK = 8
NO_FILE = 8
NO_SQUARE = 64

_PIECE_CHARS = " pnbrqk"


class Color(IntEnum):
    """Side to move or owner of a piece."""

    WHITE = 0
    BLACK = 1
    NO_COLOR = 2

    def __invert__(self) -> Color:
        """Return the opposing colour."""
        return Color(self ^ 1)


class PieceType(IntEnum):
    """Kind of piece, independent of colour."""

    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_char(cls, ch: str) -> PieceType:
        """Piece type named by a letter of either case; NONE for anything else."""
        index = _PIECE_CHARS.find(ch.lower()) if len(ch) == 1 else -1
        return cls(index) if index > 0 else cls.NONE

    def to_char(self, color: Color | None = None) -> str:
        """Letter for this piece: upper case for white, lower case otherwise."""
        ch = _PIECE_CHARS[self]
        return ch.upper() if color == Color.WHITE else ch


def make_square(rank: int, file: int) -> int:
    """Square index on the given rank and file."""
    return rank * 8 + file


def rank_of(sq: int) -> int:
    """Rank (0-7) of a square."""
    return sq >> 3


def file_of(sq: int) -> int:
    """File (0-7) of a square."""
    return sq & 7


def file_from_char(ch: str) -> int:
    """File named by a letter 'a'-'h' of either case."""
    return ord(ch.lower()) - ord("a")


def rank_from_char(ch: str) -> int:
    """Rank named by a digit '1'-'8'."""
    return ord(ch) - ord("1")


def square_from_string(text: str) -> int:
    """Parse a square in coordinate notation such as 'e4'."""
    if len(text) != 2:
        raise ValueError(f"invalid square {text!r}")
    file = file_from_char(text[0])
    rank = rank_from_char(text[1])
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"invalid square {text!r}")
    return make_square(rank, file)


def square_to_string(sq: int) -> str:
    """Coordinate notation of a square, such as 'e4'."""
    return chr(ord("a") + file_of(sq)) + chr(ord("1") + rank_of(sq))