"""Which rooks each side may still castle with."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import NO_FILE, Color, make_square

_KINGSIDE = 0
_QUEENSIDE = 1

_FILE_C = 2
_FILE_D = 3
_FILE_F = 5
_FILE_G = 6


def _back_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def _no_rights() -> list[list[int]]:
    return [[NO_FILE, NO_FILE], [NO_FILE, NO_FILE]]


@dataclass
class CastleRights:
    """Castling rook files per colour; ``NO_FILE`` means the right is gone."""

    rook_files: list[list[int]] = field(default_factory=_no_rights)

    def can_kingside_castle(self, color: Color) -> bool:
        """Whether ``color`` still has a kingside castling rook."""
        return self.rook_files[color][_KINGSIDE] != NO_FILE

    def can_queenside_castle(self, color: Color) -> bool:
        """Whether ``color`` still has a queenside castling rook."""
        return self.rook_files[color][_QUEENSIDE] != NO_FILE

    def kingside_rook(self, color: Color) -> int:
        """Square of the kingside castling rook on the back rank."""
        return make_square(_back_rank(color), self.rook_files[color][_KINGSIDE])

    def queenside_rook(self, color: Color) -> int:
        """Square of the queenside castling rook on the back rank."""
        return make_square(_back_rank(color), self.rook_files[color][_QUEENSIDE])

    def kingside_rook_dest(self, color: Color) -> int:
        """Where the rook lands after castling kingside."""
        return make_square(_back_rank(color), _FILE_F)

    def queenside_rook_dest(self, color: Color) -> int:
        """Where the rook lands after castling queenside."""
        return make_square(_back_rank(color), _FILE_D)

    def kingside_king_dest(self, color: Color) -> int:
        """Where the king lands after castling kingside."""
        return make_square(_back_rank(color), _FILE_G)

    def queenside_king_dest(self, color: Color) -> int:
        """Where the king lands after castling queenside."""
        return make_square(_back_rank(color), _FILE_C)

    def set_kingside_rook_file(self, color: Color, file: int) -> None:
        """Set (or with ``NO_FILE`` clear) the kingside rook file."""
        self.rook_files[color][_KINGSIDE] = file

    def set_queenside_rook_file(self, color: Color, file: int) -> None:
        """Set (or with ``NO_FILE`` clear) the queenside rook file."""
        self.rook_files[color][_QUEENSIDE] = file

    def copy(self) -> CastleRights:
        """Independent copy of these rights."""
        return CastleRights([list(files) for files in self.rook_files])