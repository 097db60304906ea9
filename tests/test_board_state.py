import pytest

from vinechess import zobrist
from vinechess.bitboard import square_bb
from vinechess.board_state import BoardState
from vinechess.types import NO_SQUARE, Color, PieceType, file_of, square_from_string


def sq(name):
    return square_from_string(name)


def bb(*names):
    result = 0
    for name in names:
        result |= square_bb(sq(name))
    return result


def make_state(pieces, side=Color.WHITE):
    state = BoardState(side_to_move=side)
    for name, piece, color in pieces:
        state.place_piece(piece, sq(name), color)
    state.compute_masks()
    return state


def test_place_piece_is_visible_everywhere():
    state = BoardState()
    state.place_piece(PieceType.KNIGHT, sq("g1"), Color.WHITE)
    state.place_piece(PieceType.KNIGHT, sq("b8"), Color.BLACK)
    assert state.piece_type_at(sq("g1")) == PieceType.KNIGHT
    assert state.piece_color_at(sq("g1")) == Color.WHITE
    assert state.piece_color_at(sq("b8")) == Color.BLACK
    assert state.occupancy() == bb("g1", "b8")
    assert state.occupancy(Color.WHITE) == bb("g1")
    assert state.pieces(PieceType.KNIGHT) == bb("g1", "b8")
    assert state.pieces(PieceType.KNIGHT, Color.BLACK) == bb("b8")
    assert state.pieces(PieceType.BISHOP) == 0


def test_remove_piece_restores_empty_state_and_hash():
    state = BoardState()
    state.place_piece(PieceType.QUEEN, sq("d1"), Color.WHITE)
    assert state.hash_key == zobrist.PIECES[PieceType.QUEEN - 1][Color.WHITE][sq("d1")]
    state.remove_piece(PieceType.QUEEN, sq("d1"), Color.WHITE)
    assert state.hash_key == 0
    assert state.occupancy() == 0
    assert state.piece_type_at(sq("d1")) == PieceType.NONE


def test_hash_depends_on_square():
    a = BoardState()
    b = BoardState()
    a.place_piece(PieceType.ROOK, sq("a1"), Color.WHITE)
    b.place_piece(PieceType.ROOK, sq("h1"), Color.WHITE)
    assert a.hash_key != b.hash_key


def test_piece_color_of_empty_square_raises():
    with pytest.raises(ValueError):
        BoardState().piece_color_at(sq("e4"))


def test_place_none_raises():
    with pytest.raises(ValueError):
        BoardState().place_piece(PieceType.NONE, sq("e4"), Color.WHITE)


def test_king_square():
    state = make_state([("e1", PieceType.KING, Color.WHITE), ("e8", PieceType.KING, Color.BLACK)])
    assert state.king_square(Color.WHITE) == sq("e1")
    assert state.king_square(Color.BLACK) == sq("e8")


def test_en_passant_square_and_hash():
    state = BoardState()
    assert state.en_passant_sq == NO_SQUARE
    state.set_en_passant_sq(sq("e3"))
    assert state.en_passant_sq == sq("e3")
    assert state.hash_key == zobrist.EN_PASSANT[file_of(sq("e3"))]
    state.set_en_passant_sq(sq("e3"))
    assert state.hash_key == zobrist.EN_PASSANT[file_of(sq("e3"))]


def test_rook_check_detected():
    state = make_state([
        ("e1", PieceType.KING, Color.WHITE),
        ("e8", PieceType.ROOK, Color.BLACK),
        ("a8", PieceType.KING, Color.BLACK),
    ])
    assert state.checkers == bb("e8")
    assert state.ortho_pins == 0


def test_pinned_knight_produces_pin_line():
    state = make_state([
        ("e1", PieceType.KING, Color.WHITE),
        ("e2", PieceType.KNIGHT, Color.WHITE),
        ("e8", PieceType.ROOK, Color.BLACK),
        ("a8", PieceType.KING, Color.BLACK),
    ])
    assert state.checkers == 0
    assert state.ortho_pins == bb("e2", "e3", "e4", "e5", "e6", "e7", "e8")
    assert state.diag_pins == 0


def test_diagonal_pin():
    state = make_state([
        ("e1", PieceType.KING, Color.WHITE),
        ("f2", PieceType.PAWN, Color.WHITE),
        ("h4", PieceType.BISHOP, Color.BLACK),
        ("a8", PieceType.KING, Color.BLACK),
    ])
    assert state.checkers == 0
    assert state.diag_pins == bb("f2", "g3", "h4")


def test_knight_and_pawn_checks():
    state = make_state([
        ("e1", PieceType.KING, Color.WHITE),
        ("d3", PieceType.KNIGHT, Color.BLACK),
        ("f2", PieceType.PAWN, Color.BLACK),
        ("e2", PieceType.PAWN, Color.BLACK),
        ("a8", PieceType.KING, Color.BLACK),
    ])
    assert state.checkers == bb("d3", "f2")


def test_black_side_pawn_check():
    state = make_state(
        [
            ("e8", PieceType.KING, Color.BLACK),
            ("d7", PieceType.PAWN, Color.WHITE),
            ("a1", PieceType.KING, Color.WHITE),
        ],
        side=Color.BLACK,
    )
    assert state.checkers == bb("d7")


def test_copy_is_independent():
    state = make_state([("e1", PieceType.KING, Color.WHITE)])
    state.castle_rights.set_kingside_rook_file(Color.WHITE, 7)
    clone = state.copy()
    clone.place_piece(PieceType.PAWN, sq("e2"), Color.WHITE)
    clone.castle_rights.set_kingside_rook_file(Color.WHITE, 8)
    assert state.piece_type_at(sq("e2")) == PieceType.NONE
    assert state.occupancy() == bb("e1")
    assert state.castle_rights.can_kingside_castle(Color.WHITE)
    assert clone.occupancy() == bb("e1", "e2")