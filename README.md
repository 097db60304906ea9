# vinechess

A chess engine core in pure Python: 64-bit bitboards held as integers,
sliding-piece attacks computed by line subtraction and memoised on the
occupancy that matters, fully legal move generation (castling with any rook
file, en passant, promotions, pins and checks), perft node counting and a
small UCI command loop.

## Installing

```
pip install .
```

## Running the UCI loop

```
vinechess
```

The command reads UCI commands from standard input and writes replies to
standard output. Supported commands:

- `uci`: prints `id name Vine`, an `id author` line, the options and `uciok`
- `position startpos [moves ...]` / `position fen <fen> [moves ...]`
- `setoption name <name> value <value>`: the options are `Hash` (spin,
  1 to 2147483647, default 16) and `UCI_Chess960` (check, default `False`).
  Option names are matched without regard to case.
- `print`: draws the current board, rank 8 at the top
- `perft <depth>`: prints each root move with its leaf-node count, then
  `Nodes searched: <total> (<n>nps)`

Other commands are ignored. An illegal move in `position`, an unknown
option name or a rejected option value is reported on standard error and
the loop carries on. With `UCI_Chess960` off, castling moves are written
and read as the king's two-square move (`e1g1`); with it on, as king to
rook (`e1h1`).

Example session:

```
position startpos moves e2e4 e7e5
perft 3
```

## Using it as a library

```python
from vinechess.board import Board
from vinechess.perft import perft, perft_divide

board = Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(perft(board, 3))          # 8902

move = board.create_move("e2e4", False)
board.make_move(move)
print(board)
board.undo_move()

for move, nodes in perft_divide(board, 2):
    print(move, nodes)
```

- `vinechess.board.Board` parses a FEN (the start position by default),
  plays moves with `make_move` and takes them back with `undo_move`. Its
  `state` property is the current `vinechess.board_state.BoardState`.
  `create_move` raises `vinechess.board.IllegalMoveError` for a move that
  is not legal.
- `vinechess.movegen.generate_moves(state)` returns every legal `Move` for
  the side to move.
- `vinechess.move.Move` holds `from_sq`, `to_sq` and a `MoveFlag`;
  `to_uci(chess960)` gives its coordinate notation.
- `vinechess.perft.run_perft_tests(out, max_depth)` checks known node counts
  for two positions, writes a report to `out` and returns whether all
  matched.
- `vinechess.options` holds the `IntegerOption`, `BoolOption`,
  `StringOption` and `Options` classes used by the command loop.

## What it does not do

There is no search or evaluation: the command loop has no `go`,
`isready`, `stop` or `quit` command and never reports a best move. The
`Hash` option is accepted and stored but nothing uses it.

## Tests

```
pip install .[test]
pytest
```