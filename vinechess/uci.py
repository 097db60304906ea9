"""Command loop speaking the UCI protocol."""

from __future__ import annotations

import re
import sys
import time
from typing import Iterable, Optional, TextIO

from .board import STARTPOS_FEN, Board
from .options import BoolOption, IntegerOption, Options
from .perft import perft_divide

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"-?\d+")


def split_string(line: str) -> list[str]:
    """Words of a line separated by spaces, empty words dropped."""
    return [word for word in line.split(" ") if word]


def parse_int(text: str) -> Optional[int]:
    """Leading decimal integer of ``text``, or None if there is none or it overflows 32 bits."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group())
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


class UciHandler:
    """Holds the engine's options and current board and answers commands."""

    def __init__(self) -> None:
        self.options = Options()
        self.options.add(IntegerOption("Hash", 16, 1, _I32_MAX))
        self.options.add(BoolOption("UCI_Chess960", False))
        self.board = Board(STARTPOS_FEN)

    @property
    def chess960(self) -> bool:
        return bool(self.options.get("UCI_Chess960").value)

    def _handle_perft(self, out: TextIO, depth: int) -> None:
        start = time.perf_counter_ns()
        nodes = 0
        for move, count in perft_divide(self.board, depth):
            out.write(f"{move.to_uci(self.chess960)}: {count}\n")
            nodes += count
        elapsed = max(time.perf_counter_ns() - start, 1)
        nps = int(nodes * 1e9 / elapsed)
        out.write(f"Nodes searched: {nodes} ({nps}nps)\n")

    def _handle_setoption(self, out: TextIO, parts: list[str]) -> None:
        if len(parts) < 2 or parts[1] != "name":
            out.write("invalid second argument, expected 'name'\n")
            return
        if len(parts) < 4 or parts[3] != "value":
            out.write("invalid fourth argument, expected 'value'\n")
            return
        value = parts[4] if len(parts) > 4 else ""
        self.options.get(parts[2]).set_value(value)

    def _handle_position(self, line: str, parts: list[str]) -> None:
        if len(parts) < 2 or parts[1] not in ("fen", "startpos"):
            return
        moves_pos = line.find(" moves ")
        if parts[1] == "fen":
            fen_start = line.find("fen ") + 4
            fen = line[fen_start:moves_pos] if moves_pos != -1 else line[fen_start:]
        else:
            fen = STARTPOS_FEN

        self.board = Board(fen)
        if moves_pos != -1:
            for move_text in line[moves_pos + 7 :].split():
                self.board.make_move(self.board.create_move(move_text, self.chess960))

    def handle_line(self, line: str, out: TextIO) -> None:
        """Carry out one command, writing any reply to ``out``."""
        parts = split_string(line)
        if not parts:
            return
        command = parts[0]
        if command == "uci":
            out.write("id name Vine\n")
            out.write("id author the Vine developers\n")
            out.write(str(self.options))
            out.write("uciok\n")
        elif command == "perft":
            depth = parse_int(parts[1]) if len(parts) > 1 else None
            if depth is None or depth < 1:
                out.write("invalid perft depth\n")
                return
            self._handle_perft(out, depth)
        elif command == "print":
            out.write(f"{self.board}\n")
        elif command == "setoption":
            self._handle_setoption(out, parts)
        elif command == "position":
            self._handle_position(line, parts)

    def process_input(self, lines: Iterable[str], out: TextIO) -> None:
        """Answer every command line; rejected commands are reported on stderr."""
        for raw in lines:
            line = raw.rstrip("\r\n")
            try:
                self.handle_line(line, out)
            except ValueError as exc:
                print(exc, file=sys.stderr)
            out.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command loop on standard input and output."""
    UciHandler().process_input(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())