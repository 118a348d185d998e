"""UCI protocol handler.

The engine reads commands from stdin and writes responses to stdout, one
line each, flushed immediately. Diagnostics go to the log (stderr) so the
protocol stream stays clean.

    GUI -> Engine: uci, isready, ucinewgame, position, setoption, go, quit
    Engine -> GUI: id name, id author, option, uciok, readyok, info, bestmove

Everything runs on one thread: `go` searches to completion before the next
command is read.
"""

import logging
import sys
from typing import List, Optional, TextIO

import chess

from chessbro.config import CONFIG, MAX_SEARCH_DEPTH, MIN_SEARCH_DEPTH, parse_depth
from chessbro.core.search import NoLegalMovesError
from chessbro.core.utils import format_info
from chessbro.session import Session

logger = logging.getLogger(__name__)


class UCI:
    def __init__(self, session: Optional[Session] = None, out: Optional[TextIO] = None):
        self.session = session or Session()
        self.out = out or sys.stdout
        self._handlers = {
            "uci": self._parse_uci,
            "isready": self._parse_isready,
            "ucinewgame": self._parse_ucinewgame,
            "position": self._parse_position,
            "setoption": self._parse_setoption,
            "go": self._parse_go,
            "quit": self._parse_quit,
        }

    @property
    def board(self) -> chess.Board:
        return self.session.board.board

    def _send(self, line: str):
        self.out.write(line + "\n")
        self.out.flush()

    def run(self, stream: Optional[TextIO] = None):
        """Feed every non-blank line to handle() until EOF or quit."""
        stream = stream or sys.stdin
        for line in stream:
            if not line.strip():
                continue
            self.handle(line)
            if not self.session.running:
                break

    def handle(self, command: str):
        tokens = command.split()
        if not tokens:
            return
        logger.debug("<< %s", command.strip())
        handler = self._handlers.get(tokens[0].lower())
        if handler is None:
            logger.debug("ignoring unknown command %r", tokens[0])
            return
        handler(tokens[1:])

    def _parse_uci(self, tokens: List[str]):
        self._send(f"id name {CONFIG.ui.engine_name}")
        self._send(f"id author {CONFIG.ui.engine_author}")
        self._send(f"option name SearchDepth type spin default {self.session.depth} "
                   f"min {MIN_SEARCH_DEPTH} max {MAX_SEARCH_DEPTH}")
        self._send("uciok")

    def _parse_isready(self, tokens: List[str]):
        self._send("readyok")

    def _parse_ucinewgame(self, tokens: List[str]):
        self.session.new_game()

    def _parse_position(self, tokens: List[str]):
        """position startpos [moves ...] | position fen <FEN> [moves ...]

        A malformed FEN raises FenError and the position is left as it was.
        """
        if not tokens:
            return
        lowered = [t.lower() for t in tokens]
        moves_idx = lowered.index("moves") if "moves" in lowered else len(tokens)
        moves = tokens[moves_idx + 1:]

        if lowered[0] == "startpos":
            self.session.set_position(None, moves)
        elif lowered[0] == "fen":
            fen = " ".join(tokens[1:moves_idx])
            self.session.set_position(fen, moves)
        else:
            logger.debug("ignoring position command %r", " ".join(tokens))

    def _parse_setoption(self, tokens: List[str]):
        """setoption name <id> [value <x>]"""
        lowered = [t.lower() for t in tokens]
        if "name" not in lowered:
            self._send("info string setoption requires a name")
            return
        name_idx = lowered.index("name") + 1
        value_idx = lowered.index("value") if "value" in lowered else len(tokens)
        name = " ".join(tokens[name_idx:value_idx])
        value = " ".join(tokens[value_idx + 1:])

        if name.lower() != "searchdepth":
            logger.info("ignoring unsupported option %r", name)
            return

        depth = parse_depth(value)
        if depth is None:
            logger.warning("bad SearchDepth value %r", value)
            self._send(f"info string invalid SearchDepth value '{value}', keeping {self.session.depth}")
            return
        self.session.depth = depth
        self._send(f"info string SearchDepth set to {depth}")

    def _parse_go(self, tokens: List[str]):
        # Time controls and depth arguments are accepted but not used.
        white_to_move = self.session.board.side_to_move() == chess.WHITE
        try:
            move, score = self.session.go()
        except NoLegalMovesError:
            self._send("info string no legal moves")
            self._send("bestmove 0000")
            return
        if CONFIG.ui.emit_search_info:
            eng = self.session.engine
            self._send(format_info(self.session.depth * 2, score, eng.nodes, eng.elapsed,
                                   move, eng.mate_in_one, white_to_move))
        self._send(f"bestmove {move.uci()}")

    def _parse_quit(self, tokens: List[str]):
        self.session.quit()
