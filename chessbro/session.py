"""Engine session: the live position, the transposition table and the search depth."""

import logging
from typing import Iterable, List, Optional, Tuple

import chess

from chessbro.config import CONFIG
from chessbro.core.board import ChessBoard, MoveResult
from chessbro.core.evaluator import Evaluator
from chessbro.core.search import SearchEngine
from chessbro.core.transposition import TranspositionTable

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, depth: Optional[int] = None):
        self.board = ChessBoard()
        self.tt = TranspositionTable()
        self.depth = depth or CONFIG.search.depth  # full moves
        self.running = True
        self.engine = SearchEngine(Evaluator(), tt=self.tt, depth=self.depth)

    def new_game(self):
        self.board = ChessBoard()
        self.tt.clear()

    def set_position(self, fen: Optional[str] = None, moves: Iterable[str] = ()) -> List[MoveResult]:
        """Replace the position, then play `moves` in order.

        Raises FenError for a malformed FEN, in which case the current
        position is kept. Illegal moves are skipped; the results of every
        attempt are returned.
        """
        board = ChessBoard(fen)
        results = []
        for text in moves:
            result = board.make_move(text)
            if not result:
                logger.debug("skipping %s: %s", text, result.reason)
            results.append(result)
        self.board = board
        self.tt.clear()
        return results

    def best_move(self) -> Tuple[chess.Move, int]:
        """Search the current position without changing it."""
        return self.engine.find_best_move(self.board.board, self.depth)

    def go(self) -> Tuple[chess.Move, int]:
        """Search and play the chosen move."""
        move, score = self.best_move()
        self.board.make_move(move.uci())
        return move, score

    def quit(self):
        self.running = False
