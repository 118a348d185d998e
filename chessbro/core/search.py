import logging
import time
from typing import Optional, Tuple

import chess

from chessbro.config import CONFIG, SearchConfig
from chessbro.core.evaluator import Evaluator
from chessbro.core.transposition import TranspositionTable

logger = logging.getLogger(__name__)

INF = 1000000


class NoLegalMovesError(RuntimeError):
    """Root search was asked for a move in a position without legal moves."""


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None,
                 tt: Optional[TranspositionTable] = None,
                 depth: Optional[int] = None,
                 cfg: Optional[SearchConfig] = None):
        self.cfg = cfg or CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.tt = tt if tt is not None else TranspositionTable()
        self.max_depth = depth or self.cfg.depth

        self.nodes = 0
        self.elapsed = 0.0
        self.mate_in_one = False

    def find_best_move(self, board: chess.Board, depth: Optional[int] = None) -> Tuple[chess.Move, int]:
        """Pick a move for the side to move. `depth` is in full moves.

        Returns (move, score) with score from White's point of view.
        The board is left exactly as it was passed in.
        """
        plies = (depth or self.max_depth) * 2
        self.tt.clear()
        self.nodes = 0
        self.mate_in_one = False
        start_time = time.time()

        moves = list(board.legal_moves)
        if not moves:
            raise NoLegalMovesError(f"no legal moves in {board.fen()}")

        # White keeps the highest score, Black the lowest.
        white = board.turn == chess.WHITE
        sign = 1 if white else -1
        best_move = None
        best_score = -INF

        for move in moves:
            board.push(move)
            if board.is_checkmate():
                board.pop()
                self.mate_in_one = True
                self.elapsed = time.time() - start_time
                logger.debug("mate in one: %s", move.uci())
                return move, sign * self.evaluator.cfg.checkmate_value

            score = sign * self.minimax(board, plies - 1, not white, -INF, INF)
            board.pop()

            if score > best_score:
                best_score = score
                best_move = move

        self.elapsed = time.time() - start_time
        logger.debug("searched %d plies: %d nodes, %d cached, %d hits, %.3fs",
                     plies, self.nodes, len(self.tt), self.tt.hits, self.elapsed)
        return best_move, sign * best_score

    def minimax(self, board: chess.Board, depth: int, maximizing: bool,
                alpha: int = -INF, beta: int = INF) -> int:
        """Depth-limited minimax over `depth` plies with alpha-beta cut-offs."""
        self.nodes += 1
        key = board.fen()

        if self.cfg.use_transposition:
            entry = self.tt.probe(key, depth)
            if entry is not None:
                return entry.score

        if depth <= 0 or board.is_game_over():
            score = self.evaluator.evaluate(board)
            self._store(key, depth, score)
            return score

        if maximizing:
            best_score = -INF
            for move in list(board.legal_moves):
                board.push(move)
                score = self.minimax(board, depth - 1, False, alpha, beta)
                board.pop()
                best_score = max(best_score, score)
                if self.cfg.use_alpha_beta:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break
        else:
            best_score = INF
            for move in list(board.legal_moves):
                board.push(move)
                score = self.minimax(board, depth - 1, True, alpha, beta)
                board.pop()
                best_score = min(best_score, score)
                if self.cfg.use_alpha_beta:
                    beta = min(beta, score)
                    if beta <= alpha:
                        break

        self._store(key, depth, best_score)
        return best_score

    def _store(self, key: str, depth: int, score: int):
        if self.cfg.use_transposition:
            self.tt.store(key, depth, score)
