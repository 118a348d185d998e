"""Static material evaluator. Scores are from White's point of view."""

import chess

from chessbro.config import CONFIG


class Evaluator:
    def __init__(self, cfg=None):
        self.cfg = cfg or CONFIG.eval
        self.values = {
            pt: self.cfg.piece_values.get(chess.piece_name(pt).upper(), 0)
            for pt in chess.PIECE_TYPES
        }

    def evaluate(self, board: chess.Board) -> int:
        """Return static eval in pawns, positive favors White."""
        if board.is_checkmate():
            # The side to move is the one that got mated.
            if board.turn == chess.BLACK:
                return self.cfg.checkmate_value
            return -self.cfg.checkmate_value
        if board.is_game_over():
            return 0
        return self.material(board)

    def material(self, board: chess.Board) -> int:
        score = 0
        for piece in board.piece_map().values():
            value = self.values[piece.piece_type]
            score += value if piece.color == chess.WHITE else -value
        return score
