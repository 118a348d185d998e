"""Board wrapper over python-chess: text move parsing and move history tracking."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import chess

logger = logging.getLogger(__name__)


class FenError(ValueError):
    """Raised when a position string cannot be parsed."""


@dataclass(frozen=True)
class MoveResult:
    """Outcome of applying a move given as text."""

    text: str
    move: Optional[chess.Move] = None
    reason: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.move is not None

    def __bool__(self) -> bool:
        return self.applied


class ChessBoard:
    def __init__(self, fen: Optional[str] = None):
        """Initialize from FEN or the standard starting position."""
        self.board = chess.Board()
        self.move_history: List[str] = []
        if fen is not None:
            self.load_fen(fen)

    def reset(self):
        """Reset to the initial position."""
        self.board.reset()
        self.move_history.clear()

    def load_fen(self, fen: str):
        """Set board state from a FEN string. Raises FenError if malformed."""
        if not fen.strip():
            raise FenError("empty fen")
        try:
            board = chess.Board(fen)
        except ValueError as e:
            raise FenError(f"invalid fen {fen!r}: {e}") from e
        self.board = board
        self.move_history.clear()

    def canonical_key(self) -> str:
        """Return the current FEN."""
        return self.board.fen()

    def _parse(self, move_str: str) -> chess.Move:
        try:
            move = chess.Move.from_uci(move_str)
        except ValueError:
            # Not coordinate notation, fall back to SAN ("Nf3", "O-O").
            return self.board.parse_san(move_str)
        if move not in self.board.legal_moves:
            raise chess.IllegalMoveError(f"illegal move: {move_str} in {self.board.fen()}")
        return move

    def make_move(self, move_str: str) -> MoveResult:
        """Push a UCI or SAN move (e.g. 'e2e4', 'Nf3')."""
        try:
            move = self._parse(move_str)
        except ValueError as e:
            return MoveResult(move_str, reason=str(e) or "unparseable move")
        self.board.push(move)
        self.move_history.append(move.uci())
        return MoveResult(move_str, move=move)

    def undo_move(self):
        """Pop the last move."""
        if self.move_history:
            self.board.pop()
            self.move_history.pop()

    def legal_moves(self) -> List[str]:
        """Return legal moves as UCI strings."""
        return [m.uci() for m in self.board.legal_moves]

    def side_to_move(self) -> chess.Color:
        return self.board.turn

    def is_checkmate(self) -> bool:
        return self.board.is_checkmate()

    def is_draw(self) -> bool:
        """Stalemate, insufficient material, 75-move rule or fivefold repetition."""
        return self.board.is_game_over() and not self.board.is_checkmate()

    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return self.board.is_game_over()

    def grid(self) -> List[List[Optional[chess.Piece]]]:
        """Pieces rank by rank, from rank 8 down to rank 1."""
        return [
            [self.board.piece_at(chess.square(file, rank)) for file in range(8)]
            for rank in range(7, -1, -1)
        ]

    def __str__(self):
        return str(self.board)
