"""Core engine components: board, evaluator, search, and transposition table."""

from .board import ChessBoard, FenError, MoveResult
from .evaluator import Evaluator
from .search import SearchEngine, NoLegalMovesError
from .transposition import TranspositionTable, TTEntry
