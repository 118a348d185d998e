"""Transposition table keyed by canonical position keys (FEN strings).

Each entry records the number of plies that were still to be searched when
the score was computed. A lookup only trusts an entry computed at least as
deep as the request:

    from chessbro.core.transposition import TranspositionTable

    tt = TranspositionTable()
    tt.store(board.fen(), depth=3, score=2)
    entry = tt.probe(board.fen(), depth=2)   # TTEntry(depth=3, score=2)
    entry = tt.probe(board.fen(), depth=4)   # None

Scores are stored without a bound type. A score produced under an alpha-beta
cut-off is a bound, yet it is returned as if exact on later hits.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class TTEntry:
    depth: int
    score: int

    def __iter__(self):
        return iter((self.depth, self.score))


class TranspositionTable:
    """Dict of canonical key -> TTEntry.

    Methods:
      - get(key) -> Optional[TTEntry]
      - probe(key, depth) -> Optional[TTEntry]  (depth-checked get)
      - store(key, depth, score)
      - clear()
    """

    def __init__(self):
        self._table: Dict[str, TTEntry] = {}
        self.hits = 0
        self.stores = 0

    def get(self, key: str) -> Optional[TTEntry]:
        return self._table.get(key)

    def probe(self, key: str, depth: int) -> Optional[TTEntry]:
        entry = self._table.get(key)
        if entry is None or entry.depth < depth:
            return None
        self.hits += 1
        return entry

    def store(self, key: str, depth: int, score: int):
        # last write wins, regardless of the depth already stored
        self._table[key] = TTEntry(depth, score)
        self.stores += 1

    def clear(self):
        self._table.clear()
        self.hits = 0
        self.stores = 0

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: str) -> bool:
        return key in self._table
