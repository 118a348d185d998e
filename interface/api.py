"""FastAPI REST interface for the engine."""

import threading
from typing import List, Optional

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from chessbro import __version__
from chessbro.config import CONFIG, MAX_SEARCH_DEPTH
from chessbro.core.board import FenError
from chessbro.session import Session

app = FastAPI(title=CONFIG.ui.engine_name, version=__version__)

# Shared session, same state a UCI client would see.
session = Session()
_session_lock = threading.Lock()


class PositionRequest(BaseModel):
    fen: Optional[str] = None  # None means the starting position
    moves: List[str] = []


class MoveRequest(BaseModel):
    move: str  # UCI ("e2e4") or SAN ("Nf3")


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=1, le=MAX_SEARCH_DEPTH)


class OptionsRequest(BaseModel):
    depth: int = Field(ge=1, le=MAX_SEARCH_DEPTH)


def _prepare_search(depth: Optional[int]):
    if session.board.is_game_over():
        raise HTTPException(status_code=400, detail="Game is already over")
    if depth:
        session.depth = depth


@app.get("/board")
def get_board():
    with _session_lock:
        pos = session.board
        over = pos.is_game_over()
        return {
            "fen": pos.canonical_key(),
            "turn": "white" if pos.side_to_move() == chess.WHITE else "black",
            "legal_moves": pos.legal_moves(),
            "grid": [[p.symbol() if p else None for p in row] for row in pos.grid()],
            "is_checkmate": pos.is_checkmate(),
            "is_draw": pos.is_draw(),
            "is_game_over": over,
            "result": pos.board.result() if over else None,
            "depth": session.depth,
        }


@app.post("/position")
def set_position(req: PositionRequest):
    with _session_lock:
        try:
            results = session.set_position(req.fen, req.moves)
        except FenError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "fen": session.board.canonical_key(),
            "skipped": [r.text for r in results if not r.applied],
        }


@app.post("/move")
def make_move(req: MoveRequest):
    with _session_lock:
        result = session.board.make_move(req.move)
        if not result:
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        return {"fen": session.board.canonical_key(), "move": result.move.uci()}


@app.post("/undo")
def undo_move():
    with _session_lock:
        if not session.board.move_history:
            raise HTTPException(status_code=400, detail="No move to undo")
        session.board.undo_move()
        return {"fen": session.board.canonical_key()}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _session_lock:
        _prepare_search(req.depth)
        best, score = session.best_move()
        return {
            "best_move": best.uci(),
            "score": score,
            "nodes": session.engine.nodes,
            "fen": session.board.canonical_key(),
        }


@app.post("/go")
def go(req: SearchRequest = SearchRequest()):
    with _session_lock:
        _prepare_search(req.depth)
        best, score = session.go()
        return {"best_move": best.uci(), "score": score, "fen": session.board.canonical_key()}


@app.post("/options")
def set_options(req: OptionsRequest):
    with _session_lock:
        session.depth = req.depth
        return {"depth": session.depth}


@app.post("/reset")
def reset_board():
    with _session_lock:
        session.new_game()
        return {"fen": session.board.canonical_key()}
