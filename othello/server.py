"""FastAPI service answering Othello analysis queries.

Every request carries the full position; the service keeps no games.
Serve it with ``uvicorn --factory othello.server:create_app``.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import Settings
from .game import Cell, GameState, move_index
from .loader import BoardFormatError, state_from_grid
from .search import root_scores, select_best, simulate_full_game

logger = logging.getLogger(__name__)


class PositionRequest(BaseModel):
    turn: int
    board: List[List[int]]


class SearchRequest(PositionRequest):
    depth: Optional[int] = None


def _player_name(player: Optional[Cell]) -> Optional[str]:
    return player.name.lower() if player is not None else None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings if settings is not None else Settings.from_env()
    app = FastAPI(title="Othello minimax")
    app.state.settings = settings

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Badly typed positions are malformed positions too.
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    def load(req: PositionRequest) -> GameState:
        try:
            return state_from_grid(req.turn, req.board)
        except BoardFormatError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid position: {exc}")

    def resolve_depth(req: SearchRequest) -> int:
        depth = req.depth if req.depth is not None else settings.depth
        if not 1 <= depth <= settings.max_depth:
            raise HTTPException(
                status_code=400,
                detail=f"depth must be between 1 and {settings.max_depth}",
            )
        return depth

    @app.post("/score")
    def score(req: PositionRequest) -> dict:
        state = load(req)
        return {
            "score": state.score(),
            "black": state.board.count(Cell.BLACK),
            "white": state.board.count(Cell.WHITE),
        }

    @app.post("/legal-moves")
    def legal_moves(req: PositionRequest) -> dict:
        state = load(req)
        moves = state.legal_moves()
        return {"moves": [list(m) for m in moves], "game_over": not moves}

    @app.post("/best-move")
    def best_move(req: SearchRequest) -> dict:
        state = load(req)
        depth = resolve_depth(req)
        scored = root_scores(state, depth, settings.prune)
        best, best_score = select_best(scored)
        logger.info("best move %s for %s at depth %d", best, state.turn.name, depth)
        return {
            "move": list(best) if best is not None else None,
            "index": move_index(*best) if best is not None else None,
            "score": best_score,
            "depth": depth,
            "candidates": [
                {"move": list(move), "score": value} for move, value in scored
            ],
        }

    @app.post("/simulate")
    def simulate(req: SearchRequest) -> dict:
        state = load(req)
        depth = resolve_depth(req)
        record = simulate_full_game(state, depth, settings.prune)
        return {
            "moves": record.moves,
            "winner": _player_name(record.winner),
            "board": record.final.board.to_list(),
            "turn": int(record.final.turn),
        }

    return app

