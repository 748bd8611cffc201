from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Request

from ..registry import SessionRegistry
from ..schemas import PlayerState

router = APIRouter(prefix="", tags=["players"])


def _registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


@router.get("/players", response_model=List[PlayerState])
async def list_players(request: Request):
    return list(_registry(request).snapshot().values())


@router.get("/players/{player_id}", response_model=PlayerState)
async def get_player(player_id: str, request: Request):
    player = _registry(request).get(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player
