"""Game session API endpoints.

Endpoints:
    GET /api/game - List all games
    POST /api/game - Create a new game
    GET /api/game/{game_id} - Get a game's full state
    DELETE /api/game/{game_id} - Delete a game
    POST /api/game/{game_id}/splice - Splice two planted plants into a seed
    POST /api/game/{game_id}/plant - Plant a seed from the tray
    POST /api/game/{game_id}/next_season - Advance one season
    POST /api/game/{game_id}/restart - Reset to the starting garden
"""

import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.game_registry import GameRegistry, GameSession
from backend.models import CreateGameRequest, PlantSeedRequest, SpliceRequest
from backend.state_payloads import build_game_state, build_seed
from smartyplants.exceptions import GameOverError

logger = logging.getLogger(__name__)


def _not_found(game_id: str) -> JSONResponse:
    return JSONResponse({"error": f"Game not found: {game_id}"}, status_code=404)


def _game_over(error: GameOverError) -> JSONResponse:
    return JSONResponse({"error": str(error)}, status_code=409)


def _state_response(session: GameSession, status_code: int = 200, **kwargs) -> JSONResponse:
    payload = build_game_state(session.game_id, session.state, **kwargs)
    return JSONResponse(payload.model_dump(), status_code=status_code)


def setup_router(game_registry: GameRegistry) -> APIRouter:
    """Setup the game router with required dependencies.

    Args:
        game_registry: The game registry instance

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/game", tags=["game"])

    @router.get("")
    async def list_games():
        """List all games in the registry."""
        games = game_registry.list_games()
        return JSONResponse({"games": games, "count": len(games)})

    @router.post("")
    async def create_game(request: Optional[CreateGameRequest] = None):
        """Start a new game with the starting garden."""
        seed = request.seed if request is not None else None
        session = game_registry.create_game(seed=seed)
        return _state_response(session, status_code=201)

    @router.get("/{game_id}")
    async def get_game(game_id: str):
        session = game_registry.get_game(game_id)
        if session is None:
            return _not_found(game_id)
        with session.lock:
            return _state_response(session)

    @router.delete("/{game_id}")
    async def delete_game(game_id: str):
        if not game_registry.remove_game(game_id):
            return _not_found(game_id)
        return JSONResponse({"success": True, "game_id": game_id})

    @router.post("/{game_id}/splice")
    async def splice(game_id: str, request: SpliceRequest):
        """Splice the plants in two slots; the new seed goes to the tray."""
        session = game_registry.get_game(game_id)
        if session is None:
            return _not_found(game_id)

        with session.lock:
            try:
                result = session.state.splice(request.slot_1, request.slot_2)
            except GameOverError as e:
                return _game_over(e)
            if result.is_err():
                logger.debug("Splice rejected in game %s: %s", game_id[:8], result.error)
                return JSONResponse({"error": result.error}, status_code=400)
            seed_index = len(session.state.seeds) - 1
            seed = build_seed(seed_index, result.unwrap())
            payload = build_game_state(session.game_id, session.state)
        return JSONResponse({"seed": seed.model_dump(), "state": payload.model_dump()})

    @router.post("/{game_id}/plant")
    async def plant_seed(game_id: str, request: PlantSeedRequest):
        """Move a seed from the tray into an empty or dead slot."""
        session = game_registry.get_game(game_id)
        if session is None:
            return _not_found(game_id)

        with session.lock:
            try:
                result = session.state.plant_seed(request.seed_index, request.slot)
            except GameOverError as e:
                return _game_over(e)
            if result.is_err():
                logger.debug("Planting rejected in game %s: %s", game_id[:8], result.error)
                return JSONResponse({"error": result.error}, status_code=400)
            return _state_response(session)

    @router.post("/{game_id}/next_season")
    async def next_season(game_id: str):
        """Grow seeds, run the pest pass, then check for a win or loss."""
        session = game_registry.get_game(game_id)
        if session is None:
            return _not_found(game_id)

        with session.lock:
            try:
                report = session.state.next_season()
            except GameOverError as e:
                return _game_over(e)
            return _state_response(session, last_season=report)

    @router.post("/{game_id}/restart")
    async def restart(game_id: str):
        session = game_registry.get_game(game_id)
        if session is None:
            return _not_found(game_id)

        with session.lock:
            session.state.restart()
            return _state_response(session)

    return router
