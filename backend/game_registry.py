"""Game registry for managing concurrent game sessions.

Each browser tab or client gets its own GameState, identified by a game_id.
The game rules are single-threaded, so every session carries a lock that
route handlers hold while they touch its state.
"""

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from smartyplants.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """A registered game and the lock guarding it."""

    game_id: str
    state: GameState
    seed: Optional[int] = None
    created_at: float = field(default_factory=time.time)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class GameRegistry:
    """Registry of live game sessions.

    The registry supports:
    - Creating new games, optionally with a fixed RNG seed
    - Looking up a game by ID
    - Listing and removing games
    """

    def __init__(self) -> None:
        self._games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    @property
    def game_count(self) -> int:
        return len(self._games)

    def create_game(self, seed: Optional[int] = None, game_id: Optional[str] = None) -> GameSession:
        """Start a new game and register it.

        Args:
            seed: Optional RNG seed; games with the same seed and the same
                moves play out identically
            game_id: Optional explicit ID (a UUID is generated otherwise)

        Returns:
            The new GameSession
        """
        session = GameSession(
            game_id=game_id or str(uuid.uuid4()),
            state=GameState.new(seed),
            seed=seed,
        )
        with self._lock:
            self._games[session.game_id] = session
        logger.info("Created game %s (seed=%s)", session.game_id[:8], seed)
        return session

    def get_game(self, game_id: str) -> Optional[GameSession]:
        return self._games.get(game_id)

    def list_games(self) -> List[Dict[str, object]]:
        return [
            {
                "game_id": session.game_id,
                "season": session.state.season,
                "outcome": session.state.outcome.value,
                "seed": session.seed,
                "created_at": session.created_at,
            }
            for session in self._games.values()
        ]

    def remove_game(self, game_id: str) -> bool:
        with self._lock:
            session = self._games.pop(game_id, None)
        if session is None:
            return False
        logger.info("Removed game %s: %s", game_id[:8], session.state.snapshot())
        return True
