"""
Top-level move selection.

Difficulty 0 plays a uniformly random legal move; any higher difficulty runs
the alpha-beta search to exactly that many plies.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Optional

from .errors import NoLegalMoves, validate_difficulty
from .rules import GameRules
from .search import AlphaBetaSearchStrategy, RandomMoveStrategy
from .types import RANDOM_DIFFICULTY, SCORE_BOUND, Move, Player, SearchResult

LOGGER = logging.getLogger(__name__)


class MoveSelector:
    """Chooses a move for the side to play at a given difficulty.

    default_difficulty is used when a call gives no difficulty; with neither,
    the call fails with InvalidDifficulty.
    """

    def __init__(self, rules: GameRules, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None, score_bound: int = SCORE_BOUND,
                 default_difficulty: Optional[int] = None) -> None:
        self.rules = rules
        self.default_difficulty = default_difficulty
        self._random = RandomMoveStrategy(rules, rng=rng, seed=seed)
        self._alphabeta = AlphaBetaSearchStrategy(rules, score_bound=score_bound)

    @classmethod
    def from_config(cls, rules: GameRules, config: Optional[Any] = None) -> "MoveSelector":
        """Build a selector from EngineSettings (seed, score bound, default difficulty)."""
        if config is None:
            from config import get_config
            config = get_config()
        settings = config.engine
        return cls(rules, seed=settings.seed, score_bound=settings.score_bound,
                   default_difficulty=settings.default_difficulty)

    def think(self, board: Any, player: Player, difficulty: Optional[int] = None) -> SearchResult:
        """Run the strategy for difficulty and return the full result."""
        if difficulty is None:
            difficulty = self.default_difficulty
        validate_difficulty(difficulty)
        if difficulty == RANDOM_DIFFICULTY:
            result = self._random.search(board, player)
        else:
            result = self._alphabeta.search(board, player, difficulty)
        if result.move is None:
            raise NoLegalMoves(player, difficulty)
        LOGGER.debug("Difficulty %d: %s plays %s (score %d)",
                     difficulty, player.value, result.move, result.score)
        return result

    def choose_move(self, board: Any, player: Player, difficulty: Optional[int] = None) -> Move:
        return self.think(board, player, difficulty).move  # type: ignore[return-value]


def choose_move(board: Any, player: Player, difficulty: int, rules: GameRules,
                rng: Optional[random.Random] = None) -> Move:
    """Pick a move for player on board at the given difficulty."""
    validate_difficulty(difficulty)
    return MoveSelector(rules, rng=rng).choose_move(board, player, difficulty)
