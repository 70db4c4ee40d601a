"""
Search interfaces and strategy adapters.
"""
from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Optional

from .engine import SearchEngine
from .errors import validate_difficulty
from .rules import GameRules
from .types import RANDOM_DIFFICULTY, SCORE_BOUND, Player, SearchResult, SearchStats


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    @abstractmethod
    def search(self, board: Any, player: Player, depth: int) -> SearchResult:  # pragma: no cover
        raise NotImplementedError


class AlphaBetaSearchStrategy(SearchStrategy):
    """Adapter around SearchEngine implementing the interface."""

    def __init__(self, rules: GameRules, score_bound: int = SCORE_BOUND) -> None:
        self._engine = SearchEngine(rules, score_bound=score_bound)

    def search(self, board: Any, player: Player, depth: int) -> SearchResult:
        return self._engine.search(board, player, depth)


class RandomMoveStrategy(SearchStrategy):
    """Uniform draw among the legal moves. Depth is ignored."""

    def __init__(self, rules: GameRules, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None) -> None:
        self.rules = rules
        self._rng = rng if rng is not None else random.Random(seed)

    def search(self, board: Any, player: Player, depth: int = RANDOM_DIFFICULTY) -> SearchResult:
        moves = self.rules.valid_moves(board, player)
        stats = SearchStats(nodes=1)
        if not moves:
            return SearchResult(move=None, score=0, stats=stats)
        return SearchResult(move=self._rng.choice(moves), score=0, stats=stats)


def get_search_strategy(rules: GameRules, difficulty: int,
                        rng: Optional[random.Random] = None,
                        score_bound: int = SCORE_BOUND) -> SearchStrategy:
    """Factory: random play at difficulty 0, alpha-beta otherwise."""
    if validate_difficulty(difficulty) == RANDOM_DIFFICULTY:
        return RandomMoveStrategy(rules, rng=rng)
    return AlphaBetaSearchStrategy(rules, score_bound=score_bound)


__all__ = [
    "SearchStrategy",
    "AlphaBetaSearchStrategy",
    "RandomMoveStrategy",
    "validate_difficulty",
    "get_search_strategy",
]
