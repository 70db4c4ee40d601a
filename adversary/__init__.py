"""Adversary package: move selection for two-player board games.

Usage examples:
    from adversary import GameRules, Player, choose_move
    from adversary import SearchEngine, MoveSelector
"""
from __future__ import annotations

from .types import (
    Move,
    Player,
    SearchResult,
    SearchStats,
    switch_player,
    is_valid_move,
    is_valid_player,
    SCORE_BOUND,
    RANDOM_DIFFICULTY,
)
from .errors import EngineError, NoLegalMoves, InvalidDifficulty, validate_difficulty
from .rules import GameRules

# Evaluation
from .eval import Evaluator, ConstantEvaluator, CallableEvaluator, NegatedEvaluator, get_evaluator

# Search
from .engine import SearchEngine, get_engine, minimax
from .search import SearchStrategy, AlphaBetaSearchStrategy, RandomMoveStrategy, get_search_strategy
from .selector import MoveSelector, choose_move
