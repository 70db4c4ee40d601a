"""
Depth-limited minimax with fail-hard alpha-beta pruning.

The engine knows nothing about the game: it only calls the operations held by
a GameRules bundle. Nodes alternate between maximizing and minimizing levels,
one ply per level, and the search stops exactly when depth == difficulty. At
that depth a single move (the first one generated) is played and the result
is scored from the mover's perspective.

When a child's value reaches the inherited bound the node stops and reports
the bound itself, not the child's value (fail-hard).

A node that cannot reach any evaluated position (no legal moves, or every
line below it runs into a side with no legal moves) reports no move, and its
parent skips it. Only the root falls back to its first legal move.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from .errors import validate_difficulty
from .rules import GameRules
from .types import SCORE_BOUND, Move, Player, SearchResult, SearchStats

LOGGER = logging.getLogger(__name__)


class SearchEngine:
    """Fixed-depth alpha-beta search over a pluggable game."""

    def __init__(self, rules: GameRules, score_bound: int = SCORE_BOUND,
                 debug_top_k: int = 3) -> None:
        self.rules = rules
        self.score_bound = int(score_bound)
        self.debug_top_k = max(1, debug_top_k)

    def search(self, board: Any, player: Player, difficulty: int) -> SearchResult:
        """Search from board with player to move at the root (a maximizing node)."""
        validate_difficulty(difficulty)
        stats = SearchStats()
        move, score = self._minimax(
            board, True, player, 0, difficulty, -self.score_bound, self.score_bound, stats
        )
        LOGGER.debug(
            "Search depth=%d player=%s selected %s score=%d nodes=%d leaves=%d cutoffs=%d",
            difficulty, player.value, move, score, stats.nodes, stats.leaves, stats.cutoffs,
        )
        self._log_diagnostics(board, player, move)
        return SearchResult(move=move, score=score, stats=stats)

    def static_scores(self, board: Any, player: Player) -> Tuple[List[Move], np.ndarray]:
        """Score the position after each root move, from player's perspective, in one batch."""
        moves = self.rules.valid_moves(board, player)
        children = [self.rules.apply_move(board, move) for move in moves]
        scores = self.rules.evaluator.batch_evaluate(children, [player] * len(children))
        return moves, scores

    def _log_diagnostics(self, board: Any, player: Player, chosen: Optional[Move]) -> None:
        """Emit the top-k root moves by static score when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        moves, scores = self.static_scores(board, player)
        # stable sort keeps enumeration order among equal scores
        ranked = np.argsort(-scores, kind="stable")[: self.debug_top_k]
        for rank, idx in enumerate(ranked, start=1):
            LOGGER.debug(
                "Candidate #%d move=%s static=%d chosen=%s",
                rank, moves[idx], int(scores[idx]), moves[idx] == chosen,
            )

    def _minimax(self, board: Any, maximizing: bool, player: Player, depth: int,
                 difficulty: int, alpha: int, beta: int,
                 stats: SearchStats) -> Tuple[Optional[Move], int]:
        stats.nodes += 1
        moves: List[Move] = self.rules.valid_moves(board, player)
        bound = alpha if maximizing else beta
        if not moves:
            return None, bound
        if depth == difficulty:
            return self._leaf(board, player, moves[0], stats)
        if maximizing:
            return self._max_value(board, moves, player, depth, difficulty, alpha, beta, stats)
        return self._min_value(board, moves, player, depth, difficulty, alpha, beta, stats)

    def _leaf(self, board: Any, player: Player, move: Move,
              stats: SearchStats) -> Tuple[Optional[Move], int]:
        stats.leaves += 1
        child = self.rules.apply_move(board, move)
        return move, int(self.rules.evaluate(child, player))

    def _no_candidate(self, moves: List[Move], depth: int,
                      bound: int) -> Tuple[Optional[Move], int]:
        if depth == 0:
            return moves[0], bound
        return None, bound

    def _max_value(self, board: Any, moves: List[Move], player: Player, depth: int,
                   difficulty: int, alpha: int, beta: int,
                   stats: SearchStats) -> Tuple[Optional[Move], int]:
        best_move: Optional[Move] = None
        current_alpha = alpha
        live = False
        opponent = self.rules.switch_player(player)
        for move in moves:
            child = self.rules.apply_move(board, move)
            reply, value = self._minimax(
                child, False, opponent, depth + 1, difficulty, current_alpha, beta, stats
            )
            if reply is None:
                # nothing evaluated down this line: no candidate
                continue
            live = True
            if value > current_alpha:
                current_alpha = value
                best_move = move
            if value >= beta:
                stats.cutoffs += 1
                return move, beta
        if not live:
            return self._no_candidate(moves, depth, alpha)
        if best_move is None:
            best_move = moves[0]
        return best_move, current_alpha

    def _min_value(self, board: Any, moves: List[Move], player: Player, depth: int,
                   difficulty: int, alpha: int, beta: int,
                   stats: SearchStats) -> Tuple[Optional[Move], int]:
        best_move: Optional[Move] = None
        current_beta = beta
        live = False
        opponent = self.rules.switch_player(player)
        for move in moves:
            child = self.rules.apply_move(board, move)
            reply, value = self._minimax(
                child, True, opponent, depth + 1, difficulty, alpha, current_beta, stats
            )
            if reply is None:
                continue
            live = True
            if value < current_beta:
                current_beta = value
                best_move = move
            if value <= alpha:
                stats.cutoffs += 1
                return move, alpha
        if not live:
            return self._no_candidate(moves, depth, beta)
        if best_move is None:
            best_move = moves[0]
        return best_move, current_beta


def get_engine(rules: GameRules, score_bound: int = SCORE_BOUND) -> SearchEngine:
    """Get a new search engine instance."""
    return SearchEngine(rules, score_bound=score_bound)


def minimax(board: Any, player: Player, depth: int, rules: GameRules) -> SearchResult:
    """Functional wrapper: one alpha-beta search with default bounds."""
    return get_engine(rules).search(board, player, depth)
