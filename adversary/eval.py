"""
Evaluation interfaces and adapters.

The engine only ever scores a board at its depth limit, through whatever
evaluator the game module plugs in. The reference ConstantEvaluator ignores
the board entirely; a real game is expected to supply its own heuristic.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

import numpy as np

from .types import Player, Score


class Evaluator(ABC):
    """Abstract evaluator interface for position scoring."""

    @abstractmethod
    def evaluate_position(self, board: Any, player: Player) -> Score:  # pragma: no cover
        """Evaluate a single board position for the given player."""
        raise NotImplementedError

    def __call__(self, board: Any, player: Player) -> Score:
        return self.evaluate_position(board, player)

    def batch_evaluate(self, boards: Sequence[Any], players: Sequence[Player]) -> np.ndarray:
        """Score several positions at once. Default falls back to single calls."""
        if len(boards) != len(players):
            raise ValueError(
                f"boards and players differ in length ({len(boards)} != {len(players)})"
            )
        out = np.zeros(len(boards), dtype=np.int64)
        for i, (board, player) in enumerate(zip(boards, players)):
            out[i] = int(self.evaluate_position(board, player))
        return out


class ConstantEvaluator(Evaluator):
    """Placeholder evaluator: a fixed score per side, whatever the board."""

    def __init__(self, attacker_score: Score = 1, defender_score: Score = -1) -> None:
        self.attacker_score = int(attacker_score)
        self.defender_score = int(defender_score)

    def evaluate_position(self, board: Any, player: Player) -> Score:
        if player is Player.ATTACKER:
            return self.attacker_score
        return self.defender_score

    def batch_evaluate(self, boards: Sequence[Any], players: Sequence[Player]) -> np.ndarray:
        if len(boards) != len(players):
            raise ValueError(
                f"boards and players differ in length ({len(boards)} != {len(players)})"
            )
        is_attacker = np.array([p is Player.ATTACKER for p in players], dtype=bool)
        return np.where(is_attacker, self.attacker_score, self.defender_score).astype(np.int64)


class CallableEvaluator(Evaluator):
    """Adapter to make a plain (board, player) -> score function conform to Evaluator."""

    def __init__(self, fn: Callable[[Any, Player], Any]) -> None:
        self.fn = fn

    def evaluate_position(self, board: Any, player: Player) -> Score:
        return int(self.fn(board, player))


class NegatedEvaluator(Evaluator):
    """Flips the sign convention of another evaluator."""

    def __init__(self, inner: Callable[[Any, Player], Any]) -> None:
        self.inner = inner

    def evaluate_position(self, board: Any, player: Player) -> Score:
        return -int(self.inner(board, player))


def as_evaluator(fn: Callable[[Any, Player], Any]) -> Evaluator:
    """Wrap fn in a CallableEvaluator unless it already is an Evaluator."""
    if isinstance(fn, Evaluator):
        return fn
    return CallableEvaluator(fn)


# Factory to get an Evaluator-conforming object

def get_evaluator() -> Evaluator:
    return ConstantEvaluator()


__all__ = [
    "Evaluator",
    "ConstantEvaluator",
    "CallableEvaluator",
    "NegatedEvaluator",
    "as_evaluator",
    "get_evaluator",
]
