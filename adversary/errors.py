"""Exceptions raised by the move-selection engine."""

from __future__ import annotations

from typing import Any, Optional


class EngineError(Exception):
    """Base class for errors raised by the adversary package."""


class NoLegalMoves(EngineError, RuntimeError):
    """A move had to be chosen but the side to move has none."""

    def __init__(self, player: Any, difficulty: Optional[int] = None) -> None:
        self.player = player
        self.difficulty = difficulty
        name = getattr(player, "value", player)
        super().__init__(f"No legal moves available for {name}.")


class InvalidDifficulty(EngineError, ValueError):
    """Difficulty must be a non-negative integer."""

    def __init__(self, difficulty: Any) -> None:
        self.difficulty = difficulty
        super().__init__(f"Difficulty must be a non-negative integer, got {difficulty!r}")


def validate_difficulty(difficulty: Any) -> int:
    """Return difficulty unchanged, or raise InvalidDifficulty."""
    if isinstance(difficulty, bool) or not isinstance(difficulty, int) or difficulty < 0:
        raise InvalidDifficulty(difficulty)
    return difficulty
