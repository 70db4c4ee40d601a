"""
Type definitions and protocols for the adversary move-selection engine.

This module provides:
- The two-sided Player model and the pure switch_player function
- The Move 4-tuple and the SearchResult/SearchStats records
- Protocol definitions for the collaborators supplied by a game module
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Optional, Protocol, Sequence, TypeVar

# Boards are opaque values owned by the game module
Board = TypeVar('Board')
Score = int
Difficulty = int


class Player(Enum):
    """The two sides of the game."""

    ATTACKER = "attacker"
    DEFENDER = "defender"

    def opponent(self) -> "Player":
        return Player.DEFENDER if self is Player.ATTACKER else Player.ATTACKER


def switch_player(player: Player) -> Player:
    """Return the other side."""
    return player.opponent()


class Move(NamedTuple):
    """A move from (origin_col, origin_row) to (target_col, target_row)."""

    origin_col: int
    origin_row: int
    target_col: int
    target_row: int

    def __str__(self) -> str:
        return "-".join(str(x) for x in self)


@dataclass
class SearchStats:
    """Counters for a single search call."""
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search: the chosen move (None if there was none) and its score."""
    move: Optional[Move]
    score: Score
    stats: SearchStats = field(default_factory=SearchStats)


class MoveGeneratorProtocol(Protocol):
    """Protocol for move generation functions."""

    def __call__(self, board: Any, player: Player) -> Sequence[Move]:
        """Generate all legal moves for a player, in a fixed order."""
        ...


class MoveApplierProtocol(Protocol):
    """Protocol for move application functions."""

    def __call__(self, board: Any, move: Move) -> Any:
        """Return the board after playing move, leaving the input untouched."""
        ...


class PositionEvaluatorProtocol(Protocol):
    """Protocol for position evaluation functions."""

    def __call__(self, board: Any, player: Player) -> Score:
        """Evaluate a position from player's perspective."""
        ...


class PlayerSwitchProtocol(Protocol):
    """Protocol for the turn switch."""

    def __call__(self, player: Player) -> Player:
        ...


class SearchStrategyProtocol(Protocol):
    """Protocol for search strategy implementations."""

    def search(self, board: Any, player: Player, depth: int) -> SearchResult:
        """Pick a move for player on board."""
        ...


# Utility functions for type checking
def is_valid_player(player: Any) -> bool:
    """Check if a value is one of the two sides."""
    return isinstance(player, Player)


def is_valid_move(move: Any) -> bool:
    """Check if an object has the shape of a move (four ints)."""
    return (isinstance(move, tuple) and len(move) == 4 and
            all(isinstance(x, int) and not isinstance(x, bool) for x in move))


# Root window sentinels: the search starts at (-SCORE_BOUND, SCORE_BOUND)
SCORE_BOUND = 9999
RANDOM_DIFFICULTY = 0
