"""
The collaborator bundle: everything the engine needs from a game.

The engine never inspects boards or moves itself; it enumerates, applies and
scores them only through a GameRules instance.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, List

from .eval import Evaluator, as_evaluator
from .types import (
    Move,
    MoveApplierProtocol,
    MoveGeneratorProtocol,
    Player,
    PlayerSwitchProtocol,
    switch_player,
)


@dataclass(frozen=True)
class GameRules:
    """The operations a game module supplies to the engine.

    None of them are implemented here: legality, board layout and move
    application all belong to the game. The engine only calls them.
    """

    legal_moves: MoveGeneratorProtocol
    apply_move: MoveApplierProtocol
    evaluate: Callable[[Any, Player], Any]
    switch_player: PlayerSwitchProtocol = switch_player

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to normalise the evaluator once
        object.__setattr__(self, "evaluate", as_evaluator(self.evaluate))

    @property
    def evaluator(self) -> Evaluator:
        return self.evaluate  # type: ignore[return-value]

    def valid_moves(self, board: Any, player: Player) -> List[Move]:
        """All legal moves for player, materialised as a list."""
        return list(self.legal_moves(board, player))

    def with_evaluator(self, evaluator: Callable[[Any, Player], Any]) -> "GameRules":
        return replace(self, evaluate=evaluator)
