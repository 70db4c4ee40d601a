"""Shared fixtures: small scripted games for driving the engine.

Boards are tuples of the moves played so far, so applying a move always
builds a new tuple and never touches the old one.
"""
from __future__ import annotations

import random
from typing import Dict, List, Sequence, Tuple

import pytest

from adversary import GameRules, Move, Player

Path = Tuple[Move, ...]

ROWS = 9


def apply_path(board: Path, move: Move) -> Path:
    return board + (Move(*move),)


def mirror(move: Move) -> Move:
    """Reflect a move top to bottom on a ROWS-high board."""
    return Move(move.origin_col, ROWS - 1 - move.origin_row,
                move.target_col, ROWS - 1 - move.target_row)


def mirror_path(board: Path) -> Path:
    return tuple(mirror(m) for m in board)


class ScriptedGame:
    """A game tree written out by hand: path -> moves, path -> score."""

    def __init__(self, tree: Dict[Path, Sequence[Move]], scores=None, default_score: int = 0) -> None:
        self.tree = tree
        self.scores = scores or {}
        self.default_score = default_score
        self.applied: List[Path] = []

    def legal_moves(self, board: Path, player: Player) -> List[Move]:
        return list(self.tree.get(board, []))

    def apply_move(self, board: Path, move: Move) -> Path:
        child = apply_path(board, move)
        self.applied.append(child)
        return child

    def evaluate(self, board: Path, player: Player) -> int:
        if callable(self.scores):
            return self.scores(board, player)
        return self.scores.get(board, self.default_score)

    def rules(self) -> GameRules:
        return GameRules(self.legal_moves, self.apply_move, self.evaluate)


class RandomTreeGame:
    """Pseudo-random game tree, reproducible from a seed.

    Every node has between 1 and max_branching moves, so there are no dead
    ends. Leaf scores are perspective-relative: the defender sees the negated
    attacker score.
    """

    def __init__(self, seed: int, max_branching: int = 4, spread: int = 50) -> None:
        self.seed = seed
        self.max_branching = max_branching
        self.spread = spread

    def legal_moves(self, board: Path, player: Player) -> List[Move]:
        rng = random.Random(f"moves:{self.seed}:{board}")
        ply = len(board)
        return [Move(ply, i, ply + 1, i + 1) for i in range(rng.randint(1, self.max_branching))]

    def attacker_score(self, board: Path) -> int:
        return random.Random(f"score:{self.seed}:{board}").randint(-self.spread, self.spread)

    def evaluate(self, board: Path, player: Player) -> int:
        score = self.attacker_score(board)
        return score if player is Player.ATTACKER else -score

    def rules(self) -> GameRules:
        return GameRules(self.legal_moves, apply_path, self.evaluate)


M1 = Move(0, 0, 0, 1)
M2 = Move(1, 0, 1, 1)
M3 = Move(2, 0, 2, 1)
M4 = Move(3, 0, 3, 1)


@pytest.fixture
def four_moves() -> List[Move]:
    return [M1, M2, M3, M4]


@pytest.fixture
def flat_game(four_moves) -> ScriptedGame:
    """Attacker has four moves from the empty board; nothing after that."""
    return ScriptedGame({(): four_moves})


@pytest.fixture
def stuck_game() -> ScriptedGame:
    """Nobody can move."""
    return ScriptedGame({})
