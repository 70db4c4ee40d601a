import random
from collections import Counter

import pytest

from adversary import (
    InvalidDifficulty,
    MoveSelector,
    NoLegalMoves,
    Player,
    choose_move,
)
from adversary.search import (
    AlphaBetaSearchStrategy,
    RandomMoveStrategy,
    get_search_strategy,
    validate_difficulty,
)
from config import AdversaryConfig, EngineSettings
from conftest import M1, RandomTreeGame, ScriptedGame


def test_random_play_returns_a_legal_move(flat_game, four_moves):
    rules = flat_game.rules()
    for seed in range(50):
        move = choose_move((), Player.ATTACKER, 0, rules, rng=random.Random(seed))
        assert move in four_moves


def test_random_play_is_reproducible_with_seeded_rng(flat_game, four_moves):
    rules = flat_game.rules()
    expected = random.Random(1234).choice(four_moves)
    assert choose_move((), Player.ATTACKER, 0, rules, rng=random.Random(1234)) == expected
    assert MoveSelector(rules, seed=1234).choose_move((), Player.ATTACKER, 0) == expected


def test_random_play_is_roughly_uniform(flat_game, four_moves):
    selector = MoveSelector(flat_game.rules(), rng=random.Random(2024))
    draws = 4000
    counts = Counter(selector.choose_move((), Player.ATTACKER, 0) for _ in range(draws))
    assert set(counts) == set(four_moves)
    for move in four_moves:
        assert 800 < counts[move] < 1200


def test_random_play_does_not_search(flat_game):
    result = MoveSelector(flat_game.rules(), seed=0).think((), Player.ATTACKER, 0)
    assert result.score == 0
    assert flat_game.applied == []


@pytest.mark.parametrize("difficulty", [0, 1, 2, 5])
def test_no_legal_moves_raises(stuck_game, difficulty):
    with pytest.raises(NoLegalMoves) as excinfo:
        choose_move((), Player.DEFENDER, difficulty, stuck_game.rules())
    assert excinfo.value.player is Player.DEFENDER
    assert excinfo.value.difficulty == difficulty
    assert "defender" in str(excinfo.value)


def test_no_legal_moves_is_a_runtime_error(stuck_game):
    with pytest.raises(RuntimeError):
        choose_move((), Player.ATTACKER, 0, stuck_game.rules())


@pytest.mark.parametrize("difficulty", [-1, -10, 1.5, "2", None, True])
def test_invalid_difficulty(flat_game, difficulty):
    with pytest.raises(InvalidDifficulty):
        choose_move((), Player.ATTACKER, difficulty, flat_game.rules())


def test_invalid_difficulty_is_a_value_error():
    with pytest.raises(ValueError):
        validate_difficulty(-3)


def test_invalid_difficulty_checked_before_enumeration(stuck_game):
    with pytest.raises(InvalidDifficulty):
        choose_move((), Player.ATTACKER, -1, stuck_game.rules())


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_search_play_is_deterministic(difficulty):
    rules = RandomTreeGame(42).rules()
    moves = {choose_move((), Player.ATTACKER, difficulty, rules, rng=random.Random(s)) for s in range(10)}
    assert len(moves) == 1


def test_search_play_returns_engine_move():
    rules = RandomTreeGame(9).rules()
    selector = MoveSelector(rules)
    result = selector.think((), Player.DEFENDER, 3)
    assert selector.choose_move((), Player.DEFENDER, 3) == result.move
    assert result.move in rules.valid_moves((), Player.DEFENDER)


def test_concrete_scenario_through_selector():
    from adversary import Move

    reply = Move(5, 5, 5, 6)
    m2 = Move(1, 0, 1, 1)
    tree = {(): [M1, m2], (M1,): [reply], (m2,): [reply], (M1, reply): [m2], (m2, reply): [m2]}
    game = ScriptedGame(tree, scores=lambda board, player: 1 if board[0] == M1 else -1)
    assert choose_move((), Player.ATTACKER, 2, game.rules()) == M1


def test_strategy_factory(flat_game):
    rules = flat_game.rules()
    assert isinstance(get_search_strategy(rules, 0), RandomMoveStrategy)
    assert isinstance(get_search_strategy(rules, 3), AlphaBetaSearchStrategy)
    with pytest.raises(InvalidDifficulty):
        get_search_strategy(rules, -1)


def test_random_strategy_empty_board(stuck_game):
    result = RandomMoveStrategy(stuck_game.rules(), seed=1).search((), Player.ATTACKER)
    assert result.move is None


def test_selector_from_config(flat_game, four_moves):
    config = AdversaryConfig(engine=EngineSettings(seed=77, score_bound=500))
    selector = MoveSelector.from_config(flat_game.rules(), config)
    assert selector.choose_move((), Player.ATTACKER, 0) == random.Random(77).choice(four_moves)
    # score bound flows into the engine: dead-end root reports its sentinel
    assert selector.think((), Player.ATTACKER, 1).score == -500


def test_configured_default_difficulty(flat_game, four_moves):
    config = AdversaryConfig(engine=EngineSettings(seed=5, default_difficulty=0))
    selector = MoveSelector.from_config(flat_game.rules(), config)
    assert selector.default_difficulty == 0
    assert selector.choose_move((), Player.ATTACKER) == random.Random(5).choice(four_moves)


def test_default_difficulty_runs_the_search():
    rules = RandomTreeGame(21).rules()
    config = AdversaryConfig(engine=EngineSettings(default_difficulty=3))
    selector = MoveSelector.from_config(rules, config)
    expected = MoveSelector(rules).think((), Player.ATTACKER, 3)
    result = selector.think((), Player.ATTACKER)
    assert (result.move, result.score) == (expected.move, expected.score)
    # an explicit difficulty still wins over the default
    assert selector.choose_move((), Player.ATTACKER, 1) == MoveSelector(rules).choose_move((), Player.ATTACKER, 1)


def test_no_difficulty_and_no_default_is_invalid(flat_game):
    with pytest.raises(InvalidDifficulty):
        MoveSelector(flat_game.rules()).choose_move((), Player.ATTACKER)
