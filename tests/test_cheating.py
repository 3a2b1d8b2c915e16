"""Tests for cheat policy, corruption strategies and challenge verification."""

from types import SimpleNamespace

import numpy as np
import pytest

from doubt_othello.cheating import (
    CHEAT_PROBABILITY,
    KIND_WEIGHTS,
    LATE_GAME_TURN,
    MAX_CHEATS_PER_GAME,
    MIN_CHEAT_TURN,
    CheatEngine,
    CorruptionKind,
    audit_move,
    cheat_probability,
    is_sound_corruption,
    should_cheat,
    verify_challenge,
)
from doubt_othello.cheating import engine as engine_module
from doubt_othello.cheating.strategies import STRATEGIES, Corruption, CorruptionContext
from doubt_othello.config import DIFFICULTIES, CheatConfig
from doubt_othello.games.othello import EMPTY, Move, apply_move, initial_board, legal_moves


def _history(*turns):
    return [SimpleNamespace(turn=t) for t in turns]


def _always_config(**overrides):
    params = dict(
        probability={d: 1.0 for d in DIFFICULTIES},
        max_probability=1.0,
    )
    params.update(overrides)
    return CheatConfig(**params)


def test_policy_constants():
    assert MIN_CHEAT_TURN == 10
    assert MAX_CHEATS_PER_GAME == {"beginner": 2, "intermediate": 3, "advanced": 4, "extreme": 6}
    assert CHEAT_PROBABILITY["beginner"] < CHEAT_PROBABILITY["extreme"]


def test_no_cheating_before_min_turn():
    rng = np.random.default_rng(0)
    config = _always_config()
    for difficulty in DIFFICULTIES:
        for turn in range(1, MIN_CHEAT_TURN):
            assert not should_cheat(difficulty, turn, [], rng=rng, config=config)
        assert should_cheat(difficulty, MIN_CHEAT_TURN, [], rng=rng, config=config)


def test_extreme_late_game_always_cheats():
    rng = np.random.default_rng(0)
    for turn in range(LATE_GAME_TURN + 1, 64):
        assert should_cheat("extreme", turn, [], rng=rng)


def test_cap_enforced_regardless_of_turn():
    rng = np.random.default_rng(0)
    config = _always_config()
    for difficulty in DIFFICULTIES:
        cap = MAX_CHEATS_PER_GAME[difficulty]
        history = _history(*range(10, 10 + 3 * cap, 3))
        assert len(history) == cap
        for turn in range(MIN_CHEAT_TURN, 64):
            assert not should_cheat(difficulty, turn, history, rng=rng)
            assert not should_cheat(difficulty, turn, history, rng=rng, config=config)


def test_cooldown_between_cheats():
    rng = np.random.default_rng(0)
    config = _always_config()
    history = _history(12)

    assert not should_cheat("advanced", 13, history, rng=rng, config=config)
    assert not should_cheat("advanced", 14, history, rng=rng, config=config)
    assert should_cheat("advanced", 15, history, rng=rng, config=config)


def test_extreme_late_game_ignores_cooldown_but_not_cap():
    rng = np.random.default_rng(0)
    assert should_cheat("extreme", LATE_GAME_TURN + 1, _history(LATE_GAME_TURN), rng=rng)
    assert not should_cheat("extreme", LATE_GAME_TURN + 10, _history(*range(6)), rng=rng)


def test_probability_gate_and_switch():
    rng = np.random.default_rng(0)
    never = CheatConfig(probability={d: 0.0 for d in DIFFICULTIES})
    assert not any(should_cheat("advanced", t, [], rng=rng, config=never) for t in range(10, 25))

    disabled = _always_config(enabled=False)
    assert not should_cheat("extreme", 40, [], rng=rng, config=disabled)


def test_probability_scales_with_turn_and_is_capped():
    early = cheat_probability("intermediate", MIN_CHEAT_TURN)
    late = cheat_probability("intermediate", 60)

    assert early == pytest.approx(CHEAT_PROBABILITY["intermediate"])
    assert late > early
    assert cheat_probability("extreme", 200, CheatConfig(turn_scaling=5.0)) == pytest.approx(0.95)


def test_should_cheat_rejects_unknown_difficulty():
    with pytest.raises(ValueError):
        should_cheat("godlike", 20, [])


def test_honest_play_never_verifies_as_cheat(midgame_positions):
    for board, side in midgame_positions:
        for move in legal_moves(board, side):
            after = apply_move(board, move, side)
            assert not verify_challenge(board, after, move)
            assert not verify_challenge(board, after, move, side=side)
            assert not audit_move(board, after, move.position)


def test_verify_rederives_flips_instead_of_trusting_move():
    board = initial_board()
    move = legal_moves(board, -1)[0]
    after = apply_move(board, move, -1)

    # Stripped flips still verify as honest; the prior board decides.
    assert not verify_challenge(board, after, Move(move.position))
    # A move listing fewer flips than the rules demand is caught.
    short_after = apply_move(board, Move(move.position), -1)
    assert verify_challenge(board, short_after, move)


def test_verify_flags_illegal_targets():
    board = initial_board()
    # (0, 0) is not a legal move for anybody on the opening board.
    bogus = Move((0, 0))
    after = apply_move(board, bogus, -1)
    assert verify_challenge(board, after, bogus)
    # Nothing placed at the target at all.
    assert verify_challenge(board, board, Move((2, 3)))


def test_corruption_is_sound_and_verifiable(midgame_positions):
    produced = 0
    for difficulty in DIFFICULTIES:
        engine = CheatEngine(seed=5)
        for board, side in midgame_positions:
            for move in legal_moves(board, side)[:3]:
                record = engine.corrupt(board, move, turn=20, difficulty=difficulty, side=side)
                assert record is not None
                produced += 1

                honest = apply_move(board, move, side)
                assert not np.array_equal(record.board_after, honest)
                assert verify_challenge(board, record.board_after, move)
                assert audit_move(board, record.board_after, move.position)
                assert is_sound_corruption(board, honest, record.board_after, move, side)
                assert record.kind in KIND_WEIGHTS[difficulty]
                assert record.corrupted_positions
                assert record.description

                # Empty cells other than the target are untouched.
                empties = board == EMPTY
                empties[move.position] = False
                assert np.all(record.board_after[empties] == EMPTY)
                assert int(np.sum(record.board_after != EMPTY)) == int(np.sum(board != EMPTY)) + 1
    assert produced > 0


def test_every_strategy_is_sound(midgame_positions):
    rng = np.random.default_rng(9)
    hits = {kind: 0 for kind in CorruptionKind}
    for board, side in midgame_positions:
        for move in legal_moves(board, side):
            honest = apply_move(board, move, side)
            ctx = CorruptionContext(board, honest, move, side, "extreme", rng)
            for kind, strategy in STRATEGIES.items():
                corruption = strategy(ctx)
                if not corruption.positions:
                    continue
                hits[kind] += 1
                corrupted = CheatEngine._build(honest, corruption, side)
                assert is_sound_corruption(board, honest, corrupted, move, side), kind
                assert verify_challenge(board, corrupted, move), kind
    assert hits[CorruptionKind.EXTRA_FLIP] > 0
    assert hits[CorruptionKind.SKIP_FLIP] > 0
    assert hits[CorruptionKind.REMOTE_STEAL] > 0


def test_difficulty_kind_tables():
    assert set(KIND_WEIGHTS["beginner"]) == {CorruptionKind.EXTRA_FLIP, CorruptionKind.SKIP_FLIP}
    assert set(KIND_WEIGHTS["intermediate"]) == {CorruptionKind.EXTRA_FLIP, CorruptionKind.SKIP_FLIP}
    assert len(KIND_WEIGHTS["advanced"]) == 4
    assert set(KIND_WEIGHTS["extreme"]) == set(CorruptionKind)


def test_strategy_order_covers_every_kind_once():
    engine = CheatEngine(seed=1)
    for difficulty in DIFFICULTIES:
        order = engine.strategy_order(difficulty)
        assert sorted(order) == sorted(KIND_WEIGHTS[difficulty])


def test_corrupt_is_reproducible(midgame_positions):
    board, side = midgame_positions[-1]
    move = legal_moves(board, side)[0]
    first = CheatEngine(seed=3).corrupt(board, move, 30, "extreme", side=side)
    second = CheatEngine(seed=3).corrupt(board, move, 30, "extreme", side=side)

    assert first.kind == second.kind
    assert first.corrupted_positions == second.corrupted_positions
    assert np.array_equal(first.board_after, second.board_after)


def test_corrupt_infers_mover_from_flips(midgame_positions):
    board, side = midgame_positions[0]
    move = legal_moves(board, side)[0]
    record = CheatEngine(seed=2).corrupt(board, move, 15, "beginner")
    assert record.side == side


def test_corrupt_reports_no_cheat_when_nothing_changes(monkeypatch):
    monkeypatch.setattr(
        engine_module,
        "STRATEGIES",
        {kind: (lambda ctx: Corruption([])) for kind in CorruptionKind},
    )
    board = initial_board()
    move = legal_moves(board, 1)[0]
    assert CheatEngine(seed=0).corrupt(board, move, 12, "extreme", side=1) is None


def test_unsound_candidates_are_skipped(monkeypatch):
    board = initial_board()
    move = legal_moves(board, 1)[0]
    # Touches an empty cell: must be rejected.
    monkeypatch.setattr(
        engine_module,
        "STRATEGIES",
        {kind: (lambda ctx: Corruption([(0, 0)])) for kind in CorruptionKind},
    )
    assert CheatEngine(seed=0).corrupt(board, move, 12, "beginner", side=1) is None
