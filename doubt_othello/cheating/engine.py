"""Cheat injection and challenge verification."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..config.schema import CheatConfig, check_difficulty
from ..games.othello import EMPTY, Move, apply_move, find_move
from ..games.othello.utils import Position, check_position, freeze
from .policy import DEFAULT_CHEAT_CONFIG, should_cheat
from .record import CheatRecord, CorruptionKind
from .strategies import KIND_WEIGHTS, STRATEGIES, Corruption, CorruptionContext, describe


def verify_challenge(
    prior_board: np.ndarray,
    actual_board: np.ndarray,
    legitimate_move: Move,
    side: Optional[int] = None,
) -> bool:
    """
    True if ``actual_board`` is not what honestly playing ``legitimate_move``
    on ``prior_board`` produces, i.e. a doubt of that move succeeds.

    The flips are re-derived from ``prior_board``; ``legitimate_move.flips``
    is never trusted. ``side`` defaults to the colour placed at the target.
    """
    position = check_position(legitimate_move.position, prior_board.shape[0])
    if prior_board.shape != actual_board.shape:
        return True
    if side is None:
        side = int(actual_board[position])
        if side == EMPTY:
            return True

    honest_move = find_move(prior_board, side, position)
    if honest_move is None:
        return True
    honest = apply_move(prior_board, honest_move, side)
    return not np.array_equal(honest, actual_board)


def audit_move(prior_board: np.ndarray, actual_board: np.ndarray, position: Position) -> bool:
    """Judge an opponent's ply from what a player can see: before, after, and where it played."""
    return verify_challenge(prior_board, actual_board, Move(position=tuple(position)))


def is_sound_corruption(
    prior: np.ndarray,
    honest: np.ndarray,
    corrupted: np.ndarray,
    move: Move,
    side: int,
) -> bool:
    """
    A corruption must change the honest result, and relative to the prior
    board it may only place the mover's stone on the target and turn
    opponent stones into the mover's colour.
    """
    if np.array_equal(honest, corrupted):
        return False
    if corrupted[move.position] != side:
        return False
    rows, cols = np.nonzero(prior != corrupted)
    for r, c in zip(rows, cols):
        cell = (int(r), int(c))
        if cell == move.position:
            continue
        if prior[cell] != -side or corrupted[cell] != side:
            return False
    return True


class CheatEngine:
    """
    Decides when the AI cheats and produces the corrupted board.

    All randomness comes from the injected generator.
    """

    def __init__(
        self,
        config: Optional[CheatConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or DEFAULT_CHEAT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def should_cheat(self, difficulty: str, turn: int, cheat_history: Sequence[CheatRecord]) -> bool:
        return should_cheat(difficulty, turn, cheat_history, rng=self.rng, config=self.config)

    def strategy_order(self, difficulty: str) -> List[CorruptionKind]:
        """All kinds available at ``difficulty`` in weighted-random order."""
        table = KIND_WEIGHTS[check_difficulty(difficulty)]
        kinds = list(table)
        weights = np.array([table[k] for k in kinds], dtype=np.float64)
        order = self.rng.choice(len(kinds), size=len(kinds), replace=False, p=weights / weights.sum())
        return [kinds[int(i)] for i in order]

    def corrupt(
        self,
        board: np.ndarray,
        legitimate_move: Move,
        turn: int,
        difficulty: str,
        side: Optional[int] = None,
    ) -> Optional[CheatRecord]:
        """
        Corrupt the result of ``legitimate_move``.

        Strategies are tried in weighted-random order until one yields a
        sound corruption. Returns None if none of them can change the board,
        which means no cheat happened.

        Args:
            board: Position the AI moves from.
            legitimate_move: The AI's honest move on ``board``.
            turn: Current turn number.
            difficulty: Difficulty name; selects the available kinds.
            side: Mover; defaults to the owner the flip cells will change to,
                i.e. the opponent of the first flipped stone.
        """
        if side is None:
            if not legitimate_move.flips:
                raise ValueError("Cannot infer the mover from a move without flips")
            side = -int(board[legitimate_move.flips[0]])

        honest = apply_move(board, legitimate_move, side)
        ctx = CorruptionContext(
            prior=board,
            honest=honest,
            move=legitimate_move,
            side=side,
            difficulty=difficulty,
            rng=self.rng,
        )

        for kind in self.strategy_order(difficulty):
            corruption = STRATEGIES[kind](ctx)
            if not corruption.positions:
                continue
            corrupted = self._build(honest, corruption, side)
            if not is_sound_corruption(board, honest, corrupted, legitimate_move, side):
                continue
            return CheatRecord(
                turn=turn,
                board_before=board,
                board_after=corrupted,
                corrupted_positions=tuple(corruption.positions),
                kind=kind,
                move=legitimate_move,
                side=side,
                description=describe(kind, legitimate_move, corruption.positions),
            )
        return None

    def verify_challenge(
        self,
        prior_board: np.ndarray,
        actual_board: np.ndarray,
        legitimate_move: Move,
    ) -> bool:
        return verify_challenge(prior_board, actual_board, legitimate_move)

    @staticmethod
    def _build(honest: np.ndarray, corruption: Corruption, side: int) -> np.ndarray:
        corrupted = honest.copy()
        colour = -side if corruption.revert else side
        for cell in corruption.positions:
            corrupted[cell] = colour
        return freeze(corrupted)
