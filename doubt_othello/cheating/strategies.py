"""
Corruption strategies.

Each strategy looks at the honest result of the AI's move and names the
cells to tamper with. Stealing kinds turn opponent stones into the mover's
colour; ``skip_flip`` leaves some legally flipped stones unflipped. None of
them ever touches an empty cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Set

import numpy as np

from ..config.schema import ADVANCED, BEGINNER, EXTREME, INTERMEDIATE
from ..games.othello import EMPTY, Move, Position
from ..games.othello.utils import DIRECTIONS, in_bounds, is_corner, is_edge, neighbours
from .record import CorruptionKind

KIND_WEIGHTS: Dict[str, Dict[CorruptionKind, float]] = {
    BEGINNER: {
        CorruptionKind.EXTRA_FLIP: 0.6,
        CorruptionKind.SKIP_FLIP: 0.4,
    },
    INTERMEDIATE: {
        CorruptionKind.EXTRA_FLIP: 0.5,
        CorruptionKind.SKIP_FLIP: 0.5,
    },
    ADVANCED: {
        CorruptionKind.EXTRA_FLIP: 0.25,
        CorruptionKind.SKIP_FLIP: 0.25,
        CorruptionKind.REMOTE_STEAL: 0.25,
        CorruptionKind.DIAGONAL_STEAL: 0.25,
    },
    EXTREME: {
        CorruptionKind.EXTRA_FLIP: 0.10,
        CorruptionKind.SKIP_FLIP: 0.15,
        CorruptionKind.REMOTE_STEAL: 0.20,
        CorruptionKind.DIAGONAL_STEAL: 0.15,
        CorruptionKind.CLUSTER_STEAL: 0.15,
        CorruptionKind.MEGA_STEAL: 0.10,
        CorruptionKind.PHANTOM_STEAL: 0.15,
    },
}

# Most stones a single extra_flip may add.
MAX_EXTRA_FLIPS = {BEGINNER: 2, INTERMEDIATE: 3, ADVANCED: 2, EXTREME: 1}

REMOTE_MIN_DISTANCE = 3
MEGA_STEAL_RANGE = (3, 5)
PHANTOM_MIN_OCCUPIED_NEIGHBOURS = 5


@dataclass
class CorruptionContext:
    prior: np.ndarray
    honest: np.ndarray
    move: Move
    side: int
    difficulty: str
    rng: np.random.Generator


@dataclass
class Corruption:
    positions: List[Position]
    revert: bool = False  # True: positions go back to the opponent (skip_flip)


def _ray_cells(target: Position, size: int) -> Set[Position]:
    """Every cell on the eight lines through ``target``."""
    cells = set()
    for dr, dc in DIRECTIONS:
        r, c = target[0] + dr, target[1] + dc
        while in_bounds(r, c, size):
            cells.add((r, c))
            r += dr
            c += dc
    return cells


def _opponent_cells(ctx: CorruptionContext) -> List[Position]:
    rows, cols = np.nonzero(ctx.honest == -ctx.side)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def _sample(ctx: CorruptionContext, candidates: List[Position], low: int, high: int) -> List[Position]:
    """Pick between ``low`` and ``high`` distinct cells (fewer if not enough candidates)."""
    if not candidates:
        return []
    candidates = sorted(candidates)
    count = int(ctx.rng.integers(low, high + 1))
    count = max(1, min(count, len(candidates)))
    picked = ctx.rng.choice(len(candidates), size=count, replace=False)
    return sorted(candidates[int(i)] for i in picked)


def _chebyshev(a: Position, b: Position) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def extra_flip(ctx: CorruptionContext) -> Corruption:
    """Flip opponent stones next to the placed stone or its flips."""
    touched = {ctx.move.position, *ctx.move.flips}
    size = ctx.honest.shape[0]
    candidates = {
        cell
        for origin in touched
        for cell in neighbours(origin[0], origin[1], size)
        if ctx.honest[cell] == -ctx.side
    }
    limit = MAX_EXTRA_FLIPS.get(ctx.difficulty, 1)
    return Corruption(_sample(ctx, list(candidates), 1, limit))


def skip_flip(ctx: CorruptionContext) -> Corruption:
    """Leave part of the legally flipped stones in the opponent's colour."""
    flips = list(ctx.move.flips)
    high = max(1, (len(flips) + 1) // 2)
    return Corruption(_sample(ctx, flips, 1, high), revert=True)


def remote_steal(ctx: CorruptionContext) -> Corruption:
    """Steal one stone far from the move and off its lines."""
    lines = _ray_cells(ctx.move.position, ctx.honest.shape[0])
    candidates = [
        cell for cell in _opponent_cells(ctx)
        if cell not in lines and _chebyshev(cell, ctx.move.position) >= REMOTE_MIN_DISTANCE
    ]
    return Corruption(_sample(ctx, candidates, 1, 1))


def diagonal_steal(ctx: CorruptionContext) -> Corruption:
    """Steal stones on a diagonal through the move that the rules left alone."""
    size = ctx.honest.shape[0]
    row, col = ctx.move.position
    candidates = []
    for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
        r, c = row + dr, col + dc
        while in_bounds(r, c, size):
            if ctx.honest[r, c] == -ctx.side:
                candidates.append((r, c))
            r += dr
            c += dc
    return Corruption(_sample(ctx, candidates, 1, 2))


def cluster_steal(ctx: CorruptionContext) -> Corruption:
    """Steal a small connected group away from the move."""
    size = ctx.honest.shape[0]
    lines = _ray_cells(ctx.move.position, size)
    pool = [
        cell for cell in _opponent_cells(ctx)
        if cell not in lines and _chebyshev(cell, ctx.move.position) > 1
    ]
    if not pool:
        return Corruption([])
    seed = pool[int(ctx.rng.integers(len(pool)))]
    group = [seed]
    for cell in neighbours(seed[0], seed[1], size):
        if cell in pool:
            group.append(cell)
    extra = _sample(ctx, group[1:], 1, 2)
    return Corruption(sorted([seed, *extra]))


def mega_steal(ctx: CorruptionContext) -> Corruption:
    """Steal several scattered stones anywhere off the move's lines."""
    lines = _ray_cells(ctx.move.position, ctx.honest.shape[0])
    candidates = [cell for cell in _opponent_cells(ctx) if cell not in lines]
    return Corruption(_sample(ctx, candidates, *MEGA_STEAL_RANGE))


def phantom_steal(ctx: CorruptionContext) -> Corruption:
    """Steal one interior stone buried among other stones, where a change is hardest to spot."""
    size = ctx.honest.shape[0]
    lines = _ray_cells(ctx.move.position, size)
    candidates = []
    for cell in _opponent_cells(ctx):
        if cell in lines or is_corner(cell) or is_edge(cell, size):
            continue
        occupied = sum(1 for n in neighbours(cell[0], cell[1], size) if ctx.honest[n] != EMPTY)
        if occupied >= PHANTOM_MIN_OCCUPIED_NEIGHBOURS:
            candidates.append(cell)
    return Corruption(_sample(ctx, candidates, 1, 1))


STRATEGIES: Dict[CorruptionKind, Callable[[CorruptionContext], Corruption]] = {
    CorruptionKind.EXTRA_FLIP: extra_flip,
    CorruptionKind.SKIP_FLIP: skip_flip,
    CorruptionKind.REMOTE_STEAL: remote_steal,
    CorruptionKind.DIAGONAL_STEAL: diagonal_steal,
    CorruptionKind.CLUSTER_STEAL: cluster_steal,
    CorruptionKind.MEGA_STEAL: mega_steal,
    CorruptionKind.PHANTOM_STEAL: phantom_steal,
}


def describe(kind: CorruptionKind, move: Move, positions: List[Position]) -> str:
    cells = ", ".join(str(p) for p in positions)
    if kind is CorruptionKind.SKIP_FLIP:
        return f"Move at {move.position} left {len(positions)} stone(s) unflipped: {cells}"
    if kind is CorruptionKind.EXTRA_FLIP:
        return f"Move at {move.position} flipped {len(positions)} extra stone(s): {cells}"
    return f"Move at {move.position} stole {len(positions)} stone(s) ({kind.value}): {cells}"
