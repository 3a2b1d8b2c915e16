"""Othello value types: moves and search states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .utils import Position


@dataclass(frozen=True)
class Move:
    """A target cell plus the opponent stones the move flips."""

    position: Position
    flips: Tuple[Position, ...] = ()

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    @property
    def num_flips(self) -> int:
        return len(self.flips)


@dataclass(frozen=True, eq=False)
class OthelloState:
    board: np.ndarray
    side_to_move: int
    last_move: Optional[Position] = None
