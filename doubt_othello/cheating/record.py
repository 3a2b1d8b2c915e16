"""Cheat record: everything needed to adjudicate one doubted AI move."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from ..games.othello import Move, Position


class CorruptionKind(str, Enum):
    EXTRA_FLIP = "extra_flip"
    SKIP_FLIP = "skip_flip"
    REMOTE_STEAL = "remote_steal"
    DIAGONAL_STEAL = "diagonal_steal"
    CLUSTER_STEAL = "cluster_steal"
    MEGA_STEAL = "mega_steal"
    PHANTOM_STEAL = "phantom_steal"


@dataclass(frozen=True, eq=False)
class CheatRecord:
    """
    One corrupted AI ply.

    ``board_before`` is the position the AI moved from and ``board_after``
    the corrupted result that replaced the honest one. ``move`` is the
    legitimate move the corruption was derived from.
    """

    turn: int
    board_before: np.ndarray
    board_after: np.ndarray
    corrupted_positions: Tuple[Position, ...]
    kind: CorruptionKind
    move: Move
    side: int
    description: str = ""
