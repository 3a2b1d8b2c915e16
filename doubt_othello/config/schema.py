"""Configuration schema for games and matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"
EXTREME = "extreme"

DIFFICULTIES = (BEGINNER, INTERMEDIATE, ADVANCED, EXTREME)


def check_difficulty(difficulty: str) -> str:
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty '{difficulty}'. Expected one of {DIFFICULTIES}.")
    return difficulty


@dataclass
class AIConfig:
    minimax_depth: int = 3
    greedy_probability: float = 0.7
    use_alpha_beta: bool = True


@dataclass
class CheatConfig:
    """
    Cheat policy knobs.

    Attributes:
        enabled: Master switch; with it off the AI always plays honestly.
        min_turn: No cheating before this turn.
        cooldown_turns: Minimum distance in turns between two cheats.
        late_game_turn: From this turn on Extreme cheats whenever the cap allows.
        turn_scaling: Relative probability increase reached at ``full_scale_turn``.
        full_scale_turn: Turn at which the probability scaling tops out.
        max_probability: Upper bound of the scaled probability.
        probability: Base cheat probability per difficulty.
        max_cheats: Cheats allowed per game per difficulty.
    """

    enabled: bool = True
    min_turn: int = 10
    cooldown_turns: int = 3
    late_game_turn: int = 25
    turn_scaling: float = 0.5
    full_scale_turn: int = 60
    max_probability: float = 0.95
    probability: Dict[str, float] = field(default_factory=lambda: {
        BEGINNER: 0.15,
        INTERMEDIATE: 0.25,
        ADVANCED: 0.35,
        EXTREME: 0.45,
    })
    max_cheats: Dict[str, int] = field(default_factory=lambda: {
        BEGINNER: 2,
        INTERMEDIATE: 3,
        ADVANCED: 4,
        EXTREME: 6,
    })

    def __post_init__(self) -> None:
        for table_name in ("probability", "max_cheats"):
            table = getattr(self, table_name)
            missing = [d for d in DIFFICULTIES if d not in table]
            if missing:
                raise ValueError(f"cheat.{table_name} is missing difficulties: {missing}")
            for key in table:
                check_difficulty(key)


@dataclass
class ChallengeConfig:
    # Open product question: a failed doubt may or may not end the game.
    failed_challenge_ends_game: bool = True


@dataclass
class AppConfig:
    difficulty: str = INTERMEDIATE
    seed: Optional[int] = None
    ai: AIConfig = field(default_factory=AIConfig)
    cheat: CheatConfig = field(default_factory=CheatConfig)
    challenge: ChallengeConfig = field(default_factory=ChallengeConfig)
    stats_path: Optional[str] = None

    def __post_init__(self) -> None:
        check_difficulty(self.difficulty)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        ai = AIConfig(**data.get("ai", {}))

        cheat_data = dict(data.get("cheat", {}))
        defaults = CheatConfig()
        # Partial tables override only the listed difficulties.
        for table_name in ("probability", "max_cheats"):
            if table_name in cheat_data:
                merged = dict(getattr(defaults, table_name))
                merged.update(cheat_data[table_name] or {})
                cheat_data[table_name] = merged
        cheat = CheatConfig(**cheat_data)

        challenge = ChallengeConfig(**data.get("challenge", {}))

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(
            difficulty=str(data.get("difficulty", INTERMEDIATE)),
            seed=seed,
            ai=ai,
            cheat=cheat,
            challenge=challenge,
            stats_path=data.get("stats_path"),
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
