"""Utilities for playing matches between AI tiers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Literal, Optional

import numpy as np

from ..agents import AIStrategy
from ..cheating import audit_move
from ..config.schema import AppConfig, check_difficulty
from ..games.othello import BLACK, WHITE
from ..session import END_CHALLENGE_FAILED, GameSession, GameState

ChallengePolicy = Literal["audit", "never"]


@dataclass
class MatchResult:
    black_wins: int = 0
    draws: int = 0
    white_wins: int = 0
    successful_challenges: int = 0
    failed_challenges: int = 0
    cheats: int = 0
    plies: int = 0

    @property
    def games(self) -> int:
        return self.black_wins + self.draws + self.white_wins


def should_doubt(state: GameState) -> bool:
    """A watchful player's call, from the visible boards only."""
    if not state.can_challenge or state.last_move is None:
        return False
    window = state.challenge_window
    return audit_move(window.board_before, state.board, state.last_move)


def play_game(
    session: GameSession,
    black: AIStrategy,
    black_difficulty: str,
    white_difficulty: str,
    challenge_policy: ChallengePolicy = "audit",
) -> GameState:
    """Play one game where Black is also an AI tier standing in for the human."""
    state = session.new_game(white_difficulty)
    while not state.is_terminal:
        if challenge_policy == "audit" and should_doubt(state):
            state = session.challenge(state)
        elif state.side_to_move == BLACK:
            move = black.select_move(state.board, BLACK, black_difficulty)
            if move is None:
                raise RuntimeError("Black was handed the turn without a legal move")
            state = session.player_move(state, move.position)
        else:
            state = session.ai_turn(state)
    return state


def play_match(
    black_difficulty: str,
    white_difficulty: str,
    num_games: int = 10,
    seed: Optional[int] = None,
    challenge_policy: ChallengePolicy = "audit",
    config: Optional[AppConfig] = None,
    on_game_end: Optional[Callable[[int, GameState], None]] = None,
) -> MatchResult:
    """
    Play ``num_games`` games of ``black_difficulty`` against the cheating
    ``white_difficulty`` AI.
    
    Args:
        black_difficulty: Tier standing in for the human player.
        white_difficulty: Tier of the (cheating) AI opponent.
        num_games: Number of games to play
        seed: Random seed; game ``i`` uses ``seed + i``
        challenge_policy: "audit" doubts every AI ply the visible boards show
            to be illegal; "never" never doubts.
        config: Settings for the session and both AIs.
        on_game_end: Called with (game index, final state) after every game.
        
    Returns:
        Aggregated MatchResult.
    """
    check_difficulty(black_difficulty)
    check_difficulty(white_difficulty)
    if challenge_policy not in ("audit", "never"):
        raise ValueError(f"Unknown challenge policy: {challenge_policy}")
    config = replace(config or AppConfig(), difficulty=white_difficulty)

    result = MatchResult()
    for game_idx in range(num_games):
        rng = np.random.default_rng(None if seed is None else seed + game_idx)
        session = GameSession(config=config, rng=rng)
        black = AIStrategy(config.ai, rng=rng)

        state = play_game(session, black, black_difficulty, white_difficulty, challenge_policy)

        if state.winner == BLACK:
            result.black_wins += 1
        elif state.winner == WHITE:
            result.white_wins += 1
        else:
            result.draws += 1
        result.successful_challenges += state.successful_challenges
        if state.end_reason == END_CHALLENGE_FAILED:
            result.failed_challenges += 1
        result.cheats += len(state.cheat_history)
        result.plies += state.turn - 1

        if on_game_end is not None:
            on_game_end(game_idx, state)

    return result
