"""CLI for pitting AI tiers against the cheating AI."""

import sys
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from doubt_othello.config import AppConfig, load_config
from doubt_othello.session import GameState
from doubt_othello.utils import MetricsLogger, play_match

Difficulty = Literal["beginner", "intermediate", "advanced", "extreme"]


def play_ai_vs_ai(
    black: Difficulty = "advanced",
    white: Difficulty = "extreme",
    num_games: int = 10,
    seed: int = 42,
    challenge: Literal["audit", "never"] = "audit",
    config_path: Optional[str] = None,
    log_dir: Optional[str] = None,
):
    """
    Play AI vs AI games; Black stands in for the human and may doubt.
    
    Args:
        black: Tier playing Black
        white: Tier of the cheating AI playing White
        num_games: Number of games to play
        seed: Random seed
        challenge: 'audit' doubts every illegal AI move, 'never' never doubts
        config_path: YAML config file
        log_dir: Directory for a per-game metrics CSV
    """
    config = load_config(config_path) if config_path else AppConfig()
    logger = MetricsLogger(log_dir=log_dir, prefix="match") if log_dir else None

    def on_game_end(game_idx: int, state: GameState) -> None:
        print(
            f"Game {game_idx + 1}: {state.result} ({state.end_reason}) "
            f"B {state.black_count} - W {state.white_count}, cheats: {len(state.cheat_history)}"
        )
        if logger is not None:
            logger.log_dict({
                "result": state.result,
                "end_reason": state.end_reason,
                "black_count": state.black_count,
                "white_count": state.white_count,
                "plies": state.turn - 1,
                "cheats": len(state.cheat_history),
                "successful_challenges": state.successful_challenges,
            }, step=game_idx)

    print("=" * 50)
    print(f"{black} (Black) vs {white} (White, cheating) - {num_games} games")
    print("=" * 50)

    try:
        result = play_match(
            black_difficulty=black,
            white_difficulty=white,
            num_games=num_games,
            seed=seed,
            challenge_policy=challenge,
            config=config,
            on_game_end=on_game_end,
        )
    finally:
        if logger is not None:
            logger.close()

    print("=" * 50)
    print(f"Black wins: {result.black_wins}, draws: {result.draws}, White wins: {result.white_wins}")
    print(
        f"Cheats: {result.cheats}, caught: {result.successful_challenges}, "
        f"wrong doubts: {result.failed_challenges}"
    )
    if logger is not None:
        print(f"Metrics written to {logger.csv_path}")


def main():
    tyro.cli(play_ai_vs_ai)


if __name__ == "__main__":
    main()
