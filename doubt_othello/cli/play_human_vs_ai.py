"""CLI for playing Doubt-Othello against the AI."""

import sys
from pathlib import Path
from typing import Literal, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tyro

from doubt_othello.config import AppConfig, load_config
from doubt_othello.games.othello import render_board
from doubt_othello.session import (
    END_CHALLENGE_FAILED,
    END_CHALLENGE_SUCCEEDED,
    LOSS,
    WIN,
    GameError,
    GameSession,
    GameState,
    InvalidPositionError,
)
from doubt_othello.stats import StatsRecorder, YamlFileStore


def _show(state: GameState) -> None:
    highlight = [m.position for m in state.legal_moves] if state.is_player_turn else []
    print()
    print(render_board(state.board, highlight=highlight))
    print(f"Turn {state.turn} | You (B): {state.black_count}  AI (W): {state.white_count}")


def _announce(state: GameState) -> None:
    if state.end_reason == END_CHALLENGE_SUCCEEDED:
        print("Doubt! The AI cheated. You win! 🎉")
    elif state.end_reason == END_CHALLENGE_FAILED:
        print("The AI played fair. Wrong doubt, you lose. 😢")
    elif state.result == WIN:
        print("You win! 🎉")
    elif state.result == LOSS:
        print("AI wins! 😢")
    else:
        print("It's a draw! 🤝")


def play_human_vs_ai(
    difficulty: Optional[Literal["beginner", "intermediate", "advanced", "extreme"]] = None,
    seed: Optional[int] = None,
    config_path: Optional[str] = None,
    stats_path: Optional[str] = None,
):
    """
    Play a game against the cheating AI. You are Black and move first.
    
    Args:
        difficulty: AI strength and cheat aggressiveness (overrides the config)
        seed: Random seed (overrides the config)
        config_path: YAML config file
        stats_path: YAML file with your running record (overrides the config)
    """
    config = load_config(config_path) if config_path else AppConfig()
    if difficulty is not None:
        config.difficulty = difficulty
    if seed is not None:
        config.seed = seed
    stats_path = stats_path or config.stats_path

    recorder = StatsRecorder(YamlFileStore(stats_path)) if stats_path else None
    session = GameSession(config=config, recorder=recorder)
    state = session.new_game()

    print("=" * 50)
    print("Doubt-Othello - Human vs AI")
    print("=" * 50)
    print(f"Difficulty: {state.difficulty}")
    print("Enter 'row col' to move, 'd' to doubt the AI's last move, 'q' to quit.")
    print("=" * 50)

    while not state.is_terminal:
        _show(state)

        if not state.is_player_turn:
            if state.can_challenge:
                answer = input("You have no move. Doubt the AI's last move? [y/N] ").strip().lower()
                if answer == "y":
                    state = session.challenge(state)
                    continue
            print("AI's turn...")
            state = session.ai_turn(state)
            if state.last_move is not None:
                print(f"AI played {state.last_move}")
            continue

        command = input("Your move: ").strip().lower()
        if command == "q":
            print("Bye!")
            return
        try:
            if command == "d":
                state = session.challenge(state)
                if not state.is_terminal:
                    print("The AI played fair. Play on.")
            else:
                row, col = (int(part) for part in command.replace(",", " ").split())
                state = session.player_move(state, (row, col))
        except InvalidPositionError as exc:
            print(exc)
        except ValueError:
            print("Please enter two numbers, e.g. '2 3'.")
        except GameError as exc:
            print(exc)

    _show(state)
    _announce(state)

    if recorder is not None:
        stats = recorder.summary()
        print(
            f"Record: {stats.wins}W {stats.losses}L {stats.draws}D "
            f"({stats.win_rate:.0%}), successful doubts: {stats.successful_doubts}"
        )


def main():
    tyro.cli(play_human_vs_ai)


if __name__ == "__main__":
    main()
