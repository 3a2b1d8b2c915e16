"""Turn order, cheat injection and doubt resolution for one human-vs-AI game."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Tuple

import numpy as np

from ..agents import AIStrategy
from ..cheating import CheatEngine, CheatRecord
from ..config.schema import AppConfig, check_difficulty
from ..games.othello import (
    BLACK,
    WHITE,
    apply_move,
    find_move,
    has_legal_move,
    initial_board,
    score,
)
from ..games.othello.board import stone_leader
from ..games.othello.utils import Position, check_position, freeze
from ..stats import StatsRecorder
from .errors import GameOverError, IllegalMoveError, NoActiveCheatWindowError, OutOfTurnError
from .state import (
    END_CHALLENGE_FAILED,
    END_CHALLENGE_SUCCEEDED,
    END_NO_MOVES,
    ChallengeWindow,
    GameOutcome,
    GameState,
)

PLAYER_SIDE = BLACK
AI_SIDE = WHITE


class GameSession:
    """
    Drives a game of Doubt-Othello. The human plays Black and moves first.

    The session never mutates a :class:`GameState`; every operation returns
    a new one. Only the most recent AI ply can be doubted: the window opens
    when the AI moves and closes on the player's next move, the AI's next
    move, or a doubt.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        strategy: Optional[AIStrategy] = None,
        cheat_engine: Optional[CheatEngine] = None,
        recorder: Optional[StatsRecorder] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or AppConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.strategy = strategy or AIStrategy(self.config.ai, rng=self.rng)
        self.cheat_engine = cheat_engine or CheatEngine(self.config.cheat, rng=self.rng)
        self.recorder = recorder

    def new_game(self, difficulty: Optional[str] = None) -> GameState:
        difficulty = check_difficulty(difficulty or self.config.difficulty)
        board = initial_board()
        black, white = score(board)
        return GameState(
            board=board,
            side_to_move=PLAYER_SIDE,
            black_count=black,
            white_count=white,
            turn=1,
            difficulty=difficulty,
        )

    def player_move(self, state: GameState, position: Sequence[int]) -> GameState:
        """
        Play the human's stone at ``position``. Forgoes any pending doubt.

        Raises:
            InvalidPositionError: ``position`` is off the board.
            IllegalMoveError: ``position`` is not a legal move for Black.
            OutOfTurnError: it is the AI's turn.
            GameOverError: the game has ended.
        """
        self._check_active(state)
        if state.side_to_move != PLAYER_SIDE:
            raise OutOfTurnError("It is the AI's turn")

        position = check_position(position)
        move = find_move(state.board, PLAYER_SIDE, position)
        if move is None:
            raise IllegalMoveError(position)

        board = apply_move(state.board, move, PLAYER_SIDE)
        return self._after_ply(state, board, PLAYER_SIDE, position)

    def ai_turn(self, state: GameState) -> GameState:
        """Let the AI play one ply, possibly corrupted."""
        self._check_active(state)
        if state.side_to_move != AI_SIDE:
            raise OutOfTurnError("It is the player's turn")

        move = self.strategy.select_move(state.board, AI_SIDE, state.difficulty)
        if move is None:
            # Transitions never hand the turn to a side without moves.
            return self._after_pass(state, AI_SIDE)

        record: Optional[CheatRecord] = None
        if self.cheat_engine.should_cheat(state.difficulty, state.turn, state.cheat_history):
            record = self.cheat_engine.corrupt(
                state.board, move, state.turn, state.difficulty, side=AI_SIDE
            )

        if record is not None:
            board = record.board_after
            history = state.cheat_history + (record,)
        else:
            board = apply_move(state.board, move, AI_SIDE)
            history = state.cheat_history

        return self._after_ply(
            state,
            board,
            AI_SIDE,
            move.position,
            cheat_record=record,
            challenge_window=ChallengeWindow(board_before=state.board, move=move),
            cheat_history=history,
        )

    def challenge(self, state: GameState) -> GameState:
        """
        Doubt the AI's last ply.

        A confirmed cheat wins the game for the player. A wrong doubt loses
        it, unless ``challenge.failed_challenge_ends_game`` is off, in which
        case the window just closes.

        Raises:
            NoActiveCheatWindowError: no AI ply is open to a doubt.
            GameOverError: the game has ended.
        """
        self._check_active(state)
        window = state.challenge_window
        if window is None:
            raise NoActiveCheatWindowError("There is no AI move to doubt")

        succeeded = state.cheat_record is not None and self.cheat_engine.verify_challenge(
            window.board_before, state.board, window.move
        )

        if succeeded:
            restored = np.where(window.board_before == AI_SIDE, PLAYER_SIDE, window.board_before)
            board = freeze(restored.astype(np.int8))
            black, white = score(board)
            return self._finish(replace(
                state,
                board=board,
                black_count=black,
                white_count=white,
                cheat_record=None,
                challenge_window=None,
                is_terminal=True,
                winner=PLAYER_SIDE,
                successful_challenges=state.successful_challenges + 1,
                end_reason=END_CHALLENGE_SUCCEEDED,
            ))

        if self.config.challenge.failed_challenge_ends_game:
            return self._finish(replace(
                state,
                cheat_record=None,
                challenge_window=None,
                is_terminal=True,
                winner=AI_SIDE,
                end_reason=END_CHALLENGE_FAILED,
            ))

        return replace(state, cheat_record=None, challenge_window=None)

    def outcome(self, state: GameState) -> GameOutcome:
        if not state.is_terminal or state.result is None:
            raise ValueError("Game is not finished")
        return GameOutcome(
            result=state.result,
            difficulty=state.difficulty,
            black_count=state.black_count,
            white_count=state.white_count,
            challenge_succeeded=state.end_reason == END_CHALLENGE_SUCCEEDED,
            turns=state.turn - 1,
        )

    def _check_active(self, state: GameState) -> None:
        if state.is_terminal:
            raise GameOverError("The game is over")

    def _after_ply(
        self,
        state: GameState,
        board: np.ndarray,
        mover: int,
        position: Position,
        cheat_record: Optional[CheatRecord] = None,
        challenge_window: Optional[ChallengeWindow] = None,
        cheat_history: Optional[Tuple[CheatRecord, ...]] = None,
    ) -> GameState:
        black, white = score(board)
        next_side, terminal = _next_side(board, mover)
        new_state = replace(
            state,
            board=board,
            side_to_move=next_side,
            black_count=black,
            white_count=white,
            turn=state.turn + 1,
            last_move=position,
            cheat_record=cheat_record,
            challenge_window=challenge_window,
            cheat_history=state.cheat_history if cheat_history is None else cheat_history,
        )
        if terminal:
            return self._finish(replace(
                new_state,
                is_terminal=True,
                winner=stone_leader(board),
                end_reason=END_NO_MOVES,
            ))
        return new_state

    def _after_pass(self, state: GameState, passer: int) -> GameState:
        if not has_legal_move(state.board, -passer):
            return self._finish(replace(
                state,
                cheat_record=None,
                challenge_window=None,
                is_terminal=True,
                winner=stone_leader(state.board),
                end_reason=END_NO_MOVES,
            ))
        return replace(state, side_to_move=-passer, cheat_record=None, challenge_window=None)

    def _finish(self, state: GameState) -> GameState:
        if self.recorder is not None:
            self.recorder.record(self.outcome(state))
        return state


def _next_side(board: np.ndarray, mover: int) -> Tuple[int, bool]:
    """Side to move after ``mover`` played; passes are automatic. Second item: game over."""
    if has_legal_move(board, -mover):
        return -mover, False
    if has_legal_move(board, mover):
        return mover, False
    return -mover, True
