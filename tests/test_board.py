"""Tests for the Othello board model."""

import numpy as np
import pytest

from doubt_othello.games.othello import (
    BLACK,
    EMPTY,
    WHITE,
    InvalidPositionError,
    Move,
    OthelloGame,
    apply_move,
    find_move,
    initial_board,
    is_terminal,
    legal_moves,
    parse_board,
    render_board,
    score,
    winner,
)
from doubt_othello.games.othello.utils import get_flips


def test_initial_board():
    board = initial_board()

    assert board.shape == (8, 8)
    assert board[3, 3] == WHITE
    assert board[3, 4] == BLACK
    assert board[4, 3] == BLACK
    assert board[4, 4] == WHITE
    assert np.sum(board == EMPTY) == 60
    assert score(board) == (2, 2)


def test_boards_are_read_only():
    board = initial_board()
    with pytest.raises(ValueError):
        board[0, 0] = BLACK

    move = legal_moves(board, BLACK)[0]
    after = apply_move(board, move, BLACK)
    with pytest.raises(ValueError):
        after[0, 0] = BLACK


def test_opening_moves_for_black():
    moves = legal_moves(initial_board(), BLACK)

    assert sorted(m.position for m in moves) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert all(m.num_flips == 1 for m in moves)


def test_apply_move_flips_and_preserves_prior():
    board = initial_board()
    move = find_move(board, BLACK, (2, 3))
    after = apply_move(board, move, BLACK)

    assert move.flips == ((3, 3),)
    assert after[2, 3] == BLACK
    assert after[3, 3] == BLACK
    assert score(after) == (4, 1)
    # Prior snapshot untouched
    assert board[2, 3] == EMPTY
    assert board[3, 3] == WHITE


def test_apply_is_deterministic(midgame_positions):
    for board, side in midgame_positions:
        move = legal_moves(board, side)[0]
        first = apply_move(board.copy(), move, side)
        second = apply_move(board.copy(), move, side)
        assert np.array_equal(first, second)


def test_legal_moves_sound_and_complete(midgame_positions):
    for board, side in midgame_positions:
        listed = {m.position: m for m in legal_moves(board, side)}
        for row in range(8):
            for col in range(8):
                flips = get_flips(board, row, col, side)
                if flips:
                    assert (row, col) in listed
                    assert set(listed[(row, col)].flips) == set(flips)
                else:
                    assert (row, col) not in listed


def test_stone_conservation(midgame_positions):
    for board, side in midgame_positions:
        black, white = score(board)
        for move in legal_moves(board, side):
            after = apply_move(board, move, side)
            new_black, new_white = score(after)
            assert new_black + new_white + int(np.sum(after == EMPTY)) == 64
            # Placed stone adds one; flips only change colour.
            assert new_black + new_white == black + white + 1
            mover_gain = (new_black - black) if side == BLACK else (new_white - white)
            assert mover_gain == 1 + move.num_flips


def test_multi_direction_flips():
    board = parse_board([
        "........",
        "..B.B.B.",
        "...WWW..",
        "..BW.WB.",
        "...WWW..",
        "..B.B.B.",
        "........",
        "........",
    ])
    move = find_move(board, BLACK, (3, 4))

    assert move is not None
    assert move.num_flips == 8


def test_unbracketed_ray_does_not_flip():
    board = parse_board([
        "WW......",
        "........",
        "........",
        ".WWB....",
        "........",
        "........",
        "........",
        "........",
    ])
    # Ray from (3, 0) hits W, W, B: bracketed
    assert find_move(board, BLACK, (3, 0)).flips == ((3, 1), (3, 2))
    # Ray running off the board is not a bracket
    assert find_move(board, BLACK, (0, 2)) is None


def test_find_move_rejects_off_board_positions():
    board = initial_board()
    with pytest.raises(InvalidPositionError):
        find_move(board, BLACK, (8, 0))
    with pytest.raises(InvalidPositionError):
        find_move(board, BLACK, (-1, 3))
    with pytest.raises(ValueError):
        find_move(board, BLACK, (1, 2, 3))


def test_terminal_and_winner():
    full = parse_board(["BBBBBBBB"] * 5 + ["WWWWWWWW"] * 3)
    assert is_terminal(full)
    assert winner(full) == BLACK

    draw = parse_board(["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4)
    assert winner(draw) == 0

    assert not is_terminal(initial_board())
    assert winner(initial_board()) is None


def test_terminal_iff_both_sides_stuck(midgame_positions):
    for board, _ in midgame_positions:
        both_stuck = not legal_moves(board, BLACK) and not legal_moves(board, WHITE)
        assert is_terminal(board) == both_stuck

    # Black cannot move, White can: not terminal
    board = parse_board([
        "WB......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ])
    assert legal_moves(board, BLACK) == []
    assert legal_moves(board, WHITE) == [Move((0, 2), ((0, 1),))]
    assert not is_terminal(board)


def test_othello_game_pass_and_apply():
    game = OthelloGame()
    state = game.initial_state()

    assert game.current_player(state) == BLACK
    assert len(game.legal_actions(state)) == 4

    next_state = game.apply_action(state, game.legal_actions(state)[0])
    assert game.current_player(next_state) == WHITE
    assert next_state.last_move is not None

    passed = game.pass_turn(next_state)
    assert game.current_player(passed) == BLACK
    assert passed.board is next_state.board

    with pytest.raises(ValueError):
        game.apply_action(state, Move((0, 0)))


def test_render_and_parse_roundtrip():
    text = render_board(initial_board(), highlight=[(2, 3)])
    lines = text.splitlines()

    assert lines[0] == "  0 1 2 3 4 5 6 7"
    assert lines[3] == "2 . . . * . . . ."
    assert lines[4] == "3 . . . W B . . ."
