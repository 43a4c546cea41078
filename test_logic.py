"""
Tests for the board rules and the AI player.

Usage:
    pytest test_logic.py
"""

import runpy
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.ai_player import AIPlayer, choose_move
from logic.game_state import (
    Difficulty, GameStatus, Mark, Outcome, board_from_string, empty_board
)
from logic.move_validator import apply_move, legal_moves, validate_move
from logic.win_checker import WIN_LINES, is_draw, winner


# ==================== RULES ====================

@pytest.mark.parametrize("mark", list(Mark))
@pytest.mark.parametrize("line", WIN_LINES)
def test_every_line_wins(line, mark):
    board = empty_board()
    for index in line:
        board[index] = mark

    assert winner(board) == Outcome.won(mark, line)


def test_win_with_other_marks_on_board():
    # O fills the middle column, X is scattered around it
    board = board_from_string("XO." "XO." ".OX")
    assert winner(board) == Outcome.won(Mark.O, (1, 4, 7))


@pytest.mark.parametrize("text", [
    ".........",
    "XO.......",
    "XOX.O.O.X",
    "XX.OO..OX",
])
def test_no_false_positives(text):
    outcome = winner(board_from_string(text))
    assert outcome.status == GameStatus.ONGOING
    assert outcome.line is None


def test_full_board_without_line_is_draw():
    board = board_from_string("XOX" "XOO" "OXX")
    assert winner(board) == Outcome.draw()
    assert is_draw(board)


def test_full_board_with_line_is_not_draw():
    board = board_from_string("XXX" "OOX" "XOO")
    assert winner(board) == Outcome.won(Mark.X, (0, 1, 2))
    assert not is_draw(board)


def test_unreachable_board_reports_first_line():
    board = board_from_string("XXX" "OOO" "...")
    assert winner(board) == Outcome.won(Mark.X, (0, 1, 2))


def test_legal_moves_ascending():
    board = board_from_string("X.O" "..X" "O..")
    assert legal_moves(board) == [1, 3, 4, 7, 8]
    assert legal_moves(empty_board()) == list(range(9))


def test_apply_move_returns_new_board():
    board = empty_board()
    new_board = apply_move(board, 4, Mark.X)

    assert new_board[4] == Mark.X
    assert board[4] is None


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_apply_move_out_of_range(index):
    assert apply_move(empty_board(), index, Mark.X) is None
    assert not validate_move(empty_board(), index).is_valid


def test_apply_move_on_occupied_cell():
    board = board_from_string("X........")
    assert apply_move(board, 0, Mark.O) is None

    result = validate_move(board, 0)
    assert not result.is_valid
    assert "occupied" in result.error_message


# ==================== AI PLAYER ====================

def test_blocks_open_line():
    board = board_from_string("XX.......")

    assert choose_move(board, Mark.O, Difficulty.HARD) == 2


def test_delays_forced_loss():
    # X wins whatever O does, blocking at 2 only makes it take longer
    ai = AIPlayer(Mark.O)
    board = board_from_string("XX.......")

    assert ai.evaluate(board, Mark.O) == (2, -6)
    # Not blocking loses on the very next move
    assert ai.evaluate(board_from_string("XX.O....."), Mark.X) == (2, -9)


def test_prefers_immediate_win():
    # X can fork at 2, but 8 wins right away
    ai = AIPlayer(Mark.X)
    board = board_from_string("X.." ".XO" ".O.")

    assert ai.evaluate(board, Mark.X) == (8, 9)
    assert ai.get_best_move(board) == 8


def test_takes_win_over_block():
    # O can block X at 2 or win at 5
    board = board_from_string("XX." "OO." "X..")
    assert choose_move(board, Mark.O) == 5


def test_terminal_board_evaluates_without_move():
    ai = AIPlayer(Mark.X)
    assert ai.evaluate(board_from_string("XXX" "OO." "..."), Mark.O) == (None, 10)
    assert ai.evaluate(board_from_string("OOO" "XX." "X.."), Mark.X) == (None, -10)
    assert ai.evaluate(board_from_string("XOX" "XOO" "OXX"), Mark.O) == (None, 0)


def test_refuses_finished_board():
    ai = AIPlayer(Mark.O)
    with pytest.raises(AssertionError):
        ai.choose_move(board_from_string("XOX" "XOO" "OXX"))
    with pytest.raises(AssertionError):
        ai.choose_move(board_from_string("XXX" "OO." "..."))


def test_hard_self_play_is_draw():
    players = {Mark.X: AIPlayer(Mark.X), Mark.O: AIPlayer(Mark.O)}
    board = empty_board()
    to_move = Mark.X

    while winner(board).status == GameStatus.ONGOING:
        move = players[to_move].choose_move(board, Difficulty.HARD)
        board = apply_move(board, move, to_move)
        to_move = to_move.opposite()

    assert winner(board) == Outcome.draw()
    assert legal_moves(board) == []


def test_easy_move_distribution():
    # X wins at 2; the random branch may pick 2 as well
    board = board_from_string("XX." "OO." ".OX")
    ai = AIPlayer(Mark.X, rng=np.random.default_rng(1234))
    trials = 10_000

    moves = [ai.choose_move(board, Difficulty.EASY) for _ in range(trials)]
    counts = {move: moves.count(move) / trials for move in set(moves)}

    assert set(counts) == {2, 5, 6}
    random_share = 0.35 / 3
    assert counts[2] == pytest.approx(0.65 + random_share, abs=0.03)
    assert counts[5] == pytest.approx(random_share, abs=0.02)
    assert counts[6] == pytest.approx(random_share, abs=0.02)


def test_easy_is_reproducible_with_seed():
    board = board_from_string("XX." "OO." ".OX")

    first = AIPlayer(Mark.X, np.random.default_rng(7))
    second = AIPlayer(Mark.X, np.random.default_rng(7))
    assert ([first.choose_move(board, Difficulty.EASY) for _ in range(20)]
            == [second.choose_move(board, Difficulty.EASY) for _ in range(20)])


# ==================== MODULE SELF-CHECKS ====================

@pytest.mark.filterwarnings("ignore::RuntimeWarning")
@pytest.mark.parametrize("module", [
    "logic.game_state",
    "logic.win_checker",
    "logic.move_validator",
    "logic.ai_player",
])
def test_module_quick_test_runs(module, capsys):
    runpy.run_module(module, run_name="__main__")
    assert "test done!" in capsys.readouterr().out
