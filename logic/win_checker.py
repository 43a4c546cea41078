"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, Sequence

from .game_state import Cell, GameStatus, Mark, Outcome, WinLine


# All possible winning lines, as board indices
WIN_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def _check_line(board: Sequence[Cell], line: WinLine) -> Optional[Mark]:
    """Return the mark filling all three cells of `line`, if any."""
    a, b, c = line
    mark = board[a]
    if mark is not None and mark == board[b] == board[c]:
        return mark
    return None


def winner(board: Sequence[Cell]) -> Outcome:
    """
    Work out the outcome of a board.

    The first line (in WIN_LINES order) filled by one mark wins. With no
    winning line, a full board is a draw and anything else is ongoing.
    Works on any board, including ones legal play can never reach.

    Args:
        board: The 9 cells.

    Returns:
        The Outcome.
    """
    for line in WIN_LINES:
        mark = _check_line(board, line)
        if mark is not None:
            return Outcome.won(mark, line)

    if all(cell is not None for cell in board):
        return Outcome.draw()

    return Outcome.ongoing()


def is_draw(board: Sequence[Cell]) -> bool:
    """Check if the board is full with no winner."""
    return winner(board).status == GameStatus.DRAW


# Quick test
if __name__ == "__main__":
    from .game_state import board_from_string

    print("Testing win checker...")

    # Test 1: Horizontal win
    outcome = winner(board_from_string("XXX" "OO." "..."))
    print(f"Test 1 (horizontal): {outcome}")
    assert outcome == Outcome.won(Mark.X, (0, 1, 2))

    # Test 2: Diagonal win
    outcome = winner(board_from_string("OX." "XO." "..O"))
    print(f"Test 2 (diagonal): {outcome}")
    assert outcome == Outcome.won(Mark.O, (0, 4, 8))

    # Test 3: No winner
    outcome = winner(board_from_string("XO." ".X." "..O"))
    print(f"Test 3 (no winner): {outcome}")
    assert outcome == Outcome.ongoing()

    # Test 4: Draw (full board, no winner)
    board = board_from_string("XOX" "XOO" "OXX")
    print(f"Test 4 (draw): is_draw = {is_draw(board)}")
    assert is_draw(board)

    print("\nWin checker test done!")
