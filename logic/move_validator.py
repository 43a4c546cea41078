"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies them.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def validate_move(board: Sequence[Cell], index: int) -> ValidationResult:
    """
    Validate a move.

    Rules:
    1. Index must be on the board (0-8)
    2. Can only place on empty cells

    Args:
        board: Current board.
        index: Cell to place a mark on.

    Returns:
        ValidationResult with is_valid and error_message.
    """
    # Check if index is in valid range
    if not (0 <= index < GameConfig.CELL_COUNT):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid position {index}. Must be 0-8."
        )

    # Check if cell is empty
    if board[index] is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Cell {index} is already occupied by {board[index].value}"
        )

    return ValidationResult(is_valid=True)


def legal_moves(board: Sequence[Cell]) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        Indices in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def apply_move(board: Sequence[Cell], index: int, mark: Mark) -> Optional[Board]:
    """
    Place a mark on a copy of the board.

    Args:
        board: Current board (left untouched).
        index: Cell to place the mark on.
        mark: The mark to place.

    Returns:
        The new board, or None if the move is illegal.
    """
    if not validate_move(board, index).is_valid:
        return None

    new_board = list(board)
    new_board[index] = mark
    return new_board


# Quick test
if __name__ == "__main__":
    from .game_state import empty_board

    print("Testing move validator...")

    board = empty_board()

    # Test valid move
    result = validate_move(board, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    board = apply_move(board, 4, Mark.X)

    # Test invalid move (same cell)
    result = validate_move(board, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validate_move(board, 9)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")

    print(f"Legal moves: {legal_moves(board)}")

    print("\nMove validator test done!")
