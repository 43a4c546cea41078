"""
Game state types for TicTacToe.
Marks, difficulty levels, board helpers and game outcomes.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"    # Sometimes plays a random move
    HARD = "hard"    # Full minimax


class GameStatus(Enum):
    """Where a round currently stands."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


# A board is 9 cells in row-major order, None means empty
Cell = Optional[Mark]
Board = List[Cell]
WinLine = Tuple[int, int, int]


@dataclass(frozen=True)
class Outcome:
    """
    Result of looking at a board.

    For WON, `mark` is the winner and `line` the three indices that won.
    """
    status: GameStatus
    mark: Optional[Mark] = None
    line: Optional[WinLine] = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(GameStatus.ONGOING)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @classmethod
    def won(cls, mark: Mark, line: WinLine) -> "Outcome":
        return cls(GameStatus.WON, mark, line)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.ONGOING


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return [None] * GameConfig.CELL_COUNT


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a board index (0-8)."""
    return row * GameConfig.BOARD_SIZE + col


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9 character string.

    'X' and 'O' are marks, anything else ('.', '_', ' ') is empty.
    Handy for tests and debugging.
    """
    text = text.replace("\n", "").replace("|", "")
    if len(text) != GameConfig.CELL_COUNT:
        raise ValueError(f"Board string must have 9 cells, got {len(text)}")

    board = empty_board()
    for index, char in enumerate(text.upper()):
        if char in ("X", "O"):
            board[index] = Mark(char)
    return board


def format_board(board: Sequence[Cell]) -> str:
    """Render a board as three lines of text."""
    rows = []
    for row in range(GameConfig.BOARD_SIZE):
        cells = []
        for col in range(GameConfig.BOARD_SIZE):
            cell = board[cell_to_index(row, col)]
            cells.append(cell.value if cell is not None else ".")
        rows.append(" ".join(cells))
    return "\n".join(rows)


# Quick test
if __name__ == "__main__":
    print("Testing game state helpers...")

    board = board_from_string("X.O" ".X." "..O")
    print(format_board(board))

    assert board[cell_to_index(1, 1)] == Mark.X
    assert Mark.X.opposite() == Mark.O
    assert Outcome.won(Mark.O, (2, 5, 8)).is_terminal
    assert not Outcome.ongoing().is_terminal

    print("\nGame state test done!")
