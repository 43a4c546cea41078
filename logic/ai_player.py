"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple, Sequence

import numpy as np

from .config import GameConfig
from .game_state import Cell, Difficulty, GameStatus, Mark
from .move_validator import legal_moves, apply_move
from .win_checker import winner


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    On HARD the AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    On EASY it sometimes plays a random move instead.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            rng: Random generator for EASY moves (default: fresh generator)
        """
        self.player = player
        self.rng = rng if rng is not None else np.random.default_rng()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def choose_move(
        self,
        board: Sequence[Cell],
        difficulty: Difficulty = Difficulty.HARD
    ) -> int:
        """
        Pick the AI's move for the given difficulty.

        EASY plays a uniformly random legal move with probability
        GameConfig.EASY_RANDOM_CHANCE, on every turn independently.
        Otherwise (and always on HARD) the minimax move is played.

        Args:
            board: Current board. Must not be decided or full.
            difficulty: EASY or HARD.

        Returns:
            Index of the chosen cell.
        """
        moves = legal_moves(board)
        assert moves, "AI asked to move on a full board"
        assert winner(board).status == GameStatus.ONGOING, \
            "AI asked to move on a decided board"

        if difficulty == Difficulty.EASY:
            if self.rng.random() < GameConfig.EASY_RANDOM_CHANCE:
                move = int(self.rng.choice(moves))
                if GameConfig.DEBUG_MODE:
                    print(f"AI ({self.player.value}) plays random move: {move}")
                return move

        return self.get_best_move(board)

    def get_best_move(self, board: Sequence[Cell]) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board. Must not be decided or full.

        Returns:
            Index of the best move.
        """
        self.positions_evaluated = 0

        best_move, best_score = self.evaluate(board, self.player)
        assert best_move is not None, "AI asked to move on a finished board"

        if GameConfig.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def evaluate(
        self,
        board: Sequence[Cell],
        to_move: Mark
    ) -> Tuple[Optional[int], int]:
        """
        Minimax search over the full game tree.

        Scores are from the AI's point of view: +10 win, -10 loss, 0 draw.
        Each ply moves a score one step towards zero, so faster wins and
        slower losses score better. Ties keep the lowest index.

        Args:
            board: Position to evaluate.
            to_move: Mark whose turn it is.

        Returns:
            (best index, score). The index is None on a finished board.
        """
        self.positions_evaluated += 1

        # Check terminal states
        outcome = winner(board)
        if outcome.status == GameStatus.WON:
            if outcome.mark == self.player:
                return None, GameConfig.WIN_SCORE
            return None, GameConfig.LOSS_SCORE
        if outcome.status == GameStatus.DRAW:
            return None, GameConfig.DRAW_SCORE

        maximizing = to_move == self.player
        best_move = None
        best_score = float('-inf') if maximizing else float('inf')

        for index in legal_moves(board):
            _, score = self.evaluate(apply_move(board, index, to_move), to_move.opposite())

            # Prefer quicker wins and slower losses
            if score > 0:
                score -= 1
            elif score < 0:
                score += 1

            if maximizing:
                if score > best_score:
                    best_move, best_score = index, score
            else:
                if score < best_score:
                    best_move, best_score = index, score

        return best_move, best_score


def choose_move(
    board: Sequence[Cell],
    cpu_mark: Mark,
    difficulty: Difficulty = Difficulty.HARD,
    rng: Optional[np.random.Generator] = None
) -> int:
    """Pick a move for `cpu_mark` without keeping an AIPlayer around."""
    return AIPlayer(cpu_mark, rng).choose_move(board, difficulty)


# Quick test
if __name__ == "__main__":
    from .game_state import board_from_string, format_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = board_from_string("XX." ".O." "...")
    print(format_board(board))
    print("\nAI is O. X is about to win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = board_from_string("OO." ".X." "X..")
    print(format_board(board))
    print("\nAI is O. Can win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
