"""
Game session for TicTacToe.
Sequences human and CPU turns for one round at a time.
"""

from typing import Callable, Optional, Tuple

import numpy as np

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import (
    Board, Cell, Difficulty, GameStatus, Mark, Outcome, WinLine, empty_board
)
from .move_validator import apply_move
from .win_checker import winner


# scheduler(delay_ms, callback), e.g. tkinter's `root.after`
Scheduler = Callable[[int, Callable[[], None]], object]


class GameSession:
    """
    The state machine for a game against the CPU.

    States:
    - ONGOING: waiting for `player_to_move`
    - WON / DRAW: terminal, no move is accepted until `start_new_round()`

    A new session has no round yet: every move is rejected until the
    first `start_new_round()`, which also lets the CPU open if it should.

    Without a scheduler the CPU answers synchronously. With one, the CPU
    move is deferred by GameConfig.CPU_DELAY_MS and dropped if the round
    was reset in the meantime (every new round bumps `epoch`).
    """

    def __init__(
        self,
        human_mark: Mark = Mark.X,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[np.random.Generator] = None,
        scheduler: Optional[Scheduler] = None,
        on_round_ended: Optional[Callable[[Outcome], None]] = None,
        on_board_changed: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the session. Call `start_new_round()` to begin playing.

        Args:
            human_mark: Which mark the human controls.
            difficulty: CPU difficulty.
            rng: Random generator for EASY moves.
            scheduler: Defers CPU moves when given.
            on_round_ended: Called with the Outcome when a round ends.
            on_board_changed: Called after every board change.
        """
        self.difficulty = difficulty
        self.scheduler = scheduler
        self.on_round_ended = on_round_ended
        self.on_board_changed = on_board_changed

        self._human_mark = human_mark
        self._pending_human_mark: Optional[Mark] = None
        self.ai = AIPlayer(human_mark.opposite(), rng)

        self._board: Board = empty_board()
        self._player_to_move = Mark.X
        self._outcome = Outcome.ongoing()
        self._last_move_index: Optional[int] = None
        self._epoch = 0

    # ==================== QUERIES ====================

    @property
    def human_mark(self) -> Mark:
        return self._human_mark

    @property
    def cpu_mark(self) -> Mark:
        return self._human_mark.opposite()

    @property
    def player_to_move(self) -> Mark:
        return self._player_to_move

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def status(self) -> GameStatus:
        return self._outcome.status

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def last_move_index(self) -> Optional[int]:
        return self._last_move_index

    @property
    def winning_line(self) -> Optional[WinLine]:
        return self._outcome.line

    @property
    def epoch(self) -> int:
        return self._epoch

    def board_snapshot(self) -> Tuple[Cell, ...]:
        """Get a read-only copy of the board."""
        return tuple(self._board)

    @property
    def round_started(self) -> bool:
        return self._epoch > 0

    def is_cpu_turn(self) -> bool:
        if not self.round_started or self.is_game_over:
            return False
        return self._player_to_move == self.cpu_mark

    # ==================== COMMANDS ====================

    def set_difficulty(self, difficulty: Difficulty):
        """Set the CPU difficulty (used from the next CPU move)."""
        self.difficulty = difficulty

    def set_human_mark(self, mark: Mark):
        """Choose the human's mark. Takes effect with the next round."""
        self._pending_human_mark = mark

    def start_new_round(self, cpu_starts: Optional[bool] = None):
        """
        Reset the board and start a new round.

        Args:
            cpu_starts: None lets X open. Otherwise True makes the CPU
                open and False makes the human open.
        """
        if self._pending_human_mark is not None:
            self._human_mark = self._pending_human_mark
            self._pending_human_mark = None
            self.ai.player = self.cpu_mark

        self._epoch += 1
        self._board = empty_board()
        self._outcome = Outcome.ongoing()
        self._last_move_index = None

        if cpu_starts is None:
            self._player_to_move = Mark.X
        else:
            self._player_to_move = self.cpu_mark if cpu_starts else self.human_mark

        if GameConfig.DEBUG_MODE:
            print(f"New round #{self._epoch}: human={self.human_mark.value}, "
                  f"{self._player_to_move.value} to move")

        self._notify_board_changed()
        self._request_cpu_move()

    def submit_move(self, index: int, mark: Mark) -> bool:
        """
        Place `mark` at `index` if the rules allow it.

        Args:
            index: Cell to play (0-8).
            mark: Mark of the player making the move.

        Returns:
            True if the move was applied, False otherwise.
        """
        # Check if a round is running
        if not self.round_started or self.is_game_over:
            return False

        # Check if it's this mark's turn
        if mark != self._player_to_move:
            return False

        new_board = apply_move(self._board, index, mark)
        if new_board is None:
            return False

        self._board = new_board
        self._last_move_index = index
        self._outcome = winner(self._board)

        if not self._outcome.is_terminal:
            self._player_to_move = mark.opposite()
        else:
            if GameConfig.DEBUG_MODE:
                print(f"Round over: {self._outcome}")
            if self.on_round_ended is not None:
                self.on_round_ended(self._outcome)

        self._notify_board_changed()

        return True

    def submit_human_move(self, index: int) -> bool:
        """
        Play the human's move, then let the CPU answer.

        Returns:
            True if the human's move was applied.
        """
        if not self.submit_move(index, self.human_mark):
            return False

        self._request_cpu_move()
        return True

    def play_cpu_move(self, epoch: Optional[int] = None) -> Optional[int]:
        """
        Compute and play the CPU's move now.

        Args:
            epoch: Round the move was requested in. The move is dropped
                if a new round started since.

        Returns:
            Index played, or None if there was nothing to play.
        """
        if epoch is not None and epoch != self._epoch:
            return None

        if not self.is_cpu_turn():
            return None

        move = self.ai.choose_move(self._board, self.difficulty)
        self.submit_move(move, self.cpu_mark)
        return move

    # ==================== HELPERS ====================

    def _request_cpu_move(self):
        """Trigger the CPU move if it is the CPU's turn."""
        if not self.is_cpu_turn():
            return

        if self.scheduler is None:
            self.play_cpu_move()
            return

        epoch = self._epoch
        self.scheduler(GameConfig.CPU_DELAY_MS, lambda: self.play_cpu_move(epoch))

    def _notify_board_changed(self):
        if self.on_board_changed is not None:
            self.on_board_changed()
