"""
Main entry point for TicTacToe vs CPU.

Launches the Tkinter UI by default, or a console game with --no-ui.
Scores are kept between runs in a small key-value file.
"""

from pathlib import Path
from typing import Optional

import numpy as np

# Logic imports
from logic.config import GameConfig
from logic.game_state import Difficulty, GameStatus, Mark, Outcome, format_board
from logic.session import GameSession

# Score imports
from scores.config import ScoreConfig
from scores.score_store import KeyValueStore, ScoreStore


class ConsoleGame:
    """
    Play TicTacToe in the terminal.

    Cells are numbered 1-9, left to right, top to bottom.
    """

    def __init__(
        self,
        human_mark: Mark,
        difficulty: Difficulty,
        score_store: ScoreStore,
        seed: Optional[int] = None
    ):
        self.score_store = score_store
        self.score = score_store.load()
        self.session = GameSession(
            human_mark=human_mark,
            difficulty=difficulty,
            rng=np.random.default_rng(seed),
            on_round_ended=self._on_round_ended
        )

    def _on_round_ended(self, outcome: Outcome):
        self.score.record(outcome, self.session.human_mark)
        self.score_store.save(self.score)

    def _print_board(self):
        print()
        print(format_board(self.session.board_snapshot()))
        if self.session.last_move_index is not None:
            print(f"Last move: {self.session.last_move_index + 1}")

    def _print_result(self):
        session = self.session
        if session.status == GameStatus.WON:
            if session.outcome.mark == session.human_mark:
                print("\n🎉 You win!")
            else:
                print("\n🤖 CPU wins! Better luck next time!")
        else:
            print("\n🤝 It's a draw! Good game!")
        print(f"Score - You {self.score.human} · CPU {self.score.cpu} · Draw {self.score.draw}")

    def play_round(self):
        """Play one round until someone wins or it's a draw."""
        session = self.session
        session.start_new_round(cpu_starts=session.human_mark == Mark.O)

        while not session.is_game_over:
            self._print_board()
            answer = input(f"Your move ({session.human_mark.value}) [1-9, q to quit]: ").strip()

            if answer.lower() == "q":
                raise KeyboardInterrupt

            if not answer.isdigit() or not session.submit_human_move(int(answer) - 1):
                print("Illegal move, try again.")

        self._print_board()
        self._print_result()

    def run(self):
        """Play rounds until the user stops."""
        while True:
            self.play_round()
            if input("\nPlay again? [y/N]: ").strip().lower() != "y":
                break


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe vs CPU")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--human",
        choices=["X", "O"],
        default="X",
        help="Mark you play (O lets the CPU open)"
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "hard"],
        default="hard",
        help="CPU difficulty"
    )
    parser.add_argument(
        "--scores",
        type=Path,
        default=ScoreConfig.STORAGE_PATH,
        help="File the score tally is kept in"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for EASY moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI search details"
    )
    parser.add_argument(
        "--reset-score",
        action="store_true",
        help="Reset the score tally before playing"
    )

    args = parser.parse_args()

    GameConfig.DEBUG_MODE = args.debug
    human_mark = Mark(args.human)
    difficulty = Difficulty(args.difficulty)
    score_store = ScoreStore(KeyValueStore(args.scores))

    if args.reset_score:
        score_store.reset()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(
            human_mark=human_mark,
            difficulty=difficulty,
            score_store=score_store,
            seed=args.seed
        )
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(human_mark, difficulty, score_store, seed=args.seed)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
