"""
TicTacToe UI
A graphical interface for playing TicTacToe against the CPU using Tkinter.

Shows:
- The 3x3 board (last move and winning line highlighted)
- Turn status and score
- Side (X / O) and difficulty selection
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

import numpy as np

# Logic imports
from logic.game_state import Difficulty, GameStatus, Mark, Outcome, cell_to_index
from logic.session import GameSession

# Score imports
from scores.config import ScoreConfig
from scores.score_store import KeyValueStore, ScoreStore


# Keyboard: 1-9 like a numpad (1 bottom-left, 9 top-right)
KEY_TO_INDEX = {
    "7": 0, "8": 1, "9": 2,
    "4": 3, "5": 4, "6": 5,
    "1": 6, "2": 7, "3": 8,
}

CELL_BG = '#16213e'
LAST_MOVE_BG = '#1e3a5f'
WINNING_BG = '#065f46'
MARK_COLORS = {Mark.X: '#f87171', Mark.O: '#10b981'}

CONTROL_MASK = 0x0004

# Alt (and Command on macOS) per Tk windowing system.
# Mod1 (0x0008) is NumLock on Windows, so it must not be masked there.
ALT_MASKS = {
    "win32": 0x20000,
    "aqua": 0x0008 | 0x0010,
    "x11": 0x0008,
}


def is_shortcut(state: int, windowing_system: str) -> bool:
    """Check if a key event's modifier state holds Ctrl or Alt."""
    mask = CONTROL_MASK | ALT_MASKS.get(windowing_system, 0x0008)
    return bool(state & mask)


class TicTacToeUI:
    """
    Main UI class for TicTacToe against the CPU.
    """

    def __init__(
        self,
        human_mark: Mark = Mark.X,
        difficulty: Difficulty = Difficulty.HARD,
        score_store: Optional[ScoreStore] = None,
        seed: Optional[int] = None
    ):
        """Initialize the UI."""
        self.score_store = score_store or ScoreStore(KeyValueStore(ScoreConfig.STORAGE_PATH))
        self.score = self.score_store.load()

        # Create UI
        self._create_ui()

        self.session = GameSession(
            human_mark=human_mark,
            difficulty=difficulty,
            rng=np.random.default_rng(seed),
            scheduler=self.root.after,
            on_round_ended=self._on_round_ended,
            on_board_changed=self._render,
        )

        self._highlight_buttons("side", human_mark.value)
        self._highlight_buttons("difficulty", difficulty.name)
        self.session.start_new_round(cpu_starts=human_mark == Mark.O)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe vs CPU")
        self.windowing_system = self.root.tk.call("tk", "windowingsystem")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        self.turn_label = ttk.Label(main_frame, text="-", style='Status.TLabel')
        self.turn_label.pack()

        self.score_label = ttk.Label(main_frame, text="-")
        self.score_label.pack(pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for row in range(3):
            for col in range(3):
                index = cell_to_index(row, col)
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=4,
                    height=2,
                    bg=CELL_BG,
                    fg='white',
                    activebackground=LAST_MOVE_BG,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_clicked(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)

        # Side selection
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.buttons = {"side": {}, "difficulty": {}}

        side_frame = ttk.Frame(main_frame)
        side_frame.pack(pady=5)
        ttk.Label(side_frame, text="You play: ").pack(side=tk.LEFT)
        for mark in Mark:
            btn = tk.Button(
                side_frame,
                text=mark.value,
                font=('Segoe UI', 10, 'bold'),
                width=4,
                command=lambda m=mark: self._set_human_mark(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.buttons["side"][mark.value] = btn

        # Difficulty selection
        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=5)
        ttk.Label(diff_frame, text="Difficulty: ").pack(side=tk.LEFT)
        for text, difficulty in (("Easy", Difficulty.EASY), ("Hard", Difficulty.HARD)):
            btn = tk.Button(
                diff_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=8,
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.buttons["difficulty"][difficulty.name] = btn

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="▶ New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="🔄 Reset Score",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_score
        ).pack(side=tk.LEFT, padx=5)

        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _highlight_buttons(self, group: str, active: str):
        """Mark the active button of a selector group."""
        for value, btn in self.buttons[group].items():
            if value == active:
                btn.configure(bg='#00d4ff', fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _set_human_mark(self, mark: Mark):
        """Switch sides. If the human picks O, the CPU opens as X."""
        self.session.set_human_mark(mark)
        self._highlight_buttons("side", mark.value)
        self.session.start_new_round(cpu_starts=mark == Mark.O)

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self.session.set_difficulty(difficulty)
        self._highlight_buttons("difficulty", difficulty.name)
        self._render()

    def _new_game(self):
        self.session.start_new_round(cpu_starts=self.session.human_mark == Mark.O)

    def _reset_score(self):
        self.score = self.score_store.reset()
        self._render()

    def _on_cell_clicked(self, index: int):
        self.session.submit_human_move(index)

    def _on_key(self, event):
        if is_shortcut(event.state, self.windowing_system):
            return
        index = KEY_TO_INDEX.get(event.char)
        if index is not None:
            self.session.submit_human_move(index)

    def _on_round_ended(self, outcome: Outcome):
        """Count the finished round and save the score."""
        self.score.record(outcome, self.session.human_mark)
        self.score_store.save(self.score)

    def _render(self):
        """Update the board and status labels."""
        session = self.session
        board = session.board_snapshot()
        winning_line = session.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]

            if index in winning_line:
                bg_color = WINNING_BG
            elif index == session.last_move_index:
                bg_color = LAST_MOVE_BG
            else:
                bg_color = CELL_BG

            disabled = session.is_game_over or mark is not None or session.is_cpu_turn()
            cell.configure(
                text=mark.value if mark is not None else "",
                fg=MARK_COLORS[mark] if mark is not None else 'white',
                disabledforeground=MARK_COLORS[mark] if mark is not None else 'white',
                bg=bg_color,
                state='disabled' if disabled else 'normal'
            )

        if session.status == GameStatus.WON:
            text = "🏆 You win" if session.outcome.mark == session.human_mark else "🤖 CPU wins"
        elif session.status == GameStatus.DRAW:
            text = "🤝 Draw"
        elif session.is_cpu_turn():
            text = "CPU thinking…"
        else:
            text = "Your turn"
        self.turn_label.configure(text=text)

        self.score_label.configure(
            text=f"You {self.score.human} · CPU {self.score.cpu} · Draw {self.score.draw}"
        )

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
