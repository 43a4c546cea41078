"""
Logic module for TicTacToe.
Handles board rules, game session, and AI opponent.
"""

from .config import GameConfig
from .game_state import Mark, Difficulty, GameStatus, Outcome
from .move_validator import legal_moves, apply_move
from .win_checker import winner, WIN_LINES
from .ai_player import AIPlayer
from .session import GameSession
