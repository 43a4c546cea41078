"""
Scores module for TicTacToe.
Keeps the human / CPU / draw tally between runs.
"""

from .config import ScoreConfig
from .score_store import Score, KeyValueStore, ScoreStore
