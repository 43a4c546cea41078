"""
Score storage configuration for TicTacToe.
Where the score tally is kept between runs.
"""

from pathlib import Path


class ScoreConfig:
    """
    Configuration for score persistence.
    Change STORAGE_PATH to keep scores somewhere else.
    """

    # ==================== STORAGE ====================
    # Key-value file holding the score blob
    STORAGE_PATH = Path.home() / ".tictactoe" / "storage.json"

    # Key the score blob is stored under
    STORAGE_KEY = "tictactoe-score"
