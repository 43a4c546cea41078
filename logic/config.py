"""
Game configuration for TicTacToe.
Engine constants and pacing settings.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    Change these values to tune the CPU opponent!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== AI SETTINGS ====================
    # Minimax scores, from the CPU's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # Chance that EASY plays a random legal move instead of the best one
    EASY_RANDOM_CHANCE = 0.35

    # ==================== PACING ====================
    # Delay before the CPU answers a human move (milliseconds)
    CPU_DELAY_MS = 220

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
