"""
Test script for TicTacToe modules.
Run this to verify all components work before playing.

Usage:
    python test_modules.py     # Quick check of every module
    pytest test_modules.py     # Same checks under pytest
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from logic.config import GameConfig

    print(f"  Board size: {GameConfig.BOARD_SIZE}x{GameConfig.BOARD_SIZE}")
    print(f"  Easy random chance: {GameConfig.EASY_RANDOM_CHANCE}")
    print(f"  CPU delay: {GameConfig.CPU_DELAY_MS}ms")

    assert GameConfig.CELL_COUNT == 9
    assert 0 < GameConfig.EASY_RANDOM_CHANCE < 1
    assert GameConfig.WIN_SCORE == -GameConfig.LOSS_SCORE
    print("  ✓ Game config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic import AIPlayer, GameSession, Mark, GameStatus, legal_moves, winner
    from logic.game_state import format_board

    # Test session
    game = GameSession(human_mark=Mark.X)
    game.start_new_round()
    print(f"  Initial player: {game.player_to_move.value}")

    # Test human move + CPU answer
    assert game.submit_human_move(4)
    print(f"  Made move at 4, CPU answered at {game.last_move_index}")
    print("  " + format_board(game.board_snapshot()).replace("\n", "\n  "))

    # Test rules
    board = list(game.board_snapshot())
    print(f"  Legal moves: {legal_moves(board)}")
    assert len(legal_moves(board)) == 7
    assert winner(board).status == GameStatus.ONGOING

    # Test AI
    ai = AIPlayer(Mark.O)
    board[1] = Mark.X
    move = ai.get_best_move(board)
    print(f"  AI suggests: {move}")
    assert move == 7

    print("  ✓ Game logic OK")


def test_score_store():
    """Test score storage in a temporary file."""
    print("\n=== Testing Score Store ===")
    import tempfile
    from scores import KeyValueStore, Score, ScoreStore

    with tempfile.TemporaryDirectory() as tmp:
        store = ScoreStore(KeyValueStore(Path(tmp) / "storage.json"))
        print(f"  Loaded: {store.load()}")
        store.save(Score(human=1, cpu=2, draw=3))
        assert store.load() == Score(human=1, cpu=2, draw=3)

    print("  ✓ Score store OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Score Store": test_score_store,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
