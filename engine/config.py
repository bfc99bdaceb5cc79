"""
Game configuration for the TicTacToe engine.
All the constants for board layout, AI timing, and status text.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the feel of the game.
    """
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 row by row
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9
    
    # Cell groups used by the AI heuristic
    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    SIDES = (1, 3, 5, 7)
    
    # ==================== AI SETTINGS ====================
    # Artificial "thinking" pause before the AI plays (milliseconds)
    AI_THINK_DELAY_MS = 550
    
    # ==================== GAME SETTINGS ====================
    DEFAULT_MODE = "2p"  # "2p" = two players, "ai" = vs AI
    
    # Print diagnostics (rejected moves, AI choices) to the console
    VERBOSE = True
    
    # ==================== STATUS TEXT ====================
    STATUS_X_WINS = "Player 1 (X) wins!"
    STATUS_O_WINS_2P = "Player 2 (O) wins!"
    STATUS_O_WINS_AI = "AI (O) wins!"
    STATUS_TIE = "It's a tie!"
    STATUS_AI_THINKING = "AI is thinking..."
    STATUS_X_TURN = "Player 1 (X), your move!"
    STATUS_O_TURN = "Player 2 (O), your move!"
    
    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WIN_CELL_COLOR = '#ffd700'
    X_COLOR = '#00d4ff'
    O_COLOR = '#ff6b6b'
    CELL_FONT = ('Segoe UI', 28, 'bold')
    LABEL_FONT = ('Segoe UI', 12)
    TITLE_FONT = ('Segoe UI', 16, 'bold')
