"""
AI player for the TicTacToe engine.
Uses a fixed-priority heuristic to choose a move.
"""

import random
from typing import Optional

from .config import GameConfig
from .game_state import GameState, Player
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe with a one-ply heuristic.
    
    Priority order, first applicable rule wins:
    1. Win now - complete one of our own lines
    2. Block - take the cell where the opponent would complete a line
    3. Center
    4. A random free corner
    5. The lowest free side (or, failing that, the lowest free cell)
    
    This is not optimal play: only immediate threats are seen, so
    forks are not detected.
    """
    
    def __init__(self, player: Player = Player.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.
        
        Args:
            player: Which player the AI controls (default: O)
            rng: Random source for the corner pick (default: a fresh Random)
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()
        
        # Which rule picked the last move (for debugging)
        self.last_rule: Optional[str] = None
    
    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current position.
        
        The live state is only read, never modified.
        
        Args:
            game_state: Current game state.
            
        Returns:
            Cell index of the chosen move, or None if the board is full.
        """
        board = tuple(game_state.board)
        empty = [idx for idx, cell in enumerate(board) if cell is None]
        
        if not empty:
            self.last_rule = None
            return None
        
        # 1. Win if possible
        for idx in empty:
            if self.win_checker.would_win(board, idx, self.player):
                self.last_rule = "win"
                return idx
        
        # 2. Block the opponent's win
        opponent = self.player.opposite()
        for idx in empty:
            if self.win_checker.would_win(board, idx, opponent):
                self.last_rule = "block"
                return idx
        
        # 3. Pick center
        if board[GameConfig.CENTER] is None:
            self.last_rule = "center"
            return GameConfig.CENTER
        
        # 4. Pick a random corner
        corners = [idx for idx in GameConfig.CORNERS if board[idx] is None]
        if corners:
            self.last_rule = "corner"
            return self.rng.choice(corners)
        
        # 5. Pick first empty side
        sides = [idx for idx in GameConfig.SIDES if board[idx] is None]
        self.last_rule = "side"
        return sides[0] if sides else empty[0]
    
    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.
        
        Args:
            game_state: Current game state.
            
        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)
        
        if move is None:
            return "No moves available!"
        
        return f"Place {self.player.value} at cell {move} ({self.last_rule})"


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")
    
    ai = AIPlayer(Player.O)
    X, O = Player.X, Player.O
    
    # Test 1: AI should take a winning move
    game = GameState(board=[X, X, None, O, O, None, None, None, None], current_player=O)
    game.print_board()
    print("\nAI is O. Can win with 5!")
    
    move = ai.get_best_move(game)
    print(f"AI's move: {move}")
    assert move == 5, f"Expected 5, got {move}"
    print("✓ AI correctly takes the win!")
    
    # Test 2: AI should block a winning move
    game2 = GameState(board=[X, X, None, None, O, None, None, None, None], current_player=O)
    game2.print_board()
    print("\nAI is O. X is about to win with 2!")
    
    move = ai.get_best_move(game2)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")
    
    print("\nAIPlayer test done!")
