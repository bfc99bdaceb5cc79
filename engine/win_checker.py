"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, Sequence, Tuple

from .game_state import GameState, Player, Cell


# All possible winning lines as cell indices.
# Scan order is fixed: rows, then columns, then diagonals.
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """
    
    def find_winning_pattern(
        self, 
        board: Sequence[Cell]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Find the first completed line on the board.
        
        Args:
            board: The 9 board cells.
            
        Returns:
            The winning pattern, or None if no line is complete.
        """
        for pattern in WIN_PATTERNS:
            a, b, c = pattern
            if board[a] is not None and board[a] == board[b] == board[c]:
                return pattern
        return None
    
    def check_winner(self, board: Sequence[Cell]) -> Optional[Player]:
        """
        Check if there's a winner.
        
        Args:
            board: The 9 board cells.
            
        Returns:
            The winning Player, or None if no winner yet.
        """
        pattern = self.find_winning_pattern(board)
        if pattern is None:
            return None
        return board[pattern[0]]
    
    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a tie: all cells filled AND no winner.
        """
        if self.find_winning_pattern(board) is not None:
            return False
        return all(cell is not None for cell in board)
    
    def would_win(self, board: Sequence[Cell], idx: int, player: Player) -> bool:
        """
        Check whether marking cell idx would win the game for player.
        
        Works on a copy, the board passed in is never modified.
        
        Args:
            board: The 9 board cells.
            idx: An empty cell to try.
            player: The player making the hypothetical move.
            
        Returns:
            True if the move completes a line for player.
        """
        if board[idx] is not None:
            return False
        candidate = list(board)
        candidate[idx] = player
        return self.check_winner(candidate) == player
    
    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/tie information.
        
        Called after every placement. The first completed pattern (in
        WIN_PATTERNS order) decides the winner. A full board without a
        completed pattern is a tie. Otherwise the state is left alone.
        
        Args:
            game_state: The game state to update.
            
        Returns:
            Updated game state.
        """
        pattern = self.find_winning_pattern(game_state.board)
        
        if pattern is not None:
            game_state.winner = game_state.board[pattern[0]]
            game_state.winning_combo = pattern
            game_state.game_over = True
        elif game_state.is_full():
            game_state.winner = None
            game_state.winning_combo = None
            game_state.game_over = True
        
        return game_state


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")
    
    checker = WinChecker()
    X, O = Player.X, Player.O
    
    # Test 1: Horizontal win
    board1 = [X, X, X, None, O, None, O, None, None]
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == X
    
    # Test 2: Diagonal win
    board2 = [O, X, None, X, O, None, None, None, O]
    winner = checker.check_winner(board2)
    print(f"Test 2 (diagonal): winner = {winner}")
    assert winner == O
    
    # Test 3: Draw (full board, no winner)
    board3 = [X, O, X, X, O, O, O, X, X]
    is_draw = checker.check_draw(board3)
    print(f"Test 3 (draw): is_draw = {is_draw}")
    assert is_draw
    
    print("\nWinChecker test done!")
