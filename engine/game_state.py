"""
Game state management for the TicTacToe engine.
Tracks the board, current player, and game result.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Mode(Enum):
    """Game modes."""
    TWO_PLAYER = "2p"
    VS_AI = "ai"


# A cell is empty (None) or holds the player who marked it
Cell = Optional[Player]


def new_board() -> List[Cell]:
    """Create an empty board."""
    return [None] * GameConfig.BOARD_CELLS


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.
    
    Tracks:
    - The 3x3 board as 9 cells, indexed 0-8 row by row
    - Current player (X always starts)
    - Game result (winner + winning line, or tie)
    - Whether an AI move is pending
    """
    
    # The board - None means empty, otherwise the player who marked the cell
    board: List[Cell] = field(default_factory=new_board)
    
    # Current player's turn
    current_player: Player = Player.X
    
    # Game result
    winner: Optional[Player] = None
    winning_combo: Optional[Tuple[int, int, int]] = None
    game_over: bool = False
    
    # True exactly while an AI move is scheduled but not yet played
    ai_engaged: bool = False
    
    @property
    def is_tie(self) -> bool:
        """True if the game ended with a full board and no winner."""
        return self.game_over and self.winner is None
    
    def is_empty(self, idx: int) -> bool:
        """Check whether cell idx holds no mark."""
        return self.board[idx] is None
    
    def place(self, idx: int, player: Player):
        """
        Put a player's mark on an empty cell.
        
        Args:
            idx: Cell index (0-8).
            player: The player marking the cell.
            
        Raises:
            ValueError: If the cell already holds a mark.
        """
        if self.board[idx] is not None:
            raise ValueError(f"Cell {idx} is already occupied")
        self.board[idx] = player
    
    def switch_player(self):
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()
    
    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.
        
        Returns:
            List of cell indices in ascending order.
        """
        return [idx for idx, cell in enumerate(self.board) if cell is None]
    
    def is_full(self) -> bool:
        """True when every cell holds a mark."""
        return all(cell is not None for cell in self.board)
    
    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            winner=self.winner,
            winning_combo=self.winning_combo,
            game_over=self.game_over,
            ai_engaged=self.ai_engaged
        )
    
    def print_board(self):
        """Print the board to console."""
        size = GameConfig.BOARD_SIZE
        print()
        for row in range(size):
            cells = []
            for col in range(size):
                idx = row * size + col
                cell = self.board[idx]
                # Empty cells show their index so the player knows what to type
                cells.append(cell.value if cell is not None else str(idx))
            print(" " + " | ".join(cells))
            if row < size - 1:
                print("---+---+---")
        
        # Print game info
        if self.game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS! Line: {self.winning_combo}")
            else:
                print("\nIt's a TIE!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")
    
    game = GameState()
    
    for idx in [4, 0, 2]:
        print(f"\n{game.current_player.value} moves to {idx}")
        game.place(idx, game.current_player)
        game.switch_player()
        game.print_board()
    
    print(f"\nEmpty cells: {game.get_empty_cells()}")
    print("\nGame state test done!")
