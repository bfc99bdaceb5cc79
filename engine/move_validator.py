"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules:
    1. Game must not be over
    2. Index must be a board cell (0-8)
    3. Can only place on empty cells
    4. No human move while the AI is thinking
    """
    
    def validate_move(self, game_state: GameState, idx: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            idx: Cell to mark (0-8).
            
        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )
        
        # Check if idx is in valid range
        if not (0 <= idx < GameConfig.BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {idx}. Must be 0-{GameConfig.BOARD_CELLS - 1}."
            )
        
        # Check if cell is empty
        if not game_state.is_empty(idx):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {idx} is already occupied by {game_state.board[idx].value}"
            )
        
        # The AI owns the turn until its move lands
        if game_state.ai_engaged:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the AI to finish its move!"
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.
        
        Args:
            game_state: Current game state.
            
        Returns:
            List of valid cell indices.
        """
        if game_state.game_over or game_state.ai_engaged:
            return []
        
        return game_state.get_empty_cells()
