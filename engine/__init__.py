"""
TicTacToe Engine
================
Game state, rules, and a heuristic AI opponent for TicTacToe.
Two modes: two players on one board, or a human (X) against the AI (O).
"""

from .config import GameConfig
from .game_state import GameState, Player, Mode
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WIN_PATTERNS
from .ai_player import AIPlayer
from .scheduler import ScheduledTask, Scheduler, ManualScheduler, TkScheduler
from .session import GameSession

__version__ = "1.0.0"
