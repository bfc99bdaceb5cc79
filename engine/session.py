"""
Game session for the TicTacToe engine.

A GameSession owns one GameState at a time plus everything needed to
drive it: the game mode, the rules (validator + win checker), the AI
player and the scheduler used for the AI's thinking delay.

The presentation layer only talks to a session:
- Commands: reset(), set_mode(mode), apply_move(idx)
- Read-only state: board, current_player, winner, winning_combo,
  game_over, ai_engaged, mode, status_text
"""

import random
from typing import Optional, Tuple, Union

from .config import GameConfig
from .game_state import GameState, Player, Mode, Cell
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .scheduler import Scheduler, ManualScheduler, ScheduledTask


class GameSession:
    """
    One player's game session.
    
    Game flow:
    1. X moves (always a human)
    2. In two-player mode, O is a second human
    3. In AI mode, O's move is scheduled after a short delay and
       played by the AIPlayer
    4. Repeat until someone wins or the board is full
    """
    
    # The AI always plays O, X always moves first
    AI_PLAYER = Player.O
    
    def __init__(
        self,
        mode: Union[Mode, str] = GameConfig.DEFAULT_MODE,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        delay_ms: Optional[int] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize a session.
        
        Args:
            mode: Mode.TWO_PLAYER / Mode.VS_AI, or "2p" / "ai".
            scheduler: Runs the delayed AI move (default: ManualScheduler).
            rng: Random source for the AI's corner pick.
            delay_ms: AI thinking delay (default: GameConfig.AI_THINK_DELAY_MS).
            verbose: Print diagnostics (default: GameConfig.VERBOSE).
        """
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.delay_ms = GameConfig.AI_THINK_DELAY_MS if delay_ms is None else delay_ms
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose
        
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.AI_PLAYER, rng=rng)
        
        self._mode = Mode(mode)
        self._state = GameState()
        self._pending_ai: Optional[ScheduledTask] = None
        
        # Bumped on every reset; a scheduled AI move only lands on the
        # generation it was scheduled for
        self._generation = 0
    
    # ==================== COMMANDS ====================
    
    def reset(self):
        """Start a new game in the current mode. Any pending AI move is dropped."""
        if self._pending_ai is not None:
            self._pending_ai.cancel()
            self._pending_ai = None
        
        self._generation += 1
        self._state = GameState()
        self._log("New game: X to move")
    
    def set_mode(self, mode: Union[Mode, str]):
        """
        Switch game mode and reset.
        
        Raises:
            ValueError: If mode is not a known Mode value.
        """
        self._mode = Mode(mode)
        self._log(f"Mode set to: {self._mode.value}")
        self.reset()
    
    def apply_move(self, idx: int) -> bool:
        """
        Attempt a move for the current player.
        
        Args:
            idx: Cell index (0-8).
            
        Returns:
            True if the move was accepted, False if rejected (state unchanged).
        """
        state = self._state
        
        result = self.validator.validate_move(state, idx)
        if not result.is_valid:
            self._log(f"Move rejected: {result.error_message}")
            return False
        
        state.place(idx, state.current_player)
        self.win_checker.update_game_state(state)
        
        if state.game_over:
            self._log_result()
            return True
        
        state.switch_player()
        
        if self._mode == Mode.VS_AI and state.current_player == self.AI_PLAYER:
            self._schedule_ai_move()
        
        return True
    
    # ==================== AI ====================
    
    def _schedule_ai_move(self):
        """Mark the AI as engaged and schedule its move after the delay."""
        self._state.ai_engaged = True
        generation = self._generation
        self._pending_ai = self.scheduler.call_later(
            self.delay_ms,
            lambda: self._apply_ai_move(generation)
        )
    
    def _apply_ai_move(self, generation: int):
        """Play the AI's move (runs when the scheduled task fires)."""
        state = self._state
        
        # A reset happened after this move was scheduled
        if generation != self._generation or not state.ai_engaged:
            return
        
        self._pending_ai = None
        move = self.ai.get_best_move(state)
        
        if move is None:
            state.ai_engaged = False
            return
        
        state.place(move, self.AI_PLAYER)
        self.win_checker.update_game_state(state)
        state.ai_engaged = False
        
        self._log(f"AI plays {move} ({self.ai.last_rule})")
        
        if state.game_over:
            self._log_result()
        else:
            state.switch_player()
    
    # ==================== READ-ONLY STATE ====================
    
    @property
    def state(self) -> GameState:
        """The GameState of the current game."""
        return self._state
    
    @property
    def mode(self) -> Mode:
        return self._mode
    
    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._state.board)
    
    @property
    def current_player(self) -> Player:
        return self._state.current_player
    
    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner
    
    @property
    def winning_combo(self) -> Optional[Tuple[int, int, int]]:
        return self._state.winning_combo
    
    @property
    def game_over(self) -> bool:
        return self._state.game_over
    
    @property
    def ai_engaged(self) -> bool:
        return self._state.ai_engaged
    
    @property
    def pending_ai_move(self) -> Optional[ScheduledTask]:
        """Handle of the scheduled AI move, or None if nothing is pending."""
        if self._pending_ai is not None and self._pending_ai.pending:
            return self._pending_ai
        return None
    
    @property
    def status_text(self) -> str:
        """The game status or winner/tie message."""
        state = self._state
        vs_ai = self._mode == Mode.VS_AI
        
        if state.game_over:
            if state.winner == Player.X:
                return GameConfig.STATUS_X_WINS
            if state.winner == Player.O:
                return GameConfig.STATUS_O_WINS_AI if vs_ai else GameConfig.STATUS_O_WINS_2P
            return GameConfig.STATUS_TIE
        
        if state.current_player == Player.X:
            return GameConfig.STATUS_X_TURN
        return GameConfig.STATUS_AI_THINKING if vs_ai else GameConfig.STATUS_O_TURN
    
    def can_play(self, idx: int) -> bool:
        """True if a click on cell idx should be passed on as a move."""
        return idx in self.validator.get_valid_moves(self._state)
    
    def is_winning_cell(self, idx: int) -> bool:
        """True if cell idx is part of the winning line."""
        combo = self._state.winning_combo
        return combo is not None and idx in combo
    
    # ==================== HELPERS ====================
    
    def _log(self, message: str):
        if self.verbose:
            print(message)
    
    def _log_result(self):
        self._log(self.status_text)
