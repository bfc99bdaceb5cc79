"""
Main entry point for the TicTacToe engine.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
- 0-8: mark that cell
- r:   reset the game
- m:   toggle mode (2 players / vs AI)
- h:   hint for the player to move
- q:   quit
"""

import random
import sys
import time
from typing import Callable, List, Optional

from engine.ai_player import AIPlayer
from engine.config import GameConfig
from engine.game_state import Mode
from engine.scheduler import ManualScheduler
from engine.session import GameSession


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.
    
    The AI's thinking delay is waited out with time.sleep, then the
    manual scheduler is advanced so the AI move lands on this thread.
    """
    
    def __init__(
        self,
        mode: str = GameConfig.DEFAULT_MODE,
        seed: Optional[int] = None,
        delay_ms: int = GameConfig.AI_THINK_DELAY_MS,
        input_fn: Callable[[str], str] = input,
        sleep_fn: Callable[[float], None] = time.sleep
    ):
        self.scheduler = ManualScheduler()
        self.session = GameSession(
            mode=mode,
            scheduler=self.scheduler,
            rng=random.Random(seed),
            delay_ms=delay_ms
        )
        # Separate random source so hints never shift the AI's corner picks
        self.hint_rng = random.Random(seed)
        self.input_fn = input_fn
        self.sleep_fn = sleep_fn
        self.is_running = False
    
    def run(self):
        """Main game loop."""
        self._print_header()
        self.is_running = True
        
        while self.is_running:
            self.session.state.print_board()
            print(self.session.status_text)
            
            try:
                command = self.input_fn("> ").strip().lower()
            except EOFError:
                break
            
            self.handle_command(command)
            self._wait_for_ai()
        
        print("Goodbye!")
    
    def handle_command(self, command: str):
        """
        Process one line of console input.
        
        Args:
            command: A cell index, or r / m / h / q.
        """
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.session.reset()
        elif command == "m":
            new_mode = Mode.VS_AI if self.session.mode == Mode.TWO_PLAYER else Mode.TWO_PLAYER
            self.session.set_mode(new_mode)
        elif command == "h":
            print(self.hint())
        elif command.isdecimal():
            # Rejections are reported by the session
            self.session.apply_move(int(command))
        else:
            print(f"Unknown command: {command!r}. Enter 0-8, r, m, h or q.")
    
    def hint(self) -> str:
        """Suggest a move for the player to move, using the AI heuristic."""
        if self.session.game_over or self.session.ai_engaged:
            return "No hint available."
        
        advisor = AIPlayer(self.session.current_player, rng=self.hint_rng)
        return advisor.get_move_suggestion(self.session.state)
    
    def _wait_for_ai(self):
        """Let the AI think, then play its move."""
        if self.session.pending_ai_move is None:
            return
        
        self.session.state.print_board()
        print(self.session.status_text)
        
        delay = self.scheduler.next_delay() or 0
        self.sleep_fn(delay / 1000.0)
        self.scheduler.advance(delay)
    
    def _print_header(self):
        mode_name = "vs AI" if self.session.mode == Mode.VS_AI else "2 players"
        print("\n" + "="*60)
        print(f"   {GameConfig.WINDOW_TITLE} ({mode_name})")
        print("   Enter 0-8 to move, 'r' reset, 'm' toggle mode, 'h' hint, 'q' quit")
        print("="*60)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=GameConfig.DEFAULT_MODE,
        help="2p = two players, ai = play against the AI"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's random corner choice"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=GameConfig.AI_THINK_DELAY_MS,
        help="AI thinking delay in milliseconds"
    )
    
    args = parser.parse_args(argv)
    
    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(mode=args.mode, seed=args.seed, delay_ms=args.delay_ms)
        ui.run()
        return 0
    
    game = ConsoleGame(mode=args.mode, seed=args.seed, delay_ms=args.delay_ms)
    
    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
