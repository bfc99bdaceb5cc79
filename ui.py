"""
TicTacToe UI
A graphical interface for the TicTacToe engine using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status
- Mode selection (2 players / vs AI) and reset

The UI holds no game rules: clicks go to GameSession.apply_move and
everything on screen is read back from the session.
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine.config import GameConfig
from engine.game_state import Mode, Player
from engine.scheduler import TkScheduler
from engine.session import GameSession


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.
    """
    
    # How often the board is redrawn from the session (ms)
    REFRESH_MS = 50
    
    def __init__(
        self,
        mode: str = GameConfig.DEFAULT_MODE,
        seed: Optional[int] = None,
        delay_ms: int = GameConfig.AI_THINK_DELAY_MS
    ):
        """Initialize the UI."""
        self.is_running = False
        
        # Create UI first, the scheduler needs the root window
        self._create_ui()
        
        self.session = GameSession(
            mode=mode,
            scheduler=TkScheduler(self.root),
            rng=random.Random(seed),
            delay_ms=delay_ms
        )
        self._update_mode_buttons()
        
    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)
        
        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white',
                        font=GameConfig.LABEL_FONT)
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=GameConfig.LABEL_FONT, foreground='#ffd700')
        
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)
        
        ttk.Label(main_frame, text=GameConfig.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 10))
        
        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=(0, 10))
        
        self.mode_buttons = {}
        for text, mode in [("2 Players", Mode.TWO_PLAYER), ("vs AI", Mode.VS_AI)]:
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=10,
                bg='#2d3748',
                fg='white',
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn
        
        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)
        
        # Board (3x3 grid of buttons, cell index = row * 3 + col)
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)
        
        self.board_cells = []
        for idx in range(GameConfig.BOARD_CELLS):
            row, col = divmod(idx, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=idx: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)
        
        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)
        
        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)
        
        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)
        
        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)
        
    def _on_cell_click(self, idx: int):
        """Called when a cell is clicked."""
        if self.session.can_play(idx):
            self.session.apply_move(idx)
        self._update_board_display()
        
    def _set_mode(self, mode: Mode):
        """Switch game mode (starts a new game)."""
        self.session.set_mode(mode)
        self._update_mode_buttons()
        self._update_board_display()
        
    def _update_mode_buttons(self):
        """Highlight the active mode button."""
        for mode, btn in self.mode_buttons.items():
            if mode == self.session.mode:
                btn.configure(bg='#10b981', fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')
        
    def _update_loop(self):
        """Redraw periodically so the AI's delayed move shows up."""
        if not self.is_running:
            return
        self._update_board_display()
        self.root.after(self.REFRESH_MS, self._update_loop)
        
    def _update_board_display(self):
        """Draw the board and status from the session."""
        disabled = self.session.game_over or self.session.ai_engaged
        
        for idx, cell in enumerate(self.session.board):
            if cell is None:
                text, fg = "", 'white'
            else:
                text = cell.value
                fg = GameConfig.X_COLOR if cell == Player.X else GameConfig.O_COLOR
            
            bg = GameConfig.WIN_CELL_COLOR if self.session.is_winning_cell(idx) else GameConfig.CELL_COLOR
            self.board_cells[idx].configure(
                text=text,
                fg=fg,
                bg=bg,
                state='disabled' if disabled else 'normal',
                disabledforeground=fg
            )
        
        self.status_label.configure(text=self.session.status_text)
            
    def _reset_game(self):
        """Reset the game."""
        self.session.reset()
        self._update_board_display()
            
    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        
        # Drop the AI move so it never fires on a destroyed window
        if self.session.pending_ai_move is not None:
            self.session.pending_ai_move.cancel()
        
        self.root.quit()
        self.root.destroy()
        
    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self._update_loop()
        self.root.mainloop()


if __name__ == "__main__":
    TicTacToeUI().run()
