"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell or press 1-9)
- Game mode and difficulty selection
- Scores, draws, games played and win rate
- Settings (animations, sounds)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.ai_player import Difficulty
from logic.board import Player, BOARD_SIZE, ROW_LENGTH
from logic.win_checker import GameOutcome
from session.config import GameConfig, Settings, SettingsStore
from session.game_session import GameMode, GameSession


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        settings_store: Optional[SettingsStore] = None,
        mode: GameMode = GameMode.AI,
        difficulty: Optional[Difficulty] = None
    ):
        """
        Initialize the UI.

        Args:
            settings_store: Where settings are loaded from and saved to.
            mode: Starting game mode.
            difficulty: Overrides the saved difficulty for this run.
        """
        self.settings_store = settings_store or SettingsStore()
        settings = self.settings_store.load()
        if difficulty is not None:
            settings.difficulty = difficulty

        self.session = GameSession(settings, mode=mode, on_game_over=self._on_game_over)
        self.settings_window: Optional[tk.Toplevel] = None
        self.pending_ai_move: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()

    @property
    def settings(self) -> Settings:
        return self.session.settings

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TCheckbutton', background=GameConfig.BG_COLOR, foreground='white')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)
        self.mode_buttons = {}
        for text, mode in (("2 Players", GameMode.HUMAN), ("vs AI", GameMode.AI)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=10,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Turn and status
        self.turn_label = ttk.Label(main_frame, text="Turn: X")
        self.turn_label.pack(pady=(10, 0))
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(BOARD_SIZE):
            row, col = divmod(index, ROW_LENGTH)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(main_frame, text="Difficulty", style='Title.TLabel').pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=10)
        self.difficulty_buttons = {}
        for difficulty in Difficulty:
            btn = tk.Button(
                diff_frame,
                text=difficulty.value.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=9,
                activebackground=GameConfig.DIFFICULTY_COLORS[difficulty],
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=3)
            self.difficulty_buttons[difficulty] = btn

        # Scores
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack()
        self.stats_label = ttk.Label(main_frame, text="")
        self.stats_label.pack(pady=(0, 5))

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)
        controls = (
            ("Reset", '#6366f1', self._reset_game),
            ("New Game", '#10b981', self._new_game),
            ("Settings", '#2d3748', self._show_settings),
        )
        for text, color, command in controls:
            tk.Button(
                control_frame,
                text=text,
                font=('Segoe UI', 11, 'bold'),
                bg=color,
                fg='white',
                width=10,
                command=command
            ).pack(side=tk.LEFT, padx=5)

        # Keyboard shortcuts
        for key in range(1, BOARD_SIZE + 1):
            self.root.bind(str(key), lambda e, i=key - 1: self._on_cell_click(i))
        self.root.bind('<Escape>', lambda e: self._hide_settings())

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== GAME EVENTS ====================

    def _on_cell_click(self, index: int):
        """Handle a click or number key on a cell."""
        if not self.session.make_move(index):
            return

        self._play_sound()
        self._refresh()
        self._schedule_ai_move()

    def _schedule_ai_move(self):
        """Give the AI its turn after a short pause."""
        if self.session.is_ai_turn and self.pending_ai_move is None:
            self.status_label.configure(text="AI is thinking...")
            self.pending_ai_move = self.root.after(GameConfig.AI_MOVE_DELAY_MS, self._ai_move)

    def _ai_move(self):
        self.pending_ai_move = None
        move = self.session.make_ai_move()
        if move is None:
            return

        print(f"AI ({self.session.difficulty.value}) played cell {move + 1}")
        self._play_sound()
        self._refresh()

    def _on_game_over(self, outcome: GameOutcome):
        """Called by the session when a game ends."""
        message = self.session.result_message()
        print(message)

        if outcome.combination is not None:
            self._highlight_cells(outcome.combination)
            if self.settings.animations:
                self._flash_cells(outcome.combination, GameConfig.FLASH_COUNT)

        if self.settings.sounds:
            self.root.after(150, self.root.bell)

    def _cancel_ai_move(self):
        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

    def _set_mode(self, mode: GameMode):
        self._cancel_ai_move()
        self.session.set_mode(mode)
        print(f"Mode set to: {mode.value}")
        self._refresh()

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self.session.set_difficulty(difficulty)
        print(f"Difficulty set to: {difficulty.value}")
        self._refresh()

    def _reset_game(self):
        """Clear the board, keep scores."""
        self._cancel_ai_move()
        self.session.reset_game()
        self._refresh()

    def _new_game(self):
        """Clear the board and scores."""
        self._cancel_ai_move()
        self.session.new_game()
        self._refresh()

    # ==================== DISPLAY ====================

    def _refresh(self):
        """Redraw board, labels and button states from the session."""
        state = self.session.state

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            if mark is None:
                cell.configure(text="", bg=GameConfig.CELL_COLOR)
            else:
                color = GameConfig.X_COLOR if mark == Player.X else GameConfig.O_COLOR
                cell.configure(text=mark.value, fg=color, bg=GameConfig.CELL_COLOR)

        if state.winning_combination is not None:
            self._highlight_cells(state.winning_combination)

        if state.is_game_over:
            self.turn_label.configure(text="Game Over")
            self.status_label.configure(text=self.session.result_message())
        else:
            current = self.session.winner_name(state.current_player)
            self.turn_label.configure(text=f"Turn: {current} ({state.current_player.value})")
            self.status_label.configure(text="Game in progress")

        scores = self.session.scoreboard
        o_name = "AI" if self.session.mode == GameMode.AI else "Player O"
        self.score_label.configure(
            text=f"Player X: {scores.x_wins}    {o_name}: {scores.o_wins}    Draws: {scores.draws}"
        )
        self.stats_label.configure(
            text=f"Games played: {scores.games_played}    Win rate: {scores.win_rate}%"
        )

        for mode, btn in self.mode_buttons.items():
            if mode == self.session.mode:
                btn.configure(bg='#00d4ff', fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

        for difficulty, btn in self.difficulty_buttons.items():
            if difficulty == self.session.difficulty:
                btn.configure(bg=GameConfig.DIFFICULTY_COLORS[difficulty], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _highlight_cells(self, indices):
        for index in indices:
            self.board_cells[index].configure(bg=GameConfig.WIN_COLOR)

    def _flash_cells(self, indices, remaining: int):
        """Toggle the winning cells' colour a few times."""
        if self.session.state.winning_combination != indices:
            return  # Board was reset mid-flash
        if remaining <= 0:
            self._highlight_cells(indices)
            return

        color = GameConfig.WIN_COLOR if remaining % 2 == 0 else GameConfig.CELL_COLOR
        for index in indices:
            self.board_cells[index].configure(bg=color)

        self.root.after(
            GameConfig.FLASH_INTERVAL_MS,
            lambda: self._flash_cells(indices, remaining - 1)
        )

    def _play_sound(self):
        if self.settings.sounds:
            self.root.bell()

    def _notify(self, message: str):
        """Show a short notice in the status line."""
        self.status_label.configure(text=message)
        self.root.after(GameConfig.NOTIFICATION_MS, self._refresh)

    # ==================== SETTINGS ====================

    def _show_settings(self):
        """Open the settings window."""
        if self.settings_window is not None:
            self.settings_window.lift()
            return

        window = tk.Toplevel(self.root)
        window.title("Settings")
        window.configure(bg=GameConfig.BG_COLOR)
        window.transient(self.root)
        window.bind('<Escape>', lambda e: self._hide_settings())
        window.protocol("WM_DELETE_WINDOW", self._hide_settings)
        self.settings_window = window

        frame = ttk.Frame(window)
        frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        ttk.Label(frame, text="Difficulty").pack(anchor=tk.W)
        self.difficulty_var = tk.StringVar(value=self.settings.difficulty.value)
        ttk.Combobox(
            frame,
            textvariable=self.difficulty_var,
            values=[d.value for d in Difficulty],
            state='readonly'
        ).pack(fill=tk.X, pady=(0, 10))

        self.animations_var = tk.BooleanVar(value=self.settings.animations)
        ttk.Checkbutton(frame, text="Animations", variable=self.animations_var).pack(anchor=tk.W)

        self.sounds_var = tk.BooleanVar(value=self.settings.sounds)
        ttk.Checkbutton(frame, text="Sounds", variable=self.sounds_var).pack(anchor=tk.W)

        tk.Button(
            frame,
            text="Save",
            font=('Segoe UI', 10, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._save_settings
        ).pack(pady=(10, 0))

    def _hide_settings(self):
        if self.settings_window is not None:
            self.settings_window.destroy()
            self.settings_window = None

    def _save_settings(self):
        """Apply the settings window's values and write them to disk."""
        self.settings.difficulty = Difficulty.from_name(self.difficulty_var.get())
        self.settings.animations = self.animations_var.get()
        self.settings.sounds = self.sounds_var.get()

        self._hide_settings()
        self._refresh()

        try:
            self.settings_store.save(self.settings)
        except OSError as e:
            print(f"Could not save settings: {e}")
            self._notify("Settings not saved!")
        else:
            self._notify("Settings saved!")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
