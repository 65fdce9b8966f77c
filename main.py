"""
Main entry point for TicTacToe.

Starts one of:
- The Tkinter window (default)
- A console game (--no-ui)
- A batch of AI vs random-opponent games (--self-play N)
"""

from typing import Optional

from logic.ai_player import Difficulty
from logic.board import BOARD_SIZE
from session.config import SettingsStore
from session.game_session import GameMode, GameSession
from session.self_play import run_self_play


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Keys:
    1-9  place a mark (top-left is 1)
    r    reset the board
    n    new match (reset scores too)
    q    quit
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.is_running = False

    def start(self):
        """Run the input loop until the player quits."""
        print("\nStarting TicTacToe game...")
        print("Keys: 1-9 to play, 'r' reset, 'n' new match, 'q' quit\n")

        self.is_running = True
        self.session.state.print_board()

        while self.is_running:
            if self.session.is_ai_turn:
                self._ai_move()
                continue

            try:
                command = input("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str):
        """Act on one line of input."""
        if command == "q":
            self.is_running = False
        elif command == "r":
            self.session.reset_game()
            print("Board reset.")
            self.session.state.print_board()
        elif command == "n":
            self.session.new_game()
            print("New match, scores cleared.")
            self.session.state.print_board()
        elif command.isdigit() and 1 <= int(command) <= BOARD_SIZE:
            self._human_move(int(command) - 1)
        else:
            print("Enter 1-9, 'r', 'n' or 'q'.")

    def _human_move(self, index: int):
        if not self.session.make_move(index):
            print(f"Cell {index + 1} can't be played.")
            return
        self._after_move()

    def _ai_move(self):
        move = self.session.make_ai_move()
        if move is None:
            return
        print(f"\nAI plays {move + 1}")
        self._after_move()

    def _after_move(self):
        self.session.state.print_board()
        message = self.session.result_message()
        if message:
            print(f"\n{message}")
            print(self.session.scoreboard.summary())
            print("Press 'r' to play again.")


def self_play(games: int, difficulty: Difficulty, ai_first: bool, seed: Optional[int]):
    """Run AI vs random games and print the tally."""
    ai_mark = "X" if ai_first else "O"
    print(f"Playing {games} games: AI ({ai_mark}, {difficulty.value}) vs random")

    scoreboard = run_self_play(games, difficulty, ai_first=ai_first, seed=seed)

    ai_wins = scoreboard.x_wins if ai_first else scoreboard.o_wins
    ai_losses = scoreboard.o_wins if ai_first else scoreboard.x_wins
    print(f"AI wins: {ai_wins}  AI losses: {ai_losses}  Draws: {scoreboard.draws}")
    return scoreboard


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with an AI opponent")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.AI.value,
        help="Play against the AI or another human"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="AI difficulty (default: saved setting)"
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Path of the settings file"
    )
    parser.add_argument(
        "--self-play",
        type=int,
        metavar="N",
        default=0,
        help="Play N games of AI vs random opponent and print the results"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="In self-play, let the AI play X and move first"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for self-play"
    )

    args = parser.parse_args()

    store = SettingsStore(args.settings)
    mode = GameMode(args.mode)
    difficulty = Difficulty(args.difficulty) if args.difficulty else None

    if args.self_play > 0:
        self_play(
            args.self_play,
            difficulty or Difficulty.IMPOSSIBLE,
            args.ai_first,
            args.seed
        )
        return

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(store, mode=mode, difficulty=difficulty)
        ui.run()
        return

    # Console mode (--no-ui)
    settings = store.load()
    if difficulty is not None:
        settings.difficulty = difficulty

    print("\n" + "="*60)
    print("   TicTacToe")
    print(f"   Mode: {'vs AI (' + settings.difficulty.value + ')' if mode == GameMode.AI else '2 players'}")
    print("="*60)

    game = ConsoleGame(GameSession(settings, mode=mode))

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
