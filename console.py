import argparse

from game import TicTacToe, PLAYER_X, PLAYER_O, DRAW, BOARD_SIZE, other_player
from strategies import DIFFICULTIES, create_ai, mcts_iterations_for_difficulty
from utils import seed_rng


class TicTacToeConsole:
    TITLE = "============= Tic Tac Toe ============="
    ROW_SEPARATOR = "  +---+---+---+"

    GAME_MODES = {'1': "Player vs Player", '2': "Player vs Computer", '3': "Quit"}

    def __init__(self, input_func=None, rng=None):
        self.input_func = input_func or input
        self.rng = rng
        self.game = TicTacToe()
        self.game_mode = None
        self.difficulty = None
        self.ai = None
        self.player_marker = PLAYER_X  # Default

    def ask(self, prompt):
        return self.input_func(prompt).strip()

    def choose_game_mode(self):
        while True:
            print("\nSelect game mode:")
            for key, label in self.GAME_MODES.items():
                print(f"{key}. {label}")
            choice = self.ask("Enter your choice: ")
            if choice in self.GAME_MODES:
                break
            print("Invalid choice. Please enter 1, 2, or 3.")

        if choice == '3':
            return False
        self.game_mode = "Human" if choice == '1' else "AI"
        print(f"Mode chosen: {self.GAME_MODES[choice]}")
        return True

    def choose_ai(self):
        keys = "/".join(DIFFICULTIES)
        while True:
            print("\nSelect Computer Difficulty:")
            for key, (label, _, _) in DIFFICULTIES.items():
                print(f"{key}. {label}")
            choice = self.ask(f"Enter your choice ({keys}): ").upper()
            if choice in DIFFICULTIES:
                break
            print(f"Invalid choice. Please enter {', '.join(DIFFICULTIES)}.")

        self.difficulty = choice
        print(f"AI chosen: {DIFFICULTIES[choice][0]}.")
        return True

    def choose_marker(self):
        while True:
            choice = self.ask("Play as X or O? (X moves first): ").upper()
            if choice in (PLAYER_X, PLAYER_O):
                break
            print("Invalid choice. Please enter X or O.")
        self.player_marker = choice
        return True

    def main_menu(self):
        # First choose game mode
        if not self.choose_game_mode():
            return False

        # If AI mode, choose AI opponent and marker
        if self.game_mode == "AI":
            self.choose_ai()
            self.choose_marker()
            self.ai = create_ai(self.difficulty, other_player(self.player_marker), rng=self.rng)
        return True

    def player_label(self, player):
        if self.game_mode == "Human":
            return "Player 1 (X)" if player == PLAYER_X else "Player 2 (O)"
        if player == self.player_marker:
            return f"Player ({player})"
        return f"Computer ({player})"

    def draw_board(self):
        print("\n    " + "   ".join(str(col + 1) for col in range(BOARD_SIZE)))
        print(self.ROW_SEPARATOR)
        for row in range(BOARD_SIZE):
            cells = " | ".join(cell or ' ' for cell in self.game.board[row])
            print(f"{row + 1} | {cells} |")
            print(self.ROW_SEPARATOR)

    def draw_past_moves(self):
        print("\nPast Moves:")
        for player in (PLAYER_X, PLAYER_O):
            moves = " ".join(f"({row + 1},{col + 1})" for row, col in self.game.moves_for(player))
            print(f"{self.player_label(player)}: {moves}")

    def is_ai_turn(self):
        return self.game_mode == "AI" and self.game.current_player != self.player_marker

    def handle_player_input(self):
        while True:
            parts = self.ask(f"Enter Row and Column #(1-{BOARD_SIZE}): ").split()
            if len(parts) != 2:
                print("Please enter a row and a column separated by a space.")
                continue
            try:
                row, col = int(parts[0]), int(parts[1])
            except ValueError:
                print("Invalid input type. Please enter numbers only.")
                continue

            if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
                print(f"Invalid range. Please enter numbers between 1 and {BOARD_SIZE}.")
                continue

            if self.game.make_move(row - 1, col - 1):
                return row - 1, col - 1
            print(f"Tile ({row},{col}) is already taken. Try again.")

    def ai_move(self):
        iterations = mcts_iterations_for_difficulty(self.difficulty)
        if iterations:
            print(f"Computer is thinking (MCTS search, {iterations} sims)...")
        else:
            print("Computer is thinking...")

        move = self.ai.best_move(self.game.board)
        if move is None:
            print("Error: No valid move found for the computer.")
            return None
        self.game.make_move(*move)
        return move

    def display_winner(self):
        winner = self.game.winner
        if winner is None:
            print("Game ended unexpectedly without a clear result.")
        elif winner == DRAW:
            print("IT'S A TIE!")
        elif self.game_mode == "Human":
            print(f"{self.player_label(winner)} wins!")
        elif winner == self.player_marker:
            print("Congratulations! You win!")
        else:
            print("Computer wins! Better luck next time!")

    def play_round(self):
        self.game.reset_game()

        while not self.game.is_game_over():
            self.draw_board()
            self.draw_past_moves()
            print(f"Current Turn: {self.player_label(self.game.current_player)}")

            if self.is_ai_turn():
                if self.ai_move() is None:
                    break
            else:
                self.handle_player_input()

        print("\n===================================")
        print("GAME OVER!")
        self.draw_board()
        self.draw_past_moves()
        self.display_winner()
        print("===================================\n")

    def run_game(self):
        print(self.TITLE)
        while self.main_menu():
            while True:
                self.play_round()
                answer = self.ask("Do you want to play again in the current mode? (Y/N): ")
                if answer.upper() != 'Y':
                    break
        print("Exiting the game. Thanks for playing! :D")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a search-based AI.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's random choices")
    args = parser.parse_args(argv)

    rng = seed_rng(args.seed)
    console = TicTacToeConsole(rng=rng)
    try:
        console.run_game()
    except (EOFError, KeyboardInterrupt):
        print("\nExiting the game. Thanks for playing! :D")


if __name__ == "__main__":
    main()
