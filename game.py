BOARD_SIZE = 3
PLAYER_X = 'X'
PLAYER_O = 'O'
DRAW = 'Draw'


class IllegalMoveError(ValueError):
    """Raised when a move targets an occupied or off-board cell."""


def new_board():
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def copy_board(board):
    return [row[:] for row in board]


def other_player(player):
    if player == PLAYER_X:
        return PLAYER_O
    if player == PLAYER_O:
        return PLAYER_X
    raise ValueError(f"Unknown player marker: {player!r}")


def legal_moves(board):
    """Return the empty cells as (row, col) tuples in row-major order."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
            if board[row][col] is None]


def apply_move(board, move, player):
    """Return a copy of the board with `player` placed on `move`."""
    row, col = move
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IllegalMoveError(f"Cell ({row}, {col}) is off the board")
    if board[row][col] is not None:
        raise IllegalMoveError(f"Cell ({row}, {col}) is already taken by {board[row][col]}")
    new = copy_board(board)
    new[row][col] = player
    return new


def evaluate_outcome(board):
    """Return 'X', 'O', 'Draw', or None while the game is still in progress."""
    # Check rows
    for row in range(BOARD_SIZE):
        if board[row][0] == board[row][1] == board[row][2] and board[row][0]:
            return board[row][0]

    # Check columns
    for col in range(BOARD_SIZE):
        if board[0][col] == board[1][col] == board[2][col] and board[0][col]:
            return board[0][col]

    # Check diagonals
    if board[0][0] == board[1][1] == board[2][2] and board[0][0]:
        return board[0][0]

    if board[0][2] == board[1][1] == board[2][0] and board[0][2]:
        return board[0][2]

    # Check for draw
    if all(cell for row in board for cell in row):
        return DRAW
    return None


class TicTacToe:
    def __init__(self):
        self.board = new_board()
        self.current_player = PLAYER_X  # X goes first
        self.winner = None
        self.history = []  # (player, move) in play order

    def reset_game(self):
        self.board = new_board()
        self.current_player = PLAYER_X
        self.winner = None
        self.history = []

    def make_move(self, row, col):
        if self.winner is not None:
            return False
        try:
            self.board = apply_move(self.board, (row, col), self.current_player)
        except IllegalMoveError:
            return False

        self.history.append((self.current_player, (row, col)))
        self.winner = evaluate_outcome(self.board)

        # Switch players if game isn't over
        if not self.winner:
            self.current_player = other_player(self.current_player)
        return True

    def moves_for(self, player):
        return [move for mover, move in self.history if mover == player]

    def is_game_over(self):
        return self.winner is not None
