from game import PLAYER_O, copy_board, evaluate_outcome, legal_moves, other_player, DRAW

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


class MinimaxAI:
    """Exhaustive minimax search with alpha-beta pruning.

    The side set with `set_player` is always the maximizing side; scores
    are +10 for its win, -10 for its loss and 0 for a draw, with no
    preference between quick and slow results.
    """

    def __init__(self, player=PLAYER_O):
        self.set_player(player)

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.opponent = other_player(player)
        self.player = player

    def evaluate(self, board):
        outcome = evaluate_outcome(board)
        if outcome == self.player:
            return WIN_SCORE
        if outcome == self.opponent:
            return LOSS_SCORE
        if outcome == DRAW:
            return DRAW_SCORE
        return None  # Game still in progress

    def minimax(self, board, depth, is_maximizing, alpha=-float('inf'), beta=float('inf')):
        score = self.evaluate(board)
        if score is not None:
            return score

        if is_maximizing:
            best = -float('inf')
            for row, col in legal_moves(board):
                board[row][col] = self.player
                score = self.minimax(board, depth + 1, False, alpha, beta)
                board[row][col] = None

                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    return best
            return best
        else:
            best = float('inf')
            for row, col in legal_moves(board):
                board[row][col] = self.opponent
                score = self.minimax(board, depth + 1, True, alpha, beta)
                board[row][col] = None

                best = min(best, score)
                beta = min(beta, score)
                if beta <= alpha:
                    return best
            return best

    def best_move(self, board, player=None):
        """Return the optimal move for the maximizing side, or None on a finished board."""
        if player is not None:
            self.set_player(player)

        scratch = copy_board(board)
        if evaluate_outcome(scratch) is not None:
            return None

        best_val = -float('inf')
        move = None
        for row, col in legal_moves(scratch):
            scratch[row][col] = self.player
            move_val = self.minimax(scratch, 0, False, -float('inf'), float('inf'))
            scratch[row][col] = None

            if move_val > best_val:
                best_val = move_val
                move = (row, col)

        return move
