from game import evaluate_outcome, legal_moves
from utils import get_rng


class RandomAI:
    """Baseline opponent: a uniformly random legal move."""

    def __init__(self, rng=None):
        self.rng = rng

    def set_player(self, player):
        # Any side plays the same way
        self.player = player

    def best_move(self, board, player=None):
        if evaluate_outcome(board) is not None:
            return None
        moves = legal_moves(board)
        if not moves:
            return None
        rng = self.rng if self.rng is not None else get_rng()
        return moves[int(rng.integers(len(moves)))]
