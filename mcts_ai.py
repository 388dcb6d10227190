import math

from game import PLAYER_O, DRAW, apply_move, copy_board, evaluate_outcome, legal_moves, other_player
from utils import get_rng

EXPLORATION_WEIGHT = 1.414  # ~sqrt(2)
DEFAULT_ITERATIONS = 10000

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


def uct_value(wins, visits, parent_visits, exploration_weight=EXPLORATION_WEIGHT):
    """UCB1 score of a child. Unvisited children always come first."""
    if visits == 0:
        return float('inf')
    exploit = wins / visits
    explore = exploration_weight * math.sqrt(math.log(parent_visits) / visits)
    return exploit + explore


class MCTSNode:
    """Node in the Monte Carlo search tree representing a game state."""

    def __init__(self, index, board, player, move=None, parent=None):
        self.index = index  # Position in the owning arena
        self.board = board  # Own copy of the game state
        self.player = player  # Player to move at this node
        self.move = move  # Move that led to this state
        self.parent = parent  # Parent index, None for the root
        self.children = []  # Child indices in expansion order
        self.wins = 0  # Simulations through this node won by the computer
        self.visits = 0  # Simulations through this node
        self.untried_moves = legal_moves(board)

    def is_fully_expanded(self):
        """Check if all possible moves have been expanded."""
        return len(self.untried_moves) == 0

    def is_terminal(self):
        return evaluate_outcome(self.board) is not None


class NodeArena:
    """Owns every node of a single search; nodes refer to each other by index."""

    def __init__(self):
        self.nodes = []

    def add_node(self, board, player, move=None, parent=None):
        index = len(self.nodes)
        node = MCTSNode(index, board, player, move=move, parent=parent)
        self.nodes.append(node)
        if parent is not None:
            self.nodes[parent].children.append(index)
        return index

    def children_of(self, index):
        return [self.nodes[i] for i in self.nodes[index].children]

    def release(self):
        """Drop the whole tree at once."""
        self.nodes = []

    def __getitem__(self, index):
        return self.nodes[index]

    def __len__(self):
        return len(self.nodes)


class MCTSAI:
    """Monte Carlo Tree Search with a fixed simulation budget.

    Wins are always counted for `self.player` (the computer), whichever side
    is to move at a node, so W/N is the computer's win rate throughout the tree.
    """

    def __init__(self, iterations=DEFAULT_ITERATIONS, exploration_weight=EXPLORATION_WEIGHT,
                 player=PLAYER_O, rng=None):
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        self.iterations = iterations
        self.exploration_weight = exploration_weight
        self.rng = rng
        self.set_player(player)

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.opponent = other_player(player)
        self.player = player

    def best_move(self, board, player=None, iterations=None):
        """Run the search and return the most visited root move, or None."""
        if player is not None:
            self.set_player(player)
        iterations = self.iterations if iterations is None else iterations
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")

        arena = NodeArena()
        root = arena.add_node(copy_board(board), self.player)

        for _ in range(iterations):
            # Selection phase - descend to a node worth expanding
            node = self.select_node(arena, root)

            # Expansion phase - add one child if moves remain
            if not arena[node].is_fully_expanded() and not arena[node].is_terminal():
                node = self.expand_node(arena, node)

            # Simulation phase
            result = self.simulate(arena[node].board, arena[node].player)

            # Backpropagation phase
            self.backpropagate(arena, node, result)

        best_child = None
        for child in arena.children_of(root):
            if best_child is None or child.visits > best_child.visits:
                best_child = child

        move = best_child.move if best_child is not None else None
        arena.release()
        return move

    def select_node(self, arena, index):
        """Follow the highest UCT child while the node is fully expanded."""
        node = arena[index]
        while node.is_fully_expanded() and node.children and not node.is_terminal():
            node = self.best_child(arena, node)
        return node.index

    def best_child(self, arena, node):
        best_value = -float('inf')
        best = None
        for child in arena.children_of(node.index):
            value = uct_value(child.wins, child.visits, node.visits, self.exploration_weight)
            if value > best_value:
                best_value = value
                best = child
        return best

    def expand_node(self, arena, index):
        """Add a child node for the last untried move."""
        node = arena[index]
        move = node.untried_moves.pop()
        new_board = apply_move(node.board, move, node.player)
        return arena.add_node(new_board, other_player(node.player), move=move, parent=index)

    def simulate(self, board, player):
        """Play random moves to the end and score the result for the computer."""
        rng = self.rng if self.rng is not None else get_rng()
        current_player = player
        outcome = evaluate_outcome(board)

        while outcome is None:
            moves = legal_moves(board)
            move = moves[int(rng.integers(len(moves)))]
            board = apply_move(board, move, current_player)
            current_player = other_player(current_player)
            outcome = evaluate_outcome(board)

        return self.score(outcome)

    def score(self, outcome):
        if outcome == self.player:
            return WIN_SCORE
        if outcome == self.opponent:
            return LOSS_SCORE
        if outcome == DRAW:
            return DRAW_SCORE
        raise ValueError(f"Cannot score an unfinished game: {outcome!r}")

    def backpropagate(self, arena, index, result):
        """Update statistics on the path back to the root."""
        while index is not None:
            node = arena[index]
            node.visits += 1
            if result == WIN_SCORE:
                node.wins += 1
            index = node.parent
