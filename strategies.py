from minimax_ai import MinimaxAI
from mcts_ai import MCTSAI
from random_ai import RandomAI

# Menu key -> (label, strategy kind, MCTS simulations)
# Change the simulation counts anytime to rebalance difficulty.
DIFFICULTIES = {
    'R': ("Random (uniform moves)", "random", 0),
    'E': ("Easy (MCTS - low simulations)", "mcts", 200),
    'M': ("Medium (MCTS - more simulations)", "mcts", 10000),
    'H': ("Hard (Minimax)", "minimax", 0),
}


def normalize_difficulty(difficulty):
    key = str(difficulty).strip().upper()
    if key not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty {difficulty!r}, expected one of {', '.join(DIFFICULTIES)}")
    return key


def mcts_iterations_for_difficulty(difficulty):
    """Simulation budget for a difficulty; 0 for the non-MCTS opponents."""
    return DIFFICULTIES[normalize_difficulty(difficulty)][2]


def create_ai(difficulty, player, rng=None):
    """Build the opponent for a difficulty key, playing as `player`."""
    key = normalize_difficulty(difficulty)
    _, kind, iterations = DIFFICULTIES[key]

    if kind == "minimax":
        ai = MinimaxAI()
    elif kind == "mcts":
        ai = MCTSAI(iterations=iterations, rng=rng)
    else:
        ai = RandomAI(rng=rng)

    ai.set_player(player)
    return ai
