import argparse
import time

from game import TicTacToe, PLAYER_X, PLAYER_O, DRAW, other_player
from minimax_ai import MinimaxAI
from mcts_ai import MCTSAI
from random_ai import RandomAI
from utils import get_plot_path, seed_rng


def play_game(x_ai, o_ai):
    """Play one full game from the empty board and return the outcome."""
    game = TicTacToe()
    players = {PLAYER_X: x_ai, PLAYER_O: o_ai}

    while not game.is_game_over():
        move = players[game.current_player].best_move(game.board, game.current_player)
        if move is None:
            raise RuntimeError(f"{type(players[game.current_player]).__name__} returned no move "
                               f"on an unfinished board")
        game.make_move(*move)

    return game.winner


def run_matchup(ai, opponent, games=100, ai_player=PLAYER_X):
    """Play `games` games and count the results from `ai`'s side."""
    stats = {'wins': 0, 'losses': 0, 'draws': 0}
    opponent_player = other_player(ai_player)

    for _ in range(games):
        if ai_player == PLAYER_X:
            winner = play_game(ai, opponent)
        else:
            winner = play_game(opponent, ai)

        if winner == ai_player:
            stats['wins'] += 1
        elif winner == opponent_player:
            stats['losses'] += 1
        elif winner == DRAW:
            stats['draws'] += 1

    return stats


def results_to_frame(results):
    """Turn {(name, side): stats} into a long-form DataFrame of rates."""
    import pandas as pd

    rows = []
    for (name, side), stats in results.items():
        total = max(sum(stats.values()), 1)
        for outcome, label in (('wins', 'Win Rate'), ('losses', 'Loss Rate'), ('draws', 'Draw Rate')):
            rows.append({
                'Matchup': f"{name} as {side}",
                'Metric': label,
                'Rate': stats[outcome] / total,
            })
    return pd.DataFrame(rows)


def plot_results(results, plot_name="matchups"):
    """Plot matchup results with Seaborn and save them under results/."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import seaborn as sns

    df = results_to_frame(results)
    if df.empty:
        print("No matchup results available.")
        return None

    sns.set_theme(style="darkgrid")
    sns.set_context("notebook", font_scale=1.2)

    plt.figure(figsize=(12, 7))
    ax = sns.barplot(x='Matchup', y='Rate', hue='Metric', data=df,
                     palette={'Win Rate': 'green', 'Loss Rate': 'red', 'Draw Rate': 'blue'})
    ax.set_ylim(0, 1)

    plt.title('Strategies vs Random Opponent', fontsize=16, pad=20)
    plt.xlabel('Matchup', fontsize=14)
    plt.ylabel('Rate', fontsize=14)
    plt.xticks(rotation=20)
    plt.legend(title='Metrics', title_fontsize=13, fontsize=12,
               frameon=True, facecolor='white', edgecolor='gray')
    plt.tight_layout()

    plot_path = get_plot_path(plot_name)
    plt.savefig(plot_path, dpi=300, bbox_inches='tight')
    plt.close()
    print(f"Matchup plot saved to {plot_path}")
    return plot_path


def default_contenders(rng):
    return {
        "Minimax": MinimaxAI(),
        "MCTS (200)": MCTSAI(iterations=200, rng=rng),
        "MCTS (5000)": MCTSAI(iterations=5000, rng=rng),
        "Random": RandomAI(rng=rng),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pit the tic-tac-toe strategies against a random opponent.")
    parser.add_argument("--games", type=int, default=100, help="games per matchup and side")
    parser.add_argument("--seed", type=int, default=None, help="seed for all random choices")
    parser.add_argument("--plot", action="store_true", help="save a bar chart of the results")
    args = parser.parse_args(argv)

    start_time = time.time()
    rng = seed_rng(args.seed)
    opponent = RandomAI(rng=rng)

    results = {}
    for name, ai in default_contenders(rng).items():
        for side in (PLAYER_X, PLAYER_O):
            stats = run_matchup(ai, opponent, games=args.games, ai_player=side)
            results[(name, side)] = stats
            print(f"{name} as {side}: Wins: {stats['wins']}, Losses: {stats['losses']}, Draws: {stats['draws']}")

    if args.plot:
        try:
            plot_results(results)
        except Exception as e:
            print(f"Could not plot matchup results: {e}")

    elapsed_time = time.time() - start_time
    print(f"Evaluation complete in {elapsed_time:.2f} seconds!")
    return results


if __name__ == "__main__":
    main()
