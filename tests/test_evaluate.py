import numpy as np
import pytest

import evaluate
from evaluate import play_game, run_matchup, results_to_frame, plot_results
from game import PLAYER_X, PLAYER_O, DRAW
from minimax_ai import MinimaxAI
from random_ai import RandomAI


@pytest.fixture
def rng():
    return np.random.default_rng(17)


def test_minimax_self_play_draws():
    assert play_game(MinimaxAI(), MinimaxAI()) == DRAW


@pytest.mark.parametrize("side", [PLAYER_X, PLAYER_O])
def test_minimax_matchup_has_no_losses(rng, side):
    stats = run_matchup(MinimaxAI(), RandomAI(rng=rng), games=10, ai_player=side)
    assert stats['losses'] == 0
    assert sum(stats.values()) == 10


def test_play_game_rejects_missing_move():
    class Stuck:
        def best_move(self, board, player=None):
            return None

    with pytest.raises(RuntimeError):
        play_game(Stuck(), MinimaxAI())


def test_results_to_frame():
    results = {("Minimax", PLAYER_X): {'wins': 3, 'losses': 0, 'draws': 1}}
    df = results_to_frame(results)
    assert len(df) == 3
    rates = dict(zip(df['Metric'], df['Rate']))
    assert rates['Win Rate'] == pytest.approx(0.75)
    assert rates['Loss Rate'] == 0
    assert rates['Draw Rate'] == pytest.approx(0.25)
    assert set(df['Matchup']) == {"Minimax as X"}


def test_plot_results_saves_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    results = {("Minimax", PLAYER_X): {'wins': 3, 'losses': 0, 'draws': 1},
               ("Random", PLAYER_O): {'wins': 1, 'losses': 2, 'draws': 1}}
    path = plot_results(results)
    assert (tmp_path / path).exists()


def test_main_reports_each_matchup(monkeypatch, capsys):
    monkeypatch.setattr(evaluate, "default_contenders",
                        lambda rng: {"Minimax": MinimaxAI(), "Random": RandomAI(rng=rng)})
    results = evaluate.main(["--games", "2", "--seed", "0"])

    out = capsys.readouterr().out
    assert set(results) == {("Minimax", PLAYER_X), ("Minimax", PLAYER_O),
                            ("Random", PLAYER_X), ("Random", PLAYER_O)}
    assert results[("Minimax", PLAYER_X)]['losses'] == 0
    assert "Minimax as O:" in out
    assert "Evaluation complete" in out
