import os
from collections import Counter

import numpy as np
import pytest

from game import PLAYER_X, PLAYER_O, legal_moves, new_board
from random_ai import RandomAI
import utils

X, O, _ = PLAYER_X, PLAYER_O, None


class TestRandomAI:

    def test_returns_legal_move(self):
        board = [[X, O, X], [_, O, _], [_, _, _]]
        ai = RandomAI(rng=np.random.default_rng(0))
        for _attempt in range(50):
            assert ai.best_move(board) in legal_moves(board)

    def test_no_move_on_finished_boards(self):
        ai = RandomAI(rng=np.random.default_rng(0))
        full = [[X, O, X], [X, O, O], [O, X, X]]
        won = [[X, X, X], [O, O, _], [_, _, _]]
        assert ai.best_move(full) is None
        assert ai.best_move(won) is None

    def test_uniform_over_empty_cells(self):
        ai = RandomAI(rng=np.random.default_rng(99))
        counts = Counter(ai.best_move(new_board()) for _ in range(9000))
        assert set(counts) == set(legal_moves(new_board()))
        assert all(800 < count < 1200 for count in counts.values())

    def test_seeded_sources_agree(self):
        first = RandomAI(rng=np.random.default_rng(5))
        second = RandomAI(rng=np.random.default_rng(5))
        board = new_board()
        assert [first.best_move(board) for _ in range(20)] == [second.best_move(board) for _ in range(20)]

    def test_uses_process_wide_source_by_default(self, monkeypatch):
        monkeypatch.setattr(utils, "_rng", None)
        utils.seed_rng(11)
        expected = RandomAI(rng=np.random.default_rng(11)).best_move(new_board())
        assert RandomAI().best_move(new_board()) == expected


class TestProcessRandomSource:

    def test_seeded_once_on_first_use(self, monkeypatch):
        monkeypatch.setattr(utils, "_rng", None)
        rng = utils.get_rng()
        assert isinstance(rng, np.random.Generator)
        assert utils.get_rng() is rng

    def test_explicit_seed_is_reproducible(self, monkeypatch):
        monkeypatch.setattr(utils, "_rng", None)
        first = utils.seed_rng(3).integers(1000, size=5)
        second = utils.seed_rng(3).integers(1000, size=5)
        assert list(first) == list(second)


def test_plot_path_created(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = utils.get_plot_path("matchups")
    assert path == os.path.join("results", "matchups.png")
    assert (tmp_path / "results").is_dir()
