import os
import time

import numpy as np

_rng = None


def seed_rng(seed=None):
    """Seed the process-wide random source. Uses the clock when no seed is given."""
    global _rng
    if seed is None:
        seed = time.time_ns()
    _rng = np.random.default_rng(seed)
    return _rng


def get_rng():
    """Return the process-wide random source, seeding it on first use."""
    if _rng is None:
        seed_rng()
    return _rng


def ensure_output_path(kind="results"):
    """Create output directory if it doesn't exist."""
    path = kind
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
    return path


def get_plot_path(plot_name="matchups"):
    """Get standardized path for plot files."""
    directory = ensure_output_path()
    return os.path.join(directory, f"{plot_name}.png")
