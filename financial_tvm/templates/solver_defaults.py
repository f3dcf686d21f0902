"""Default settings for the Newton-Raphson solvers used by rate() and irr()."""

from typing import Any

DEFAULT_GUESS = 0.1
DEFAULT_TOL = 1e-6
DEFAULT_MAX_ITER = 100

SOLVER_PRESETS: dict[str, dict[str, Any]] = {
    "standard": {
        "guess": DEFAULT_GUESS,
        "tol": DEFAULT_TOL,
        "max_iter": DEFAULT_MAX_ITER,
    },
    "precise": {
        "guess": DEFAULT_GUESS,
        "tol": 1e-10,
        "max_iter": 200,
    },
    "fast": {
        "guess": DEFAULT_GUESS,
        "tol": 1e-4,
        "max_iter": 50,
    },
}
