import math

import pytest

from hvac_engine.config.models import SolverSettings
from hvac_engine.core.exceptions import NumericalDivergenceError
from hvac_engine.solvers.root_finder import BrentSolver


def test_simple_root():
    solver = BrentSolver("Quadratic")
    assert solver.find_root(lambda x: x * x - 4.0, 0.0, 5.0) == pytest.approx(2.0, abs=1e-10)
    assert solver.evaluation_count > 2


def test_reversed_bracket():
    solver = BrentSolver()
    assert solver.find_root(lambda x: x - 1.5, 3.0, 0.0) == pytest.approx(1.5, abs=1e-12)


def test_exact_root_on_bound():
    solver = BrentSolver()
    assert solver.find_root(lambda x: x - 2.0, 2.0, 3.0) == 2.0
    assert solver.evaluation_count == 2


def test_bracket_expansion_within_limits():
    """A bracket missing the root is widened towards the hard limits."""
    solver = BrentSolver()
    root = solver.find_root(lambda x: x - 40.0, 0.0, 1.0, limits=(-100.0, 100.0))
    assert root == pytest.approx(40.0, abs=1e-10)


def test_bracket_split_finds_inner_sign_change():
    """Both ends positive, but the function dips below zero inside."""
    solver = BrentSolver()
    root = solver.find_root(lambda x: (x - 0.5) ** 2 - 0.01, 0.0, 2.0)
    assert root == pytest.approx(0.4, abs=1e-10)


def test_no_sign_change_raises():
    solver = BrentSolver("NoRoot")
    with pytest.raises(NumericalDivergenceError, match="NoRoot: no sign change"):
        solver.find_root(lambda x: x * x + 1.0, -1.0, 1.0)


def test_non_finite_value_raises():
    solver = BrentSolver()
    with pytest.raises(NumericalDivergenceError, match="not finite"):
        solver.find_root(lambda x: math.inf, 0.0, 1.0)


def test_iteration_ceiling():
    settings = SolverSettings(max_iterations=2, absolute_tolerance=1e-15)
    solver = BrentSolver("Capped", settings=settings)
    with pytest.raises(NumericalDivergenceError, match="no convergence"):
        solver.find_root(lambda x: math.exp(x) - 10.0, 0.0, 100.0)


def test_function_errors_propagate():
    def failing(x):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        BrentSolver().find_root(failing, 0.0, 1.0)
