"""Numerical solvers shared by the process equations."""

from hvac_engine.solvers.root_finder import BrentSolver

__all__ = ['BrentSolver']
