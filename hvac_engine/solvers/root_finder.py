"""
Bracketed scalar root finder.

Every inverse solver in the engine reduces its problem to a single continuous
function of one unknown (outlet temperature, coil power, inlet flow split) and
hands it to BrentSolver together with a bracket derived from a cheap
closed-form estimate.

Bracket Handling:
    1. Both bracket ends are evaluated; a non-finite value aborts the solve.
    2. If the ends share a sign and hard limits were supplied, the bracket is
       widened geometrically towards the limits.
    3. If there is still no sign change, the bracket is split into equal
       sub-brackets and the first one with a sign change is used.
    4. Brent's method (scipy.optimize.brentq) runs on the final bracket
       under the configured tolerance and iteration ceiling.

Any failure in these steps raises NumericalDivergenceError. Exceptions raised
by the function itself propagate unchanged.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np
from scipy.optimize import brentq

from hvac_engine.config.loader import get_engine_config
from hvac_engine.config.models import SolverSettings
from hvac_engine.core.exceptions import NumericalDivergenceError
from hvac_engine.core.types import ScalarFunction

logger = logging.getLogger(__name__)


class BrentSolver:
    """
    Brent root finder with bracket search and an explicit iteration cap.

    Attributes:
        name (str): Label used in log and error messages.
        settings (SolverSettings): Tolerances and limits. Defaults to the
            active engine configuration when not given.
        evaluation_count (int): Function evaluations in the last find_root call.

    Example:
        >>> solver = BrentSolver("T-Solver")
        >>> solver.find_root(lambda t: t * t - 4.0, 0.0, 5.0)
        2.0
    """

    def __init__(self, name: str = "BrentSolver", settings: Optional[SolverSettings] = None):
        self.name = name
        self.settings = settings if settings is not None else get_engine_config().solver
        self.evaluation_count: int = 0

    def find_root(
        self,
        func: ScalarFunction,
        lower: float,
        upper: float,
        limits: Optional[Tuple[float, float]] = None
    ) -> float:
        """
        Find x in [lower, upper] such that func(x) is zero within tolerance.

        Args:
            func: Continuous scalar function.
            lower: Lower bracket end.
            upper: Upper bracket end.
            limits: Optional hard (min, max) the bracket may be expanded to
                when its ends do not change sign.

        Returns:
            float: Root location.

        Raises:
            NumericalDivergenceError: If a bound is non-finite, no sign change
                can be found, or the iteration ceiling is exceeded.
        """
        self.evaluation_count = 0
        if lower > upper:
            lower, upper = upper, lower

        f_lower = self._evaluate(func, lower)
        f_upper = self._evaluate(func, upper)
        if f_lower == 0.0:
            return lower
        if f_upper == 0.0:
            return upper

        if np.sign(f_lower) == np.sign(f_upper) and limits is not None:
            lower, upper, f_lower, f_upper = self._expand_bracket(
                func, lower, upper, f_lower, f_upper, limits
            )
            if f_lower == 0.0:
                return lower
            if f_upper == 0.0:
                return upper

        if np.sign(f_lower) == np.sign(f_upper):
            lower, upper = self._split_bracket(func, lower, upper, f_lower)

        root, info = brentq(
            self._counted(func),
            lower,
            upper,
            xtol=self.settings.absolute_tolerance,
            rtol=self.settings.relative_tolerance,
            maxiter=self.settings.max_iterations,
            full_output=True,
            disp=False
        )
        if not info.converged:
            raise NumericalDivergenceError(
                f"{self.name}: no convergence after {info.iterations} iterations "
                f"in [{lower}, {upper}] ({info.flag})"
            )

        logger.debug(
            f"{self.name}: root {root:.12g} after {info.iterations} iterations, "
            f"{self.evaluation_count} evaluations"
        )
        return float(root)

    def _counted(self, func: ScalarFunction) -> ScalarFunction:
        def wrapper(x: float) -> float:
            return self._evaluate(func, x)
        return wrapper

    def _evaluate(self, func: ScalarFunction, x: float) -> float:
        self.evaluation_count += 1
        value = float(func(x))
        if not math.isfinite(value):
            raise NumericalDivergenceError(
                f"{self.name}: function is not finite at x = {x} (value: {value})"
            )
        return value

    def _expand_bracket(self, func, lower, upper, f_lower, f_upper, limits):
        """Widen the bracket geometrically towards the hard limits."""
        lower_limit, upper_limit = min(limits), max(limits)
        width = max(upper - lower, self.settings.absolute_tolerance)

        for _ in range(self.settings.max_bracket_expansions):
            if lower <= lower_limit and upper >= upper_limit:
                break
            width *= 2.0
            if lower > lower_limit:
                lower = max(lower_limit, lower - width)
                f_lower = self._evaluate(func, lower)
            if upper < upper_limit:
                upper = min(upper_limit, upper + width)
                f_upper = self._evaluate(func, upper)
            if np.sign(f_lower) != np.sign(f_upper):
                logger.debug(f"{self.name}: bracket expanded to [{lower}, {upper}]")
                break

        return lower, upper, f_lower, f_upper

    def _split_bracket(self, func, lower, upper, f_lower) -> Tuple[float, float]:
        """Return the first sub-bracket whose ends change sign."""
        grid = np.linspace(lower, upper, self.settings.bracket_divisions + 1)
        previous_x, previous_f = grid[0], f_lower

        for x in grid[1:-1]:
            f_x = self._evaluate(func, float(x))
            if f_x == 0.0 or np.sign(f_x) != np.sign(previous_f):
                return float(previous_x), float(x)
            previous_x, previous_f = x, f_x

        raise NumericalDivergenceError(
            f"{self.name}: no sign change found in [{lower}, {upper}]"
        )
