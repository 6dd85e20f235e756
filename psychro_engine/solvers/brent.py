"""
BRACKETING ROOT FINDER

Wraps scipy's Brent method (`scipy.optimize.root_scalar(method='brentq')`)
for the inversions of the property equations and the target-seeking process
calculators.

Callers seldom know a bracket beforehand; they pass two *counterpart points*,
usually an estimate of the root scaled down and up a little. When the residual
has the same sign in both points, the interval is widened on the side where
the residual is smallest in absolute value (the side closest to the root),
until a sign change is found or the optional bounds are hit.

A `BrentSolver` instance keeps its run state (number of evaluations, last
evaluated point) for one root search at a time. Use one instance per search
and never share an instance between threads.
"""
import math
from typing import Callable
from scipy import optimize
from ..exceptions import SolutionNotConvergedError
from ..logging import ModuleLogger

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)


DEFAULT_ACCURACY = 1.0e-7
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_MAX_EXPANSIONS = 60
EXPANSION_FACTOR = 1.6


class BrentSolver:

    def __init__(
        self,
        name: str = 'BrentSolver',
        accuracy: float = DEFAULT_ACCURACY,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        counterpart_points: tuple[float, float] = (-50.0, 50.0),
        bounds: tuple[float, float] | None = None,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS
    ) -> None:
        """
        Parameters
        ----------
        name:
            Name of the root search, only used in log messages.
        accuracy:
            Absolute tolerance on the root.
        max_iterations:
            Maximum number of Brent iterations once a bracket is known.
        counterpart_points:
            Two points from which the search for a bracket starts. They need
            not bracket the root.
        bounds:
            Optional (lower, upper) limits the bracket may not cross while it
            is being widened, e.g. the validity range of a correlation.
        max_expansions:
            Maximum number of times the bracket is widened.
        """
        self.name = name
        self.accuracy = accuracy
        self.max_iterations = max_iterations
        self.counterpart_points = counterpart_points
        self.bounds = bounds if bounds is not None else (-math.inf, math.inf)
        self.max_expansions = max_expansions
        self.evaluations: int = 0
        self.last_point: float | None = None
        self.last_value: float | None = None

    def _evaluate(self, x: float, fun: Callable[[float], float]) -> float:
        y = fun(x)
        self.evaluations += 1
        self.last_point, self.last_value = x, y
        if math.isnan(y):
            raise SolutionNotConvergedError(
                f"{self.name}: residual is NaN at x = {x}."
            )
        logger.debug(
            "%s/Evaluation %d: x = %.9g, residual = %.6g",
            self.name, self.evaluations, x, y
        )
        return y

    def _clip(self, x: float) -> float:
        lower, upper = self.bounds
        return min(max(x, lower), upper)

    def _find_bracket(
        self,
        fun: Callable[[float], float]
    ) -> tuple[float, float, float, float]:
        """Returns a bracket (a, b) and the residuals at its end points. When
        the residual vanishes in one of the end points, a == b.
        """
        lower, upper = self.bounds
        a, b = sorted(self._clip(x) for x in self.counterpart_points)
        if a == b:
            if b < upper:
                b = self._clip(b + max(1.0, abs(b) * 0.01))
            else:
                a = self._clip(a - max(1.0, abs(a) * 0.01))
        fa = self._evaluate(a, fun)
        if fa == 0.0:
            return a, a, fa, fa
        fb = self._evaluate(b, fun)
        for expansion in range(self.max_expansions + 1):
            if fb == 0.0:
                return b, b, fb, fb
            if math.copysign(1.0, fa) != math.copysign(1.0, fb):
                return a, b, fa, fb
            if expansion == self.max_expansions:
                break
            step = EXPANSION_FACTOR * (b - a)
            if (abs(fa) < abs(fb) and a > lower) or b >= upper:
                if a <= lower:
                    break
                a = self._clip(a - step)
                fa = self._evaluate(a, fun)
                if fa == 0.0:
                    return a, a, fa, fa
            else:
                b = self._clip(b + step)
                fb = self._evaluate(b, fun)
        raise SolutionNotConvergedError(
            f"{self.name}: no sign change of the residual found between "
            f"{a} and {b}."
        )

    def solve(self, fun: Callable[[float], float]) -> float:
        """Returns the root of `fun`.

        Raises
        ------
        SolutionNotConvergedError
            If no bracket is found or the iteration limit is exceeded.
        """
        self.evaluations = 0
        self.last_point, self.last_value = None, None
        a, b, fa, fb = self._find_bracket(fun)
        if a == b:
            return a
        try:
            sol = optimize.root_scalar(
                self._evaluate,
                args=(fun,),
                method='brentq',
                bracket=(a, b),
                xtol=self.accuracy,
                maxiter=self.max_iterations
            )
        except RuntimeError:
            raise SolutionNotConvergedError(
                f"{self.name}: no solution within {self.max_iterations} "
                f"iterations (bracket {a}..{b})."
            ) from None
        if not sol.converged:
            raise SolutionNotConvergedError(
                f"{self.name}: {sol.flag} (bracket {a}..{b})."
            )
        logger.debug(
            "%s: root %.9g found after %d evaluations",
            self.name, sol.root, self.evaluations
        )
        return sol.root
