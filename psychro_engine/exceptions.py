"""
Exceptions raised by the property equations and process calculators.

All of them derive from `PsychrometricsError`. Argument and physics errors
are also `ValueError`s, so callers that only check for bad input values keep
working.
"""


class PsychrometricsError(Exception):
    pass


class InvalidArgumentError(PsychrometricsError, ValueError):
    """An argument is out of its allowed range, or contradicts the direction
    of the requested process (e.g. a heating target below the inlet
    temperature).
    """
    pass


class PhysicallyImpossibleError(PsychrometricsError, ValueError):
    """The arguments are well-formed, but the requested outcome cannot be
    realized starting from the given inlet state (e.g. dry cooling below the
    dew point, or an outlet humidity that needs an infinite coil area).
    """
    pass


class SolutionNotConvergedError(PsychrometricsError):
    """A root search could not bracket a root or ran out of iterations."""
    pass
