from .brent import BrentSolver
