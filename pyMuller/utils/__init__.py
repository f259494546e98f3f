from .get_quick_logger import getQuickLogger, clearLoggers
from .muller_method import MullerConfig, muller, solve
from .muller_solver import MullerSolver, muller_step, select_denominator
from .nonlinear_problem import NonlinearProblem
from .rootfinder import (MullerSolution, MullerUsageError, RootFinderState,
                         RootFinderStatus, build_solution)
from .tolerance import get_tolerance, working_dtype

__all__ = [
    "build_solution",
    "clearLoggers",
    "get_tolerance",
    "getQuickLogger",
    "muller",
    "muller_step",
    "MullerConfig",
    "MullerSolution",
    "MullerSolver",
    "MullerUsageError",
    "NonlinearProblem",
    "RootFinderState",
    "RootFinderStatus",
    "select_denominator",
    "solve",
    "working_dtype"
]
