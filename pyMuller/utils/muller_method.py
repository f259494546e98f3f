"""
Entry points for solving a NonlinearProblem with Muller's method. These drive a
MullerSolver by evaluating the problem's function wherever the solver asks.
"""

from .muller_solver import MullerSolver
from .nonlinear_problem import NonlinearProblem
from .rootfinder import MullerSolution, MullerUsageError, RootFinderStatus
from dataclasses import dataclass
from typing import Any, Callable, Optional
import logging

_logger = logging.getLogger(__name__)

@dataclass
class MullerConfig:
    """
    Configurations specifying how we should solve.

    Attributes
    ----------
    tolerance : float, optional
        absolute tolerance on |f|. Resolved from the working dtype if None.
    max_iter : int
        maximum Muller updates.
    dtype : dtype-like, optional
        explicit working type.
    logger : Logger, optional
    """
    tolerance       : Optional[float]   = None  # Acceptable |f| at the root
    max_iter        : int               = 1000  # Max Muller updates
    dtype           : Any               = None  # Working numeric type
    logger          : object            = None  # Logger

def solve(prob: NonlinearProblem,
          C: Optional[MullerConfig] = None) -> MullerSolution:
    """
    Find a root of `prob.f(x, prob.p)` starting from the three guesses in
    `prob.u0`.

    Parameters
    ----------
    prob : NonlinearProblem
    C : MullerConfig, optional

    Returns
    -------
    MullerSolution
        with status CONVERGED, or MAX_ITERATIONS if the budget ran out.

    Raises
    ------
    MullerUsageError
        if the problem is in-place, does not hold exactly three pairwise
        distinct scalar guesses, or its function does not return a scalar.
    """
    if C is None:
        C = MullerConfig()
    logger = C.logger if C.logger else _logger

    if prob.inplace:
        raise MullerUsageError(
            "out_of_place", "Muller's method only supports out-of-place problems."
        )
    try:
        n_guesses = len(prob.u0)
    except TypeError:
        raise MullerUsageError(
            "three_guesses", f"u0 must be a sequence, got {prob.u0!r}."
        ) from None
    if n_guesses != 3:
        raise MullerUsageError(
            "three_guesses",
            f"Muller's method requires three initial guesses, got {n_guesses}."
        )

    x0, x1, x2 = prob.u0
    solver = MullerSolver(x0, x1, x2,
        tolerance   = C.tolerance,
        max_iter    = C.max_iter,
        dtype       = C.dtype,
        logger      = logger
    )

    logger.info(f"Muller solve from guesses ({x0}, {x1}, {x2})")

    state = solver.state
    while state.status == RootFinderStatus.NEEDS_EVALUATION:
        state = solver.update(prob.f(state.point, prob.p))

    sol = solver.to_solution(prob)
    if sol.success:
        logger.info(
            f"Root found: {sol.root} (f = {sol.value}) after "
            f"{sol.iterations} iterations"
        )
    else:
        logger.warning(
            f"Muller did not converge in {C.max_iter} iterations; last "
            f"iterate {sol.root} (f = {sol.value})"
        )

    return sol

def muller(f: Callable[[Any, Any], Any], p: Any, x0: Any, x1: Any, x2: Any,
           tolerance: Optional[float] = None, max_iter: int = 1000,
           dtype: Optional[Any] = None,
           logger: Optional[logging.Logger] = None) -> MullerSolution:
    """
    Shorthand for `solve(NonlinearProblem(f, (x0, x1, x2), p), ...)`.

    Parameters
    ----------
    f : Callable
        function of the form f(x, p).
    p : object
        parameter passed through to `f`.
    x0, x1, x2 : float or complex
        initial guesses.
    tolerance : float, optional
    max_iter : int, default=1000
    dtype : dtype-like, optional
    logger : Logger, optional

    Returns
    -------
    MullerSolution
    """
    return solve(NonlinearProblem(f, (x0, x1, x2), p),
                 MullerConfig(tolerance, max_iter, dtype, logger))
