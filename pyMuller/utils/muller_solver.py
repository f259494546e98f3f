"""
This class implements Muller's method for root finding, described in Sec. 9.5.2
of Press et al., Numerical Recipes (2007). A quadratic is fit through the last
three iterates and its root closest to the newest iterate becomes the next
guess. Like the other solvers here, it does not call the function itself: it
asks for an evaluation at `state.point` and is told the result with `update`.
"""

from .rootfinder import (RootFinderState, RootFinderStatus, MullerUsageError,
                         MullerSolution, build_solution)
from .tolerance import (working_dtype, value_dtype, complex_counterpart,
                        get_tolerance)
from typing import Any, Optional
import logging
import numpy as np

_logger = logging.getLogger(__name__)

ALGORITHM = "SimpleMuller"

def select_denominator(d_plus: Any, d_minus: Any) -> Any:
    """
    Pick the larger-magnitude denominator of the quadratic formula, which
    avoids cancellation when one root of the quadratic is near zero. Ties go to
    `d_plus`.
    """
    return d_plus if abs(d_plus) >= abs(d_minus) else d_minus

def muller_step(xa: Any, xb: Any, xc: Any, fa: Any, fb: Any, fc: Any) -> Any:
    """
    Compute the next Muller iterate.

    Parameters
    ----------
    xa, xb, xc : float or complex
        last three iterates, oldest first.
    fa, fb, fc : float or complex
        function values at those iterates.

    Returns
    -------
    float or complex
        the next iterate. It is complex whenever the discriminant of the
        interpolating quadratic is negative, even for real inputs.
    """
    q = np.divide(xc - xb, xb - xa)
    A = q*fc - q*(1 + q)*fb + q**2*fa
    B = (2*q + 1)*fc - (1 + q)**2*fb + q**2*fa
    C = (1 + q)*fc

    # emath.sqrt leaves the real line instead of returning nan
    sqrt_disc = np.emath.sqrt(B**2 - 4*A*C)
    denom = select_denominator(B + sqrt_disc, B - sqrt_disc)

    return xc - np.divide((xc - xb)*2*C, denom)

class MullerSolver:
    """
    Class implementation of Muller's method with external function evaluation.
    """
    def __init__(self, x0: Any, x1: Any, x2: Any,
                 tolerance: Optional[float] = None,
                 max_iter: int              = 1000,
                 dtype: Optional[Any]       = None,
                 logger: Optional[logging.Logger] = None):
        """
        Parameters
        ----------
        x0, x1, x2 : float or complex
            three pairwise distinct initial guesses.
        tolerance : float, optional
            absolute tolerance on |f|. Defaults to eps ** (4/5) for the working
            dtype once the function values at the guesses are known.
        max_iter : int, default=1000
            maximum number of Muller updates.
        dtype : dtype-like, optional
            explicit working type. By default it is inferred from the guesses
            and the function values; real and complex guesses may not be
            mixed.
        logger : Logger, optional
            replaces the module logger.
        """

        if max_iter < 0:
            raise MullerUsageError(
                "max_iter", f"max_iter must be non-negative, got {max_iter}."
            )

        self.dtype = working_dtype(x0, x1, x2, dtype = dtype)
        cast = self.dtype.type
        self.xa, self.xb, self.xc = cast(x0), cast(x1), cast(x2)

        if self.xa == self.xb or self.xb == self.xc or self.xa == self.xc:
            raise MullerUsageError(
                "distinct_guesses",
                f"initial guesses must be pairwise distinct, got "
                f"({self.xa}, {self.xb}, {self.xc})."
            )

        self.requested_tolerance = tolerance
        self.tolerance = None
        self.max_iter = max_iter
        self.logger = logger if logger else _logger

        # Function values on the window, oldest first
        self.fa = None
        self.fb = None
        self.fc = None

        # Newest iterate and its value
        self.xd = None
        self.fd = None

        self.min_f_seen = float('inf')
        self.iterations = 0
        self.evaluations = 0

        self.state      = RootFinderState(
            status      = RootFinderStatus.NEEDS_EVALUATION,
            point       = self.xa,
            root        = None,
            iterations  = 0,
            message     = "Awaiting initial function evaluation",
            best_value  = float('inf')
        )

        self._evaluation_step = 0  # Tracks which initial point we're evaluating
        self._initial_values = []

    def update(self, f_value: Any) -> RootFinderState:
        """
        Provide a function evaluation at `state.point` and get the next state.

        Parameters
        ----------
        f_value : float or complex

        Returns
        -------
        RootFinderState
        """

        if self.state.status.is_terminal:
            raise MullerUsageError(
                "terminated",
                f"solver already terminated with status {self.state.status}."
            )

        fdt = value_dtype(f_value)
        self.evaluations += 1
        self.min_f_seen = min(self.min_f_seen, float(abs(f_value)))

        if self._evaluation_step < 3:
            return self._initial_evaluation(f_value, fdt)

        self.fd = self._coerce(f_value)
        self.iterations += 1
        self.logger.debug(
            f"Muller iteration {self.iterations}: x = {self.xd}, "
            f"f(x) = {self.fd}"
        )

        # Termination Check
        if abs(self.fd) <= self.tolerance:
            return self._terminate(
                RootFinderStatus.CONVERGED,
                f"Converged after {self.iterations} iterations"
            )

        if self.iterations >= self.max_iter:
            return self._terminate(
                RootFinderStatus.MAX_ITERATIONS,
                f"Maximum iterations ({self.max_iter}) used without convergence"
            )

        self.xa, self.xb, self.xc = self.xb, self.xc, self.xd
        self.fa, self.fb, self.fc = self.fb, self.fc, self.fd
        return self._advance()

    @property
    def value(self) -> Any:
        """Function value at the newest iterate."""
        return self.fd

    def to_solution(self, problem: Optional[object] = None) -> MullerSolution:
        """
        Package the terminal state into a MullerSolution.

        Parameters
        ----------
        problem : NonlinearProblem, optional

        Returns
        -------
        MullerSolution
        """
        if not self.state.status.is_terminal:
            raise MullerUsageError(
                "terminated", "solver has not terminated yet."
            )

        return build_solution(problem, ALGORITHM, self.xd, self.fd,
            self.state.status,
            iterations  = self.iterations,
            evaluations = self.evaluations,
            tolerance   = self.tolerance
        )

    def _initial_evaluation(self, f_value: Any, fdt: np.dtype):
        """Record the function value at one of the three guesses."""

        self._initial_values.append((f_value, fdt))
        self._evaluation_step += 1

        if self._evaluation_step == 1:
            return self._need_evaluation(self.xb, "Need second initial evaluation")
        if self._evaluation_step == 2:
            return self._need_evaluation(self.xc, "Need third initial evaluation")

        # All guesses evaluated; settle the working type and tolerance
        self.dtype = np.result_type(self.dtype,
                                    *(d for _, d in self._initial_values))
        cast = self.dtype.type
        self.xa, self.xb, self.xc = cast(self.xa), cast(self.xb), cast(self.xc)
        self.fa, self.fb, self.fc = (cast(v) for v, _ in self._initial_values)
        self._initial_values = []

        self.tolerance = get_tolerance(self.requested_tolerance, self.dtype)
        self.logger.debug(
            f"Muller working dtype {self.dtype}, tolerance {self.tolerance:.3e}"
        )

        # Zero-iteration fallback
        self.xd, self.fd = self.xa, self.fa

        if self.max_iter == 0:
            return self._terminate(
                RootFinderStatus.MAX_ITERATIONS,
                "Iteration budget is zero; no update performed"
            )

        return self._advance()

    def _advance(self) -> RootFinderState:
        """Compute the next iterate and ask for its evaluation."""

        # Degenerate denominators are not special-cased
        with np.errstate(all = "ignore"):
            x_next = muller_step(self.xa, self.xb, self.xc,
                                 self.fa, self.fb, self.fc)

        self.xd = self._coerce(x_next)
        if not np.isfinite(self.xd):
            self.logger.debug(
                f"Non-finite iterate {self.xd} after {self.iterations} "
                "iterations"
            )

        return self._need_evaluation(
            self.xd, f"Need evaluation for iteration {self.iterations + 1}"
        )

    def _coerce(self, value: Any) -> Any:
        """
        Cast `value` to the working dtype, widening a real working dtype to
        complex if `value` is complex.
        """
        if np.iscomplexobj(value) and self.dtype.kind != "c":
            self.dtype = complex_counterpart(self.dtype)
            cast = self.dtype.type
            self.xa, self.xb, self.xc = cast(self.xa), cast(self.xb), cast(self.xc)
            self.fa, self.fb, self.fc = cast(self.fa), cast(self.fb), cast(self.fc)
            if self.xd is not None:
                self.xd = cast(self.xd)
            self.logger.debug(
                f"Complex value {value} encountered; continuing in {self.dtype}"
            )

        return self.dtype.type(value)

    def _need_evaluation(self, point: Any, message: str) -> RootFinderState:
        self.state = RootFinderState(
            status      = RootFinderStatus.NEEDS_EVALUATION,
            point       = point,
            root        = None,
            iterations  = self.iterations,
            message     = message,
            best_value  = self.min_f_seen
        )
        return self.state

    def _terminate(self, status: RootFinderStatus,
                   message: str) -> RootFinderState:
        self.state = RootFinderState(
            status      = status,
            point       = self.xd,
            root        = self.xd,
            iterations  = self.iterations,
            message     = message,
            best_value  = self.min_f_seen
        )
        self.logger.debug(f"Muller terminated: {message}")
        return self.state
