from dataclasses import dataclass
from typing import Any, Callable, Sequence

@dataclass(frozen = True)
class NonlinearProblem:
    """
    A scalar nonlinear problem f(x, p) = 0.

    Attributes
    ----------
    f : Callable
        function of the form f(x, p) returning a scalar. It must not modify
        its arguments.
    u0 : sequence
        initial guesses.
    p : object, optional
        parameter passed through to `f` unchanged.
    inplace : bool, default=False
        whether `f` writes its result into a buffer rather than returning it.
        Muller's method only supports out-of-place problems.
    """
    f       : Callable[[Any, Any], Any]     # Function we are driving to 0
    u0      : Sequence[Any]                 # Initial guesses
    p       : Any   = None                  # Opaque parameter
    inplace : bool  = False
