"""
These are utility datastructures for root finding algorithms.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class RootFinderStatus(Enum):
    """
    Enum describing the condition of a root finding process

    Attributes
    ----------
    NEEDS_EVALUATION
    CONVERGED
    MAX_ITERATIONS
    """
    NEEDS_EVALUATION    = auto()
    CONVERGED           = auto()
    MAX_ITERATIONS      = auto()

    def __str__(self):
        match self:
            case RootFinderStatus.NEEDS_EVALUATION:
                return "NEEDS_EVALUATION"
            case RootFinderStatus.CONVERGED:
                return "CONVERGED"
            case RootFinderStatus.MAX_ITERATIONS:
                return "MAX_ITERATIONS"

    @property
    def is_terminal(self) -> bool:
        """Whether the process has stopped."""
        return self is not RootFinderStatus.NEEDS_EVALUATION

class MullerUsageError(ValueError):
    """
    Raised when a solver is handed an invalid problem. `precondition` names
    the check that failed.
    """
    def __init__(self, precondition: str, message: str):
        super().__init__(f"{precondition}: {message}")
        self.precondition = precondition

@dataclass
class RootFinderState:
    """
    Describes the state of a root finding process.

    Attributes
    ----------
    status : RootFinderStatus
    point : float or complex
        point where a function evaluation is needed, or the last iterate once
        the process has terminated.
    root : float, complex or None
        final iterate if terminated.
    iterations : int
        number of completed iterations.
    message : str
        descriptive status message.
    best_value : float
        best function evaluation seen (closest to zero).
    """
    status      : RootFinderStatus
    point       : Any               # Point where function evaluation is needed
    root        : Any               # Final iterate if terminated
    iterations  : int               # Number of iterations used
    message     : str               # Descriptive status message
    best_value  : float             # Best |f| seen

    def __str__(self):
        s = ""
        s += f"status       : {str(self.status)}\n"
        s += f"point        : {self.point}\n"
        s += f"root         : {self.root}\n"
        s += f"iterations   : {self.iterations}\n"
        s += f"message      : {self.message}\n"
        s += f"best_value   : {self.best_value:.2e}\n"
        return s

@dataclass
class MullerSolution:
    """
    Final result of a solve.

    Attributes
    ----------
    root : float or complex
        last iterate.
    value : float or complex
        function value at `root`.
    status : RootFinderStatus
        either CONVERGED or MAX_ITERATIONS.
    problem : NonlinearProblem, optional
    algorithm : str
    iterations : int
        number of Muller updates performed.
    evaluations : int
        number of function evaluations, initial guesses included.
    tolerance : float, optional
        absolute tolerance on |value| that was used.
    """
    root        : Any
    value       : Any
    status      : RootFinderStatus
    problem     : Optional[object]  = None
    algorithm   : str               = "SimpleMuller"
    iterations  : int               = 0
    evaluations : int               = 0
    tolerance   : Optional[float]   = None

    @property
    def success(self) -> bool:
        return self.status == RootFinderStatus.CONVERGED

    def __str__(self):
        s = ""
        s += f"algorithm    : {self.algorithm}\n"
        s += f"status       : {str(self.status)}\n"
        s += f"root         : {self.root}\n"
        s += f"value        : {self.value}\n"
        s += f"iterations   : {self.iterations}\n"
        s += f"evaluations  : {self.evaluations}\n"
        return s

def build_solution(problem: Optional[object], algorithm: str, root: Any,
                   value: Any, status: RootFinderStatus,
                   **stats) -> MullerSolution:
    """
    Package a final iterate into a MullerSolution.

    Parameters
    ----------
    problem : NonlinearProblem or None
    algorithm : str
        tag of the algorithm that produced the result.
    root : float or complex
    value : float or complex
    status : RootFinderStatus
    **stats
        `iterations`, `evaluations` and `tolerance`.

    Returns
    -------
    MullerSolution
    """
    return MullerSolution(
        root        = root,
        value       = value,
        status      = status,
        problem     = problem,
        algorithm   = algorithm,
        **stats
    )
