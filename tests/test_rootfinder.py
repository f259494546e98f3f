import pytest

from pyMuller.utils.nonlinear_problem import NonlinearProblem
from pyMuller.utils.rootfinder import (MullerSolution, MullerUsageError,
                                       RootFinderState, RootFinderStatus,
                                       build_solution)


@pytest.mark.parametrize(
    "status, terminal",
    [
        (RootFinderStatus.NEEDS_EVALUATION, False),
        (RootFinderStatus.CONVERGED, True),
        (RootFinderStatus.MAX_ITERATIONS, True),
    ],
)
def test_status_terminal(status, terminal):
    assert status.is_terminal is terminal
    assert str(status) == status.name


def test_state_str_lists_fields():
    state = RootFinderState(
        status      = RootFinderStatus.CONVERGED,
        point       = 1.5 + 0.5j,
        root        = 1.5 + 0.5j,
        iterations  = 4,
        message     = "done",
        best_value  = 1e-14
    )
    s = str(state)
    assert "CONVERGED" in s
    assert "(1.5+0.5j)" in s
    assert "1.00e-14" in s


def test_build_solution():
    prob = NonlinearProblem(lambda x, p: x, (0.0, 1.0, 2.0))
    sol = build_solution(prob, "SimpleMuller", 0.0, 0.0,
                         RootFinderStatus.CONVERGED,
                         iterations=1, evaluations=4, tolerance=1e-12)

    assert isinstance(sol, MullerSolution)
    assert sol.problem is prob
    assert sol.success
    assert sol.evaluations == 4
    assert "SimpleMuller" in str(sol)


def test_max_iterations_is_not_success():
    sol = MullerSolution(1.0, 0.5, RootFinderStatus.MAX_ITERATIONS)
    assert not sol.success


def test_usage_error_carries_precondition():
    err = MullerUsageError("distinct_guesses", "guesses collide")
    assert isinstance(err, ValueError)
    assert err.precondition == "distinct_guesses"
    assert "guesses collide" in str(err)


def test_problem_is_frozen():
    prob = NonlinearProblem(lambda x, p: x, (0.0, 1.0, 2.0))
    assert prob.p is None and not prob.inplace
    with pytest.raises(AttributeError):
        prob.p = 1.0
