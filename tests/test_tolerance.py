import numpy as np
import pytest

from pyMuller.utils.rootfinder import MullerUsageError
from pyMuller.utils.tolerance import (complex_counterpart, get_tolerance,
                                      value_dtype, working_dtype)


@pytest.mark.parametrize(
    "dtype", [np.float32, np.float64, np.complex64, np.complex128]
)
def test_default_tolerance_follows_machine_epsilon(dtype):
    eps = float(np.finfo(dtype).eps)
    tol = get_tolerance(None, dtype)

    assert tol == pytest.approx(eps ** 0.8)
    assert eps < tol < 1e-2


def test_default_tolerance_for_float64():
    assert get_tolerance(None, np.float64) == pytest.approx(3.0e-13, rel=0.05)


def test_explicit_tolerance_returned_verbatim():
    assert get_tolerance(1e-4, np.float32) == 1e-4
    assert get_tolerance(0.0, np.float64) == 0.0


@pytest.mark.parametrize(
    "values, expected",
    [
        ((1.0, 2.0, 3.0), np.float64),
        ((1, 2, 3), np.float64),
        ((1, 2.0, 3), np.float64),
        ((np.float32(1), np.float32(2), np.float32(3)), np.float32),
        ((1j, 2j, 3 + 0j), np.complex128),
        ((np.complex64(1j), np.complex64(2), np.complex64(3)), np.complex64),
    ],
)
def test_working_dtype_promotion(values, expected):
    assert working_dtype(*values) == np.dtype(expected)


def test_working_dtype_explicit():
    assert working_dtype(1.0, 2.0, 3j, dtype=np.complex64) == np.complex64
    assert working_dtype(1, 2, 3, dtype="float32") == np.float32


@pytest.mark.parametrize(
    "values, kwargs, precondition",
    [
        ((1.0, 2.0, 3j), {}, "mixed_types"),
        ((1.0, 2.0, 3j), {"dtype": np.float64}, "mixed_types"),
        ((1.0, [2.0, 3.0], 4.0), {}, "scalar_guesses"),
        ((1.0, "2", 3.0), {}, "numeric_guesses"),
        ((True, 2.0, 3.0), {}, "numeric_guesses"),
        ((1.0, 2.0, 3.0), {"dtype": np.int64}, "numeric_guesses"),
    ],
)
def test_working_dtype_rejects(values, kwargs, precondition):
    with pytest.raises(MullerUsageError) as e:
        working_dtype(*values, **kwargs)
    assert e.value.precondition == precondition


def test_value_dtype():
    assert value_dtype(np.float32(1.0)) == np.float32
    with pytest.raises(MullerUsageError):
        value_dtype(np.zeros(3))


def test_complex_counterpart():
    assert complex_counterpart(np.float32) == np.complex64
    assert complex_counterpart(np.float64) == np.complex128
    assert complex_counterpart(np.complex128) == np.complex128
