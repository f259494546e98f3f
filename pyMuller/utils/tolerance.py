"""
Helpers for choosing the numeric type a solve is carried out in, and the
default absolute tolerance that goes with it.
"""

from .rootfinder import MullerUsageError
from typing import Any, Optional
import numpy as np

NUMERIC_KINDS = "iufc"

def _scalar_dtype(value: Any, name: str, not_scalar: str,
                  not_numeric: str) -> np.dtype:
    a = np.asarray(value)
    if a.ndim != 0:
        raise MullerUsageError(
            not_scalar, f"{name} must be a scalar, got shape {a.shape}."
        )
    if a.dtype.kind not in NUMERIC_KINDS:
        raise MullerUsageError(
            not_numeric, f"{name} must be numeric, got {a.dtype}."
        )
    return a.dtype

def working_dtype(*values: Any, dtype: Optional[Any] = None) -> np.dtype:
    """
    Determine the common numpy dtype shared by a set of initial guesses.

    Parameters
    ----------
    *values : scalar
        initial guesses.
    dtype : dtype-like, optional
        explicit working type. The guesses are cast to it.

    Returns
    -------
    numpy.dtype
        an inexact (floating or complex) dtype.
    """
    dtypes = [_scalar_dtype(v, f"guess {v!r}", "scalar_guesses",
                            "numeric_guesses") for v in values]

    if dtype is not None:
        dt = np.dtype(dtype)
        if dt.kind not in "fc":
            raise MullerUsageError(
                "numeric_guesses",
                f"working dtype must be floating or complex, got {dt}."
            )
        if dt.kind == "f" and any(d.kind == "c" for d in dtypes):
            raise MullerUsageError(
                "mixed_types",
                f"complex guesses cannot be cast to real dtype {dt}."
            )
        return dt

    # Real and complex guesses are not silently promoted into each other
    if len({dt.kind == "c" for dt in dtypes}) > 1:
        raise MullerUsageError(
            "mixed_types",
            f"guesses mix real and complex types ({[str(d) for d in dtypes]})"
            "; pass complex guesses or an explicit dtype."
        )

    dt = np.result_type(*dtypes)
    if dt.kind in "iu":
        dt = np.dtype(np.float64)
    return dt

def value_dtype(value: Any) -> np.dtype:
    """dtype of a function value, which must be a numeric scalar."""
    return _scalar_dtype(value, f"function value {value!r}",
                         "scalar_function", "scalar_function")

def complex_counterpart(dtype: Any) -> np.dtype:
    """complex dtype with the same precision as `dtype`."""
    return np.result_type(dtype, np.complex64)

def get_tolerance(tolerance: Optional[float], dtype: Any) -> float:
    """
    Resolve the absolute tolerance on |f|.

    Parameters
    ----------
    tolerance : float or None
        explicit tolerance. It is returned unchanged.
    dtype : dtype-like
        working type of the solve, used when no tolerance is given.

    Returns
    -------
    float
        `tolerance`, or eps ** (4/5) for the real part of `dtype`.
    """
    if tolerance is not None:
        return tolerance
    eps = np.finfo(np.dtype(dtype)).eps
    return float(eps) ** (4 / 5)
