"""Order-insensitive summary statistics over a numeric sample.

Quartiles follow the linear interpolation rule (numpy ``method="linear"``,
R type 7): for a sorted sample of size ``n`` the quantile at probability
``p`` sits at rank ``1 + p * (n - 1)`` and is interpolated linearly between
the two bracketing order statistics. ``trimean`` and ``interquartile_range``
both read their quartiles from :func:`quartiles`.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .errors import EmptyInputError

SampleLike = Union[Sequence[float], np.ndarray, pd.Series]

NUMERIC_KINDS = {"i", "u", "f"}
QUARTILE_PROBABILITIES = (0.25, 0.5, 0.75)
INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def _holds_python_integers(items: list) -> bool:
    return bool(items) and all(
        isinstance(item, int) and not isinstance(item, bool) for item in items
    )


def _to_array(items: list) -> np.ndarray:
    if _holds_python_integers(items) and not INT64_MIN <= min(items) <= max(items) <= INT64_MAX:
        # Beyond int64 the values stay Python ints so range and mode are exact.
        return np.array(items, dtype=object)
    return np.asarray(items)


def as_sample(sample: SampleLike) -> np.ndarray:
    """Validate ``sample`` and return it as a one-dimensional numeric array.

    Values are never coerced: text, booleans and mixed object columns are
    rejected so parsing stays with whoever loaded the data. Integers too
    large for int64 come back as an object array of Python ints.
    """

    if isinstance(sample, (np.ndarray, pd.Series)):
        values = np.asarray(sample)
    else:
        values = _to_array(list(sample))
    exact_integers = values.dtype.kind == "O" and _holds_python_integers(values.tolist())
    if values.dtype.kind not in NUMERIC_KINDS and not exact_integers:
        msg = f"Sample must hold real numbers, got dtype {values.dtype}"
        raise TypeError(msg)
    if values.ndim != 1:
        msg = f"Sample must be one-dimensional, got shape {values.shape}"
        raise ValueError(msg)
    if values.size == 0:
        msg = "Cannot compute a statistic over an empty sample"
        raise EmptyInputError(msg)
    return values


def as_float_sample(sample: SampleLike) -> np.ndarray:
    """Validate ``sample`` like :func:`as_sample` and return it as floats where needed."""

    values = as_sample(sample)
    if values.dtype.kind == "O":
        return values.astype("float64")
    return values


def mode(sample: SampleLike) -> float:
    """Return the most frequent value; ties go to the value seen first."""

    counts = Counter(as_sample(sample).tolist())
    return max(counts, key=counts.__getitem__)


def quartiles(sample: SampleLike) -> Tuple[float, float, float]:
    """Return ``(Q1, Q2, Q3)`` using linear interpolation between order statistics."""

    values = as_float_sample(sample)
    q1, q2, q3 = np.quantile(values, QUARTILE_PROBABILITIES, method="linear")
    return float(q1), float(q2), float(q3)


def trimean(sample: SampleLike) -> float:
    q1, q2, q3 = quartiles(sample)
    return (q1 + 2.0 * q2 + q3) / 4.0


def geometric_mean(sample: SampleLike) -> float:
    """Return ``exp(mean(log(x)))`` over the strictly positive values.

    Zero and negative values are dropped from both the log sum and the count
    rather than raising, so ``geometric_mean([-1, -2, 4]) == 4.0``. Callers
    relying on every value contributing should filter beforehand.
    """

    values = as_float_sample(sample)
    positive = values[values > 0]
    if positive.size == 0:
        msg = "Geometric mean requires at least one strictly positive value"
        raise EmptyInputError(msg)
    return float(np.exp(np.mean(np.log(positive))))


def sample_range(sample: SampleLike) -> float:
    # Python scalars keep integer samples exact.
    values = as_sample(sample).tolist()
    return max(values) - min(values)


def interquartile_range(sample: SampleLike) -> float:
    q1, _, q3 = quartiles(sample)
    return q3 - q1


range = sample_range  # noqa: A001


__all__ = [
    "SampleLike",
    "as_float_sample",
    "as_sample",
    "geometric_mean",
    "interquartile_range",
    "mode",
    "quartiles",
    "sample_range",
    "trimean",
]
