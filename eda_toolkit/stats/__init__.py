"""Descriptive statistics and combinatorial probability helpers."""

from __future__ import annotations

from .descriptive import (
    as_float_sample,
    as_sample,
    geometric_mean,
    interquartile_range,
    mode,
    quartiles,
    range,
    sample_range,
    trimean,
)
from .errors import EmptyInputError, InvalidDomainError
from .probability import binomial_coefficient, hypergeometric_pmf, validate_population

# ``range`` is importable by name but left out of ``__all__`` so star imports
# keep the builtin.
__all__ = [
    "EmptyInputError",
    "InvalidDomainError",
    "as_float_sample",
    "as_sample",
    "binomial_coefficient",
    "geometric_mean",
    "hypergeometric_pmf",
    "interquartile_range",
    "mode",
    "quartiles",
    "sample_range",
    "trimean",
    "validate_population",
]
