"""Combinatorial probabilities for lottery-style draws."""

from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Tuple

from .errors import InvalidDomainError


def _require_integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    return int(value)


def validate_population(total: object, slots: object) -> Tuple[int, int]:
    """Return ``(total, slots)`` as ints, rejecting negative sizes."""

    total = _require_integer(total, "total")
    slots = _require_integer(slots, "slots")
    if total < 0 or slots < 0:
        msg = f"Population and draw sizes must be non-negative (total={total}, slots={slots})"
        raise InvalidDomainError(msg)
    return total, slots


def binomial_coefficient(n: int, k: int) -> int:
    """Return ``C(n, k)``, taken as 0 whenever ``k < 0`` or ``k > n``."""

    if k < 0 or k > n:
        return 0
    return math.comb(n, k)


def hypergeometric_pmf(total: int, slots: int, matched: int) -> float:
    """Probability of matching exactly ``matched`` of ``slots`` winning numbers.

    ``slots`` numbers are drawn without replacement from a pool of ``total``
    that holds ``slots`` winners::

        C(slots, matched) * C(total - slots, slots - matched) / C(total, slots)

    Out-of-range ``matched`` (or ``slots > total``) gives exactly ``0.0``.
    Only negative sizes raise :class:`InvalidDomainError`.
    """

    total, slots = validate_population(total, slots)
    matched = _require_integer(matched, "matched")

    outcomes = binomial_coefficient(total, slots)
    if outcomes == 0:
        return 0.0
    favourable = binomial_coefficient(slots, matched) * binomial_coefficient(
        total - slots, slots - matched
    )
    return float(Fraction(favourable, outcomes))


__all__ = ["binomial_coefficient", "hypergeometric_pmf", "validate_population"]
