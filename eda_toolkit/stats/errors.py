"""Error types raised by the statistics toolkit."""

from __future__ import annotations


class EmptyInputError(ValueError):
    """Raised when a statistic has no usable observations to work with."""


class InvalidDomainError(ValueError):
    """Raised when population or draw sizes fall outside their domain."""


__all__ = ["EmptyInputError", "InvalidDomainError"]
