"""Descriptive statistics and combinatorial odds for exploratory analyses."""

from __future__ import annotations

__version__ = "0.1.0"
