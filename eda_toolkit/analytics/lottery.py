"""Match-count odds for lottery draws."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
import pandas as pd

from eda_toolkit.stats import (
    InvalidDomainError,
    binomial_coefficient,
    hypergeometric_pmf,
    validate_population,
)

logger = logging.getLogger(__name__)


def _validate_draw(total: int, slots: int) -> Tuple[int, int]:
    total, slots = validate_population(total, slots)
    if slots > total:
        msg = f"Cannot draw {slots} numbers from a pool of {total}"
        raise InvalidDomainError(msg)
    return total, slots


def lottery_odds_table(total: int, slots: int) -> pd.DataFrame:
    """Return the probability of every match count from 0 to ``slots``.

    ``odds_one_in`` is the reciprocal of the probability and is ``inf`` for
    outcomes that cannot happen.
    """

    total, slots = _validate_draw(total, slots)
    matched = np.arange(slots + 1)
    probabilities = pd.Series(
        [hypergeometric_pmf(total, slots, int(count)) for count in matched], dtype="float64"
    )
    odds = pd.Series(np.inf, index=probabilities.index, dtype="float64")
    possible = probabilities > 0
    odds.loc[possible] = 1.0 / probabilities.loc[possible]

    table = pd.DataFrame(
        {"matched": matched, "probability": probabilities, "odds_one_in": odds}
    )
    logger.debug("Built lottery odds table", extra={"total": total, "slots": slots})
    return table


def jackpot_odds(total: int, slots: int) -> int:
    """Return N in the "1 in N" odds of matching every drawn number."""

    total, slots = _validate_draw(total, slots)
    return binomial_coefficient(total, slots)


__all__ = ["jackpot_odds", "lottery_odds_table"]
