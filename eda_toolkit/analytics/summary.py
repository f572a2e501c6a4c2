"""Exploratory summaries built from the descriptive statistics toolkit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from eda_toolkit.stats import (
    EmptyInputError,
    as_float_sample,
    as_sample,
    geometric_mean,
    interquartile_range,
    mode,
    quartiles,
    sample_range,
    trimean,
)
from eda_toolkit.stats.descriptive import SampleLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleSummary:
    """Structured descriptive summary of a single numeric sample."""

    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
    q1: float
    q3: float
    mode: float
    trimean: float
    geometric_mean: Optional[float]
    range: float
    interquartile_range: float

    def to_dict(self) -> Mapping[str, object]:
        return {
            "count": self.count,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
            "median": self.median,
            "q1": self.q1,
            "q3": self.q3,
            "mode": self.mode,
            "trimean": self.trimean,
            "geometric_mean": self.geometric_mean,
            "range": self.range,
            "interquartile_range": self.interquartile_range,
        }


def summarize_sample(sample: SampleLike) -> SampleSummary:
    """Compute every toolkit statistic for ``sample`` in one pass.

    ``geometric_mean`` is ``None`` when the sample holds no positive values.
    """

    values = as_sample(sample)
    observed = values.tolist()
    q1, median, q3 = quartiles(values)
    try:
        geo_mean: Optional[float] = geometric_mean(values)
    except EmptyInputError:
        geo_mean = None

    return SampleSummary(
        count=int(values.size),
        minimum=min(observed),
        maximum=max(observed),
        mean=float(np.mean(as_float_sample(values))),
        median=median,
        q1=q1,
        q3=q3,
        mode=mode(values),
        trimean=trimean(values),
        geometric_mean=geo_mean,
        range=sample_range(values),
        interquartile_range=interquartile_range(values),
    )


def summarize_frame(
    frame: pd.DataFrame, *, columns: Sequence[str] | None = None
) -> pd.DataFrame:
    """Return one summary row per numeric column of ``frame``.

    Missing values are dropped per column. Text, boolean and all-missing
    columns are skipped with a warning; they are never coerced.
    """

    if columns is None:
        selected = list(frame.columns)
    else:
        missing = [column for column in columns if column not in frame.columns]
        if missing:
            msg = f"Input frame missing columns: {sorted(missing)}"
            raise KeyError(msg)
        selected = list(columns)

    rows: Dict[str, Mapping[str, object]] = {}
    for column in selected:
        series = frame[column]
        if pd.api.types.is_bool_dtype(series) or not pd.api.types.is_numeric_dtype(series):
            logger.warning("Skipping non-numeric column %s (dtype %s)", column, series.dtype)
            continue
        observed = series.dropna()
        if observed.empty:
            logger.warning("Skipping column %s with no observed values", column)
            continue
        # Nullable extension dtypes expose the numpy dtype they wrap.
        array = observed.to_numpy(dtype=getattr(observed.dtype, "numpy_dtype", None))
        rows[column] = summarize_sample(array).to_dict()

    if not rows:
        msg = "No numeric columns with observed values to summarize"
        raise EmptyInputError(msg)

    summary = pd.DataFrame.from_dict(rows, orient="index")
    summary.index.name = "column"
    return summary


__all__ = ["SampleSummary", "summarize_frame", "summarize_sample"]
