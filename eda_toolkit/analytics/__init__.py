"""Analytical summaries and odds reports."""

from __future__ import annotations

from .lottery import jackpot_odds, lottery_odds_table
from .summary import SampleSummary, summarize_frame, summarize_sample

__all__ = [
    "SampleSummary",
    "jackpot_odds",
    "lottery_odds_table",
    "summarize_frame",
    "summarize_sample",
]
