#!/usr/bin/env python3
"""CLI for printing match-count odds of a lottery draw."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from eda_toolkit.analytics import jackpot_odds, lottery_odds_table
from eda_toolkit.config import get_settings
from eda_toolkit.stats import InvalidDomainError

logger = logging.getLogger(__name__)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Tabulate the probability of matching 0..K numbers in a K-from-N draw."
    )
    parser.add_argument(
        "--total",
        type=int,
        default=48,
        help="Size of the number pool. Default: 48.",
    )
    parser.add_argument(
        "--slots",
        type=int,
        default=6,
        help="Numbers drawn and numbers picked on a ticket. Default: 6.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Report name; the table is also written to <reports_dir>/<name>.csv.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity. Defaults to the configured log level.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)
    logger.debug("Resolved settings", extra=dict(settings.to_dict()))

    try:
        table = lottery_odds_table(args.total, args.slots)
        jackpot = jackpot_odds(args.total, args.slots)
    except InvalidDomainError as exc:
        logger.error("Invalid draw: %s", exc)
        return 1

    print(table.to_string(index=False))
    print(f"Jackpot odds: 1 in {jackpot:,}")
    if args.output:
        settings.ensure_directories()
        report_path = settings.reports_dir / f"{args.output}.csv"
        table.to_csv(report_path, index=False)
        logger.info("Wrote odds table", extra={"path": str(report_path)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
