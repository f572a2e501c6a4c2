#!/usr/bin/env python3
"""CLI for summarizing a numeric sample with the EDA toolkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Union

from eda_toolkit.analytics import summarize_sample
from eda_toolkit.config import get_settings
from eda_toolkit.stats import EmptyInputError

logger = logging.getLogger(__name__)


def _parse_number(text: str) -> Union[int, float]:
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print mode, trimean, geometric mean, range and IQR for a sample."
    )
    parser.add_argument(
        "values",
        type=_parse_number,
        nargs="*",
        help="Sample values. Integers stay exact; anything else is parsed as a float.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Report name; the summary is also written to <reports_dir>/<name>.json.",
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
        summary = summarize_sample(args.values)
    except (EmptyInputError, TypeError) as exc:
        logger.error("Cannot describe sample: %s", exc)
        return 1

    payload = json.dumps(summary.to_dict(), indent=2)
    print(payload)
    if args.output:
        settings.ensure_directories()
        report_path = settings.reports_dir / f"{args.output}.json"
        report_path.write_text(payload)
        logger.info("Wrote sample summary", extra={"path": str(report_path)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
