"""Command-line front end: fetch the BCA rate and print the price table."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from kurs_pricing import KursPricing
from kurs_pricing.config import BCA_RATE_URL, PROXY_URL, REQUEST_TIMEOUT, ROW_COUNT, CalculatorSettings
from kurs_pricing.ingestion.bca import BCARateProvider
from kurs_pricing.utils.logger import get_logger, set_level
from kurs_pricing.view import ConsoleView

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "parse_row_argument", "read_rows_csv", "main"]


def parse_row_argument(value: str) -> tuple[str, str]:
    """Split ``PRICE,YEAR`` into its two text fields (either may be empty)."""

    if "," not in value:
        raise argparse.ArgumentTypeError(f"expected PRICE,YEAR, got {value!r}")
    price, _, year = value.partition(",")
    return price.strip(), year.strip()


def read_rows_csv(path: str | Path) -> list[tuple[str, str]]:
    """Read ``price`` and ``year`` columns from a CSV file as raw text."""

    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    columns = {str(column).strip().lower(): column for column in frame.columns}
    missing = {"price", "year"} - set(columns)
    if missing:
        raise ValueError(f"{path} is missing column(s): {', '.join(sorted(missing))}")
    return [
        (str(record[columns["price"]]).strip(), str(record[columns["year"]]).strip())
        for _, record in frame.iterrows()
    ]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--row",
        dest="rows",
        action="append",
        default=[],
        type=parse_row_argument,
        metavar="PRICE,YEAR",
        help=f"Bottom price in USD and reference year; repeat for up to {ROW_COUNT} rows",
    )
    parser.add_argument(
        "--rows-csv",
        dest="rows_csv",
        help="CSV file with 'price' and 'year' columns, appended after --row values",
    )
    parser.add_argument(
        "--strict-rate",
        dest="allow_partial",
        action="store_false",
        help="Leave every output blank when the exchange rate could not be loaded",
    )
    parser.add_argument("--proxy-url", default=PROXY_URL, help="CORS proxy endpoint")
    parser.add_argument("--source-url", default=BCA_RATE_URL, help="Bank rate page URL")
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT, help="HTTP timeout in seconds"
    )
    parser.add_argument(
        "--export-csv",
        dest="export_csv",
        help="Also write the rendered table to this CSV path",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.set_defaults(allow_partial=True)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        set_level(logging.DEBUG)

    rows: list[tuple[str, str]] = list(args.rows)
    if args.rows_csv:
        rows.extend(read_rows_csv(args.rows_csv))
    if len(rows) > ROW_COUNT:
        LOGGER.error("At most %s rows are supported, got %s", ROW_COUNT, len(rows))
        return 2

    view = ConsoleView()
    app = KursPricing(
        settings=CalculatorSettings(allow_partial_display_before_rate_load=args.allow_partial),
        provider=BCARateProvider(
            source_url=args.source_url,
            proxy_url=args.proxy_url,
            timeout=args.timeout,
        ),
        view=view,
    )
    app.set_rows(rows, recalculate=False)
    loaded = app.start()
    if not loaded or (app.last_result is not None and not app.last_result.valid):
        app.calculate()
    view.show()

    if args.export_csv and view.frame is not None:
        export_path = Path(args.export_csv)
        export_path.parent.mkdir(parents=True, exist_ok=True)
        view.frame.to_csv(export_path)
        LOGGER.info("Wrote price table to %s", export_path)
    return 0 if loaded else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
