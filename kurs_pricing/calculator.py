"""Price projection table: per-row category projections and IDR conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from kurs_pricing.config import (
    IDR_ROUND,
    USD_DECIMALS,
    YEAR_MAX,
    YEAR_MIN,
    CalculatorSettings,
)
from kurs_pricing.models import CategoryFormula, PriceRow, RowOutputs, TableResult
from kurs_pricing.utils.formatting import format_idr, format_usd
from kurs_pricing.utils.logger import get_logger
from kurs_pricing.utils.rounding import round_to_decimal, round_to_nearest

LOGGER = get_logger(__name__)


class InvalidRow(ValueError):
    """A row has only one field filled in or a field that is not a valid number."""


@dataclass(frozen=True, slots=True)
class RowInput:
    price: float
    year: int


def buffered_rate(raw_rate: int | float, *, amount: int, unit: int) -> int:
    """Return the resale rate: ``raw_rate + amount`` rounded to ``unit``."""

    return int(round_to_nearest(raw_rate + amount, unit))


def years_elapsed(reference_year: int, current_year: int) -> int:
    return max(0, current_year - reference_year)


def project_price(price: float, formula: CategoryFormula, elapsed: int) -> float:
    """Grow ``price`` for ``elapsed`` years, add the markup, round to 1 decimal."""

    projected = price * (1 + formula.growth_rate) ** elapsed * (1 + formula.markup_fraction)
    return round_to_decimal(projected, USD_DECIMALS)


def to_idr(amount_usd: float, rate: int) -> int:
    return int(round_to_nearest(amount_usd * rate, IDR_ROUND))


def parse_row(row: PriceRow) -> RowInput:
    """Validate a row's text fields; raises :class:`InvalidRow`."""

    price_text = row.price.strip()
    year_text = row.year.strip()
    if not price_text or not year_text:
        raise InvalidRow("both price and year are required")
    try:
        price = float(price_text)
        year = int(year_text)
    except ValueError as exc:
        raise InvalidRow(f"not a number: {exc}") from exc
    if not math.isfinite(price) or price < 0:
        raise InvalidRow(f"price must be a non-negative number, got {price_text!r}")
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise InvalidRow(f"year must be within {YEAR_MIN}-{YEAR_MAX}, got {year}")
    return RowInput(price=price, year=year)


def calculate_row(
    row: RowInput,
    *,
    rate: int | None,
    current_year: int,
    categories: Sequence[CategoryFormula],
    include_usd: bool = True,
) -> RowOutputs:
    """Compute the formatted outputs for one validated row.

    IDR cells are filled only when ``rate`` is given and USD cells only when
    ``include_usd`` is true; everything else keeps the empty-value marker.
    """

    outputs = RowOutputs.blank([category.name for category in categories])
    elapsed = years_elapsed(row.year, current_year)
    if rate is not None:
        outputs.idr = format_idr(to_idr(row.price, rate))
    for category in categories:
        projected = project_price(row.price, category, elapsed)
        if include_usd:
            outputs.category_usd[category.name] = format_usd(projected)
        if rate is not None:
            outputs.category_idr[category.name] = format_idr(to_idr(projected, rate))
    return outputs


def calculate_table(
    rows: Sequence[PriceRow],
    *,
    rate: int | None,
    current_year: int,
    settings: CalculatorSettings,
    include_usd: bool | None = None,
) -> TableResult:
    """Run one pass over every row.

    ``rate`` is the buffered rate, or ``None`` when it is not available yet.
    In that case the partial display policy on ``settings`` decides whether
    the USD projections are still shown, unless ``include_usd`` is given.
    """

    names = [category.name for category in settings.categories]
    if include_usd is None:
        include_usd = rate is not None or settings.allow_partial_display_before_rate_load
    result = TableResult(rows=[])
    for index, row in enumerate(rows):
        if row.is_blank:
            result.rows.append(RowOutputs.blank(names))
            continue
        try:
            parsed = parse_row(row)
        except InvalidRow as exc:
            LOGGER.debug("Row %s is invalid: %s", index + 1, exc)
            result.rows.append(RowOutputs.blank(names))
            result.invalid_rows.append(index)
            result.valid = False
            continue
        result.rows.append(
            calculate_row(
                parsed,
                rate=rate,
                current_year=current_year,
                categories=settings.categories,
                include_usd=include_usd,
            )
        )
    return result


__all__ = [
    "InvalidRow",
    "RowInput",
    "buffered_rate",
    "years_elapsed",
    "project_price",
    "to_idr",
    "parse_row",
    "calculate_row",
    "calculate_table",
]
