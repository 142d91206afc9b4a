from __future__ import annotations

import pytest

from kurs_pricing.calculator import (
    InvalidRow,
    buffered_rate,
    calculate_table,
    parse_row,
    project_price,
    to_idr,
    years_elapsed,
)
from kurs_pricing.config import DEFAULT_CATEGORIES, CalculatorSettings
from kurs_pricing.models import EMPTY, CategoryFormula, PriceRow, RowOutputs

SPICES, SEASONING = DEFAULT_CATEGORIES


def _run(*rows: tuple[str, str], rate: int | None = 16100, partial: bool = True):
    return calculate_table(
        [PriceRow(price, year) for price, year in rows],
        rate=rate,
        current_year=2024,
        settings=CalculatorSettings(allow_partial_display_before_rate_load=partial),
    )


def test_default_categories() -> None:
    assert SPICES == CategoryFormula("spices", 0.005, 0.10)
    assert SEASONING == CategoryFormula("seasoning", 0.015, 0.20)


def test_buffered_rate_adds_offset_and_rounds() -> None:
    assert buffered_rate(15623, amount=500, unit=100) == 16100
    assert buffered_rate(15623.45, amount=500, unit=100) == 16100
    assert buffered_rate(15650, amount=500, unit=100) == 16200


def test_years_elapsed_is_clamped() -> None:
    assert years_elapsed(2020, 2024) == 4
    assert years_elapsed(2024, 2024) == 0
    assert years_elapsed(2030, 2024) == 0


def test_project_price_current_year_only_applies_markup() -> None:
    assert project_price(100, SPICES, 0) == 110.0
    assert project_price(100, SEASONING, 0) == 120.0


def test_project_price_compounds_growth() -> None:
    assert project_price(100, SPICES, 2) == 111.1
    assert project_price(100, SEASONING, 2) == 123.6


def test_to_idr_rounds_to_thousands() -> None:
    assert to_idr(100, 16100) == 1_610_000
    assert to_idr(111.1, 16100) == 1_789_000


def test_valid_row_fills_all_cells() -> None:
    result = _run(("100", "2024"))

    assert result.valid is True
    row = result.rows[0]
    assert row.idr == "Rp 1.610.000"
    assert row.category_usd == {"spices": "$110.00", "seasoning": "$120.00"}
    assert row.category_idr == {"spices": "Rp 1.771.000", "seasoning": "Rp 1.932.000"}


def test_older_reference_year_projects_growth() -> None:
    row = _run(("100", "2022")).rows[0]

    assert row.idr == "Rp 1.610.000"
    assert row.category_usd == {"spices": "$111.10", "seasoning": "$123.60"}
    assert row.category_idr == {"spices": "Rp 1.789.000", "seasoning": "Rp 1.990.000"}


def test_future_reference_year_does_not_reduce_price() -> None:
    future = _run(("100", "2030")).rows[0]
    current = _run(("100", "2024")).rows[0]

    assert future == current


def test_blank_row_is_not_invalid() -> None:
    result = _run(("", ""), ("  ", " "))

    assert result.valid is True
    assert result.invalid_rows == []
    assert all(row.is_blank for row in result.rows)


@pytest.mark.parametrize(
    "price, year",
    [
        ("100", ""),
        ("", "2024"),
        ("abc", "2024"),
        ("100", "20x4"),
        ("100", "2024.5"),
        ("-1", "2024"),
        ("nan", "2024"),
        ("inf", "2024"),
        ("100", "1999"),
        ("100", "2101"),
    ],
)
def test_invalid_row_blanks_outputs_and_flags_call(price: str, year: str) -> None:
    result = _run((price, year))

    assert result.valid is False
    assert result.invalid_rows == [0]
    assert result.rows[0].is_blank


def test_invalid_row_does_not_block_other_rows() -> None:
    result = _run(("abc", "2024"), ("100", "2024"), ("", ""), ("5", ""))

    assert result.valid is False
    assert result.invalid_rows == [0, 3]
    assert result.rows[1].idr == "Rp 1.610.000"
    assert len(result.rows) == 4


def test_missing_rate_shows_usd_only_with_partial_display() -> None:
    row = _run(("100", "2024"), rate=None, partial=True).rows[0]

    assert row.category_usd == {"spices": "$110.00", "seasoning": "$120.00"}
    assert row.idr == EMPTY
    assert row.category_idr == {"spices": EMPTY, "seasoning": EMPTY}


def test_missing_rate_blanks_everything_without_partial_display() -> None:
    result = _run(("100", "2024"), ("abc", ""), rate=None, partial=False)

    assert result.rows[0].is_blank
    assert result.valid is False


def test_partial_policy_is_irrelevant_once_rate_is_known() -> None:
    assert _run(("100", "2024"), partial=False) == _run(("100", "2024"), partial=True)


def test_parse_row_accepts_padded_numbers() -> None:
    parsed = parse_row(PriceRow(" 12.5 ", " 2020 "))

    assert parsed.price == 12.5
    assert parsed.year == 2020


def test_parse_row_raises_invalid_row() -> None:
    with pytest.raises(InvalidRow):
        parse_row(PriceRow("1e400x", "2020"))


def test_settings_validation() -> None:
    with pytest.raises(ValueError):
        CalculatorSettings(row_count=0)
    with pytest.raises(ValueError):
        CalculatorSettings(categories=(SPICES, SPICES))


def test_include_usd_override_ignores_partial_policy() -> None:
    result = calculate_table(
        [PriceRow("100", "2024")],
        rate=None,
        current_year=2024,
        settings=CalculatorSettings(allow_partial_display_before_rate_load=False),
        include_usd=True,
    )

    row = result.rows[0]
    assert row.category_usd == {"spices": "$110.00", "seasoning": "$120.00"}
    assert row.idr == EMPTY


def test_include_usd_override_can_hide_usd() -> None:
    result = calculate_table(
        [PriceRow("100", "2024")],
        rate=16100,
        current_year=2024,
        settings=CalculatorSettings(),
        include_usd=False,
    )

    row = result.rows[0]
    assert row.idr == "Rp 1.610.000"
    assert row.category_usd == {"spices": EMPTY, "seasoning": EMPTY}


def test_is_blank_is_a_property_on_inputs_and_outputs() -> None:
    assert PriceRow().is_blank is True
    assert PriceRow("1", "").is_blank is False
    assert RowOutputs.blank(["spices"]).is_blank is True
    assert RowOutputs(idr="Rp 1.000", category_usd={}, category_idr={}).is_blank is False
