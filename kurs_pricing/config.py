"""Fixed configuration for the price table and the BCA rate source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from kurs_pricing.models import EMPTY, CategoryFormula

__all__ = [
    "BCA_RATE_URL",
    "PROXY_URL",
    "REQUEST_TIMEOUT",
    "BUFFER_AMOUNT",
    "BUFFER_ROUND",
    "IDR_ROUND",
    "USD_DECIMALS",
    "ROW_COUNT",
    "YEAR_MIN",
    "YEAR_MAX",
    "EMPTY_VALUE",
    "DEFAULT_CATEGORIES",
    "INVALID_ROWS_MESSAGE",
    "RATE_FAILED_MESSAGE",
    "NOTIFY_DISPLAY_SECONDS",
    "NOTIFY_FADE_SECONDS",
    "CalculatorSettings",
]

BCA_RATE_URL: Final[str] = "https://www.bca.co.id/id/informasi/kurs"
# allorigins wraps the target page in ``{"contents": "<html>..."}``.
PROXY_URL: Final[str] = "https://api.allorigins.win/get"
REQUEST_TIMEOUT: Final[float] = 30.0

BUFFER_AMOUNT: Final[int] = 500
BUFFER_ROUND: Final[int] = 100
IDR_ROUND: Final[int] = 1000
USD_DECIMALS: Final[int] = 1

ROW_COUNT: Final[int] = 10
YEAR_MIN: Final[int] = 2000
YEAR_MAX: Final[int] = 2100

EMPTY_VALUE: Final[str] = EMPTY

DEFAULT_CATEGORIES: Final[tuple[CategoryFormula, ...]] = (
    CategoryFormula(name="spices", growth_rate=0.005, markup_fraction=0.10),
    CategoryFormula(name="seasoning", growth_rate=0.015, markup_fraction=0.20),
)

INVALID_ROWS_MESSAGE: Final[str] = "Both Bottom Price > USD and Year must be filled."
RATE_FAILED_MESSAGE: Final[str] = "Failed to fetch exchange rate."
NOTIFY_DISPLAY_SECONDS: Final[float] = 2.2
NOTIFY_FADE_SECONDS: Final[float] = 0.4


@dataclass(slots=True)
class CalculatorSettings:
    """Tunables shared by the acquisition step and the table calculator.

    ``allow_partial_display_before_rate_load`` decides what happens while no
    buffered rate is available: when true the USD columns are still filled in
    and only the IDR columns stay blank; when false every output stays blank.
    """

    allow_partial_display_before_rate_load: bool = True
    buffer_amount: int = BUFFER_AMOUNT
    buffer_round: int = BUFFER_ROUND
    row_count: int = ROW_COUNT
    categories: tuple[CategoryFormula, ...] = field(default=DEFAULT_CATEGORIES)

    def __post_init__(self) -> None:
        if self.row_count <= 0:
            raise ValueError("row_count must be positive")
        if self.buffer_round <= 0:
            raise ValueError("buffer_round must be positive")
        names = [category.name for category in self.categories]
        if len(set(names)) != len(names):
            raise ValueError("category names must be unique")
