"""Data models shared by the acquisition step, the calculator and the views."""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY = "-"


@dataclass(frozen=True, slots=True)
class CategoryFormula:
    """Growth rate and markup applied to project a category's price."""

    name: str
    growth_rate: float
    markup_fraction: float


@dataclass(slots=True)
class RateState:
    """Exchange rate state owned by the controller.

    ``raw_rate`` is IDR per 1 USD as read from the bank page and
    ``buffered_rate`` is the resale rate used for every conversion. Both stay
    ``None`` until a fetch succeeds.
    """

    raw_rate: int | float | None = None
    buffered_rate: int | None = None
    fetching: bool = False

    @property
    def rate_available(self) -> bool:
        return self.buffered_rate is not None and not self.fetching

    def clear(self) -> None:
        self.raw_rate = None
        self.buffered_rate = None


@dataclass(slots=True)
class PriceRow:
    """Raw user input for one table row, kept as text like a form field."""

    price: str = ""
    year: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.price.strip() and not self.year.strip()


@dataclass(slots=True)
class RowOutputs:
    """The five read-only cells of a row, already formatted for display."""

    idr: str = EMPTY
    category_usd: dict[str, str] = field(default_factory=dict)
    category_idr: dict[str, str] = field(default_factory=dict)

    @classmethod
    def blank(cls, categories: list[str] | tuple[str, ...]) -> "RowOutputs":
        return cls(
            idr=EMPTY,
            category_usd={name: EMPTY for name in categories},
            category_idr={name: EMPTY for name in categories},
        )

    @property
    def is_blank(self) -> bool:
        cells = [self.idr, *self.category_usd.values(), *self.category_idr.values()]
        return all(cell == EMPTY for cell in cells)


@dataclass(slots=True)
class TableResult:
    """Outcome of a single calculator pass."""

    rows: list[RowOutputs]
    valid: bool = True
    invalid_rows: list[int] = field(default_factory=list)


__all__ = ["EMPTY", "CategoryFormula", "RateState", "PriceRow", "RowOutputs", "TableResult"]
