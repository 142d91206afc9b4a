"""Rendering surface for the price table, rates and notifications."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol, Sequence, TextIO

import pandas as pd

from kurs_pricing.config import NOTIFY_DISPLAY_SECONDS, NOTIFY_FADE_SECONDS
from kurs_pricing.models import EMPTY, PriceRow, RowOutputs

PRICE_COLUMN = "Bottom Price USD"
IDR_COLUMN = "IDR"
YEAR_COLUMN = "Year"


@dataclass(frozen=True, slots=True)
class Notification:
    """A transient message: shown for ``display_seconds`` then faded out."""

    message: str
    display_seconds: float = NOTIFY_DISPLAY_SECONDS
    fade_seconds: float = NOTIFY_FADE_SECONDS


class PricingView(Protocol):
    """What the controller needs from a rendering surface."""

    def render_rows(self, rows: Sequence[PriceRow], outputs: Sequence[RowOutputs]) -> None:
        ...  # pragma: no cover - protocol definition

    def render_rates(self, raw_rate: str, buffered_rate: str) -> None:
        ...  # pragma: no cover - protocol definition

    def notify(self, notification: Notification) -> None:
        ...  # pragma: no cover - protocol definition


def table_columns(categories: Sequence[str]) -> list[str]:
    columns = [PRICE_COLUMN, IDR_COLUMN, YEAR_COLUMN]
    for name in categories:
        columns.extend([f"{name.title()} USD", f"{name.title()} IDR"])
    return columns


def build_table_frame(
    rows: Sequence[PriceRow], outputs: Sequence[RowOutputs]
) -> pd.DataFrame:
    """Lay the inputs and outputs out the way the page table shows them."""

    categories: list[str] = list(outputs[0].category_usd) if outputs else []
    records: list[list[str]] = []
    for row, cells in zip(rows, outputs):
        record = [row.price.strip() or EMPTY, cells.idr, row.year.strip() or EMPTY]
        for name in categories:
            record.extend(
                [cells.category_usd.get(name, EMPTY), cells.category_idr.get(name, EMPTY)]
            )
        records.append(record)
    frame = pd.DataFrame(records, columns=table_columns(categories))
    frame.index = pd.RangeIndex(start=1, stop=len(records) + 1, name="Row")
    return frame


class ConsoleView:
    """Print the table with pandas, rates as two lines, and notices on stderr."""

    def __init__(self, stream: TextIO | None = None, err_stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.frame: pd.DataFrame | None = None
        self.raw_rate = EMPTY
        self.buffered_rate = EMPTY

    def render_rows(self, rows: Sequence[PriceRow], outputs: Sequence[RowOutputs]) -> None:
        self.frame = build_table_frame(rows, outputs)

    def render_rates(self, raw_rate: str, buffered_rate: str) -> None:
        self.raw_rate = raw_rate
        self.buffered_rate = buffered_rate

    def notify(self, notification: Notification) -> None:
        print(f"! {notification.message}", file=self.err_stream)

    def show(self) -> None:
        """Write the current rates and table to ``stream``."""

        print(f"BCA e-Rate USD: {self.raw_rate}", file=self.stream)
        print(f"Buffered rate:  {self.buffered_rate}", file=self.stream)
        if self.frame is not None:
            print(self.frame.to_string(), file=self.stream)


__all__ = [
    "Notification",
    "PricingView",
    "ConsoleView",
    "build_table_frame",
    "table_columns",
]
