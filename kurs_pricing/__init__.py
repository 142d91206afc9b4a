"""Public interface for the kurs_pricing package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from typing import Callable, Iterable

from kurs_pricing.acquisition import acquire_rate
from kurs_pricing.calculator import calculate_table
from kurs_pricing.config import INVALID_ROWS_MESSAGE, CalculatorSettings
from kurs_pricing.errors import KursPricingError, NetworkError, RateAcquisitionError, RateNotFound
from kurs_pricing.ingestion.bca import BCARateProvider
from kurs_pricing.ingestion.strategy import RateProvider
from kurs_pricing.models import PriceRow, RateState, RowOutputs, TableResult
from kurs_pricing.view import ConsoleView, Notification, PricingView

__all__ = [
    "__version__",
    "KursPricing",
    "CalculatorSettings",
    "BCARateProvider",
    "ConsoleView",
    "KursPricingError",
    "NetworkError",
    "RateAcquisitionError",
    "RateNotFound",
    "PriceRow",
    "RateState",
    "RowOutputs",
    "TableResult",
]

try:
    __version__ = importlib_metadata.version("kurs-pricing")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

RowValue = str | int | float | None


def _as_text(value: RowValue) -> str:
    if value is None:
        return ""
    return str(value)


class KursPricing:
    """Controller that owns the rate state and the price rows.

    Rate acquisition and the table calculator both work on the state held
    here; the view only ever receives formatted values.
    """

    __slots__ = ("settings", "provider", "view", "state", "rows", "outputs", "last_result", "_clock")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        *,
        settings: CalculatorSettings | None = None,
        provider: RateProvider | None = None,
        view: PricingView | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.settings = settings or CalculatorSettings()
        self.provider: RateProvider = provider or BCARateProvider()
        self.view: PricingView = view or ConsoleView()
        self.state = RateState()
        self.rows = [PriceRow() for _ in range(self.settings.row_count)]
        self.outputs = [self._blank_outputs() for _ in self.rows]
        self.last_result: TableResult | None = None
        self._clock = clock

    def _blank_outputs(self) -> RowOutputs:
        return RowOutputs.blank([category.name for category in self.settings.categories])

    @property
    def current_year(self) -> int:
        return self._clock().year

    def start(self) -> bool:
        """Render the empty table, then fetch the rate."""

        self.view.render_rows(self.rows, self.outputs)
        return self.load_rate()

    def load_rate(self) -> bool:
        """Fetch the exchange rate; on success recompute the table."""

        return acquire_rate(
            self.state,
            self.provider,
            self.view,
            settings=self.settings,
            on_loaded=self._recalculate_after_load,
        )

    def _recalculate_after_load(self) -> None:
        # USD-only pass, shown regardless of the partial display policy.
        if self.calculate(include_idr=False, include_usd=True).valid:
            self.calculate()

    def set_row(
        self,
        index: int,
        price: RowValue = None,
        year: RowValue = None,
        *,
        recalculate: bool = True,
    ) -> TableResult | None:
        """Replace the inputs of row ``index`` (zero-based)."""

        if not 0 <= index < len(self.rows):
            raise IndexError(f"row index {index} outside 0..{len(self.rows) - 1}")
        self.rows[index] = PriceRow(price=_as_text(price), year=_as_text(year))
        if recalculate:
            return self.calculate()
        return None

    def set_rows(
        self, values: Iterable[tuple[RowValue, RowValue]], *, recalculate: bool = True
    ) -> TableResult | None:
        """Fill rows from the top; remaining rows are cleared."""

        entries = list(values)
        if len(entries) > len(self.rows):
            raise ValueError(f"at most {len(self.rows)} rows are supported, got {len(entries)}")
        self.rows = [PriceRow(price=_as_text(price), year=_as_text(year)) for price, year in entries]
        self.rows.extend(PriceRow() for _ in range(self.settings.row_count - len(entries)))
        if recalculate:
            return self.calculate()
        return None

    def calculate(
        self, *, include_idr: bool = True, include_usd: bool | None = None
    ) -> TableResult:
        """Recompute every row with the currently cached rate.

        ``include_usd`` overrides the partial display policy for this pass.
        """

        rate = self.state.buffered_rate if include_idr and self.state.rate_available else None
        result = calculate_table(
            self.rows,
            rate=rate,
            current_year=self.current_year,
            settings=self.settings,
            include_usd=include_usd,
        )
        self.last_result = result
        self.outputs = result.rows
        self.view.render_rows(self.rows, self.outputs)
        if not result.valid:
            self.view.notify(Notification(INVALID_ROWS_MESSAGE))
        return result
