"""Fetch the exchange rate and publish it to the state and the view."""

from __future__ import annotations

from typing import Callable

from kurs_pricing.calculator import buffered_rate
from kurs_pricing.config import RATE_FAILED_MESSAGE, CalculatorSettings
from kurs_pricing.errors import RateAcquisitionError
from kurs_pricing.ingestion.strategy import RateProvider
from kurs_pricing.models import EMPTY, RateState
from kurs_pricing.utils.formatting import format_idr, format_raw_rate
from kurs_pricing.utils.logger import get_logger
from kurs_pricing.view import Notification, PricingView

LOGGER = get_logger(__name__)


def acquire_rate(
    state: RateState,
    provider: RateProvider,
    view: PricingView,
    *,
    settings: CalculatorSettings,
    on_loaded: Callable[[], None] | None = None,
) -> bool:
    """Fetch a fresh rate into ``state``.

    Acquisition errors never escape: on failure both rate displays are reset
    to the empty-value marker, a notification is shown and ``state`` is
    cleared. ``on_loaded`` runs after a successful fetch, once ``fetching``
    has been reset. Returns whether a rate was loaded.
    """

    state.fetching = True
    try:
        raw = provider.fetch_rate()
        if raw is None or raw <= 0:
            raise RateAcquisitionError(f"Provider returned unusable rate {raw!r}")
    except RateAcquisitionError as exc:
        LOGGER.warning("Exchange rate unavailable: %s", exc)
        state.clear()
        view.render_rates(EMPTY, EMPTY)
        view.notify(Notification(RATE_FAILED_MESSAGE))
        return False
    finally:
        state.fetching = False

    state.raw_rate = raw
    state.buffered_rate = buffered_rate(
        raw, amount=settings.buffer_amount, unit=settings.buffer_round
    )
    LOGGER.info("Loaded rate %s, buffered to %s", state.raw_rate, state.buffered_rate)
    view.render_rates(format_raw_rate(state.raw_rate), format_idr(state.buffered_rate))
    if on_loaded is not None:
        on_loaded()
    return True


__all__ = ["acquire_rate"]
