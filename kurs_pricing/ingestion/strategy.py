"""Abstractions for pluggable rate providers."""

from __future__ import annotations

from typing import Protocol


class RateExtractor(Protocol):
    """Contract for turning a raw rate document into a rate.

    Implementations receive the document text and return the IDR per USD rate
    as an integer, raising :class:`~kurs_pricing.errors.RateNotFound` when the
    document holds no usable value.
    """

    def __call__(self, document: str) -> int:
        ...  # pragma: no cover - protocol definition


class RateProvider(Protocol):
    """Contract for fetching the current exchange rate.

    ``fetch_rate`` returns a positive rate or raises a
    :class:`~kurs_pricing.errors.RateAcquisitionError` subclass.
    """

    def fetch_rate(self) -> int | float:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateExtractor", "RateProvider"]
