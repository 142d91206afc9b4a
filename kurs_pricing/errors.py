"""Exception hierarchy for :mod:`kurs_pricing`."""

from __future__ import annotations

__all__ = ["KursPricingError", "RateAcquisitionError", "NetworkError", "RateNotFound"]


class KursPricingError(Exception):
    """Base class for every error raised by the package."""


class RateAcquisitionError(KursPricingError):
    """Raised when the exchange rate could not be obtained."""


class NetworkError(RateAcquisitionError):
    """The rate page could not be retrieved or its envelope was malformed."""


class RateNotFound(RateAcquisitionError):
    """The page was retrieved but no parsable USD rate was found in it."""
