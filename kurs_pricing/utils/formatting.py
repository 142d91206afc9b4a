"""Currency formatting for USD (``en-US``) and IDR (``id-ID``) cells."""

from __future__ import annotations

import math
import re

from kurs_pricing.utils.rounding import round_half_up, round_to_decimal

__all__ = ["format_usd", "format_idr", "format_id_decimal", "format_raw_rate", "parse_idr"]

IDR_PREFIX = "Rp "
_IDR_PATTERN = re.compile(r"^(-)?\s*Rp\s*([0-9.]+)$")


def _swap_separators(text: str) -> str:
    # en-US "1,234.56" -> id-ID "1.234,56"
    return text.translate(str.maketrans({",": ".", ".": ","}))


def format_usd(amount: int | float) -> str:
    """Format ``amount`` like ``Intl.NumberFormat('en-US', USD)`` (``$1,234.50``)."""

    rounded = round_to_decimal(abs(amount), 2)
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}${rounded:,.2f}"


def format_idr(amount: int | float) -> str:
    """Format ``amount`` as whole rupiah with ``.`` grouping (``Rp 1.610.000``)."""

    whole = int(round_half_up(abs(amount)))
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{IDR_PREFIX}{_swap_separators(f'{whole:,}')}"


def format_id_decimal(amount: int | float, decimals: int = 2) -> str:
    """Format a plain number with ``id-ID`` separators (``15.623,45``)."""

    rounded = round_to_decimal(amount, decimals)
    return _swap_separators(f"{rounded:,.{decimals}f}")


def format_raw_rate(rate: int | float) -> str:
    """Render the raw bank rate, adding the two-decimal form when fractional."""

    if float(rate).is_integer():
        return format_idr(rate)
    return f"{format_idr(math.floor(rate))} ({format_id_decimal(rate, 2)})"


def parse_idr(text: str) -> int:
    """Parse a value produced by :func:`format_idr` back into an integer."""

    match = _IDR_PATTERN.match(text.strip().replace("\xa0", " "))
    if not match:
        raise ValueError(f"Not an IDR amount: {text!r}")
    sign, digits = match.groups()
    if not re.fullmatch(r"\d{1,3}(\.\d{3})*", digits):
        raise ValueError(f"Malformed IDR grouping: {text!r}")
    value = int(digits.replace(".", ""))
    return -value if sign else value
