"""Rounding helpers.

Centralised so the buffered rate, the USD projections and the IDR
conversions all share identical half-up semantics.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

__all__ = ["round_half_up", "round_to_nearest", "round_to_decimal"]


def _to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: int | float | Decimal) -> Decimal:
    """Round to the nearest integer, sending ``.5`` away from zero."""

    return _to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def round_to_nearest(value: int | float, nearest: int | float) -> int | float:
    """Round ``value`` to the closest multiple of ``nearest``.

    The result is an ``int`` when ``nearest`` is an ``int`` so IDR amounts and
    the buffered rate stay integral.
    """

    if nearest <= 0:
        raise ValueError("nearest must be positive")
    step = _to_decimal(nearest)
    result = round_half_up(_to_decimal(value) / step) * step
    if isinstance(nearest, int):
        return int(result)
    return float(result)


def round_to_decimal(value: int | float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places using half-up rounding."""

    if decimals < 0:
        raise ValueError("decimals must not be negative")
    exponent = Decimal(1).scaleb(-decimals)
    return float(_to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))
