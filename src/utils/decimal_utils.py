"""Helpers for Decimal normalization and minor-unit arithmetic."""

from decimal import ROUND_HALF_UP, Decimal

_HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_away_from_zero(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, ties away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def percentage_of(part: Decimal, whole: Decimal, places: int = 2) -> Decimal:
    """Return part / whole * 100 quantized to the given decimal places.

    Args:
        part: Numerator amount.
        whole: Denominator amount.
        places: Number of decimal places kept.

    Returns:
        Decimal: Rounded percentage, or zero when whole is zero.
    """
    exponent = Decimal(1).scaleb(-places)
    if whole == 0:
        return Decimal("0").quantize(exponent)
    return (part / whole * _HUNDRED).quantize(exponent, rounding=ROUND_HALF_UP)


def apportion_percentages(parts: list[int], places: int = 2) -> list[Decimal]:
    """Turn non-negative integer parts into percentages summing to exactly 100.

    Uses largest-remainder apportionment on units of ``10 ** -places``
    percent. Leftover units go to the largest remainders; ties go to the
    earlier part.

    Args:
        parts: Non-negative integer quantities, e.g. minor units.
        places: Number of decimal places kept.

    Returns:
        list[Decimal]: One percentage per part, or zeros when the parts sum
        to zero.
    """
    whole = sum(parts)
    if whole == 0:
        return [Decimal(0).scaleb(-places) for _ in parts]
    total_units = 100 * 10**places
    floors = [part * total_units // whole for part in parts]
    leftover = total_units - sum(floors)
    by_remainder = sorted(
        range(len(parts)),
        key=lambda index: (-(parts[index] * total_units % whole), index),
    )
    for index in by_remainder[:leftover]:
        floors[index] += 1
    return [Decimal(units).scaleb(-places) for units in floors]


__all__ = [
    "apportion_percentages",
    "coerce_decimal",
    "percentage_of",
    "round_half_away_from_zero",
]
