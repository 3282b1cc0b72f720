"""Domain constants for allocation and budget analytics."""

from decimal import Decimal

DEFAULT_CURRENCY = "INR"
DEFAULT_MINOR_UNIT_SCALE = 2

# ISO 4217 currencies whose minor unit is not two decimal places.
CURRENCY_SCALES = {
    "JPY": 0,
    "KRW": 0,
    "BHD": 3,
    "KWD": 3,
    "OMR": 3,
}

NEAR_LIMIT_PERCENTAGE = Decimal("80")
OVER_LIMIT_PERCENTAGE = Decimal("100")

CREATOR_DEFAULT_SHARES = 1

CATEGORY_PERCENTAGE_PLACES = 2
BUDGET_PERCENTAGE_PLACES = 1
RATE_PERCENTAGE_PLACES = 2

DEFAULT_PAGE_SIZE = 50
EXPORT_ROW_LIMIT = 10000


def minor_unit_scale(currency: str) -> int:
    """Return the number of decimal places of a currency's minor unit."""
    return CURRENCY_SCALES.get(currency.upper(), DEFAULT_MINOR_UNIT_SCALE)


__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_MINOR_UNIT_SCALE",
    "CURRENCY_SCALES",
    "NEAR_LIMIT_PERCENTAGE",
    "OVER_LIMIT_PERCENTAGE",
    "CREATOR_DEFAULT_SHARES",
    "CATEGORY_PERCENTAGE_PLACES",
    "BUDGET_PERCENTAGE_PLACES",
    "RATE_PERCENTAGE_PLACES",
    "DEFAULT_PAGE_SIZE",
    "EXPORT_ROW_LIMIT",
    "minor_unit_scale",
]
