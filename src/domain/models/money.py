"""Fixed-point money value used by every ledger computation."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.domain.constants import DEFAULT_CURRENCY, minor_unit_scale
from src.domain.errors import InvalidAmount


@dataclass(frozen=True)
class Money:
    """Amount stored as an integer count of minor currency units.

    Attributes:
        minor_units: Signed amount in the smallest currency subdivision.
        currency: ISO currency code.
        scale: Decimal places of the minor unit; derived from the currency
            when omitted.
    """

    minor_units: int
    currency: str = DEFAULT_CURRENCY
    scale: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.minor_units, bool) or not isinstance(
            self.minor_units, int
        ):
            raise InvalidAmount(
                f"Minor units must be an integer, got {self.minor_units!r}"
            )
        if self.scale is None:
            object.__setattr__(self, "scale", minor_unit_scale(self.currency))
        elif self.scale < 0:
            raise InvalidAmount(f"Scale must be non-negative, got {self.scale}")

    @classmethod
    def of(
        cls,
        value,
        currency: str = DEFAULT_CURRENCY,
        scale: int | None = None,
    ) -> "Money":
        """Build Money from a decimal amount expressed in major units.

        Args:
            value: Decimal, int, or numeric string such as ``"33.34"``.
            currency: ISO currency code.
            scale: Optional minor-unit scale override.

        Returns:
            Money: Exact representation of the amount.

        Raises:
            InvalidAmount: If the value is a float, non-finite, or has more
                decimal places than the currency's minor unit.
        """
        if isinstance(value, Money):
            return value
        if isinstance(value, float) or isinstance(value, bool):
            raise InvalidAmount(f"Unsupported amount type: {value!r}")
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidAmount(f"Invalid amount: {value!r}") from exc
        if not amount.is_finite():
            raise InvalidAmount(f"Amount must be finite, got {value!r}")
        resolved_scale = minor_unit_scale(currency) if scale is None else scale
        scaled = amount.scaleb(resolved_scale)
        if scaled != scaled.to_integral_value():
            raise InvalidAmount(
                f"Amount {amount} has more than {resolved_scale} decimal places"
            )
        return cls(int(scaled), currency, resolved_scale)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY, scale: int | None = None) -> "Money":
        """Return a zero amount in the given currency."""
        return cls(0, currency, scale)

    @property
    def amount(self) -> Decimal:
        """Return the value in major units as a quantized Decimal."""
        return Decimal(self.minor_units).scaleb(-self.scale)

    @property
    def is_zero(self) -> bool:
        return self.minor_units == 0

    @property
    def is_negative(self) -> bool:
        return self.minor_units < 0

    def with_minor_units(self, minor_units: int) -> "Money":
        """Return a value in the same currency with different minor units."""
        return Money(minor_units, self.currency, self.scale)

    def _check_compatible(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot combine Money with {type(other).__name__}")
        if other.currency != self.currency or other.scale != self.scale:
            raise InvalidAmount(
                f"Currency mismatch: {self.currency}/{self.scale} "
                f"vs {other.currency}/{other.scale}"
            )

    def __add__(self, other: "Money") -> "Money":
        self._check_compatible(other)
        return self.with_minor_units(self.minor_units + other.minor_units)

    def __sub__(self, other: "Money") -> "Money":
        self._check_compatible(other)
        return self.with_minor_units(self.minor_units - other.minor_units)

    def __neg__(self) -> "Money":
        return self.with_minor_units(-self.minor_units)

    def __lt__(self, other: "Money") -> bool:
        self._check_compatible(other)
        return self.minor_units < other.minor_units

    def __le__(self, other: "Money") -> bool:
        self._check_compatible(other)
        return self.minor_units <= other.minor_units

    def __gt__(self, other: "Money") -> bool:
        self._check_compatible(other)
        return self.minor_units > other.minor_units

    def __ge__(self, other: "Money") -> bool:
        self._check_compatible(other)
        return self.minor_units >= other.minor_units

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


def sum_money(values: Iterable[Money], start: Money) -> Money:
    """Sum Money values onto a starting amount of the same currency."""
    total = start
    for value in values:
        total = total + value
    return total


__all__ = ["Money", "sum_money"]
