"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import DEFAULT_CURRENCY, minor_unit_scale
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings describing the currency the ledger reports in.

    Attributes:
        currency_code: ISO code of the reporting currency.
        minor_unit_scale: Decimal places of the currency's minor unit.
    """

    currency_code: str = DEFAULT_CURRENCY
    minor_unit_scale: int = minor_unit_scale(DEFAULT_CURRENCY)

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from ``LEDGER_CURRENCY`` and
            ``LEDGER_MINOR_UNIT_SCALE``.
        """
        logger = get_app_logger()
        currency_code = cls._normalize_currency(
            os.getenv("LEDGER_CURRENCY"),
            logger=logger,
        )
        scale = cls._parse_scale(
            os.getenv("LEDGER_MINOR_UNIT_SCALE"),
            default=minor_unit_scale(currency_code),
            logger=logger,
        )
        return cls(currency_code=currency_code, minor_unit_scale=scale)

    @staticmethod
    def _normalize_currency(raw_currency: str | None, logger) -> str:
        """Normalize the configured currency code.

        Args:
            raw_currency: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            str: Upper-cased three-letter code, or the default currency.
        """
        if not raw_currency or not raw_currency.strip():
            return DEFAULT_CURRENCY
        cleaned = raw_currency.strip().upper()
        if len(cleaned) != 3 or not cleaned.isalpha():
            logger.warning(
                f"Invalid LEDGER_CURRENCY '{raw_currency}'. "
                f"Falling back to {DEFAULT_CURRENCY}."
            )
            return DEFAULT_CURRENCY
        return cleaned

    @staticmethod
    def _parse_scale(raw_scale: str | None, default: int, logger) -> int:
        """Parse the configured minor-unit scale.

        Args:
            raw_scale: Raw environment value.
            default: Scale used when the value is missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Non-negative number of decimal places.
        """
        if not raw_scale:
            return default
        try:
            scale = int(raw_scale)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_MINOR_UNIT_SCALE '{raw_scale}'. "
                f"Expected a non-negative integer."
            )
            return default
        if scale < 0:
            logger.warning(
                f"Invalid LEDGER_MINOR_UNIT_SCALE '{raw_scale}'. "
                f"Expected a non-negative integer."
            )
            return default
        return scale


__all__ = ["LedgerSettings"]
