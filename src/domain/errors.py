"""Domain errors raised by the allocation and aggregation services."""


class LedgerCoreError(ValueError):
    """Base class for validation failures in the ledger core."""


class InvalidSplit(LedgerCoreError):
    """Split inputs violate a precondition of the selected policy."""


class DivisionDegenerate(InvalidSplit):
    """A share-based split has no shares to divide the total by."""


class InvalidAmount(LedgerCoreError):
    """A monetary input is negative, non-finite, or not representable."""


class InvalidWindow(LedgerCoreError):
    """A date window starts after it ends."""


class InvalidPage(LedgerCoreError):
    """A listing limit is not positive or its offset is negative."""


__all__ = [
    "LedgerCoreError",
    "InvalidSplit",
    "DivisionDegenerate",
    "InvalidAmount",
    "InvalidWindow",
    "InvalidPage",
]
