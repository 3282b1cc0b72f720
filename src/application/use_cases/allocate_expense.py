"""Use case splitting a shared expense into per-participant legs."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.domain.errors import LedgerCoreError
from src.domain.models import (
    Allocation,
    Direction,
    Leg,
    Money,
    ParticipantInput,
    SplitPolicy,
)
from src.domain.services.allocation import allocate, build_legs
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AllocationResult:
    """Allocation together with the legs ready to be stored.

    Attributes:
        allocation: Shares keyed by participant.
        legs: One leg per non-zero share.
    """

    allocation: Allocation
    legs: list[Leg]


class AllocateExpenseUseCase:
    """Split a transaction total and derive its legs."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        total: Money,
        policy: SplitPolicy | str,
        creator_id: str,
        participants: Iterable[ParticipantInput] = (),
        *,
        transaction_id: str,
        category_id: str,
        transaction_date: date,
        direction: Direction = Direction.EXPENSE,
        category_name: str | None = None,
        description: str | None = None,
    ) -> AllocationResult:
        """Allocate the total and build the matching legs.

        Args:
            total: Positive amount to split.
            policy: Split policy name or enum member.
            creator_id: Participant who created the transaction.
            participants: Participant inputs in display order.
            transaction_id: Identifier of the parent transaction.
            category_id: Category the legs are filed under.
            transaction_date: Date carried by every leg.
            direction: Direction of every leg.
            category_name: Optional category label.
            description: Optional transaction description.

        Returns:
            AllocationResult: Allocation and derived legs.

        Raises:
            LedgerCoreError: If the split request is invalid.
        """
        try:
            allocation = allocate(total, policy, creator_id, participants)
        except LedgerCoreError as exc:
            self._logger.warning(
                f"Rejected {policy} split of {total} for transaction "
                f"{transaction_id}: {exc}"
            )
            raise
        legs = build_legs(
            allocation,
            transaction_id=transaction_id,
            category_id=category_id,
            date=transaction_date,
            direction=direction,
            category_name=category_name,
            description=description,
        )
        self._logger.info(
            f"Allocated {allocation.total} for transaction {transaction_id} "
            f"using {allocation.policy.value} across "
            f"{len(allocation.shares)} participants ({len(legs)} legs)"
        )
        return AllocationResult(allocation=allocation, legs=legs)


__all__ = ["AllocateExpenseUseCase", "AllocationResult"]
