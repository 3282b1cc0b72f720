"""Domain models for splitting a shared amount among participants."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.domain.models.money import Money

ParticipantId = str


class SplitPolicy(str, Enum):
    """Rule governing how a total is divided among participants."""

    EQUAL = "EQUAL"
    AMOUNT = "AMOUNT"
    PERCENTAGE = "PERCENTAGE"
    SHARES = "SHARES"


@dataclass(frozen=True)
class ParticipantInput:
    """Participant entry of an allocation request.

    Attributes:
        participant_id: User reference of the participant.
        value: Explicit amount, percentage, or share count depending on
            the policy. ``None`` means unspecified.
        included: Whether the participant takes part in the split.
    """

    participant_id: ParticipantId
    value: Money | Decimal | int | str | None = None
    included: bool = True


@dataclass(frozen=True)
class Allocation:
    """Per-participant shares of a total.

    ``shares`` is ordered creator first, then included participants in
    input order.
    """

    total: Money
    policy: SplitPolicy
    creator_id: ParticipantId
    shares: dict[ParticipantId, Money] = field(default_factory=dict)

    @property
    def participant_ids(self) -> list[ParticipantId]:
        return list(self.shares)

    def share_for(self, participant_id: ParticipantId) -> Money:
        """Return the share assigned to a participant."""
        return self.shares[participant_id]

    @property
    def allocated_total(self) -> Money:
        """Return the sum of every share."""
        total = Money.zero(self.total.currency, self.total.scale)
        for share in self.shares.values():
            total = total + share
        return total


__all__ = ["Allocation", "ParticipantId", "ParticipantInput", "SplitPolicy"]
