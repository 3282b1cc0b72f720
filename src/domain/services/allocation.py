"""Domain services for splitting a shared total among participants.

All arithmetic runs on integer minor units. Residual units left over by
floor division or rounding are handed out in a fixed order (creator first,
then participants in input order) so the same request always yields the
same shares and the shares always add up to the total.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal, InvalidOperation

from src.domain.constants import CREATOR_DEFAULT_SHARES
from src.domain.errors import DivisionDegenerate, InvalidAmount, InvalidSplit
from src.domain.models import (
    Allocation,
    Direction,
    Leg,
    Money,
    ParticipantId,
    ParticipantInput,
    SplitPolicy,
)
from src.domain.services.normalization import normalize_participant_id
from src.utils.decimal_utils import round_half_away_from_zero

_HUNDRED = Decimal("100")


def allocate(
    total: Money,
    policy: SplitPolicy | str,
    creator_id: ParticipantId,
    participants: Iterable[ParticipantInput] = (),
) -> Allocation:
    """Divide a total among the creator and the included participants.

    Args:
        total: Positive amount to split.
        policy: Split policy, as enum member or its name.
        creator_id: Participant who created the transaction. Always part of
            the result, even when absent from ``participants``.
        participants: Participant inputs in display order. The creator may
            appear here to supply its own value; excluded entries are
            ignored. Under AMOUNT the creator always takes the remainder,
            so a value supplied for it is not used.

    Returns:
        Allocation: Shares ordered creator first, then input order.

    Raises:
        InvalidAmount: If the total is not positive or an amount is invalid.
        InvalidSplit: If a policy-specific precondition is violated.
        DivisionDegenerate: If a share-based split has zero total shares.
    """
    total = _validate_total(total)
    policy = _resolve_policy(policy)
    creator = normalize_participant_id(creator_id)
    if creator is None:
        raise InvalidSplit("A creator is required")
    creator_value, others = _partition_participants(creator, participants)

    order = [creator] + [participant_id for participant_id, _ in others]
    values = [creator_value] + [value for _, value in others]

    if policy is SplitPolicy.EQUAL:
        units = split_equal(total.minor_units, len(order))
    elif policy is SplitPolicy.AMOUNT:
        units = _split_amount(total, values)
    elif policy is SplitPolicy.PERCENTAGE:
        units = _split_percentage(total.minor_units, values)
    else:
        units = _split_shares(total.minor_units, values)

    shares = {
        participant_id: total.with_minor_units(amount)
        for participant_id, amount in zip(order, units)
    }
    _check_invariants(total, shares)
    return Allocation(
        total=total,
        policy=policy,
        creator_id=creator,
        shares=shares,
    )


def split_equal(total_units: int, count: int) -> list[int]:
    """Split minor units into ``count`` near-equal integer parts.

    The first ``total_units % count`` parts receive one extra unit.
    """
    if count <= 0:
        raise DivisionDegenerate("Cannot split among zero participants")
    base = total_units // count
    remainder = total_units - base * count
    return [base + 1 if index < remainder else base for index in range(count)]


def build_legs(
    allocation: Allocation,
    *,
    transaction_id: str,
    category_id: str,
    date: date,
    direction: Direction = Direction.EXPENSE,
    category_name: str | None = None,
    description: str | None = None,
) -> list[Leg]:
    """Turn an allocation into leg records, skipping zero shares.

    Args:
        allocation: Result of :func:`allocate`.
        transaction_id: Identifier of the parent transaction.
        category_id: Category the legs are filed under.
        date: Transaction date carried by every leg.
        direction: Direction of every leg.
        category_name: Optional category label copied onto the legs.
        description: Optional description copied onto the legs.

    Returns:
        list[Leg]: One leg per non-zero share, in allocation order.
    """
    return [
        Leg(
            participant_id=participant_id,
            amount=share,
            direction=direction,
            category_id=category_id,
            transaction_id=transaction_id,
            date=date,
            category_name=category_name,
            description=description,
        )
        for participant_id, share in allocation.shares.items()
        if not share.is_zero
    ]


def _validate_total(total) -> Money:
    money = Money.of(total)
    if money.minor_units <= 0:
        raise InvalidAmount(f"Total must be positive, got {money}")
    return money


def _resolve_policy(policy: SplitPolicy | str) -> SplitPolicy:
    try:
        return SplitPolicy(policy)
    except ValueError as exc:
        raise InvalidSplit(f"Unknown split policy: {policy!r}") from exc


def _partition_participants(
    creator: ParticipantId,
    participants: Iterable[ParticipantInput],
):
    creator_value = None
    others: list[tuple[ParticipantId, object]] = []
    seen: set[ParticipantId] = set()
    for participant in participants:
        participant_id = normalize_participant_id(participant.participant_id)
        if participant_id is None:
            raise InvalidSplit("Participant id must not be blank")
        if participant_id in seen:
            raise InvalidSplit(f"Duplicate participant: {participant_id}")
        seen.add(participant_id)
        if participant_id == creator:
            creator_value = participant.value
            continue
        if participant.included:
            others.append((participant_id, participant.value))
    return creator_value, others


def _split_amount(total: Money, values: Sequence) -> list[int]:
    other_units = [_amount_units(value, total) for value in values[1:]]
    allocated = sum(other_units)
    if allocated > total.minor_units:
        raise InvalidSplit(
            f"Participant amounts {total.with_minor_units(allocated)} "
            f"exceed the total {total}"
        )
    return [total.minor_units - allocated] + other_units


def _amount_units(value, total: Money) -> int:
    if value is None:
        return 0
    if isinstance(value, Money):
        amount = value
    else:
        amount = Money.of(value, total.currency, total.scale)
    if amount.currency != total.currency or amount.scale != total.scale:
        raise InvalidAmount(
            f"Amount {amount} does not match the total currency {total.currency}"
        )
    if amount.is_negative:
        raise InvalidAmount(f"Participant amount is negative: {amount}")
    return amount.minor_units


def _split_percentage(total_units: int, values: Sequence) -> list[int]:
    percentages = [_percentage(value) for value in values]
    if sum(percentages) > _HUNDRED:
        raise InvalidSplit(
            f"Percentages add up to {sum(percentages)}, above 100"
        )
    units = [
        round_half_away_from_zero(Decimal(total_units) * pct / _HUNDRED)
        for pct in percentages
    ]
    residual = total_units - sum(units)
    # Rounding up several shares can leave the last one short; borrow the
    # deficit backwards from the end so no share goes negative.
    index = len(units) - 1
    while residual < 0 and index >= 0:
        taken = min(units[index], -residual)
        units[index] -= taken
        residual += taken
        index -= 1
    if residual > 0:
        units[-1] += residual
    return units


def _percentage(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise InvalidSplit(f"Invalid percentage: {value!r}")
    try:
        pct = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidSplit(f"Invalid percentage: {value!r}") from exc
    if not pct.is_finite() or pct < 0 or pct > _HUNDRED:
        raise InvalidSplit(f"Percentage must be within [0, 100], got {value}")
    return pct


def _split_shares(total_units: int, values: Sequence) -> list[int]:
    counts = [
        CREATOR_DEFAULT_SHARES if values[0] is None else _share_count(values[0])
    ] + [0 if value is None else _share_count(value) for value in values[1:]]
    total_shares = sum(counts)
    if total_shares == 0:
        raise DivisionDegenerate("Total shares must be greater than zero")
    units = [total_units * count // total_shares for count in counts]
    residual = total_units - sum(units)
    holders = [index for index, count in enumerate(counts) if count > 0]
    position = 0
    while residual > 0:
        units[holders[position % len(holders)]] += 1
        residual -= 1
        position += 1
    return units


def _share_count(value) -> int:
    if isinstance(value, bool):
        raise InvalidSplit(f"Invalid share count: {value!r}")
    if isinstance(value, int):
        count = value
    else:
        try:
            decimal_value = (
                value if isinstance(value, Decimal) else Decimal(str(value))
            )
        except InvalidOperation as exc:
            raise InvalidSplit(f"Invalid share count: {value!r}") from exc
        if (
            not decimal_value.is_finite()
            or decimal_value != decimal_value.to_integral_value()
        ):
            raise InvalidSplit(f"Share count must be an integer, got {value}")
        count = int(decimal_value)
    if count < 0:
        raise InvalidSplit(f"Share count must be non-negative, got {value}")
    return count


def _check_invariants(total: Money, shares: dict[ParticipantId, Money]) -> None:
    allocated = sum(share.minor_units for share in shares.values())
    if allocated != total.minor_units:
        raise InvalidSplit(
            f"Shares add up to {total.with_minor_units(allocated)}, "
            f"expected {total}"
        )
    negative = [pid for pid, share in shares.items() if share.is_negative]
    if negative:
        raise InvalidSplit(f"Negative shares for {', '.join(negative)}")


__all__ = ["allocate", "build_legs", "split_equal"]
