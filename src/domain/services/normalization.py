"""Domain normalization helpers."""

from collections.abc import Iterable


def normalize_category_filter(
    category_ids: Iterable[str] | None,
) -> frozenset[str] | None:
    """Normalize an optional category filter.

    Args:
        category_ids: Raw category identifiers from the caller. A single
            string is treated as one identifier.

    Returns:
        frozenset[str] | None: Cleaned identifiers, or None when the filter
        is absent or empty (meaning every category).
    """
    if category_ids is None:
        return None
    if isinstance(category_ids, str):
        category_ids = [category_ids]
    cleaned = frozenset(
        category_id.strip()
        for category_id in category_ids
        if category_id and category_id.strip()
    )
    return cleaned or None


def normalize_participant_id(participant_id: str | None) -> str | None:
    """Normalize a participant identifier.

    Args:
        participant_id: Raw identifier from a request.

    Returns:
        str | None: Stripped identifier, or None when blank.
    """
    if not participant_id:
        return None
    cleaned = participant_id.strip()
    return cleaned or None



def normalize_search_term(term: str | None) -> str | None:
    """Strip a free-text search term, returning None when blank."""
    if not term:
        return None
    cleaned = term.strip()
    return cleaned or None


__all__ = [
    "normalize_category_filter",
    "normalize_participant_id",
    "normalize_search_term",
]
