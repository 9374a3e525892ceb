"""Deduplication helpers for account records."""

from collections.abc import Iterable

from src.domain.models.accounts import AccountRecord


def has_account_id(record: AccountRecord) -> bool:
    """Return True when the record carries a usable external id."""
    return bool(record.external_account_id)


def drop_missing_account_ids(
    records: Iterable[AccountRecord],
) -> tuple[list[AccountRecord], int]:
    """Remove records without an external account id.

    Args:
        records: Normalized records in source order.

    Returns:
        tuple[list[AccountRecord], int]: Kept records and the dropped count.
    """
    kept = []
    dropped = 0
    for record in records:
        if has_account_id(record):
            kept.append(record)
        else:
            dropped += 1
    return kept, dropped


def deduplicate_accounts(
    records: Iterable[AccountRecord],
) -> list[AccountRecord]:
    """Keep the first record seen for each external account id.

    Relative order of first occurrences is preserved.

    Args:
        records: Normalized records in source order.

    Returns:
        list[AccountRecord]: Records with unique external ids.
    """
    seen: set[str | None] = set()
    unique = []
    for record in records:
        key = record.external_account_id or None
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


__all__ = [
    "has_account_id",
    "drop_missing_account_ids",
    "deduplicate_accounts",
]
