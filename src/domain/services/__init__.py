"""Domain services package."""

from .deduplication import (
    deduplicate_accounts,
    drop_missing_account_ids,
    has_account_id,
)
from .normalization import (
    normalize_account_row,
    normalize_account_rows,
    normalize_text,
    parse_contract_date,
    parse_price,
)

__all__ = [
    "deduplicate_accounts",
    "drop_missing_account_ids",
    "has_account_id",
    "normalize_account_row",
    "normalize_account_rows",
    "normalize_text",
    "parse_contract_date",
    "parse_price",
]
