"""Domain package for business rules and core models."""

from .constants import (
    CONTRACT_DATE_FORMAT,
    DEFAULT_BATCH_SIZE,
    DEFAULT_SYNC_INTERVAL_MS,
)
from .models import AccountDTO, AccountRecord, RawAccountRow
from .services import (
    deduplicate_accounts,
    drop_missing_account_ids,
    has_account_id,
    normalize_account_row,
    normalize_account_rows,
    normalize_text,
    parse_contract_date,
    parse_price,
)

__all__ = [
    "AccountDTO",
    "AccountRecord",
    "RawAccountRow",
    "CONTRACT_DATE_FORMAT",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_SYNC_INTERVAL_MS",
    "deduplicate_accounts",
    "drop_missing_account_ids",
    "has_account_id",
    "normalize_account_row",
    "normalize_account_rows",
    "normalize_text",
    "parse_contract_date",
    "parse_price",
]
