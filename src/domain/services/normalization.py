"""Normalization of raw IDMS rows into canonical account records."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.domain.constants import CONTRACT_DATE_FORMAT
from src.domain.models.accounts import AccountRecord
from src.domain.models.idms_rows import RawAccountRow


def normalize_text(value: str | None) -> str | None:
    """Copy a raw text field, mapping empty values to None.

    Args:
        value: Raw field value from IDMS.

    Returns:
        str | None: The value unchanged, or None when empty.
    """
    if value is None or value == "":
        return None
    return value


def parse_price(value: str | None) -> Decimal | None:
    """Parse a contract price, returning None when it is not a number.

    Args:
        value: Raw price string such as ``"12000.00"``.

    Returns:
        Decimal | None: Parsed finite amount or None.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        price = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite():
        return None
    return price


def parse_contract_date(value: str | None) -> date | None:
    """Parse an IDMS timestamp such as ``01/15/2024 12:00:00 AM``.

    Only the date part is kept.

    Args:
        value: Raw contract date string.

    Returns:
        date | None: Parsed date or None when the format does not match.
    """
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), CONTRACT_DATE_FORMAT).date()
    except ValueError:
        return None


def normalize_account_row(row: RawAccountRow) -> AccountRecord:
    """Map one raw IDMS row to an AccountRecord."""
    return AccountRecord(
        external_account_id=normalize_text(row.acct_id),
        contract_sales_price=parse_price(row.contract_sales_price),
        account_type=normalize_text(row.acct_type),
        sales_group_person_id=normalize_text(row.sales_group_person1_id),
        contract_date=parse_contract_date(row.contract_date),
        collateral_stock_number=normalize_text(row.collateral_stock_number),
        collateral_year_model=normalize_text(row.collateral_year_model),
        collateral_make=normalize_text(row.collateral_make),
        collateral_model=normalize_text(row.collateral_model),
        borrower_first_name=normalize_text(row.borrower1_first_name),
        borrower_last_name=normalize_text(row.borrower1_last_name),
    )


def normalize_account_rows(rows: Iterable[RawAccountRow]) -> list[AccountRecord]:
    """Normalize rows in input order."""
    return [normalize_account_row(row) for row in rows]


__all__ = [
    "normalize_text",
    "parse_price",
    "parse_contract_date",
    "normalize_account_row",
    "normalize_account_rows",
]
