"""Domain models for mirrored loan accounts."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccountRecord:
    """Canonical account built from one IDMS row during a sync cycle.

    ``external_account_id`` is the natural key used for deduplication and
    existence checks.
    """

    external_account_id: str | None
    contract_sales_price: Decimal | None = None
    account_type: str | None = None
    sales_group_person_id: str | None = None
    contract_date: date | None = None
    collateral_stock_number: str | None = None
    collateral_year_model: str | None = None
    collateral_make: str | None = None
    collateral_model: str | None = None
    borrower_first_name: str | None = None
    borrower_last_name: str | None = None


@dataclass(frozen=True)
class AccountDTO:
    """Serializable representation of a persisted account."""

    id: int
    external_account_id: str
    contract_sales_price: Decimal | None
    account_type: str | None
    sales_group_person_id: str | None
    contract_date: date | None
    collateral_stock_number: str | None
    collateral_year_model: str | None
    collateral_make: str | None
    collateral_model: str | None
    borrower_first_name: str | None
    borrower_last_name: str | None


__all__ = ["AccountRecord", "AccountDTO"]
