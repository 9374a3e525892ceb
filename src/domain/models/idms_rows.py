"""Domain models for raw IDMS row data."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


IDMS_ROW_FIELDS = {
    "contract_sales_price": "ContractSalesPrice",
    "acct_type": "AcctType",
    "sales_group_person1_id": "SalesGroupPerson1ID",
    "contract_date": "ContractDate",
    "collateral_stock_number": "CollateralStockNumber",
    "collateral_year_model": "CollateralYearModel",
    "collateral_make": "CollateralMake",
    "collateral_model": "CollateralModel",
    "borrower1_first_name": "Borrower1FirstName",
    "borrower1_last_name": "Borrower1LastName",
    "acct_id": "AcctID",
}


@dataclass(frozen=True)
class RawAccountRow:
    """Account row exactly as returned by the IDMS account list."""

    contract_sales_price: str | None = None
    acct_type: str | None = None
    sales_group_person1_id: str | None = None
    contract_date: str | None = None
    collateral_stock_number: str | None = None
    collateral_year_model: str | None = None
    collateral_make: str | None = None
    collateral_model: str | None = None
    borrower1_first_name: str | None = None
    borrower1_last_name: str | None = None
    acct_id: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RawAccountRow":
        """Build a row from an IDMS ``Row`` object.

        Args:
            mapping: Wire object keyed by IDMS field names.

        Returns:
            RawAccountRow: Row with missing keys set to None.
        """
        values = {}
        for attribute, wire_name in IDMS_ROW_FIELDS.items():
            value = mapping.get(wire_name)
            if value is not None and not isinstance(value, str):
                value = str(value)
            values[attribute] = value
        return cls(**values)


__all__ = ["RawAccountRow", "IDMS_ROW_FIELDS"]
