"""Tests for the GetAccountsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_accounts import (
    AccountDTO,
    GetAccountsUseCase,
)


def _account(account_id: int, external_id: str) -> AccountDTO:
    return AccountDTO(
        id=account_id,
        external_account_id=external_id,
        contract_sales_price=Decimal("12000.00"),
        account_type="Retail",
        sales_group_person_id=None,
        contract_date=date(2024, 1, 15),
        collateral_stock_number=None,
        collateral_year_model=None,
        collateral_make=None,
        collateral_model=None,
        borrower_first_name=None,
        borrower_last_name=None,
    )


def test_execute_returns_repository_accounts_without_sync() -> None:
    """Default read path should not trigger a sync."""
    repository = MagicMock()
    repository.fetch_accounts.return_value = [_account(1, "A1")]
    orchestrator = MagicMock()

    use_case = GetAccountsUseCase(repository, orchestrator=orchestrator)

    assert use_case.execute() == [_account(1, "A1")]
    orchestrator.trigger.assert_not_called()


def test_execute_with_sync_triggers_manual_cycle_first() -> None:
    """sync=True should run a manual cycle before reading."""
    calls = []
    repository = MagicMock()
    repository.fetch_accounts.side_effect = lambda: calls.append("read") or []
    orchestrator = MagicMock()
    orchestrator.trigger.side_effect = lambda source: calls.append(source)

    use_case = GetAccountsUseCase(repository, orchestrator=orchestrator)
    use_case.execute(sync=True)

    assert calls == ["manual", "read"]


def test_execute_with_sync_requires_orchestrator() -> None:
    use_case = GetAccountsUseCase(MagicMock())

    with pytest.raises(RuntimeError):
        use_case.execute(sync=True)
