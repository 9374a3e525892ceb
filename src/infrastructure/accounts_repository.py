"""SQLAlchemy-backed repository for mirrored accounts."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import StorageError
from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import AccountDTO
from src.infrastructure.accounts_store import accounts_table


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for mirrored accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the accounts engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[AccountDTO]:
        """Return every persisted account ordered by local id."""
        query = select(accounts_table).order_by(accounts_table.c.id)
        engine = self._db_port.get_accounts_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not read accounts: {exc}") from exc
        return [
            AccountDTO(
                id=row.id,
                external_account_id=row.acct_id,
                contract_sales_price=row.contract_sales_price,
                account_type=row.acct_type,
                sales_group_person_id=row.sales_group_person1_id,
                contract_date=row.contract_date,
                collateral_stock_number=row.collateral_stock_number,
                collateral_year_model=row.collateral_year_model,
                collateral_make=row.collateral_make,
                collateral_model=row.collateral_model,
                borrower_first_name=row.borrower1_first_name,
                borrower_last_name=row.borrower1_last_name,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyAccountsRepository"]
