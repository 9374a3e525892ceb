"""SQLAlchemy adapter for the durable accounts store."""

from sqlalchemy import (
    Column,
    Date,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    insert,
    select,
)
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.errors import StorageError
from src.application.ports.accounts_sync import AccountsStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import AccountRecord


metadata = MetaData()

accounts_table = Table(
    "account",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("contract_sales_price", Numeric(15, 2)),
    Column("acct_type", String(255)),
    Column("sales_group_person1_id", String(255)),
    Column("contract_date", Date),
    Column("collateral_stock_number", String(255)),
    Column("collateral_year_model", String(255)),
    Column("collateral_make", String(255)),
    Column("collateral_model", String(255)),
    Column("borrower1_first_name", String(255)),
    Column("borrower1_last_name", String(255)),
    Column("acct_id", String(255), nullable=False, unique=True),
    Index("idx_acct_id", "acct_id"),
)


def account_values(record: AccountRecord) -> dict:
    """Map an AccountRecord to ``account`` column values."""
    return {
        "contract_sales_price": record.contract_sales_price,
        "acct_type": record.account_type,
        "sales_group_person1_id": record.sales_group_person_id,
        "contract_date": record.contract_date,
        "collateral_stock_number": record.collateral_stock_number,
        "collateral_year_model": record.collateral_year_model,
        "collateral_make": record.collateral_make,
        "collateral_model": record.collateral_model,
        "borrower1_first_name": record.borrower_first_name,
        "borrower1_last_name": record.borrower_last_name,
        "acct_id": record.external_account_id,
    }


class SqlAlchemyAccountsStore(AccountsStorePort):
    """Append-only accounts store backed by SQLAlchemy Core.

    A single connection is held from the first call until ``close``.
    ``flush`` commits; ``close`` rolls back whatever was not flushed.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store adapter.

        Args:
            db_port: Port providing access to the accounts engine.
        """
        self._db_port = db_port
        self._conn: Connection | None = None

    def prepare_destination(self) -> None:
        """Create the account table and its index if they do not exist."""
        try:
            metadata.create_all(self._db_port.get_accounts_engine())
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Could not prepare account table: {exc}"
            ) from exc

    def exists(self, account_id: str) -> bool:
        """Return True when ``account_id`` is already stored.

        Raises:
            StorageError: If the lookup fails.
        """
        query = (
            select(accounts_table.c.id)
            .where(accounts_table.c.acct_id == account_id)
            .limit(1)
        )
        try:
            row = self._connection().execute(query).first()
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Existence check failed for account {account_id}: {exc}"
            ) from exc
        return row is not None

    def insert(self, record: AccountRecord) -> bool:
        """Insert a record inside a savepoint.

        Returns:
            bool: False when the unique acct_id constraint rejected the row.
        """
        conn = self._connection()
        statement = insert(accounts_table).values(**account_values(record))
        try:
            with conn.begin_nested():
                conn.execute(statement)
        except IntegrityError:
            return False
        except SQLAlchemyError as exc:
            raise StorageError(
                "Insert failed for account "
                f"{record.external_account_id}: {exc}"
            ) from exc
        return True

    def flush(self) -> None:
        """Commit the inserts made since the previous flush."""
        if self._conn is None:
            return
        try:
            self._conn.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Commit of account batch failed: {exc}") from exc

    def close(self) -> None:
        """Roll back unflushed inserts and release the connection."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.rollback()
        finally:
            conn.close()

    def _connection(self) -> Connection:
        if self._conn is None:
            try:
                self._conn = self._db_port.get_accounts_engine().connect()
            except SQLAlchemyError as exc:
                raise StorageError(
                    f"Could not connect to the accounts database: {exc}"
                ) from exc
        return self._conn


__all__ = [
    "SqlAlchemyAccountsStore",
    "accounts_table",
    "account_values",
    "metadata",
]
