"""Ports for synchronizing IDMS accounts into local storage."""

from typing import Protocol

from src.domain.models.accounts import AccountRecord
from src.domain.models.idms_rows import RawAccountRow


class AccountsSourcePort(Protocol):
    """Port exposing read access to the external account list."""

    def fetch_accounts(self) -> list[RawAccountRow]:
        """Return every raw account row currently published by the source."""


class AccountsStorePort(Protocol):
    """Narrow write interface over the durable accounts store.

    Implementations raise StorageError when the store fails.
    """

    def prepare_destination(self) -> None:
        """Ensure the destination table exists."""

    def exists(self, account_id: str) -> bool:
        """Return True when an account with this external id is stored."""

    def insert(self, record: AccountRecord) -> bool:
        """Insert a record; return False when the unique key already exists."""

    def flush(self) -> None:
        """Make pending inserts durable."""

    def close(self) -> None:
        """Discard pending work and release resources."""


__all__ = [
    "AccountsSourcePort",
    "AccountsStorePort",
]
