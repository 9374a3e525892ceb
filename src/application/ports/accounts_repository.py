"""Port for reading persisted accounts."""

from typing import Protocol

from src.domain.models.accounts import AccountDTO


class AccountsRepositoryPort(Protocol):
    """Port exposing read access to mirrored accounts."""

    def fetch_accounts(self) -> list[AccountDTO]:
        """Return every persisted account."""


__all__ = ["AccountsRepositoryPort"]
