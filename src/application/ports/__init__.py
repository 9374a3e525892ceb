"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .accounts_sync import AccountsSourcePort, AccountsStorePort
from .database import DatabaseEnginePort

__all__ = [
    "AccountsRepositoryPort",
    "AccountsSourcePort",
    "AccountsStorePort",
    "DatabaseEnginePort",
]
