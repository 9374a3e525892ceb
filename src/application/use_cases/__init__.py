"""Application use cases package."""

from .batch_writer import BatchAccountsWriter, BatchWriteResult
from .get_accounts import AccountDTO, GetAccountsUseCase
from .sync_accounts import (
    SyncAccountsResult,
    SyncAccountsUseCase,
    SyncCycleOutcome,
    SyncStatus,
)
from .sync_orchestrator import SyncOrchestrator

__all__ = [
    "BatchAccountsWriter",
    "BatchWriteResult",
    "GetAccountsUseCase",
    "AccountDTO",
    "SyncAccountsUseCase",
    "SyncAccountsResult",
    "SyncCycleOutcome",
    "SyncStatus",
    "SyncOrchestrator",
]
