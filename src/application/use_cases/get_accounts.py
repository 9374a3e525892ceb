"""Use case to read mirrored accounts, optionally after a sync."""

from typing import List

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.use_cases.sync_orchestrator import (
    MANUAL_TRIGGER,
    SyncOrchestrator,
)
from src.domain.models.accounts import AccountDTO


class GetAccountsUseCase:
    """Fetch accounts from the local accounts store."""

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        orchestrator: SyncOrchestrator | None = None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository
        self._orchestrator = orchestrator

    def execute(self, sync: bool = False) -> List[AccountDTO]:
        """Return every stored account.

        Args:
            sync: Run a manual sync cycle before reading. The cycle is
                skipped when another one is already in progress.

        Returns:
            List[AccountDTO]: Persisted accounts.
        """
        if sync:
            if self._orchestrator is None:
                raise RuntimeError("Manual sync requires a SyncOrchestrator")
            self._orchestrator.trigger(MANUAL_TRIGGER)
        return self._repository.fetch_accounts()


__all__ = ["GetAccountsUseCase", "AccountDTO"]
