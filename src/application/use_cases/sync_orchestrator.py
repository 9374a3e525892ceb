"""Single-flight entry point shared by every sync trigger."""

import threading
from typing import Callable

from src.application.errors import SyncError
from src.application.use_cases.sync_accounts import (
    SyncCycleOutcome,
    SyncStatus,
)
from src.infrastructure.logging.logger import get_sync_logger


STARTUP_TRIGGER = "startup"
INTERVAL_TRIGGER = "interval"
MANUAL_TRIGGER = "manual"


class SyncOrchestrator:
    """Run the sync pipeline with at most one cycle in flight.

    Overlapping triggers are not queued: the late caller gets a SKIPPED
    outcome. Failures are logged and returned, never raised, and the guard
    is released on every exit path.
    """

    def __init__(
        self,
        pipeline: Callable[[], SyncCycleOutcome],
        logger=None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            pipeline: Callable running one cycle, normally
                SyncAccountsUseCase.run_cycle.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._pipeline = pipeline
        self._logger = logger or get_sync_logger()
        self._running = threading.Lock()

    @property
    def is_running(self) -> bool:
        """Return True while a cycle is executing."""
        return self._running.locked()

    def trigger(self, source: str = MANUAL_TRIGGER) -> SyncCycleOutcome:
        """Run one cycle unless another one is already in progress.

        Args:
            source: Name of the trigger, used in log messages.

        Returns:
            SyncCycleOutcome: Outcome of the cycle, SKIPPED when busy.
        """
        if not self._running.acquire(blocking=False):
            self._logger.warning(
                f"Sync already in progress; {source} trigger skipped"
            )
            return SyncCycleOutcome.skipped()

        try:
            self._logger.info(f"Starting {source} sync")
            try:
                outcome = self._pipeline()
            except Exception as exc:
                outcome = SyncCycleOutcome.failure(exc)
            self._log_outcome(source, outcome)
            return outcome
        finally:
            self._running.release()

    def _log_outcome(self, source: str, outcome: SyncCycleOutcome) -> None:
        if outcome.status is SyncStatus.SUCCEEDED and outcome.result:
            result = outcome.result
            self._logger.info(
                f"{source} sync finished: fetched={result.fetched_count} "
                f"unique={result.unique_count} "
                f"inserted={result.inserted_count} "
                f"skipped={result.skipped_count}"
            )
        elif outcome.status is SyncStatus.FAILED:
            error = outcome.error
            message = f"{source} sync failed: {type(error).__name__}: {error}"
            if isinstance(error, SyncError):
                self._logger.error(message)
            else:
                self._logger.error(message, exc_info=error)


__all__ = [
    "SyncOrchestrator",
    "STARTUP_TRIGGER",
    "INTERVAL_TRIGGER",
    "MANUAL_TRIGGER",
]
