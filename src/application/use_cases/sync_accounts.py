"""Use case for mirroring IDMS accounts into the local accounts store.

One sync cycle:

* authenticates against IDMS and fetches the full account list;
* normalizes raw rows into canonical account records;
* drops rows without an account id and keeps the first row per id;
* appends accounts that are not stored yet, in fixed-size batches.
"""

from dataclasses import dataclass
from enum import Enum

from src.application.ports.accounts_sync import AccountsSourcePort
from src.application.use_cases.batch_writer import BatchAccountsWriter
from src.domain.services.deduplication import (
    deduplicate_accounts,
    drop_missing_account_ids,
)
from src.domain.services.normalization import normalize_account_rows
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SyncAccountsResult:
    """Result of a sync_accounts run.

    Attributes:
        fetched_count: Number of rows returned by IDMS.
        unique_count: Number of records left after id checks and dedup.
        dropped_count: Number of rows discarded for a missing account id.
        inserted_count: Number of accounts newly persisted.
        skipped_count: Number of accounts already present in storage.
    """

    fetched_count: int
    unique_count: int
    dropped_count: int
    inserted_count: int
    skipped_count: int


class SyncStatus(str, Enum):
    """Final status of a sync cycle."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SyncCycleOutcome:
    """Result-type wrapper returned instead of raising."""

    status: SyncStatus
    result: SyncAccountsResult | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        """Return True when the cycle completed without error."""
        return self.status is SyncStatus.SUCCEEDED

    @classmethod
    def success(cls, result: SyncAccountsResult) -> "SyncCycleOutcome":
        """Build the outcome of a completed cycle."""
        return cls(status=SyncStatus.SUCCEEDED, result=result)

    @classmethod
    def failure(cls, error: Exception) -> "SyncCycleOutcome":
        """Build the outcome of a cycle aborted by ``error``."""
        return cls(status=SyncStatus.FAILED, error=error)

    @classmethod
    def skipped(cls) -> "SyncCycleOutcome":
        """Build the outcome of a trigger that found a cycle running."""
        return cls(status=SyncStatus.SKIPPED)


class SyncAccountsUseCase:
    """Synchronize IDMS accounts into the local accounts store.

    The use case depends only on ports, so the IDMS client and the database
    can be swapped for fakes in tests.
    """

    def __init__(
        self,
        source: AccountsSourcePort,
        writer: BatchAccountsWriter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            source: Port returning raw IDMS account rows.
            writer: Batch writer persisting new accounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._source = source
        self._writer = writer
        self._logger = logger or get_app_logger()

    def run(self) -> SyncAccountsResult:
        """Execute one sync cycle.

        Returns:
            SyncAccountsResult: Summary of how many rows were processed.

        Raises:
            SyncError: If authentication, fetch or storage fails.
        """
        rows = self._source.fetch_accounts()
        self._logger.info(f"Fetched {len(rows)} accounts from IDMS")

        records = normalize_account_rows(rows)
        records, dropped_count = drop_missing_account_ids(records)
        if dropped_count:
            self._logger.warning(
                f"Dropped {dropped_count} accounts without an AcctID"
            )
        unique_records = deduplicate_accounts(records)
        duplicate_count = len(records) - len(unique_records)
        if duplicate_count:
            self._logger.info(
                f"Removed {duplicate_count} duplicate accounts by AcctID"
            )

        self._writer.prepare()
        write_result = self._writer.save(unique_records)
        self._logger.info(
            f"Inserted {write_result.inserted} new accounts, "
            f"skipped {write_result.skipped} existing"
        )

        return SyncAccountsResult(
            fetched_count=len(rows),
            unique_count=len(unique_records),
            dropped_count=dropped_count,
            inserted_count=write_result.inserted,
            skipped_count=write_result.skipped,
        )

    def run_cycle(self) -> SyncCycleOutcome:
        """Execute one sync cycle without raising.

        Returns:
            SyncCycleOutcome: Success with the result, or failure with the
            error that aborted the cycle.
        """
        try:
            return SyncCycleOutcome.success(self.run())
        except Exception as exc:
            return SyncCycleOutcome.failure(exc)


__all__ = [
    "SyncAccountsUseCase",
    "SyncAccountsResult",
    "SyncCycleOutcome",
    "SyncStatus",
]
