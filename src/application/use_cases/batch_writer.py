"""Append-only batch writer for normalized accounts."""

from collections.abc import Sequence
from dataclasses import dataclass

from src.application.ports.accounts_sync import AccountsStorePort
from src.domain.constants import DEFAULT_BATCH_SIZE
from src.domain.models.accounts import AccountRecord
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BatchWriteResult:
    """Summary of a batch write.

    Attributes:
        processed: Number of records walked through.
        inserted: Number of records newly persisted.
        skipped: Number of records whose id was already stored.
        flushes: Number of flushes issued, including the final one.
    """

    processed: int
    inserted: int
    skipped: int
    flushes: int


class BatchAccountsWriter:
    """Insert accounts that are not stored yet, flushing in fixed batches.

    Existing accounts are never updated. A flush happens every
    ``batch_size`` positions of the input and once after the last record.
    """

    def __init__(
        self,
        store: AccountsStorePort,
        batch_size: int = DEFAULT_BATCH_SIZE,
        logger=None,
    ) -> None:
        """Initialize the writer.

        Args:
            store: Port over the durable accounts store.
            batch_size: Number of positions between two flushes.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            ValueError: If batch_size is lower than 1.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self._store = store
        self._batch_size = batch_size
        self._logger = logger or get_app_logger()

    def prepare(self) -> None:
        """Ensure the store can receive records."""
        self._store.prepare_destination()

    def save(self, records: Sequence[AccountRecord]) -> BatchWriteResult:
        """Persist every record whose external id is not stored yet.

        Args:
            records: Deduplicated records in source order.

        Returns:
            BatchWriteResult: Counts of inserted and skipped records.

        Raises:
            StorageError: If the store fails; batches flushed before the
                failure stay persisted.
        """
        inserted = 0
        skipped = 0
        flushes = 0
        try:
            for index, record in enumerate(records):
                if self._store.exists(record.external_account_id):
                    skipped += 1
                elif self._store.insert(record):
                    inserted += 1
                else:
                    self._logger.warning(
                        "Account "
                        f"{record.external_account_id} was inserted "
                        "concurrently; skipping"
                    )
                    skipped += 1

                if index > 0 and index % self._batch_size == 0:
                    self._store.flush()
                    flushes += 1
                    self._logger.debug(f"Flushed batch ending at {index}")

            self._store.flush()
            flushes += 1
        finally:
            self._store.close()

        return BatchWriteResult(
            processed=len(records),
            inserted=inserted,
            skipped=skipped,
            flushes=flushes,
        )


__all__ = ["BatchAccountsWriter", "BatchWriteResult"]
