"""Tests for the BatchAccountsWriter."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from src.application.errors import StorageError
from src.application.use_cases.batch_writer import BatchAccountsWriter
from src.domain.models.accounts import AccountRecord


class RecordingStore:
    """In-memory store recording every call in order."""

    def __init__(self, existing: set[str] | None = None) -> None:
        self.committed: dict[str, AccountRecord] = {}
        self.pending: dict[str, AccountRecord] = {}
        self.existing = set(existing or ())
        self.calls: list[tuple[str, str | None]] = []
        self.flush_positions: list[int] = []
        self.closed = False
        self.fail_on: str | None = None
        self.conflicting: set[str] = set()
        self._processed = 0

    def prepare_destination(self) -> None:
        self.calls.append(("prepare", None))

    def exists(self, account_id: str) -> bool:
        self.calls.append(("exists", account_id))
        if account_id == self.fail_on:
            raise StorageError(f"boom on {account_id}")
        self._processed += 1
        return (
            account_id in self.existing
            or account_id in self.committed
            or account_id in self.pending
        )

    def insert(self, record: AccountRecord) -> bool:
        self.calls.append(("insert", record.external_account_id))
        if record.external_account_id in self.conflicting:
            return False
        self.pending[record.external_account_id] = record
        return True

    def flush(self) -> None:
        self.calls.append(("flush", None))
        self.flush_positions.append(self._processed)
        self.committed.update(self.pending)
        self.pending.clear()

    def close(self) -> None:
        self.closed = True
        self.pending.clear()


def _records(count: int) -> list[AccountRecord]:
    return [AccountRecord(f"A{i:03d}") for i in range(1, count + 1)]


def test_save_flushes_every_batch_and_at_the_end() -> None:
    """65 records with batch size 30 flush after records 31, 61 and 65."""
    store = RecordingStore()
    writer = BatchAccountsWriter(store, batch_size=30, logger=MagicMock())

    result = writer.save(_records(65))

    assert store.flush_positions == [31, 61, 65]
    assert result.flushes == 3
    assert result.inserted == 65
    assert result.skipped == 0
    assert result.processed == 65
    assert len(store.committed) == 65
    assert store.closed is True


def test_save_flush_cadence_uses_position_not_insert_count() -> None:
    """Skipped records still count towards the flush position."""
    existing = {f"A{i:03d}" for i in range(1, 31)}
    store = RecordingStore(existing=existing)
    writer = BatchAccountsWriter(store, batch_size=30, logger=MagicMock())

    result = writer.save(_records(65))

    assert store.flush_positions == [31, 61, 65]
    assert result.inserted == 35
    assert result.skipped == 30


def test_save_skips_existing_accounts_without_insert() -> None:
    """Accounts already stored are left untouched."""
    store = RecordingStore(existing={"A002"})
    writer = BatchAccountsWriter(store, batch_size=30, logger=MagicMock())

    result = writer.save(_records(3))

    assert ("insert", "A002") not in store.calls
    assert set(store.committed) == {"A001", "A003"}
    assert result.inserted == 2
    assert result.skipped == 1


def test_save_treats_unique_violation_as_skip() -> None:
    """A concurrent insert of the same id is a skip, not an error."""
    store = RecordingStore()
    store.conflicting = {"A002"}
    logger = MagicMock()
    writer = BatchAccountsWriter(store, batch_size=30, logger=logger)

    result = writer.save(_records(3))

    assert result.inserted == 2
    assert result.skipped == 1
    logger.warning.assert_called_once()


def test_save_keeps_flushed_batches_when_storage_fails() -> None:
    """A storage error aborts the call; earlier flushed batches remain."""
    store = RecordingStore()
    store.fail_on = "A040"
    writer = BatchAccountsWriter(store, batch_size=30, logger=MagicMock())

    with pytest.raises(StorageError):
        writer.save(_records(65))

    assert len(store.committed) == 31
    assert "A040" not in store.committed
    assert "A035" not in store.committed
    assert store.pending == {}
    assert store.closed is True


def test_save_with_empty_input_still_flushes_once() -> None:
    store = RecordingStore()
    writer = BatchAccountsWriter(store, batch_size=30, logger=MagicMock())

    result = writer.save([])

    assert store.flush_positions == [0]
    assert result.flushes == 1
    assert result.inserted == 0


def test_writer_rejects_non_positive_batch_size() -> None:
    with pytest.raises(ValueError):
        BatchAccountsWriter(RecordingStore(), batch_size=0, logger=MagicMock())


def test_prepare_delegates_to_store() -> None:
    store = RecordingStore()
    writer = BatchAccountsWriter(store, logger=MagicMock())

    writer.prepare()

    assert store.calls == [("prepare", None)]
