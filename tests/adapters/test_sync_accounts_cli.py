"""Tests for the sync_accounts_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import sync_accounts_cli
from src.application.errors import AuthenticationError
from src.application.use_cases.sync_accounts import (
    SyncAccountsResult,
    SyncCycleOutcome,
)


def test_main_triggers_manual_cycle_and_prints_result(monkeypatch, capsys):
    """The CLI should trigger one manual cycle and print the summary."""
    fake_orchestrator = MagicMock()
    fake_orchestrator.trigger.return_value = SyncCycleOutcome.success(
        SyncAccountsResult(
            fetched_count=5,
            unique_count=4,
            dropped_count=1,
            inserted_count=3,
            skipped_count=1,
        )
    )
    monkeypatch.setattr(
        sync_accounts_cli,
        "build_sync_orchestrator",
        lambda: fake_orchestrator,
    )

    exit_code = sync_accounts_cli.main()

    assert exit_code == 0
    fake_orchestrator.trigger.assert_called_once_with("manual")
    captured = capsys.readouterr()
    assert "Synchronized 3 new accounts (1 already present)" in captured.out


def test_main_returns_error_code_when_cycle_fails(monkeypatch, capsys):
    """A failed cycle should be reported with a non-zero exit code."""
    fake_orchestrator = MagicMock()
    fake_orchestrator.trigger.return_value = SyncCycleOutcome.failure(
        AuthenticationError("IDMS authentication failed")
    )
    monkeypatch.setattr(
        sync_accounts_cli,
        "build_sync_orchestrator",
        lambda: fake_orchestrator,
    )

    exit_code = sync_accounts_cli.main()

    assert exit_code == 1
    captured = capsys.readouterr()
    assert "Accounts sync failed: IDMS authentication failed" in captured.out


def test_main_reports_skipped_cycle(monkeypatch, capsys):
    """A cycle skipped because another one runs is not a success."""
    fake_orchestrator = MagicMock()
    fake_orchestrator.trigger.return_value = SyncCycleOutcome.skipped()
    monkeypatch.setattr(
        sync_accounts_cli,
        "build_sync_orchestrator",
        lambda: fake_orchestrator,
    )

    assert sync_accounts_cli.main() == 1
    assert "Accounts sync skipped" in capsys.readouterr().out
