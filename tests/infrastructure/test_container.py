"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.sync_accounts import SyncAccountsUseCase
from src.application.use_cases.sync_orchestrator import SyncOrchestrator
from src.infrastructure import container
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from src.infrastructure.accounts_store import SqlAlchemyAccountsStore
from src.infrastructure.idms_client import IdmsAccountsSource
from src.infrastructure.scheduler import SyncScheduler
from src.infrastructure.settings import IdmsSettings, SyncSettings


def _patch_settings(monkeypatch) -> None:
    monkeypatch.setattr(
        container.IdmsSettings,
        "from_env",
        classmethod(
            lambda cls: IdmsSettings(
                base_url="https://idms.example.com",
                username="svc",
                password="secret",
                institution_id=1,
                layout_id=2,
            )
        ),
    )
    monkeypatch.setattr(
        container.SyncSettings,
        "from_env",
        classmethod(lambda cls: SyncSettings(batch_size=10, interval_ms=1000)),
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())


def test_builders_return_concrete_adapters(monkeypatch) -> None:
    _patch_settings(monkeypatch)
    db_port = MagicMock()

    assert isinstance(container.build_accounts_source(), IdmsAccountsSource)
    assert isinstance(
        container.build_accounts_store(db_port), SqlAlchemyAccountsStore
    )
    assert isinstance(
        container.build_accounts_repository(db_port),
        SqlAlchemyAccountsRepository,
    )
    assert isinstance(
        container.build_sync_use_case(db_port), SyncAccountsUseCase
    )


def test_build_sync_scheduler_wires_orchestrator(monkeypatch) -> None:
    _patch_settings(monkeypatch)
    orchestrator = SyncOrchestrator(MagicMock(), logger=MagicMock())

    scheduler = container.build_sync_scheduler(orchestrator=orchestrator)

    assert isinstance(scheduler, SyncScheduler)
    assert scheduler.started is False


def test_build_get_accounts_use_case_reads_repository(monkeypatch) -> None:
    repository = MagicMock()
    repository.fetch_accounts.return_value = []
    monkeypatch.setattr(
        container, "build_accounts_repository", lambda db_port=None: repository
    )

    use_case = container.build_get_accounts_use_case()

    assert use_case.execute() == []
    repository.fetch_accounts.assert_called_once()
