"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.accounts_sync import (
    AccountsSourcePort,
    AccountsStorePort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.batch_writer import BatchAccountsWriter
from src.application.use_cases.get_accounts import GetAccountsUseCase
from src.application.use_cases.sync_accounts import SyncAccountsUseCase
from src.application.use_cases.sync_orchestrator import SyncOrchestrator
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from src.infrastructure.accounts_store import SqlAlchemyAccountsStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.idms_client import IdmsAccountsSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.scheduler import SyncScheduler
from src.infrastructure.settings import IdmsSettings, SyncSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_source() -> AccountsSourcePort:
    """Return the IDMS accounts source configured from the environment."""
    return IdmsAccountsSource(IdmsSettings.from_env(), logger=get_app_logger())


def build_accounts_store(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsStorePort:
    """Return the durable accounts store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsStore(resolved_db)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the read repository over mirrored accounts."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_sync_use_case(
    db_port: DatabaseEnginePort | None = None,
    sync_settings: SyncSettings | None = None,
) -> SyncAccountsUseCase:
    """Return the sync pipeline wired to IDMS and the accounts store."""
    settings = sync_settings or SyncSettings.from_env()
    logger = get_app_logger()
    writer = BatchAccountsWriter(
        build_accounts_store(db_port),
        batch_size=settings.batch_size,
        logger=logger,
    )
    return SyncAccountsUseCase(
        source=build_accounts_source(),
        writer=writer,
        logger=logger,
    )


def build_sync_orchestrator(
    db_port: DatabaseEnginePort | None = None,
    sync_settings: SyncSettings | None = None,
) -> SyncOrchestrator:
    """Return the single-flight orchestrator around the sync pipeline."""
    use_case = build_sync_use_case(db_port, sync_settings)
    return SyncOrchestrator(use_case.run_cycle)


def build_sync_scheduler(
    orchestrator: SyncOrchestrator | None = None,
    sync_settings: SyncSettings | None = None,
) -> SyncScheduler:
    """Return the scheduler firing the startup and interval triggers."""
    settings = sync_settings or SyncSettings.from_env()
    resolved_orchestrator = orchestrator or build_sync_orchestrator(
        sync_settings=settings
    )
    return SyncScheduler(
        resolved_orchestrator,
        interval_ms=settings.interval_ms,
        run_on_startup=settings.run_on_startup,
        logger=get_app_logger(),
    )


def build_get_accounts_use_case(
    db_port: DatabaseEnginePort | None = None,
    orchestrator: SyncOrchestrator | None = None,
) -> GetAccountsUseCase:
    """Return the read use case, able to trigger a manual sync."""
    return GetAccountsUseCase(
        build_accounts_repository(db_port),
        orchestrator=orchestrator,
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_source",
    "build_accounts_store",
    "build_accounts_repository",
    "build_sync_use_case",
    "build_sync_orchestrator",
    "build_sync_scheduler",
    "build_get_accounts_use_case",
]
