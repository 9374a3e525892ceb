"""Background triggers for the accounts sync.

Wraps an APScheduler BackgroundScheduler with two jobs:
- a one-shot startup sync fired as soon as the scheduler starts;
- a fixed-rate sync every ``interval_ms`` milliseconds.

Both jobs call the same SyncOrchestrator; overlapping firings are allowed to
reach it so the single-flight guard decides which one runs.
"""

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from src.application.use_cases.sync_orchestrator import (
    INTERVAL_TRIGGER,
    STARTUP_TRIGGER,
    SyncOrchestrator,
)
from src.domain.constants import DEFAULT_SYNC_INTERVAL_MS
from src.infrastructure.logging.logger import get_app_logger


STARTUP_JOB_ID = "accounts_sync_startup"
INTERVAL_JOB_ID = "accounts_sync_interval"
WORKER_COUNT = 2
MAX_JOB_INSTANCES = 3


def build_background_scheduler() -> BackgroundScheduler:
    """Return a BackgroundScheduler backed by a small thread pool."""
    return BackgroundScheduler(
        executors={"default": ThreadPoolExecutor(max_workers=WORKER_COUNT)},
        job_defaults={
            "coalesce": False,
            "max_instances": MAX_JOB_INSTANCES,
            "misfire_grace_time": None,
        },
    )


class SyncScheduler:
    """Fire the startup and interval sync triggers."""

    def __init__(
        self,
        orchestrator: SyncOrchestrator,
        interval_ms: int = DEFAULT_SYNC_INTERVAL_MS,
        run_on_startup: bool = True,
        scheduler: BackgroundScheduler | None = None,
        logger=None,
    ) -> None:
        """Initialize the scheduler wrapper.

        Args:
            orchestrator: Single-flight entry point invoked by every job.
            interval_ms: Period of the recurring trigger, in milliseconds.
            run_on_startup: Register the one-shot startup job.
            scheduler: Optional APScheduler instance, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        if interval_ms < 1:
            raise ValueError(f"interval_ms must be >= 1, got {interval_ms}")
        self._orchestrator = orchestrator
        self._interval_ms = interval_ms
        self._run_on_startup = run_on_startup
        self._scheduler = scheduler or build_background_scheduler()
        self._logger = logger or get_app_logger()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> bool:
        """Register the sync jobs and start the scheduler.

        Returns:
            bool: False when the scheduler was already started.
        """
        if self._started:
            return False

        if self._run_on_startup:
            self._scheduler.add_job(
                self._orchestrator.trigger,
                trigger=DateTrigger(),
                args=[STARTUP_TRIGGER],
                id=STARTUP_JOB_ID,
                name="Initial accounts sync",
            )
        self._scheduler.add_job(
            self._orchestrator.trigger,
            trigger=IntervalTrigger(seconds=self._interval_ms / 1000),
            args=[INTERVAL_TRIGGER],
            id=INTERVAL_JOB_ID,
            name="Recurring accounts sync",
            max_instances=MAX_JOB_INSTANCES,
        )

        self._scheduler.start()
        self._started = True
        self._logger.info(
            f"Sync scheduler started: every {self._interval_ms} ms, "
            f"startup sync {'on' if self._run_on_startup else 'off'}"
        )
        return True

    def shutdown(self, wait: bool = True) -> None:
        """Stop the scheduler, optionally waiting for running cycles."""
        if not self._started:
            return
        self._scheduler.shutdown(wait=wait)
        self._started = False
        self._logger.info("Sync scheduler stopped")


__all__ = [
    "SyncScheduler",
    "build_background_scheduler",
    "STARTUP_JOB_ID",
    "INTERVAL_JOB_ID",
]
