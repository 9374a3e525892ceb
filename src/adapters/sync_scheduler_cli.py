"""CLI adapter running the accounts sync scheduler until interrupted."""

import threading

from src.infrastructure.container import build_sync_scheduler
from src.infrastructure.logging.logger import get_app_logger


def main(stop_event: threading.Event | None = None) -> None:
    """Start the sync scheduler and block until Ctrl+C or ``stop_event``.

    Args:
        stop_event: Optional event ending the wait, mainly for tests.
    """
    logger = get_app_logger()
    scheduler = build_sync_scheduler()
    event = stop_event or threading.Event()

    scheduler.start()
    try:
        event.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted; stopping sync scheduler")
    finally:
        scheduler.shutdown(wait=True)


if __name__ == "__main__":  # pragma: no cover
    main()
