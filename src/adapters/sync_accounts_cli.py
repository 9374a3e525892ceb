"""CLI adapter to run one IDMS accounts sync cycle.

This module wires the sync pipeline to the concrete adapters and provides a
simple command-line entry point for running the job once.
"""

import sys

from src.application.use_cases.sync_orchestrator import MANUAL_TRIGGER
from src.infrastructure.container import build_sync_orchestrator


def main() -> int:
    """Run one accounts synchronization cycle.

    Returns:
        int: Process exit code, 1 when the cycle failed.
    """
    orchestrator = build_sync_orchestrator()

    outcome = orchestrator.trigger(MANUAL_TRIGGER)

    if not outcome.succeeded:
        print(f"Accounts sync {outcome.status.value}: {outcome.error}")
        return 1
    result = outcome.result
    print(
        f"Synchronized {result.inserted_count} new accounts "
        f"({result.skipped_count} already present) from IDMS."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
