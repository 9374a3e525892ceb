"""Domain constants for the IDMS accounts mirror."""

CONTRACT_DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"

DEFAULT_BATCH_SIZE = 30

DEFAULT_SYNC_INTERVAL_MS = 900_000


__all__ = [
    "CONTRACT_DATE_FORMAT",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_SYNC_INTERVAL_MS",
]
