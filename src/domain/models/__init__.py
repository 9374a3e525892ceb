"""Domain models package."""

from .accounts import AccountDTO, AccountRecord
from .idms_rows import RawAccountRow

__all__ = [
    "AccountDTO",
    "AccountRecord",
    "RawAccountRow",
]
