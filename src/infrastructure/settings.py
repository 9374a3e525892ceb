"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_BATCH_SIZE, DEFAULT_SYNC_INTERVAL_MS


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _required_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _int_env(name: str, default: int | None = None) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        if default is None:
            raise RuntimeError(f"Missing environment variable: {name}")
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(
            f"Environment variable {name} must be an integer, got {raw!r}"
        ) from exc


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise RuntimeError(
        f"Environment variable {name} must be a boolean, got {raw!r}"
    )


@dataclass(frozen=True)
class IdmsSettings:
    """Connection settings for the IDMS API.

    Attributes:
        base_url: Root URL of the IDMS API, without trailing slash.
        username: IDMS API user.
        password: IDMS API password.
        institution_id: Institution whose accounts are mirrored.
        layout_id: Account list layout requested from IDMS.
        account_status: Account status filter passed to the list call.
        page_number: Page of the account list to request.
        timeout_seconds: Timeout applied to every HTTP request.
    """

    base_url: str
    username: str
    password: str
    institution_id: int
    layout_id: int
    account_status: str = ""
    page_number: int = 1
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> "IdmsSettings":
        """Build settings from environment variables.

        Returns:
            IdmsSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If a required variable is missing or invalid.
        """
        dotenv.load_dotenv()
        return cls(
            base_url=_required_env("IDMS_BASE_URL").rstrip("/"),
            username=_required_env("IDMS_USERNAME"),
            password=_required_env("IDMS_PASSWORD"),
            institution_id=_int_env("IDMS_INSTITUTION_ID"),
            layout_id=_int_env("IDMS_LAYOUT_ID"),
            account_status=os.getenv("IDMS_ACCOUNT_STATUS", "").strip(),
            page_number=_int_env("IDMS_PAGE_NUMBER", 1),
            timeout_seconds=float(_int_env("IDMS_TIMEOUT_SECONDS", 30)),
        )


@dataclass(frozen=True)
class SyncSettings:
    """Settings for the sync engine.

    Attributes:
        batch_size: Number of records between two store flushes.
        interval_ms: Period of the recurring sync trigger.
        run_on_startup: Whether a sync runs once when the scheduler starts.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    interval_ms: int = DEFAULT_SYNC_INTERVAL_MS
    run_on_startup: bool = True

    @classmethod
    def from_env(cls) -> "SyncSettings":
        """Build settings from environment variables.

        Returns:
            SyncSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        batch_size = _int_env("SYNC_BATCH_SIZE", DEFAULT_BATCH_SIZE)
        interval_ms = _int_env("SYNC_INTERVAL_MS", DEFAULT_SYNC_INTERVAL_MS)
        if batch_size < 1:
            raise RuntimeError("SYNC_BATCH_SIZE must be >= 1")
        if interval_ms < 1:
            raise RuntimeError("SYNC_INTERVAL_MS must be >= 1")
        return cls(
            batch_size=batch_size,
            interval_ms=interval_ms,
            run_on_startup=_bool_env("SYNC_RUN_ON_STARTUP", True),
        )


__all__ = ["IdmsSettings", "SyncSettings"]
