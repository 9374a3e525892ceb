"""Error taxonomy for the accounts sync engine."""


class SyncError(RuntimeError):
    """Base error for failures that abort a sync cycle."""


class AuthenticationError(SyncError):
    """IDMS refused or failed to issue an authorization token."""


class FetchError(SyncError):
    """IDMS account list could not be retrieved."""


class StorageError(SyncError):
    """Existence check, insert or commit failed against the store."""


__all__ = [
    "SyncError",
    "AuthenticationError",
    "FetchError",
    "StorageError",
]
