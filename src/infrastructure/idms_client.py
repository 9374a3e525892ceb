"""IDMS HTTP adapter acting as the accounts source.

Every call authenticates first, then requests the account list with the
fresh token. Nothing is cached between calls.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import requests

from src.application.errors import AuthenticationError, FetchError
from src.application.ports.accounts_sync import AccountsSourcePort
from src.domain.models.idms_rows import RawAccountRow
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import IdmsSettings


AUTHENTICATE_PATH = "/api/authenticate/GetUserAuthorizationToken"
ACCOUNT_LIST_PATH = "/api/Account/GetAccountList"
SUCCESS_STATUS_CODE = 200


class ResponseStatus(str, Enum):
    """Status of an IDMS response, whatever its wire representation."""

    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def from_raw(cls, value: Any) -> "ResponseStatus":
        """Map ``200`` or ``"200"`` to SUCCESS and anything else to FAILURE."""
        if isinstance(value, bool) or value is None:
            return cls.FAILURE
        try:
            code = int(str(value).strip())
        except ValueError:
            return cls.FAILURE
        return cls.SUCCESS if code == SUCCESS_STATUS_CODE else cls.FAILURE


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"Expected a JSON object from IDMS, got {type(payload).__name__}"
        )
    return payload


@dataclass(frozen=True)
class AuthorizationResponse:
    """Envelope of the token endpoint: ``{Status, Token, Message}``."""

    status: ResponseStatus
    token: str | None
    message: str | None

    @classmethod
    def from_payload(cls, payload: Any) -> "AuthorizationResponse":
        data = _require_mapping(payload)
        return cls(
            status=ResponseStatus.from_raw(data.get("Status")),
            token=data.get("Token") or None,
            message=data.get("Message"),
        )


@dataclass(frozen=True)
class AccountListResponse:
    """Envelope of the account list endpoint: ``{Status, Message, Data}``."""

    status: ResponseStatus
    message: str | None
    rows: list[RawAccountRow] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "AccountListResponse":
        data = _require_mapping(payload)
        wrappers = data.get("Data") or []
        if not isinstance(wrappers, list):
            raise ValueError(
                f"Expected Data to be a list, got {type(wrappers).__name__}"
            )
        rows = []
        for wrapper in wrappers:
            if not isinstance(wrapper, Mapping):
                continue
            row = wrapper.get("Row")
            if isinstance(row, Mapping):
                rows.append(RawAccountRow.from_mapping(row))
        return cls(
            status=ResponseStatus.from_raw(data.get("Status")),
            message=data.get("Message"),
            rows=rows,
        )


class IdmsAccountsSource(AccountsSourcePort):
    """Account source backed by the IDMS REST API."""

    def __init__(
        self,
        settings: IdmsSettings,
        *,
        session: Optional[requests.Session] = None,
        logger=None,
    ) -> None:
        """Initialize the source adapter.

        Args:
            settings: IDMS connection settings.
            session: Optional requests session, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def authenticate(self) -> str:
        """Request a bearer token from IDMS.

        Returns:
            str: Authorization token for the next calls.

        Raises:
            AuthenticationError: On transport failure, non-success status or
                an empty token.
        """
        params = {
            "username": self._settings.username,
            "password": self._settings.password,
            "InstitutionID": self._settings.institution_id,
        }
        try:
            payload = self._get_json(AUTHENTICATE_PATH, params)
            response = AuthorizationResponse.from_payload(payload)
        except (requests.RequestException, ValueError) as exc:
            raise AuthenticationError(
                f"Error during authentication: {exc}"
            ) from exc

        if response.status is not ResponseStatus.SUCCESS:
            raise AuthenticationError(
                "Failed to fetch token. Message: "
                f"{response.message or 'No message from IDMS'}"
            )
        if not response.token:
            raise AuthenticationError("IDMS returned an empty token")
        self._logger.debug("Obtained IDMS authorization token")
        return response.token

    def fetch_accounts(self) -> list[RawAccountRow]:
        """Return the account list published by IDMS.

        Returns:
            list[RawAccountRow]: Raw rows in IDMS order.

        Raises:
            AuthenticationError: If the token cannot be obtained.
            FetchError: On transport failure or non-success status.
        """
        token = self.authenticate()
        params = {
            "Token": token,
            "LayoutID": self._settings.layout_id,
            "AccountStatus": self._settings.account_status,
            "InstitutionID": self._settings.institution_id,
            "PageNumber": self._settings.page_number,
        }
        try:
            payload = self._get_json(ACCOUNT_LIST_PATH, params)
            response = AccountListResponse.from_payload(payload)
        except (requests.RequestException, ValueError) as exc:
            raise FetchError(
                f"Error during account list fetch: {exc}"
            ) from exc

        if response.status is not ResponseStatus.SUCCESS:
            raise FetchError(
                "Failed to fetch account list. Message: "
                f"{response.message or 'No message from IDMS'}"
            )
        return response.rows

    def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        response = self._session.get(
            f"{self._settings.base_url}{path}",
            params=params,
            timeout=self._settings.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()


__all__ = [
    "IdmsAccountsSource",
    "ResponseStatus",
    "AuthorizationResponse",
    "AccountListResponse",
    "AUTHENTICATE_PATH",
    "ACCOUNT_LIST_PATH",
]
