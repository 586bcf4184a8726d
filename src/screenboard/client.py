"""Client for Datadog's screenboard API.

Wraps the v1 `screen` endpoints: create, update, delete and fetch a
screenboard, and look up its public sharing URL. Both the application key
and the API key are obtained from the Datadog site and are sent as query
parameters on every request.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from src.common.config import DEFAULT_SCREENBOARD_URL, DEFAULT_TIMEOUT_SEC, ScreenboardSettings
from src.common.logging import log_api_call, log_error

from .models import Board, ScreenboardResponse, ScreenboardUrlResponse

# Handlers are left to the application; see src.common.logging.get_logger.
logger = logging.getLogger(__name__)

_JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ScreenboardError(Exception):
    """Base class for screenboard client errors."""


class InvalidArgumentError(ScreenboardError, ValueError):
    """Raised when a required argument is None."""


class RemoteRejectionError(ScreenboardError):
    """Raised when Datadog answers with a non-empty `errors` list."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Datadog API errors: {self.errors}")


class BoardNotFoundError(ScreenboardError):
    """Raised when no screenboard exists for the requested id."""

    def __init__(self, board_id: int):
        self.board_id = board_id
        super().__init__(f"Unable to find Screenboard for id {board_id}")


def _check_not_none(value: Any, message: str) -> Any:
    if value is None:
        raise InvalidArgumentError(message)
    return value


def _without_query(url: str) -> str:
    return urlunsplit(urlsplit(url)._replace(query="", fragment=""))


def _error_envelope(response: requests.Response) -> Optional[Dict[str, Any]]:
    """Return the decoded body if it is an envelope carrying errors."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and payload.get("errors"):
        return payload
    return None


class ScreenboardClient:
    """Client for creating and managing Datadog screenboards.

    The HTTP session is created at construction unless one is injected, so
    the client carries no lazily initialized state. Sharing one client
    across threads is only safe while nobody reassigns `api_url` or
    `session`.

    Attributes:
        timeout: Seconds to wait on each request before `requests` gives up.
    """

    def __init__(
        self,
        application_key: str,
        api_key: str,
        *,
        api_url: str = DEFAULT_SCREENBOARD_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
    ):
        """Initialize the client.

        Args:
            application_key: Datadog application key.
            api_key: Datadog API key.
            api_url: Base URL of the screen endpoints.
            session: Transport to reuse; a new `requests.Session` by default.
            timeout: Per-request timeout in seconds.

        Raises:
            InvalidArgumentError: If a key or the URL is None.
        """
        self._application_key = _check_not_none(application_key, "application key is None")
        self._api_key = _check_not_none(api_key, "api key is None")
        self._api_url = _check_not_none(api_url, "datadog api url is None")
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout

        logger.info("ScreenboardClient initialized", extra={"api_url": self._api_url})

    @classmethod
    def from_settings(
        cls,
        settings: ScreenboardSettings,
        session: Optional[requests.Session] = None,
    ) -> "ScreenboardClient":
        """Build a client from loaded settings."""
        return cls(
            settings.application_key,
            settings.api_key,
            api_url=settings.api_url,
            session=session,
            timeout=settings.timeout_sec,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    @api_url.setter
    def api_url(self, api_url: str) -> None:
        self._api_url = _check_not_none(api_url, "datadog api url is None")

    @property
    def session(self) -> requests.Session:
        return self._session

    @session.setter
    def session(self, session: requests.Session) -> None:
        self._session = _check_not_none(session, "http session is None")

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ScreenboardClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create(self, board: Board) -> int:
        """Create a screenboard.

        The response's `errors` list is not inspected here; a failed create
        surfaces as an HTTP error from the transport.

        Args:
            board: The screenboard to be created.

        Returns:
            The id Datadog assigned to the new board.
        """
        response = self._send("POST", board=board)
        envelope = ScreenboardResponse.model_validate(self._decode(response) or {})
        logger.info(
            "screenboard_created",
            extra={"event": "screenboard_created", "board_id": envelope.id, "widget_count": len(board.widgets)},
        )
        return envelope.id

    def update(self, board_id: int, board: Board) -> None:
        """Replace an existing screenboard.

        Raises:
            RemoteRejectionError: If Datadog reports errors.
        """
        response = self._send("PUT", board_id, board=board)
        payload = self._decode(response, error_envelope=True)
        self._check_errors(ScreenboardResponse.model_validate(payload or {}).errors, board_id)
        logger.info("screenboard_updated", extra={"event": "screenboard_updated", "board_id": board_id})

    def delete(self, board_id: int) -> None:
        """Delete an existing screenboard.

        Raises:
            RemoteRejectionError: If Datadog reports errors, e.g. for an unknown id.
        """
        response = self._send("DELETE", board_id)
        payload = self._decode(response, error_envelope=True)
        self._check_errors(ScreenboardResponse.model_validate(payload or {}).errors, board_id)
        logger.info("screenboard_deleted", extra={"event": "screenboard_deleted", "board_id": board_id})

    def get(self, board_id: int) -> Board:
        """Fetch a screenboard as a disconnected snapshot.

        Raises:
            BoardNotFoundError: If Datadog returns no board for the id.
        """
        response = self._send("GET", board_id)
        payload = None if response.status_code == 404 else self._decode(response)
        if payload is None:
            log_error(logger, "screenboard_not_found", board_id=board_id, status_code=response.status_code)
            raise BoardNotFoundError(board_id)
        return Board.model_validate(payload)

    def get_public_url(self, board_id: int) -> str:
        """Get a URL that shows the screenboard publicly in a browser.

        Raises:
            RemoteRejectionError: If Datadog reports errors.
        """
        response = self._send("GET", "share", board_id)
        payload = self._decode(response, error_envelope=True)
        envelope = ScreenboardUrlResponse.model_validate(payload or {})
        self._check_errors(envelope.errors, board_id)
        if envelope.public_url is None:
            raise ScreenboardError(f"No public_url returned for Screenboard id {board_id}")
        return envelope.public_url

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _resource_url(self, *path: Any) -> str:
        segments = [quote(str(segment), safe="") for segment in path]
        return "/".join([self._api_url.rstrip("/"), *segments])

    def _send(self, method: str, *path: Any, board: Optional[Board] = None) -> requests.Response:
        url = self._resource_url(*path)
        params = {"api_key": self._api_key, "application_key": self._application_key}
        body = board.to_payload() if board is not None else None

        start = time.perf_counter()
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=body,
                headers=_JSON_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            # Exception messages embed the full URL, credentials included, so only the type is logged.
            log_error(logger, "datadog_request_failed", method=method, url=url, error_type=type(exc).__name__)
            raise

        log_api_call(
            logger,
            method=method,
            url=url,
            status_code=response.status_code,
            duration_sec=time.perf_counter() - start,
        )
        return response

    def _decode(self, response: requests.Response, *, error_envelope: bool = False) -> Any:
        """Decode a JSON body, or raise the transport's HTTP error.

        With `error_envelope`, a failed response whose body still carries an
        `errors` list is returned so the caller can raise a typed rejection.
        """
        if response.ok:
            if not response.content:
                return None
            return response.json()

        if error_envelope:
            payload = _error_envelope(response)
            if payload is not None:
                return payload

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            log_error(
                logger,
                "datadog_http_error",
                url=_without_query(response.url),
                status_code=response.status_code,
                error_type=type(exc).__name__,
            )
            raise
        return None

    def _check_errors(self, errors: List[str], board_id: int) -> None:
        if errors:
            log_error(logger, "datadog_rejected_request", board_id=board_id, error_count=len(errors), errors=errors)
            raise RemoteRejectionError(errors)
