"""Jamsocket API client for spawning backends and talking to them."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from jamsocket_launcher.config import DEFAULT_API_URL, DEFAULT_TAG
from jamsocket_launcher.errors import HttpStatusError, InvalidResponseError, RequestFailedError
from jamsocket_launcher.types import SpawnResult, StatusResult

logger = logging.getLogger(__name__)


class JamsocketClient:
    """Client for the Jamsocket spawn API and the backends it starts."""

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Jamsocket access token, sent as a bearer token on every request. Required.
            api_url: Base URL of the Jamsocket API.
            timeout: Per-request timeout in seconds. None waits indefinitely.
            session: Session to reuse for connection pooling. A new one is created if None.

        Raises:
            ValueError: If token or api_url is empty, or timeout is not positive.
        """
        if not isinstance(token, str) or not token.strip():
            raise ValueError("token must be a non-empty string")
        if not api_url or not api_url.strip():
            raise ValueError("api_url cannot be empty")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")

        self._token = token.strip()
        self.api_url = api_url.strip().rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def spawn_url(self, account: str, service: str) -> str:
        return (
            f"{self.api_url}/user/{quote(account, safe='')}"
            f"/service/{quote(service, safe='')}/spawn"
        )

    def spawn_backend(self, account: str, service: str, tag: str = DEFAULT_TAG) -> SpawnResult:
        """
        Ask Jamsocket to start a new backend for a service.

        Args:
            account: Account ID owning the service. Required.
            service: Service ID to spawn. Required.
            tag: Image tag to spawn.

        Returns:
            SpawnResult with the connect URL and the status URL.

        Raises:
            ValueError: If account or service is empty.
            HttpStatusError: If the API answers with a non-2xx status.
            InvalidResponseError: If the response is not JSON or lacks a URL.
            RequestFailedError: If the request could not be sent.
        """
        if not account or not account.strip():
            raise ValueError("account must be a non-empty string")
        if not service or not service.strip():
            raise ValueError("service must be a non-empty string")

        url = self.spawn_url(account.strip(), service.strip())
        logger.info("Spawning backend for %s/%s (tag: %s)", account, service, tag)
        response = self._request("POST", url, json={"tag": tag})
        result = SpawnResult.from_payload(self._decode_json(response, "spawn"))
        logger.info("Backend spawned; status URL: %s", result.status_url)
        return result

    def get_status(self, status_url: str) -> StatusResult:
        """Fetch the current state of a spawned backend."""
        if not status_url:
            raise ValueError("status_url must be a non-empty string")
        response = self._request("GET", status_url)
        return StatusResult.from_payload(self._decode_json(response, "get status"))

    def connect(self, url: str) -> str:
        """Send one GET to a ready backend and return the body as text."""
        if not url:
            raise ValueError("url must be a non-empty string")
        logger.info("Connecting to backend at %s", url)
        response = self._request("GET", url)
        # requests falls back to ISO-8859-1 for text/* without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "JamsocketClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise RequestFailedError(f"Request to {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, url, self._error_detail(response))
        return response

    @staticmethod
    def _decode_json(response: requests.Response, action: str) -> Any:
        if not response.content:
            raise InvalidResponseError(f"Attempt to {action} returned an empty body.")
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"Attempt to {action} returned invalid JSON.") from exc

    @staticmethod
    def _error_detail(response: requests.Response) -> Optional[str]:
        try:
            payload = response.json()
        except ValueError:
            return response.text.strip() or None
        if isinstance(payload, dict):
            detail = payload.get("error") or payload.get("detail") or payload.get("message")
            if detail:
                return str(detail)
        return str(payload)
