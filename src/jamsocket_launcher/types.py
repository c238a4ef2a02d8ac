"""Records parsed from Jamsocket API responses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from jamsocket_launcher.errors import InvalidResponseError

READY_STATE = "Ready"


def _optional_str(payload: dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidResponseError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class SpawnResult:
    """Connection details returned by the spawn endpoint."""

    url: str
    status_url: str

    @classmethod
    def from_payload(cls, payload: Any) -> "SpawnResult":
        """
        Validate a decoded spawn response.

        Args:
            payload: Decoded JSON body of the spawn response.

        Returns:
            SpawnResult with both URLs present.

        Raises:
            InvalidResponseError: If the payload is not an object or a URL is missing or empty.
        """
        if not isinstance(payload, dict):
            raise InvalidResponseError("Attempt to spawn returned invalid JSON.")

        url = _optional_str(payload, "url")
        status_url = _optional_str(payload, "status_url")
        if not url or not status_url:
            missing = [key for key, value in (("url", url), ("status_url", status_url)) if not value]
            raise InvalidResponseError(
                f"Attempt to spawn returned invalid URLs (missing: {', '.join(missing)})."
            )
        return cls(url=url, status_url=status_url)


@dataclass(frozen=True, slots=True)
class StatusResult:
    """One observation of a backend's state."""

    state: Optional[str]

    @classmethod
    def from_payload(cls, payload: Any) -> "StatusResult":
        """Validate a decoded status response; a missing state is kept as None."""
        if not isinstance(payload, dict):
            raise InvalidResponseError("Attempt to get status returned invalid JSON.")
        return cls(state=_optional_str(payload, "state"))

    @property
    def is_ready(self) -> bool:
        return self.state == READY_STATE
