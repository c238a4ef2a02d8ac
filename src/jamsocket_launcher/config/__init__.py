"""
Configuration module for the Jamsocket launcher.
Loads and validates environment variables for the API token, account and service.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from jamsocket_launcher.errors import ConfigurationError

logger = logging.getLogger(__name__)

TOKEN_ENV = "JAMSOCKET_TOKEN"
ACCOUNT_ENV = "JAMSOCKET_ACCOUNT"
SERVICE_ENV = "JAMSOCKET_SERVICE"

DEFAULT_API_URL = "https://api.jamsocket.com"
DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_TAG = "latest"


@dataclass(frozen=True)
class LauncherConfig:
    """Settings for a single launcher run."""

    token: str
    account: str
    service: str
    api_url: str = DEFAULT_API_URL
    request_timeout: Optional[float] = None
    poll_interval: float = DEFAULT_POLL_INTERVAL
    ready_timeout: Optional[float] = None
    tag: str = DEFAULT_TAG

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (
            f"LauncherConfig(account={self.account!r}, service={self.service!r}, "
            f"api_url={self.api_url!r}, tag={self.tag!r})"
        )


def _load_env_file(env_file: Optional[Path]) -> None:
    """Load a .env file into os.environ without overriding existing values."""
    if env_file is None:
        env_file = Path.cwd() / ".env"
    elif not env_file.exists():
        raise ConfigurationError("env_file", f".env file not found at: {env_file}")

    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def _get_required_env(key: str) -> str:
    """
    Get required environment variable.

    Args:
        key: Environment variable name.

    Returns:
        Environment variable value, stripped.

    Raises:
        ConfigurationError: If variable is not set or empty.
    """
    value = os.getenv(key)
    if not value or not value.strip():
        raise ConfigurationError(key, f"{key} environment variable is not provided.")
    return value.strip()


def _get_positive_float(key: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ConfigurationError(key, f"{key} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise ConfigurationError(key, f"{key} must be positive, got {value!r}")
    return parsed


def get_launcher_config(env_file: Optional[Path] = None) -> LauncherConfig:
    """
    Build the launcher configuration from the environment.

    Args:
        env_file: Path to a .env file. If None, ./.env is used when present.

    Returns:
        LauncherConfig instance.

    Raises:
        ConfigurationError: If a required variable is missing or an optional one is malformed.
    """
    _load_env_file(env_file)

    token = _get_required_env(TOKEN_ENV)
    account = _get_required_env(ACCOUNT_ENV)
    service = _get_required_env(SERVICE_ENV)

    api_url = (os.getenv("JAMSOCKET_API_URL") or DEFAULT_API_URL).strip().rstrip("/")
    tag = (os.getenv("JAMSOCKET_TAG") or DEFAULT_TAG).strip()

    return LauncherConfig(
        token=token,
        account=account,
        service=service,
        api_url=api_url,
        request_timeout=_get_positive_float("JAMSOCKET_TIMEOUT", None),
        poll_interval=_get_positive_float("JAMSOCKET_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
        ready_timeout=_get_positive_float("JAMSOCKET_READY_TIMEOUT", None),
        tag=tag or DEFAULT_TAG,
    )
