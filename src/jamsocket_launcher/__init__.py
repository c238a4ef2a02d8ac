"""Spawn Jamsocket backends, wait for them to become ready, and connect to them."""

from jamsocket_launcher.api import JamsocketClient
from jamsocket_launcher.config import LauncherConfig, get_launcher_config
from jamsocket_launcher.errors import (
    ConfigurationError,
    HttpStatusError,
    InvalidResponseError,
    JamsocketError,
    ReadyTimeoutError,
    RequestFailedError,
)
from jamsocket_launcher.launcher import run_launcher
from jamsocket_launcher.types import SpawnResult, StatusResult

__all__ = [
    "JamsocketClient",
    "LauncherConfig",
    "get_launcher_config",
    "run_launcher",
    "SpawnResult",
    "StatusResult",
    "JamsocketError",
    "ConfigurationError",
    "HttpStatusError",
    "InvalidResponseError",
    "RequestFailedError",
    "ReadyTimeoutError",
]
