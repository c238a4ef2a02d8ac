"""Spawn a Jamsocket backend, wait until it is ready, and fetch its response."""
import logging
from typing import Optional

from jamsocket_launcher import poll_status
from jamsocket_launcher.api import JamsocketClient
from jamsocket_launcher.config import LauncherConfig

logger = logging.getLogger(__name__)


def run_launcher(config: LauncherConfig, client: Optional[JamsocketClient] = None) -> str:
    """
    Spawn a backend, wait for it and return the body of one GET to it.

    Args:
        config: Launcher settings.
        client: Client to use. Built from config if None.

    Returns:
        Raw response body from the backend's connect URL.

    Raises:
        JamsocketError: If any step fails. Nothing is retried.
    """
    logger.debug("Launcher configuration: %r", config)
    if client is None:
        client = JamsocketClient(config.token, api_url=config.api_url, timeout=config.request_timeout)

    with client:
        spawn = client.spawn_backend(config.account, config.service, tag=config.tag)
        poll_status.run(
            client,
            spawn.status_url,
            poll_interval=config.poll_interval,
            timeout=config.ready_timeout,
        )
        return client.connect(spawn.url)
