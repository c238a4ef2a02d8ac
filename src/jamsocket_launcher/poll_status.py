import logging
import time
from typing import Optional

from jamsocket_launcher.api import JamsocketClient
from jamsocket_launcher.errors import ReadyTimeoutError
from jamsocket_launcher.types import StatusResult

POLL_INTERVAL = 1.0  # seconds

logger = logging.getLogger(__name__)


def run(client: JamsocketClient, status_url: str, poll_interval=None, timeout: Optional[float] = None) -> StatusResult:
    """Poll a backend status URL until it reports Ready.

    Any state other than Ready keeps polling. Errors from the status endpoint are not retried.
    With timeout=None the loop never gives up.
    """
    poll_interval = POLL_INTERVAL if poll_interval is None else poll_interval
    deadline = time.monotonic() + timeout if timeout is not None else None
    attempt = 0

    while True:
        attempt += 1
        status = client.get_status(status_url)
        logger.info("Backend state: %s (attempt %d)", status.state, attempt)

        if status.is_ready:
            logger.info("Backend ready after %d status checks", attempt)
            return status

        if deadline is not None and time.monotonic() + poll_interval > deadline:
            raise ReadyTimeoutError(
                f"Backend not ready after {timeout:g}s ({attempt} status checks, last state: {status.state})"
            )

        time.sleep(poll_interval)
