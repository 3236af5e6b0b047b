"""Poll a remote scan until it reaches a terminal state."""

import time

from pensar_ci.constants import DEFAULT_POLL_INTERVAL_MS
from pensar_ci.errors import RemoteFailure, RemotePause
from pensar_ci.http_client import get_scan_status
from pensar_ci.logger import log_info
from pensar_ci.types import Environment, HttpSender, ScanStatus, StatusCallback


def poll_scan_status(
    api_key: str,
    scan_id: str,
    environment: Environment | None = None,
    poll_interval_ms: int | None = None,
    on_status_update: StatusCallback | None = None,
    http_send: HttpSender | None = None,
) -> ScanStatus:
    """Query the scan status at a fixed interval until it is terminal.

    Every status observed, terminal ones included, is passed to
    *on_status_update* once and in order. There is no iteration cap or
    overall timeout: the remote service decides when the scan ends and the
    caller is expected to bound the process externally. A failed status
    request is not retried.

    Returns:
        The ``completed`` status record.

    Raises:
        RemoteFailure: the scan ended with status ``failed``.
        RemotePause: the scan was paused.
    """
    interval_ms = poll_interval_ms if poll_interval_ms is not None else DEFAULT_POLL_INTERVAL_MS

    while True:
        status = get_scan_status(api_key, scan_id, environment=environment, http_send=http_send)

        if on_status_update is not None:
            on_status_update(status)

        if status.is_terminal:
            break

        log_info(
            f"Scan {status.label} status: {status.status}. "
            f"Polling again in {interval_ms / 1000:g}s..."
        )
        time.sleep(interval_ms / 1000)

    if status.status == "failed":
        raise RemoteFailure(f"Scan failed: {status.error_message}")
    if status.status == "paused":
        raise RemotePause("Scan was paused")
    return status
