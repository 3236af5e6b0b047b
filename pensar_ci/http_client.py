"""HTTP calls against the Pensar CI API."""

from typing import Any

import pydantic
import requests as default_http

from pensar_ci.constants import REQUEST_TIMEOUT
from pensar_ci.endpoints import resolve_api_url
from pensar_ci.errors import ConfigurationError, SchemaError, TransportError
from pensar_ci.types import (
    DispatchResponse,
    DispatchResult,
    Environment,
    HttpSender,
    ScanLevel,
    ScanStatus,
)


def _send(
    method: str,
    url: str,
    api_key: str,
    action: str,
    json_body: dict[str, Any] | None = None,
    http_send: HttpSender | None = None,
) -> Any:
    """Send one request and return the decoded JSON body of a 2xx response.

    Args:
        action: Human-readable operation name used in error messages,
                e.g. "dispatching scan".
        http_send: Injectable callable matching requests.request signature.
                   Defaults to requests.request.
    """
    send = http_send or default_http.request

    headers = {"x-api-key": api_key}
    if json_body is not None:
        headers["Content-Type"] = "application/json"

    try:
        response = send(
            method=method,
            url=url,
            headers=headers,
            json=json_body,
            timeout=REQUEST_TIMEOUT,
        )
    except default_http.exceptions.ConnectionError as e:
        raise TransportError(f"Error {action}: connection failed to {url}") from e
    except default_http.exceptions.Timeout as e:
        raise TransportError(
            f"Error {action}: request to {url} timed out after {REQUEST_TIMEOUT}s"
        ) from e
    except default_http.exceptions.RequestException as e:
        raise TransportError(f"Error {action}: {e}") from e

    try:
        body = response.json()
    except ValueError:
        body = None

    if not response.ok:
        server_error = body.get("error") if isinstance(body, dict) else None
        raise TransportError(
            f"Error {action}: {server_error or response.reason}",
            status_code=response.status_code,
        )

    if body is None:
        raise SchemaError(f"Error {action}: response body is not valid JSON")
    return body


def dispatch_scan(
    api_key: str,
    project_id: str | None = None,
    repo_id: int | None = None,
    branch: str | None = None,
    scan_level: ScanLevel | None = None,
    environment: Environment | None = None,
    http_send: HttpSender | None = None,
) -> DispatchResult:
    """Create a remote scan job and return its id and label.

    Exactly one identifier is sent; ``project_id`` wins when both are given.
    Raises ConfigurationError before any request when neither is set.
    """
    if not project_id and repo_id is None:
        raise ConfigurationError("Either a project id or a repo id is required to dispatch a scan")

    body: dict[str, Any] = {"projectId": project_id} if project_id else {"repoId": repo_id}
    if branch:
        body["branch"] = branch
    if scan_level:
        body["scanLevel"] = scan_level

    url = f"{resolve_api_url(environment)}/ci/dispatch"
    payload = _send("POST", url, api_key, "dispatching scan", json_body=body, http_send=http_send)

    try:
        result = DispatchResponse.model_validate(payload)
    except pydantic.ValidationError as e:
        raise SchemaError(f"Malformed dispatch response: {e}") from e
    return DispatchResult(scan_id=result.scan_id, label=result.label)


def get_scan_status(
    api_key: str,
    scan_id: str,
    environment: Environment | None = None,
    http_send: HttpSender | None = None,
) -> ScanStatus:
    """Fetch the current status record of a scan."""
    url = f"{resolve_api_url(environment)}/ci/status/{scan_id}"
    payload = _send("GET", url, api_key, "getting scan status", http_send=http_send)

    try:
        return ScanStatus.model_validate(payload)
    except pydantic.ValidationError as e:
        raise SchemaError(f"Malformed status response: {e}") from e
