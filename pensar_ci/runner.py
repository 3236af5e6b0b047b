"""Resolve scan configuration and run a scan end to end."""

from collections.abc import Iterable, Mapping

from pensar_ci import env
from pensar_ci.constants import REPO_ID_ENV
from pensar_ci.errors import ConfigurationError
from pensar_ci.http_client import dispatch_scan
from pensar_ci.logger import log_info
from pensar_ci.poller import poll_scan_status
from pensar_ci.types import (
    Environment,
    HttpSender,
    ScanConfig,
    ScanLevel,
    ScanStatus,
    Severity,
    StatusCallback,
)


def resolve_config(
    api_key: str | None = None,
    project_id: str | None = None,
    repo_id: int | None = None,
    branch: str | None = None,
    scan_level: ScanLevel | None = None,
    environment: Environment | None = None,
    wait: bool | None = None,
    poll_interval_ms: int | None = None,
    severity_threshold: Severity | None = None,
    environ: Mapping[str, str] | None = None,
    repo_id_vars: Iterable[str] = (REPO_ID_ENV,),
) -> ScanConfig:
    """Merge explicit arguments over environment variables into a ScanConfig.

    Explicit arguments always win. Raises ConfigurationError when no API key
    or no project/repo identifier can be resolved.
    """
    api_key = api_key or env.get_api_key(environ)

    if not project_id and repo_id is None:
        project_id = env.get_project_id(environ)
        if not project_id:
            repo_id = env.get_repo_id(environ, names=repo_id_vars)
    if not project_id and repo_id is None:
        raise ConfigurationError(
            "No project id or repo id configured (set PENSAR_PROJECT_ID or pass --project)"
        )

    return ScanConfig(
        api_key=api_key,
        project_id=project_id or None,
        repo_id=repo_id,
        branch=branch,
        scan_level=scan_level,
        environment=environment if environment is not None else env.get_target_environment(environ),
        wait=wait if wait is not None else env.get_wait(environ),
        poll_interval_ms=(
            poll_interval_ms if poll_interval_ms is not None else env.get_poll_interval_ms(environ)
        ),
        severity_threshold=severity_threshold or env.get_severity_threshold(environ),
    )


def run_scan(
    config: ScanConfig,
    on_status_update: StatusCallback | None = None,
    http_send: HttpSender | None = None,
) -> ScanStatus:
    """Dispatch a scan and, if ``config.wait``, poll it to a terminal state.

    Without waiting, a synthesized ``queued`` record is returned after the
    single dispatch call. Errors propagate to the caller unchanged.
    """
    log_info(f"Dispatching scan for {config.target_description}...")

    scan_id, label = dispatch_scan(
        config.api_key,
        project_id=config.project_id,
        repo_id=config.repo_id,
        branch=config.branch,
        scan_level=config.scan_level,
        environment=config.environment,
        http_send=http_send,
    )

    log_info(f"Scan {label} dispatched (ID: {scan_id})")

    if not config.wait:
        return ScanStatus.queued(scan_id, label)

    log_info("Waiting for scan to complete...")

    final_status = poll_scan_status(
        config.api_key,
        scan_id,
        environment=config.environment,
        poll_interval_ms=config.poll_interval_ms,
        on_status_update=on_status_update,
        http_send=http_send,
    )

    log_info(f"Scan {label} completed with {final_status.issues_count} issues")

    return final_status
