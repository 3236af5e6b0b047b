"""CI platform adapters: map GitHub Actions / GitLab CI variables to a scan."""

import re
from collections.abc import Mapping
from typing import Literal

from pensar_ci import env
from pensar_ci.constants import REPO_ID_ENV
from pensar_ci.errors import PensarError
from pensar_ci.logger import log_fail, log_info, log_pass
from pensar_ci.runner import resolve_config, run_scan
from pensar_ci.severity import blocking_issue_count, is_blocking
from pensar_ci.summary import print_summary
from pensar_ci.types import HttpSender, ScanConfig, ScanStatus, Severity

Platform = Literal["github", "gitlab"]

_GITHUB_PR_REF = re.compile(r"^refs/pull/(\d+)/")


def github_config(environ: Mapping[str, str] | None = None) -> ScanConfig:
    # GITHUB_HEAD_REF is only set on pull_request events.
    branch = env.get_env_value("GITHUB_HEAD_REF", environ) or env.get_env_value(
        "GITHUB_REF_NAME", environ
    )
    return resolve_config(
        branch=branch,
        scan_level=env.get_scan_level(environ),
        environ=environ,
        repo_id_vars=(REPO_ID_ENV, "GITHUB_REPOSITORY_ID"),
    )


def gitlab_config(environ: Mapping[str, str] | None = None) -> ScanConfig:
    return resolve_config(
        branch=env.get_env_value("CI_COMMIT_REF_NAME", environ),
        scan_level=env.get_scan_level(environ),
        environ=environ,
        repo_id_vars=(REPO_ID_ENV, "CI_PROJECT_ID"),
    )


def _change_request(platform: Platform, environ: Mapping[str, str] | None) -> str | None:
    if platform == "github":
        # Pull request runs check out refs/pull/<number>/merge.
        match = _GITHUB_PR_REF.match(env.get_env_value("GITHUB_REF", environ) or "")
        return f"pull request #{match.group(1)}" if match else None
    iid = env.get_env_value("CI_MERGE_REQUEST_IID", environ)
    return f"merge request !{iid}" if iid else None


def exit_code_for(status: ScanStatus, threshold: Severity) -> int:
    """Report the outcome of *status* and return the matching process exit code."""
    if status.status != "completed":
        log_pass(f"Scan {status.label} dispatched (ID: {status.scan_id}); not waiting for results.")
        return 0

    print_summary(status, threshold)
    if is_blocking(status, threshold):
        blocking = blocking_issue_count(status, threshold)
        log_fail(f"Pentest found {blocking} security issue(s) at or above '{threshold}'")
        return 1
    if status.issues_count:
        log_pass(
            f"Pentest completed with {status.issues_count} issue(s), none at or above '{threshold}'"
        )
    else:
        log_pass("Pentest completed with no issues found")
    return 0


def run_platform_scan(
    platform: Platform,
    environ: Mapping[str, str] | None = None,
    http_send: HttpSender | None = None,
) -> int:
    """Run a scan configured from the CI platform's variables; return the exit code."""
    name = "GitHub Actions" if platform == "github" else "GitLab CI"
    try:
        config = github_config(environ) if platform == "github" else gitlab_config(environ)
        log_info(f"Starting Pensar security scan from {name}...")
        change_request = _change_request(platform, environ)
        if change_request:
            log_info(f"Triggered for {change_request}")
        if config.branch:
            log_info(f"Branch: {config.branch}")
        status = run_scan(config, http_send=http_send)
    except PensarError as e:
        log_fail(f"Scan failed: {e}")
        return 1
    return exit_code_for(status, config.severity_threshold)
