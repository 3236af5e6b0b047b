"""Severity threshold parsing and CI-blocking issue counts."""

from pensar_ci.constants import DEFAULT_SEVERITY_THRESHOLD
from pensar_ci.logger import log_warn
from pensar_ci.types import SEVERITY_ORDER, ScanStatus, Severity, SeverityBreakdown


def parse_severity(value: str | None, default: Severity = DEFAULT_SEVERITY_THRESHOLD) -> Severity:
    """Parse a severity level case-insensitively.

    An empty value returns *default* silently. An unrecognized value logs a
    warning listing the valid levels and also returns *default*, so a typo in
    CI configuration falls back to the strictest gate rather than aborting.
    """
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    for severity in SEVERITY_ORDER:
        if severity == normalized:
            return severity

    log_warn(
        f"Invalid severity threshold '{value}'. "
        f"Valid values: {', '.join(SEVERITY_ORDER)}. Using '{default}'."
    )
    return default


def count_at_or_above_threshold(breakdown: SeverityBreakdown | None, threshold: Severity) -> int:
    """Sum the issue counts from ``critical`` down to and including *threshold*."""
    if breakdown is None:
        return 0

    total = 0
    for severity in SEVERITY_ORDER:
        total += breakdown.count(severity)
        if severity == threshold:
            break
    return total


def blocking_issue_count(status: ScanStatus, threshold: Severity) -> int:
    """Number of issues in *status* that should fail the pipeline.

    Without a per-severity breakdown the threshold cannot be applied, so any
    reported issue is treated as blocking.
    """
    if status.issue_counts_by_severity is None:
        return status.issues_count
    return count_at_or_above_threshold(status.issue_counts_by_severity, threshold)


def is_blocking(status: ScanStatus, threshold: Severity) -> bool:
    return status.status == "completed" and blocking_issue_count(status, threshold) > 0
