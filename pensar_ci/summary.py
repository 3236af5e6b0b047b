"""Scan summary reporting."""

from pensar_ci.constants import BOLD, GREEN, RED, RESET, YELLOW
from pensar_ci.severity import blocking_issue_count
from pensar_ci.types import SEVERITY_ORDER, ScanStatus, Severity


def _severity_color(severity: Severity) -> str:
    if severity in ("critical", "high"):
        return RED
    if severity == "medium":
        return YELLOW
    return RESET


def print_summary(status: ScanStatus, threshold: Severity) -> None:
    """Print a formatted scan summary to stdout."""
    border = f"{BOLD}{'=' * 60}{RESET}"
    print(f"\n{border}")
    print(f"{BOLD}  PENTEST SUMMARY{RESET}")
    print(border)
    print(f"  Scan: {status.label} ({status.scan_id})")
    print(f"  Status: {status.status}")
    print(f"  Severity Threshold: {threshold}")
    print(f"  Total Issues: {status.issues_count}")

    breakdown = status.issue_counts_by_severity
    if breakdown is not None:
        print()
        for severity in SEVERITY_ORDER:
            count = breakdown.count(severity)
            color = _severity_color(severity) if count else RESET
            print(f"  {color}{severity.upper():<9}{RESET} {count}")
        if breakdown.total != status.issues_count:
            print(
                f"\n  {YELLOW}Note: severity counts add up to {breakdown.total}, "
                f"total reported is {status.issues_count}.{RESET}"
            )

    blocking = blocking_issue_count(status, threshold)
    if blocking:
        print(f"\n  {RED}{blocking} issue(s) at or above '{threshold}'.{RESET}")
    else:
        print(f"\n  {GREEN}No issues at or above '{threshold}'.{RESET}")

    print(f"{border}\n")


def print_status(status: ScanStatus) -> None:
    """Print the status block for a single scan."""
    print("\nScan Status:")
    print(f"  ID:        {status.scan_id}")
    print(f"  Label:     {status.label}")
    print(f"  Status:    {status.status}")
    print(f"  Issues:    {status.issues_count}")
    print(f"  Report:    {'Ready' if status.report_ready else 'Not ready'}")

    if status.started_at:
        print(f"  Started:   {status.started_at}")
    if status.completed_at:
        print(f"  Completed: {status.completed_at}")
    if status.error_message:
        print(f"  Error:     {status.error_message}")
