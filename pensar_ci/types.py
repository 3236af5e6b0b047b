"""Shared type definitions for Pensar CI."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from pensar_ci.constants import DEFAULT_POLL_INTERVAL_MS, DEFAULT_SEVERITY_THRESHOLD

Severity = Literal["critical", "high", "medium", "low", "info"]
ScanState = Literal["queued", "running", "completed", "failed", "paused"]
Environment = Literal["dev", "staging", "production"]
ScanLevel = Literal["priority", "full"]

# Most severe first.
SEVERITY_ORDER: tuple[Severity, ...] = ("critical", "high", "medium", "low", "info")
TERMINAL_STATES: frozenset[str] = frozenset({"completed", "failed", "paused"})


class SeverityBreakdown(BaseModel):
    """Per-severity issue counts; levels missing from the payload count as 0."""

    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)
    info: int = Field(default=0, ge=0)

    def count(self, severity: Severity) -> int:
        return getattr(self, severity)

    @property
    def total(self) -> int:
        return sum(self.count(s) for s in SEVERITY_ORDER)


class ScanStatus(BaseModel):
    """Status record for a remote scan, as returned by ``/ci/status``."""

    model_config = ConfigDict(populate_by_name=True)

    scan_id: str = Field(alias="scanId")
    label: str
    status: ScanState
    started_at: str | None = Field(alias="startedAt")
    completed_at: str | None = Field(alias="completedAt")
    error_message: str | None = Field(alias="errorMessage")
    issues_count: int = Field(alias="issuesCount", ge=0)
    report_ready: bool = Field(alias="reportReady")
    issue_counts_by_severity: SeverityBreakdown | None = Field(
        default=None, alias="issueCountsBySeverity"
    )
    error: str | None = None

    @classmethod
    def queued(cls, scan_id: str, label: str) -> "ScanStatus":
        """Build the placeholder record returned when not waiting for a scan."""
        return cls(
            scan_id=scan_id,
            label=label,
            status="queued",
            started_at=None,
            completed_at=None,
            error_message=None,
            issues_count=0,
            report_ready=False,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES


class DispatchResponse(BaseModel):
    """Body returned by ``/ci/dispatch``."""

    model_config = ConfigDict(populate_by_name=True)

    scan_id: str = Field(alias="scanId")
    label: str
    status: str
    error: str | None = None


class DispatchResult(NamedTuple):
    scan_id: str
    label: str


@dataclass(frozen=True)
class ScanConfig:
    """Fully resolved configuration for a single scan invocation."""

    api_key: str
    project_id: str | None = None
    repo_id: int | None = None
    branch: str | None = None
    scan_level: ScanLevel | None = None
    environment: Environment | None = None
    wait: bool = True
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    severity_threshold: Severity = DEFAULT_SEVERITY_THRESHOLD

    @property
    def target_description(self) -> str:
        if self.project_id:
            return f"project {self.project_id}"
        return f"repo {self.repo_id}"


HttpSender = Callable[..., Any]
StatusCallback = Callable[[ScanStatus], None]
