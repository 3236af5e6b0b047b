"""Tests for pensar_ci.types."""

import dataclasses
import unittest

import pydantic

from pensar_ci.types import (
    SEVERITY_ORDER,
    DispatchResponse,
    DispatchResult,
    ScanConfig,
    ScanStatus,
    SeverityBreakdown,
)

STATUS_PAYLOAD = {
    "scanId": "scan-001",
    "label": "my-scan",
    "status": "completed",
    "startedAt": "2026-01-01T00:00:00Z",
    "completedAt": "2026-01-01T00:05:00Z",
    "errorMessage": None,
    "issuesCount": 3,
    "reportReady": True,
}


class TestSeverityOrder(unittest.TestCase):
    def test_most_severe_first(self):
        self.assertEqual(SEVERITY_ORDER, ("critical", "high", "medium", "low", "info"))


class TestSeverityBreakdown(unittest.TestCase):
    def test_missing_levels_default_to_zero(self):
        breakdown = SeverityBreakdown.model_validate({"high": 2})
        self.assertEqual(breakdown.critical, 0)
        self.assertEqual(breakdown.high, 2)
        self.assertEqual(breakdown.info, 0)

    def test_total(self):
        breakdown = SeverityBreakdown(critical=1, high=2, medium=3)
        self.assertEqual(breakdown.total, 6)

    def test_negative_count_rejected(self):
        with self.assertRaises(pydantic.ValidationError):
            SeverityBreakdown(low=-1)


class TestScanStatus(unittest.TestCase):
    def test_parses_wire_payload(self):
        status = ScanStatus.model_validate(STATUS_PAYLOAD)
        self.assertEqual(status.scan_id, "scan-001")
        self.assertEqual(status.label, "my-scan")
        self.assertEqual(status.status, "completed")
        self.assertEqual(status.issues_count, 3)
        self.assertTrue(status.report_ready)
        self.assertIsNone(status.error_message)

    def test_breakdown_absent_is_none(self):
        status = ScanStatus.model_validate(STATUS_PAYLOAD)
        self.assertIsNone(status.issue_counts_by_severity)

    def test_breakdown_partial_is_filled(self):
        payload = dict(STATUS_PAYLOAD, issueCountsBySeverity={"critical": 1, "low": 2})
        status = ScanStatus.model_validate(payload)
        self.assertEqual(status.issue_counts_by_severity.critical, 1)
        self.assertEqual(status.issue_counts_by_severity.medium, 0)
        self.assertEqual(status.issue_counts_by_severity.low, 2)

    def test_breakdown_mismatch_is_accepted(self):
        payload = dict(STATUS_PAYLOAD, issueCountsBySeverity={"critical": 10})
        status = ScanStatus.model_validate(payload)
        self.assertEqual(status.issues_count, 3)
        self.assertEqual(status.issue_counts_by_severity.total, 10)

    def test_missing_required_field_rejected(self):
        payload = dict(STATUS_PAYLOAD)
        del payload["reportReady"]
        with self.assertRaises(pydantic.ValidationError):
            ScanStatus.model_validate(payload)

    def test_unknown_status_rejected(self):
        with self.assertRaises(pydantic.ValidationError):
            ScanStatus.model_validate(dict(STATUS_PAYLOAD, status="cancelled"))

    def test_negative_issue_count_rejected(self):
        with self.assertRaises(pydantic.ValidationError):
            ScanStatus.model_validate(dict(STATUS_PAYLOAD, issuesCount=-1))

    def test_queued_placeholder(self):
        status = ScanStatus.queued("scan-9", "label-9")
        self.assertEqual(status.scan_id, "scan-9")
        self.assertEqual(status.label, "label-9")
        self.assertEqual(status.status, "queued")
        self.assertIsNone(status.started_at)
        self.assertIsNone(status.completed_at)
        self.assertIsNone(status.error_message)
        self.assertEqual(status.issues_count, 0)
        self.assertFalse(status.report_ready)
        self.assertIsNone(status.issue_counts_by_severity)

    def test_is_terminal(self):
        for state, terminal in (
            ("queued", False),
            ("running", False),
            ("completed", True),
            ("failed", True),
            ("paused", True),
        ):
            status = ScanStatus.model_validate(dict(STATUS_PAYLOAD, status=state))
            self.assertEqual(status.is_terminal, terminal, state)


class TestDispatchResponse(unittest.TestCase):
    def test_error_optional(self):
        resp = DispatchResponse.model_validate({"scanId": "s1", "label": "L", "status": "queued"})
        self.assertIsNone(resp.error)

    def test_missing_label_rejected(self):
        with self.assertRaises(pydantic.ValidationError):
            DispatchResponse.model_validate({"scanId": "s1", "status": "queued"})


class TestDispatchResult(unittest.TestCase):
    def test_tuple_unpacking(self):
        scan_id, label = DispatchResult(scan_id="s1", label="L")
        self.assertEqual(scan_id, "s1")
        self.assertEqual(label, "L")


class TestScanConfig(unittest.TestCase):
    def test_defaults(self):
        config = ScanConfig(api_key="key", project_id="proj")
        self.assertTrue(config.wait)
        self.assertEqual(config.poll_interval_ms, 5000)
        self.assertEqual(config.severity_threshold, "critical")
        self.assertIsNone(config.environment)

    def test_frozen(self):
        config = ScanConfig(api_key="key", project_id="proj")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.wait = False  # type: ignore[misc]

    def test_target_description(self):
        self.assertEqual(ScanConfig(api_key="k", project_id="p1").target_description, "project p1")
        self.assertEqual(ScanConfig(api_key="k", repo_id=42).target_description, "repo 42")


if __name__ == "__main__":
    unittest.main()
