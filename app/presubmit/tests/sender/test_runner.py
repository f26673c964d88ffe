"""Tests for the presubmit decision pipeline."""

from __future__ import annotations

from unittest.mock import MagicMock

from django.test import SimpleTestCase

from presubmit.sender.context import CheckContext
from presubmit.sender.multipart import combine_cl_list
from presubmit.sender.runner import run_checks_pipeline
from presubmit.services import ChangeRecord, PresubmitTestType


def run_pipeline(cls, tests=("unit",)):
    workflow = MagicMock()
    workflow.list_tests_to_run.return_value = list(tests)
    context = CheckContext(cl_info=combine_cl_list(cls), workflow=workflow)
    return run_checks_pipeline(context), workflow


class RunChecksPipelineTests(SimpleTestCase):
    def setUp(self):
        self.trusted = ChangeRecord(ref="refs/changes/01/1/5", owner_email="a@google.com")
        self.untrusted = ChangeRecord(ref="refs/changes/02/2/7", owner_email="b@evil.com")
        self.opt_out = ChangeRecord(
            ref="refs/changes/03/3/1",
            owner_email="c@evil.com",
            presubmit=PresubmitTestType.SKIP,
        )

    def test_trusted_change_with_tests_proceeds(self):
        result, _ = run_pipeline([self.trusted])
        self.assertEqual(result["decision"].status, "proceed")
        self.assertEqual(result["tests"], ["unit"])
        self.assertEqual(len(result["checks"]), 4)

    def test_opt_out_wins_over_trust_and_missing_tests(self):
        result, workflow = run_pipeline([self.untrusted, self.opt_out], tests=[])
        self.assertEqual(result["decision"].status, "skip-by-author-request")
        self.assertTrue(result["decision"].verified)
        workflow.list_tests_to_run.assert_not_called()

    def test_missing_tests_win_over_trust(self):
        result, _ = run_pipeline([self.untrusted], tests=[])
        self.assertEqual(result["decision"].status, "skip-no-tests")
        self.assertTrue(result["decision"].verified)

    def test_untrusted_owner_with_tests(self):
        result, _ = run_pipeline([self.trusted, self.untrusted])
        self.assertEqual(result["decision"].status, "skip-untrusted")
        self.assertFalse(result["decision"].verified)

    def test_empty_list_stops_first(self):
        result, workflow = run_pipeline([])
        self.assertEqual(result["decision"].status, "skip-empty")
        self.assertEqual([c["id"] for c in result["checks"]], ["empty-cl-set"])
        workflow.list_tests_to_run.assert_not_called()

    def test_pipeline_records_durations(self):
        result, _ = run_pipeline([self.trusted])
        self.assertIsInstance(result["total_duration_ms"], float)
        for check in result["checks"]:
            self.assertGreaterEqual(check["duration_ms"], 0)
