"""Available tests check."""

from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SKIP_NO_TESTS, PresubmitDecision

NO_TESTS_MESSAGE = "No tests found.\n"


def check_tests_to_run(context: CheckContext) -> CheckResult:
    """Fetch the tests to run and stop if there are none."""
    context.tests = list(context.workflow.list_tests_to_run() or [])

    if not context.tests:
        return CheckResult(
            check_id="tests-to-run",
            check_title="Tests to run",
            status="skip",
            message="The CI system has no tests to run.",
            decision=PresubmitDecision(
                status=SKIP_NO_TESTS,
                label="No tests found",
                message=NO_TESTS_MESSAGE,
                verified=True,
                should_report=True,
            ),
            should_stop=True,
        )

    return CheckResult(
        check_id="tests-to-run",
        check_title="Tests to run",
        status="ok",
        message="Tests: {}.".format(", ".join(context.tests)),
    )
