"""Author opt-out check."""

from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SKIP_BY_AUTHOR_REQUEST, PresubmitDecision

SKIPPED_MESSAGE = "Presubmit tests skipped.\n"


def check_skip_requested(context: CheckContext) -> CheckResult:
    """Check if any of the CLs asked to skip presubmit tests."""
    if context.cl_info.skip_presubmit_test:
        return CheckResult(
            check_id="skip-requested",
            check_title="Presubmit opt-out",
            status="skip",
            message="At least one CL has PresubmitTest: none.",
            decision=PresubmitDecision(
                status=SKIP_BY_AUTHOR_REQUEST,
                label="Skipped by author request",
                message=SKIPPED_MESSAGE,
                verified=True,
                should_report=True,
            ),
            should_stop=True,
        )

    return CheckResult(
        check_id="skip-requested",
        check_title="Presubmit opt-out",
        status="ok",
        message="No CL asked to skip presubmit tests.",
    )
