"""Empty CL set check."""

from __future__ import annotations

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SKIP_EMPTY, PresubmitDecision


def check_empty_cl_set(context: CheckContext) -> CheckResult:
    """Check if there is anything to test at all."""
    if not context.cl_info.cl_map:
        return CheckResult(
            check_id="empty-cl-set",
            check_title="Empty CL set",
            status="skip",
            message="The CL list is empty.",
            decision=PresubmitDecision(status=SKIP_EMPTY, label="Nothing to test"),
            should_stop=True,
        )

    return CheckResult(
        check_id="empty-cl-set",
        check_title="Empty CL set",
        status="ok",
        message=f"The CL list contains {len(context.cl_info.cl_map)} change(s).",
    )
