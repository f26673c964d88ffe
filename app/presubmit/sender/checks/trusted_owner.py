"""Trusted owner check."""

from __future__ import annotations

from django.conf import settings

from ..base import CheckResult
from ..context import CheckContext
from ..decision import SKIP_UNTRUSTED, PresubmitDecision

DEFAULT_UNTRUSTED_MESSAGE = "Tell Freenode#fuchsia to kick the presubmit tests.\n"


def check_trusted_owner(context: CheckContext) -> CheckResult:
    """Only test code submitted by trusted contributors."""
    if not context.cl_info.has_trusted_owner:
        return CheckResult(
            check_id="trusted-owner",
            check_title="Trusted owner",
            status="fail",
            message="At least one CL is owned by an external contributor.",
            decision=PresubmitDecision(
                status=SKIP_UNTRUSTED,
                label="Requires a human to start tests",
                message=getattr(
                    settings, "PRESUBMIT_UNTRUSTED_MESSAGE", DEFAULT_UNTRUSTED_MESSAGE
                ),
                verified=False,
                should_report=True,
            ),
            should_stop=True,
        )

    return CheckResult(
        check_id="trusted-owner",
        check_title="Trusted owner",
        status="ok",
        message="All CLs are owned by trusted contributors.",
    )
