"""Base types for presubmit checks."""

from __future__ import annotations

from dataclasses import dataclass

from .decision import PresubmitDecision


@dataclass
class CheckResult:
    """
    Outcome of one presubmit check over a multi-part CL.

    ``status`` and ``message`` describe the check itself. A check that settles
    the CL set sets ``should_stop`` and carries the ``decision``; whether a
    verdict is posted to the review tool is up to ``decision.should_report``.
    Checks that let the CL set through leave ``decision`` unset.
    """

    check_id: str
    check_title: str
    status: str
    message: str
    decision: PresubmitDecision | None = None
    should_stop: bool = False
