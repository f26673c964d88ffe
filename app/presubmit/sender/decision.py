"""Presubmit decision dataclass."""

from __future__ import annotations

from dataclasses import dataclass

SKIP_EMPTY = "skip-empty"
SKIP_BY_AUTHOR_REQUEST = "skip-by-author-request"
SKIP_NO_TESTS = "skip-no-tests"
SKIP_UNTRUSTED = "skip-untrusted"
SKIP_MALFORMED = "skip-malformed"
BUILD_FAILED = "build-failed"
PROCEED = "proceed"


@dataclass(frozen=True)
class PresubmitDecision:
    """Represents what to do with one multi-part CL."""

    status: str
    label: str
    message: str = ""
    verified: bool = False
    should_report: bool = False
