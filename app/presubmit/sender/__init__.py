"""Decision logic for sending multi-part CLs to presubmit testing."""

from __future__ import annotations

from .checks import AVAILABLE_CHECKS, get_all_checks, get_check_by_id
from .decision import PresubmitDecision
from .dispatcher import ClsSender, DispatchResult, ReportingError
from .multipart import MultiPartCL, combine_cl_list
from .runner import run_checks_pipeline
from .utils.trust import is_trusted_contributor

__all__ = [
    "AVAILABLE_CHECKS",
    "ClsSender",
    "DispatchResult",
    "MultiPartCL",
    "PresubmitDecision",
    "ReportingError",
    "combine_cl_list",
    "get_all_checks",
    "get_check_by_id",
    "is_trusted_contributor",
    "run_checks_pipeline",
]
