from __future__ import annotations

from .gerrit import MalformedRefError, format_cl_string, parse_ref_string
from .types import ChangeRecord, PresubmitTestType
from .workflow import DryRunWorkflow, Workflow, WorkflowError

__all__ = [
    "ChangeRecord",
    "DryRunWorkflow",
    "MalformedRefError",
    "PresubmitTestType",
    "Workflow",
    "WorkflowError",
    "format_cl_string",
    "parse_ref_string",
]
