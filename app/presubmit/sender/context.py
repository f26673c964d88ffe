from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from presubmit.services import Workflow

    from .multipart import MultiPartCL


@dataclass
class CheckContext:
    """Shared context passed to all check functions."""

    cl_info: MultiPartCL
    workflow: Workflow
    tests: list[str] | None = None
