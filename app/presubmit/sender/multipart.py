"""Merging of the CLs that make up one logical change."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from presubmit.services.gerrit import format_cl_string, parse_ref_string
from presubmit.services.types import ChangeRecord, PresubmitTestType

from .utils.trust import is_trusted_contributor


@dataclass
class MultiPartCL:
    """
    Everything we know about a list of CLs that are tested together.

    A single logical change may be broken up into several individual CLs, so
    tests have to run on all of them at once. Colloquially this is a
    "multi part" CL.
    """

    cl_map: dict[int, int] = field(default_factory=dict)
    cl_string: str = ""
    skip_presubmit_test: bool = False
    has_trusted_owner: bool = True
    refs: list[str] = field(default_factory=list)
    cls: list[ChangeRecord] = field(default_factory=list)


def combine_cl_list(cls: Iterable[ChangeRecord]) -> MultiPartCL:
    """
    Combine individual CLs into a single MultiPartCL.

    Raises MalformedRefError if any ref cannot be parsed; there is no partial result.
    """
    result = MultiPartCL()
    cl_strings = []

    for cl in cls:
        cl_number, patchset = parse_ref_string(cl.ref)

        # One opt-out is enough to skip the whole list.
        if cl.presubmit == PresubmitTestType.SKIP:
            result.skip_presubmit_test = True

        if not is_trusted_contributor(cl.owner_email):
            result.has_trusted_owner = False

        cl_strings.append(format_cl_string(cl_number, patchset))
        result.cl_map[cl_number] = patchset
        result.refs.append(cl.ref)
        result.cls.append(cl)

    result.cl_string = ", ".join(cl_strings)
    return result
