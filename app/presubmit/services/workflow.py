"""Boundary between the presubmit sender and the CI system."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from django.conf import settings

from .types import ChangeRecord

logger = logging.getLogger(__name__)


class WorkflowError(Exception):
    """Raised by a workflow when the CI system rejects an operation."""


class Workflow(ABC):
    """Operations the sender needs from a Continuous Integration system."""

    @abstractmethod
    def list_tests_to_run(self) -> list[str]:
        """Return the names of the tests to run."""

    @abstractmethod
    def remove_outdated_builds(self, valid_cls: dict[int, int]) -> list[Exception]:
        """
        Halt and remove ongoing builds older than the given valid patchsets.

        Failures are returned rather than raised; each one is independent.
        """

    @abstractmethod
    def add_presubmit_test_build(self, cls: Sequence[ChangeRecord], test_names: list[str]) -> None:
        """Start the given tests against all of the given CLs at once."""

    @abstractmethod
    def post_results(self, message: str, cl_refs: list[str], verified: bool) -> None:
        """
        Publish ``message`` on the given refs.

        ``verified`` tells the review tool whether the CLs are believed OK to submit.
        """


class DryRunWorkflow(Workflow):
    """Workflow that logs what it would do instead of talking to a CI system."""

    def __init__(self, test_names: list[str] | None = None):
        if test_names is None:
            test_names = list(getattr(settings, "PRESUBMIT_TESTS", []))
        self.test_names = test_names
        self.builds: list[tuple[list[str], list[str]]] = []
        self.reports: list[tuple[str, list[str], bool]] = []

    def list_tests_to_run(self) -> list[str]:
        return list(self.test_names)

    def remove_outdated_builds(self, valid_cls: dict[int, int]) -> list[Exception]:
        for cl_number, patchset in sorted(valid_cls.items()):
            logger.info("Would cancel builds of CL %s older than patchset %s", cl_number, patchset)
        return []

    def add_presubmit_test_build(self, cls: Sequence[ChangeRecord], test_names: list[str]) -> None:
        refs = [cl.ref for cl in cls]
        logger.info("Would start %s on %s", ", ".join(test_names), ", ".join(refs))
        self.builds.append((refs, list(test_names)))

    def post_results(self, message: str, cl_refs: list[str], verified: bool) -> None:
        logger.info(
            "Would post %r to %s (verified=%s)", message.strip(), ", ".join(cl_refs), verified
        )
        self.reports.append((message, list(cl_refs), verified))
