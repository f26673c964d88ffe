"""Sending groups of related CLs to presubmit testing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from presubmit.services.gerrit import MalformedRefError
from presubmit.services.types import ChangeRecord
from presubmit.services.workflow import Workflow, WorkflowError

from .context import CheckContext
from .decision import BUILD_FAILED, PROCEED, SKIP_EMPTY, SKIP_MALFORMED
from .multipart import combine_cl_list
from .runner import run_checks_pipeline

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Outcome of one sender run."""

    cls_sent: int = 0
    outcomes: list[tuple[str, str]] = field(default_factory=list)


class ReportingError(WorkflowError):
    """Raised when a verdict could not be posted; stops the whole run."""

    def __init__(self, message: str, result: DispatchResult):
        super().__init__(message)
        self.result = result


class ClsSender:
    """
    Sends groups of related CLs to presubmit testing.

    The CI system is reached only through ``worker``, so tests can swap in a
    fake workflow and new CI systems can be adopted without touching this class.
    """

    def __init__(self, cl_lists: Iterable[Sequence[ChangeRecord]], worker: Workflow):
        self.cl_lists = [list(cl_list) for cl_list in cl_lists]
        self.worker = worker

    def send_cls_to_presubmit_test(self) -> DispatchResult:
        """Send every CL list for presubmit testing, one list at a time."""
        result = DispatchResult()

        for cl_list in self.cl_lists:
            try:
                cl_info = combine_cl_list(cl_list)
            except MalformedRefError as e:
                logger.error("Skipping CL set with a malformed ref: %s", e)
                result.outcomes.append((", ".join(cl.ref for cl in cl_list), SKIP_MALFORMED))
                continue

            context = CheckContext(cl_info=cl_info, workflow=self.worker)
            decision = run_checks_pipeline(context)["decision"]

            if decision.status == SKIP_EMPTY:
                logger.info("Skipping empty CL set")
                result.outcomes.append((cl_info.cl_string, decision.status))
                continue

            if decision.status != PROCEED:
                logger.info("Skipping %s: %s", cl_info.cl_string, decision.label)
                result.outcomes.append((cl_info.cl_string, decision.status))
                if decision.should_report:
                    self._post_results(decision.message, cl_info.refs, decision.verified, result)
                continue

            # Cancel any previous tests from old patch sets that may still be running.
            for error in self.worker.remove_outdated_builds(cl_info.cl_map) or []:
                if error:
                    logger.warning("Could not remove outdated build: %s", error)

            logger.info("Sending %s to presubmit test", cl_info.cl_string)
            try:
                self.worker.add_presubmit_test_build(cl_info.cls, context.tests)
            except WorkflowError as e:
                logger.error("add_presubmit_test_build failed for %s: %s", cl_info.cl_string, e)
                result.outcomes.append((cl_info.cl_string, BUILD_FAILED))
                continue

            result.cls_sent += len(cl_info.cls)
            result.outcomes.append((cl_info.cl_string, PROCEED))

        return result

    def _post_results(
        self, message: str, refs: list[str], verified: bool, result: DispatchResult
    ) -> None:
        try:
            self.worker.post_results(message, refs, verified)
        except WorkflowError as e:
            raise ReportingError(
                f"post_results failed for {', '.join(refs)}: {e}", result
            ) from e
