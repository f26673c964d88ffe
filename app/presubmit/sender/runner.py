from __future__ import annotations

import time

from .checks import get_all_checks
from .context import CheckContext
from .decision import PROCEED, PresubmitDecision


def run_checks_pipeline(context: CheckContext) -> dict:
    """Run the checks in priority order, stopping at the first deciding check."""
    pipeline_start_time = time.perf_counter()

    checks = []
    for check_info in get_all_checks():
        check_start_time = time.perf_counter()
        result = check_info["function"](context)
        duration_ms = (time.perf_counter() - check_start_time) * 1000

        checks.append(
            {
                "id": result.check_id,
                "title": result.check_title,
                "status": result.status,
                "message": result.message,
                "duration_ms": duration_ms,
            }
        )

        if result.should_stop:
            return {
                "checks": checks,
                "decision": result.decision,
                "tests": context.tests or [],
                "total_duration_ms": (time.perf_counter() - pipeline_start_time) * 1000,
            }

    return {
        "checks": checks,
        "decision": PresubmitDecision(status=PROCEED, label="Sent to presubmit test"),
        "tests": context.tests or [],
        "total_duration_ms": (time.perf_counter() - pipeline_start_time) * 1000,
    }
