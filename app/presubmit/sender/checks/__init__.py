from __future__ import annotations

from .empty_cl_set import check_empty_cl_set
from .skip_requested import check_skip_requested
from .tests_to_run import check_tests_to_run
from .trusted_owner import check_trusted_owner

# Author intent outranks tooling state, which outranks trust.
AVAILABLE_CHECKS = [
    {
        "id": "empty-cl-set",
        "name": "Empty CL set",
        "function": check_empty_cl_set,
        "priority": 0,
    },
    {
        "id": "skip-requested",
        "name": "Presubmit opt-out",
        "function": check_skip_requested,
        "priority": 1,
    },
    {
        "id": "tests-to-run",
        "name": "Tests to run",
        "function": check_tests_to_run,
        "priority": 2,
    },
    {
        "id": "trusted-owner",
        "name": "Trusted owner",
        "function": check_trusted_owner,
        "priority": 3,
    },
]


def get_all_checks():
    """Get all available checks sorted by priority."""
    return sorted(AVAILABLE_CHECKS, key=lambda c: c["priority"])


def get_check_by_id(check_id: str):
    """Get a specific check by ID."""
    return next((c for c in AVAILABLE_CHECKS if c["id"] == check_id), None)
