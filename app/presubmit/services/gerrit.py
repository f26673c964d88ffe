"""Helpers for Gerrit change references."""

from __future__ import annotations

REF_PREFIX = ("refs", "changes")


class MalformedRefError(ValueError):
    """Raised when a change reference cannot be parsed."""


def parse_ref_string(ref: str) -> tuple[int, int]:
    """
    Split a ``refs/changes/<shard>/<cl>/<patchset>`` reference.

    Returns the ``(cl_number, patchset)`` pair. Both must be positive.
    """
    parts = ref.split("/")
    if len(parts) != 5:
        raise MalformedRefError(
            f"unexpected number of {ref!r} parts: expected 5, got {len(parts)}"
        )
    if tuple(parts[:2]) != REF_PREFIX:
        raise MalformedRefError(f"{ref!r} is not a change reference")

    try:
        cl_number = int(parts[3])
        patchset = int(parts[4])
    except ValueError as e:
        raise MalformedRefError(f"invalid change reference {ref!r}: {e}") from e

    if cl_number <= 0 or patchset <= 0:
        raise MalformedRefError(f"invalid change reference {ref!r}: numbers must be positive")
    return cl_number, patchset


def format_cl_string(cl_number: int, patchset: int) -> str:
    """Format a change and patchset as a short ``cl/patchset`` label."""
    return f"{cl_number}/{patchset}"
