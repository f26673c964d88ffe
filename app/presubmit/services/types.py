from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PresubmitTestType(str, Enum):
    DEFAULT = "default"
    SKIP = "skip"

    @classmethod
    def from_label(cls, value: str | None) -> PresubmitTestType:
        """Parse a directive, accepting the Gerrit ``PresubmitTest: none`` spelling."""
        if not value:
            return cls.DEFAULT
        normalized = value.strip().lower()
        if normalized == "none":
            return cls.SKIP
        return cls(normalized)


@dataclass(frozen=True)
class ChangeRecord:
    """A single change list as reported by the review system."""

    ref: str
    owner_email: str
    presubmit: PresubmitTestType = PresubmitTestType.DEFAULT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChangeRecord:
        ref = data.get("ref") or data.get("reference")
        if not ref:
            raise ValueError(f"Change record is missing a ref: {data!r}")
        owner_email = data.get("owner_email")
        if owner_email is None:
            raise ValueError(f"Change record {ref} is missing owner_email")
        return cls(
            ref=str(ref),
            owner_email=str(owner_email),
            presubmit=PresubmitTestType.from_label(data.get("presubmit")),
        )
