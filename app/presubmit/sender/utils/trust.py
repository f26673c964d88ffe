"""Contributor trust policy."""

from __future__ import annotations

from collections.abc import Iterable

from django.conf import settings

DEFAULT_TRUSTED_SUFFIXES = ("@google.com",)


def is_trusted_contributor(
    email_address: str, trusted_suffixes: Iterable[str] | None = None
) -> bool:
    """
    Check whether the owner is a "trusted" contributor.

    Being trusted controls whether we automatically run your code through
    tests. Currently this only looks at the e-mail domain; the match is exact
    and case-sensitive. In the future it could use an ACL or something.
    """
    if trusted_suffixes is None:
        trusted_suffixes = getattr(
            settings, "PRESUBMIT_TRUSTED_EMAIL_SUFFIXES", DEFAULT_TRUSTED_SUFFIXES
        )
    return any(email_address.endswith(suffix) for suffix in trusted_suffixes)
