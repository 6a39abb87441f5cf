"""
HashBench Exceptions
=====================

Errors raised inside the benchmark pipeline.  Validation failures and
refused derivations carry user-visible meaning; the engine converts
them into error results rather than propagating them to the caller.
"""

from __future__ import annotations

from hashbench.core.models import ValidationReason

_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.MISSING_SALT: (
        "Argon2 requires a salt. Please provide one in the salt field."
    ),
    ValidationReason.SALT_TOO_SHORT: (
        "Argon2 requires a salt of at least 8 bytes."
    ),
    ValidationReason.HASHING_FAILED: (
        "Argon2 could not run with these parameters. "
        "Lower the memory or parallelism."
    ),
}


class HashBenchError(Exception):
    """Base class for HashBench errors."""


class HashValidationError(HashBenchError):
    """A request was refused, before or while hashing.

    Attributes:
        reason: Machine-readable validation reason.
        message: User-facing explanation.
    """

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        self.reason = reason
        self.message = message or _MESSAGES[reason]
        super().__init__(self.message)


class EngineBusyError(HashBenchError):
    """A submission arrived while another one was still running."""
