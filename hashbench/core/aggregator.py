"""
Result Aggregator
==================

Packages algorithm label, output and timing into one immutable
:class:`~hashbench.core.models.HashResult` per invocation.

Labels show the effective configuration: plain names for the digest
family, the clamped cost for BCrypt and the clamped memory, iteration
and lane counts for Argon2id.
"""

from __future__ import annotations

from hashbench.core.errors import HashValidationError
from hashbench.core.models import (
    AlgorithmVariant,
    Argon2idVariant,
    BCryptVariant,
    HashResult,
)
from hashbench.core.timing import TimingMeasurement
from hashbench.parsers.params import Argon2Parameters, clamp_bcrypt_cost

_DIGEST_LABELS = {
    "sha256": "SHA256",
    "sha512": "SHA512",
    "md5": "MD5",
}


def algorithm_label(variant: AlgorithmVariant) -> str:
    """Human-readable label for *variant*, e.g. ``"BCrypt (Cost: 10)"``."""
    if isinstance(variant, BCryptVariant):
        return f"BCrypt (Cost: {clamp_bcrypt_cost(variant.cost)})"
    if isinstance(variant, Argon2idVariant):
        params = Argon2Parameters.from_variant(variant)
        return (
            f"Argon2id (Mem: {params.memory_kib} KiB, "
            f"Iter: {params.iterations}, Par: {params.parallelism})"
        )
    return _DIGEST_LABELS[variant.kind.value]


class ResultAggregator:
    """Build result records from dispatcher output and harness timing.

    Args:
        error_token: Output value recorded for refused requests.
    """

    def __init__(self, error_token: str = "Error") -> None:
        self.error_token = error_token

    def build(self, variant: AlgorithmVariant, measurement: TimingMeasurement) -> HashResult:
        return HashResult(
            algorithm=algorithm_label(variant),
            output=measurement.output,
            time_ms=measurement.average_ms,
        )

    def build_error(
        self,
        variant: AlgorithmVariant,
        error: HashValidationError,
        elapsed_ms: float,
    ) -> HashResult:
        """Sentinel result for a request refused by validation."""
        return HashResult(
            algorithm=algorithm_label(variant),
            output=self.error_token,
            time_ms=elapsed_ms,
            error=error.reason,
            message=error.message,
        )
