"""
HashBench Core Module
======================

Data models and errors of the hashing benchmark.  The pipeline pieces
live in their own modules:

    - hashbench.core.timing: repeated-trial timing harness
    - hashbench.core.aggregator: result record construction
    - hashbench.core.engine: execution coordinator
"""

from hashbench.core.errors import (
    EngineBusyError,
    HashBenchError,
    HashValidationError,
)
from hashbench.core.models import (
    AlgorithmKind,
    AlgorithmVariant,
    Argon2idVariant,
    BCryptVariant,
    EngineState,
    HashRequest,
    HashResult,
    Md5Variant,
    ResultLog,
    Sha256Variant,
    Sha512Variant,
    ValidationReason,
    select_variant,
)

__all__ = [
    "AlgorithmKind",
    "AlgorithmVariant",
    "Argon2idVariant",
    "BCryptVariant",
    "EngineBusyError",
    "EngineState",
    "HashBenchError",
    "HashRequest",
    "HashResult",
    "HashValidationError",
    "Md5Variant",
    "ResultLog",
    "Sha256Variant",
    "Sha512Variant",
    "ValidationReason",
    "select_variant",
]
