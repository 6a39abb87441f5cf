"""
HashBench Core Data Models
===========================

Pydantic models for the hashing benchmark engine: the algorithm
selection (a discriminated union with exactly one active case), the
per-invocation request, the immutable result record and the
append-only result log that callers own.

All models are serialisable to JSON and designed for consumption by
both the CLI output layer and programmatic callers.

References:
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
    - Rivest, R. L. (1992). RFC 1321 -- The MD5 Message-Digest Algorithm.
    - Provos, N., & Mazieres, D. (1999). A Future-Adaptable Password Scheme.
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Annotated, Any, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class AlgorithmKind(str, enum.Enum):
    """Supported hashing schemes.

    Declaration order is the first-match priority used when converting
    an exclusive set of selection flags into a single variant.
    """

    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"
    BCRYPT = "bcrypt"
    ARGON2ID = "argon2id"

    @property
    def is_digest(self) -> bool:
        """True for the plain digest family (salt appended to input)."""
        return self in (AlgorithmKind.SHA256, AlgorithmKind.SHA512, AlgorithmKind.MD5)


class EngineState(str, enum.Enum):
    """Execution state of the benchmark engine."""

    IDLE = "idle"
    BUSY = "busy"


class ValidationReason(str, enum.Enum):
    """Recoverable, user-facing failures reported as error results."""

    MISSING_SALT = "missing_salt"
    SALT_TOO_SHORT = "salt_too_short"
    HASHING_FAILED = "hashing_failed"


# ===================================================================== #
#  Algorithm Variants
# ===================================================================== #


class _Variant(BaseModel):
    model_config = ConfigDict(frozen=True)


class Sha256Variant(_Variant):
    kind: Literal[AlgorithmKind.SHA256] = AlgorithmKind.SHA256


class Sha512Variant(_Variant):
    kind: Literal[AlgorithmKind.SHA512] = AlgorithmKind.SHA512


class Md5Variant(_Variant):
    kind: Literal[AlgorithmKind.MD5] = AlgorithmKind.MD5


class BCryptVariant(_Variant):
    """BCrypt with a work factor (log2 of the key-expansion rounds).

    Attributes:
        cost: Requested cost; clamped to bcrypt's valid range at dispatch.
    """

    kind: Literal[AlgorithmKind.BCRYPT] = AlgorithmKind.BCRYPT
    cost: int = 10


class Argon2idVariant(_Variant):
    """Argon2id memory-hard derivation.

    Values are stored as entered (after lenient integer parsing); the
    dispatcher applies the minimum clamps, so ``0`` and negative numbers
    are representable here.

    Attributes:
        memory_kib: Memory size in KiB.
        iterations: Number of passes over memory.
        parallelism: Number of lanes.
    """

    kind: Literal[AlgorithmKind.ARGON2ID] = AlgorithmKind.ARGON2ID
    memory_kib: int = 65536
    iterations: int = 3
    parallelism: int = 2


AlgorithmVariant = Annotated[
    Union[Sha256Variant, Sha512Variant, Md5Variant, BCryptVariant, Argon2idVariant],
    Field(discriminator="kind"),
]


def select_variant(
    *,
    sha256: bool = False,
    sha512: bool = False,
    md5: bool = False,
    bcrypt: bool = False,
    argon2id: bool = False,
    bcrypt_cost: int = 10,
    argon2_memory: int = 65536,
    argon2_iterations: int = 3,
    argon2_parallelism: int = 2,
) -> Sha256Variant | Sha512Variant | Md5Variant | BCryptVariant | Argon2idVariant:
    """Collapse exclusive selection flags into exactly one variant.

    The first flag set wins, in the order SHA256, SHA512, MD5, BCrypt,
    Argon2id.  With no flag set the default selection (SHA256) is used.
    """
    if sha256:
        return Sha256Variant()
    if sha512:
        return Sha512Variant()
    if md5:
        return Md5Variant()
    if bcrypt:
        return BCryptVariant(cost=bcrypt_cost)
    if argon2id:
        return Argon2idVariant(
            memory_kib=argon2_memory,
            iterations=argon2_iterations,
            parallelism=argon2_parallelism,
        )
    return Sha256Variant()


# ===================================================================== #
#  Request / Result
# ===================================================================== #


class HashRequest(BaseModel):
    """A single benchmark invocation, consumed exactly once.

    Attributes:
        input_text: Text to hash (encoded as UTF-8).
        salt_text: Raw salt text as entered; resolved by the salt parser.
        variant: The selected algorithm and its parameters.
    """

    model_config = ConfigDict(frozen=True)

    input_text: str = ""
    salt_text: Optional[str] = None
    variant: AlgorithmVariant = Field(default_factory=Sha256Variant)

    @property
    def is_blank(self) -> bool:
        """Empty or whitespace-only input; submitting it is a no-op."""
        return not self.input_text or self.input_text.isspace()

    @property
    def input_bytes(self) -> bytes:
        return self.input_text.encode("utf-8")


class HashResult(BaseModel):
    """Immutable outcome of one benchmark invocation.

    Attributes:
        algorithm: Human-readable label including effective parameters.
        output: Base64 digest, scheme-encoded string, or the error token.
        time_ms: Average execution time in milliseconds (3 decimals).
        error: Validation reason when the computation was refused.
        message: User-facing explanation accompanying *error*.
        created_at: UTC timestamp of result construction.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: str
    output: str
    time_ms: float = Field(default=0.0, ge=0.0)
    error: Optional[ValidationReason] = None
    message: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def time_display(self) -> str:
        """Average time as shown to the user, without a trailing ``.0``."""
        text = repr(self.time_ms)
        if text.endswith(".0"):
            text = text[:-2]
        return f"{text} ms"

    @property
    def is_error(self) -> bool:
        return self.error is not None


class ResultLog:
    """Ordered, append-only sequence of :class:`HashResult` records.

    The log exposes no removal or replacement operations; records are
    themselves frozen, so an entry never changes after insertion.
    """

    def __init__(self) -> None:
        self._items: list[HashResult] = []

    def append(self, result: HashResult) -> None:
        self._items.append(result)

    def __iter__(self) -> Iterator[HashResult]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def latest(self) -> Optional[HashResult]:
        return self._items[-1] if self._items else None

    def to_list(self) -> list[dict[str, Any]]:
        """JSON-compatible dump of every record, oldest first."""
        return [item.model_dump(mode="json") for item in self._items]
