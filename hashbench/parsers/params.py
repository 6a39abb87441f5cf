"""
Algorithm Parameter Parsing
============================

Lenient parsing and clamping of the tunable parameters of the adaptive
schemes.  Parameter text comes from free-text fields, so a value that
is not an integer is read as ``0`` and the clamps below turn it into a
usable configuration.  Nothing in this module raises.

Argon2 constraints (RFC 9106, section 3.1):
    - memory m >= 8 * p KiB
    - passes t >= 1
    - lanes p in [1, 2^24 - 1]

bcrypt accepts a cost (log2 rounds) in [4, 31].
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from hashbench.core.models import Argon2idVariant

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

ARGON2_MIN_MEMORY_KIB = 8192
ARGON2_MIN_ITERATIONS = 1
ARGON2_MIN_PARALLELISM = 1
ARGON2_MAX_PARALLELISM = 2**24 - 1

BCRYPT_MIN_COST = 4
BCRYPT_MAX_COST = 31


def parse_int(text: Optional[str], default: int = 0) -> int:
    """Parse a signed 32-bit decimal integer, returning *default* on failure.

    Surrounding whitespace is allowed; anything else (letters, decimals,
    out-of-range values) yields *default*.
    """
    if text is None or not _INT_RE.match(text):
        return default
    value = int(text)
    if value < _INT32_MIN or value > _INT32_MAX:
        return default
    return value


def clamp_bcrypt_cost(cost: int) -> int:
    return max(BCRYPT_MIN_COST, min(BCRYPT_MAX_COST, cost))


@dataclass(frozen=True, slots=True)
class Argon2Parameters:
    """Effective (clamped) Argon2id configuration.

    Attributes:
        memory_kib: Memory size in KiB, at least 8192 and at least 8 per lane.
        iterations: Number of passes, at least 1.
        parallelism: Number of lanes, at least 1.
    """

    memory_kib: int
    iterations: int
    parallelism: int

    @classmethod
    def clamped(cls, memory_kib: int, iterations: int, parallelism: int) -> Argon2Parameters:
        lanes = max(ARGON2_MIN_PARALLELISM, min(ARGON2_MAX_PARALLELISM, parallelism))
        return cls(
            memory_kib=max(ARGON2_MIN_MEMORY_KIB, memory_kib, 8 * lanes),
            iterations=max(ARGON2_MIN_ITERATIONS, iterations),
            parallelism=lanes,
        )

    @classmethod
    def from_text(
        cls,
        memory: Optional[str],
        iterations: Optional[str],
        parallelism: Optional[str],
    ) -> Argon2Parameters:
        """Parse free-text fields (unparsable values count as 0) and clamp."""
        return cls.clamped(parse_int(memory), parse_int(iterations), parse_int(parallelism))

    @classmethod
    def from_variant(cls, variant: Argon2idVariant) -> Argon2Parameters:
        return cls.clamped(variant.memory_kib, variant.iterations, variant.parallelism)


def argon2_variant_from_text(
    memory: Optional[str],
    iterations: Optional[str],
    parallelism: Optional[str],
) -> Argon2idVariant:
    """Build an :class:`Argon2idVariant` from free-text fields.

    The variant keeps the parsed values unclamped; clamping happens when
    the dispatcher derives :class:`Argon2Parameters`.
    """
    return Argon2idVariant(
        memory_kib=parse_int(memory),
        iterations=parse_int(iterations),
        parallelism=parse_int(parallelism),
    )
