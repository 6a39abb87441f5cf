"""
Adaptive Password Hashing Schemes
===================================

BCrypt and Argon2id, the two deliberately expensive schemes in the
benchmark.

BCrypt generates and embeds its own random salt, so the user salt is
not used and consecutive outputs differ; the result is the
modular-crypt string (``$2b$<cost>$<salt><hash>``).  The key schedule
only consumes the first 72 bytes of the password, and current releases
of the ``bcrypt`` package refuse longer input, so the input is cut to
72 bytes before hashing.

Argon2id needs an explicit salt.  libargon2 rejects salts shorter than
8 bytes, which is reported as a validation failure rather than a crash.
A derivation libargon2 cannot carry out (typically a memory allocation
failure for a very large lane count or memory cost) is reported the
same way, as ``HASHING_FAILED``.

References:
    - Provos, N., & Mazieres, D. (1999). A Future-Adaptable Password Scheme.
      USENIX Annual Technical Conference.
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
"""

from __future__ import annotations

import base64
from typing import Optional

import bcrypt
from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from hashbench.core.errors import HashValidationError
from hashbench.core.models import ValidationReason
from hashbench.parsers.params import Argon2Parameters, clamp_bcrypt_cost

BCRYPT_MAX_PASSWORD_BYTES = 72
ARGON2_MIN_SALT_BYTES = 8
ARGON2_HASH_LEN = 32


def compute_bcrypt(input_text: str, cost: int = 10) -> str:
    """Hash *input_text* with a fresh bcrypt salt at work factor *cost*."""
    password = input_text.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
    salt = bcrypt.gensalt(rounds=clamp_bcrypt_cost(cost))
    return bcrypt.hashpw(password, salt).decode("ascii")


def check_argon2_salt(salt: Optional[bytes]) -> bytes:
    """Return *salt* if Argon2id can use it.

    Raises:
        HashValidationError: ``MISSING_SALT`` for an absent or empty salt,
            ``SALT_TOO_SHORT`` below the library minimum.
    """
    if not salt:
        raise HashValidationError(ValidationReason.MISSING_SALT)
    if len(salt) < ARGON2_MIN_SALT_BYTES:
        raise HashValidationError(ValidationReason.SALT_TOO_SHORT)
    return salt


def compute_argon2id(
    input_text: str,
    salt: Optional[bytes],
    params: Argon2Parameters,
    hash_len: int = ARGON2_HASH_LEN,
) -> str:
    """Derive *hash_len* bytes with Argon2id and Base64-encode them.

    Raises:
        HashValidationError: For an unusable salt, or ``HASHING_FAILED``
            when libargon2 refuses the parameters.
    """
    checked_salt = check_argon2_salt(salt)
    try:
        raw = hash_secret_raw(
            secret=input_text.encode("utf-8"),
            salt=checked_salt,
            time_cost=params.iterations,
            memory_cost=params.memory_kib,
            parallelism=params.parallelism,
            hash_len=hash_len,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except (HashingError, MemoryError) as exc:
        raise HashValidationError(
            ValidationReason.HASHING_FAILED,
            f"Argon2 could not run with these parameters ({exc}). "
            "Lower the memory or parallelism.",
        ) from exc
    return base64.b64encode(raw).decode("ascii")
