"""
Digest Family
==============

SHA-256, SHA-512 and MD5 over ``input || salt``.

The salt, when present, is appended directly after the input bytes
with no separator and no length prefix; the Base64 encoding of the raw
digest is returned.

References:
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
    - Rivest, R. L. (1992). RFC 1321 -- The MD5 Message-Digest Algorithm.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Callable, Optional

from hashbench.core.models import AlgorithmKind


def _md5(data: bytes) -> "hashlib._Hash":
    # usedforsecurity=False: MD5 stays available on FIPS-mode builds
    return hashlib.md5(data, usedforsecurity=False)


_DIGESTS: dict[AlgorithmKind, Callable[[bytes], "hashlib._Hash"]] = {
    AlgorithmKind.SHA256: hashlib.sha256,
    AlgorithmKind.SHA512: hashlib.sha512,
    AlgorithmKind.MD5: _md5,
}

DIGEST_SIZES: dict[AlgorithmKind, int] = {
    AlgorithmKind.SHA256: 32,
    AlgorithmKind.SHA512: 64,
    AlgorithmKind.MD5: 16,
}


def salted_message(input_bytes: bytes, salt: Optional[bytes]) -> bytes:
    """Return ``input_bytes || salt`` (or *input_bytes* when unsalted)."""
    if salt is None:
        return input_bytes
    return input_bytes + salt


def compute_digest(
    kind: AlgorithmKind,
    input_bytes: bytes,
    salt: Optional[bytes] = None,
) -> str:
    """Hash *input_bytes* (with *salt* appended) and Base64-encode the digest.

    Raises:
        KeyError: If *kind* is not a digest-family algorithm.
    """
    digest = _DIGESTS[kind](salted_message(input_bytes, salt)).digest()
    return base64.b64encode(digest).decode("ascii")
