"""
Algorithm Dispatcher
=====================

Maps the selected :data:`~hashbench.core.models.AlgorithmVariant` to a
zero-argument computation that the timing harness can call repeatedly.

Validation happens once in :meth:`AlgorithmDispatcher.prepare`, before
any timed work, so a refused request never pays for a derivation and
its recorded time covers the validation path only.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Optional

from hashbench.algorithms.adaptive import (
    check_argon2_salt,
    compute_argon2id,
    compute_bcrypt,
)
from hashbench.algorithms.digest import compute_digest
from hashbench.core.models import (
    AlgorithmKind,
    AlgorithmVariant,
    Argon2idVariant,
    BCryptVariant,
)
from hashbench.parsers.params import Argon2Parameters, clamp_bcrypt_cost

Computation = Callable[[], str]


class AlgorithmDispatcher:
    """Route a variant and its inputs to the matching hash function.

    Usage::

        dispatcher = AlgorithmDispatcher()
        output = dispatcher.compute(Sha256Variant(), b"hello", "hello", None)
        fn = dispatcher.prepare(Argon2idVariant(), "hello", b"saltsalt")
        output = fn()

    Args:
        hash_len: Argon2id output length in bytes.
    """

    def __init__(self, hash_len: int = 32) -> None:
        self.hash_len = hash_len

    def prepare(
        self,
        variant: AlgorithmVariant,
        input_text: str,
        salt: Optional[bytes],
        input_bytes: Optional[bytes] = None,
    ) -> Computation:
        """Validate the request and bind it into a callable.

        Raises:
            HashValidationError: Argon2id without a usable salt.
        """
        if input_bytes is None:
            input_bytes = input_text.encode("utf-8")

        if variant.kind.is_digest:
            return partial(compute_digest, variant.kind, input_bytes, salt)

        if isinstance(variant, BCryptVariant):
            # bcrypt salts itself; the user salt does not apply
            return partial(compute_bcrypt, input_text, clamp_bcrypt_cost(variant.cost))

        if isinstance(variant, Argon2idVariant):
            checked = check_argon2_salt(salt)
            return partial(
                compute_argon2id,
                input_text,
                checked,
                Argon2Parameters.from_variant(variant),
                self.hash_len,
            )

        raise ValueError(f"Unsupported algorithm: {variant.kind!r}")

    def compute(
        self,
        variant: AlgorithmVariant,
        input_bytes: bytes,
        input_text: str,
        salt: Optional[bytes],
    ) -> str:
        """Validate and run the computation once, returning its output."""
        return self.prepare(variant, input_text, salt, input_bytes)()

    @staticmethod
    def supported() -> list[AlgorithmKind]:
        """All algorithms in first-match priority order."""
        return list(AlgorithmKind)
