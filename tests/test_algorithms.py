"""
Unit tests for the hash providers and the algorithm dispatcher.

Tests:
- Digest family over input || salt
- BCrypt output format and verification
- Argon2id output length, determinism and salt validation
- Dispatcher routing and validation-before-work
"""

import base64
import hashlib

import bcrypt
import pytest
from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from hashbench.algorithms import adaptive as adaptive_module
from hashbench.algorithms import dispatcher as dispatcher_module
from hashbench.algorithms.adaptive import compute_argon2id, compute_bcrypt
from hashbench.algorithms.digest import DIGEST_SIZES, compute_digest, salted_message
from hashbench.algorithms.dispatcher import AlgorithmDispatcher
from hashbench.core.errors import HashValidationError
from hashbench.core.models import (
    AlgorithmKind,
    BCryptVariant,
    Md5Variant,
    Sha256Variant,
    Sha512Variant,
    ValidationReason,
)
from hashbench.parsers.params import Argon2Parameters

LIGHT = Argon2Parameters(memory_kib=8192, iterations=1, parallelism=1)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class TestDigest:
    """SHA-256 / SHA-512 / MD5 with appended salt."""

    def test_sha256_hello(self):
        assert (
            compute_digest(AlgorithmKind.SHA256, b"hello")
            == "LPJNul+wow4m6DsqxbninhsWHlwfp0JecwQzYpOLmCQ="
        )

    def test_md5_hello(self):
        assert compute_digest(AlgorithmKind.MD5, b"hello") == "XUFAKrxLKna5cZ2REBfFkg=="

    def test_sha256_salt_appended_after_input(self):
        assert (
            compute_digest(AlgorithmKind.SHA256, b"hello", b"world")
            == "k2oYXKqiZrucvpgengXLeM1zKwsygOuURBK7b4+PB68="
        )

    @pytest.mark.parametrize("kind,reference", [
        (AlgorithmKind.SHA256, hashlib.sha256),
        (AlgorithmKind.SHA512, hashlib.sha512),
        (AlgorithmKind.MD5, hashlib.md5),
    ])
    def test_matches_reference_concatenation(self, kind, reference):
        data, salt = "pässwörd".encode("utf-8"), bytes(range(16))
        assert compute_digest(kind, data, salt) == _b64(reference(data + salt).digest())

    @pytest.mark.parametrize("kind", [AlgorithmKind.SHA256, AlgorithmKind.SHA512, AlgorithmKind.MD5])
    def test_digest_size(self, kind):
        raw = base64.b64decode(compute_digest(kind, b"x"))
        assert len(raw) == DIGEST_SIZES[kind]

    def test_salt_order_matters(self):
        assert compute_digest(AlgorithmKind.SHA256, b"ab", b"cd") != compute_digest(
            AlgorithmKind.SHA256, b"cd", b"ab"
        )

    def test_salted_message_without_salt(self):
        assert salted_message(b"abc", None) == b"abc"

    def test_empty_salt_is_still_appended(self):
        assert salted_message(b"abc", b"") == b"abc"


class TestBCrypt:
    """BCrypt modular-crypt output."""

    def test_format_and_cost(self):
        out = compute_bcrypt("hello", cost=4)
        assert out.startswith("$2b$04$")
        assert len(out) == 60

    def test_verifies(self):
        out = compute_bcrypt("hello", cost=4)
        assert bcrypt.checkpw(b"hello", out.encode("ascii"))

    def test_fresh_salt_each_call(self):
        assert compute_bcrypt("hello", cost=4) != compute_bcrypt("hello", cost=4)

    def test_cost_below_range_is_clamped(self):
        assert compute_bcrypt("hello", cost=1).startswith("$2b$04$")

    def test_long_input_truncated_to_72_bytes(self):
        text = "a" * 100
        out = compute_bcrypt(text, cost=4)
        assert bcrypt.checkpw(b"a" * 72, out.encode("ascii"))


class TestArgon2id:
    """Argon2id derivation."""

    def test_output_is_32_bytes(self):
        out = compute_argon2id("hello", b"saltsalt", LIGHT)
        assert len(out) == 44
        assert len(base64.b64decode(out)) == 32

    def test_matches_reference(self):
        expected = hash_secret_raw(
            secret=b"hello",
            salt=b"saltsalt",
            time_cost=1,
            memory_cost=8192,
            parallelism=1,
            hash_len=32,
            type=Type.ID,
        )
        assert compute_argon2id("hello", b"saltsalt", LIGHT) == _b64(expected)

    def test_deterministic(self):
        assert compute_argon2id("x", b"12345678", LIGHT) == compute_argon2id(
            "x", b"12345678", LIGHT
        )

    @pytest.mark.parametrize("salt", [None, b""])
    def test_missing_salt(self, salt):
        with pytest.raises(HashValidationError) as exc_info:
            compute_argon2id("hello", salt, LIGHT)
        assert exc_info.value.reason is ValidationReason.MISSING_SALT
        assert "salt" in exc_info.value.message.lower()

    def test_short_salt(self):
        with pytest.raises(HashValidationError) as exc_info:
            compute_argon2id("hello", b"world", LIGHT)
        assert exc_info.value.reason is ValidationReason.SALT_TOO_SHORT

    @pytest.mark.parametrize("error", [HashingError("Memory allocation error"), MemoryError()])
    def test_library_failure_becomes_validation_error(self, error, monkeypatch):
        def refuse(**kwargs):
            raise error

        monkeypatch.setattr(adaptive_module, "hash_secret_raw", refuse)
        with pytest.raises(HashValidationError) as exc_info:
            compute_argon2id("hello", b"saltsalt", LIGHT)
        assert exc_info.value.reason is ValidationReason.HASHING_FAILED
        assert "Lower the memory or parallelism" in exc_info.value.message


class TestDispatcher:
    """Routing by variant."""

    def setup_method(self):
        self.dispatcher = AlgorithmDispatcher()

    def test_sha256(self):
        out = self.dispatcher.compute(Sha256Variant(), b"hello", "hello", None)
        assert out == "LPJNul+wow4m6DsqxbninhsWHlwfp0JecwQzYpOLmCQ="

    def test_sha512_with_salt(self):
        out = self.dispatcher.compute(Sha512Variant(), b"hello", "hello", b"world")
        assert out == _b64(hashlib.sha512(b"helloworld").digest())

    def test_md5(self):
        out = self.dispatcher.compute(Md5Variant(), b"hello", "hello", None)
        assert out == "XUFAKrxLKna5cZ2REBfFkg=="

    def test_bcrypt_ignores_salt(self):
        out = self.dispatcher.compute(BCryptVariant(cost=4), b"hello", "hello", b"pepper")
        assert bcrypt.checkpw(b"hello", out.encode("ascii"))

    def test_argon2_uses_clamped_parameters(self, light_argon2):
        zeroed = light_argon2.model_copy(update={"memory_kib": 0, "iterations": 0})
        out = self.dispatcher.compute(zeroed, b"hello", "hello", b"saltsalt")
        assert out == compute_argon2id("hello", b"saltsalt", LIGHT)

    def test_argon2_missing_salt_refused_before_work(self, light_argon2, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("derivation must not run")

        monkeypatch.setattr(dispatcher_module, "compute_argon2id", fail)
        with pytest.raises(HashValidationError) as exc_info:
            self.dispatcher.prepare(light_argon2, "hello", None)
        assert exc_info.value.reason is ValidationReason.MISSING_SALT

    def test_prepare_returns_repeatable_callable(self):
        fn = self.dispatcher.prepare(Sha256Variant(), "hello", None)
        assert fn() == fn()

    def test_custom_hash_len(self, light_argon2):
        dispatcher = AlgorithmDispatcher(hash_len=16)
        out = dispatcher.compute(light_argon2, b"hello", "hello", b"saltsalt")
        assert len(base64.b64decode(out)) == 16

    def test_supported_order(self):
        assert [k.value for k in AlgorithmDispatcher.supported()] == [
            "sha256", "sha512", "md5", "bcrypt", "argon2id",
        ]
