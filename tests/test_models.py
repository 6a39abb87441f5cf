"""
Unit tests for data models and result aggregation.

Tests:
- Exclusive selection -> single variant
- Request / result immutability and display helpers
- Append-only result log
- Labels with effective parameters
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from hashbench.core.aggregator import ResultAggregator, algorithm_label
from hashbench.core.errors import HashValidationError
from hashbench.core.models import (
    AlgorithmKind,
    AlgorithmVariant,
    Argon2idVariant,
    BCryptVariant,
    HashRequest,
    HashResult,
    Md5Variant,
    ResultLog,
    Sha256Variant,
    Sha512Variant,
    ValidationReason,
    select_variant,
)
from hashbench.core.timing import TimingMeasurement


class TestSelectVariant:
    """First-match priority over exclusive flags."""

    def test_default_is_sha256(self):
        assert isinstance(select_variant(), Sha256Variant)

    def test_priority_order(self):
        assert isinstance(select_variant(sha512=True, md5=True), Sha512Variant)
        assert isinstance(select_variant(md5=True, bcrypt=True), Md5Variant)
        assert isinstance(select_variant(bcrypt=True, argon2id=True), BCryptVariant)

    def test_all_flags_pick_sha256(self):
        variant = select_variant(sha256=True, sha512=True, md5=True, bcrypt=True, argon2id=True)
        assert variant.kind is AlgorithmKind.SHA256

    def test_parameters_carried(self):
        variant = select_variant(
            argon2id=True, argon2_memory=19456, argon2_iterations=2, argon2_parallelism=1
        )
        assert variant == Argon2idVariant(memory_kib=19456, iterations=2, parallelism=1)
        assert select_variant(bcrypt=True, bcrypt_cost=12).cost == 12


class TestVariants:

    def test_discriminated_union_from_json(self):
        adapter = TypeAdapter(AlgorithmVariant)
        variant = adapter.validate_python({"kind": "bcrypt", "cost": 12})
        assert variant == BCryptVariant(cost=12)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AlgorithmVariant).validate_python({"kind": "sha1"})

    def test_digest_flag(self):
        assert AlgorithmKind.MD5.is_digest
        assert not AlgorithmKind.ARGON2ID.is_digest


class TestHashRequest:

    @pytest.mark.parametrize("text", ["", " ", "\t\n"])
    def test_blank(self, text):
        assert HashRequest(input_text=text).is_blank

    def test_not_blank(self):
        request = HashRequest(input_text=" a ")
        assert not request.is_blank
        assert request.input_bytes == b" a "

    def test_frozen(self):
        request = HashRequest(input_text="a")
        with pytest.raises(ValidationError):
            request.input_text = "b"

    def test_default_variant(self):
        assert HashRequest(input_text="a").variant == Sha256Variant()


class TestHashResult:

    def test_time_display(self):
        result = HashResult(algorithm="SHA256", output="x", time_ms=0.012)
        assert result.time_display == "0.012 ms"

    @pytest.mark.parametrize("time_ms, shown", [(0.0, "0 ms"), (12.0, "12 ms"), (1.5, "1.5 ms")])
    def test_time_display_drops_trailing_zero(self, time_ms, shown):
        result = HashResult(algorithm="MD5", output="x", time_ms=time_ms)
        assert result.time_display == shown

    def test_frozen(self):
        result = HashResult(algorithm="SHA256", output="x")
        with pytest.raises(ValidationError):
            result.output = "y"

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError):
            HashResult(algorithm="SHA256", output="x", time_ms=-1.0)


class TestResultLog:

    def test_append_preserves_order(self):
        log = ResultLog()
        for i in range(3):
            log.append(HashResult(algorithm=str(i), output="x"))
        assert [r.algorithm for r in log] == ["0", "1", "2"]
        assert log.latest.algorithm == "2"
        assert len(log) == 3

    def test_empty(self):
        log = ResultLog()
        assert log.latest is None
        assert log.to_list() == []

    def test_to_list_is_json_ready(self):
        log = ResultLog()
        log.append(HashResult(
            algorithm="Argon2id", output="Error", error=ValidationReason.MISSING_SALT
        ))
        dumped = log.to_list()[0]
        assert dumped["error"] == "missing_salt"
        assert isinstance(dumped["created_at"], str)

    def test_no_removal_api(self):
        log = ResultLog()
        assert not hasattr(log, "remove")
        assert not hasattr(log, "clear")


class TestAggregator:

    @pytest.mark.parametrize("variant,label", [
        (Sha256Variant(), "SHA256"),
        (Sha512Variant(), "SHA512"),
        (Md5Variant(), "MD5"),
        (BCryptVariant(), "BCrypt (Cost: 10)"),
        (BCryptVariant(cost=2), "BCrypt (Cost: 4)"),
        (Argon2idVariant(), "Argon2id (Mem: 65536 KiB, Iter: 3, Par: 2)"),
        (
            Argon2idVariant(memory_kib=0, iterations=0, parallelism=0),
            "Argon2id (Mem: 8192 KiB, Iter: 1, Par: 1)",
        ),
    ])
    def test_labels(self, variant, label):
        assert algorithm_label(variant) == label

    def test_build(self):
        measurement = TimingMeasurement(output="abc", average_ms=0.5, samples=(500_000,))
        result = ResultAggregator().build(Sha256Variant(), measurement)
        assert result.algorithm == "SHA256"
        assert result.output == "abc"
        assert result.time_ms == 0.5
        assert not result.is_error

    def test_build_error(self):
        error = HashValidationError(ValidationReason.MISSING_SALT)
        result = ResultAggregator(error_token="Error").build_error(
            Argon2idVariant(), error, 0.001
        )
        assert result.output == "Error"
        assert result.error is ValidationReason.MISSING_SALT
        assert result.message == error.message
        assert result.is_error
