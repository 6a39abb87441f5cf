"""Shared fixtures for the HashBench test suite."""

import pytest

from shared.config import AppConfig
from hashbench.core.engine import HashBenchEngine
from hashbench.core.models import Argon2idVariant


@pytest.fixture
def config():
    """Default configuration with console logging switched off."""
    cfg = AppConfig()
    cfg.global_settings.console_logging = False
    return cfg


@pytest.fixture
def engine(config):
    eng = HashBenchEngine(config)
    yield eng
    eng.close()


@pytest.fixture
def light_argon2():
    """Cheapest Argon2id configuration that survives clamping unchanged."""
    return Argon2idVariant(memory_kib=8192, iterations=1, parallelism=1)


@pytest.fixture
def salt_b64():
    """Base64 of b"saltsalt" (8 bytes, the Argon2 minimum)."""
    return "c2FsdHNhbHQ="
