"""
Tests for TOML configuration loading and the structured logger.
"""

import json
import logging
from pathlib import Path

import pytest

from shared.config import AppConfig, GlobalConfig, HashBenchConfig, get_config
from shared.logger import BenchLogger

EXAMPLE = Path(__file__).resolve().parent.parent / "config.example.toml"


class TestAppConfig:

    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.hashbench.timing_iterations == 10
        assert cfg.hashbench.bcrypt_cost == 10
        assert cfg.hashbench.argon2_memory == "65536"
        assert cfg.hashbench.argon2_iterations == "3"
        assert cfg.hashbench.argon2_parallelism == "2"
        assert cfg.hashbench.salt_placeholder == "Optional salt (base64 or text)"

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text('[hashbench]\nargon2_memory = "19456"\nbogus = 1\n', encoding="utf-8")
        cfg = AppConfig.load(path)
        assert cfg.hashbench.argon2_memory == "19456"
        assert cfg.hashbench.timing_iterations == 10
        assert cfg.global_settings == GlobalConfig()

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load(tmp_path / "absent.toml")

    def test_example_file_loads(self):
        cfg = AppConfig.load(EXAMPLE)
        assert cfg.hashbench == HashBenchConfig()

    def test_to_dict(self):
        data = AppConfig().to_dict()
        assert data["hashbench"]["error_token"] == "Error"

    def test_get_config_caches(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text("[hashbench]\nbcrypt_cost = 6\n", encoding="utf-8")
        first = get_config(path)
        assert get_config() is first
        assert first.hashbench.bcrypt_cost == 6


class TestBenchLogger:

    def test_json_file_logging(self, tmp_path):
        log_file = tmp_path / "bench.log"
        log = BenchLogger(
            "test", log_file=log_file, json_logs=True, console_output=False
        )
        with log.operation("sha256"):
            log.info("done", algorithm="SHA256")
        for handler in logging.getLogger("hashbench.test").handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "done"
        assert entry["operation"] == "sha256"
        assert entry["tool_name"] == "test"
        assert entry["extra"] == {"algorithm": "SHA256"}

    def test_from_config_debug(self):
        log = BenchLogger.from_config(
            "cfg", GlobalConfig(debug=True, console_logging=False)
        )
        assert logging.getLogger("hashbench.cfg").level == logging.DEBUG

    def test_operation_restored(self):
        log = BenchLogger("ops", console_output=False)
        with log.operation("outer"):
            with log.operation("inner"):
                pass
            assert log._operation == "outer"
        assert log._operation is None
