"""Tests for Settings configuration model."""

from pathlib import Path

import pytest

from chatrelay.config import Settings


class TestDefaults:
    def test_default_port(self):
        s = Settings()
        assert s.port == 3000

    def test_default_model(self):
        s = Settings()
        assert s.default_model == "gpt-4o"

    def test_default_endpoint(self):
        s = Settings()
        assert s.llm_endpoint == "https://models.inference.ai.azure.com"

    def test_default_storage_backend(self):
        s = Settings()
        assert s.storage_backend == "sqlite"

    def test_default_database_path(self):
        s = Settings()
        assert s.database_path == Path("data/chat.db")

    def test_default_max_output_tokens(self):
        s = Settings()
        assert s.max_output_tokens == 1000

    def test_default_body_limit_is_50mb(self):
        s = Settings()
        assert s.max_body_bytes == 50 * 1024 * 1024

    def test_token_empty_by_default(self):
        s = Settings()
        assert s.github_token == ""


class TestOverrides:
    def test_port_override(self):
        s = Settings(port=8080)
        assert s.port == 8080

    def test_port_coerced_from_string(self):
        s = Settings(port="4000")
        assert s.port == 4000


class TestExtraForbidden:
    def test_unknown_env_var_raises(self):
        with pytest.raises(ValueError, match="extra_forbidden"):
            Settings(**{"nonexistent_field": "value"})
