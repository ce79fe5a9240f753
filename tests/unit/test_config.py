"""Tests for tutor.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from tutor.config import TutorConfig, default_workspace_root


class TestTutorConfigFromEnv:
    def test_defaults(self):
        config = TutorConfig.from_env({})
        assert config.provider == "ollama"
        assert config.model == "qwen2.5-coder:7b"
        assert config.base_url == "http://localhost:11434"
        assert config.workspace_root == default_workspace_root()
        assert config.timeout is None
        assert config.max_tokens == 7000

    def test_ollama_overrides(self):
        config = TutorConfig.from_env(
            {"OLLAMA_URL": "http://gpu:11434", "OLLAMA_MODEL": "llama3"}
        )
        assert config.base_url == "http://gpu:11434"
        assert config.model == "llama3"

    def test_other_provider_uses_tutor_model(self):
        config = TutorConfig.from_env({"TUTOR_PROVIDER": "Claude", "OLLAMA_MODEL": "llama3"})
        assert config.provider == "claude"
        assert config.model == ""

    def test_workspace_and_timeout(self, tmp_path):
        config = TutorConfig.from_env(
            {"TUTOR_WORKSPACE": str(tmp_path), "TUTOR_TIMEOUT": "2.5"}
        )
        assert config.workspace_root == Path(tmp_path)
        assert config.timeout == 2.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-3"])
    def test_invalid_timeout(self, raw):
        with pytest.raises(ValueError, match="TUTOR_TIMEOUT"):
            TutorConfig.from_env({"TUTOR_TIMEOUT": raw})

    def test_default_workspace_dirname(self):
        assert default_workspace_root().name == "cursed-coddy"
