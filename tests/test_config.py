from pathlib import Path

import pytest
from pydantic import ValidationError

from convo_bridge.config import LLMConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test away from any real .env file or OLLAMA_ variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("OLLAMA_HOST", "OLLAMA_MODEL", "OLLAMA_API_KEY", "OLLAMA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestLLMConfig:
    """Test LLMConfig settings."""

    def test_defaults(self) -> None:
        """Defaults point at a local Ollama server."""
        config = LLMConfig()

        assert config.host == "http://localhost:11434/v1"
        assert config.model == "qwen2.5:latest"
        assert config.api_key == "ollama"
        assert config.timeout == 120.0

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """OLLAMA_ variables override the defaults."""
        monkeypatch.setenv("OLLAMA_HOST", "http://gpu-box:11434/v1")
        monkeypatch.setenv("OLLAMA_MODEL", "llama3")
        monkeypatch.setenv("OLLAMA_TIMEOUT", "30")

        config = LLMConfig()

        assert config.host == "http://gpu-box:11434/v1"
        assert config.model == "llama3"
        assert config.timeout == 30.0

    def test_dotenv_file(self, tmp_path: Path) -> None:
        """Settings are read from a .env file in the working directory."""
        (tmp_path / ".env").write_text("OLLAMA_MODEL=mistral\nUNRELATED=1\n")

        assert LLMConfig().model == "mistral"

    def test_timeout_must_be_positive(self) -> None:
        """A zero timeout is rejected."""
        with pytest.raises(ValidationError):
            LLMConfig(timeout=0)
