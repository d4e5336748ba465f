"""
Summary: Validate TOML configuration loading, validation and rendering.
Why: Model endpoint settings reach the client only through this layer.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from music_agent.config.config import Config
from music_agent.config.paths import ENV_CONFIG_PATH, default_config_path
from music_agent.errors import ConfigError


def test_missing_file_yields_defaults_without_writing(isolated_config: Path) -> None:
    config = Config.load()

    assert config.ollama_url == "http://localhost:11434"
    assert config.model == "llama3.2"
    assert config.request_timeout == 120.0
    assert config.log_file is None
    assert not isolated_config.exists()


def test_load_reads_toml_values(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        'ollama_url = "http://gpu-box:11434"\nmodel = "mistral"\nrequest_timeout = 30\nlog_file = "logs/agent.log"\n',
        encoding="utf-8",
    )

    config = Config.load()

    assert config.ollama_url == "http://gpu-box:11434"
    assert config.model == "mistral"
    assert config.request_timeout == 30.0
    assert config.log_file == Path("logs/agent.log")


def test_load_is_cached_per_path(isolated_config: Path) -> None:
    first = Config.load()
    assert Config.load() is first


def test_invalid_toml_raises_config_error(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("model = [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load()


@pytest.mark.parametrize(
    "content",
    ["model = 3\n", "request_timeout = -1\n", 'request_timeout = "fast"\n', "request_timeout = true\n"],
)
def test_wrong_value_types_raise_config_error(isolated_config: Path, content: str) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load()


def test_unknown_keys_are_ignored_with_warning(
    isolated_config: Path, caplog: pytest.LogCaptureFixture
) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('colour = "blue"\nmodel = "phi3"\n', encoding="utf-8")

    caplog.set_level("WARNING")
    config = Config.load()

    assert config.model == "phi3"
    assert any("colour" in message for message in caplog.messages)


def test_save_then_load_round_trip(isolated_config: Path) -> None:
    original = Config(
        ollama_url="http://example:11434",
        model='quoted "model"',
        request_timeout=45.5,
        log_file=Path("/var/log/music_agent.log"),
    )

    written = original.save()
    Config.reset()

    assert written == isolated_config.resolve()
    assert "# Base URL of the Ollama server" in written.read_text(encoding="utf-8")
    assert Config.load() == original


def test_default_config_path_honours_env_override(tmp_path: Path) -> None:
    override = tmp_path / "custom.toml"

    assert default_config_path({ENV_CONFIG_PATH: str(override)}) == override.resolve()
    assert default_config_path({ENV_CONFIG_PATH: "   "}).name == "config.toml"
