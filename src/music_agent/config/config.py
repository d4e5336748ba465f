"""Configuration management for music-agent."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from music_agent.config.paths import default_config_path
from music_agent.config.settings import (
    DEFAULT_MODEL,
    DEFAULT_OLLAMA_URL,
    DEFAULT_REQUEST_TIMEOUT,
)
from music_agent.errors import ConfigError
from music_agent.platform.filesystem import write_text_file
from music_agent.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Ollama endpoint and model
    ollama_url: str = DEFAULT_OLLAMA_URL
    model: str = DEFAULT_MODEL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the path written."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        write_text_file(destination, self._render_toml(config_dict))
        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# music-agent configuration file")
        lines.append("")

        lines.append("# Base URL of the Ollama server")
        lines.append(f"ollama_url = {self._format_toml_value(config['ollama_url'])}")
        lines.append("")

        lines.append("# Model used for analysis and suggestions")
        lines.append(f"model = {self._format_toml_value(config['model'])}")
        lines.append("")

        lines.append("# Seconds to wait for a model response")
        lines.append(
            f"request_timeout = {self._format_toml_value(config['request_timeout'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/music_agent.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, validating value types."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {key: value for key, value in data.items() if key in known}

        for key in ("ollama_url", "model", "log_file"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"'{key}' must be a string")

        timeout = values.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("'request_timeout' must be a positive number")
        values["request_timeout"] = float(timeout)

        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. Results are cached per path.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {config_file}: {exc}") from exc
            except OSError as exc:
                raise ConfigError(f"Cannot read {config_file}: {exc}") from exc

            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            logger.debug("No configuration at %s; using defaults", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
