"""Configuration file for ansi-truncate.

The file is YAML with the TruncationConfig fields as top-level keys::

    length: 30
    omission: "…"
    position: end
    separator: null
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ansi_truncate.models.config import TruncationConfig
from ansi_truncate.utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = "config.yaml"


def default_config_path() -> Path:
    """Config file under $XDG_CONFIG_HOME (or ~/.config)."""
    config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return config_home / "ansi-truncate" / CONFIG_FILE_NAME


class ConfigStorage:
    """Reads and writes the truncation defaults."""

    def __init__(self, config_path: Path | str | None = None):
        """Initialize config storage.

        Args:
            config_path: Custom config file path.
        """
        self.config_path = Path(config_path).expanduser() if config_path else default_config_path()
        self._config: TruncationConfig | None = None

    @property
    def exists(self) -> bool:
        """Whether the config file is present."""
        return self.config_path.is_file()

    def _read(self) -> dict[str, Any]:
        with open(self.config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        return data

    def load(self) -> TruncationConfig:
        """Load configuration, falling back to defaults.

        A missing file gives the defaults silently; an unreadable or invalid
        one is logged and also gives the defaults.

        Returns:
            TruncationConfig object.
        """
        if self._config is not None:
            return self._config

        config = TruncationConfig()
        if self.exists:
            try:
                config = TruncationConfig(**self._read())
            except (OSError, TypeError, yaml.YAMLError, ValidationError) as e:
                logger.warning(f"Ignoring invalid config {self.config_path}: {e}")
            else:
                logger.debug(f"Loaded config from {self.config_path}")

        self._config = config
        return config

    def save(self, config: TruncationConfig | None = None) -> None:
        """Write configuration to the file.

        Args:
            config: Config to save. Uses the loaded config if not provided.
        """
        if config is not None:
            self._config = config
        data = (self._config or TruncationConfig()).model_dump(mode="json")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def reset(self) -> TruncationConfig:
        """Write and return the default configuration."""
        self._config = TruncationConfig()
        self.save()
        return self._config
