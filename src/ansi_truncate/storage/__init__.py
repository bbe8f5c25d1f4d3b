"""Storage module for ansi-truncate."""

from ansi_truncate.storage.config import ConfigStorage, default_config_path

__all__ = ["ConfigStorage", "default_config_path"]
