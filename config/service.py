"""Configuration service facade for simplified configuration access.

Provides flat properties over the nested AppConfig so callers write
``config_service.report_path`` instead of ``config.paths.report_path``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from config.config import AppConfig, ConfigLoader


class ConfigurationService:
    """Facade for application configuration.

    Example:
        config_service = ConfigurationService(config)
        config_service.arrivals_path  # Instead of config.paths.arrivals_path
    """

    def __init__(self, config: AppConfig):
        self._config = config

    # Paths
    @property
    def names_path(self) -> str:
        return self._config.paths.names_path

    @property
    def arrivals_path(self) -> str:
        return self._config.paths.arrivals_path

    @property
    def report_path(self) -> str:
        return self._config.paths.report_path

    @property
    def excel_path(self) -> Optional[str]:
        return self._config.paths.excel_path

    @property
    def excel_enabled(self) -> bool:
        return bool(self._config.paths.excel_path)

    # Logging
    @property
    def session_log_dir(self) -> str:
        return self._config.logging.session_log_dir

    @property
    def session_log_enabled(self) -> bool:
        return self._config.logging.session_log_enabled

    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def log_level(self) -> str:
        return self._config.log_level

    @property
    def raw_config(self) -> AppConfig:
        """Underlying AppConfig instance."""
        return self._config

    def to_dict(self) -> dict[str, Any]:
        """Dictionary form of the configuration, for the run log."""
        return {
            "paths": {
                "names_path": self.names_path,
                "arrivals_path": self.arrivals_path,
                "report_path": self.report_path,
                "excel_path": self.excel_path,
            },
            "logging": {
                "session_log_dir": self.session_log_dir,
                "session_log_enabled": self.session_log_enabled,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


class ConfigurationServiceFactory:
    """Static factory methods for ConfigurationService."""

    @staticmethod
    def create_from_args(args: list[str], config_dir: Optional[Path] = None) -> tuple[ConfigurationService, list[str]]:
        """Create configuration service from command-line arguments.

        Returns:
            Tuple of (ConfigurationService, unknown_args)
        """
        loader = ConfigLoader(config_dir) if config_dir is not None else ConfigLoader()
        config, unknown_args = loader.load(args)
        return ConfigurationService(config), unknown_args
