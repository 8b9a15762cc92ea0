"""Configuration loading and validation for intake runs.

Implements a hierarchical configuration system with the following precedence:
1. Default values (lowest priority)
2. JSON configuration file (config/zoo.json)
3. Environment variables
4. Command-line arguments (highest priority)

Configuration is deep-merged across all sources, allowing partial overrides
at any level of the configuration hierarchy.
"""
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class PathsConfig:
    """Input and output locations.

    Attributes:
        names_path: Name-pool file
        arrivals_path: Arrivals log
        report_path: Text report destination
        excel_path: Optional workbook destination; no workbook when None
    """
    names_path: str = "data/animalNames.txt"
    arrivals_path: str = "data/arrivingAnimals.txt"
    report_path: str = "zooPopulation.txt"
    excel_path: Optional[str] = None

    def __post_init__(self):
        for name in ("names_path", "arrivals_path", "report_path"):
            if not str(getattr(self, name)).strip():
                raise ConfigurationError(f"{name} must not be empty")


@dataclass(frozen=True)
class LoggingConfig:
    """Run log settings.

    Attributes:
        session_log_dir: Directory for per-run log files
        session_log_enabled: Write a per-run log file
    """
    session_log_dir: str = "logs/sessions"
    session_log_enabled: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    paths: PathsConfig
    logging: LoggingConfig
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")


class ConfigLoader:
    """Configuration loader applying defaults → file → env → CLI."""

    CONFIG_FILE = "zoo.json"

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)
        """
        config_dict = self._get_defaults()

        self._deep_update(config_dict, self._load_json_config())
        self._deep_update(config_dict, self._load_env_overrides())

        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)

        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            "paths": {
                "names_path": "data/animalNames.txt",
                "arrivals_path": "data/arrivingAnimals.txt",
                "report_path": "zooPopulation.txt",
                "excel_path": None,
            },
            "logging": {
                "session_log_dir": "logs/sessions",
                "session_log_enabled": False,
            },
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_config(self) -> Dict[str, Any]:
        """Load the optional JSON configuration file.

        Raises:
            ConfigurationError: If the file exists but is not a JSON object
        """
        file_path = self.config_dir / self.CONFIG_FILE
        if not file_path.exists():
            return {}
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(f"Failed to load {file_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{file_path} must contain a JSON object")
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables.

        Supported environment variables:
        - ZOO_NAMES_PATH, ZOO_ARRIVALS_PATH, ZOO_REPORT_PATH, ZOO_EXCEL_PATH
        - ZOO_SESSION_LOG: Enable the per-run log file
        - DEBUG: Enable debug mode
        - LOG_LEVEL: Set logging level
        """
        overrides: Dict[str, Any] = {}

        env_paths = {
            "ZOO_NAMES_PATH": "names_path",
            "ZOO_ARRIVALS_PATH": "arrivals_path",
            "ZOO_REPORT_PATH": "report_path",
            "ZOO_EXCEL_PATH": "excel_path",
        }
        for env_name, key in env_paths.items():
            value = os.getenv(env_name)
            if value:
                overrides.setdefault("paths", {})[key] = value

        if self._env_bool("ZOO_SESSION_LOG"):
            overrides.setdefault("logging", {})["session_log_enabled"] = True

        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        parser = argparse.ArgumentParser(description="Zoo arrivals population report")

        parser.add_argument("--names", help="Name-pool file")
        parser.add_argument("--arrivals", help="Arrivals log file")
        parser.add_argument("--report", help="Report output file")
        parser.add_argument("--excel", help="Also export the population to this .xlsx file")
        parser.add_argument(
            "--session-log",
            action="store_true",
            help="Write a per-run log file"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug mode"
        )
        parser.add_argument(
            "--log-level",
            choices=list(LOG_LEVELS),
            help="Set logging level"
        )

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        cli_paths = {
            "names_path": known.names,
            "arrivals_path": known.arrivals,
            "report_path": known.report,
            "excel_path": known.excel,
        }
        for key, value in cli_paths.items():
            if value:
                overrides.setdefault("paths", {})[key] = value
        if known.session_log:
            overrides.setdefault("logging", {})["session_log_enabled"] = True
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build and validate the final configuration object.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            paths_config = PathsConfig(**config_dict.get("paths", {}))
            logging_config = LoggingConfig(**config_dict.get("logging", {}))
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

        log_level = config_dict.get("log_level", "INFO")
        if config_dict.get("debug", False) and log_level == "INFO":
            log_level = "DEBUG"

        return AppConfig(
            paths=paths_config,
            logging=logging_config,
            debug=config_dict.get("debug", False),
            log_level=log_level,
        )

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """Parse boolean from environment variable ("1", "true", "yes", "y", "on")."""
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively update mapping 'target' with 'updates' without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)  # type: ignore[index]
            else:
                target[key] = new_val


__all__ = ["AppConfig", "PathsConfig", "LoggingConfig", "ConfigLoader", "LOG_LEVELS"]
