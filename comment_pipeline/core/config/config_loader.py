"""
Configuration Loader
Loads and validates YAML configuration files
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig

API_KEY_ENV_VAR = "YOUTUBE_API_KEY"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate all required fields
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()

        return AppConfig(
            api_key=self._validate_api_key(config_data),
            video=self._validate_video(config_data),
            max_results=self._validate_max_results(config_data),
            max_pages=self._validate_max_pages(config_data),
            storage_root=self._validate_storage_root(config_data)
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                raise ConfigValidationError("Configuration file is empty")

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Validate api_key field, falling back to the environment."""
        api_key = config.get("api_key")

        if api_key is None:
            api_key = os.environ.get(API_KEY_ENV_VAR)
            if api_key is None:
                raise ConfigValidationError(
                    f"Missing required field: 'api_key' (or set {API_KEY_ENV_VAR})"
                )

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            raise ConfigValidationError("Field 'api_key' cannot be empty")

        return api_key.strip()

    def _validate_video(self, config: Dict[str, Any]) -> Optional[str]:
        """Validate video field (optional, may be given on the command line)."""
        video = config.get("video")

        if video is None:
            return None

        if not isinstance(video, str):
            raise ConfigValidationError(
                f"Field 'video' must be a string, got {type(video).__name__}"
            )

        if not video.strip():
            raise ConfigValidationError("Field 'video' cannot be empty")

        return video.strip()

    def _validate_max_results(self, config: Dict[str, Any]) -> int:
        """Validate max_results field (page size)."""
        if "max_results" not in config:
            return 100

        max_results = config["max_results"]

        # bool is a subclass of int
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise ConfigValidationError(
                f"Field 'max_results' must be an integer, got {type(max_results).__name__}"
            )

        if not (1 <= max_results <= 100):
            raise ConfigValidationError(
                f"Field 'max_results' must be between 1 and 100, got {max_results}"
            )

        return max_results

    def _validate_max_pages(self, config: Dict[str, Any]) -> Optional[int]:
        """Validate max_pages field (optional)."""
        if "max_pages" not in config:
            return None

        max_pages = config["max_pages"]

        # None/null is valid
        if max_pages is None:
            return None

        if isinstance(max_pages, bool) or not isinstance(max_pages, int):
            raise ConfigValidationError(
                f"Field 'max_pages' must be an integer or null, got {type(max_pages).__name__}"
            )

        if max_pages <= 0:
            raise ConfigValidationError(
                f"Field 'max_pages' must be greater than 0 or null, got {max_pages}"
            )

        return max_pages

    def _validate_storage_root(self, config: Dict[str, Any]) -> str:
        """Validate storage section."""
        default_root = "./storage"

        storage = config.get("storage")
        if not isinstance(storage, dict):
            return default_root

        root = storage.get("root", default_root)
        if not isinstance(root, str):
            raise ConfigValidationError(f"storage.root must be string, got {type(root).__name__}")

        return root.strip()
