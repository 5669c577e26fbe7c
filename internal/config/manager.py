"""
Configuration management for LINE bot client.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

import lib.utils as utils
from lib.line_bot import ClientConfig, ConfigurationError
from lib.line_bot.constants import API_ORIGIN, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

PLACEHOLDER_TOKENS = ("", "YOUR_CHANNEL_ACCESS_TOKEN_HERE")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholders with actual values.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Strings get placeholders replaced, dicts and lists are processed item by
    item, everything else is returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Loads TOML configuration for the LINE client and CLI, dood!

    Example config.toml:

        [line]
        access-token = "${LINE_CHANNEL_ACCESS_TOKEN}"
        channel-secret = "${LINE_CHANNEL_SECRET}"
        timeout = 30

        [logging]
        level = "INFO"
        console = true
    """

    def __init__(
        self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None, dotEnvFile: str = ".env"
    ):
        """Initialize ConfigManager with config file path and optional config directories.

        Raises:
            ConfigurationError: If no configuration can be loaded or access token is missing
        """
        self.config_path = configPath
        self.config_dirs = configDirs or []
        utils.load_dotenv(path=dotEnvFile)
        self.config = substituteEnvVars(self._loadConfig())
        self._validate()

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory, dood!"""
        toml_files = []
        dir_path = Path(directory)

        if not dir_path.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping, dood!")
            return toml_files

        if not dir_path.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping, dood!")
            return toml_files

        try:
            for toml_file in dir_path.rglob("*.toml"):
                if toml_file.is_file():
                    toml_files.append(toml_file)
                    logger.debug(f"Found config file: {toml_file}")
        except OSError as e:
            logger.error(f"Error scanning directory {directory}: {e}")

        return sorted(toml_files)  # Sort for consistent ordering

    def _mergeConfigs(self, base_config: Dict[str, Any], new_config: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries, dood!"""
        merged = base_config.copy()

        for key, value in new_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file and optional config directories.

        Files found in config directories are merged over the main file in
        sorted path order, later files win. Broken files in config directories
        are logged and skipped, broken main file is an error.
        """
        config_file = Path(self.config_path)
        hasConfigFile = config_file.exists()
        if not hasConfigFile and not self.config_dirs:
            logger.error(f"Configuration file {self.config_path} not found!")
            raise ConfigurationError(f"Configuration file {self.config_path} not found")

        config: Dict[str, Any] = {}
        if hasConfigFile:
            try:
                with open(config_file, "rb") as f:
                    config = tomli.load(f)
            except (OSError, tomli.TOMLDecodeError) as e:
                logger.error(f"Failed to load configuration: {e}")
                raise ConfigurationError(f"Failed to load configuration from {self.config_path}: {e}") from e
            logger.info(f"Loaded main config from {self.config_path}")

        if self.config_dirs:
            logger.info(f"Scanning {len(self.config_dirs)} config directories for .toml files, dood!")

            for config_dir in self.config_dirs:
                toml_files = self._findTomlFilesRecursive(config_dir)
                logger.info(f"Found {len(toml_files)} .toml files in {config_dir}")

                for toml_file in toml_files:
                    try:
                        with open(toml_file, "rb") as f:
                            dir_config = tomli.load(f)
                    except (OSError, tomli.TOMLDecodeError) as e:
                        logger.error(f"Failed to load config file {toml_file}: {e}")
                        continue

                    config = self._mergeConfigs(config, dir_config)
                    logger.info(f"Merged config from {toml_file}")

        logger.info("Configuration loaded and merged successfully, dood!")
        return config

    def _validate(self) -> None:
        token = self.getLineConfig().get("access-token", "")
        if not isinstance(token, str) or token.strip() in PLACEHOLDER_TOKENS or token.strip().startswith("${"):
            logger.error("LINE channel access token not found in configuration!")
            raise ConfigurationError("LINE channel access token (line.access-token) is not configured")

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLineConfig(self) -> Dict[str, Any]:
        """Get ``[line]`` section."""
        return self.get("line", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getClientConfig(self) -> ClientConfig:
        """
        Build LINE client settings from ``[line]`` section.

        Returns:
            ClientConfig with access token, channel secret, origin and timeout.
            Request observer is left at default (debug logging).

        Raises:
            ConfigurationError: If timeout is not a number
        """
        lineConfig = self.getLineConfig()
        timeout = lineConfig.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigurationError(f"line.timeout must be a number, got {timeout!r}")

        return ClientConfig(
            accessToken=lineConfig["access-token"].strip(),
            channelSecret=lineConfig.get("channel-secret") or None,
            origin=lineConfig.get("origin") or API_ORIGIN,
            timeout=float(timeout),
        )
