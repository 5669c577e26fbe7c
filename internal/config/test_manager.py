"""
Comprehensive tests for the Configuration Manager.

This module provides test coverage for the ConfigManager class,
testing configuration loading, merging, validation, env substitution
and building of LINE client settings.
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from internal.config.manager import ConfigManager, substituteEnvVars
from lib.line_bot import ClientConfig, ConfigurationError
from lib.line_bot.constants import API_ORIGIN

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sampleConfigToml():
    """Provide sample valid TOML configuration."""
    return """
[line]
access-token = "test_access_token_123"
channel-secret = "test_secret"

[logging]
level = "INFO"
"""


@pytest.fixture
def defaultsToml():
    """Provide default configuration TOML."""
    return """
[line]
access-token = "default_token"
timeout = 10

[logging]
level = "WARNING"
console = true
"""


@pytest.fixture
def invalidSyntaxToml():
    """Provide invalid TOML syntax."""
    return """
[line
access-token = "missing_bracket"
"""


@pytest.fixture
def missingTokenToml():
    """Provide TOML missing required access token."""
    return """
[line]
channel-secret = "secret"

[logging]
level = "INFO"
"""


# ============================================================================
# Helper Functions
# ============================================================================


def createConfigFile(directory: Path, filename: str, content: str) -> Path:
    """Create a TOML config file in the specified directory."""
    filePath = directory / filename
    filePath.write_text(content)
    return filePath


def createConfigDir(baseDir: Path, dirName: str, files: dict) -> Path:
    """Create a config directory with multiple TOML files."""
    configDir = baseDir / dirName
    configDir.mkdir(parents=True, exist_ok=True)

    for filename, content in files.items():
        createConfigFile(configDir, filename, content)

    return configDir


def createManager(tempDir: Path, configPath: Path, **kwargs) -> ConfigManager:
    """Create manager with dotenv file isolated in temp dir."""
    return ConfigManager(str(configPath), dotEnvFile=str(tempDir / ".env"), **kwargs)


# ============================================================================
# Initialization Tests
# ============================================================================


class TestConfigManagerInitialization:
    """Test ConfigManager initialization."""

    def testInitWithValidConfig(self, tempDir, sampleConfigToml):
        """Test initialization with valid configuration file."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)

        manager = createManager(tempDir, configPath)

        assert manager.config_path == str(configPath)
        assert manager.config["line"]["access-token"] == "test_access_token_123"

    def testInitWithoutConfigFile(self, tempDir, defaultsToml):
        """Test initialization without main config file but with config dirs."""
        configDir = createConfigDir(tempDir, "defaults", {"defaults.toml": defaultsToml})

        manager = createManager(tempDir, tempDir / "nonexistent.toml", configDirs=[str(configDir)])

        assert manager.config["line"]["access-token"] == "default_token"

    def testInitWithNonExistentConfigAndNoDirs(self, tempDir):
        """Test initialization fails when config file doesn't exist and no dirs provided."""
        with pytest.raises(ConfigurationError):
            createManager(tempDir, tempDir / "nonexistent.toml")


# ============================================================================
# Loading and Merging Tests
# ============================================================================


class TestConfigurationLoading:
    """Test configuration loading and merging."""

    def testConfigDirsOverrideMainConfig(self, tempDir, sampleConfigToml, defaultsToml):
        """Test config dirs are merged over main config."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(tempDir, "defaults", {"defaults.toml": defaultsToml})

        manager = createManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.config["line"]["access-token"] == "default_token"
        # Values only in main config are preserved
        assert manager.config["line"]["channel-secret"] == "test_secret"
        assert manager.config["line"]["timeout"] == 10
        assert manager.config["logging"] == {"level": "WARNING", "console": True}

    def testMergeOrderIsSorted(self, tempDir, sampleConfigToml):
        """Test files in config dir are applied in sorted order."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(
            tempDir,
            "configs",
            {
                "01-second.toml": '[line]\norigin = "http://second"\n',
                "00-first.toml": '[line]\norigin = "http://first"\n',
            },
        )

        manager = createManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.getLineConfig()["origin"] == "http://second"

    def testRecursiveConfigDiscovery(self, tempDir, sampleConfigToml):
        """Test nested directories are scanned."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(tempDir, "configs", {})
        createConfigDir(configDir, "nested/deeper", {"extra.toml": "[line]\ntimeout = 5\n"})

        manager = createManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.getLineConfig()["timeout"] == 5

    def testInvalidTomlSyntax(self, tempDir, invalidSyntaxToml):
        """Test broken main config raises ConfigurationError."""
        configPath = createConfigFile(tempDir, "config.toml", invalidSyntaxToml)

        with pytest.raises(ConfigurationError):
            createManager(tempDir, configPath)

    def testInvalidTomlInConfigDir(self, tempDir, sampleConfigToml, invalidSyntaxToml):
        """Test broken file in config directory is skipped."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        configDir = createConfigDir(tempDir, "configs", {"invalid.toml": invalidSyntaxToml})

        manager = createManager(tempDir, configPath, configDirs=[str(configDir)])

        assert manager.config["line"]["access-token"] == "test_access_token_123"

    def testNonExistentConfigDirectory(self, tempDir, sampleConfigToml):
        """Test non-existent and non-directory config dirs are skipped."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        filePath = createConfigFile(tempDir, "notadir.txt", "content")

        manager = createManager(tempDir, configPath, configDirs=[str(tempDir / "nonexistent"), str(filePath)])

        assert manager.config["line"]["access-token"] == "test_access_token_123"


# ============================================================================
# Validation Tests
# ============================================================================


class TestConfigurationValidation:
    """Test access token validation."""

    def testMissingAccessToken(self, tempDir, missingTokenToml):
        """Test missing access token raises ConfigurationError."""
        configPath = createConfigFile(tempDir, "config.toml", missingTokenToml)

        with pytest.raises(ConfigurationError):
            createManager(tempDir, configPath)

    @pytest.mark.parametrize("token", ["", "   ", "YOUR_CHANNEL_ACCESS_TOKEN_HERE", "${LINE_TEST_UNSET_TOKEN}"])
    def testPlaceholderAccessToken(self, tempDir, token):
        """Test empty, placeholder and unresolved tokens are rejected."""
        configPath = createConfigFile(tempDir, "config.toml", f'[line]\naccess-token = "{token}"\n')

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LINE_TEST_UNSET_TOKEN", None)
            with pytest.raises(ConfigurationError):
                createManager(tempDir, configPath)


# ============================================================================
# Environment Substitution Tests
# ============================================================================


class TestEnvSubstitution:
    """Test ${VAR} substitution."""

    def testSubstituteEnvVarsRecursive(self):
        """Test strings in nested dicts and lists are substituted."""
        with patch.dict(os.environ, {"LINE_TEST_VALUE": "abc"}):
            result = substituteEnvVars({"a": "${LINE_TEST_VALUE}", "b": ["x-${LINE_TEST_VALUE}", 1], "c": 2})

        assert result == {"a": "abc", "b": ["x-abc", 1], "c": 2}

    def testUnknownVariableKept(self):
        """Test unknown variables are left as is."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LINE_TEST_UNKNOWN", None)
            assert substituteEnvVars("${LINE_TEST_UNKNOWN}") == "${LINE_TEST_UNKNOWN}"

    def testTokenFromEnvironment(self, tempDir):
        """Test access token resolved from environment."""
        configPath = createConfigFile(tempDir, "config.toml", '[line]\naccess-token = "${LINE_TEST_TOKEN}"\n')

        with patch.dict(os.environ, {"LINE_TEST_TOKEN": "env_token"}):
            manager = createManager(tempDir, configPath)

        assert manager.getClientConfig().accessToken == "env_token"

    def testTokenFromDotEnv(self, tempDir):
        """Test access token resolved from dotenv file."""
        configPath = createConfigFile(tempDir, "config.toml", '[line]\naccess-token = "${LINE_TEST_DOTENV_TOKEN}"\n')
        (tempDir / ".env").write_text("LINE_TEST_DOTENV_TOKEN=dotenv_token\n")

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LINE_TEST_DOTENV_TOKEN", None)
            manager = createManager(tempDir, configPath)

        assert manager.getClientConfig().accessToken == "dotenv_token"


# ============================================================================
# Getter Tests
# ============================================================================


class TestGetterMethods:
    """Test configuration accessors."""

    def testGet(self, tempDir, sampleConfigToml):
        """Test generic get with default."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        manager = createManager(tempDir, configPath)

        assert manager.get("line")["channel-secret"] == "test_secret"
        assert manager.get("nonexistent", "default") == "default"

    def testGetLoggingConfig(self, tempDir, sampleConfigToml):
        """Test logging section accessor."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        manager = createManager(tempDir, configPath)

        assert manager.getLoggingConfig() == {"level": "INFO"}

    def testGetLoggingConfigEmpty(self, tempDir):
        """Test logging section defaults to empty dict."""
        configPath = createConfigFile(tempDir, "config.toml", '[line]\naccess-token = "t"\n')
        manager = createManager(tempDir, configPath)

        assert manager.getLoggingConfig() == {}

    def testGetClientConfigDefaults(self, tempDir, sampleConfigToml):
        """Test client config built with defaults."""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        manager = createManager(tempDir, configPath)

        clientConfig = manager.getClientConfig()

        assert isinstance(clientConfig, ClientConfig)
        assert clientConfig.accessToken == "test_access_token_123"
        assert clientConfig.channelSecret == "test_secret"
        assert clientConfig.origin == API_ORIGIN
        assert clientConfig.timeout == 30.0

    def testGetClientConfigCustom(self, tempDir):
        """Test client config with origin and timeout set."""
        configPath = createConfigFile(
            tempDir,
            "config.toml",
            '[line]\naccess-token = " tok "\norigin = "http://localhost:8080"\ntimeout = 5\n',
        )
        manager = createManager(tempDir, configPath)

        clientConfig = manager.getClientConfig()

        assert clientConfig.accessToken == "tok"
        assert clientConfig.channelSecret is None
        assert clientConfig.origin == "http://localhost:8080"
        assert clientConfig.timeout == 5.0

    def testGetClientConfigInvalidTimeout(self, tempDir):
        """Test non-numeric timeout is rejected."""
        configPath = createConfigFile(tempDir, "config.toml", '[line]\naccess-token = "t"\ntimeout = "soon"\n')
        manager = createManager(tempDir, configPath)

        with pytest.raises(ConfigurationError):
            manager.getClientConfig()
