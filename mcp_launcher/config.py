"""Configuration management for mcp-launcher using Pydantic Settings.

Loads configuration from environment variables and YAML config files.
Config file locations:
  - Linux: ~/.config/mcp-launcher/config.yaml
  - macOS: ~/Library/Application Support/mcp-launcher/config.yaml
  - Windows: %LOCALAPPDATA%/mcp-launcher/config.yaml
"""

import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from platformdirs import user_config_dir


APP_NAME = "mcp-launcher"


def default_python_command() -> str:
    """Name of the Python interpreter executable on this platform."""
    return "python" if sys.platform == "win32" else "python3"


def default_config_path() -> Path:
    """Default location of the YAML config file."""
    return Path(user_config_dir(APP_NAME, appauthor=False)) / "config.yaml"


class LauncherConfig(BaseSettings):
    """Main configuration class for mcp-launcher.

    Configuration is loaded from:
    1. Constructor arguments, including values read by load_from_file (highest priority)
    2. MCP_LAUNCHER_* environment variables, then a .env file
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="MCP_LAUNCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Downstream server
    server_package: str = Field(
        default="cakemail-mcp-server",
        description="Package (and entry point) the runners start",
    )

    # Tool-chains
    primary_runner: str = Field(
        default="uvx",
        description="Executable probed and launched first",
    )

    secondary_runner: str = Field(
        default="pipx",
        description="Executable launched when the primary runner is missing",
    )

    secondary_run_args: list[str] = Field(
        default_factory=lambda: ["run"],
        description="Arguments placed between the secondary runner and the package",
    )

    python_command: str = Field(
        default_factory=default_python_command,
        description="Baseline Python interpreter used for diagnosis",
    )

    minimum_python: str = Field(
        default="3.11",
        description="Python version recommended in remediation messages",
    )

    probe_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for a '--version' probe before giving up",
    )

    # Application Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level for the launcher's own log records",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    config_path: Optional[Path] = Field(
        default=None,
        description="Custom config file path",
    )

    def __init__(self, **kwargs):
        """Initialize configuration with default paths."""
        super().__init__(**kwargs)

        if self.config_path is None:
            self.config_path = default_config_path()

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level

    @classmethod
    def load_from_file(cls, config_path: Optional[Path] = None) -> "LauncherConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Optional custom config file path

        Returns:
            LauncherConfig instance with loaded settings
        """
        import yaml

        if config_path is None:
            config_path = default_config_path()

        if config_path.exists():
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            data.setdefault("config_path", config_path)
            return cls(**data)

        return cls()
