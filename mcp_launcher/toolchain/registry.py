"""Registry of runner tool-chains known to the launcher.

Defines tool-chain metadata, roles, and installation hints.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from mcp_launcher.config import LauncherConfig


UV_INSTALL_COMMAND = "curl -LsSf https://astral.sh/uv/install.sh | sh"
PYTHON_DOWNLOAD_URL = "https://www.python.org/downloads/"


class ToolchainRole(str, Enum):
    """Position of a tool-chain in the fallback protocol."""

    PRIMARY = "primary"       # Probed, then launched
    SECONDARY = "secondary"   # Launched directly, failure seen at spawn time
    RUNTIME = "runtime"       # Baseline runtime, only probed for diagnosis


@dataclass
class ToolchainInfo:
    """Information about a runner tool-chain.

    Contains metadata for probing, launching, and installation advice.
    """

    name: str
    description: str
    role: ToolchainRole
    command: str                                        # Executable name on PATH
    version_arg: str = "--version"                      # Argument for probing
    run_prefix: list[str] = field(default_factory=list)  # Args placed before forwarded ones
    install_hint: Optional[str] = None                  # Shell command that installs it
    install_url: Optional[str] = None                   # Manual installation URL

    def build_args(self, forwarded: Sequence[str]) -> list[str]:
        """Build the full argument list for a real run.

        Args:
            forwarded: Arguments given to the launcher, passed through as-is.

        Returns:
            The run prefix followed by every forwarded argument.
        """
        return [*self.run_prefix, *forwarded]


class ToolchainRegistry:
    """Registry of runner tool-chains.

    Example:
        registry = ToolchainRegistry.from_config(LauncherConfig())
        primary = registry.get_by_role(ToolchainRole.PRIMARY)
        args = primary.build_args(["--port", "9000"])
    """

    def __init__(self):
        self._toolchains: dict[str, ToolchainInfo] = {}

    @classmethod
    def from_config(cls, config: LauncherConfig) -> "ToolchainRegistry":
        """Build the default uvx / pipx / python registry for a config.

        Args:
            config: Launcher configuration.

        Returns:
            Registry with one tool-chain per role.
        """
        registry = cls()
        package = config.server_package

        registry.register(ToolchainInfo(
            name="uvx",
            description="Run the server in an ephemeral uv environment (recommended)",
            role=ToolchainRole.PRIMARY,
            command=config.primary_runner,
            run_prefix=[package],
            install_hint=UV_INSTALL_COMMAND,
        ))

        registry.register(ToolchainInfo(
            name="pipx",
            description="Run the server in an isolated pipx environment",
            role=ToolchainRole.SECONDARY,
            command=config.secondary_runner,
            run_prefix=[*config.secondary_run_args, package],
            install_hint=f"pip install {package}",
        ))

        registry.register(ToolchainInfo(
            name="python",
            description=f"Python {config.minimum_python}+ interpreter",
            role=ToolchainRole.RUNTIME,
            command=config.python_command,
            install_url=PYTHON_DOWNLOAD_URL,
        ))

        return registry

    def register(self, toolchain: ToolchainInfo) -> None:
        """Register a tool-chain, replacing any with the same name.

        Args:
            toolchain: Tool-chain information to register.
        """
        self._toolchains[toolchain.name.lower()] = toolchain

    def get_by_role(self, role: ToolchainRole) -> Optional[ToolchainInfo]:
        """Get the first tool-chain registered for a role.

        Args:
            role: Fallback protocol role.

        Returns:
            ToolchainInfo or None.
        """
        for toolchain in self._toolchains.values():
            if toolchain.role == role:
                return toolchain
        return None
