"""Fallback protocol for starting the MCP server.

Tries the primary runner, then the secondary one, and finally diagnoses
why neither could start.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from mcp_launcher.config import LauncherConfig
from mcp_launcher.utils import display
from .launcher import ChildExit, ProcessLauncher, Running
from .probe import CapabilityProbe
from .registry import ToolchainInfo, ToolchainRegistry, ToolchainRole


logger = logging.getLogger(__name__)

# Exit code when no tool-chain produced a running server
EXIT_NO_TOOLCHAIN = 1


class LaunchState(str, Enum):
    """States of the fallback protocol."""

    TRY_PRIMARY = "try_primary"
    TRY_SECONDARY = "try_secondary"
    DIAGNOSE = "diagnose"
    TERMINAL = "terminal"


def exit_code_for(child_exit: ChildExit) -> int:
    """Map a child's termination to the launcher's own exit code.

    A child that ends without an exit code of its own (killed by a signal)
    maps to 0.
    """
    if child_exit.code is None:
        return 0
    return child_exit.code


class FallbackOrchestrator:
    """Runs the server through the first tool-chain that works.

    The primary runner is probed before launch. The secondary runner is
    launched directly and its absence shows up as a spawn failure. Only when
    both fail is the baseline runtime probed, purely to pick a remediation
    message. Attempts are strictly sequential.

    Example:
        orchestrator = FallbackOrchestrator(LauncherConfig())
        code = await orchestrator.run(["--port", "9000"])
    """

    def __init__(
        self,
        config: Optional[LauncherConfig] = None,
        registry: Optional[ToolchainRegistry] = None,
        probe: Optional[CapabilityProbe] = None,
        launcher: Optional[ProcessLauncher] = None,
    ):
        """Initialize the orchestrator.

        Args:
            config: Launcher configuration. Uses defaults if not provided.
            registry: Tool-chain registry. Built from config if not provided.
            probe: Capability probe.
            launcher: Process launcher.
        """
        self.config = config or LauncherConfig()
        self.registry = registry or ToolchainRegistry.from_config(self.config)
        self.probe = probe or CapabilityProbe(timeout=self.config.probe_timeout)
        self.launcher = launcher or ProcessLauncher()
        self.history: list[LaunchState] = []
        self.exit_code: Optional[int] = None

    @property
    def state(self) -> Optional[LaunchState]:
        """Current protocol state, or None before ``run``."""
        return self.history[-1] if self.history else None

    async def run(self, argv: Sequence[str]) -> int:
        """Start the server with ``argv`` forwarded verbatim.

        Args:
            argv: Arguments given to the launcher, program name excluded.

        Returns:
            Exit code for the launcher process.
        """
        forwarded = list(argv)
        primary = self._toolchain(ToolchainRole.PRIMARY)
        secondary = self._toolchain(ToolchainRole.SECONDARY)

        self._enter(LaunchState.TRY_PRIMARY)
        probe_result = await self.probe.probe(primary.command, primary.version_arg)
        if probe_result:
            display.print_status(f"Starting {self.config.server_package} via {primary.command}...")
            outcome = await self.launcher.launch(primary.command, primary.build_args(forwarded))
            if isinstance(outcome, Running):
                return await self._wait_for(outcome)

            # Passed the probe but vanished before launch; no fallback from here
            display.print_error(
                f"{primary.command} could not be started: {outcome.reason}",
                title="Launch failed",
            )
            return self._terminate(EXIT_NO_TOOLCHAIN)

        logger.info(
            f"Primary runner unavailable: {probe_result.command} ({probe_result.status.value})"
        )

        self._enter(LaunchState.TRY_SECONDARY)
        display.print_notice(f"{primary.command} not found, attempting {secondary.command}...")
        outcome = await self.launcher.launch(secondary.command, secondary.build_args(forwarded))
        if isinstance(outcome, Running):
            return await self._wait_for(outcome)

        logger.info(f"Secondary runner could not start: {outcome.reason}")

        self._enter(LaunchState.DIAGNOSE)
        await self._diagnose(primary, secondary)
        return self._terminate(EXIT_NO_TOOLCHAIN)

    async def _wait_for(self, running: Running) -> int:
        """Wait for the server and mirror its exit code."""
        child_exit = await self.launcher.wait(running)
        if child_exit.signal is not None:
            logger.info(f"Server terminated by signal {child_exit.signal}; exiting with 0")
        return self._terminate(exit_code_for(child_exit))

    async def _diagnose(self, primary: ToolchainInfo, secondary: ToolchainInfo) -> None:
        """Print the remediation that matches what is installed."""
        runtime = self._toolchain(ToolchainRole.RUNTIME)
        package = self.config.server_package

        if await self.probe.probe(runtime.command, runtime.version_arg):
            display.print_remediation(
                headline=f"Error: Neither {primary.command} nor {secondary.command} is installed.",
                intro="Please install uv (recommended):",
                commands=[primary.install_hint] if primary.install_hint else [],
                alternative_intro="Or install the Python package directly:",
                alternative_commands=[secondary.install_hint or f"pip install {package}", package],
            )
        else:
            minimum = self.config.minimum_python
            display.print_remediation(
                headline=f"Error: Python {minimum}+ is required but not found.",
                intro=f"Please install Python {minimum} or higher:",
                commands=[runtime.install_url] if runtime.install_url else [],
            )

    def _toolchain(self, role: ToolchainRole) -> ToolchainInfo:
        toolchain = self.registry.get_by_role(role)
        if toolchain is None:
            raise LookupError(f"No {role.value} tool-chain registered")
        return toolchain

    def _enter(self, state: LaunchState) -> None:
        logger.debug(f"Fallback state: {state.value}")
        self.history.append(state)

    def _terminate(self, code: int) -> int:
        self._enter(LaunchState.TERMINAL)
        self.exit_code = code
        return code
