"""Tool-chain discovery and fallback for mcp-launcher.

This module probes runner tool-chains, launches the server through the
first one that works, and explains what to install when none does.
"""

from .registry import ToolchainRegistry, ToolchainInfo, ToolchainRole
from .probe import CapabilityProbe, ProbeResult, ProbeStatus
from .launcher import (
    ProcessLauncher,
    ToolInvocation,
    LaunchOutcome,
    Running,
    SpawnFailed,
    ChildExit,
)
from .fallback import FallbackOrchestrator, LaunchState, exit_code_for

__all__ = [
    # Registry
    "ToolchainRegistry",
    "ToolchainInfo",
    "ToolchainRole",
    # Probe
    "CapabilityProbe",
    "ProbeResult",
    "ProbeStatus",
    # Launcher
    "ProcessLauncher",
    "ToolInvocation",
    "LaunchOutcome",
    "Running",
    "SpawnFailed",
    "ChildExit",
    # Fallback
    "FallbackOrchestrator",
    "LaunchState",
    "exit_code_for",
]
