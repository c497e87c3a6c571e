"""Capability probing for runner tool-chains.

A tool-chain counts as capable when ``<command> --version`` can be started
and exits with status 0. Probes never touch the user's terminal: all three
standard streams go to the null device.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional


logger = logging.getLogger(__name__)


class ProbeStatus(str, Enum):
    """Outcome of a single probe."""

    AVAILABLE = "available"     # Started and exited 0
    NOT_FOUND = "not_found"     # Process could not be created
    ERROR = "error"             # Started but exited non-zero
    TIMEOUT = "timeout"         # Did not exit within the probe timeout


@dataclass(frozen=True)
class ProbeResult:
    """Result of probing one command.

    Truthy only when the command is available, so callers can write
    ``if await probe.probe("uvx"):``.
    """

    command: str
    status: ProbeStatus
    returncode: Optional[int] = None
    detail: str = ""

    @property
    def capable(self) -> bool:
        return self.status == ProbeStatus.AVAILABLE

    def __bool__(self) -> bool:
        return self.capable


class CapabilityProbe:
    """Checks whether external commands are invocable.

    Results are not cached; every call starts a fresh process.

    Example:
        probe = CapabilityProbe(timeout=5.0)
        if await probe.probe("uvx"):
            ...
    """

    def __init__(self, timeout: float = 5.0):
        """Initialize the probe.

        Args:
            timeout: Seconds to wait for the version command to exit.
        """
        self.timeout = timeout

    async def probe(self, command: str, version_arg: str = "--version") -> ProbeResult:
        """Probe a command by asking it for its version.

        Args:
            command: Executable name or path.
            version_arg: Argument that makes the command print its version.

        Returns:
            Probe result; falsy unless the command exited 0.
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                version_arg,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            logger.debug(f"Probe of {command!r} could not start: {e}")
            return ProbeResult(command=command, status=ProbeStatus.NOT_FOUND, detail=str(e))

        try:
            returncode = await asyncio.wait_for(proc.wait(), timeout=self.timeout)
        except asyncio.TimeoutError:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()
            logger.debug(f"Probe of {command!r} timed out after {self.timeout}s")
            return ProbeResult(
                command=command,
                status=ProbeStatus.TIMEOUT,
                detail=f"no exit after {self.timeout}s",
            )

        if returncode != 0:
            logger.debug(f"Probe of {command!r} exited with {returncode}")
            return ProbeResult(
                command=command,
                status=ProbeStatus.ERROR,
                returncode=returncode,
                detail=f"exit status {returncode}",
            )

        logger.debug(f"Probe of {command!r} succeeded")
        return ProbeResult(command=command, status=ProbeStatus.AVAILABLE, returncode=0)
