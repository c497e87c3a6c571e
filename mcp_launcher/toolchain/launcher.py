"""Process launching with inherited standard streams.

The launched child reads and writes the launcher's own stdin, stdout and
stderr directly; nothing is piped or buffered in between.
"""

import asyncio
import logging
import signal
import subprocess
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Sequence, Union


logger = logging.getLogger(__name__)


def needs_shell(platform: Optional[str] = None) -> bool:
    """Whether PATH lookup needs a shell on this platform.

    Windows runners are often ``.cmd`` shims that only the shell resolves.
    """
    return (platform or sys.platform) == "win32"


@contextmanager
def interrupts_ignored():
    """Ignore SIGINT in this process for the duration of the block.

    Only call once the child exists: an ignored SIGINT is inherited
    across exec.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


@dataclass(frozen=True)
class ToolInvocation:
    """A single, immutable request to start a command."""

    command: str
    args: tuple[str, ...] = ()
    inherit_stdio: bool = True

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


@dataclass
class Running:
    """The child process started; the launcher owns it until it exits."""

    invocation: ToolInvocation
    process: asyncio.subprocess.Process

    @property
    def pid(self) -> int:
        return self.process.pid


@dataclass(frozen=True)
class SpawnFailed:
    """The child process could not be created."""

    invocation: ToolInvocation
    reason: str


LaunchOutcome = Union[Running, SpawnFailed]


@dataclass(frozen=True)
class ChildExit:
    """How a launched child terminated.

    ``returncode`` is the raw asyncio value; a negative number means the
    child was killed by that signal and supplied no exit code of its own.
    """

    returncode: Optional[int]

    @property
    def code(self) -> Optional[int]:
        if self.returncode is None or self.returncode < 0:
            return None
        return self.returncode

    @property
    def signal(self) -> Optional[int]:
        if self.returncode is not None and self.returncode < 0:
            return -self.returncode
        return None


class ProcessLauncher:
    """Starts external commands wired to this process's standard streams.

    Spawn errors come back as ``SpawnFailed`` instead of being raised, so
    callers branch on the outcome type.

    Example:
        launcher = ProcessLauncher()
        outcome = await launcher.launch("uvx", ["cakemail-mcp-server", "--port", "9000"])
        if isinstance(outcome, Running):
            child_exit = await launcher.wait(outcome)
    """

    def __init__(self, use_shell: Optional[bool] = None):
        """Initialize the launcher.

        Args:
            use_shell: Force shell indirection on or off. Defaults to on for
                Windows only.
        """
        self.use_shell = needs_shell() if use_shell is None else use_shell

    async def launch(self, command: str, extra_args: Sequence[str]) -> LaunchOutcome:
        """Start ``command`` with ``extra_args`` exactly as given.

        Args:
            command: Executable name or path.
            extra_args: Full argument list, passed through untouched.

        Returns:
            Running with the process handle, or SpawnFailed with a reason.
        """
        return await self.start(ToolInvocation(command=command, args=tuple(extra_args)))

    async def start(self, invocation: ToolInvocation) -> LaunchOutcome:
        """Start a prepared invocation.

        Args:
            invocation: What to run and how to wire its streams.

        Returns:
            Running or SpawnFailed.
        """
        # None inherits the parent's file descriptors
        stream = None if invocation.inherit_stdio else asyncio.subprocess.DEVNULL

        try:
            if self.use_shell:
                process = await asyncio.create_subprocess_shell(
                    subprocess.list2cmdline(invocation.argv),
                    stdin=stream,
                    stdout=stream,
                    stderr=stream,
                )
            else:
                process = await asyncio.create_subprocess_exec(
                    *invocation.argv,
                    stdin=stream,
                    stdout=stream,
                    stderr=stream,
                )
        except OSError as e:
            logger.debug(f"Could not start {invocation.command!r}: {e}")
            return SpawnFailed(invocation=invocation, reason=str(e))

        logger.debug(f"Started {invocation.argv} (pid {process.pid})")
        return Running(invocation=invocation, process=process)

    async def wait(self, running: Running) -> ChildExit:
        """Wait for a running child to terminate.

        SIGINT is ignored by the launcher until then. Ctrl+C reaches the
        child through the terminal, and its exit code is still reported.

        Args:
            running: Outcome returned by ``launch``.

        Returns:
            The child's exit information.
        """
        with interrupts_ignored():
            returncode = await running.process.wait()
        logger.debug(f"{running.invocation.command!r} (pid {running.pid}) exited with {returncode}")
        return ChildExit(returncode=returncode)
