"""Command-line interface for mcp-launcher using Typer.

The launcher has no options of its own: every argument is handed to the
server unchanged, including ``--help`` and ``--``.
"""

import asyncio
import logging
import sys
from typing import List, Optional

import typer

from mcp_launcher.config import LauncherConfig
from mcp_launcher.toolchain import FallbackOrchestrator
from mcp_launcher.utils import display
from mcp_launcher.utils.logging_config import setup_logging


logger = logging.getLogger(__name__)

PROG_NAME = "mcp-launcher"

# Exit code after Ctrl+C reaches the launcher itself
EXIT_INTERRUPTED = 130

app = typer.Typer(
    name=PROG_NAME,
    help="Start the MCP server through uvx or pipx",
    add_completion=False,
)


@app.command(add_help_option=False)
def launch_command(
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Arguments forwarded verbatim to the server",
        show_default=False,
    ),
):
    """Start the MCP server with the first available runner.

    Examples:
        mcp-launcher
        mcp-launcher --port 9000
    """
    forwarded = list(args or [])

    try:
        config = LauncherConfig.load_from_file()
        setup_logging(config.effective_log_level)
        orchestrator = FallbackOrchestrator(config=config)
        code = asyncio.run(orchestrator.run(forwarded))
    except KeyboardInterrupt:
        display.console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(code=EXIT_INTERRUPTED)
    except Exception as e:
        logger.debug("Launcher failed", exc_info=True)
        display.print_fatal(e)
        raise typer.Exit(code=1)

    raise typer.Exit(code=code)


def main(argv: Optional[List[str]] = None) -> None:
    """Console-script entry point.

    Args:
        argv: Arguments to forward. Defaults to ``sys.argv[1:]``.
    """
    forwarded = sys.argv[1:] if argv is None else list(argv)
    # A leading "--" stops option parsing, so every token lands in ARGS as-is
    app(args=["--", *forwarded], prog_name=PROG_NAME)
