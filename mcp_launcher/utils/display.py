"""Rich console display helpers for mcp-launcher.

Everything here writes to stderr. Stdout belongs to the launched server.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


# Global console instance, bound to stderr
console = Console(stderr=True, highlight=False)


def print_status(message: str) -> None:
    """Display a progress message, e.g. which runner is starting.

    Args:
        message: Status message to display
    """
    console.print(f"[cyan]→[/cyan] {escape(message)}")


def print_notice(message: str) -> None:
    """Display a fallback notice.

    Args:
        message: Notice to display
    """
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def print_error(message: str, title: str = "Error") -> None:
    """Display error message.

    Args:
        message: Error message to display
        title: Panel title
    """
    console.print(
        Panel(
            f"[red]{escape(message)}[/red]",
            title=f"[bold red]{title}[/bold red]",
            border_style="red"
        )
    )


def print_fatal(error: BaseException) -> None:
    """Display an unexpected failure of the launcher itself."""
    console.print(f"[bold red]Fatal error:[/bold red] {escape(str(error) or type(error).__name__)}")


def print_remediation(
    headline: str,
    intro: str,
    commands: list[str],
    alternative_intro: Optional[str] = None,
    alternative_commands: Optional[list[str]] = None,
) -> None:
    """Display an error headline followed by the steps that fix it.

    Commands are printed unstyled on their own lines so they can be
    copied straight into a shell.

    Args:
        headline: What went wrong
        intro: Lead-in for the recommended fix
        commands: Commands (or URLs) for the recommended fix
        alternative_intro: Lead-in for a second option, if any
        alternative_commands: Commands for the second option
    """
    console.print()
    console.print(f"[bold red]❌ {escape(headline)}[/bold red]")
    console.print()
    console.print(escape(intro))
    for command in commands:
        console.print(f"  {escape(command)}", soft_wrap=True)

    if alternative_intro:
        console.print()
        console.print(escape(alternative_intro))
        for command in alternative_commands or []:
            console.print(f"  {escape(command)}", soft_wrap=True)
