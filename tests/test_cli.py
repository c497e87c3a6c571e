"""Test CLI entry points."""

import pytest
from typer.testing import CliRunner
from unittest.mock import AsyncMock, patch

from mcp_launcher.cli import app, main
from mcp_launcher.config import LauncherConfig


runner = CliRunner()


@pytest.fixture
def mock_orchestrator():
    """Patch the orchestrator and config loading used by the CLI."""
    with patch("mcp_launcher.cli.FallbackOrchestrator") as MockOrchestrator, patch(
        "mcp_launcher.cli.LauncherConfig.load_from_file",
        return_value=LauncherConfig(),
    ):
        instance = MockOrchestrator.return_value
        instance.run = AsyncMock(return_value=0)
        yield instance


def test_exit_code_is_mirrored(mock_orchestrator):
    """The orchestrator's exit code becomes the process exit code."""
    mock_orchestrator.run.return_value = 7

    result = runner.invoke(app, ["--"])

    assert result.exit_code == 7


def test_no_arguments(mock_orchestrator):
    """Running without arguments forwards an empty list."""
    result = runner.invoke(app, ["--"])

    assert result.exit_code == 0
    mock_orchestrator.run.assert_awaited_once_with([])


def test_arguments_are_forwarded(mock_orchestrator):
    """Options meant for the server are passed through untouched."""
    result = runner.invoke(app, ["--", "--port", "9000"])

    assert result.exit_code == 0
    mock_orchestrator.run.assert_awaited_once_with(["--port", "9000"])


def test_help_is_forwarded(mock_orchestrator):
    """--help belongs to the server, not the launcher."""
    result = runner.invoke(app, ["--", "--help"])

    assert result.exit_code == 0
    assert "Usage" not in result.output
    mock_orchestrator.run.assert_awaited_once_with(["--help"])


def test_no_runner_exit_code(mock_orchestrator):
    """Exit code 1 when nothing could be started."""
    mock_orchestrator.run.return_value = 1

    result = runner.invoke(app, ["--"])

    assert result.exit_code == 1


def test_orchestrator_fault_is_fatal(mock_orchestrator):
    """Unexpected errors are reported and exit with 1."""
    mock_orchestrator.run.side_effect = RuntimeError("registry exploded")

    result = runner.invoke(app, ["--"])

    assert result.exit_code == 1
    assert "Fatal error" in result.output
    assert "registry exploded" in result.output


def test_keyboard_interrupt(mock_orchestrator):
    """Ctrl+C in the launcher exits with 130."""
    mock_orchestrator.run.side_effect = KeyboardInterrupt()

    result = runner.invoke(app, ["--"])

    assert result.exit_code == 130


def test_config_error_is_fatal():
    """A broken configuration is reported like any other launcher fault."""
    with patch(
        "mcp_launcher.cli.LauncherConfig.load_from_file",
        side_effect=ValueError("bad config"),
    ):
        result = runner.invoke(app, ["--"])

    assert result.exit_code == 1
    assert "bad config" in result.output


def test_main_prepends_separator():
    """main() shields forwarded args from option parsing."""
    with patch("mcp_launcher.cli.app") as mock_app:
        main(["--port", "9000"])

    mock_app.assert_called_once_with(args=["--", "--port", "9000"], prog_name="mcp-launcher")


def test_main_forwards_everything(mock_orchestrator):
    """Flags and separators reach the orchestrator exactly as typed."""
    argv = ["--help", "--", "-x", "--version"]

    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 0
    mock_orchestrator.run.assert_awaited_once_with(argv)


def test_main_reads_sys_argv(mock_orchestrator):
    """Without explicit argv, main() uses the process arguments."""
    with patch("mcp_launcher.cli.sys.argv", ["mcp-launcher", "--port", "9000"]):
        with pytest.raises(SystemExit):
            main()

    mock_orchestrator.run.assert_awaited_once_with(["--port", "9000"])
