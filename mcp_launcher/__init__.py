"""mcp-launcher - Start an MCP server through whichever Python runner is installed.

Tries uvx first, falls back to pipx, and explains what to install when
neither is available. All arguments are forwarded to the server verbatim.
"""

__version__ = "1.0.0"
__author__ = "mcp-launcher Team"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
