"""Entry point for running mcp-launcher as a module.

Usage:
    python -m mcp_launcher --port 9000
"""

from mcp_launcher.cli import main

if __name__ == "__main__":
    main()
