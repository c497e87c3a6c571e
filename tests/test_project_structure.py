"""Test project structure and configuration."""

import tomli
from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent


def test_pyproject_toml_exists():
    """Test that pyproject.toml exists."""
    assert (PROJECT_ROOT / "pyproject.toml").exists(), "pyproject.toml should exist"


def test_pyproject_toml_structure():
    """Test that pyproject.toml has the correct structure."""
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        data = tomli.load(f)

    assert "build-system" in data, "pyproject.toml should have [build-system]"

    project = data["project"]
    assert project["name"] == "mcp-launcher", "Project name should be 'mcp-launcher'"
    assert project["version"] == "1.0.0", "Version should be 1.0.0"

    deps = " ".join(project["dependencies"])
    required_deps = ["typer", "rich", "pydantic-settings", "platformdirs", "pyyaml"]
    for dep in required_deps:
        assert dep in deps, f"Missing required dependency: {dep}"

    test_deps = " ".join(project["optional-dependencies"]["test"])
    assert "pytest" in test_deps, "Should have pytest in test dependencies"
    assert "pytest-asyncio" in test_deps, "Should have pytest-asyncio in test dependencies"

    assert "mcp-launcher" in project["scripts"], "Should have mcp-launcher entry point"
    assert project["scripts"]["mcp-launcher"] == "mcp_launcher.cli:main"


def test_package_layout():
    """Test that the package modules exist."""
    package = PROJECT_ROOT / "mcp_launcher"
    for relative in [
        "__init__.py",
        "__main__.py",
        "cli.py",
        "config.py",
        "toolchain/__init__.py",
        "toolchain/probe.py",
        "toolchain/launcher.py",
        "toolchain/fallback.py",
        "toolchain/registry.py",
        "utils/display.py",
        "utils/logging_config.py",
    ]:
        assert (package / relative).exists(), f"Missing {relative}"
