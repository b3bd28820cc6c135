"""Pytest configuration and fixtures for cli-markdown tests."""

import tempfile
from pathlib import Path

import pytest

from cli_markdown import Argument, Command, PossibleValue


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tool_command():
    """``tool`` with a visible ``run`` subcommand and a hidden ``internal`` one."""
    return Command(
        name="tool",
        about="A sample tool",
        subcommands=(
            Command(
                name="run",
                about="Run the thing",
                arguments=(
                    Argument(id="verbose", short="v", long="verbose", help="enable verbose output",
                             takes_value=False),
                ),
            ),
            Command(name="internal", about="Not for humans", hidden=True),
        ),
    )


@pytest.fixture
def tree_data():
    """Command tree as it appears in a JSON/YAML file."""
    return {
        "name": "deploy",
        "display_name": "Deploy CLI",
        "about": "Ship builds",
        "arguments": [
            {"id": "config", "short": "c", "long": "config", "help": "Config file"},
        ],
        "subcommands": [
            {
                "name": "push",
                "about": "Push a build",
                "arguments": [
                    {"id": "target", "help": "Where to push", "required": True},
                    {
                        "id": "mode",
                        "long": "mode",
                        "possible_values": ["fast", {"name": "safe"}, {"name": "legacy", "hidden": True}],
                    },
                ],
            },
        ],
    }
