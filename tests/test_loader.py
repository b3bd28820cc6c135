"""Tests for loader module."""

import json
from pathlib import Path

import pytest
import yaml

from cli_markdown import TreeLoadError, load_tree
from cli_markdown.loader import get_default_config, load_config_from_file


TEMPLATE_EXAMPLE = Path(__file__).parent.parent / "docs" / "doc_template_example.py"


class TestLoadTree:
    """Test load_tree function."""

    def test_load_json(self, temp_dir, tree_data):
        path = temp_dir / "cli.json"
        path.write_text(json.dumps(tree_data), encoding="utf-8")

        command = load_tree(str(path))

        assert command.name == "deploy"
        assert command.subcommands[0].name == "push"

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_load_yaml(self, temp_dir, tree_data, suffix):
        path = temp_dir / f"cli{suffix}"
        path.write_text(yaml.safe_dump(tree_data), encoding="utf-8")

        assert load_tree(str(path)).display_name == "Deploy CLI"

    def test_wrapped_document(self, temp_dir, tree_data):
        """Test a tree nested under a top-level 'command' key."""
        path = temp_dir / "cli.json"
        path.write_text(json.dumps({"command": tree_data, "scanned_at": "today"}), encoding="utf-8")

        assert load_tree(str(path)).name == "deploy"

    def test_missing_file(self, temp_dir):
        with pytest.raises(TreeLoadError, match="Cannot read"):
            load_tree(str(temp_dir / "nope.json"))

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "cli.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(TreeLoadError, match="Cannot parse"):
            load_tree(str(path))

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "cli.yaml"
        path.write_text("name: [unclosed", encoding="utf-8")

        with pytest.raises(TreeLoadError):
            load_tree(str(path))


class TestLoadConfig:
    """Test load_config_from_file function."""

    def test_example_template(self):
        config = load_config_from_file(str(TEMPLATE_EXAMPLE))

        assert config["title"] == "cli-markdown"
        assert config["parser"] == "cli_markdown.cli:create_parser"
        assert config["include_help"] is False

    def test_lowercase_config_merged_with_defaults(self, temp_dir):
        path = temp_dir / "template.py"
        path.write_text('config = {"title": "Custom"}\n', encoding="utf-8")

        config = load_config_from_file(str(path))

        assert config == dict(get_default_config(), title="Custom")

    def test_missing_config(self, temp_dir):
        path = temp_dir / "template.py"
        path.write_text("TITLE = 'x'\n", encoding="utf-8")

        with pytest.raises(TreeLoadError, match="CONFIG or config"):
            load_config_from_file(str(path))
