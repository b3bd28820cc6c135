"""
Load command trees from JSON/YAML files and template configuration from
Python files.
"""

import importlib.util
import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import TreeLoadError
from .model import Command


def get_default_config() -> Dict[str, Any]:
    """Default configuration for markdown generation."""
    return {
        "title": None,
        "parser": None,
        "include_help": False,
    }


def load_tree(path: str) -> Command:
    """Read a command tree from a JSON or YAML file.

    The document is either the root command mapping itself or a mapping
    with the root under a ``command`` key.
    """
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            if file_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise TreeLoadError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TreeLoadError(f"Cannot parse {path}: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("command"), dict):
        data = data["command"]

    return Command.from_dict(data)


def load_config_from_file(config_path: str) -> Dict[str, Any]:
    """Load configuration from a Python file defining CONFIG or config."""
    spec = importlib.util.spec_from_file_location("cli_markdown_config", config_path)
    if spec is None or spec.loader is None:
        raise TreeLoadError(f"Cannot load template: {config_path}")
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)

    if hasattr(config_module, "CONFIG"):
        config = config_module.CONFIG
    elif hasattr(config_module, "config"):
        config = config_module.config
    else:
        raise TreeLoadError("Config file must define CONFIG or config dictionary")

    merged = get_default_config()
    merged.update(config)
    return merged
