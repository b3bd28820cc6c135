"""Generate Markdown help documents for command-line programs."""

from .errors import CliMarkdownError, MalformedArgumentError, TreeLoadError, UnsupportedFeatureError
from .loader import load_tree
from .model import Argument, Command, PossibleValue
from .scan_cli import ArgparseScanner, add_markdown_help
from .transform_to_markdown import MarkdownGenerator, help_markdown, print_help_markdown
from .usage import render_usage

__version__ = "0.1.0"

__all__ = [
    "Argument",
    "ArgparseScanner",
    "CliMarkdownError",
    "Command",
    "MalformedArgumentError",
    "MarkdownGenerator",
    "PossibleValue",
    "TreeLoadError",
    "UnsupportedFeatureError",
    "add_markdown_help",
    "help_markdown",
    "load_tree",
    "print_help_markdown",
    "render_usage",
]
