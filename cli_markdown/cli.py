"""
Command-line front end for cli-markdown.

Usage:
    cli-markdown render --input cli.yaml --output cli-reference.md
    cli-markdown render --parser mypackage.cli:create_parser --template doc_template.py
    cli-markdown verify cli-reference.md
"""

import argparse
import dataclasses
import importlib
import sys
from pathlib import Path
from typing import List, Optional

from .errors import CliMarkdownError, TreeLoadError
from .loader import get_default_config, load_config_from_file, load_tree
from .model import Command
from .scan_cli import ArgparseScanner, add_markdown_help
from .transform_to_markdown import help_markdown
from .verify_docs import DocVerifier


def resolve_parser(reference: str) -> argparse.ArgumentParser:
    """Import ``module:attribute`` and return the parser it names.

    The attribute may be a parser or a zero-argument callable returning one.
    """
    module_name, _, attribute = reference.partition(":")
    if not module_name or not attribute:
        raise TreeLoadError(f"Parser reference must look like 'module:attribute', got {reference!r}")

    try:
        target = importlib.import_module(module_name)
        for part in attribute.split("."):
            target = getattr(target, part)
    except (ImportError, AttributeError) as e:
        raise TreeLoadError(f"Cannot resolve parser {reference!r}: {e}") from e

    if not isinstance(target, argparse.ArgumentParser) and callable(target):
        target = target()
    if not isinstance(target, argparse.ArgumentParser):
        raise TreeLoadError(f"{reference!r} is not an argparse.ArgumentParser")
    return target


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli-markdown",
        description="Generate Markdown help documents for command-line programs",
    )
    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND")
    subparsers.required = True

    render = subparsers.add_parser("render", help="Render a command tree as Markdown")
    source = render.add_mutually_exclusive_group()
    source.add_argument("--input", "-i", help="Command tree file (JSON or YAML)")
    source.add_argument("--parser", "-p", help="argparse parser to document, as module:attribute")
    render.add_argument("--output", "-o", help="Output Markdown file (default: standard output)")
    render.add_argument("--template", "-t", help="Optional Python config file for customization")
    render.add_argument("--title", help="Document title (overrides config)")
    render.add_argument("--include-help", action="store_true", default=None,
                        help="Document the -h/--help option of scanned parsers")

    verify = subparsers.add_parser("verify", help="Check links and structure of a generated document")
    verify.add_argument("file", help="Markdown file to verify")

    add_markdown_help(parser)
    return parser


def build_command(args: argparse.Namespace) -> Command:
    """Resolve the command tree for ``render`` from flags and template config."""
    config = get_default_config()
    if args.template:
        config = load_config_from_file(args.template)

    if args.title:
        config["title"] = args.title
    if args.include_help is not None:
        config["include_help"] = args.include_help

    if args.input:
        command = load_tree(args.input)
    elif args.parser or config.get("parser"):
        parser = resolve_parser(args.parser or config["parser"])
        command = ArgparseScanner(include_help=bool(config["include_help"])).scan(parser)
    else:
        raise TreeLoadError("Nothing to render: pass --input, --parser or a template with 'parser'")

    if config.get("title"):
        command = dataclasses.replace(command, display_name=config["title"])
    return command


def run_render(args: argparse.Namespace) -> int:
    markdown = help_markdown(build_command(args))

    if not args.output:
        print(markdown)
        return 0

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(markdown)

    print(f"Markdown documentation written to: {args.output}")
    return 0


def run_verify(args: argparse.Namespace) -> int:
    if not Path(args.file).exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    verifier = DocVerifier(args.file)
    return 0 if verifier.verify_all() else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        if args.action == "render":
            return run_render(args)
        return run_verify(args)
    except CliMarkdownError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
