"""
Example template configuration for CLI documentation generation.

Usage:
    cli-markdown render --template docs/doc_template_example.py --output docs/cli-reference.md
"""

CONFIG = {
    # Document title, replaces the inline-code program name
    "title": "cli-markdown",

    # argparse parser to document, as module:attribute
    "parser": "cli_markdown.cli:create_parser",

    # Document the -h/--help option of every parser
    "include_help": False,
}
