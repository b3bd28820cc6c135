"""
Render a command tree as a single Markdown help document.

Usage:
    from cli_markdown import Command, help_markdown
    markdown = help_markdown(Command.from_dict(data))
"""

import logging
from typing import Iterator, List, Optional, TextIO, Tuple

from .errors import UnsupportedFeatureError
from .model import Argument, Command, CommandPath
from .usage import render_usage, strip_usage_prefix


logger = logging.getLogger(__name__)

FOOTER = """<hr/>

<small><i>
    This document was generated automatically by
    <code>cli-markdown</code>.
</i></small>
"""


def heading_text(path: CommandPath) -> str:
    """Human-readable form of a command path, e.g. ``tool run``."""
    return " ".join(path)


def anchor(path: CommandPath) -> str:
    """Link target of a command path, e.g. ``tool-run``."""
    return "-".join(path)


def iter_visible_commands(
    command: Command,
    parent_path: CommandPath = (),
    depth: int = 0,
) -> Iterator[Tuple[CommandPath, Command, int]]:
    """Yield ``(parent_path, command, depth)`` for every visible command, pre-order.

    A hidden command ends the walk of its branch: its descendants are never
    visited, whatever their own flag says.
    """
    if command.hidden:
        return

    yield parent_path, command, depth

    command_path = parent_path + (command.name,)
    for subcommand in command.subcommands:
        yield from iter_visible_commands(subcommand, command_path, depth + 1)


class MarkdownGenerator:
    """Generates the Markdown help document for one command tree."""

    def __init__(self, command: Command):
        self.command = command
        self.buffer: List[str] = []

    def write(self, text: str):
        self.buffer.append(text)

    def generate(self) -> str:
        """Generate the complete markdown document."""
        self.buffer = []
        command = self.command

        # Title
        if command.display_name:
            title_name = command.display_name
        else:
            title_name = f"`{command.name}`"

        self.write(f"# Command-Line Help for {title_name}\n\n")
        self.write(
            f"This document contains the help content for the `{command.name}` "
            "command-line program.\n\n"
        )

        # Table of Contents
        self.write("**Command Overview:**\n\n")
        self.generate_toc()
        self.write("\n")

        # Commands and subcommands
        self.generate_command_docs()

        self.write(FOOTER)

        return "".join(self.buffer)

    def generate_toc(self):
        """Write one linked list entry per visible command."""
        for parent_path, command, _depth in iter_visible_commands(self.command):
            command_path = parent_path + (command.name,)
            self.write(f"* [`{heading_text(command_path)}`↴](#{anchor(command_path)})\n")

    def generate_command_docs(self):
        """Write one section per visible command, depth-first."""
        for parent_path, command, depth in iter_visible_commands(self.command):
            self.render_command(parent_path, command, depth)

    def render_command(self, parent_path: CommandPath, command: Command, depth: int):
        """Render the section of a single command."""
        command_path = parent_path + (command.name,)
        logger.debug("%sRendering: %s", "  " * depth, heading_text(command_path))

        # Headings stay at level 2 however deep the command is nested.
        self.write(f"## `{heading_text(command_path)}`\n\n")

        if command.long_about is not None:
            self.write(f"{command.long_about}\n\n")
        elif command.about is not None:
            self.write(f"{command.about}\n\n")

        # TODO: render before_help/after_help instead of rejecting them.
        if command.before_help is not None:
            raise UnsupportedFeatureError(
                f"before_help is not supported (command `{heading_text(command_path)}`)"
            )
        if command.after_help is not None:
            raise UnsupportedFeatureError(
                f"after_help is not supported (command `{heading_text(command_path)}`)"
            )

        usage_prefix = heading_text(parent_path) + " " if parent_path else ""
        usage = strip_usage_prefix(render_usage(command))
        self.write(f"**Usage:** `{usage_prefix}{usage}`\n\n")

        # Subcommands
        subcommands = command.get_visible_subcommands()
        if subcommands:
            self.write("###### **Subcommands:**\n\n")
            for subcommand in subcommands:
                self.write(f"* `{subcommand.name}` — {subcommand.about or ''}\n")
            self.write("\n")

        # Arguments
        positionals = command.get_positionals()
        if positionals:
            self.write("###### **Arguments:**\n\n")
            for arg in positionals:
                self.write(self.render_argument(arg))
            self.write("\n")

        # Options
        options = command.get_options()
        if options:
            self.write("###### **Options:**\n\n")
            for arg in options:
                self.write(self.render_argument(arg))
            self.write("\n")

        # Extra space between commands, for readers of the raw .md file.
        self.write("\n\n")

    @staticmethod
    def render_argument(arg: Argument) -> str:
        """Render one argument as a list item plus its possible values."""
        arg.check_names()

        if arg.short and arg.long:
            flags = f"`-{arg.short}`, `--{arg.long}`"
        elif arg.short:
            flags = f"`-{arg.short}`"
        elif arg.long:
            flags = f"`--{arg.long}`"
        else:
            flags = f"`{arg.id.upper()}`"

        if arg.help is not None:
            line = f"* {flags} — {arg.help}\n"
        else:
            line = f"* {flags}\n"

        possible_values = [pv for pv in arg.possible_values if not pv.hidden]
        if possible_values:
            text = ", ".join(f"`{pv.name}`" for pv in possible_values)
            line += f"\n  *Possible Values:* {text}\n\n"

        return line


def help_markdown(command: Command) -> str:
    """Format the help information for ``command`` as Markdown."""
    return MarkdownGenerator(command).generate()


def print_help_markdown(command: Command, file: Optional[TextIO] = None):
    """Format the help information for ``command`` as Markdown and print it.

    The document and a trailing newline go to ``file``, or standard output.
    """
    print(help_markdown(command), file=file)
