"""
Build a command tree from an ``argparse.ArgumentParser``.

Usage:
    scanner = ArgparseScanner()
    command = scanner.scan(create_parser())
"""

import argparse
import logging
from typing import List, Optional

from .errors import MalformedArgumentError
from .model import Argument, Command, PossibleValue
from .transform_to_markdown import print_help_markdown


logger = logging.getLogger(__name__)


class MarkdownHelpAction(argparse.Action):
    """``--markdown-help``: print the parser's Markdown document and exit."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS,
                 include_help=False, help=argparse.SUPPRESS):
        super().__init__(option_strings=option_strings, dest=dest, default=default,
                         nargs=0, help=help)
        self.include_help = include_help

    def __call__(self, parser, namespace, values, option_string=None):
        print_help_markdown(ArgparseScanner(include_help=self.include_help).scan(parser))
        parser.exit()


def add_markdown_help(parser: argparse.ArgumentParser, include_help: bool = False):
    """Add a hidden ``--markdown-help`` flag to ``parser``."""
    parser.add_argument("--markdown-help", action=MarkdownHelpAction, include_help=include_help)


class ArgparseScanner:
    """Recursively scans an argparse parser tree into ``Command`` nodes."""

    def __init__(self, include_help: bool = False):
        self.include_help = include_help
        self.visited = set()  # Track scanned parsers; aliases share one parser

    def scan(self, parser: argparse.ArgumentParser, name: Optional[str] = None) -> Command:
        """Start the recursive scan from the root parser."""
        self.visited = set()
        return self.scan_parser(parser, name or parser.prog)

    def scan_parser(
        self,
        parser: argparse.ArgumentParser,
        name: str,
        about: Optional[str] = None,
        hidden: bool = False,
        depth: int = 0,
    ) -> Command:
        """Convert one parser, and its subparsers, into a command."""
        self.visited.add(id(parser))
        logger.debug("%sScanning: %s", "  " * depth, parser.prog)

        arguments: List[Argument] = []
        subcommands: List[Command] = []
        subcommand_required = False

        for action in parser._actions:
            if isinstance(action, argparse._SubParsersAction):
                subcommand_required = bool(action.required)
                subcommands.extend(self.scan_subparsers(action, depth))
            elif isinstance(action, MarkdownHelpAction):
                continue
            elif isinstance(action, argparse._HelpAction) and not self.include_help:
                continue
            else:
                arguments.append(self.convert_action(parser, action))

        return Command(
            name=name,
            about=about,
            long_about=parser.description,
            hidden=hidden,
            arguments=tuple(arguments),
            subcommands=tuple(subcommands),
            subcommand_required=subcommand_required,
        )

    def scan_subparsers(self, action: argparse._SubParsersAction, depth: int) -> List[Command]:
        """Scan the subparsers of a subparsers action, in declaration order."""
        pseudo_actions = {choice.dest: choice for choice in action._choices_actions}

        subcommands = []
        for name, subparser in action.choices.items():
            if id(subparser) in self.visited:
                continue

            pseudo_action = pseudo_actions.get(name)
            help_text = pseudo_action.help if pseudo_action is not None else None
            hidden = help_text == argparse.SUPPRESS

            subcommands.append(self.scan_parser(
                subparser,
                name,
                about=None if hidden else help_text,
                hidden=hidden,
                depth=depth + 1,
            ))

        return subcommands

    def convert_action(self, parser: argparse.ArgumentParser, action: argparse.Action) -> Argument:
        """Convert a single argparse action into an argument."""
        hidden = action.help == argparse.SUPPRESS
        help_text = None if hidden else self.expand_help(parser, action)

        possible_values = ()
        if action.choices is not None and not isinstance(action.choices, dict):
            possible_values = tuple(PossibleValue(name=str(choice)) for choice in action.choices)

        metavar = action.metavar if isinstance(action.metavar, str) else None

        if not action.option_strings:
            return Argument(
                id=action.dest,
                help=help_text,
                possible_values=possible_values,
                hidden=hidden,
                required=self.is_required_positional(action),
                multiple=self.is_multiple(action),
                value_name=metavar,
            )

        short, long = self.split_option_strings(parser, action)
        return Argument(
            id=action.dest,
            short=short,
            long=long,
            help=help_text,
            possible_values=possible_values,
            hidden=hidden,
            required=bool(action.required),
            multiple=self.is_multiple(action),
            takes_value=action.nargs != 0,
            value_name=metavar,
        )

    @staticmethod
    def split_option_strings(parser: argparse.ArgumentParser, action: argparse.Action):
        """Pick the first short (``-v``) and first long (``--verbose``) spelling."""
        short = None
        long = None
        for option in action.option_strings:
            if len(option) == 2 and option[0] in parser.prefix_chars and option[1] not in parser.prefix_chars:
                short = short or option[1]
            elif len(option) > 2 and option[0] in parser.prefix_chars and option[1] == option[0]:
                long = long or option[2:]

        if short is None and long is None:
            raise MalformedArgumentError(
                f"Option {action.dest!r} has neither a short nor a long name: {action.option_strings}"
            )
        return short, long

    @staticmethod
    def expand_help(parser: argparse.ArgumentParser, action: argparse.Action) -> Optional[str]:
        """Expand ``%(default)s``-style placeholders the way argparse does."""
        if action.help is None or "%" not in action.help:
            return action.help

        params = dict(vars(action), prog=parser.prog)
        for key in list(params):
            if params[key] is argparse.SUPPRESS:
                del params[key]
        if params.get("choices") is not None:
            params["choices"] = ", ".join(str(choice) for choice in params["choices"])
        return action.help % params

    @staticmethod
    def is_required_positional(action: argparse.Action) -> bool:
        if action.nargs in (argparse.OPTIONAL, argparse.ZERO_OR_MORE, argparse.REMAINDER):
            return False
        if isinstance(action.nargs, int):
            return action.nargs > 0
        return True

    @staticmethod
    def is_multiple(action: argparse.Action) -> bool:
        if action.nargs in (argparse.ZERO_OR_MORE, argparse.ONE_OR_MORE, argparse.REMAINDER):
            return True
        if isinstance(action.nargs, int):
            return action.nargs > 1
        return isinstance(action, (argparse._AppendAction, argparse._ExtendAction))
