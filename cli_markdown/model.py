"""
Command tree types consumed by the Markdown renderer.

A tree is built once by a provider (``Command.from_dict``, the argparse
scanner, or hand-written code) and is never mutated while rendering.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import MalformedArgumentError, TreeLoadError


CommandPath = Tuple[str, ...]


@dataclass(frozen=True)
class PossibleValue:
    """One enumerated value an argument accepts."""

    name: str
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "PossibleValue":
        if isinstance(data, str):
            return cls(name=data)
        if isinstance(data, dict) and "name" in data:
            return cls(name=str(data["name"]), hidden=bool(data.get("hidden", False)))
        raise TreeLoadError(f"Invalid possible value: {data!r}")


@dataclass(frozen=True)
class Argument:
    """A positional argument or an option of a command.

    An argument with neither ``short`` nor ``long`` is positional.
    ``required``, ``multiple``, ``takes_value`` and ``value_name`` only
    feed the usage synopsis.
    """

    id: str
    short: Optional[str] = None
    long: Optional[str] = None
    help: Optional[str] = None
    possible_values: Tuple[PossibleValue, ...] = ()
    hidden: bool = False
    required: bool = False
    multiple: bool = False
    takes_value: bool = True
    value_name: Optional[str] = None

    def is_positional(self) -> bool:
        return self.short is None and self.long is None

    def get_value_name(self) -> str:
        return self.value_name or self.id.upper()

    def check_names(self):
        """Raise ``MalformedArgumentError`` unless the argument can be spelled."""
        if self.is_positional():
            if not self.id:
                raise MalformedArgumentError("Positional argument has no identifier")
            return
        if not self.short and not self.long:
            raise MalformedArgumentError(
                f"Option {self.id!r} has neither a short nor a long name"
            )
        if self.short is not None and len(self.short) != 1:
            raise MalformedArgumentError(
                f"Short name of argument {self.id!r} must be one character: {self.short!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Argument":
        if not isinstance(data, dict):
            raise TreeLoadError(f"Argument must be a mapping, got {type(data).__name__}")
        if "id" not in data:
            raise TreeLoadError(f"Argument is missing 'id': {data!r}")

        for key in ("short", "long"):
            value = data.get(key)
            if value is not None and (not isinstance(value, str) or not value):
                raise TreeLoadError(f"'{key}' of argument {data['id']!r} must be a non-empty string")

        possible_values = data.get("possible_values") or []
        if not isinstance(possible_values, list):
            raise TreeLoadError(f"'possible_values' of argument {data['id']!r} must be a list")

        return cls(
            id=str(data["id"]),
            short=data.get("short"),
            long=data.get("long"),
            help=data.get("help"),
            possible_values=tuple(PossibleValue.from_dict(pv) for pv in possible_values),
            hidden=bool(data.get("hidden", False)),
            required=bool(data.get("required", False)),
            multiple=bool(data.get("multiple", False)),
            takes_value=bool(data.get("takes_value", True)),
            value_name=data.get("value_name"),
        )


@dataclass(frozen=True)
class Command:
    """A command or subcommand and everything documented about it."""

    name: str
    display_name: Optional[str] = None
    about: Optional[str] = None
    long_about: Optional[str] = None
    before_help: Optional[str] = None
    after_help: Optional[str] = None
    hidden: bool = False
    arguments: Tuple[Argument, ...] = ()
    subcommands: Tuple["Command", ...] = field(default=())
    usage: Optional[str] = None
    subcommand_required: bool = False

    def get_positionals(self) -> List[Argument]:
        return [arg for arg in self.arguments if arg.is_positional()]

    def get_options(self) -> List[Argument]:
        return [arg for arg in self.arguments if not arg.is_positional()]

    def get_visible_subcommands(self) -> List["Command"]:
        return [sub for sub in self.subcommands if not sub.hidden]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Command":
        """Build a command tree from nested mappings (parsed JSON or YAML).

        Keys mirror the field names. ``arguments`` and ``subcommands`` are
        lists of mappings in declaration order.
        """
        if not isinstance(data, dict):
            raise TreeLoadError(f"Command must be a mapping, got {type(data).__name__}")
        if not data.get("name"):
            raise TreeLoadError(f"Command is missing 'name': {data!r}")

        arguments = data.get("arguments") or []
        subcommands = data.get("subcommands") or []
        for key, value in (("arguments", arguments), ("subcommands", subcommands)):
            if not isinstance(value, list):
                raise TreeLoadError(f"'{key}' of command {data['name']!r} must be a list")

        return cls(
            name=str(data["name"]),
            display_name=data.get("display_name"),
            about=data.get("about"),
            long_about=data.get("long_about"),
            before_help=data.get("before_help"),
            after_help=data.get("after_help"),
            hidden=bool(data.get("hidden", False)),
            arguments=tuple(Argument.from_dict(arg) for arg in arguments),
            subcommands=tuple(cls.from_dict(sub) for sub in subcommands),
            usage=data.get("usage"),
            subcommand_required=bool(data.get("subcommand_required", False)),
        )
