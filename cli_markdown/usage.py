"""Usage synopsis for a single command, in the style of ``--help`` output."""

from typing import List

from .model import Argument, Command


USAGE_PREFIX = "Usage: "


def _option_token(arg: Argument) -> str:
    arg.check_names()
    flag = f"--{arg.long}" if arg.long else f"-{arg.short}"
    if arg.takes_value:
        flag += f" <{arg.get_value_name()}>"
    return flag


def _positional_token(arg: Argument) -> str:
    value_name = arg.get_value_name()
    token = f"<{value_name}>" if arg.required else f"[{value_name}]"
    if arg.multiple:
        token += "..."
    return token


def render_usage(command: Command) -> str:
    """Return the synopsis line for ``command``, including the ``Usage: `` prefix.

    The synopsis only names ``command`` itself, never its parents. Hidden
    arguments are left out.
    """
    if command.usage:
        if command.usage.startswith(USAGE_PREFIX):
            return command.usage
        return USAGE_PREFIX + command.usage

    parts: List[str] = [command.name]

    options = [arg for arg in command.get_options() if not arg.hidden]
    parts.extend(_option_token(arg) for arg in options if arg.required)
    if any(not arg.required for arg in options):
        parts.append("[OPTIONS]")

    parts.extend(_positional_token(arg) for arg in command.get_positionals() if not arg.hidden)

    if command.get_visible_subcommands():
        parts.append("<COMMAND>" if command.subcommand_required else "[COMMAND]")

    return USAGE_PREFIX + " ".join(parts)


def strip_usage_prefix(usage: str) -> str:
    """Drop the leading ``Usage: `` label from a rendered synopsis."""
    if usage.startswith(USAGE_PREFIX):
        return usage[len(USAGE_PREFIX):]
    return usage
