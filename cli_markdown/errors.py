"""Exception hierarchy for cli-markdown."""


class CliMarkdownError(Exception):
    """Base exception for cli-markdown failures."""


class UnsupportedFeatureError(CliMarkdownError):
    """A command uses help content the Markdown renderer cannot represent."""


class MalformedArgumentError(ValueError, CliMarkdownError):
    """An argument's shape violates the command tree contract."""


class TreeLoadError(ValueError, CliMarkdownError):
    """Input could not be turned into a command tree or configuration."""
