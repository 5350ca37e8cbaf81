"""Exceptions raised by hostinfo."""


class HostInfoError(Exception):
    """Base class for hostinfo failures."""


class UsageError(HostInfoError):
    """Malformed command line: unknown option, missing value, stray argument."""


class RedirectionSetupError(HostInfoError):
    """An output or error sink could not be established."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class PathAccessError(RedirectionSetupError):
    """A redirection target failed the access check."""


class HelpRequested(Exception):
    """Raised by the help action to stop parsing and print usage."""

    def __init__(self, log_path: str | None = None) -> None:
        super().__init__("help requested")
        self.log_path = log_path
