"""Command-line parsing for hostinfo."""

import argparse
import re
from collections.abc import Sequence

from hostinfo.errors import HelpRequested, UsageError
from hostinfo.models import InvocationOptions

PROG = "hostinfo"

HELP_TEXT = """\
Usage: {prog} [OPTIONS]

Options:
  -u, --users             List system users and their home directories,
                          sorted alphabetically
  -p, --processes         List running processes, sorted by PID
  -h, --help              Show this help and exit
  -l PATH, --log PATH     Write output to the file at PATH
  -e PATH, --errors PATH  Append error output to the file at PATH
  -v, --verbose           Print debug diagnostics to the error output
      --version           Show the version and exit

Examples:
  {prog} -u -l /tmp/users.log
  {prog} -p -e /tmp/errors.log
  {prog} -u -p -l /tmp/output.log
"""

# Options that take a file path, as argparse names them in errors.
_PATH_OPTIONS = {"-l/--log", "-e/--errors"}

_IGNORED_EXPLICIT = re.compile(r"ignored explicit argument ['\"](.*)['\"]$")


def format_help(prog: str = PROG) -> str:
    """Return the usage text."""
    return HELP_TEXT.format(prog=prog)


class _HelpAction(argparse.Action):
    """Stop parsing as soon as -h/--help is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested(log_path=getattr(namespace, "log_path", None))


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Help and errors are handled by the caller."""
    parser = _ArgumentParser(
        prog=PROG,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-u", "--users", dest="show_users", action="store_true")
    parser.add_argument("-p", "--processes", dest="show_processes", action="store_true")
    parser.add_argument("-h", "--help", action=_HelpAction)
    parser.add_argument("-l", "--log", dest="log_path", metavar="PATH")
    parser.add_argument("-e", "--errors", dest="errors_path", metavar="PATH")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="store_true")
    return parser


def _unknown_option_name(arg: str) -> str:
    if arg.startswith("--"):
        return arg.split("=", 1)[0]
    return arg[:2]


def _ignored_short_letters(exc: argparse.ArgumentError, argv: list[str]) -> str | None:
    """Return the unknown letters of a short group such as ``-ux``, if that caused ``exc``."""
    match = _IGNORED_EXPLICIT.search(exc.message)
    if match is None or not match.group(1):
        return None
    explicit = match.group(1)
    # --users=yes carries its value after "="; that is not an unknown option
    if any(arg.startswith("--") and arg.endswith("=" + explicit) for arg in argv):
        return None
    return explicit


def _parse(argv: list[str]) -> argparse.Namespace:
    parser = build_parser()
    try:
        namespace, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        if exc.argument_name in _PATH_OPTIONS:
            raise UsageError(f"option {exc.argument_name} requires a file path") from exc
        letters = _ignored_short_letters(exc, argv)
        if letters:
            raise UsageError(f"Unknown option: -{letters[0]}") from exc
        raise UsageError(str(exc)) from exc

    for arg in extras:
        if arg.startswith("-") and arg != "-":
            raise UsageError(f"Unknown option: {_unknown_option_name(arg)}")
        raise UsageError(f"Unexpected argument: {arg}")

    # --log= and --errors= parse as empty strings
    if namespace.log_path == "":
        raise UsageError("option -l/--log requires a file path")
    if namespace.errors_path == "":
        raise UsageError("option -e/--errors requires a file path")
    return namespace


def _help_index(argv: list[str]) -> int:
    """Return the position of the argument that requested help."""
    for end in range(1, len(argv) + 1):
        try:
            build_parser().parse_known_args(argv[:end])
        except HelpRequested:
            return end - 1
        except (argparse.ArgumentError, UsageError):
            continue
    return len(argv)


def parse_args(argv: Sequence[str]) -> tuple[InvocationOptions, bool]:
    """
    Parse ``argv`` (without the program name).

    Returns:
        The frozen options and whether ``--version`` was requested.

    Raises:
        HelpRequested: On -h/--help, carrying any log path seen before it.
        UsageError: On unknown options, missing file paths or stray arguments.
    """
    argv = list(argv)
    try:
        namespace = _parse(argv)
    except HelpRequested:
        # Anything wrong before the help flag is still an error.
        _parse(argv[: _help_index(argv)])
        raise

    options = InvocationOptions(
        show_users=namespace.show_users,
        show_processes=namespace.show_processes,
        log_path=namespace.log_path,
        errors_path=namespace.errors_path,
        verbose=namespace.verbose,
    )
    return options, namespace.version
