"""hostinfo - Main command dispatcher."""

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from hostinfo import __version__
from hostinfo.cli import PROG, format_help, parse_args
from hostinfo.errors import HelpRequested, RedirectionSetupError, UsageError
from hostinfo.queries import show_processes, show_users
from hostinfo.redirect import Sinks, open_help_sink

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _attach_log_handler(stream: TextIO, verbose: bool) -> tuple[logging.Handler, int]:
    """
    Route the package logger to ``stream`` for the duration of a run.

    Returns the handler and the logger level to restore afterwards.
    """
    root = logging.getLogger("hostinfo")
    previous_level = root.level
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return handler, previous_level


def _detach_log_handler(handler: logging.Handler, level: int) -> None:
    root = logging.getLogger("hostinfo")
    root.removeHandler(handler)
    root.setLevel(level)
    handler.close()


def _report_redirect_failure(err: TextIO, exc: RedirectionSetupError, kind: str) -> None:
    err.write(f"Error: {exc}\n")
    err.write(f"Error: cannot write to {kind} '{exc.path}'\n")
    err.flush()


def _print_help(out: TextIO) -> None:
    out.write(format_help(PROG))
    out.flush()


def _help_requested(exc: HelpRequested, stdout: TextIO, stderr: TextIO) -> int:
    """Print help for an explicit -h/--help, honouring an earlier -l/--log."""
    if exc.log_path is None:
        _print_help(stdout)
        return 0
    try:
        sink = open_help_sink(exc.log_path)
    except RedirectionSetupError as err:
        _report_redirect_failure(stderr, err, "log file")
        return 1
    with sink:
        _print_help(sink)
    return 0


def run(
    argv: Sequence[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run hostinfo with ``argv`` and return the exit status.

    Output and error text go to ``stdout``/``stderr`` (default: the process
    streams) unless the command line redirects them to files.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    if not argv:
        _print_help(stdout)
        return 0

    try:
        options, show_version = parse_args(argv)
    except HelpRequested as exc:
        return _help_requested(exc, stdout, stderr)
    except UsageError as exc:
        stderr.write(f"{exc}\n")
        stderr.flush()
        return 1

    if show_version:
        stdout.write(f"{PROG} {__version__}\n")
        return 0

    sinks = Sinks(out=stdout, err=stderr)
    handler, previous_level = _attach_log_handler(stderr, options.verbose)
    logger.debug("Parsed options: %s", options)
    try:
        # Errors first, so a failing log file is reported to the error file.
        if options.redirect_errors:
            try:
                sinks.redirect_errors(options.errors_path)
            except RedirectionSetupError as exc:
                _report_redirect_failure(sinks.err, exc, "error file")
                return 1
            handler.setStream(sinks.err)

        if options.redirect_output:
            try:
                sinks.redirect_output(options.log_path)
            except RedirectionSetupError as exc:
                _report_redirect_failure(sinks.err, exc, "log file")
                return 1

        if not options.has_actions:
            _print_help(sinks.out)
            return 0

        if options.show_users:
            show_users(sinks.out)
        if options.show_processes:
            show_processes(sinks.out)
        return 0
    finally:
        _detach_log_handler(handler, previous_level)
        sinks.close()


def main() -> None:
    """Entry point for the hostinfo command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
