"""System information queries for hostinfo."""

import logging
import pwd
from typing import TextIO

import psutil

from hostinfo.models import ProcessRecord, UserRecord

logger = logging.getLogger(__name__)


def collect_users() -> list[UserRecord]:
    """Read every entry of the local account database."""
    return [UserRecord(name=entry.pw_name, home_directory=entry.pw_dir) for entry in pwd.getpwall()]


def collect_processes() -> list[ProcessRecord]:
    """
    Collect PID and command name for all running processes.

    Processes that exit or deny access while being read are skipped.
    """
    processes: list[ProcessRecord] = []

    for proc in psutil.process_iter(attrs=["pid", "name"]):
        try:
            info = proc.info
            processes.append(
                ProcessRecord(
                    pid=info.get("pid", proc.pid),
                    command=info.get("name") or "",
                )
            )
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
            logger.debug("Skipping process %s", proc.pid)
            continue

    return processes


def _write_lines(out: TextIO, lines: list[str]) -> int:
    for line in lines:
        out.write(line + "\n")
    out.flush()
    return len(lines)


def show_users(out: TextIO) -> int:
    """
    Write one ``name:home`` line per user to ``out``.

    Lines are sorted by their full text. Returns the number of lines written.
    """
    lines = sorted(user.format() for user in collect_users())
    logger.debug("Listing %d users", len(lines))
    return _write_lines(out, lines)


def show_processes(out: TextIO) -> int:
    """Write one ``PID COMMAND`` line per process, ascending by PID."""
    processes = sorted(collect_processes(), key=lambda p: p.pid)
    logger.debug("Listing %d processes", len(processes))
    return _write_lines(out, [proc.format() for proc in processes])
