"""Data models for hostinfo."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class InvocationOptions:
    """Immutable options built from the command line."""

    show_users: bool = False
    show_processes: bool = False
    log_path: str | None = None
    errors_path: str | None = None
    verbose: bool = False

    @property
    def redirect_output(self) -> bool:
        return self.log_path is not None

    @property
    def redirect_errors(self) -> bool:
        return self.errors_path is not None

    @property
    def has_actions(self) -> bool:
        """True when at least one listing was requested."""
        return self.show_users or self.show_processes


@dataclass(slots=True, frozen=True)
class UserRecord:
    """A local account: login name and home directory."""

    name: str
    home_directory: str

    def format(self) -> str:
        return f"{self.name}:{self.home_directory}"


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """A running process: PID and command name."""

    pid: int
    command: str  # Short name, as in `ps -o comm`

    def format(self) -> str:
        return f"{self.pid:>7} {self.command}"
