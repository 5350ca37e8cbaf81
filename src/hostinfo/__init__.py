"""hostinfo - report system users and running processes."""

__version__ = "0.1.0"
