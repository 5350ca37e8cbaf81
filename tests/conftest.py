"""Shared fixtures for hostinfo tests."""

import pytest

from hostinfo import queries
from hostinfo.models import ProcessRecord, UserRecord

FAKE_USERS = [
    UserRecord(name="zoe", home_directory="/home/zoe"),
    UserRecord(name="root", home_directory="/root"),
    UserRecord(name="alice", home_directory="/home/alice"),
]

FAKE_PROCESSES = [
    ProcessRecord(pid=10, command="kworker"),
    ProcessRecord(pid=9, command="bash"),
    ProcessRecord(pid=100, command="sshd"),
    ProcessRecord(pid=1, command="systemd"),
]


@pytest.fixture
def fake_system(monkeypatch):
    """Replace the account database and process table with fixed data."""
    monkeypatch.setattr(queries, "collect_users", lambda: list(FAKE_USERS))
    monkeypatch.setattr(queries, "collect_processes", lambda: list(FAKE_PROCESSES))
