"""Tests for the process handoff."""

import errno
import os

import pytest

from waitfor.exceptions import HandoffError
from waitfor.handoff import handoff


def test_empty_command_exits_zero():
    with pytest.raises(SystemExit) as exc_info:
        handoff(())
    assert exc_info.value.code == 0


def test_execs_argument_vector(monkeypatch):
    """Test the command is exec'd with its arguments as separate tokens."""
    calls = []
    monkeypatch.setattr(os, "execvp", lambda file, args: calls.append((file, args)))

    handoff(("echo", "hello world"))

    assert calls == [("echo", ["echo", "hello world"])]


def test_command_not_found(monkeypatch):
    def fail(file, args):
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", file)

    monkeypatch.setattr(os, "execvp", fail)

    with pytest.raises(HandoffError, match="No such file or directory") as exc_info:
        handoff(["no-such-command", "--flag"])

    assert exc_info.value.command == ["no-such-command", "--flag"]
    assert exc_info.value.result["failed"] is True


def test_permission_denied(monkeypatch):
    def fail(file, args):
        raise PermissionError(errno.EACCES, "Permission denied", file)

    monkeypatch.setattr(os, "execvp", fail)

    with pytest.raises(HandoffError, match="Permission denied"):
        handoff(["./not-executable"])
