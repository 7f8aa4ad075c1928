"""waitfor exceptions."""

from typing import Any, Sequence


class WaitForError(Exception):
    """Raised when a wait cannot complete.

    Carries a result dict with failed=True so callers can report the
    failure with its structured details.

    Attributes:
        msg: Human-readable error message
        result: Result dict with failed=True and any additional fields

    Example:
        raise WaitForError("Target unreachable", host="db")
        # Creates result: {"failed": True, "msg": "Target unreachable", "host": "db"}
    """

    def __init__(self, msg: str, **result_fields: Any) -> None:
        super().__init__(msg)
        self.msg = msg
        self.result: dict[str, Any] = {
            "failed": True,
            "msg": msg,
            **result_fields,
        }

    def __str__(self) -> str:
        return self.msg


class ConfigurationError(WaitForError):
    """Raised for invalid configuration, before any probing happens."""


class ToolMissingError(WaitForError):
    """Raised when the executable behind a probe is not installed."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool} is not installed", tool=tool)
        self.tool = tool


class WaitTimeoutError(WaitForError):
    """Raised when every attempt ran without reaching the desired state."""

    def __init__(self, target: str, attempts: int) -> None:
        super().__init__(
            f"Operation timed out after {attempts} attempts waiting for {target}",
            target=target,
            attempts=attempts,
        )
        self.target = target
        self.attempts = attempts


class HandoffError(WaitForError):
    """Raised when the follow-up command could not be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(
            f"Failed to execute {command[0]!r}: {reason}",
            command=list(command),
            reason=reason,
        )
        self.command = list(command)


class ProbeError(WaitForError):
    """Raised when a probe executable exists but cannot be run."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"Failed to run {tool}: {reason}", tool=tool, reason=reason)
        self.tool = tool
