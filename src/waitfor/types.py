"""Type definitions for waitfor.

This module defines the values passed between the CLI and the wait engine:
the immutable configuration, the parsed target, probe outcomes and the
state of a running poll loop.
"""

from dataclasses import dataclass, field
from enum import Enum

from waitfor.exceptions import ConfigurationError

DEFAULT_TIMEOUT = 3600


class WaitMode(str, Enum):
    """Which availability state to wait for."""

    WAIT_FOR_UP = "wait-for-up"
    WAIT_FOR_DOWN = "wait-for-down"

    def __str__(self) -> str:
        return self.value


class ProbeOutcome(Enum):
    """Result of a single probe, relative to the desired state.

    SUCCESS means the desired state was observed, which for wait-for-down
    is the host no longer answering.
    """

    SUCCESS = "success"
    FAILURE = "failure"
    TOOL_MISSING = "tool-missing"


@dataclass(frozen=True)
class WaitConfig:
    """Configuration for one wait-then-run invocation.

    Attributes:
        target: "host:port" for wait-for-up, "host" for wait-for-down
        timeout: Seconds to wait, which is also the number of probe attempts
        mode: State to wait for (WaitMode or its string value)
        quiet: Suppress info and trace lines
        verbose: Emit a trace line per probe attempt
        command: Follow-up command and arguments (may be empty)

    Example:
        >>> config = WaitConfig(target="db:5432", timeout=30, command=("./serve",))
        >>> config.mode
        <WaitMode.WAIT_FOR_UP: 'wait-for-up'>
    """

    target: str
    timeout: int = DEFAULT_TIMEOUT
    mode: WaitMode = WaitMode.WAIT_FOR_UP
    quiet: bool = False
    verbose: bool = False
    command: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate and normalize configuration after initialization."""
        if not self.target:
            raise ConfigurationError("A host to wait for is required")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int):
            raise ConfigurationError(
                f"Invalid timeout: {self.timeout!r}. Must be a positive integer.",
                timeout=self.timeout,
            )
        if self.timeout <= 0:
            raise ConfigurationError(
                f"Invalid timeout: {self.timeout}. Must be a positive integer.",
                timeout=self.timeout,
            )

        if not isinstance(self.mode, WaitMode):
            try:
                mode = WaitMode(self.mode)
            except ValueError:
                raise ConfigurationError(
                    f"Unknown mode: {self.mode}", mode=self.mode
                ) from None
            object.__setattr__(self, "mode", mode)

        object.__setattr__(self, "command", tuple(self.command))


@dataclass(frozen=True)
class Target:
    """A parsed wait target.

    Attributes:
        host: Hostname or IP address
        port: Port string for TCP probes, None when waiting on the host alone
    """

    host: str
    port: str | None = None

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


@dataclass
class PollState:
    """Tracks progress of a poll loop.

    Attributes:
        max_attempts: Number of attempts allowed (the timeout in seconds)
        attempts_made: Number of probes performed so far
    """

    max_attempts: int
    attempts_made: int = 0

    @property
    def exhausted(self) -> bool:
        """Check if no attempts remain."""
        return self.attempts_made >= self.max_attempts
