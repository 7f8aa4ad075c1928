"""Fixed-interval poll loop.

Probes a target once per second until the desired state is observed or the
attempts run out. The number of attempts equals the timeout in seconds.
"""

import time
from typing import Callable

from waitfor.exceptions import ToolMissingError, WaitTimeoutError
from waitfor.logging import StructuredLogger
from waitfor.types import PollState, ProbeOutcome

__all__ = ["poll", "POLL_INTERVAL"]

POLL_INTERVAL = 1


def poll(
    probe: Callable[[], ProbeOutcome],
    max_attempts: int,
    logger: StructuredLogger,
    *,
    target: str = "",
    tool: str = "",
    sleep: Callable[[float], None] | None = None,
    interval: int = POLL_INTERVAL,
) -> PollState:
    """Probe until success or until max_attempts probes have failed.

    Args:
        probe: Zero-argument callable performing one check
        max_attempts: Number of probes to perform at most
        logger: Logger receiving one trace line per attempt
        target: Target description used in messages
        tool: Name of the probe executable, reported if it is missing
        sleep: Sleep function, time.sleep if None
        interval: Seconds between attempts

    Returns:
        PollState after the successful attempt

    Raises:
        ToolMissingError: If the probe reports its tool is absent
        WaitTimeoutError: If every attempt failed
    """
    sleep = sleep or time.sleep
    state = PollState(max_attempts=max_attempts)

    while not state.exhausted:
        state.attempts_made += 1
        outcome = probe()
        logger.trace(
            f"Attempt {state.attempts_made}/{max_attempts}: {outcome.value}",
            target=target,
        )

        if outcome is ProbeOutcome.TOOL_MISSING:
            raise ToolMissingError(tool)

        if outcome is ProbeOutcome.SUCCESS:
            return state

        # No sleep after the last attempt
        if not state.exhausted:
            sleep(interval)

    raise WaitTimeoutError(target, state.attempts_made)
