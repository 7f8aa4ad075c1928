"""Select the wait strategy for a configuration and run it.

wait-for-up splits the target into host and port and waits for a TCP
connection to succeed. wait-for-down waits for the host to stop answering
ICMP echo requests. Once the desired state is reached, execution is handed
to the follow-up command.
"""

import shlex
from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from waitfor.exceptions import ConfigurationError, ToolMissingError
from waitfor.handoff import handoff
from waitfor.logging import StructuredLogger
from waitfor.poll import poll
from waitfor.probes import PING_COMMAND, icmp_probe, tcp_probe
from waitfor.types import ProbeOutcome, Target, WaitConfig, WaitMode

__all__ = ["WaitStrategy", "parse_target", "select_strategy", "dispatch"]


@dataclass(frozen=True)
class WaitStrategy:
    """How to probe a target and which answer ends the wait.

    Attributes:
        target: Parsed target being probed
        check: Zero-argument reachability check, True if the target answered
        desired: Value of check that ends the wait
        state: Human-readable desired state ("up" or "down")
        tool: Executable the check relies on, empty if none
    """

    target: Target
    check: Callable[[], bool]
    desired: bool
    state: str
    tool: str = ""

    def probe(self) -> ProbeOutcome:
        """Run the check once and classify the answer."""
        try:
            reachable = self.check()
        except ToolMissingError:
            return ProbeOutcome.TOOL_MISSING
        if reachable == self.desired:
            return ProbeOutcome.SUCCESS
        return ProbeOutcome.FAILURE


def _coerce_mode(mode: WaitMode | str) -> WaitMode:
    try:
        return WaitMode(mode)
    except ValueError:
        raise ConfigurationError(f"Unknown mode: {mode}", mode=str(mode)) from None


def parse_target(target: str, mode: WaitMode | str) -> Target:
    """Split a target string according to mode.

    wait-for-up splits on the first colon. A missing colon leaves the port
    empty, which is not rejected here: such a target simply never connects.
    wait-for-down uses the whole string as the host.

    Raises:
        ConfigurationError: If mode is not recognized, the host is empty,
            or a wait-for-down host would be read as a ping option
    """
    mode = _coerce_mode(mode)
    if mode is WaitMode.WAIT_FOR_UP:
        host, _, port = target.partition(":")
        if not host:
            raise ConfigurationError(f"Missing host in target: {target!r}", target=target)
        return Target(host=host, port=port)

    if target.startswith("-"):
        raise ConfigurationError(f"Invalid host: {target!r}", target=target)
    return Target(host=target)


def select_strategy(
    target: Target,
    mode: WaitMode | str,
    check: Callable[[Target], bool] | None = None,
) -> WaitStrategy:
    """Build the strategy for mode.

    Args:
        target: Parsed target
        mode: State to wait for
        check: Replacement reachability check taking the target

    Raises:
        ConfigurationError: If mode is not recognized
    """
    mode = _coerce_mode(mode)
    if mode is WaitMode.WAIT_FOR_UP:
        default = partial(tcp_probe, target.host, target.port or "")
        return WaitStrategy(
            target=target,
            check=partial(check, target) if check else default,
            desired=True,
            state="up",
        )
    default = partial(icmp_probe, target.host)
    return WaitStrategy(
        target=target,
        check=partial(check, target) if check else default,
        desired=False,
        state="down",
        tool=PING_COMMAND,
    )


def dispatch(
    config: WaitConfig,
    logger: StructuredLogger,
    *,
    check: Callable[[Target], bool] | None = None,
    sleep: Callable[[float], None] | None = None,
    execute: Callable[[Sequence[str]], None] | None = None,
) -> None:
    """Wait for the configured target, then hand off to the command.

    With the default execute this never returns: the process is replaced
    by the command, or exits 0 when there is none.

    Args:
        config: Validated configuration
        logger: Logger for progress lines
        check: Replacement reachability check (for tests)
        sleep: Sleep function, time.sleep if None
        execute: Handoff function, handoff if None

    Raises:
        ConfigurationError: If the mode is not recognized
        ToolMissingError: If the probe executable is missing
        WaitTimeoutError: If the target never reached the desired state
        HandoffError: If the command could not be executed
    """
    target = parse_target(config.target, config.mode)
    strategy = select_strategy(target, config.mode, check)

    logger.info(f"Waiting {config.timeout}s for {target} to be {strategy.state}")
    state = poll(
        strategy.probe,
        config.timeout,
        logger,
        target=str(target),
        tool=strategy.tool,
        sleep=sleep,
    )
    logger.info(f"{target} is {strategy.state} after {state.attempts_made} attempt(s)")

    if config.command:
        logger.info(f"Executing: {shlex.join(config.command)}")
    (execute or handoff)(config.command)
