"""Reachability probes.

Each probe performs a single synchronous check and reports whether the
target answered. Interpreting the answer (up vs down) is left to the
caller's strategy.
"""

import socket
import subprocess

from waitfor.exceptions import ProbeError, ToolMissingError

__all__ = ["tcp_probe", "icmp_probe", "PING_COMMAND"]

PING_COMMAND = "ping"


def tcp_probe(host: str, port: str, timeout: float | None = None) -> bool:
    """Try to open a TCP connection to host:port.

    Args:
        host: Target hostname or IP address
        port: Port as given on the command line; anything but plain
            decimal digits never connects
        timeout: Connect timeout in seconds, None for the OS default

    Returns:
        True if the connection was accepted
    """
    if not (port.isascii() and port.isdigit()):
        return False
    port_number = int(port)
    if not 0 < port_number < 65536:
        return False

    try:
        with socket.create_connection((host, port_number), timeout=timeout):
            return True
    except OSError:
        return False


def icmp_probe(host: str, ping_cmd: str = PING_COMMAND, wait: int = 1) -> bool:
    """Send one ICMP echo request to host using the system ping.

    Args:
        host: Target hostname or IP address
        ping_cmd: Ping executable to run
        wait: Seconds to wait for the reply

    Returns:
        True if a reply was received

    Raises:
        ToolMissingError: If the ping executable is not installed
        ProbeError: If the ping executable cannot be run
    """
    try:
        result = subprocess.run(
            [ping_cmd, "-c", "1", "-W", str(wait), host],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        raise ToolMissingError(ping_cmd) from None
    except OSError as e:
        raise ProbeError(ping_cmd, e.strerror or str(e)) from e
    return result.returncode == 0
