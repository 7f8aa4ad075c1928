"""waitfor - Wait for a dependency to come up (or go down), then run a command.

Intended for container entrypoints, where a service must not start before the
database, broker or peer it depends on is reachable.

Quick Start:
    from waitfor import WaitConfig
    from waitfor.dispatch import dispatch
    from waitfor.logging import configure_logging, get_logger

    configure_logging()
    dispatch(WaitConfig(target="db:5432", timeout=30, command=("./serve",)),
             get_logger("waitfor"))
"""

__version__ = "0.1.0"

from waitfor.types import WaitConfig, WaitMode

__all__ = ["__version__", "WaitConfig", "WaitMode"]
