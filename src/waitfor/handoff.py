"""Hand execution over to the follow-up command."""

import os
import sys
from typing import NoReturn, Sequence

from waitfor.exceptions import HandoffError

__all__ = ["handoff"]


def handoff(command: Sequence[str]) -> NoReturn:
    """Replace the current process with command, or exit 0 if it is empty.

    The new program inherits the environment and open file descriptors,
    and its exit status becomes the status of this process.

    Args:
        command: Program and arguments, looked up on PATH

    Raises:
        HandoffError: If the program could not be executed
    """
    if not command:
        sys.exit(0)

    argv = list(command)
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execvp(argv[0], argv)
    except OSError as e:
        raise HandoffError(argv, e.strerror or str(e)) from e
