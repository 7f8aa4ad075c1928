"""Command-line interface for waitfor."""

import click

from waitfor import __version__
from waitfor.dispatch import dispatch
from waitfor.exceptions import WaitForError
from waitfor.logging import configure_logging, get_level, get_logger
from waitfor.types import DEFAULT_TIMEOUT, WaitConfig, WaitMode

logger = get_logger("waitfor")

CONTEXT_SETTINGS = {
    "help_option_names": ["-?", "--help"],
    "allow_interspersed_args": False,
}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--host", "-h", "target", required=True, metavar="HOST",
    help="host:port for wait-for-up, host for wait-for-down",
)
@click.option(
    "--timeout", "-t", type=click.IntRange(min=1), default=DEFAULT_TIMEOUT,
    show_default=True, metavar="SECONDS", help="Seconds to wait before giving up",
)
@click.option(
    "--mode", "-m", type=click.Choice([mode.value for mode in WaitMode]),
    default=WaitMode.WAIT_FOR_UP.value, show_default=True,
    help="Wait for the host to come up or go down",
)
@click.option("--quiet", "-q", is_flag=True, help="Only print errors")
@click.option("--verbose", "-v", is_flag=True, help="Print every probe attempt")
@click.version_option(__version__, "--version", prog_name="waitfor")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    target: str,
    timeout: int,
    mode: str,
    quiet: bool,
    verbose: bool,
    command: tuple[str, ...],
) -> None:
    """Wait for HOST to be up (or down), then run COMMAND.

    Pass the follow-up command after "--":

        waitfor -h db:5432 -t 60 -- ./serve --port 8000
    """
    configure_logging(level=get_level(quiet, verbose))

    try:
        config = WaitConfig(
            target=target,
            timeout=timeout,
            mode=mode,
            quiet=quiet,
            verbose=verbose,
            command=command,
        )
        dispatch(config, logger)
    except WaitForError as e:
        logger.error(str(e))
        ctx.exit(1)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    Usage errors are reported with status 1 rather than click's 2.
    """
    try:
        rv = cli.main(args=argv, prog_name="waitfor", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
