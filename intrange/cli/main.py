"""intrange command line interface.

Commands:
- show: print the elements of a range, optionally reversed
- length: print the length of a range
- get: print the element at an index

Range arguments follow the builtin signature (END | START END |
START END STEP) and go through checked_range(), so conversion failures
are reported instead of raising. Negative numbers may be passed directly.
"""

from __future__ import annotations

from dataclasses import replace

import click

from intrange import __version__
from intrange.config import Settings
from intrange.construct import AnyRange, checked_range, to_int
from intrange.types.errors import ConfigurationError, ConversionError, ZeroStepError
from intrange.utils.logger import configure_logging, logger

# Lets "-3" through as a positional argument instead of an unknown option.
_RANGE_COMMAND_SETTINGS = {"ignore_unknown_options": True}


def _resolve_range(args: tuple[str, ...]) -> AnyRange:
    try:
        rng = checked_range(*args)
        # Surfaces a zero step before anything is printed.
        rng.length()
    except ConversionError as e:
        raise click.ClickException(f"{e.user_message} ({e})") from e
    except ZeroStepError as e:
        raise click.ClickException(e.user_message) from e
    except TypeError as e:
        raise click.UsageError(str(e)) from e
    return rng


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="intrange", message="intrange v%(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """intrange - Integer ranges with stride, reversal and indexing."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        raise click.ClickException(e.get_formatted_message()) from e

    if verbose:
        settings = replace(settings, debug=True)
    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(context_settings=_RANGE_COMMAND_SETTINGS)
@click.argument("args", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print the elements last first.")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum elements to print.")
@click.pass_obj
def show(settings: Settings, args: tuple[str, ...], reverse: bool, limit: int | None) -> None:
    """Print the elements of range(ARGS...), one per line."""
    rng = _resolve_range(args)
    limit = min(limit or settings.max_display, settings.max_display)
    logger.debug("show {} reverse={} limit={}", rng, reverse, limit)

    cursor = rng.reversed() if reverse else iter(rng)
    shown = 0
    while shown < limit and cursor.has_next():
        click.echo(cursor.next())
        shown += 1

    if cursor.has_next():
        click.echo(f"... truncated after {limit} elements", err=True)


@cli.command(context_settings=_RANGE_COMMAND_SETTINGS)
@click.argument("args", nargs=-1, required=True)
def length(args: tuple[str, ...]) -> None:
    """Print the length of range(ARGS...)."""
    click.echo(_resolve_range(args).length())


@cli.command(context_settings=_RANGE_COMMAND_SETTINGS)
@click.argument("index")
@click.argument("args", nargs=-1, required=True)
def get(index: str, args: tuple[str, ...]) -> None:
    """Print element INDEX of range(ARGS...). Negative indices count from the end."""
    rng = _resolve_range(args)
    try:
        click.echo(rng[to_int(index, "index")])
    except ConversionError as e:
        raise click.ClickException(f"{e.user_message} ({e})") from e
    except IndexError as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
