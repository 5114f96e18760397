"""CLI entry point for syo-ryo-uma."""

from __future__ import annotations

import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: syo-ryo-uma requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

import logging  # noqa: E402
from pathlib import Path  # noqa: E402

import click  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.text import Text  # noqa: E402

from syoryouma.debug_log import export_logs_to_file, setup_debug_logging  # noqa: E402
from syoryouma.errors import SyoRyoUmaError  # noqa: E402
from syoryouma.limits import DEFAULT_SPEED, MAX_SPEED, MIN_SPEED  # noqa: E402
from syoryouma.models import SessionOptions  # noqa: E402
from syoryouma.session import parse_positionals, run_session  # noqa: E402
from syoryouma.version import get_version  # noqa: E402

logger = logging.getLogger(__name__)


def _report_error(exc: BaseException) -> None:
    console = Console(stderr=True)
    console.print(Text.assemble(("Error: ", "bold red"), str(exc)), highlight=False)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True}
)
@click.argument("args", nargs=-1, metavar="[CHARACTER] [SPEED]")
@click.option("--stay", is_flag=True, help="Display the art statically without animation")
@click.option("--reverse", is_flag=True, help="Animate from left to right instead of right to left")
@click.option("--endless", is_flag=True, help="Repeat the animation until interrupted")
@click.option(
    "--debug-log",
    "debug_log_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    hidden=True,
    help="Write captured log records to this file on exit",
)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    stay: bool,
    reverse: bool,
    endless: bool,
    debug_log_path: Path | None,
    version: bool,
) -> None:
    """ASCII art animation of cucumber and eggplant.

    \b
    Characters:
      cucumber    Show cucumber animation only
      eggplant    Show eggplant animation only
      (default)   Show both animations sequentially

    \b
    Speed:
      Number between {min_speed}-{max_speed} (default: {default_speed}, lower is faster)

    \b
    Examples:
      syo-ryo-uma                    # Both animations (cucumber then eggplant)
      syo-ryo-uma 10                 # Both animations at fast speed
      syo-ryo-uma cucumber           # Cucumber animation only
      syo-ryo-uma eggplant           # Eggplant animation only
      syo-ryo-uma --reverse          # Both animations moving left to right
      syo-ryo-uma --reverse cucumber # Cucumber moving left to right
      syo-ryo-uma --stay             # Static display of both
      syo-ryo-uma --stay cucumber    # Static display of cucumber
      syo-ryo-uma --endless          # Keep going until Ctrl+C
      syo-ryo-uma cucumber 10        # Fast cucumber animation
    """
    if version:
        click.echo(f"syo-ryo-uma {get_version()}")
        ctx.exit(0)

    if debug_log_path is not None:
        setup_debug_logging()

    # Unknown long flags are dropped; "-5" and friends stay as positionals
    positionals = tuple(arg for arg in args if not arg.startswith("--"))
    selection, speed = parse_positionals(positionals)
    options = SessionOptions(
        selection=selection,
        speed=speed,
        reverse=reverse,
        stay=stay,
        endless=endless,
    )

    exit_code = 1
    try:
        exit_code = run_session(options)
    except SyoRyoUmaError as exc:
        _report_error(exc)
    finally:
        if debug_log_path is not None:
            count = export_logs_to_file(debug_log_path)
            logger.debug("Exported %d log entries to %s", count, debug_log_path)

    sys.exit(exit_code)


if cli.help is not None:
    cli.help = cli.help.format(
        min_speed=MIN_SPEED, max_speed=MAX_SPEED, default_speed=DEFAULT_SPEED
    )


if __name__ == "__main__":
    cli()
