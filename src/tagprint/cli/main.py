# topmark:header:start
#
#   project      : TagPrint
#   file         : main.py
#   file_relpath : src/tagprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint Click CLI: a group carrying shared state plus thin subcommands.

Group-level options configure logging once and place the ``console`` (CLI
messages) into ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagprint.cli.commands.log import log_command
from tagprint.cli.commands.print_values import print_command
from tagprint.cli.commands.render import render_command
from tagprint.cli.commands.styles import styles_command
from tagprint.cli.commands.version import version_command
from tagprint.cli.console import ClickConsole
from tagprint.cli.options import common_verbose_options, resolve_verbosity
from tagprint.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tagprint.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (logging & console) on the Click context.

    The ``TAGPRINT_LOG_LEVEL`` environment variable takes precedence over
    ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    setup_logging(level=level)
    logger.debug("Log level resolved to %d (env=%s, cli=%d)", level, level_env, level_cli)

    # Rendered output always carries escape codes; there is no TTY detection.
    ctx.obj["console"] = ClickConsole(enable_color=True)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TagPrint CLI: render markup tags and pretty-print values in the terminal.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the TagPrint CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tagprint render \"[b]TEXT[/]\"' to render markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(print_command)

cli.add_command(log_command)

cli.add_command(styles_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
