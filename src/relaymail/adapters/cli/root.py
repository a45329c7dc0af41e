"""The ``relaymail`` command group.

Every invocation resolves the services factory handed in as ``ctx.obj``,
loads the layered configuration for ``--profile``, starts logging, and
leaves a :class:`~.context.CLIContext` behind for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from relaymail import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from relaymail.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option(
    "--profile",
    default=None,
    help="Configuration profile to layer on top of the defaults (e.g. 'staging')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Resolve services, configuration, and logging for the subcommand."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")

    services: AppServices = factory()
    config = services.get_config(profile=profile)
    services.init_logging(config)

    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported late: the command modules import ``context`` and ``constants`` from this package.
    from . import commands

    for command in (
        commands.cli_info,
        commands.cli_config,
        commands.cli_check_config,
        commands.cli_send_email,
        commands.cli_send_simple,
        commands.cli_example,
    ):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
