"""``relaymail config``: show the merged configuration, secret masked."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from relaymail.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--format", "output_format", type=_FORMAT_CHOICES, default=OutputFormat.HUMAN.value, help="human or json")
@click.option("--section", default=None, help="Limit output to one top-level section, e.g. 'relay'")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Show the configuration every send command would use.

    Layers merge as defaults -> app -> host -> user -> dotenv -> env;
    ``relay.secret`` is printed as ``[REDACTED]``. An unknown ``--section``
    exits with 22.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": cli_ctx.profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
