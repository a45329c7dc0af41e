"""Relay configuration check command.

Reports which credentials are present without contacting the relay.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from relaymail.adapters.email.config import REQUIRED_SETTINGS, check_relay_config
from relaymail.domain.enums import FieldState

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ...exit_codes import ExitCode
from ._common import load_relay_config_or_exit

logger = logging.getLogger(__name__)


def _mark(state: FieldState) -> str:
    return "set" if state is FieldState.OK else "MISSING"


@click.command("check-config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_check_config(ctx: click.Context) -> None:
    """Check that relay credentials are configured.

    Exits with 78 (CONFIG_ERROR) when account or secret is missing.
    """
    cli_ctx = get_cli_context(ctx)

    with lib_log_rich.runtime.bind(job_id="cli-check-config", extra={"command": "check-config"}):
        relay_config = load_relay_config_or_exit(cli_ctx)
        status = check_relay_config(relay_config)

        click.echo(f"Relay provider:  {relay_config.profile.display_name} ({relay_config.profile.hostname})")
        click.echo(f"Account:         {_mark(status.account)}")
        click.echo(f"Secret:          {_mark(status.secret)}")
        click.echo(f"Recipient:       {_mark(status.recipient)}")

        if not status.ready:
            click.echo("\nRequired settings:", err=True)
            for name in status.missing_fields:
                click.echo(f"  {REQUIRED_SETTINGS[name]}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR)

        click.echo("\nRelay configured correctly.")


__all__ = ["cli_check_config"]
