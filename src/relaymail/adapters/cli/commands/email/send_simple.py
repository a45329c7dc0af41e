"""Templated send CLI command."""

from __future__ import annotations

import functools
import logging

import lib_log_rich.runtime
import rich_click as click

from relaymail.adapters.email.transport import send_simple_email
from relaymail.domain.models import SimpleEmailOptions

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import execute_send, load_relay_config_or_exit, read_attachments, require_ready

logger = logging.getLogger(__name__)


@click.command("send-simple", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", required=True, help="Sender's display name shown in the message")
@click.option("--email", required=True, help="Sender's address, used as Reply-To")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--message", required=True, help="Message body")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (can specify multiple)",
)
@click.pass_context
def cli_send_simple(
    ctx: click.Context,
    name: str,
    email: str,
    subject: str,
    message: str,
    attachments: tuple[str, ...],
) -> None:
    """Render the standard template and send it to the default recipient."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-simple", "reply_to": email, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-simple", extra=extra):
        relay_config = load_relay_config_or_exit(cli_ctx)
        require_ready(relay_config)

        options = SimpleEmailOptions(
            name=name,
            email=email,
            subject=subject,
            message=message,
            attachments=read_attachments(attachments),
        )
        execute_send(
            functools.partial(send_simple_email, options, config=relay_config, relay=cli_ctx.services.relay),
            message_type="Email",
        )


__all__ = ["cli_send_simple"]
