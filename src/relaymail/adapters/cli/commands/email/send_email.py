"""Direct send CLI command.

Sends a caller-built message with HTML, plain text, and attachments.
"""

from __future__ import annotations

import functools
import logging

import lib_log_rich.runtime
import rich_click as click

from relaymail.adapters.email.transport import send_email
from relaymail.domain.models import OutgoingMessage

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import execute_send, load_relay_config_or_exit, read_attachments, require_ready

logger = logging.getLogger(__name__)


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "to", required=True, help="Recipient address, or several separated by commas")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--html", "html", default="", help="HTML body")
@click.option("--text", "text", default="", help="Plain-text body")
@click.option("--from", "from_address", default=None, help="Sender override (defaults to the relay account)")
@click.option("--reply-to", "reply_to", default=None, help="Reply-To address")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (can specify multiple)",
)
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    to: str,
    subject: str,
    html: str,
    text: str,
    from_address: str | None,
    reply_to: str | None,
    attachments: tuple[str, ...],
) -> None:
    """Send an email through the configured relay."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-email", "to": to, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        relay_config = load_relay_config_or_exit(cli_ctx)
        require_ready(relay_config)

        message = OutgoingMessage(
            to=to,
            subject=subject,
            html=html,
            text=text,
            from_address=from_address,
            reply_to=reply_to,
            attachments=read_attachments(attachments),
        )
        logger.info(
            "Sending email",
            extra={"to": to, "has_html": bool(html), "attachment_count": len(message.attachments)},
        )
        execute_send(
            functools.partial(send_email, message, config=relay_config, relay=cli_ctx.services.relay),
            message_type="Email",
        )


__all__ = ["cli_send_email"]
