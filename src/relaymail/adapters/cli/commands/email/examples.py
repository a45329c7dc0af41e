"""Canned sending scenarios for trying out a relay configuration.

Contents:
    * :func:`build_scenario` - Build the send operation for one scenario.
    * :func:`cli_example` - CLI command running a scenario by keyword.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import lib_log_rich.runtime
import rich_click as click

from relaymail import __init__conf__
from relaymail.adapters.email.config import RelayConfig
from relaymail.adapters.email.transport import send_email, send_simple_email, send_test_email
from relaymail.application.ports import MailRelay
from relaymail.domain.enums import Scenario
from relaymail.domain.models import EmailAttachment, OutgoingMessage, SendResult, SimpleEmailOptions

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import execute_send, load_relay_config_or_exit, require_ready

logger = logging.getLogger(__name__)

SCENARIO_HELP: dict[Scenario, str] = {
    Scenario.TEST: "Send a test email",
    Scenario.SIMPLE: "Send a simple formatted email",
    Scenario.HTML: "Send custom HTML email",
    Scenario.ATTACHMENT: "Send email with attachments",
    Scenario.MULTIPLE: "Send to multiple recipients",
}

_WELCOME_HTML = """\
<h1 style="color: #333;">Welcome!</h1>
<p>This is a custom HTML email with <strong>formatting</strong>.</p>
<ul>
  <li>Feature 1</li>
  <li>Feature 2</li>
  <li>Feature 3</li>
</ul>
<p>Visit <a href="https://github.com">GitHub</a> for more info.</p>
"""


def example_attachments(now: datetime) -> tuple[EmailAttachment, ...]:
    """Return the two in-memory attachments of the attachment scenario.

    Example:
        >>> [a.filename for a in example_attachments(datetime(2024, 1, 1))]
        ['example.txt', 'data.json']
    """
    payload = json.dumps({"example": "data", "timestamp": now.isoformat()}, indent=2)
    return (
        EmailAttachment(
            filename="example.txt",
            content=b"This is the content of the text file attachment.",
            content_type="text/plain",
        ),
        EmailAttachment(
            filename="data.json",
            content=payload.encode("utf-8"),
            content_type="application/json",
        ),
    )


def build_scenario(
    scenario: Scenario,
    *,
    config: RelayConfig,
    relay: MailRelay,
    now: datetime | None = None,
) -> Callable[[], Awaitable[SendResult]]:
    """Return a zero-argument coroutine factory performing ``scenario``.

    Direct-send scenarios address the relay account itself; the multiple
    recipients scenario prefers the configured (comma-delimited) default
    recipient list.
    """
    now = now or datetime.now(timezone.utc)
    account = config.account or ""

    if scenario is Scenario.TEST:
        return functools.partial(send_test_email, config=config, relay=relay)

    if scenario is Scenario.SIMPLE:
        options = SimpleEmailOptions(
            name="John Doe",
            email="john.doe@example.com",
            subject="Contact Form Submission",
            message="Hello!\n\nThis is a message from your contact form.\n\nBest regards,\nJohn",
        )
        return functools.partial(send_simple_email, options, config=config, relay=relay)

    if scenario is Scenario.HTML:
        message = OutgoingMessage(
            to=account,
            subject="Custom HTML Email",
            html=_WELCOME_HTML,
            text="Welcome! This is a custom email. Visit GitHub for more info.",
            reply_to="noreply@example.com",
        )
        return functools.partial(send_email, message, config=config, relay=relay)

    if scenario is Scenario.ATTACHMENT:
        options = SimpleEmailOptions(
            name="Jane Smith",
            email="jane.smith@example.com",
            subject="Email with Attachments",
            message="Please find the attached files.",
            attachments=example_attachments(now),
        )
        return functools.partial(send_simple_email, options, config=config, relay=relay)

    message = OutgoingMessage(
        to=config.default_recipient or account,
        subject="Announcement",
        html="<h2>Important Announcement</h2><p>This email is sent to multiple recipients.</p>",
        text="Important Announcement\n\nThis email is sent to multiple recipients.",
    )
    return functools.partial(send_email, message, config=config, relay=relay)


def _echo_available() -> None:
    click.echo("Available examples:")
    for scenario, description in SCENARIO_HELP.items():
        click.echo(f"  {__init__conf__.shell_command} example {scenario.value:<10} - {description}")


@click.command("example", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("scenario", required=False, default=Scenario.TEST.value)
@click.pass_context
def cli_example(ctx: click.Context, scenario: str) -> None:
    """Run a canned sending scenario (test, simple, html, attachment, multiple)."""
    cli_ctx = get_cli_context(ctx)

    with lib_log_rich.runtime.bind(job_id="cli-example", extra={"command": "example", "scenario": scenario}):
        relay_config = load_relay_config_or_exit(cli_ctx)
        require_ready(relay_config)

        try:
            selected = Scenario(scenario)
        except ValueError:
            logger.info("Unknown example scenario", extra={"scenario": scenario})
            _echo_available()
            return

        execute_send(
            build_scenario(selected, config=relay_config, relay=cli_ctx.services.relay),
            message_type="Email",
        )


__all__ = ["SCENARIO_HELP", "build_scenario", "cli_example", "example_attachments"]
