"""Message composer: fixed HTML and plain-text layout for templated sends.

Both variants are rendered from the same context by the jinja2 templates
shipped in ``templates/`` so they always carry the same facts: sender
name, sender email, message body, attachment count (only when there are
attachments), and the send timestamp. The user fields appear verbatim in
both variants; the remaining HTML values are autoescaped.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from relaymail.domain.behaviors import format_timestamp
from relaymail.domain.models import OutgoingMessage, SimpleEmailOptions

TEMPLATES_DIR = Path(__file__).parent / "templates"
HTML_TEMPLATE = "simple_email.html.jinja"
TEXT_TEMPLATE = "simple_email.txt.jinja"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    """Return the shared jinja2 environment (HTML templates autoescaped unless marked ``safe``)."""
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(enabled_extensions=("html.jinja",), default_for_string=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def _template_context(options: SimpleEmailOptions, *, sent_at: datetime, service_label: str) -> dict[str, Any]:
    return {
        "name": options.name,
        "email": options.email,
        "message": options.message,
        "attachment_count": len(options.attachments),
        "service_label": service_label,
        "timestamp": format_timestamp(sent_at),
    }


def render_simple_email(
    options: SimpleEmailOptions,
    *,
    sent_at: datetime,
    service_label: str,
) -> tuple[str, str]:
    """Render the ``(html, text)`` bodies for a templated send.

    Rendering is deterministic: the same options and ``sent_at`` always
    produce the same bodies.

    Args:
        options: Semantic fields of the message.
        sent_at: Timestamp printed in the footer.
        service_label: Attribution shown as ``Sent via <service_label>``.

    Returns:
        Tuple of HTML body and plain-text body.
    """
    env = _environment()
    context = _template_context(options, sent_at=sent_at, service_label=service_label)
    html = env.get_template(HTML_TEMPLATE).render(context)
    text = env.get_template(TEXT_TEMPLATE).render(context)
    return html, text


def compose_simple_email(
    options: SimpleEmailOptions,
    *,
    to: str,
    sent_at: datetime | None = None,
    service_label: str = "Gmail SMTP Service",
) -> OutgoingMessage:
    """Build the full message for a templated send.

    ``reply_to`` is always the supplied sender email, so replies reach the
    original sender instead of the relay account.

    Args:
        options: Semantic fields (name, email, subject, message, attachments).
        to: Destination, already resolved by the caller.
        sent_at: Timestamp for the footer; defaults to the current local time.
        service_label: Attribution shown in the footer.

    Returns:
        Message ready for the sender.

    Example:
        >>> opts = SimpleEmailOptions(name="Ada", email="ada@example.com", subject="Hi", message="Hello")
        >>> msg = compose_simple_email(opts, to="ops@example.com", sent_at=datetime(2024, 1, 1))
        >>> msg.reply_to, "Ada" in msg.html, "Ada" in msg.text
        ('ada@example.com', True, True)
    """
    moment = sent_at if sent_at is not None else datetime.now()
    html, text = render_simple_email(options, sent_at=moment, service_label=service_label)
    return OutgoingMessage(
        to=to,
        subject=options.subject,
        html=html,
        text=text,
        reply_to=options.email,
        attachments=options.attachments,
    )


__all__ = [
    "compose_simple_email",
    "render_simple_email",
]
