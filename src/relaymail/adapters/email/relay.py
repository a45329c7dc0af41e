"""SMTP relay adapter built on aiosmtplib.

Turns an :class:`~relaymail.domain.models.OutgoingMessage` into a MIME
message and submits it in a single ``aiosmtplib.send`` call. The SMTP
conversation, TLS negotiation, and connection lifetime belong to
aiosmtplib; nothing here retries or pools.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

from relaymail.domain.models import OutgoingMessage, RelaySession

logger = logging.getLogger(__name__)


def build_mime_message(message: OutgoingMessage, *, sender: str | None) -> EmailMessage:
    """Build a multipart/alternative MIME message with optional attachments.

    Recipients are copied verbatim into the ``To`` header; aiosmtplib
    extracts the envelope recipients from it.

    Args:
        message: Fully specified message.
        sender: Value for the ``From`` header, or None to leave it unset.

    Returns:
        MIME message carrying a freshly generated ``Message-ID``.

    Example:
        >>> msg = build_mime_message(
        ...     OutgoingMessage(to="a@example.com", subject="Hi", html="<p>Hi</p>", text="Hi"),
        ...     sender="me@example.com",
        ... )
        >>> msg["To"], msg.get_content_type()
        ('a@example.com', 'multipart/alternative')
    """
    mime = EmailMessage()
    mime["Subject"] = message.subject
    if sender:
        mime["From"] = sender
    mime["To"] = message.to
    if message.reply_to:
        mime["Reply-To"] = message.reply_to
    mime["Message-ID"] = make_msgid()

    mime.set_content(message.text, subtype="plain", charset="utf-8")
    if message.html:
        mime.add_alternative(message.html, subtype="html", charset="utf-8")

    for attachment in message.attachments:
        mime.add_attachment(
            attachment.content,
            maintype=attachment.maintype,
            subtype=attachment.subtype,
            filename=attachment.filename,
        )
    return mime


class SmtpRelay:
    """Production :class:`~relaymail.application.ports.MailRelay` over SMTP.

    Each :meth:`submit` opens its own connection, authenticates with the
    session credentials, sends once, and closes. Errors raised by
    aiosmtplib (``SMTPAuthenticationError``, ``SMTPConnectError``,
    ``SMTPRecipientsRefused``, ...) propagate untouched.
    """

    async def submit(self, message: OutgoingMessage, *, session: RelaySession) -> str:
        """Send ``message`` through the session's relay and return its Message-ID."""
        mime = build_mime_message(message, sender=message.from_address or session.account)
        credentials = session.credentials
        profile = session.profile

        logger.debug(
            "Submitting message to relay",
            extra={"host": profile.hostname, "port": profile.port, "to": message.to},
        )
        await aiosmtplib.send(
            mime,
            hostname=profile.hostname,
            port=profile.port,
            username=credentials[0] if credentials else None,
            password=credentials[1] if credentials else None,
            use_tls=profile.use_tls,
            start_tls=profile.start_tls,
            timeout=session.timeout,
        )
        return str(mime["Message-ID"])


__all__ = [
    "SmtpRelay",
    "build_mime_message",
]
