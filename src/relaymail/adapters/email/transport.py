"""Sender and public send operations.

:func:`deliver` submits one message through a :class:`MailRelay` and
reports the outcome as a value. :func:`send_email`,
:func:`send_simple_email`, and :func:`send_test_email` build on it and
return the :class:`SendResult` or re-raise the relay's error unchanged.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from relaymail.application.ports import MailRelay
from relaymail.domain.behaviors import build_test_email_options, default_sender, resolve_destination
from relaymail.domain.models import (
    Delivered,
    Failed,
    OutgoingMessage,
    RelaySession,
    SendOutcome,
    SendResult,
    SimpleEmailOptions,
)

from .composer import compose_simple_email
from .config import RelayConfig
from .session import create_session

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "secret",
        "token",
        "key",
    }
)


def _sanitize_exception_message(exc: BaseException) -> str:
    """Return a loggable description of a relay error.

    Falls back to a generic message when the error text contains keywords
    suggesting the relay echoed sensitive data.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(FakeExc("bad password hunter2"))
        'Relay rejected the request. Check relay credentials.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Relay rejected the request. Check relay credentials."
    return str(exc)


async def deliver(message: OutgoingMessage, *, session: RelaySession, relay: MailRelay) -> SendOutcome:
    """Submit ``message`` exactly once and report the terminal state.

    Args:
        message: Message to hand to the relay.
        session: Session descriptor for the relay.
        relay: Relay port implementation.

    Returns:
        :class:`Delivered` with the relay-issued identifier, or
        :class:`Failed` holding the exception object the relay raised.

    Side Effects:
        Logs the delivered identifier at INFO, or a sanitized diagnostic
        at ERROR before the failure is handed back.
    """
    try:
        message_id = await relay.submit(message, session=session)
    except Exception as exc:
        logger.error(
            "Failed to send email: %s",
            _sanitize_exception_message(exc),
            extra={"to": message.to, "error_type": type(exc).__name__},
        )
        logger.debug("Relay submission failed", exc_info=True)
        return Failed(cause=exc)

    logger.info(
        "Email sent successfully to %s",
        message.to,
        extra={"to": message.to, "message_id": message_id},
    )
    return Delivered(result=SendResult(success=True, message_id=message_id))


async def send_email(message: OutgoingMessage, *, config: RelayConfig, relay: MailRelay) -> SendResult:
    """Direct send: submit a caller-built message.

    The message is passed through unchanged except that a missing sender
    override becomes ``"<sender_name>" <account>``.

    Args:
        message: Fully formed message.
        config: Relay configuration used for the session and default sender.
        relay: Relay port implementation.

    Returns:
        Relay acknowledgment with ``success=True`` and the message id.

    Raises:
        Exception: Whatever the relay raised, unchanged.
    """
    if message.from_address is None:
        message = dataclasses.replace(message, from_address=default_sender(config.account, config.sender_name))

    outcome = await deliver(message, session=create_session(config), relay=relay)
    return outcome.unwrap()


async def send_simple_email(
    options: SimpleEmailOptions,
    *,
    config: RelayConfig,
    relay: MailRelay,
    sent_at: datetime | None = None,
) -> SendResult:
    """Templated send: render both body variants and submit.

    The destination is the configured default recipient, or the relay
    account when ``config.fallback_to_account`` allows it. Reply-To is
    always ``options.email``.

    Args:
        options: Semantic fields of the message.
        config: Relay configuration.
        relay: Relay port implementation.
        sent_at: Timestamp printed in both bodies; defaults to now.

    Returns:
        Relay acknowledgment.

    Raises:
        ConfigurationError: No destination can be resolved.
        Exception: Whatever the relay raised, unchanged.
    """
    destination = resolve_destination(
        default_recipient=config.default_recipient,
        account=config.account,
        fallback_to_account=config.fallback_to_account,
    )
    message = compose_simple_email(
        options,
        to=destination,
        sent_at=sent_at,
        service_label=f"{config.profile.display_name} SMTP Service",
    )
    return await send_email(message, config=config, relay=relay)


async def send_test_email(*, config: RelayConfig, relay: MailRelay) -> SendResult:
    """Send the canned test message to verify the relay configuration."""
    logger.info("Sending test email")
    return await send_simple_email(build_test_email_options(), config=config, relay=relay)


__all__ = [
    "deliver",
    "send_email",
    "send_simple_email",
    "send_test_email",
]
