"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from datetime import datetime
from email.utils import formataddr

from .errors import ConfigurationError
from .models import SimpleEmailOptions

TEST_EMAIL_NAME = "Test User"
TEST_EMAIL_ADDRESS = "test@example.com"
TEST_EMAIL_SUBJECT = "Test Email - Gmail SMTP Service"
TEST_EMAIL_MESSAGE = (
    "This is a test email to verify that the Gmail SMTP service is working correctly.\n\n"
    "If you receive this email, your configuration is correct!"
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_test_email_options() -> SimpleEmailOptions:
    """Return the fixed fields used by the configuration smoke test.

    Example:
        >>> build_test_email_options().name
        'Test User'
    """
    return SimpleEmailOptions(
        name=TEST_EMAIL_NAME,
        email=TEST_EMAIL_ADDRESS,
        subject=TEST_EMAIL_SUBJECT,
        message=TEST_EMAIL_MESSAGE,
    )


def format_timestamp(moment: datetime) -> str:
    """Render the send timestamp shown in both body variants.

    Example:
        >>> format_timestamp(datetime(2024, 3, 1, 9, 5, 7))
        '2024-03-01 09:05:07'
    """
    return moment.strftime(TIMESTAMP_FORMAT)


def default_sender(account: str | None, sender_name: str) -> str | None:
    """Return the ``"Name" <account>`` sender used when no override is given.

    Returns None when no account is configured so the relay library
    decides what to put into the envelope.

    Example:
        >>> default_sender("me@gmail.com", "Email Service")
        'Email Service <me@gmail.com>'
        >>> default_sender(None, "Email Service") is None
        True
    """
    if not account:
        return None
    return formataddr((sender_name, account))


def resolve_destination(
    *,
    default_recipient: str | None,
    account: str | None,
    fallback_to_account: bool,
) -> str:
    """Pick the destination for a templated send.

    The configured default recipient wins. Falling back to the relay
    account itself only happens when ``fallback_to_account`` is enabled.

    Args:
        default_recipient: Configured default recipient (may be a
            comma-delimited list, passed through verbatim).
        account: Relay account identifier.
        fallback_to_account: Whether the account may serve as destination.

    Returns:
        The destination string handed to the relay.

    Raises:
        ConfigurationError: When no destination can be resolved.

    Example:
        >>> resolve_destination(default_recipient="ops@example.com", account="me@gmail.com", fallback_to_account=True)
        'ops@example.com'
        >>> resolve_destination(default_recipient=None, account="me@gmail.com", fallback_to_account=True)
        'me@gmail.com'
    """
    if default_recipient:
        return default_recipient
    if fallback_to_account and account:
        return account
    raise ConfigurationError(
        "No destination configured: set relay.default_recipient (DEFAULT_RECIPIENT) "
        "or enable relay.fallback_to_account"
    )


__all__ = [
    "TEST_EMAIL_ADDRESS",
    "TEST_EMAIL_MESSAGE",
    "TEST_EMAIL_NAME",
    "TEST_EMAIL_SUBJECT",
    "TIMESTAMP_FORMAT",
    "build_test_email_options",
    "default_sender",
    "format_timestamp",
    "resolve_destination",
]
