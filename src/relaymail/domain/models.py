"""Transient value objects for a single send.

Nothing here performs I/O; every object lives for one call and is
discarded once the relay has answered.

Contents:
    * :class:`CredentialStatus` - snapshot of which credentials are present.
    * :class:`RelayProfile` / :data:`RELAY_PROFILES` - fixed relay identities.
    * :class:`RelaySession` - authenticated session descriptor.
    * :class:`EmailAttachment`, :class:`OutgoingMessage`,
      :class:`SimpleEmailOptions` - message payloads.
    * :class:`SendResult`, :class:`Delivered`, :class:`Failed` - send outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Union

from .enums import FieldState


@dataclass(frozen=True, slots=True)
class CredentialStatus:
    """Presence of each credential field plus the derived ready flag.

    Example:
        >>> status = CredentialStatus(account=FieldState.OK, secret=FieldState.MISSING)
        >>> status.ready
        False
        >>> status.missing_fields
        ('secret',)
    """

    account: FieldState
    secret: FieldState
    recipient: FieldState = FieldState.MISSING

    @property
    def ready(self) -> bool:
        """True only when both the account and the secret are present."""
        return self.account is FieldState.OK and self.secret is FieldState.OK

    @property
    def missing_fields(self) -> tuple[str, ...]:
        """Names of the required fields that are missing, in fixed order."""
        return tuple(name for name in ("account", "secret") if getattr(self, name) is FieldState.MISSING)

    def as_dict(self) -> dict[str, str]:
        """Return the per-field states as plain strings."""
        return {
            "account": self.account.value,
            "secret": self.secret.value,
            "recipient": self.recipient.value,
        }


@dataclass(frozen=True, slots=True)
class RelayProfile:
    """Fixed identity of a relay provider (host, port, TLS mode)."""

    name: str
    display_name: str
    hostname: str
    port: int
    use_tls: bool = False
    start_tls: bool = False


GMAIL: Final[RelayProfile] = RelayProfile(
    name="gmail",
    display_name="Gmail",
    hostname="smtp.gmail.com",
    port=465,
    use_tls=True,
)

GMAIL_STARTTLS: Final[RelayProfile] = RelayProfile(
    name="gmail-starttls",
    display_name="Gmail",
    hostname="smtp.gmail.com",
    port=587,
    start_tls=True,
)

#: Known relay profiles keyed by name.
RELAY_PROFILES: Final[dict[str, RelayProfile]] = {profile.name: profile for profile in (GMAIL, GMAIL_STARTTLS)}


@dataclass(frozen=True, slots=True)
class RelaySession:
    """Authenticated handle to the relay: profile plus account and secret.

    The secret is kept out of ``repr`` so sessions can be logged.

    Example:
        >>> session = RelaySession(profile=GMAIL, account="me@gmail.com", secret="hunter2")
        >>> "hunter2" in repr(session)
        False
    """

    profile: RelayProfile
    account: str | None
    secret: str | None = field(default=None, repr=False)
    timeout: float = 30.0

    @property
    def credentials(self) -> tuple[str, str] | None:
        """Return ``(account, secret)`` when both are set, else None."""
        if self.account and self.secret:
            return (self.account, self.secret)
        return None


@dataclass(frozen=True, slots=True)
class EmailAttachment:
    """In-memory attachment: file name, raw bytes, and declared media type."""

    filename: str
    content: bytes = field(repr=False)
    content_type: str = "application/octet-stream"

    @property
    def maintype(self) -> str:
        """Major media type, e.g. ``text`` for ``text/plain``."""
        return self.content_type.partition("/")[0] or "application"

    @property
    def subtype(self) -> str:
        """Media subtype, e.g. ``plain`` for ``text/plain``."""
        return self.content_type.partition("/")[2] or "octet-stream"


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """Fully specified message handed to the relay.

    ``to`` is passed through verbatim; a comma-delimited list of addresses
    is the relay's business to split.
    """

    to: str
    subject: str
    html: str
    text: str
    from_address: str | None = None
    reply_to: str | None = None
    attachments: tuple[EmailAttachment, ...] = ()


@dataclass(frozen=True, slots=True)
class SimpleEmailOptions:
    """Semantic fields for a templated send."""

    name: str
    email: str
    subject: str
    message: str
    attachments: tuple[EmailAttachment, ...] = ()


@dataclass(frozen=True, slots=True)
class SendResult:
    """Relay acknowledgment of a single delivery attempt."""

    success: bool
    message_id: str


@dataclass(frozen=True, slots=True)
class Delivered:
    """Terminal state: the relay accepted the message."""

    result: SendResult

    def unwrap(self) -> SendResult:
        """Return the acknowledgment."""
        return self.result


@dataclass(frozen=True, slots=True)
class Failed:
    """Terminal state: the relay raised; ``cause`` is the exception as raised."""

    cause: BaseException

    def unwrap(self) -> SendResult:
        """Re-raise the original relay error unchanged."""
        raise self.cause


SendOutcome = Union[Delivered, Failed]


__all__ = [
    "GMAIL",
    "GMAIL_STARTTLS",
    "RELAY_PROFILES",
    "CredentialStatus",
    "Delivered",
    "EmailAttachment",
    "Failed",
    "OutgoingMessage",
    "RelayProfile",
    "RelaySession",
    "SendOutcome",
    "SendResult",
    "SimpleEmailOptions",
]
