"""In-memory relay adapters for testing.

Provides a relay that satisfies :class:`~relaymail.application.ports.MailRelay`
without touching the network, and a config loader that ignores the
process environment.

Contents:
    * :class:`RelaySpy` - Captures submissions for test assertions.
    * :func:`load_relay_config_in_memory` - Environment-independent loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.models import OutgoingMessage, RelaySession
from ..email.config import RelayConfig, load_relay_config


@dataclass(frozen=True, slots=True)
class Submission:
    """One captured call to :meth:`RelaySpy.submit`."""

    message: OutgoingMessage
    session: RelaySession
    message_id: str


def _empty_submissions() -> list[Submission]:
    return []


@dataclass
class RelaySpy:
    """Fake relay that records every submission.

    Each test should create its own RelaySpy to avoid cross-test pollution.

    Attributes:
        submissions: Captured submissions in call order.
        raise_exception: When set, ``submit`` records the call and then
            raises this exact exception object.
        id_domain: Domain used for the generated message identifiers.

    Example:
        >>> import asyncio
        >>> from relaymail.domain.models import GMAIL
        >>> spy = RelaySpy()
        >>> msg = OutgoingMessage(to="a@example.com", subject="Hi", html="<p>Hi</p>", text="Hi")
        >>> asyncio.run(spy.submit(msg, session=RelaySession(profile=GMAIL, account=None)))
        '<1@relay.test>'
        >>> len(spy.submissions)
        1
    """

    submissions: list[Submission] = field(default_factory=_empty_submissions)
    raise_exception: Exception | None = None
    id_domain: str = "relay.test"

    @property
    def messages(self) -> list[OutgoingMessage]:
        """Messages submitted so far."""
        return [submission.message for submission in self.submissions]

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.submissions.clear()
        self.raise_exception = None

    async def submit(self, message: OutgoingMessage, *, session: RelaySession) -> str:
        """Record the submission and return a sequential message id.

        Raises:
            Exception: ``raise_exception`` when set.
        """
        message_id = f"<{len(self.submissions) + 1}@{self.id_domain}>"
        self.submissions.append(Submission(message=message, session=session, message_id=message_id))
        if self.raise_exception is not None:
            raise self.raise_exception
        return message_id


def load_relay_config_in_memory(
    config_dict: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> RelayConfig:
    """Build RelayConfig without consulting ``os.environ``.

    Only the explicitly passed ``environ`` is applied, so CLI tests are
    not affected by real ``GMAIL_*`` variables on the developer machine.
    """
    return load_relay_config(config_dict, environ=environ if environ is not None else {})


__all__ = [
    "RelaySpy",
    "Submission",
    "load_relay_config_in_memory",
]
