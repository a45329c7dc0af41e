"""Transport factory: relay session descriptors from configuration."""

from __future__ import annotations

from relaymail.domain.models import RelaySession

from .config import RelayConfig


def create_session(config: RelayConfig) -> RelaySession:
    """Return a session descriptor bound to the configured relay profile.

    Secrets are not checked here; a wrong or missing secret only surfaces
    when the relay rejects a send. Descriptors are cheap and not pooled,
    so calling this once per send is fine.

    Args:
        config: Relay configuration holding provider, account, and secret.

    Returns:
        Immutable session descriptor.

    Example:
        >>> session = create_session(RelayConfig(account="me@gmail.com", secret="pw"))
        >>> session.profile.port, session.credentials
        (465, ('me@gmail.com', 'pw'))
    """
    return RelaySession(
        profile=config.profile,
        account=config.account,
        secret=config.secret,
        timeout=config.timeout,
    )


__all__ = ["create_session"]
