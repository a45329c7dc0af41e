"""Public package surface: relay configuration, composition, and send operations.

Routes imports through the architectural layers:
- Domain exports: message, session, and result value objects
- Adapter exports: configuration check, transport factory, send operations
- Composition exports: configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.email import (
    RelayConfig,
    SmtpRelay,
    check_relay_config,
    compose_simple_email,
    create_session,
    load_relay_config,
    send_email,
    send_simple_email,
    send_test_email,
)

# Composition exports
from .composition import get_config

# Domain exports
from .domain import (
    ConfigurationError,
    CredentialStatus,
    EmailAttachment,
    OutgoingMessage,
    RelaySession,
    SendResult,
    SimpleEmailOptions,
)

__all__ = [
    "ConfigurationError",
    "CredentialStatus",
    "EmailAttachment",
    "OutgoingMessage",
    "RelayConfig",
    "RelaySession",
    "SendResult",
    "SimpleEmailOptions",
    "SmtpRelay",
    "check_relay_config",
    "compose_simple_email",
    "create_session",
    "get_config",
    "load_relay_config",
    "print_info",
    "send_email",
    "send_simple_email",
    "send_test_email",
]
