"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Destination/sender resolution and canned test fields
    * :mod:`.enums` - Domain enumerations (FieldState, OutputFormat, Scenario)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Transient message, session, and result value objects
"""

from __future__ import annotations

from .behaviors import (
    build_test_email_options,
    default_sender,
    format_timestamp,
    resolve_destination,
)
from .enums import FieldState, OutputFormat, Scenario
from .errors import ConfigurationError
from .models import (
    RELAY_PROFILES,
    CredentialStatus,
    Delivered,
    EmailAttachment,
    Failed,
    OutgoingMessage,
    RelayProfile,
    RelaySession,
    SendOutcome,
    SendResult,
    SimpleEmailOptions,
)

__all__ = [
    # Behaviors
    "build_test_email_options",
    "default_sender",
    "format_timestamp",
    "resolve_destination",
    # Enums
    "FieldState",
    "OutputFormat",
    "Scenario",
    # Errors
    "ConfigurationError",
    # Models
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
