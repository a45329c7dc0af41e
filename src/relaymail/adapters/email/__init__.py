"""Email adapter - relay configuration, message composition, and SMTP sending.

Structure:
    * :mod:`.config` - RelayConfig model, loader, and configuration check
    * :mod:`.session` - Transport factory (session descriptors)
    * :mod:`.composer` - Fixed HTML/text layout for templated sends
    * :mod:`.relay` - aiosmtplib-backed relay
    * :mod:`.transport` - Sender and public send operations
"""

from __future__ import annotations

from .composer import compose_simple_email, render_simple_email
from .config import RelayConfig, check_relay_config, load_relay_config
from .relay import SmtpRelay, build_mime_message
from .session import create_session
from .transport import deliver, send_email, send_simple_email, send_test_email

__all__ = [
    "RelayConfig",
    "SmtpRelay",
    "build_mime_message",
    "check_relay_config",
    "compose_simple_email",
    "create_session",
    "deliver",
    "load_relay_config",
    "render_simple_email",
    "send_email",
    "send_simple_email",
    "send_test_email",
]
