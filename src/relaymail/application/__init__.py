"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions and the mail relay
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadRelayConfig,
    MailRelay,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadRelayConfig",
    "MailRelay",
]
