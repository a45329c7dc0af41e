"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.email` - Fake relay (RelaySpy) and environment-free config loader
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .email import RelaySpy, Submission, load_relay_config_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from relaymail.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadRelayConfig,
        MailRelay,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_relay_config: LoadRelayConfig = load_relay_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_relay: MailRelay = RelaySpy()

__all__ = [
    "RelaySpy",
    "Submission",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_relay_config_in_memory",
]
