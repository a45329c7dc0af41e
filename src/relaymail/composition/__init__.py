"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.email.config import load_relay_config
from ..adapters.email.relay import SmtpRelay
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter
# structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.email import RelaySpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadRelayConfig,
        MailRelay,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_relay_config: LoadRelayConfig = load_relay_config
    _assert_init_logging: InitLogging = init_logging
    _assert_relay: MailRelay = SmtpRelay()


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_relay_config: LoadRelayConfig
    init_logging: InitLogging
    relay: MailRelay


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_relay_config=load_relay_config,
        init_logging=init_logging,
        relay=SmtpRelay(),
    )


def build_testing(*, spy: RelaySpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional RelaySpy for capturing submissions. When None, a
            fresh RelaySpy is created.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RelaySpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_relay_config_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_relay_config=load_relay_config_in_memory,
        init_logging=init_logging_in_memory,
        relay=spy if spy is not None else RelaySpy(),
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "load_relay_config",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
