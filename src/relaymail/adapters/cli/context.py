"""Per-invocation CLI state and traceback flag handling.

The root group stores a :class:`CLIContext` on ``ctx.obj``; send and
config commands read it back through :func:`get_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from relaymail.adapters.email.config import RelayConfig
    from relaymail.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools.config`` flags touched by ``--traceback``."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State resolved once by the root group.

    Attributes:
        traceback: ``--traceback`` was passed.
        config: Layered configuration for the selected profile.
        services: Wired adapters (relay, loaders, logging).
        profile: Profile name passed with ``--profile``, if any.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None

    def relay_config(self) -> RelayConfig:
        """Build the relay configuration from this invocation's config."""
        return self.services.load_relay_config(self.config.as_dict())


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Attach a fresh :class:`CLIContext` to ``ctx.obj``."""
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: Nothing (or something else) sits on ``ctx.obj``,
            which happens when a subcommand is invoked without the root group.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(False)
        >>> snapshot_traceback_state()
        TracebackState(enabled=False, force_color=False)
    """
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write flags previously read by :func:`snapshot_traceback_state`."""
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
