"""Application ports: Protocol definitions for adapter functions and the relay.

Callable Protocols define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them by
structural subtyping (PEP 544). :class:`MailRelay` is the one object-style
port: "submit a message, return its identifier or raise".

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``RelayConfig``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import OutgoingMessage, RelaySession

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import RelayConfig


class MailRelay(Protocol):
    """Submit one message to the relay and return the relay-issued identifier.

    Implementations raise whatever their transport raises; callers must not
    expect any error translation.
    """

    async def submit(self, message: OutgoingMessage, *, session: RelaySession) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadRelayConfig(Protocol):
    """Build RelayConfig from a configuration dictionary and environment mapping."""

    def __call__(self, config_dict: Mapping[str, Any], environ: Mapping[str, str] | None = ...) -> RelayConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadRelayConfig",
    "MailRelay",
]
