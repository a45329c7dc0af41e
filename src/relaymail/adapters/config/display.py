"""Display configuration through lib_layered_config with secrets redacted.

Wraps lib_layered_config's Rich-styled ``display_config``: pending log
output is flushed first, and ``relay.secret`` is replaced by a marker so
the merged configuration can be shown or pasted safely.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from relaymail.domain.enums import OutputFormat

REDACTED: Final[str] = "[REDACTED]"


def redact_secrets(config: Config) -> Config:
    """Return ``config`` with a configured ``relay.secret`` masked.

    Example:
        >>> cfg = Config({"relay": {"secret": "pw"}}, {})
        >>> redact_secrets(cfg).get("relay.secret")
        '[REDACTED]'
        >>> empty = Config({"relay": {"secret": ""}}, {})
        >>> redact_secrets(empty) is empty
        True
    """
    relay: Any = config.get("relay", default={})
    if isinstance(relay, Mapping) and relay.get("secret"):
        return config.with_overrides({"relay": {"secret": REDACTED}})
    return config


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: ``HUMAN`` for TOML-like display or ``JSON``.
        section: Optional section name to display only that section.
        console: Optional Rich Console for output, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(redact_secrets(config), output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["REDACTED", "display_config", "redact_secrets"]
