"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a send cannot even be attempted because the configuration
    leaves a required value unresolved (for example no destination for a
    templated send). Relay-level failures are never wrapped in this type;
    they reach the caller as raised by the transport library.

    Example:
        >>> from relaymail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No destination configured")
        >>> str(err)
        'No destination configured'
    """


__all__ = ["ConfigurationError"]
