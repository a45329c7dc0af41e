"""Relay configuration model, loader, and the advisory configuration check.

Provides the RelayConfig Pydantic model for validated, immutable relay
settings, the loader that builds it once from layered configuration plus
the conventional environment variables, and :func:`check_relay_config`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, Final, cast

from btx_lib_mail import validate_email_address
from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from relaymail.domain.enums import FieldState
from relaymail.domain.models import RELAY_PROFILES, CredentialStatus, RelayProfile

logger = logging.getLogger(__name__)

#: Conventional environment variables and the RelayConfig field each one sets.
ENVIRONMENT_ALIASES: Final[dict[str, str]] = {
    "GMAIL_USER": "account",
    "GMAIL_APP_PASSWORD": "secret",
    "DEFAULT_RECIPIENT": "default_recipient",
}

#: Human-readable description of each required setting, shown when missing.
REQUIRED_SETTINGS: Final[dict[str, str]] = {
    "account": "GMAIL_USER (relay.account) - your Gmail address",
    "secret": "GMAIL_APP_PASSWORD (relay.secret) - your app-specific password",
}


class RelayConfig(BaseModel):
    """Validated, immutable relay configuration.

    Example:
        >>> config = RelayConfig(account="me@gmail.com", secret="app-password")
        >>> config.profile.hostname
        'smtp.gmail.com'
        >>> config.fallback_to_account
        True
    """

    model_config = ConfigDict(frozen=True)

    provider: str = "gmail"
    account: str | None = None
    secret: str | None = None
    default_recipient: str | None = None
    sender_name: str = "Email Service"
    fallback_to_account: bool = True
    timeout: float = 30.0

    @field_validator("account", "secret", "default_recipient", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Coerce empty or whitespace-only strings to None.

        Treats empty strings from config files and ``.env`` placeholders as
        "not configured", which is what the configuration check reports.
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> RelayConfig:
        """Validate configuration values.

        Raises:
            ValueError: When configuration values are invalid.

        Example:
            >>> RelayConfig(timeout=-5.0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...

            >>> RelayConfig(provider="carrier-pigeon")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.provider not in RELAY_PROFILES:
            known = ", ".join(sorted(RELAY_PROFILES))
            raise ValueError(f"unknown relay provider {self.provider!r} (known: {known})")

        if self.account is not None:
            validate_email_address(self.account)

        if self.default_recipient is not None:
            for address in self.default_recipient.split(","):
                validate_email_address(address.strip())

        return self

    @property
    def profile(self) -> RelayProfile:
        """Relay profile selected by ``provider``."""
        return RELAY_PROFILES[self.provider]

    def __repr__(self) -> str:
        """Return string representation with the secret redacted.

        Example:
            >>> config = RelayConfig(account="me@gmail.com", secret="secret123")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "secret" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"RelayConfig({', '.join(fields)})"

    __str__ = __repr__


def _conventional_environment() -> dict[str, str]:
    """Merge `.env` values found from the working directory with ``os.environ``.

    The process environment wins over the file.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return dict(os.environ)
    from_file = {key: value for key, value in dotenv_values(dotenv_path).items() if value is not None}
    return {**from_file, **os.environ}


def load_relay_config(
    config_dict: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> RelayConfig:
    """Build RelayConfig from a configuration dictionary and the environment.

    Bridges lib_layered_config's dictionary output with the typed model.
    The conventional variables in :data:`ENVIRONMENT_ALIASES` take
    precedence over the ``[relay]`` section when set to a non-blank value.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
            Settings are read from its ``relay`` section.
        environ: Environment mapping. Defaults to ``os.environ`` merged with
            a `.env` file found from the working directory; tests pass a
            plain dict.

    Returns:
        Validated relay configuration.

    Example:
        >>> cfg = load_relay_config(
        ...     {"relay": {"account": "me@gmail.com"}},
        ...     environ={"GMAIL_APP_PASSWORD": "abcd efgh"},
        ... )
        >>> cfg.account, cfg.secret is not None
        ('me@gmail.com', True)
    """
    relay_section: Any = config_dict.get("relay", {})

    if not isinstance(relay_section, Mapping):
        return RelayConfig.model_validate(relay_section)

    relay_raw: dict[str, Any] = dict(cast(Mapping[str, Any], relay_section))

    env = _conventional_environment() if environ is None else environ
    for variable, field_name in ENVIRONMENT_ALIASES.items():
        value = env.get(variable)
        if value is not None and value.strip():
            relay_raw[field_name] = value

    return RelayConfig.model_validate(relay_raw)


def check_relay_config(config: RelayConfig) -> CredentialStatus:
    """Report which credentials are present without contacting the relay.

    Advisory only: never raises. Logs a warning naming every missing
    setting, or an info line when the relay is ready.

    Args:
        config: Relay configuration to inspect.

    Returns:
        Status record; ``ready`` is true only when account and secret are
        both present.

    Example:
        >>> check_relay_config(RelayConfig(account="me@gmail.com", secret="x")).ready
        True
        >>> check_relay_config(RelayConfig()).missing_fields
        ('account', 'secret')
    """
    destination = config.default_recipient or (config.account if config.fallback_to_account else None)
    status = CredentialStatus(
        account=FieldState.of(config.account),
        secret=FieldState.of(config.secret),
        recipient=FieldState.of(destination),
    )

    if status.ready:
        logger.info("Relay configured correctly", extra={"provider": config.provider})
    else:
        required = "; ".join(REQUIRED_SETTINGS[name] for name in status.missing_fields)
        logger.warning(
            "Missing relay configuration: %s. Required: %s",
            ", ".join(status.missing_fields),
            required,
            extra={"status": status.as_dict()},
        )

    return status


__all__ = [
    "ENVIRONMENT_ALIASES",
    "REQUIRED_SETTINGS",
    "RelayConfig",
    "check_relay_config",
    "load_relay_config",
]
