"""Shared utilities for email CLI commands.

Relay configuration loading, the readiness gate, attachment reading, and
the unified error handling that maps failures to exit codes.
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
import os
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import NoReturn

import aiosmtplib
import rich_click as click
from pydantic import ValidationError

from relaymail import __init__conf__
from relaymail.adapters.email.config import REQUIRED_SETTINGS, RelayConfig, check_relay_config
from relaymail.domain.errors import ConfigurationError
from relaymail.domain.models import EmailAttachment, SendResult

from ...constants import AUTH_HINTS
from ...context import CLIContext
from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def load_relay_config_or_exit(cli_ctx: CLIContext) -> RelayConfig:
    """Build the relay configuration once from the loaded layered config.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when the configuration is invalid.
    """
    try:
        return cli_ctx.relay_config()
    except ValidationError as exc:
        _handle_send_error(exc, "Invalid relay configuration", "Invalid relay configuration", ExitCode.CONFIG_ERROR)


def require_ready(relay_config: RelayConfig) -> None:
    """Run the configuration check and stop when credentials are missing.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when account or secret is missing.
    """
    status = check_relay_config(relay_config)
    if status.ready:
        return
    click.echo(f"\nMissing email configuration: {', '.join(status.missing_fields)}", err=True)
    click.echo("\nRequired settings:", err=True)
    for name in status.missing_fields:
        click.echo(f"  {REQUIRED_SETTINGS[name]}", err=True)
    click.echo(f"\nCheck with: {__init__conf__.shell_command} check-config", err=True)
    raise SystemExit(ExitCode.CONFIG_ERROR)


def read_attachments(paths: Sequence[str]) -> tuple[EmailAttachment, ...]:
    """Read attachment files into memory, guessing each media type.

    Raises:
        SystemExit: With FILE_NOT_FOUND (2) when a file is missing or
            unreadable; a directory counts as unreadable.
    """
    attachments: list[EmailAttachment] = []
    for raw in paths:
        path = Path(raw)
        try:
            content = path.read_bytes()
        except FileNotFoundError as exc:
            _handle_send_error(exc, "Attachment file not found", "Attachment file not found", ExitCode.FILE_NOT_FOUND)
        except OSError as exc:
            _handle_send_error(exc, "Cannot read attachment", "Cannot read attachment file", ExitCode.FILE_NOT_FOUND)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        attachments.append(EmailAttachment(filename=path.name, content=content, content_type=content_type))
    return tuple(attachments)


def is_auth_failure(exc: BaseException) -> bool:
    """Return True when a delivery error points at rejected credentials.

    Example:
        >>> is_auth_failure(RuntimeError("535 5.7.8 auth failed"))
        True
        >>> is_auth_failure(RuntimeError("Connection refused"))
        False
    """
    return isinstance(exc, aiosmtplib.SMTPAuthenticationError) or "auth" in str(exc).lower()


def execute_send(
    operation: Callable[[], Awaitable[SendResult]],
    *,
    message_type: str = "Email",
) -> SendResult:
    """Run an async send operation and map failures to exit codes.

    Exception priority (most specific first):

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. aiosmtplib.SMTPException / OSError -> SMTP_FAILURE (69), plus
       remediation hints when the error mentions authentication
    3. ValueError -> INVALID_ARGUMENT (22)
    4. Exception -> GENERAL_ERROR (1), re-raised when DEVELOPMENT_MODE is set

    Args:
        operation: Zero-arg callable returning the send coroutine.
        message_type: Label used in user-facing messages.

    Returns:
        The relay acknowledgment.

    Raises:
        SystemExit: On any failure.
    """
    try:
        result = asyncio.run(operation())
    except ConfigurationError as exc:
        _handle_send_error(exc, f"{message_type} configuration error", "Configuration error", ExitCode.CONFIG_ERROR)
    except (aiosmtplib.SMTPException, OSError) as exc:
        if is_auth_failure(exc):
            _echo_auth_hints()
        _handle_send_error(exc, "SMTP delivery failed", f"Failed to send {message_type.lower()}", ExitCode.SMTP_FAILURE)
    except ValueError as exc:
        _handle_send_error(
            exc,
            f"Invalid {message_type.lower()} parameters",
            f"Invalid {message_type.lower()} parameters",
            ExitCode.INVALID_ARGUMENT,
        )
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _handle_send_error(
            exc,
            f"Unexpected error sending {message_type.lower()}",
            "Unexpected error",
            ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )

    click.echo(f"\n{message_type} sent successfully!")
    click.echo(f"   Message ID: {result.message_id}")
    logger.info("%s sent via CLI", message_type, extra={"message_id": result.message_id})
    return result


def _echo_auth_hints() -> None:
    click.echo("\nAuthentication tips:", err=True)
    for number, hint in enumerate(AUTH_HINTS, start=1):
        click.echo(f"  {number}. {hint}", err=True)


def _handle_send_error(
    exc: BaseException,
    log_message: str,
    user_message: str,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    *,
    log_traceback: bool = False,
) -> NoReturn:
    """Log the failure, tell the user, and exit with ``exit_code``.

    Raises:
        SystemExit: Always.
    """
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


__all__ = [
    "execute_send",
    "is_auth_failure",
    "load_relay_config_or_exit",
    "read_attachments",
    "require_ready",
]
