"""Exit codes for CLI error paths.

Every ``SystemExit`` raised by a relaymail command carries one of these
values. Numbers follow sysexits.h and errno conventions where they apply.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes used by the CLI.

    * 0-1: generic success / failure
    * 2: ENOENT (attachment file not found)
    * 22: EINVAL (invalid option value)
    * 69: EX_UNAVAILABLE (relay refused or unreachable)
    * 78: EX_CONFIG (credentials missing or configuration invalid)

    Example:
        >>> int(ExitCode.SMTP_FAILURE)
        69
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
