"""Type-safe domain enums for credential status, output formats, and scenarios."""

from __future__ import annotations

from enum import Enum


class FieldState(str, Enum):
    """Presence of a single configuration field.

    Inherits from str so status records serialise as plain ``"OK"`` /
    ``"MISSING"`` strings.

    Example:
        >>> FieldState.OK.value
        'OK'
        >>> FieldState.MISSING == "MISSING"
        True
    """

    OK = "OK"
    MISSING = "MISSING"

    @classmethod
    def of(cls, value: str | None) -> FieldState:
        """Return ``OK`` for a non-blank value, ``MISSING`` otherwise.

        Example:
            >>> FieldState.of("user@gmail.com")
            <FieldState.OK: 'OK'>
            >>> FieldState.of("   ")
            <FieldState.MISSING: 'MISSING'>
        """
        return cls.OK if value is not None and value.strip() else cls.MISSING


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Scenario(str, Enum):
    """Canned sending scenarios offered by the ``example`` command.

    Attributes:
        TEST: Templated test email with fixed fields.
        SIMPLE: Templated contact-form style email.
        HTML: Direct send of a hand-written HTML body.
        ATTACHMENT: Templated email carrying two in-memory attachments.
        MULTIPLE: Direct send to a (possibly comma-delimited) recipient list.

    Example:
        >>> Scenario("attachment") is Scenario.ATTACHMENT
        True
    """

    TEST = "test"
    SIMPLE = "simple"
    HTML = "html"
    ATTACHMENT = "attachment"
    MULTIPLE = "multiple"


__all__ = [
    "FieldState",
    "OutputFormat",
    "Scenario",
]
