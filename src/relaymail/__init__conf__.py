"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the test suite
checks the drift-prone ones.
"""

from __future__ import annotations

name = "relaymail"
title = "Send templated transactional emails through an SMTP relay"
version = "1.0.0"
homepage = "https://relaymail.example.org"
author = "relaymail contributors"
author_email = "maintainers@example.org"
shell_command = "relaymail"

#: Identifiers handed to lib_layered_config for platform config paths.
LAYEREDCONF_VENDOR = "relaymail"
LAYEREDCONF_APP = "relaymail"
LAYEREDCONF_SLUG = "relaymail"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for relaymail:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = ["print_info"]
