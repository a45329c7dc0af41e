"""Installed ``relaymail`` command.

Binds the production service graph (SMTP relay, layered configuration,
lib_log_rich logging) to the CLI and hands back its exit status.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
