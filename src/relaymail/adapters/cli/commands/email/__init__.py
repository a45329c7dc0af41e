"""Email CLI commands.

Contents:
    * :func:`.check.cli_check_config` - Report which relay credentials are present.
    * :func:`.send_email.cli_send_email` - Direct send with HTML, text, and attachments.
    * :func:`.send_simple.cli_send_simple` - Templated send to the default recipient.
    * :func:`.examples.cli_example` - Canned sending scenarios.
"""

from __future__ import annotations

from .check import cli_check_config
from .examples import cli_example
from .send_email import cli_send_email
from .send_simple import cli_send_simple

__all__ = ["cli_check_config", "cli_example", "cli_send_email", "cli_send_simple"]
