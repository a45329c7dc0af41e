"""CLI relay stories: check-config, send-email, send-simple, example scenarios."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiosmtplib
import pytest
from click.testing import CliRunner, Result

from conftest import READY_RELAY
from relaymail.adapters import cli as cli_mod

if TYPE_CHECKING:
    from conftest import RelayCliContext

RelayContextFactory = Callable[[dict[str, Any]], "RelayCliContext"]

# ======================== check-config ========================


@pytest.mark.os_agnostic
def test_check_config_passes_with_account_and_secret(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["check-config"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Relay configured correctly." in result.output
    assert "smtp.gmail.com" in result.output


@pytest.mark.os_agnostic
def test_check_config_fails_with_config_error_when_empty(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["check-config"], obj=ctx.factory)

    assert result.exit_code == 78
    assert "MISSING" in result.output
    assert "GMAIL_USER" in result.output
    assert "GMAIL_APP_PASSWORD" in result.output


@pytest.mark.os_agnostic
def test_check_config_names_only_the_missing_secret(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({"account": "me@gmail.com"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["check-config"], obj=ctx.factory)

    assert result.exit_code == 78
    assert "GMAIL_APP_PASSWORD" in result.output
    assert "GMAIL_USER (relay.account)" not in result.output


@pytest.mark.os_agnostic
def test_check_config_never_prints_the_secret(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["check-config"], obj=ctx.factory)

    assert READY_RELAY["secret"] not in result.output


@pytest.mark.os_agnostic
def test_invalid_relay_settings_exit_with_config_error(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({**READY_RELAY, "timeout": -1})

    result: Result = cli_runner.invoke(cli_mod.cli, ["check-config"], obj=ctx.factory)

    assert result.exit_code == 78
    assert "Invalid relay configuration" in result.output


# ======================== send-email ========================


def _send_email_args(*extra: str) -> list[str]:
    return ["send-email", "--to", "ops@example.com", "--subject", "Deploy finished", "--text", "All green", *extra]


@pytest.mark.os_agnostic
def test_send_email_without_credentials_exits_with_config_error(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args(), obj=ctx.factory)

    assert result.exit_code == 78
    assert "Missing email configuration: account, secret" in result.output
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_send_email_submits_once_and_reports_the_identifier(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        _send_email_args("--html", "<p>All green</p>", "--reply-to", "noreply@example.com"),
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert "Email sent successfully!" in result.output
    assert "Message ID: <1@relay.test>" in result.output
    assert len(ctx.spy.submissions) == 1
    sent = ctx.spy.messages[0]
    assert (sent.to, sent.subject, sent.text, sent.html) == (
        "ops@example.com",
        "Deploy finished",
        "All green",
        "<p>All green</p>",
    )
    assert sent.reply_to == "noreply@example.com"
    assert sent.from_address == "Email Service <relay.owner@gmail.com>"


@pytest.mark.os_agnostic
def test_send_email_honours_the_sender_override(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args("--from", "alerts@example.com"), obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.messages[0].from_address == "alerts@example.com"


@pytest.mark.os_agnostic
def test_send_email_reads_attachments_from_disk(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
    tmp_path: Path,
) -> None:
    report = tmp_path / "report.txt"
    report.write_bytes(b"quarterly numbers")
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args("--attachment", str(report)), obj=ctx.factory)

    assert result.exit_code == 0
    (attachment,) = ctx.spy.messages[0].attachments
    assert attachment.filename == "report.txt"
    assert attachment.content == b"quarterly numbers"
    assert attachment.content_type == "text/plain"


@pytest.mark.os_agnostic
def test_send_email_with_unknown_extension_uses_octet_stream(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
    tmp_path: Path,
) -> None:
    blob = tmp_path / "payload.zzunknown"
    blob.write_bytes(b"\x00\x01")
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args("--attachment", str(blob)), obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.messages[0].attachments[0].content_type == "application/octet-stream"


@pytest.mark.os_agnostic
def test_send_email_with_missing_attachment_exits_with_file_not_found(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
    tmp_path: Path,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        _send_email_args("--attachment", str(tmp_path / "missing.pdf")),
        obj=ctx.factory,
    )

    assert result.exit_code == 2
    assert "Attachment file not found" in result.output
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_send_email_with_directory_as_attachment_exits_with_file_not_found(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
    tmp_path: Path,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args("--attachment", str(tmp_path)), obj=ctx.factory)

    assert result.exit_code == 2
    assert "Cannot read attachment file" in result.output
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_send_email_auth_failure_exits_with_smtp_failure_and_hints(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)
    ctx.spy.raise_exception = aiosmtplib.SMTPAuthenticationError(535, "5.7.8 Username and Password not accepted")

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args(), obj=ctx.factory)

    assert result.exit_code == 69
    assert "Authentication tips:" in result.output
    assert "https://myaccount.google.com/apppasswords" in result.output


@pytest.mark.os_agnostic
def test_send_email_connection_failure_exits_without_auth_hints(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)
    ctx.spy.raise_exception = ConnectionRefusedError("Connection refused")

    result: Result = cli_runner.invoke(cli_mod.cli, _send_email_args(), obj=ctx.factory)

    assert result.exit_code == 69
    assert "Failed to send email" in result.output
    assert "Authentication tips:" not in result.output


@pytest.mark.os_agnostic
def test_send_email_requires_subject(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-email", "--to", "ops@example.com"], obj=ctx.factory)

    assert result.exit_code == 2
    assert ctx.spy.submissions == []


# ======================== send-simple ========================


def _send_simple_args(*extra: str) -> list[str]:
    return [
        "send-simple",
        "--name",
        "Ada Lovelace",
        "--email",
        "ada@example.com",
        "--subject",
        "Engines",
        "--message",
        "Hello there",
        *extra,
    ]


@pytest.mark.os_agnostic
def test_send_simple_goes_to_the_account_by_default(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, _send_simple_args(), obj=ctx.factory)

    assert result.exit_code == 0
    sent = ctx.spy.messages[0]
    assert sent.to == "relay.owner@gmail.com"
    assert sent.reply_to == "ada@example.com"
    assert "Ada Lovelace" in sent.text
    assert "Hello there" in sent.html


@pytest.mark.os_agnostic
def test_send_simple_prefers_the_default_recipient(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({**READY_RELAY, "default_recipient": "inbox@example.com"})

    result: Result = cli_runner.invoke(cli_mod.cli, _send_simple_args(), obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.messages[0].to == "inbox@example.com"


@pytest.mark.os_agnostic
def test_send_simple_without_destination_exits_with_config_error(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({**READY_RELAY, "fallback_to_account": False})

    result: Result = cli_runner.invoke(cli_mod.cli, _send_simple_args(), obj=ctx.factory)

    assert result.exit_code == 78
    assert "No destination configured" in result.output
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_send_simple_counts_attachments_in_the_body(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
    tmp_path: Path,
) -> None:
    first = tmp_path / "a.txt"
    second = tmp_path / "b.json"
    first.write_text("a", encoding="utf-8")
    second.write_text("{}", encoding="utf-8")
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        _send_simple_args("--attachment", str(first), "--attachment", str(second)),
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert "Attachments: 2 file(s)" in ctx.spy.messages[0].text


# ======================== example ========================


@pytest.mark.os_agnostic
def test_example_without_credentials_exits_with_config_error(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "test"], obj=ctx.factory)

    assert result.exit_code == 78
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_example_defaults_to_the_test_scenario(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["example"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.messages[0].subject == "Test Email - Gmail SMTP Service"


@pytest.mark.os_agnostic
def test_example_simple_sends_the_contact_form_message(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "simple"], obj=ctx.factory)

    assert result.exit_code == 0
    sent = ctx.spy.messages[0]
    assert sent.subject == "Contact Form Submission"
    assert sent.reply_to == "john.doe@example.com"
    assert "John Doe" in sent.html


@pytest.mark.os_agnostic
def test_example_html_sends_hand_written_markup_to_the_account(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "html"], obj=ctx.factory)

    assert result.exit_code == 0
    sent = ctx.spy.messages[0]
    assert sent.to == "relay.owner@gmail.com"
    assert sent.reply_to == "noreply@example.com"
    assert "<strong>formatting</strong>" in sent.html


@pytest.mark.os_agnostic
def test_example_attachment_sends_two_in_memory_files(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "attachment"], obj=ctx.factory)

    assert result.exit_code == 0
    sent = ctx.spy.messages[0]
    assert [(a.filename, a.content_type) for a in sent.attachments] == [
        ("example.txt", "text/plain"),
        ("data.json", "application/json"),
    ]
    assert "Attachments: 2 file(s)" in sent.text


@pytest.mark.os_agnostic
def test_example_multiple_uses_the_recipient_list(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context({**READY_RELAY, "default_recipient": "a@example.com, b@example.com"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "multiple"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.messages[0].to == "a@example.com, b@example.com"
    assert ctx.spy.messages[0].subject == "Announcement"


@pytest.mark.os_agnostic
def test_example_unknown_scenario_lists_the_available_ones(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "carrier-pigeon"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Available examples:" in result.output
    for scenario in ("test", "simple", "html", "attachment", "multiple"):
        assert f"relaymail example {scenario}" in result.output
    assert ctx.spy.submissions == []


@pytest.mark.os_agnostic
def test_example_relay_failure_mentioning_auth_prints_hints(
    cli_runner: CliRunner,
    relay_cli_context: RelayContextFactory,
) -> None:
    ctx = relay_cli_context(READY_RELAY)
    ctx.spy.raise_exception = aiosmtplib.SMTPServerDisconnected("auth handshake aborted")

    result: Result = cli_runner.invoke(cli_mod.cli, ["example", "simple"], obj=ctx.factory)

    assert result.exit_code == 69
    assert "Enable 2-factor authentication" in result.output


# ======================== config ========================


@pytest.mark.os_agnostic
def test_config_command_redacts_the_secret(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"relay": dict(READY_RELAY)})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "relay"], obj=factory)

    assert result.exit_code == 0
    assert READY_RELAY["secret"] not in result.output


@pytest.mark.os_agnostic
def test_config_command_json_format(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"relay": {"provider": "gmail"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert '"provider": "gmail"' in result.output


@pytest.mark.os_agnostic
def test_config_command_unknown_section_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"relay": {"provider": "gmail"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nope"], obj=factory)

    assert result.exit_code == 22
