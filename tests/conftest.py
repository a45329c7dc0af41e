"""Shared pytest fixtures for relay, CLI, and module-entry tests.

All shared fixtures live here; tests receive them implicitly through
pytest's conftest discovery.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from datetime import datetime
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from relaymail.adapters.email.config import RelayConfig
from relaymail.adapters.memory.email import RelaySpy

if TYPE_CHECKING:
    from relaymail.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Fixed timestamp so rendered bodies are deterministic.
FIXED_SENT_AT = datetime(2024, 5, 17, 9, 30, 0)

READY_RELAY: dict[str, Any] = {
    "account": "relay.owner@gmail.com",
    "secret": "abcd efgh ijkl mnop",
    "sender_name": "Email Service",
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test."""
    from relaymail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def relay_spy() -> RelaySpy:
    """Provide a fresh relay spy per test."""
    return RelaySpy()


@pytest.fixture
def ready_config() -> RelayConfig:
    """Relay configuration with account and secret, no default recipient."""
    return RelayConfig(**READY_RELAY)


@pytest.fixture
def fixed_sent_at() -> datetime:
    """Deterministic send timestamp."""
    return FIXED_SENT_AT


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from relaymail.composition import build_production

    return build_production


@dataclass
class RelayCliContext:
    """Container for relay CLI test setup.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        spy: RelaySpy capturing every submission.
    """

    factory: Callable[[], Any]
    spy: RelaySpy


@pytest.fixture
def relay_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], RelayCliContext]:
    """Create relay CLI test context with an injected config and a relay spy.

    Returns a function that takes the ``relay`` section contents and
    returns the wired factory plus the spy. The process environment is
    ignored when building the relay configuration.

    Example:
        def test_send(cli_runner, relay_cli_context) -> None:
            ctx = relay_cli_context({"account": "me@gmail.com", "secret": "x"})
            result = cli_runner.invoke(cli, ["example", "test"], obj=ctx.factory)
            assert len(ctx.spy.submissions) == 1
    """
    from relaymail.adapters.memory import load_relay_config_in_memory
    from relaymail.composition import AppServices, build_production

    def _create(relay_data: dict[str, Any]) -> RelayCliContext:
        spy = RelaySpy()
        config = Config({"relay": relay_data}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_relay_config=load_relay_config_in_memory,
            init_logging=prod.init_logging,
            relay=spy,
        )
        return RelayCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory serving the given config data."""
    from relaymail.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_relay_config=prod.load_relay_config,
            init_logging=prod.init_logging,
            relay=RelaySpy(),
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was asked for."""
    from relaymail.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            load_relay_config=prod.load_relay_config,
            init_logging=prod.init_logging,
            relay=RelaySpy(),
        )
        return lambda: test_services

    return _inject


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def log_records() -> Iterator[list[logging.LogRecord]]:
    """Capture every record emitted below the ``relaymail`` logger.

    Attaches directly to the package logger so assertions do not depend
    on how lib_log_rich has configured the root logger.
    """
    package_logger = logging.getLogger("relaymail")
    handler = _RecordingHandler()
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
