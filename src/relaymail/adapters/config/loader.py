"""Layered configuration for relaymail.

``get_config`` reads the bundled ``defaultconfig.toml`` and every layer
lib_layered_config knows about (app, host, user, ``.env``, environment).
Results are cached per ``(profile, start_dir)`` pair; tests call
``get_config.cache_clear()`` between cases.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from relaymail import __init__conf__

_DEFAULTS_FILE = "defaultconfig.toml"


def get_default_config_path() -> Path:
    """Path of the bundled defaults shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(_DEFAULTS_FILE)


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Later layers win: defaults -> app -> host -> user -> dotenv -> env.
    Environment keys use lib_layered_config's naming, so ``relay.account``
    is ``RELAYMAIL___RELAY__ACCOUNT``.

    Args:
        profile: Adds a ``profile/<name>/`` directory to every file layer.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: ``profile`` is empty, too long, or tries to leave
            the configuration directory (``../etc``).

    Example:
        >>> get_config().get("relay.provider", default="gmail")
        'gmail'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = ["get_config", "get_default_config_path"]
