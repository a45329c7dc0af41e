"""lib_log_rich runtime bootstrap.

The root CLI group calls :func:`init_logging` with the loaded layered
configuration; the ``[lib_log_rich]`` section becomes the runtime's
``RuntimeConfig`` and every ``relaymail.*`` standard logger is bridged
into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from relaymail import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are named; anything else (console
    level, backends, queue settings) is handed to ``RuntimeConfig`` as is.

    Example:
        >>> LoggingConfigModel(service="relaymail-worker").service
        'relaymail-worker'
        >>> LoggingConfigModel().environment
        'prod'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: Any = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    ``LOG_*`` variables from a ``.env`` file are honoured.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
