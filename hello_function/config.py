from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_ENVIRONMENT = "local"
DEFAULT_ROUTE_PREFIX = "api"
DEFAULT_LOG_LEVEL = "INFO"

ENVIRONMENT_VAR = "AZURE_FUNCTIONS_ENVIRONMENT"
ROUTE_PREFIX_VAR = "HELLO_ROUTE_PREFIX"
LOG_LEVEL_VAR = "LOG_LEVEL"

logger = logging.getLogger(__name__)


def default_runtime_version() -> str:
    return f"Python {platform.python_version()}"


def resolve_log_level(value: Optional[str]) -> str:
    """Return a level name ``logging`` knows, or the default for unknown names."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown {LOG_LEVEL_VAR} {value!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class FunctionConfig:
    """Settings resolved once at startup and handed to the function."""

    environment: str = DEFAULT_ENVIRONMENT
    runtime_version: str = field(default_factory=default_runtime_version)
    route_prefix: str = DEFAULT_ROUTE_PREFIX
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FunctionConfig":
        """Build a config from environment variables; empty values use the defaults."""
        env = os.environ if environ is None else environ
        return cls(
            environment=env.get(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT,
            route_prefix=env.get(ROUTE_PREFIX_VAR) or DEFAULT_ROUTE_PREFIX,
            log_level=resolve_log_level(env.get(LOG_LEVEL_VAR)),
        )
