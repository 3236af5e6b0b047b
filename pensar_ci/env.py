"""Read Pensar configuration from environment variables.

Every reader takes an optional *environ* mapping so callers (and tests) can
pass an explicit environment; ``None`` reads ``os.environ``.
"""

import os
from collections.abc import Iterable, Mapping

from pensar_ci.constants import (
    API_KEY_ENV,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SCAN_LEVEL,
    ENVIRONMENT_ENV,
    POLL_INTERVAL_ENV,
    PROJECT_ID_ENV,
    REPO_ID_ENV,
    SCAN_LEVEL_ENV,
    SEVERITY_THRESHOLD_ENV,
    WAIT_ENV,
)
from pensar_ci.errors import ConfigurationError
from pensar_ci.logger import log_warn
from pensar_ci.severity import parse_severity
from pensar_ci.types import Environment, ScanLevel, Severity

ENVIRONMENTS: tuple[Environment, ...] = ("dev", "staging", "production")
SCAN_LEVELS: tuple[ScanLevel, ...] = ("priority", "full")


def get_env_value(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return a stripped, non-empty environment value or ``None``."""
    value = (os.environ if environ is None else environ).get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _is_number(value: str) -> bool:
    # str.isdigit also accepts non-ASCII digits that int() rejects.
    return value.isascii() and value.isdigit()


def get_api_key(environ: Mapping[str, str] | None = None) -> str:
    api_key = get_env_value(API_KEY_ENV, environ)
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} not configured")
    return api_key


def get_project_id(environ: Mapping[str, str] | None = None) -> str | None:
    return get_env_value(PROJECT_ID_ENV, environ)


def get_repo_id(
    environ: Mapping[str, str] | None = None,
    names: Iterable[str] = (REPO_ID_ENV,),
) -> int | None:
    """Return the first numeric repository id found among *names*.

    Non-numeric values are ignored so the caller can fall back to a project id.
    """
    for name in names:
        value = get_env_value(name, environ)
        if value is not None and _is_number(value):
            return int(value)
    return None


def get_target_environment(environ: Mapping[str, str] | None = None) -> Environment | None:
    value = get_env_value(ENVIRONMENT_ENV, environ)
    if value is None:
        return None
    normalized = value.lower()
    for env in ENVIRONMENTS:
        if env == normalized:
            return env
    log_warn(
        f"Unknown {ENVIRONMENT_ENV} '{value}'. "
        f"Valid values: {', '.join(ENVIRONMENTS)}. Using production."
    )
    return None


def get_severity_threshold(environ: Mapping[str, str] | None = None) -> Severity:
    return parse_severity(get_env_value(SEVERITY_THRESHOLD_ENV, environ))


def get_scan_level(environ: Mapping[str, str] | None = None) -> ScanLevel:
    value = get_env_value(SCAN_LEVEL_ENV, environ)
    if value is None:
        return DEFAULT_SCAN_LEVEL
    normalized = value.lower()
    for level in SCAN_LEVELS:
        if level == normalized:
            return level
    log_warn(
        f"Unknown {SCAN_LEVEL_ENV} '{value}'. "
        f"Valid values: {', '.join(SCAN_LEVELS)}. Using '{DEFAULT_SCAN_LEVEL}'."
    )
    return DEFAULT_SCAN_LEVEL


def get_wait(environ: Mapping[str, str] | None = None) -> bool:
    value = get_env_value(WAIT_ENV, environ)
    return value is None or value.lower() != "false"


def get_poll_interval_ms(environ: Mapping[str, str] | None = None) -> int:
    value = get_env_value(POLL_INTERVAL_ENV, environ)
    if value is None:
        return DEFAULT_POLL_INTERVAL_MS
    if _is_number(value) and int(value) > 0:
        return int(value)
    log_warn(
        f"Invalid {POLL_INTERVAL_ENV} '{value}'. Using {DEFAULT_POLL_INTERVAL_MS} ms."
    )
    return DEFAULT_POLL_INTERVAL_MS
