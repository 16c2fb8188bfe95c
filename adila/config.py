"""Environment-driven settings.

Entry points call ``dotenv.load_dotenv()`` before :func:`load_config` so
values from a local ``.env`` file are picked up as well.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_GETPROP_TIMEOUT = 2.0
DEFAULT_TELEMETRY_TIMEOUT = 10.0


@dataclass
class AdilaConfig:
    """Runtime configuration loaded from ``ADILA_*`` environment variables."""

    device: str | None = None
    model: str | None = None
    database_path: Path | None = None
    getprop_command: str = "getprop"
    getprop_timeout: float = DEFAULT_GETPROP_TIMEOUT
    log_level: str = "INFO"
    telemetry_url: str | None = None
    telemetry_timeout: float = DEFAULT_TELEMETRY_TIMEOUT


def _optional(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = _optional(environ, name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number; using %.1f", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive; using %.1f", name, raw, default)
        return default
    return value


def load_config(environ: Mapping[str, str] | None = None) -> AdilaConfig:
    env = os.environ if environ is None else environ
    database_path = _optional(env, "ADILA_DATABASE_PATH")
    return AdilaConfig(
        device=_optional(env, "ADILA_DEVICE"),
        model=_optional(env, "ADILA_MODEL"),
        database_path=Path(database_path) if database_path else None,
        getprop_command=_optional(env, "ADILA_GETPROP") or "getprop",
        getprop_timeout=_positive_float(
            env, "ADILA_GETPROP_TIMEOUT", DEFAULT_GETPROP_TIMEOUT
        ),
        log_level=(_optional(env, "ADILA_LOG_LEVEL") or "INFO").upper(),
        telemetry_url=_optional(env, "ADILA_TELEMETRY_URL"),
        telemetry_timeout=_positive_float(
            env, "ADILA_TELEMETRY_TIMEOUT", DEFAULT_TELEMETRY_TIMEOUT
        ),
    )


__all__ = ["AdilaConfig", "load_config"]
